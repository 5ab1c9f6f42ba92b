"""Run configuration shared by every resolution task.

Settings are built once by the CLI and passed by reference; nothing here is
mutated after construction.
"""

from dataclasses import dataclass, field
from typing import Optional

from depbump.models import UpdateTarget

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


@dataclass(frozen=True)
class RegistryOptions:
    """Transport settings for the registry HTTP client.

    Attributes:
        max_sockets: Maximum pooled connections per registry host.
        timeout: Total seconds allowed for one registry request.
        strict_ssl: Verify TLS certificates.
    """

    max_sockets: int = 12
    timeout: float = 30.0
    strict_ssl: bool = True


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for one run.

    Attributes:
        registry_url: Base URL of the npm-compatible registry.
        target: Active update target.
        options: Registry transport options.
        concurrency: Optional cap on in-flight registry requests. None means
            every dependency is fetched at once.
    """

    registry_url: str = DEFAULT_REGISTRY_URL
    target: UpdateTarget = UpdateTarget.LATEST
    options: RegistryOptions = field(default_factory=RegistryOptions)
    concurrency: Optional[int] = None
