"""Core data models for depbump.

This module defines the value objects passed between the manifest scanners,
the registry client, the update policy and the reporters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


class UpdateTarget(str, Enum):
    """Policy deciding which registry version counts as an update.

    Exactly one target is active per run.
    """

    LATEST = "latest"
    SEMVER = "semver"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE = "pre"


@dataclass(frozen=True)
class DependencyRecord:
    """A direct dependency as declared in the manifest.

    Attributes:
        name: Package name (e.g., "react"). Unique within one run.
        constraint: Raw version constraint as written (e.g., "^18.2.0").
    """

    name: str
    constraint: str


@dataclass(frozen=True)
class UpdateCandidate:
    """A dependency for which a newer version was found.

    Attributes:
        name: Package name.
        current_version: Declared constraint string from the manifest.
        candidate_version: Registry version selected by the update target.
    """

    name: str
    current_version: str
    candidate_version: str

    @property
    def install_spec(self) -> str:
        """Return the ``name@version`` argument passed to the package manager."""
        return f"{self.name}@{self.candidate_version}"


@dataclass(frozen=True)
class DependencySelection:
    """Which dependency classes of a manifest to check.

    When no flag is set every class is included.

    Attributes:
        production: Include "dependencies".
        development: Include "devDependencies".
        optional: Include "optionalDependencies".
    """

    production: bool = False
    development: bool = False
    optional: bool = False

    @property
    def includes_production(self) -> bool:
        return self.production or (not self.development and not self.optional)

    @property
    def includes_development(self) -> bool:
        return self.development or (not self.production and not self.optional)

    @property
    def includes_optional(self) -> bool:
        return self.optional or (not self.production and not self.development)


# Prerelease channels in rank order, used when no single channel is requested.
PRERELEASE_CHANNELS = ("next", "canary", "rc", "beta", "alpha")


@dataclass(frozen=True)
class DistTags:
    """Dist-tag metadata returned by the registry for one package.

    Attributes:
        latest: Version tagged "latest". Always present.
        next: Optional "next" channel version.
        canary: Optional "canary" channel version.
        rc: Optional "rc" channel version.
        beta: Optional "beta" channel version.
        alpha: Optional "alpha" channel version.
    """

    latest: str
    next: Optional[str] = None
    canary: Optional[str] = None
    rc: Optional[str] = None
    beta: Optional[str] = None
    alpha: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "DistTags":
        """Build DistTags from a decoded registry response.

        Args:
            payload: Decoded JSON body.

        Returns:
            The parsed DistTags.

        Raises:
            ValueError: If the payload is not an object with a string "latest".
        """
        if not isinstance(payload, dict):
            raise ValueError("dist-tags payload is not a JSON object")

        latest = payload.get("latest")
        if not isinstance(latest, str):
            raise ValueError("dist-tags payload has no 'latest' version")

        channels = {
            channel: payload[channel]
            for channel in PRERELEASE_CHANNELS
            if isinstance(payload.get(channel), str)
        }
        return cls(latest=latest, **channels)

    def channels(self) -> Iterator[tuple[str, str]]:
        """Yield populated prerelease channels in rank order."""
        for channel in PRERELEASE_CHANNELS:
            value = getattr(self, channel)
            if value:
                yield channel, value
