"""Registry clients for fetching package dist-tags.

This module provides the npm registry client and the errors it raises.
"""

from depbump.registry.base import BaseRegistryClient
from depbump.registry.errors import (
    PackageNotFoundError,
    ParseError,
    RegistryError,
    RequestError,
)
from depbump.registry.npm import NpmRegistryClient

__all__ = [
    "BaseRegistryClient",
    "NpmRegistryClient",
    "PackageNotFoundError",
    "ParseError",
    "RegistryError",
    "RequestError",
]
