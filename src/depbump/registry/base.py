"""Base interface for registry clients.

Clients fetch dist-tag metadata for one package per call. They must be safe
to call concurrently for different package names.
"""

from abc import ABC, abstractmethod

from depbump.models import DistTags


class BaseRegistryClient(ABC):
    """Abstract base class for registry clients."""

    @abstractmethod
    async def fetch_dist_tags(self, name: str) -> DistTags:
        """Fetch the dist-tags of a package.

        Args:
            name: Package name (e.g., "react" or "@types/node").

        Returns:
            DistTags for the package.

        Raises:
            RegistryError: If the metadata cannot be fetched or decoded.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the client name for logging/debugging."""
        ...

    async def close(self) -> None:
        """Release any resources held by the client."""
