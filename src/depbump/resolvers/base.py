"""Base interface for update resolvers.

Resolvers turn declared dependencies into update candidates by combining
registry metadata with the active update policy.
"""

from abc import ABC, abstractmethod
from typing import Optional

from depbump.models import DependencyRecord, UpdateCandidate


class BaseUpdateResolver(ABC):
    """Abstract base class for update resolvers.

    Implementations must isolate failures per dependency: an error while
    resolving one record yields no candidate for that record and nothing else.
    """

    @abstractmethod
    async def resolve(self, record: DependencyRecord) -> Optional[UpdateCandidate]:
        """Resolve a single dependency.

        Args:
            record: Dependency to check.

        Returns:
            UpdateCandidate if an update is available, None otherwise
            (including when resolution failed).
        """
        ...

    @abstractmethod
    async def resolve_batch(
        self, records: list[DependencyRecord]
    ) -> list[UpdateCandidate]:
        """Resolve multiple dependencies concurrently.

        Args:
            records: Dependencies to check.

        Returns:
            Update candidates sorted by package name.
        """
        ...
