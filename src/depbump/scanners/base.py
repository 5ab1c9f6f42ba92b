"""Base interface for dependency scanners.

Scanners produce the merged set of direct dependencies to check, either
from a package.json manifest or from the globally installed packages.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from depbump.models import DependencyRecord


class BaseScanner(ABC):
    """Abstract base class for dependency scanners.

    Attributes:
        source_path: Optional path to the file being scanned.
    """

    def __init__(self, source_path: Optional[Path] = None) -> None:
        """Initialize the scanner.

        Args:
            source_path: Optional path to the manifest file.
        """
        self.source_path = source_path

    @abstractmethod
    def scan(self) -> list[DependencyRecord]:
        """Scan the source and return one record per dependency name.

        Returns:
            List of DependencyRecord objects.

        Raises:
            FileNotFoundError: If the source does not exist.
            ValueError: If the source format is invalid.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source."""
        ...

    @property
    def package_manager(self) -> Optional[str]:
        """Return the package manager declared by the source, if any."""
        return None
