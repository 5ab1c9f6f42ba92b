"""Scanner for package.json manifests.

Locates the closest package.json from a starting directory and merges the
selected dependency classes into one name -> constraint mapping.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from depbump.models import DependencyRecord, DependencySelection
from depbump.scanners.base import BaseScanner

logger = logging.getLogger(__name__)

PACKAGE_JSON_FILENAME = "package.json"


class PackageJsonScanner(BaseScanner):
    """Scanner for npm package.json files.

    Dependency classes are merged in the order dependencies,
    devDependencies, optionalDependencies; a later class overrides an
    earlier one when the same name appears in both.

    Attributes:
        selection: Which dependency classes to include.
    """

    def __init__(
        self,
        source_path: Optional[Path] = None,
        selection: Optional[DependencySelection] = None,
    ) -> None:
        super().__init__(source_path)
        self.selection = selection or DependencySelection()
        self._data: Optional[dict[str, Any]] = None

    @classmethod
    def locate(cls, start: Path) -> Path:
        """Find the closest package.json from ``start`` up to the filesystem root.

        Args:
            start: Directory to start searching from.

        Returns:
            Path to the closest package.json.

        Raises:
            FileNotFoundError: If no package.json exists in any parent.
        """
        start = start.resolve()
        for directory in (start, *start.parents):
            candidate = directory / PACKAGE_JSON_FILENAME
            if candidate.is_file():
                return candidate

        raise FileNotFoundError(
            f"Couldn't find an available \"{PACKAGE_JSON_FILENAME}\" from {start}."
        )

    def read(self) -> dict[str, Any]:
        """Read and decode the manifest.

        Returns:
            The decoded JSON object.

        Raises:
            FileNotFoundError: If the manifest does not exist.
            ValueError: If source_path is unset, the file cannot be read, or it
                is not a JSON object.
        """
        if self._data is not None:
            return self._data

        if self.source_path is None:
            raise ValueError("source_path must be set before calling read()")

        if not self.source_path.exists():
            raise FileNotFoundError(f"Manifest not found: {self.source_path}")

        try:
            text = self.source_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Could not read {self.source_path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.source_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.source_path}")

        self._data = data
        return data

    def scan(self) -> list[DependencyRecord]:
        """Return the merged dependencies for the configured selection."""
        data = self.read()

        sections = []
        if self.selection.includes_production:
            sections.append("dependencies")
        if self.selection.includes_development:
            sections.append("devDependencies")
        if self.selection.includes_optional:
            sections.append("optionalDependencies")

        merged: dict[str, str] = {}
        for section in sections:
            entries = data.get(section) or {}
            if not isinstance(entries, dict):
                raise ValueError(
                    f"'{section}' must be an object in {self.source_path}"
                )
            for name, constraint in entries.items():
                if not isinstance(constraint, str):
                    logger.debug("Skipping %s in %s: not a string", name, section)
                    continue
                merged[name] = constraint

        return [
            DependencyRecord(name=name, constraint=constraint)
            for name, constraint in merged.items()
        ]

    @property
    def source_name(self) -> str:
        return PACKAGE_JSON_FILENAME

    @property
    def package_manager(self) -> Optional[str]:
        """Return the "packageManager" field (e.g., "pnpm@9.10.0")."""
        value = self.read().get("packageManager")
        return value if isinstance(value, str) else None
