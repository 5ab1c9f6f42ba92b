"""Dependency scanners for package.json manifests and global installs."""

from pathlib import Path
from typing import Optional

from depbump.models import DependencySelection
from depbump.scanners.base import BaseScanner
from depbump.scanners.global_npm import GlobalScanner
from depbump.scanners.package_json import PackageJsonScanner

__all__ = [
    "BaseScanner",
    "GlobalScanner",
    "PackageJsonScanner",
    "get_scanner",
]


def get_scanner(
    global_: bool = False,
    selection: Optional[DependencySelection] = None,
    cwd: Optional[Path] = None,
) -> BaseScanner:
    """Get the scanner for the requested mode.

    Args:
        global_: Check globally installed packages instead of a project.
        selection: Dependency classes to include from package.json.
        cwd: Directory to start looking for package.json. Defaults to the
            current working directory.

    Returns:
        Scanner instance ready to scan.

    Raises:
        FileNotFoundError: If no package.json is found in project mode.
    """
    if global_:
        return GlobalScanner()

    manifest = PackageJsonScanner.locate(cwd or Path.cwd())
    return PackageJsonScanner(manifest, selection=selection)
