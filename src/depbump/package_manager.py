"""Package manager detection and installation of selected updates.

The manager is taken from the manifest's "packageManager" field, then from
lock files next to the manifest, and defaults to npm.
"""

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import Optional

from depbump.models import UpdateCandidate

logger = logging.getLogger(__name__)


class InstallError(RuntimeError):
    """Raised when the package manager fails to install the selected updates."""


class PackageManager(str, Enum):
    """Supported package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @property
    def install_command(self) -> str:
        """Return the subcommand that adds a package at a version."""
        return "install" if self is PackageManager.NPM else "add"


# Checked in this order when the manifest does not name a manager.
LOCK_FILES: dict[str, PackageManager] = {
    "package-lock.json": PackageManager.NPM,
    "yarn.lock": PackageManager.YARN,
    "pnpm-lock.yaml": PackageManager.PNPM,
    "bun.lockb": PackageManager.BUN,
    "bun.lock": PackageManager.BUN,
}


def detect_package_manager(
    manifest_path: Optional[Path] = None,
    package_manager_field: Optional[str] = None,
    global_: bool = False,
) -> PackageManager:
    """Detect which package manager installs updates.

    Args:
        manifest_path: Path to package.json, used to look for lock files.
        package_manager_field: Value of "packageManager" (e.g., "pnpm@9.10.0").
        global_: Global mode always uses npm.

    Returns:
        The detected PackageManager.
    """
    if global_:
        return PackageManager.NPM

    if package_manager_field:
        name = package_manager_field.split("@", 1)[0]
        try:
            return PackageManager(name)
        except ValueError:
            logger.warning("Ignoring unsupported packageManager %r", package_manager_field)

    if manifest_path is not None:
        for lock_file, manager in LOCK_FILES.items():
            if manifest_path.with_name(lock_file).exists():
                logger.debug("Detected %s from %s", manager.value, lock_file)
                return manager

    return PackageManager.NPM


def build_install_command(
    manager: PackageManager,
    candidates: list[UpdateCandidate],
    global_: bool = False,
) -> list[str]:
    """Build the install command line.

    Packages are passed as ``name@version`` in the order given.
    """
    command = [manager.value, manager.install_command]
    command.extend(candidate.install_spec for candidate in candidates)
    if global_:
        command.append("-g")
    return command


def install(
    manager: PackageManager,
    candidates: list[UpdateCandidate],
    global_: bool = False,
    cwd: Optional[Path] = None,
) -> None:
    """Install the selected updates.

    Args:
        manager: Package manager to invoke.
        candidates: Updates to install.
        global_: Install globally.
        cwd: Directory to run the package manager in.

    Raises:
        InstallError: If the manager cannot be run or exits with an error.
    """
    command = build_install_command(manager, candidates, global_)
    logger.info("Running %s", " ".join(command))

    try:
        result = subprocess.run(command, cwd=cwd, check=False)
    except OSError as e:
        raise InstallError(f"Could not run {manager.value}: {e}") from e

    if result.returncode != 0:
        raise InstallError(
            f"Failed to update packages using {manager.install_command} command "
            f"for manager: {manager.value} (exit code {result.returncode})"
        )
