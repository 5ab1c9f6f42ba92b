"""Scanner for globally installed npm packages.

Runs ``npm ls --json -g --depth=0`` and reports each top-level package at
its installed version.
"""

import json
import logging
import subprocess

from depbump.models import DependencyRecord
from depbump.scanners.base import BaseScanner

logger = logging.getLogger(__name__)

NPM_LIST_COMMAND = ["npm", "ls", "--json", "-g", "--depth=0"]


class GlobalScanner(BaseScanner):
    """Scanner for packages installed with ``npm install -g``."""

    def scan(self) -> list[DependencyRecord]:
        """List global packages.

        The exit status of ``npm ls`` is ignored because npm reports
        problems such as extraneous packages with a non-zero status while
        still printing the listing.

        Raises:
            FileNotFoundError: If npm is not installed.
            ValueError: If npm output is not the expected JSON listing.
        """
        logger.debug("Running %s", " ".join(NPM_LIST_COMMAND))
        result = subprocess.run(
            NPM_LIST_COMMAND,
            capture_output=True,
            text=True,
            check=False,
        )

        try:
            listing = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ValueError(f"Could not parse `npm ls` output: {e}") from e

        dependencies = listing.get("dependencies", {}) if isinstance(listing, dict) else None
        if not isinstance(dependencies, dict):
            raise ValueError("`npm ls` output has no dependency listing")

        records = []
        for name, package in dependencies.items():
            version = package.get("version") if isinstance(package, dict) else None
            if not isinstance(version, str):
                logger.debug("Skipping global package %s without a version", name)
                continue
            records.append(DependencyRecord(name=name, constraint=version))

        return records

    @property
    def source_name(self) -> str:
        return "npm global"
