"""Tests for the GlobalScanner."""

import json
import subprocess

import pytest

from depbump.models import DependencyRecord
from depbump.scanners.global_npm import NPM_LIST_COMMAND, GlobalScanner


def completed(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(NPM_LIST_COMMAND, returncode, stdout=stdout, stderr="")


class TestGlobalScanner:
    """Test suite for GlobalScanner."""

    @pytest.fixture
    def run(self, mocker):
        """Patch subprocess.run inside the scanner module."""
        return mocker.patch("depbump.scanners.global_npm.subprocess.run")

    def test_source_name(self):
        assert GlobalScanner().source_name == "npm global"

    def test_scan_lists_installed_versions(self, run):
        """Test that each global package is reported at its installed version."""
        run.return_value = completed(
            json.dumps(
                {
                    "name": "lib",
                    "dependencies": {
                        "npm": {"version": "10.2.4"},
                        "typescript": {"version": "5.3.3", "overridden": False},
                    },
                }
            )
        )

        records = GlobalScanner().scan()

        assert records == [
            DependencyRecord("npm", "10.2.4"),
            DependencyRecord("typescript", "5.3.3"),
        ]
        run.assert_called_once_with(
            NPM_LIST_COMMAND, capture_output=True, text=True, check=False
        )

    def test_non_zero_exit_still_parsed(self, run):
        """Test that npm's error status does not hide a valid listing."""
        run.return_value = completed(
            json.dumps({"dependencies": {"eslint": {"version": "8.56.0"}}}),
            returncode=1,
        )

        assert GlobalScanner().scan() == [DependencyRecord("eslint", "8.56.0")]

    def test_entries_without_version_are_skipped(self, run):
        """Test that missing or broken entries are ignored."""
        run.return_value = completed(
            json.dumps(
                {
                    "dependencies": {
                        "ok": {"version": "1.0.0"},
                        "missing": {"missing": True},
                        "weird": "1.0.0",
                    }
                }
            )
        )

        assert GlobalScanner().scan() == [DependencyRecord("ok", "1.0.0")]

    def test_empty_listing(self, run):
        """Test that no global packages scans to an empty list."""
        run.return_value = completed(json.dumps({}))

        assert GlobalScanner().scan() == []

    def test_invalid_output(self, run):
        """Test that non-JSON output raises ValueError."""
        run.return_value = completed("npm ERR! something broke")

        with pytest.raises(ValueError, match="npm ls"):
            GlobalScanner().scan()

    def test_unexpected_shape(self, run):
        """Test that a non-object listing raises ValueError."""
        run.return_value = completed(json.dumps({"dependencies": ["npm"]}))

        with pytest.raises(ValueError):
            GlobalScanner().scan()

    def test_npm_not_executable(self, run):
        """Test that other OS errors from npm propagate to the caller."""
        run.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(OSError):
            GlobalScanner().scan()

    def test_npm_not_installed(self, run):
        """Test that a missing npm binary propagates FileNotFoundError."""
        run.side_effect = FileNotFoundError("npm")

        with pytest.raises(FileNotFoundError):
            GlobalScanner().scan()
