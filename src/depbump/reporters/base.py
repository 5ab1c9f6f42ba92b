"""Base interface for update reporters.

Reporters render the sorted list of update candidates for people: a table
on the terminal or a Markdown document.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from depbump.models import UpdateCandidate, UpdateTarget
from depbump.versions import VersionError, classify_diff, parse_version


def change_label(candidate: UpdateCandidate) -> str:
    """Describe the size of an update.

    Returns:
        "major", "minor" or "patch" for numeric bumps, "prerelease" when only
        prerelease identifiers change, or "unknown" if a version does not parse.
    """
    try:
        current = parse_version(candidate.current_version)
        target = parse_version(candidate.candidate_version)
    except VersionError:
        return "unknown"

    diff = classify_diff(current, target)
    if diff is not None:
        return diff.value
    return "prerelease" if target.is_prerelease else "unknown"


class BaseReporter(ABC):
    """Abstract base class for update reporters."""

    @abstractmethod
    def render(self, candidates: list[UpdateCandidate], target: UpdateTarget) -> str:
        """Render update candidates.

        Args:
            candidates: Update candidates sorted by name.
            target: Update target the candidates were resolved with.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(
        self,
        candidates: list[UpdateCandidate],
        target: UpdateTarget,
        output_path: Path,
    ) -> None:
        """Render and write output to a file."""
        output_path.write_text(self.render(candidates, target), encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name (e.g., "markdown")."""
        ...
