"""Terminal reporter printing updates as a rich table."""

from rich.console import Console
from rich.table import Table

from depbump.models import UpdateCandidate, UpdateTarget
from depbump.reporters.base import BaseReporter, change_label

CHANGE_STYLES = {
    "major": "bold bright_red",
    "minor": "bold bright_yellow",
    "patch": "bold bright_green",
    "prerelease": "bold magenta",
}


class ConsoleReporter(BaseReporter):
    """Reporter that renders a coloured table of updates.

    Candidate versions are coloured by change size: red for major, yellow
    for minor, green for patch.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def build_table(self, candidates: list[UpdateCandidate], target: UpdateTarget) -> Table:
        table = Table(title=f"Available updates ({target.value})")
        table.add_column("Package", style="bold")
        table.add_column("Current")
        table.add_column("Candidate")
        table.add_column("Change")

        for candidate in candidates:
            change = change_label(candidate)
            style = CHANGE_STYLES.get(change, "")
            table.add_row(
                candidate.name,
                candidate.current_version,
                f"[{style}]{candidate.candidate_version}[/]" if style else candidate.candidate_version,
                change,
            )
        return table

    def render(self, candidates: list[UpdateCandidate], target: UpdateTarget) -> str:
        with self.console.capture() as capture:
            self.console.print(self.build_table(candidates, target))
        return capture.get()

    def print(self, candidates: list[UpdateCandidate], target: UpdateTarget) -> None:
        """Print the table to the reporter's console."""
        self.console.print(self.build_table(candidates, target))

    @property
    def format_name(self) -> str:
        return "console"
