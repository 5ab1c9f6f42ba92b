"""Interactive selection of the updates to install."""

from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from depbump.models import UpdateCandidate

SELECT_ALL = {"a", "all"}
CANCEL = {"q", "quit"}


def parse_selection(answer: str, total: int) -> list[int]:
    """Parse a selection answer into zero-based indices.

    Accepts comma- or space-separated one-based numbers and ``a-b`` ranges,
    "all" for everything, and an empty answer for nothing.

    Args:
        answer: Text typed by the user.
        total: Number of selectable items.

    Returns:
        Sorted, de-duplicated zero-based indices.

    Raises:
        ValueError: If a token is not a number or range within 1..total.
    """
    answer = answer.strip().lower()
    if not answer:
        return []
    if answer in SELECT_ALL:
        return list(range(total))

    indices: set[int] = set()
    for token in answer.replace(",", " ").split():
        start, _, end = token.partition("-")
        if not start.isdigit() or (end and not end.isdigit()):
            raise ValueError(f"Invalid selection: {token!r}")
        low, high = int(start), int(end or start)
        if low > high or low < 1 or high > total:
            raise ValueError(f"Selection out of range: {token!r}")
        indices.update(range(low - 1, high))

    return sorted(indices)


def select_updates(
    candidates: list[UpdateCandidate], console: Console
) -> Optional[list[UpdateCandidate]]:
    """Ask the user which updates to install.

    Args:
        candidates: Sorted update candidates.
        console: Console to prompt on.

    Returns:
        The selected candidates in list order (possibly empty), or None if
        the prompt was cancelled.
    """
    console.print(f"Choose packages to update ({len(candidates)} total):")
    for number, candidate in enumerate(candidates, start=1):
        console.print(
            f"  [bold]{number:>3}[/bold]  {candidate.name}: "
            f"{candidate.current_version} → {candidate.candidate_version}"
        )

    while True:
        try:
            answer = Prompt.ask(
                "Numbers or ranges (e.g. 1,3-5), 'all', empty for none, 'q' to quit",
                console=console,
                default="",
                show_default=False,
            )
        except (KeyboardInterrupt, EOFError):
            return None

        if answer.strip().lower() in CANCEL:
            return None

        try:
            indices = parse_selection(answer, len(candidates))
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            continue

        selected = [candidates[index] for index in indices]
        console.print(f"{len(selected)} package(s) selected")
        return selected
