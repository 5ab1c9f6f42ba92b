"""Tests for interactive update selection."""

import io

import pytest
from rich.console import Console

from depbump.models import UpdateCandidate
from depbump.prompt import parse_selection, select_updates


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def candidates() -> list[UpdateCandidate]:
    return [
        UpdateCandidate("axios", "^1.5.0", "1.6.7"),
        UpdateCandidate("lodash", "~4.17.20", "4.17.21"),
        UpdateCandidate("react", "^18.2.0", "19.0.0"),
    ]


class TestParseSelection:
    """Test suite for parse_selection."""

    @pytest.mark.parametrize(
        ("answer", "expected"),
        [
            ("", []),
            ("   ", []),
            ("1", [0]),
            ("3,1", [0, 2]),
            ("1 3", [0, 2]),
            ("1-2", [0, 1]),
            ("2-3, 1", [0, 1, 2]),
            ("1,1,1", [0]),
            ("all", [0, 1, 2]),
            ("A", [0, 1, 2]),
        ],
    )
    def test_valid(self, answer: str, expected: list[int]):
        assert parse_selection(answer, 3) == expected

    @pytest.mark.parametrize("answer", ["0", "4", "1-4", "3-1", "x", "1,two", "-1", "1-x"])
    def test_invalid(self, answer: str):
        with pytest.raises(ValueError):
            parse_selection(answer, 3)


class TestSelectUpdates:
    """Test suite for select_updates."""

    def test_returns_selected_in_list_order(self, mocker, console, candidates):
        mocker.patch("depbump.prompt.Prompt.ask", return_value="3,1")

        selected = select_updates(candidates, console)

        assert [candidate.name for candidate in selected] == ["axios", "react"]
        assert "2 package(s) selected" in console.file.getvalue()

    def test_lists_every_candidate(self, mocker, console, candidates):
        mocker.patch("depbump.prompt.Prompt.ask", return_value="")

        select_updates(candidates, console)

        output = console.file.getvalue()
        for candidate in candidates:
            assert candidate.name in output
            assert candidate.candidate_version in output

    def test_empty_answer_selects_nothing(self, mocker, console, candidates):
        mocker.patch("depbump.prompt.Prompt.ask", return_value="")
        assert select_updates(candidates, console) == []

    def test_reasks_after_invalid_answer(self, mocker, console, candidates):
        """Test that a bad answer is reported and the prompt repeats."""
        ask = mocker.patch("depbump.prompt.Prompt.ask", side_effect=["9", "all"])

        selected = select_updates(candidates, console)

        assert selected == candidates
        assert ask.call_count == 2
        assert "out of range" in console.file.getvalue()

    @pytest.mark.parametrize("answer", ["q", "quit", "Q"])
    def test_cancel_word(self, mocker, console, candidates, answer: str):
        mocker.patch("depbump.prompt.Prompt.ask", return_value=answer)
        assert select_updates(candidates, console) is None

    @pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
    def test_interrupt_cancels(self, mocker, console, candidates, error):
        mocker.patch("depbump.prompt.Prompt.ask", side_effect=error)
        assert select_updates(candidates, console) is None
