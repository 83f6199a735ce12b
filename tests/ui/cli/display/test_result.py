"""Tests for result display functionality."""

from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from compath.ui.cli.display.result import ResultDisplay
from compath.ui.cli.models import PathOutcome


@pytest.fixture
def outcomes() -> list[PathOutcome]:
    """Create test outcomes.

    Returns:
        List of one successful and one failed outcome.
    """
    return [
        PathOutcome(source="a//b/", result="a/b"),
        PathOutcome(source="/..", error="Path '/..' steps above its root"),
    ]


def _recording_display() -> tuple[ResultDisplay, StringIO]:
    buffer = StringIO()
    return ResultDisplay(console=Console(file=buffer, width=120)), buffer


def test_show_outcomes(outcomes: list[PathOutcome]) -> None:
    """Successful and failed rows both appear in the table."""

    display, buffer = _recording_display()
    display.show_outcomes(outcomes, title="Normalized Paths", result_label="Canonical")

    output = buffer.getvalue()
    assert "Normalized Paths" in output
    assert "Canonical" in output
    assert "a/b" in output
    assert "steps above its root" in output


def test_show_outcomes_quiet(outcomes: list[PathOutcome], mocker: MockerFixture) -> None:
    """Quiet mode prints nothing."""

    display = ResultDisplay()
    display.console = mocker.MagicMock()

    display.show_outcomes(outcomes, title="Normalized Paths", quiet=True)

    display.console.print.assert_not_called()


def test_show_outcomes_marks_empty_result() -> None:
    display, buffer = _recording_display()
    display.show_outcomes([PathOutcome(source=".", result="")], title="Normalized Paths")
    assert '""' in buffer.getvalue()


def test_show_details() -> None:
    display, buffer = _recording_display()
    outcome = PathOutcome(source="a/b", result="b", details=[("head", "a"), ("tail", "b")])

    display.show_details(outcome, title="Split")

    output = buffer.getvalue()
    assert "head" in output
    assert "tail" in output


def test_show_details_reports_failure() -> None:
    display, buffer = _recording_display()
    display.show_details(PathOutcome(source="a*", error="bad element"), title="Inspection")
    assert "a*: bad element" in buffer.getvalue()
