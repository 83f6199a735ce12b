"""src/compath/ui/cli/display/result.py
What: Render command outcomes as Rich tables.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from compath.ui.cli.models import PathOutcome


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display.

        Args:
            console: Console to print to; a stdout console when omitted.
        """
        self.console = console or Console()

    def show_outcomes(
        self,
        outcomes: Sequence[PathOutcome],
        *,
        title: str,
        result_label: str = "Result",
        quiet: bool = False,
    ) -> None:
        """Display one row per input path.

        Args:
            outcomes: Command outcomes to render.
            title: Table title.
            result_label: Header of the result column.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        table = Table(
            title=title,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Input", style="bold")
        table.add_column(result_label)

        for outcome in outcomes:
            table.add_row(_quote(outcome.source), self._result_cell(outcome))

        self.console.print(table)

    def show_details(self, outcome: PathOutcome, *, title: str, quiet: bool = False) -> None:
        """Display the key/value details gathered for a single path.

        Args:
            outcome: Outcome whose details are rendered.
            title: Table title.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        if not outcome.success:
            self.console.print(Text(f"{outcome.source}: {outcome.error}", style="red"))
            return

        table = Table(title=title, show_header=False, box=box.SIMPLE)
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")
        for label, value in outcome.details:
            table.add_row(label, _quote(value))

        self.console.print(table)

    @staticmethod
    def _result_cell(outcome: PathOutcome) -> Text:
        if outcome.success:
            return Text(_quote(outcome.result or ""), style="green")
        return Text(outcome.error or "", style="red")


def _quote(value: str) -> str:
    # Empty paths would otherwise render as blank cells.
    return value if value else '""'


__all__ = ["ResultDisplay"]
