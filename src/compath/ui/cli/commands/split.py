"""Split command for CLI."""

from typing import final, override

from compath.features.path import ComponentPath
from compath.ui.cli.args.options import SplitArgs
from compath.ui.cli.commands.executor import CommandExecutor
from compath.ui.cli.models import PathOutcome


@final
class SplitCommand(CommandExecutor):
    """Show the head and tail of a path without normalizing it."""

    args: SplitArgs

    @override
    def evaluate(self) -> list[PathOutcome]:
        head, tail = ComponentPath.split(self.args.path)
        return [
            PathOutcome(
                source=self.args.path,
                result=tail,
                details=[("head", head), ("tail", tail)],
            )
        ]

    @override
    def render(self, outcomes: list[PathOutcome]) -> None:
        for outcome in outcomes:
            self.result_display.show_details(
                outcome, title=f"Split of {outcome.source!r}", quiet=self.args.quiet
            )
