"""Normalize command for CLI."""

from typing import final, override

from compath.features.path import ComponentPath
from compath.ui.cli.args.options import NormalizeArgs
from compath.ui.cli.commands.executor import CommandExecutor
from compath.ui.cli.models import PathOutcome


@final
class NormalizeCommand(CommandExecutor):
    """Print the canonical form of every supplied path."""

    args: NormalizeArgs

    @override
    def evaluate(self) -> list[PathOutcome]:
        return [
            self.attempt(
                raw,
                lambda raw=raw: PathOutcome(source=raw, result=ComponentPath.normalize(raw)),
            )
            for raw in self.args.paths
        ]

    @override
    def render(self, outcomes: list[PathOutcome]) -> None:
        self.result_display.show_outcomes(
            outcomes,
            title="Normalized Paths",
            result_label="Canonical",
            quiet=self.args.quiet,
        )
