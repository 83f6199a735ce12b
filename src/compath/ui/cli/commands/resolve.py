"""src/compath/ui/cli/commands/resolve.py
What: Absolute and relative resolution commands.
Why: Expose cross-reference resolution between two component paths.
"""

from typing import final, override

from compath.features.path import ComponentPath
from compath.ui.cli.args.options import AbsoluteArgs, RelativeArgs
from compath.ui.cli.commands.executor import CommandExecutor
from compath.ui.cli.models import PathOutcome


@final
class AbsoluteCommand(CommandExecutor):
    """Resolve a path against an absolute base."""

    args: AbsoluteArgs

    @override
    def evaluate(self) -> list[PathOutcome]:
        return [self.attempt(self.args.path, self._resolve)]

    def _resolve(self) -> PathOutcome:
        base = ComponentPath(self.args.base)
        resolved = ComponentPath(self.args.path).form_absolute_path(base)
        return PathOutcome(source=self.args.path, result=resolved.to_string())

    @override
    def render(self, outcomes: list[PathOutcome]) -> None:
        self.result_display.show_outcomes(
            outcomes,
            title=f"Resolved against {self.args.base}",
            result_label="Absolute",
            quiet=self.args.quiet,
        )


@final
class RelativeCommand(CommandExecutor):
    """Compute the path leading from one absolute path to another."""

    args: RelativeArgs

    @override
    def evaluate(self) -> list[PathOutcome]:
        return [self.attempt(self.args.path, self._relate)]

    def _relate(self) -> PathOutcome:
        start = ComponentPath(self.args.from_path)
        relative = ComponentPath(self.args.path).form_relative_path(start)
        return PathOutcome(source=self.args.path, result=relative.to_string())

    @override
    def render(self, outcomes: list[PathOutcome]) -> None:
        self.result_display.show_outcomes(
            outcomes,
            title=f"Relative to {self.args.from_path}",
            result_label="Relative",
            quiet=self.args.quiet,
        )
