"""Inspect command for CLI."""

from typing import final, override

from compath.features.path import ComponentPath
from compath.ui.cli.args.options import InspectArgs
from compath.ui.cli.commands.executor import CommandExecutor
from compath.ui.cli.models import PathOutcome


@final
class InspectCommand(CommandExecutor):
    """Describe the structure of a single path."""

    args: InspectArgs

    @override
    def evaluate(self) -> list[PathOutcome]:
        return [self.attempt(self.args.path, self._describe)]

    def _describe(self) -> PathOutcome:
        path = ComponentPath(self.args.path)
        details = [
            ("canonical", path.to_string()),
            ("absolute", "yes" if path.is_absolute else "no"),
            ("levels", str(path.get_num_path_levels())),
            ("name", path.get_component_name()),
            ("parent", path.get_parent_path_string()),
        ]
        details.extend(
            (f"level {index}", path.get_subcomponent_name_at_level(index))
            for index in range(path.get_num_path_levels())
        )
        return PathOutcome(source=self.args.path, result=path.to_string(), details=details)

    @override
    def render(self, outcomes: list[PathOutcome]) -> None:
        for outcome in outcomes:
            self.result_display.show_details(
                outcome, title=f"Inspection of {outcome.source!r}", quiet=self.args.quiet
            )
