"""src/compath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse error capture and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from compath.features.path import PathError
from compath.platform.logging import logger
from compath.ui.cli.args.options import CLIArgs
from compath.ui.cli.display.result import ResultDisplay
from compath.ui.cli.models import PathOutcome


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    result_display: ResultDisplay

    def __init__(self, args: CLIArgs, result_display: ResultDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            result_display: Display used for output; a stdout display when omitted.
        """
        self.args = args
        self.result_display = result_display or ResultDisplay()

    def execute(self) -> list[PathOutcome]:
        """Run the command and render its outcomes.

        Returns:
            list[PathOutcome]: One outcome per evaluated input.
        """
        outcomes = self.evaluate()
        self.render(outcomes)
        return outcomes

    @abstractmethod
    def evaluate(self) -> list[PathOutcome]:
        """Compute outcomes without producing console output."""

    @abstractmethod
    def render(self, outcomes: list[PathOutcome]) -> None:
        """Present computed outcomes."""

    def attempt(self, source: str, action: Callable[[], PathOutcome]) -> PathOutcome:
        """Run ``action`` and turn a path failure into a failed outcome.

        Args:
            source: Raw input the action operates on.
            action: Callable producing the successful outcome.

        Returns:
            PathOutcome: The action's outcome, or one carrying the error text.
        """
        try:
            outcome = action()
        except PathError as e:
            logger.error(
                "%s: %s",
                type(e).__name__,
                e,
                extra={"component_path": source},
            )
            return PathOutcome(source=source, error=str(e))

        logger.debug("Evaluated %r", source, extra={"component_path": outcome.result})
        return outcome
