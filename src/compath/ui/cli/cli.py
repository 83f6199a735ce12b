"""Command line interface for compath."""

import sys
from typing import final

from compath.platform.logging import logger
from compath.ui.cli.args import ArgumentParser
from compath.ui.cli.args.options import (
    AbsoluteArgs,
    CLIArgs,
    InspectArgs,
    NormalizeArgs,
    RelativeArgs,
    SplitArgs,
)
from compath.ui.cli.commands import (
    AbsoluteCommand,
    CommandExecutor,
    InspectCommand,
    NormalizeCommand,
    RelativeCommand,
    SplitCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            results = CommandProcessor.build_command(args).execute()
            if any(not r.success for r in results):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Pick the executor matching the parsed subcommand."""

        if isinstance(args, NormalizeArgs):
            return NormalizeCommand(args)
        if isinstance(args, SplitArgs):
            return SplitCommand(args)
        if isinstance(args, AbsoluteArgs):
            return AbsoluteCommand(args)
        if isinstance(args, RelativeArgs):
            return RelativeCommand(args)
        assert isinstance(args, InspectArgs)
        return InspectCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
