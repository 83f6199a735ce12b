"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from compath.config.config import Config
from compath.platform.logging import logger, setup_logger
from compath.ui.cli.args.options import (
    AbsoluteArgs,
    CLIArgs,
    InspectArgs,
    NormalizeArgs,
    RelativeArgs,
    SplitArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="compath",
            description="compath - Normalize, split and resolve slash-delimited component paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        normalize_parser = subparsers.add_parser(
            "normalize",
            help="Print the canonical form of one or more paths",
        )
        _ = normalize_parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Raw component paths to normalize",
            metavar="PATH",
        )
        ArgumentParser._add_output_flags(normalize_parser)

        split_parser = subparsers.add_parser(
            "split",
            help="Split a path into head and tail around its last separator",
        )
        _ = split_parser.add_argument("path", type=str, help="Raw component path", metavar="PATH")
        ArgumentParser._add_output_flags(split_parser)

        absolute_parser = subparsers.add_parser(
            "absolute",
            help="Resolve a relative path against an absolute base",
        )
        _ = absolute_parser.add_argument("path", type=str, help="Path to resolve", metavar="PATH")
        _ = absolute_parser.add_argument(
            "--base",
            type=str,
            help="Absolute base path (defaults to default_base from the configuration)",
            metavar="BASE",
        )
        ArgumentParser._add_output_flags(absolute_parser)

        relative_parser = subparsers.add_parser(
            "relative",
            help="Compute the relative path leading from one absolute path to another",
        )
        _ = relative_parser.add_argument(
            "path", type=str, help="Absolute destination path", metavar="PATH"
        )
        _ = relative_parser.add_argument(
            "--from",
            dest="from_path",
            type=str,
            required=True,
            help="Absolute starting path",
            metavar="OTHER",
        )
        ArgumentParser._add_output_flags(relative_parser)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show the canonical form, levels, name and parent of a path",
        )
        _ = inspect_parser.add_argument("path", type=str, help="Raw component path", metavar="PATH")
        ArgumentParser._add_output_flags(inspect_parser)

        return parser

    @staticmethod
    def _add_output_flags(parser: argparse.ArgumentParser) -> None:
        """Attach the verbosity flags shared by every subcommand."""

        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_level_number

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "normalize":
            return NormalizeArgs(
                command="normalize",
                paths=list(parsed_args.paths),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "split":
            return SplitArgs(
                command="split",
                path=parsed_args.path,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "absolute":
            base: str = parsed_args.base or configuration.default_base
            logger.debug("Resolving against base %s", base)
            return AbsoluteArgs(
                command="absolute",
                path=parsed_args.path,
                base=base,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "relative":
            return RelativeArgs(
                command="relative",
                path=parsed_args.path,
                from_path=parsed_args.from_path,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "inspect":
            return InspectArgs(
                command="inspect",
                path=parsed_args.path,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
