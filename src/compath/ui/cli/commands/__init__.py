"""Command execution package for CLI."""

from compath.ui.cli.commands.executor import CommandExecutor
from compath.ui.cli.commands.inspection import InspectCommand
from compath.ui.cli.commands.normalize import NormalizeCommand
from compath.ui.cli.commands.resolve import AbsoluteCommand, RelativeCommand
from compath.ui.cli.commands.split import SplitCommand

__all__ = [
    "AbsoluteCommand",
    "CommandExecutor",
    "InspectCommand",
    "NormalizeCommand",
    "RelativeCommand",
    "SplitCommand",
]
