"""Command line interface package."""

from compath.ui.cli.cli import CommandProcessor, main

process_command = CommandProcessor.process_command

__all__ = ["CommandProcessor", "main", "process_command"]
