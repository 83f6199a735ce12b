"""Command line argument handling package."""

from compath.ui.cli.args.parser import ArgumentParser
from compath.ui.cli.args.options import (
    AbsoluteArgs,
    CLIArgs,
    InspectArgs,
    NormalizeArgs,
    RelativeArgs,
    SplitArgs,
)

__all__ = [
    "ArgumentParser",
    "AbsoluteArgs",
    "CLIArgs",
    "InspectArgs",
    "NormalizeArgs",
    "RelativeArgs",
    "SplitArgs",
]
