"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class NormalizeArgs:
    """Command line arguments for the ``normalize`` subcommand."""

    command: Literal["normalize"]
    paths: list[str]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class SplitArgs:
    """Command line arguments for the ``split`` subcommand."""

    command: Literal["split"]
    path: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class AbsoluteArgs:
    """Command line arguments for the ``absolute`` subcommand."""

    command: Literal["absolute"]
    path: str
    base: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RelativeArgs:
    """Command line arguments for the ``relative`` subcommand."""

    command: Literal["relative"]
    path: str
    from_path: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    path: str
    verbose: bool
    quiet: bool


CLIArgs = NormalizeArgs | SplitArgs | AbsoluteArgs | RelativeArgs | InspectArgs

__all__ = [
    "AbsoluteArgs",
    "CLIArgs",
    "InspectArgs",
    "NormalizeArgs",
    "RelativeArgs",
    "SplitArgs",
]
