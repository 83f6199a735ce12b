"""
Summary: Error hierarchy raised while parsing and resolving component paths.
Why: Let callers tell invalid names, root escapes, bad indices and misuse apart.
"""

from __future__ import annotations


class PathError(ValueError):
    """Base class for every component path failure."""


class InvalidCharacterError(PathError):
    """Raised when a path segment contains a forbidden character."""

    def __init__(self, segment: str, character: str) -> None:
        super().__init__(f"Invalid character {character!r} in path element {segment!r}")
        self.segment: str = segment
        self.character: str = character


class OutOfRootError(PathError):
    """Raised when '..' would step above the root of an absolute path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path {path!r} steps above its root")
        self.path: str = path


class OutOfRangeError(PathError, IndexError):
    """Raised when a level index does not address an existing segment."""

    def __init__(self, index: int, levels: int) -> None:
        super().__init__(f"Level {index} is out of range for a path with {levels} level(s)")
        self.index: int = index
        self.levels: int = levels


class PathMisuseError(PathError):
    """Raised when an operation requires absolute paths and did not get them."""


__all__ = [
    "InvalidCharacterError",
    "OutOfRangeError",
    "OutOfRootError",
    "PathError",
    "PathMisuseError",
]
