# Path: `src/compath/features/path/__init__.py`
# Summary: Export component path value type, helpers and errors.
# Why: Provide a stable import surface for the CLI, logging and tests.

from .domain.component_path import ComponentPath, normalize, split
from .domain.errors import (
    InvalidCharacterError,
    OutOfRangeError,
    OutOfRootError,
    PathError,
    PathMisuseError,
)

__all__ = [
    "ComponentPath",
    "normalize",
    "split",
    "PathError",
    "InvalidCharacterError",
    "OutOfRootError",
    "OutOfRangeError",
    "PathMisuseError",
]
