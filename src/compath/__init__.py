"""compath: canonical slash-delimited paths for named component trees."""

from compath.features.path import (
    ComponentPath,
    InvalidCharacterError,
    OutOfRangeError,
    OutOfRootError,
    PathError,
    PathMisuseError,
    normalize,
    split,
)

__version__ = "0.1.0"

__all__ = [
    "ComponentPath",
    "InvalidCharacterError",
    "OutOfRangeError",
    "OutOfRootError",
    "PathError",
    "PathMisuseError",
    "__version__",
    "normalize",
    "split",
]
