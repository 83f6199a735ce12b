"""Data structures shared by CLI commands and displays."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PathOutcome:
    """Capture what a command produced for a single input path."""

    source: str
    result: str | None = None
    error: str | None = None
    details: list[tuple[str, str]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None


__all__ = ["PathOutcome"]
