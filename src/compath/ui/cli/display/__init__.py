"""Display management for CLI interface."""

from compath.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
