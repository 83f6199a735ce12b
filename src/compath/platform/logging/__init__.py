"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper and the Rich path handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import ComponentPathRichHandler

__all__ = [
    "ComponentPathRichHandler",
    "logger",
    "setup_logger",
]
