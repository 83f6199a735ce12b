"""Rich logging handler that renders component paths attached to records.

Where: platform/logging/handlers.py
What: Append a styled ``component_path`` extra to console log messages.
Why: Make separators and climbing ``..`` runs easy to spot in terminal output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, final, override

from rich.logging import RichHandler
from rich.text import Text

from compath.features.path import ComponentPath, PathError

if TYPE_CHECKING:
    from rich.console import ConsoleRenderable


@final
class ComponentPathRichHandler(RichHandler):
    """``RichHandler`` that styles the ``component_path`` record extra.

    Records may carry ``component_path`` (a ``ComponentPath`` or raw text) and
    optionally ``base_path``. When the base is an absolute ancestor of the
    path, the path is shown relative to it.
    """

    SEGMENT_STYLE: ClassVar[str] = "white"
    SEPARATOR_STYLE: ClassVar[str] = "dim"
    PARENT_STYLE: ClassVar[str] = "yellow"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> "ConsoleRenderable":
        rendered = super().render_message(record, message)
        raw_path = getattr(record, "component_path", None)
        if raw_path is None:
            return rendered

        text = rendered if isinstance(rendered, Text) else Text(str(rendered))
        path_text = self.render_path(raw_path, getattr(record, "base_path", None))
        if text.plain:
            _ = text.append(" ")
        _ = text.append_text(path_text)
        return text

    def render_path(self, raw_path: object, raw_base: object = None) -> Text:
        """Return ``raw_path`` as styled text, relative to ``raw_base`` when possible."""

        path = self._coerce(raw_path)
        if path is None:
            return Text(str(raw_path), style=self.SEGMENT_STYLE)

        base = self._coerce(raw_base) if raw_base is not None else None
        if base is not None and self._is_ancestor(base, path):
            path = path.form_relative_path(base)
            if path.is_empty():
                return Text(ComponentPath.CURRENT, style=self.SEGMENT_STYLE)

        text = Text()
        if path.is_absolute:
            _ = text.append(ComponentPath.SEPARATOR, style=self.SEPARATOR_STYLE)
        for index, segment in enumerate(path.segments):
            if index:
                _ = text.append(ComponentPath.SEPARATOR, style=self.SEPARATOR_STYLE)
            style = self.PARENT_STYLE if segment == ComponentPath.PARENT else self.SEGMENT_STYLE
            _ = text.append(segment, style=style)
        return text

    @staticmethod
    def _coerce(value: object) -> ComponentPath | None:
        if isinstance(value, ComponentPath):
            return value
        try:
            return ComponentPath(str(value))
        except PathError:
            return None

    @staticmethod
    def _is_ancestor(base: ComponentPath, path: ComponentPath) -> bool:
        if not (base.is_absolute and path.is_absolute):
            return False
        if len(base) > len(path):
            return False
        return path.segments[: len(base)] == base.segments


__all__ = ["ComponentPathRichHandler"]
