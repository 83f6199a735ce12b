"""
Summary: Immutable slash-delimited path addressing a node in a named component tree.
Why: Keep normalization and absolute/relative resolution in one canonical value type.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import ClassVar, final

from compath.features.path.domain.errors import (
    InvalidCharacterError,
    OutOfRangeError,
    OutOfRootError,
    PathMisuseError,
)


@final
class ComponentPath:
    """Canonical path made of component names and an absolute flag.

    A component path always uses ``/`` as its separator. Component names may
    not contain a back-slash, a forward-slash, an asterisk or a plus sign.
    """

    SEPARATOR: ClassVar[str] = "/"
    INVALID_CHARS: ClassVar[str] = "\\/*+"
    CURRENT: ClassVar[str] = "."
    PARENT: ClassVar[str] = ".."

    __slots__ = ("_segments", "_is_absolute")

    _segments: tuple[str, ...]
    _is_absolute: bool

    def __init__(self, path: str = "") -> None:
        """Parse ``path`` into its canonical form.

        Args:
            path: Raw path text. ``.`` and ``..`` elements are resolved where
                possible and repeated or trailing separators are dropped.

        Raises:
            InvalidCharacterError: If an element contains a forbidden character.
            OutOfRootError: If an absolute path climbs above its root.
        """
        is_absolute = path.startswith(self.SEPARATOR)
        segments = self._collapse(self._tokenize(path), is_absolute, path)
        object.__setattr__(self, "_segments", segments)
        object.__setattr__(self, "_is_absolute", is_absolute)

    @classmethod
    def from_segments(cls, segments: Iterable[str], is_absolute: bool) -> ComponentPath:
        """Build a path from already-canonical segments without re-validating them.

        Args:
            segments: Component names in root-to-leaf order.
            is_absolute: Whether the path starts at the root.

        Returns:
            ComponentPath: Path holding exactly the supplied segments.
        """
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_segments", tuple(segments))
        object.__setattr__(instance, "_is_absolute", is_absolute)
        return instance

    @classmethod
    def root(cls) -> ComponentPath:
        """Return the absolute path with no segments."""
        return cls.from_segments((), True)

    # Parsing -----------------------------------------------------------------

    @classmethod
    def normalize(cls, path: str) -> str:
        """Return the canonical string form of ``path``.

        The result holds no ``.`` elements, no ``..`` elements except a
        leading run on a relative path, no repeated separators and no
        trailing separator unless it is the root itself.

        Args:
            path: Raw path text.

        Returns:
            str: Canonical path text, ``"/"`` for the root and ``""`` for an
            empty relative path.

        Raises:
            InvalidCharacterError: If an element contains a forbidden character.
            OutOfRootError: If an absolute path climbs above its root.
        """
        is_absolute = path.startswith(cls.SEPARATOR)
        segments = cls._collapse(cls._tokenize(path), is_absolute, path)
        return cls._render(segments, is_absolute)

    @classmethod
    def split(cls, path: str) -> tuple[str, str]:
        """Split ``path`` into ``(head, tail)`` around its last separator.

        No validation or relative resolution happens here; see ``normalize``.

        Args:
            path: Raw path text.

        Returns:
            tuple[str, str]: ``tail`` is the text after the last separator and
            may be empty. ``head`` is everything before it with trailing
            separators removed, except that a root head stays ``"/"``.
        """
        index = path.rfind(cls.SEPARATOR)
        if index == -1:
            return "", path

        head = path[:index].rstrip(cls.SEPARATOR)
        if not head and path.startswith(cls.SEPARATOR):
            head = cls.SEPARATOR
        return head, path[index + 1 :]

    @classmethod
    def is_legal_path_element(cls, name: str) -> bool:
        """Tell whether ``name`` can be stored as a single segment."""
        if not name or name in (cls.CURRENT, cls.PARENT):
            return False
        return cls._first_invalid_char(name) is None

    @classmethod
    def _first_invalid_char(cls, name: str) -> str | None:
        for char in name:
            if char in cls.INVALID_CHARS:
                return char
        return None

    @classmethod
    def _tokenize(cls, path: str) -> list[str]:
        return [token for token in path.split(cls.SEPARATOR) if token]

    @classmethod
    def _collapse(
        cls,
        tokens: Iterable[str],
        is_absolute: bool,
        source: str,
        validate: bool = True,
    ) -> tuple[str, ...]:
        """Resolve ``.`` and ``..`` tokens left to right.

        Args:
            tokens: Non-empty path elements.
            is_absolute: Whether the elements hang off the root.
            source: Text reported in errors.
            validate: Whether plain elements are checked for invalid characters.

        Returns:
            tuple[str, ...]: Collapsed segments.

        Raises:
            InvalidCharacterError: On the first element holding a forbidden character.
            OutOfRootError: On the first ``..`` that climbs above an absolute root.
        """
        stack: list[str] = []
        for token in tokens:
            if token == cls.CURRENT:
                continue
            if token == cls.PARENT:
                if stack and stack[-1] != cls.PARENT:
                    _ = stack.pop()
                elif is_absolute:
                    raise OutOfRootError(source)
                else:
                    stack.append(token)
                continue
            if validate:
                invalid = cls._first_invalid_char(token)
                if invalid is not None:
                    raise InvalidCharacterError(token, invalid)
            stack.append(token)
        return tuple(stack)

    @classmethod
    def _render(cls, segments: Iterable[str], is_absolute: bool) -> str:
        joined = cls.SEPARATOR.join(segments)
        return cls.SEPARATOR + joined if is_absolute else joined

    # Accessors ---------------------------------------------------------------

    @property
    def segments(self) -> tuple[str, ...]:
        """Component names in root-to-leaf order."""
        return self._segments

    @property
    def is_absolute(self) -> bool:
        """Whether the path starts at the root."""
        return self._is_absolute

    def is_root(self) -> bool:
        return self._is_absolute and not self._segments

    def is_empty(self) -> bool:
        return not self._is_absolute and not self._segments

    def to_string(self) -> str:
        """Return the canonical string form of this path."""
        return self._render(self._segments, self._is_absolute)

    def get_num_path_levels(self) -> int:
        return len(self._segments)

    def get_subcomponent_name_at_level(self, index: int) -> str:
        """Return the segment at a 0-indexed level.

        Args:
            index: Level counted from the first segment.

        Returns:
            str: Component name stored at that level.

        Raises:
            OutOfRangeError: If ``index`` is negative or past the last segment.
        """
        if index < 0 or index >= len(self._segments):
            raise OutOfRangeError(index, len(self._segments))
        return self._segments[index]

    def get_path_element(self, index: int) -> str:
        return self.get_subcomponent_name_at_level(index)

    def get_component_name(self) -> str:
        """Return the last segment, or an empty string when there is none."""
        return self._segments[-1] if self._segments else ""

    def get_parent_path(self) -> ComponentPath:
        """Return the path without its last segment.

        The root and the empty path are their own parents.
        """
        if not self._segments:
            return self
        return ComponentPath.from_segments(self._segments[:-1], self._is_absolute)

    def get_parent_path_string(self) -> str:
        return self.get_parent_path().to_string()

    # Resolution --------------------------------------------------------------

    def form_absolute_path(self, base: ComponentPath) -> ComponentPath:
        """Resolve this path against ``base``.

        Args:
            base: Absolute path the relative one is anchored to.

        Returns:
            ComponentPath: ``self`` when it is already absolute, otherwise
            ``base`` followed by this path with ``..`` elements collapsed.

        Raises:
            PathMisuseError: If this path is relative and ``base`` is not absolute.
            OutOfRootError: If the leading ``..`` run climbs above the root.
        """
        if self._is_absolute:
            return self
        if not base.is_absolute:
            raise PathMisuseError(
                f"Cannot resolve {self.to_string()!r} against relative base {base.to_string()!r}"
            )

        segments = self._collapse(
            (*base.segments, *self._segments),
            True,
            self._render((*base.segments, *self._segments), True),
            validate=False,
        )
        return ComponentPath.from_segments(segments, True)

    def form_relative_path(self, other: ComponentPath) -> ComponentPath:
        """Return the relative path that leads from ``other`` to this path.

        Args:
            other: Absolute starting point.

        Returns:
            ComponentPath: Relative path made of ``..`` elements climbing out
            of ``other`` followed by the remaining segments of this path.

        Raises:
            PathMisuseError: If either path is relative.
        """
        if not (self._is_absolute and other.is_absolute):
            raise PathMisuseError(
                f"Both paths must be absolute to relate {self.to_string()!r} "
                f"to {other.to_string()!r}"
            )

        common = 0
        for mine, theirs in zip(self._segments, other.segments):
            if mine != theirs:
                break
            common += 1

        climb = (self.PARENT,) * (len(other.segments) - common)
        return ComponentPath.from_segments((*climb, *self._segments[common:]), False)

    def join(self, *names: str | ComponentPath) -> ComponentPath:
        """Append relative path text and normalize the result.

        An absolute argument replaces everything before it.

        Args:
            *names: Path text or paths to append in order.

        Returns:
            ComponentPath: Normalized joined path.

        Raises:
            InvalidCharacterError: If an appended element is not a legal name.
            OutOfRootError: If ``..`` climbs above an absolute root.
        """
        raw = self.to_string()
        for name in names:
            text = name.to_string() if isinstance(name, ComponentPath) else name
            if not raw or text.startswith(self.SEPARATOR):
                raw = text
            elif raw.endswith(self.SEPARATOR):
                raw = raw + text
            else:
                raw = f"{raw}{self.SEPARATOR}{text}"
        return ComponentPath(raw)

    # Dunder protocol ---------------------------------------------------------

    def __truediv__(self, other: str | ComponentPath) -> ComponentPath:
        if not isinstance(other, (str, ComponentPath)):
            return NotImplemented
        return self.join(other)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[object, tuple[tuple[str, ...], bool]]:
        return (ComponentPath.from_segments, (self._segments, self._is_absolute))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentPath):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ComponentPath({self.to_string()!r})"


def normalize(path: str) -> str:
    """Module-level shortcut for ``ComponentPath.normalize``."""
    return ComponentPath.normalize(path)


def split(path: str) -> tuple[str, str]:
    """Module-level shortcut for ``ComponentPath.split``."""
    return ComponentPath.split(path)


__all__ = ["ComponentPath", "normalize", "split"]
