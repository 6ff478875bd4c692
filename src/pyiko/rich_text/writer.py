# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Imperative builder composing :class:`RichText` values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from ..errors import ConfigurationError
from .model import Annotation, AnnotationKind, RichText, type_name

WriterPart: TypeAlias = "str | RichText | Callable[[RichTextWriter], None]"


@dataclass(slots=True)
class _OpenAnnotation:
    """Annotation whose end offset is not known yet."""

    type: str
    start: int
    data: Any
    key: Any


class RichTextWriter:
    """Build annotated text left to right.

    The cursor is always the length of the text written so far. ``begin`` and
    ``end`` calls bracket regions; ``end`` must name the most recently opened
    type. Writers are single use: call :meth:`compose` once the message is
    complete and discard the writer.
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._cursor = 0
        self._open: list[_OpenAnnotation] = []
        self._finished: list[Annotation] = []

    @property
    def cursor(self) -> int:
        """Return the offset at which the next write lands."""

        return self._cursor

    @property
    def is_open(self) -> bool:
        """Return ``True`` while at least one annotation awaits its ``end``."""

        return bool(self._open)

    def write(self, *parts: WriterPart) -> RichTextWriter:
        """Append ``parts`` at the cursor.

        Args:
            *parts: Literal strings, rich-text values whose annotations are
                re-based onto the cursor, or callbacks invoked with this writer.

        Returns:
            RichTextWriter: ``self`` for chaining.

        Raises:
            TypeError: If a part is none of the supported kinds.
        """

        for part in parts:
            if isinstance(part, str):
                self._append(part)
            elif isinstance(part, RichText):
                offset = self._cursor
                self._finished.extend(annotation.shifted(offset) for annotation in part.annotation_list())
                self._append(part.text)
            elif callable(part):
                part(self)
            else:
                raise TypeError(f"cannot write {type(part).__name__!r} to a rich-text writer")
        return self

    def begin(self, kind: AnnotationKind, *, data: Any = None, key: Any = None) -> RichTextWriter:
        """Open an annotation of ``kind`` at the cursor.

        Args:
            kind: Annotation type tag.
            data: Opaque payload attached to the finished annotation.
            key: Opaque key attached to the finished annotation.

        Returns:
            RichTextWriter: ``self`` for chaining.
        """

        self._open.append(_OpenAnnotation(type_name(kind), self._cursor, data, key))
        return self

    def continue_(self, kind: AnnotationKind, *, data: Any = None, key: Any = None) -> RichTextWriter:
        """Resume a logically continued region; identical to :meth:`begin`."""

        return self.begin(kind, data=data, key=key)

    def end(self, kind: AnnotationKind) -> RichTextWriter:
        """Close the most recently opened annotation, which must be ``kind``.

        Args:
            kind: Annotation type tag expected at the top of the open stack.

        Returns:
            RichTextWriter: ``self`` for chaining.

        Raises:
            ConfigurationError: If nothing is open or the top has another type.
        """

        name = type_name(kind)
        if not self._open:
            raise ConfigurationError(f"end('{name}') without a matching begin")
        top = self._open[-1]
        if top.type != name:
            raise ConfigurationError(f"end('{name}') does not match open annotation '{top.type}'")
        self._open.pop()
        self._finished.append(Annotation(top.type, top.start, self._cursor, top.data, top.key))
        return self

    def compose(self) -> RichText:
        """Freeze the buffer into a :class:`RichText`.

        Returns:
            RichText: Text written so far with every finished annotation.

        Raises:
            ConfigurationError: If annotations are still open.
        """

        if self._open:
            pending = ", ".join(f"'{item.type}'" for item in self._open)
            raise ConfigurationError(f"cannot compose rich text with open annotations: {pending}")
        return RichText("".join(self._chunks), tuple(self._finished) or None)

    def _append(self, text: str) -> None:
        if text:
            self._chunks.append(text)
            self._cursor += len(text)


def rich_text_writer() -> RichTextWriter:
    """Return a new, empty :class:`RichTextWriter`."""

    return RichTextWriter()


__all__ = ["RichTextWriter", "WriterPart", "rich_text_writer"]
