# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Annotated text values shared by the writer, differ and renderers.

A :class:`RichText` couples a flat string with an ordered tuple of
:class:`Annotation` ranges. Ranges use absolute, half-open offsets into the
text and may overlap or nest freely; resolving them into a linear output is
the renderer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Final

from ..errors import ConfigurationError


class AnnotationType(str, Enum):
    """Enumerate the annotation types produced by pyiko itself."""

    MATCHER_HINT = "matcherHint"
    HINT = "hint"
    INFO = "info"
    RECEIVED = "received"
    EXPECTED = "expected"
    HIGHLIGHT = "highlight"
    DIFF = "diff"
    PATCH_MARK = "patchMark"
    ADDED = "+"
    REMOVED = "-"


AnnotationKind = AnnotationType | str


def type_name(kind: AnnotationKind) -> str:
    """Return the plain string tag for ``kind``.

    Args:
        kind: Built-in :class:`AnnotationType` member or custom tag.

    Returns:
        str: Tag stored on :class:`Annotation` instances.
    """

    if isinstance(kind, AnnotationType):
        return kind.value
    return str(kind)


@dataclass(frozen=True, slots=True)
class Annotation:
    """Typed half-open range ``[start, end)`` over a rich-text payload."""

    type: str
    start: int
    end: int
    data: Any = None
    key: Any = None

    def shifted(self, offset: int) -> Annotation:
        """Return a copy of the annotation moved right by ``offset``."""

        if offset == 0:
            return self
        return replace(self, start=self.start + offset, end=self.end + offset)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the range covers no characters."""

        return self.start == self.end


@dataclass(frozen=True, slots=True)
class RichText:
    """Immutable text payload paired with its annotations.

    Attributes:
        text: Flattened content.
        annotations: Annotations in authoring order, ``None`` when empty.
    """

    text: str
    annotations: tuple[Annotation, ...] | None = None

    def __post_init__(self) -> None:
        annotations = self.annotations
        if annotations is None:
            return
        if not isinstance(annotations, tuple):
            annotations = tuple(annotations)
            object.__setattr__(self, "annotations", annotations)
        if not annotations:
            object.__setattr__(self, "annotations", None)
            return
        length = len(self.text)
        for annotation in annotations:
            if not 0 <= annotation.start <= annotation.end <= length:
                raise ConfigurationError(
                    f"annotation '{annotation.type}' [{annotation.start}, {annotation.end}) "
                    f"is outside text of length {length}",
                )

    @classmethod
    def plain(cls, text: str) -> RichText:
        """Return a rich-text value without annotations."""

        return cls(text)

    def annotation_list(self) -> tuple[Annotation, ...]:
        """Return the annotations, or an empty tuple when there are none."""

        return self.annotations or ()

    def __len__(self) -> int:
        return len(self.text)


EMPTY: Final[RichText] = RichText("")


def concat(*parts: str | RichText) -> RichText:
    """Join ``parts`` left to right into a single :class:`RichText`.

    Annotations carried by each part keep their relative ranges and are
    re-based by the length of the text preceding the part.

    Args:
        *parts: Plain strings or rich-text values.

    Returns:
        RichText: Concatenated text with every annotation re-based.
    """

    chunks: list[str] = []
    annotations: list[Annotation] = []
    offset = 0
    for part in parts:
        if isinstance(part, RichText):
            annotations.extend(annotation.shifted(offset) for annotation in part.annotation_list())
            text = part.text
        else:
            text = part
        chunks.append(text)
        offset += len(text)
    return RichText("".join(chunks), tuple(annotations) or None)


__all__ = [
    "EMPTY",
    "Annotation",
    "AnnotationKind",
    "AnnotationType",
    "RichText",
    "concat",
    "type_name",
]
