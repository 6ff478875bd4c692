# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotated text model, writer, highlighter and priority-based renderer."""

from .highlight import TRAILING_WHITESPACE, highlight, highlight_trailing_whitespace
from .model import EMPTY, Annotation, AnnotationKind, AnnotationType, RichText, concat, type_name
from .priorities import DEFAULT_PRIORITIES, extend_priorities
from .render import RenderCallbacks, RenderHandler, RichTextRenderer, create_renderer
from .writer import RichTextWriter, WriterPart, rich_text_writer

__all__ = [
    "DEFAULT_PRIORITIES",
    "EMPTY",
    "TRAILING_WHITESPACE",
    "Annotation",
    "AnnotationKind",
    "AnnotationType",
    "RenderCallbacks",
    "RenderHandler",
    "RichText",
    "RichTextRenderer",
    "RichTextWriter",
    "WriterPart",
    "concat",
    "create_renderer",
    "extend_priorities",
    "highlight",
    "highlight_trailing_whitespace",
    "rich_text_writer",
    "type_name",
]
