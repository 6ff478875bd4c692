# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotated rich text, diffs and renderers for readable assertion failures."""

from __future__ import annotations

from importlib import metadata

from .config import PyikoSettings, load_settings
from .diff import (
    DIFF_CONTEXT,
    NO_DIFF_MESSAGE,
    SIMILAR_MESSAGE,
    Hunk,
    compare_objects,
    diff,
    diff_lines,
    diff_patch,
    diff_strings,
    structured_patch,
)
from .errors import AssertionFailure, ConfigurationError
from .messages import ErrorMessageWriter, err_msg
from .reporting import (
    ColorScheme,
    create_assertion_error_renderer,
    create_html_renderer,
    render_ansi,
    render_plain,
)
from .rich_text import (
    DEFAULT_PRIORITIES,
    Annotation,
    AnnotationType,
    RenderCallbacks,
    RenderHandler,
    RichText,
    RichTextRenderer,
    RichTextWriter,
    concat,
    create_renderer,
    extend_priorities,
    highlight,
    highlight_trailing_whitespace,
    rich_text_writer,
)
from .stringify import pluralize, stringify

try:
    __version__ = metadata.version("pyiko")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "DEFAULT_PRIORITIES",
    "DIFF_CONTEXT",
    "NO_DIFF_MESSAGE",
    "SIMILAR_MESSAGE",
    "Annotation",
    "AnnotationType",
    "AssertionFailure",
    "ColorScheme",
    "ConfigurationError",
    "ErrorMessageWriter",
    "Hunk",
    "PyikoSettings",
    "RenderCallbacks",
    "RenderHandler",
    "RichText",
    "RichTextRenderer",
    "RichTextWriter",
    "__version__",
    "compare_objects",
    "concat",
    "create_assertion_error_renderer",
    "create_html_renderer",
    "create_renderer",
    "diff",
    "diff_lines",
    "diff_patch",
    "diff_strings",
    "err_msg",
    "extend_priorities",
    "highlight",
    "highlight_trailing_whitespace",
    "load_settings",
    "pluralize",
    "render_ansi",
    "render_plain",
    "rich_text_writer",
    "stringify",
    "structured_patch",
]
