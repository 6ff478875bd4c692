# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: colour schemes and terminal, plain and HTML renderers."""

from .colors import DEFAULT_COLOR_SCHEME, ColorScheme
from .html import HtmlHandler, create_html_renderer
from .terminal import (
    PlainHandler,
    Scope,
    TerminalHandler,
    TextState,
    create_assertion_error_renderer,
    render_ansi,
    render_plain,
)

__all__ = [
    "DEFAULT_COLOR_SCHEME",
    "ColorScheme",
    "HtmlHandler",
    "PlainHandler",
    "Scope",
    "TerminalHandler",
    "TextState",
    "create_assertion_error_renderer",
    "create_html_renderer",
    "render_ansi",
    "render_plain",
]
