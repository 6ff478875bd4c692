# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal rendering of assertion messages through Rich."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntFlag

from rich.style import Style
from rich.text import Text

from ..config import PyikoSettings
from ..rich_text.model import Annotation, AnnotationType, RichText
from ..rich_text.priorities import DEFAULT_PRIORITIES
from ..rich_text.render import RichTextRenderer, create_renderer
from ..runtime.console import ANSI_COLOR_SYSTEM, get_console_manager, resolve_color
from .colors import DEFAULT_COLOR_SCHEME, SLOT_BY_TYPE, ColorScheme


class Scope(IntFlag):
    """Annotation scopes enclosing the text being rendered."""

    NONE = 0
    MATCHER_HINT = 1
    INFO = 1 << 1
    HINT = 1 << 2
    RECEIVED = 1 << 3
    EXPECTED = 1 << 4
    HIGHLIGHT = 1 << 5
    DIFF = 1 << 6
    DIFF_PATCH_MARK = 1 << 7
    DIFF_ADDED = 1 << 8
    DIFF_REMOVED = 1 << 9


_SCOPE_BY_TYPE: dict[str, Scope] = {
    AnnotationType.MATCHER_HINT.value: Scope.MATCHER_HINT,
    AnnotationType.INFO.value: Scope.INFO,
    AnnotationType.HINT.value: Scope.HINT,
    AnnotationType.RECEIVED.value: Scope.RECEIVED,
    AnnotationType.EXPECTED.value: Scope.EXPECTED,
    AnnotationType.HIGHLIGHT.value: Scope.HIGHLIGHT,
    AnnotationType.DIFF.value: Scope.DIFF,
    AnnotationType.PATCH_MARK.value: Scope.DIFF_PATCH_MARK,
    AnnotationType.ADDED.value: Scope.DIFF_ADDED,
    AnnotationType.REMOVED.value: Scope.DIFF_REMOVED,
}


@dataclass(slots=True)
class TextState:
    """Style accumulated for one open annotation and the text it produced."""

    scopes: Scope = Scope.NONE
    style: Style | None = None
    result: Text = field(default_factory=Text)


class TerminalHandler:
    """Render handler producing :class:`rich.text.Text` styled by a :class:`ColorScheme`.

    Styles of nested annotations are combined, so a highlight inside a
    received value keeps the value's colour. Unknown annotation types inherit
    their parent's style unchanged.
    """

    def __init__(self, colors: ColorScheme = DEFAULT_COLOR_SCHEME) -> None:
        """Initialise the handler.

        Args:
            colors: Scheme providing the style of each annotation slot.
        """

        self._colors = colors

    def on_init(self) -> TextState:
        """Return the unstyled root state."""

        return TextState()

    def on_enter(self, annotation: Annotation, parent: TextState) -> TextState:
        """Return a state combining the parent style with the style of ``annotation``.

        Args:
            annotation: Annotation being opened.
            parent: State of the enclosing scope.

        Returns:
            TextState: State whose text inherits the combined style.
        """

        scope = _SCOPE_BY_TYPE.get(annotation.type, Scope.NONE)
        own = self._style_for(annotation.type, parent.scopes)
        if own is None:
            style = parent.style
        elif parent.style is None:
            style = own
        else:
            style = parent.style + own
        return TextState(scopes=parent.scopes | scope, style=style)

    def on_exit(self, annotation: Annotation, child: TextState, parent: TextState) -> None:
        """Append the styled text of ``child`` to ``parent``."""

        parent.result.append_text(child.result)

    def on_text(self, text: str, state: TextState) -> None:
        """Append ``text`` to ``state`` with the scope style."""

        state.result.append(text, style=state.style)

    def on_result(self, state: TextState) -> Text:
        """Return the styled text accumulated at the root."""

        return state.result

    def _style_for(self, kind: str, enclosing: Scope) -> Style | None:
        """Return the style of ``kind`` given the scopes already open, or ``None``."""

        if kind == AnnotationType.HIGHLIGHT.value:
            if enclosing & Scope.DIFF_ADDED:
                return self._colors.style_for("diff_added_highlight")
            if enclosing & Scope.DIFF_REMOVED:
                return self._colors.style_for("diff_removed_highlight")
            return self._colors.style_for("highlight")
        slot = SLOT_BY_TYPE.get(kind)
        return None if slot is None else self._colors.style_for(slot)


def create_assertion_error_renderer(
    colors: ColorScheme | None = None,
    priorities: Mapping[str, int] | None = None,
) -> RichTextRenderer[TextState, Text]:
    """Return a renderer turning assertion messages into styled Rich text.

    Args:
        colors: Colour scheme; the default scheme when omitted.
        priorities: Priority table; :data:`DEFAULT_PRIORITIES` when omitted.

    Returns:
        RichTextRenderer[TextState, Text]: Reusable renderer.
    """

    return create_renderer(
        DEFAULT_PRIORITIES if priorities is None else priorities,
        TerminalHandler(colors or DEFAULT_COLOR_SCHEME),
    )


def render_ansi(
    value: RichText,
    *,
    color: bool | None = None,
    colors: ColorScheme | None = None,
    priorities: Mapping[str, int] | None = None,
    settings: PyikoSettings | None = None,
) -> str:
    """Return ``value`` rendered to a string with ANSI escape sequences.

    Segments are styled one by one instead of printed through the console, so
    tabs, carriage returns and long lines reach the output unchanged.

    Args:
        value: Message to render.
        color: Emit colour codes; falls back to ``settings.color`` and then
            to TTY detection when ``None``.
        colors: Colour scheme; the default scheme when omitted.
        priorities: Priority table; :data:`DEFAULT_PRIORITIES` when omitted.
        settings: Settings consulted when ``color`` is ``None``.

    Returns:
        str: Rendered message; identical to ``value.text`` without colour.
    """

    if color is None and settings is not None:
        color = settings.color
    enabled = resolve_color(color)
    text = create_assertion_error_renderer(colors, priorities)(value)
    console = get_console_manager().get(color=enabled)
    color_system = ANSI_COLOR_SYSTEM if enabled else None
    return "".join(
        segment.style.render(segment.text, color_system=color_system) if segment.style else segment.text
        for segment in text.render(console)
    )


class PlainHandler:
    """Render handler concatenating text and ignoring every annotation."""

    def on_init(self) -> list[str]:
        """Return the empty root fragment list."""

        return []

    def on_enter(self, annotation: Annotation, parent: list[str]) -> list[str]:
        """Return a fresh fragment list; annotations add no markup."""

        return []

    def on_exit(self, annotation: Annotation, child: list[str], parent: list[str]) -> None:
        """Append the fragments of ``child`` to ``parent``."""

        parent.extend(child)

    def on_text(self, text: str, state: list[str]) -> None:
        """Append ``text`` to ``state`` unchanged."""

        state.append(text)

    def on_result(self, state: list[str]) -> str:
        """Return the joined root fragments."""

        return "".join(state)


def render_plain(value: RichText, priorities: Mapping[str, int] | None = None) -> str:
    """Return the text of ``value`` after validating its annotation types."""

    return create_renderer(DEFAULT_PRIORITIES if priorities is None else priorities, PlainHandler())(value)


__all__ = [
    "PlainHandler",
    "Scope",
    "TerminalHandler",
    "TextState",
    "create_assertion_error_renderer",
    "render_ansi",
    "render_plain",
]
