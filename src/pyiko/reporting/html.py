# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""HTML rendering of assertion messages for browser-based reporters."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Final

from ..rich_text.model import Annotation, AnnotationType
from ..rich_text.priorities import DEFAULT_PRIORITIES
from ..rich_text.render import RichTextRenderer, create_renderer

_CLASS_SUFFIX: Final[Mapping[str, str]] = {
    AnnotationType.ADDED.value: "added",
    AnnotationType.REMOVED.value: "removed",
}


class HtmlHandler:
    """Render handler wrapping each annotation in a ``<span>`` with a type class."""

    def __init__(self, class_prefix: str = "pyiko-") -> None:
        """Initialise the handler.

        Args:
            class_prefix: Prefix prepended to every CSS class name.
        """

        self._class_prefix = class_prefix

    def on_init(self) -> list[str]:
        """Return the empty root fragment list."""

        return []

    def on_enter(self, annotation: Annotation, parent: list[str]) -> list[str]:
        """Return a fresh fragment list for the contents of ``annotation``.

        Args:
            annotation: Annotation being opened.
            parent: Fragments of the enclosing scope.

        Returns:
            list[str]: Empty list collecting the annotation's fragments.
        """

        return []

    def on_exit(self, annotation: Annotation, child: list[str], parent: list[str]) -> None:
        """Append ``child`` to ``parent`` wrapped in a classed ``<span>``.

        Args:
            annotation: Annotation being closed; its type names the CSS class.
            child: Escaped fragments written inside the annotation.
            parent: Fragments of the enclosing scope.
        """

        css_class = html.escape(f"{self._class_prefix}{_CLASS_SUFFIX.get(annotation.type, annotation.type)}")
        parent.append(f'<span class="{css_class}">{"".join(child)}</span>')

    def on_text(self, text: str, state: list[str]) -> None:
        """Append ``text`` to ``state`` with HTML special characters escaped."""

        state.append(html.escape(text))

    def on_result(self, state: list[str]) -> str:
        """Return the joined root fragments.

        Args:
            state: Root fragment list.

        Returns:
            str: HTML markup for the whole message.
        """

        return "".join(state)


def create_html_renderer(
    class_prefix: str = "pyiko-",
    priorities: Mapping[str, int] | None = None,
) -> RichTextRenderer[list[str], str]:
    """Return a renderer producing escaped HTML with nested ``<span>`` elements.

    Args:
        class_prefix: Prefix prepended to every CSS class name.
        priorities: Priority table; :data:`DEFAULT_PRIORITIES` when omitted.

    Returns:
        RichTextRenderer[list[str], str]: Reusable renderer.
    """

    return create_renderer(DEFAULT_PRIORITIES if priorities is None else priorities, HtmlHandler(class_prefix))


__all__ = ["HtmlHandler", "create_html_renderer"]
