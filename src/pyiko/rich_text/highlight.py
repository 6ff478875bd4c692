# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Regex-driven highlight annotations for otherwise invisible content."""

from __future__ import annotations

import re
from typing import Final

from .model import Annotation, AnnotationKind, AnnotationType, RichText, type_name

TRAILING_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[^\S\n]+$", re.MULTILINE)


def highlight(
    text: str,
    pattern: re.Pattern[str] | str = TRAILING_WHITESPACE,
    kind: AnnotationKind = AnnotationType.HIGHLIGHT,
) -> RichText:
    """Return ``text`` with an annotation over every match of ``pattern``.

    String patterns are compiled in multiline mode so ``^``/``$`` anchor at
    line boundaries. Empty matches are skipped.

    Args:
        text: Raw text to scan.
        pattern: Compiled or string regular expression.
        kind: Annotation type for the matches.

    Returns:
        RichText: ``text`` annotated with one range per non-empty match.
    """

    regex = re.compile(pattern, re.MULTILINE) if isinstance(pattern, str) else pattern
    name = type_name(kind)
    annotations = tuple(
        Annotation(name, match.start(), match.end()) for match in regex.finditer(text) if match.end() > match.start()
    )
    return RichText(text, annotations or None)


def highlight_trailing_whitespace(text: str) -> RichText:
    """Return ``text`` with trailing whitespace on each line highlighted."""

    return highlight(text)


__all__ = ["TRAILING_WHITESPACE", "highlight", "highlight_trailing_whitespace"]
