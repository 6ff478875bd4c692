# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Colour scheme applied by the terminal renderer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from ..rich_text.model import AnnotationType

StyleSpec = str | None

# Annotation types styled directly from a scheme slot; ``highlight`` is
# resolved separately because it depends on the enclosing diff line.
SLOT_BY_TYPE: Final[Mapping[str, str]] = {
    AnnotationType.MATCHER_HINT.value: "matcher_hint",
    AnnotationType.HINT.value: "hint",
    AnnotationType.INFO.value: "info",
    AnnotationType.RECEIVED.value: "received",
    AnnotationType.EXPECTED.value: "expected",
    AnnotationType.DIFF.value: "diff",
    AnnotationType.PATCH_MARK.value: "diff_patch_mark",
    AnnotationType.ADDED.value: "diff_added",
    AnnotationType.REMOVED.value: "diff_removed",
}


class ColorScheme(BaseModel):
    """Rich style strings per annotation slot; ``None`` leaves text unstyled."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    matcher_hint: StyleSpec = "dim"
    hint: StyleSpec = "dim"
    info: StyleSpec = None
    received: StyleSpec = "red"
    expected: StyleSpec = "green"
    highlight: StyleSpec = "on red"
    diff: StyleSpec = None
    diff_patch_mark: StyleSpec = "dim"
    diff_added: StyleSpec = "green"
    diff_removed: StyleSpec = "red"
    diff_added_highlight: StyleSpec = "on green"
    diff_removed_highlight: StyleSpec = "on red"

    @field_validator("*")
    @classmethod
    def _validate_style(cls, value: StyleSpec) -> StyleSpec:
        """Reject strings rich cannot parse as a style."""

        if value is None:
            return value
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ValueError(f"invalid style {value!r}: {exc}") from exc
        return value

    def style_for(self, slot: str) -> Style | None:
        """Return the parsed style for ``slot`` or ``None`` when unset.

        Args:
            slot: Field name of the scheme.

        Returns:
            Style | None: Parsed rich style.
        """

        spec = getattr(self, slot)
        return None if spec is None else Style.parse(spec)


DEFAULT_COLOR_SCHEME: Final[ColorScheme] = ColorScheme()


__all__ = ["DEFAULT_COLOR_SCHEME", "SLOT_BY_TYPE", "ColorScheme", "StyleSpec"]
