# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Priority tables ordering annotations that open at the same offset."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ..errors import ConfigurationError
from .model import AnnotationKind, AnnotationType, type_name

# Structural wrappers first so they become the outer scope, then diff lines,
# then values, and trailing-content highlights innermost.
DEFAULT_PRIORITIES: Final[Mapping[str, int]] = MappingProxyType(
    {
        AnnotationType.DIFF.value: 0,
        AnnotationType.MATCHER_HINT.value: 1,
        AnnotationType.PATCH_MARK.value: 2,
        AnnotationType.HINT.value: 3,
        AnnotationType.INFO.value: 4,
        AnnotationType.ADDED.value: 10,
        AnnotationType.REMOVED.value: 11,
        AnnotationType.RECEIVED.value: 20,
        AnnotationType.EXPECTED.value: 21,
        AnnotationType.HIGHLIGHT.value: 100,
    },
)


def extend_priorities(
    base: Mapping[str, int],
    extra: Mapping[AnnotationKind, int],
    *,
    replace: bool = False,
) -> Mapping[str, int]:
    """Return a new priority table with ``extra`` registered on top of ``base``.

    Args:
        base: Existing priority table, left untouched.
        extra: Additional annotation types and their priorities.
        replace: When ``True`` allow ``extra`` to override existing entries.

    Returns:
        Mapping[str, int]: Read-only merged table.

    Raises:
        ConfigurationError: If ``extra`` redefines a type and ``replace`` is ``False``.
    """

    merged = dict(base)
    for kind, priority in extra.items():
        name = type_name(kind)
        if not replace and name in merged:
            raise ConfigurationError(f"annotation type '{name}' already has priority {merged[name]}")
        merged[name] = int(priority)
    return MappingProxyType(merged)


__all__ = ["DEFAULT_PRIORITIES", "extend_priorities"]
