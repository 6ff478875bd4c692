# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Value printing used to build failure messages and object diffs.

Printing is delegated to :func:`rich.pretty.pretty_repr`. The *structural*
variants bypass custom ``__repr__`` and ``__rich_repr__`` hooks and print the
attributes an object actually holds, which is what object diffs fall back to
when two unequal values print identically.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from functools import lru_cache
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType
from typing import Any, Final

from rich.pretty import pretty_repr

from .config import PyikoSettings

LOGGER = logging.getLogger(__name__)

MAX_LENGTH: Final[int] = 10_000
COMPACT_WIDTH: Final[int] = 1_000_000
DIFF_WIDTH: Final[int] = 80
_SCALARS: Final[tuple[type, ...]] = (str, bytes, bytearray, int, float, complex, bool, type(None))
_OPAQUE: Final[tuple[type, ...]] = (type, Enum, ModuleType, FunctionType, BuiltinFunctionType, MethodType)
_NUMBER_WORDS: Final[tuple[str, ...]] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
)


class _Structure:
    """Attribute snapshot printed by rich as ``ClassName(attr=value, ...)``."""

    __slots__ = ("_fields",)

    def __init__(self, fields: list[tuple[str, Any]]) -> None:
        self._fields = fields

    def __rich_repr__(self) -> Iterator[tuple[str, Any]]:
        yield from self._fields

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._fields)
        return f"{type(self).__name__}({body})"


class SortedSet(set):
    """Set iterating its members in sorted order so printing is deterministic."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        members = list(values)
        super().__init__(members)
        self._order = sorted_values(set(members))

    def __iter__(self) -> Iterator[Any]:
        return iter(self._order)


class SortedFrozenSet(frozenset):
    """Frozen counterpart of :class:`SortedSet`."""

    def __new__(cls, values: Iterable[Any] = ()) -> SortedFrozenSet:
        members = list(values)
        instance = super().__new__(cls, members)
        instance._order = sorted_values(set(members))
        return instance

    def __iter__(self) -> Iterator[Any]:
        return iter(self._order)


class _Reference:
    """Placeholder for a container already being printed."""

    __slots__ = ("_label",)

    def __init__(self, label: str) -> None:
        self._label = label

    def __repr__(self) -> str:
        return f"<cycle {self._label}>"


_SET_TYPES: Final[frozenset[type]] = frozenset({set, frozenset, SortedSet, SortedFrozenSet})


def sorted_values(values: Iterable[Any]) -> list[Any]:
    """Return ``values`` in natural order, or ordered by ``repr`` when unorderable."""

    items = list(values)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


@lru_cache(maxsize=None)
def _structure_type(name: str) -> type[_Structure]:
    """Return a :class:`_Structure` subclass displayed as ``name``."""

    return type(name, (_Structure,), {"__slots__": ()})


def _object_fields(value: object) -> list[tuple[str, Any]] | None:
    """Return the instance attributes of ``value`` or ``None`` when it has none."""

    fields: dict[str, Any] = {}
    slots: list[str] = []
    for cls in type(value).__mro__:
        declared = cls.__dict__.get("__slots__", ())
        slots.extend([declared] if isinstance(declared, str) else declared)
    for name in slots:
        if name in {"__dict__", "__weakref__"} or not hasattr(value, name):
            continue
        fields[name] = getattr(value, name)
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        fields.update(instance_dict)
    return list(fields.items()) or None


def _to_structure(value: Any, active: set[int]) -> Any:
    """Return ``value`` rebuilt so printing never calls custom representations."""

    if isinstance(value, _SCALARS + _OPAQUE):
        return value
    marker = id(value)
    if marker in active:
        return _Reference(type(value).__name__)
    active.add(marker)
    try:
        if isinstance(value, dict):
            return {key: _to_structure(item, active) for key, item in value.items()}
        if isinstance(value, list):
            return [_to_structure(item, active) for item in value]
        if isinstance(value, tuple) and not hasattr(value, "_fields"):
            return tuple(_to_structure(item, active) for item in value)
        if type(value) in _SET_TYPES:
            return type(value)(_to_structure(item, active) for item in value)
        fields = _object_fields(value)
        if fields is None:
            return value
        structure_type = _structure_type(type(value).__name__)
        return structure_type([(name, _to_structure(item, active)) for name, item in fields])
    finally:
        active.discard(marker)


def structural_form(value: Any) -> Any:
    """Return a printable copy of ``value`` that ignores custom ``__repr__`` hooks.

    Args:
        value: Arbitrary value.

    Returns:
        Any: Built-in containers and attribute snapshots mirroring ``value``.
    """

    return _to_structure(value, set())


def stringify(value: Any, max_depth: int = 10, *, max_length: int = MAX_LENGTH) -> str:
    """Return a compact single-line representation of ``value``.

    When the output reaches ``max_length`` characters the value is printed
    again with half the depth until it fits or the depth reaches one.

    Args:
        value: Value to print.
        max_depth: Maximum container nesting printed before eliding.
        max_length: Length triggering a shallower re-print.

    Returns:
        str: Printed value.
    """

    try:
        result = pretty_repr(value, max_width=COMPACT_WIDTH, max_depth=max_depth)
    except Exception as exc:  # pragma: no cover - rich reports most repr errors inline
        LOGGER.debug("repr of %s failed, printing structure instead: %s", type(value).__name__, exc)
        result = pretty_repr(structural_form(value), max_width=COMPACT_WIDTH, max_depth=max_depth)
    if len(result) >= max_length and max_depth > 1:
        return stringify(value, max_depth // 2, max_length=max_length)
    return result


def stringify_with(value: Any, settings: PyikoSettings) -> str:
    """Return :func:`stringify` output honouring ``settings`` limits."""

    return stringify(value, settings.stringify_max_depth, max_length=settings.stringify_max_length)


def format_for_diff(value: Any, settings: PyikoSettings | None = None) -> str:
    """Return a one-item-per-line representation suited to line diffs.

    Args:
        value: Value to print.
        settings: Limits to honour; defaults apply when omitted.

    Returns:
        str: Expanded representation using the value's own ``__repr__``.
    """

    active = settings or PyikoSettings()
    return pretty_repr(value, max_width=DIFF_WIDTH, max_depth=active.stringify_max_depth, expand_all=True)


def format_structure_for_diff(value: Any) -> str:
    """Return the expanded, untruncated structural representation of ``value``."""

    return pretty_repr(structural_form(value), max_width=DIFF_WIDTH, expand_all=True)


def pluralize(word: str, count: int) -> str:
    """Return ``count`` spelled out followed by ``word``, pluralised when needed.

    Args:
        word: Singular noun.
        count: Quantity; 0 to 13 are written as words.

    Returns:
        str: Phrase such as ``"three items"`` or ``"one item"``.
    """

    number = _NUMBER_WORDS[count] if 0 <= count < len(_NUMBER_WORDS) else str(count)
    phrase = f"{number} {word}"
    return phrase if count == 1 else f"{phrase}s"


__all__ = [
    "MAX_LENGTH",
    "SortedFrozenSet",
    "SortedSet",
    "format_for_diff",
    "format_structure_for_diff",
    "pluralize",
    "sorted_values",
    "stringify",
    "stringify_with",
    "structural_form",
]
