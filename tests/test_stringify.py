# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering value printing helpers."""

from __future__ import annotations

import pytest
from rich.pretty import pretty_repr

from pyiko import PyikoSettings, pluralize, stringify
from pyiko.stringify import (
    SortedFrozenSet,
    SortedSet,
    format_for_diff,
    sorted_values,
    stringify_with,
    structural_form,
)


class Masked:
    """Object with a repr that hides its attributes."""

    def __init__(self, secret: str) -> None:
        self.secret = secret

    def __repr__(self) -> str:
        return "Masked(***)"


class Slotted:
    __slots__ = ("x", "y")

    def __init__(self) -> None:
        self.x = 1
        self.y = [2]


def test_stringify_is_compact() -> None:
    assert stringify([1, 2]) == "[1, 2]"
    assert stringify({"a": 1}) == "{'a': 1}"
    assert stringify("text") == "'text'"


def test_stringify_halves_depth_for_long_output() -> None:
    value = [list(range(50))] * 3
    assert stringify(value, max_length=50) == "[[...], [...], [...]]"


def test_stringify_with_settings() -> None:
    settings = PyikoSettings(stringify_max_depth=1)
    assert stringify_with([[1]], settings) == "[[...]]"


def test_format_for_diff_puts_items_on_separate_lines() -> None:
    assert format_for_diff([1, 2]).splitlines() == ["[", "    1,", "    2", "]"]


def test_structural_form_ignores_custom_repr() -> None:
    assert pretty_repr(structural_form(Masked("pw"))) == "Masked(secret='pw')"


def test_structural_form_reads_slots() -> None:
    assert pretty_repr(structural_form(Slotted())) == "Slotted(x=1, y=[2])"


def test_structural_form_recurses_into_containers() -> None:
    printed = pretty_repr(structural_form({"k": [Masked("a")]}))
    assert printed == "{'k': [Masked(secret='a')]}"


def test_structural_form_breaks_cycles() -> None:
    loop: list[object] = []
    loop.append(loop)
    assert pretty_repr(structural_form(loop)) == "[<cycle list>]"


def test_sorted_sets_iterate_in_order() -> None:
    assert list(SortedSet({3, 1, 2})) == [1, 2, 3]
    assert list(SortedFrozenSet({"b", "a"})) == ["a", "b"]
    assert pretty_repr(SortedSet({3, 1, 2})) == "{1, 2, 3}"
    assert SortedSet({1, 2}) == {2, 1}


def test_sorted_values_falls_back_to_repr_order() -> None:
    assert sorted_values({1, "a"}) == ["a", 1]


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, "zero items"), (1, "one item"), (3, "three items"), (13, "thirteen items"), (20, "20 items")],
)
def test_pluralize(count: int, expected: str) -> None:
    assert pluralize("item", count) == expected
