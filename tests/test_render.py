# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the priority-based renderer."""

from __future__ import annotations

import pytest

from pyiko import ConfigurationError
from pyiko.rich_text import (
    DEFAULT_PRIORITIES,
    Annotation,
    RenderCallbacks,
    RichText,
    create_renderer,
    extend_priorities,
    rich_text_writer,
)


def test_lower_priority_opens_first_and_closes_last(recorder) -> None:
    value = RichText("abc", (Annotation("b", 0, 3), Annotation("a", 0, 3)))
    events = create_renderer({"a": 1, "b": 2}, recorder)(value)
    assert events == [
        ("enter", "a"),
        ("enter", "b"),
        ("text", "abc", "root/a/b"),
        ("exit", "b"),
        ("exit", "a"),
    ]


def test_equal_priorities_follow_insertion_order(recorder) -> None:
    value = RichText("x", (Annotation("second", 0, 1), Annotation("first", 0, 1)))
    events = create_renderer({"first": 1, "second": 1}, recorder)(value)
    assert events[:2] == [("enter", "second"), ("enter", "first")]


def test_unknown_priority_type_fails_before_rendering(recorder) -> None:
    value = RichText("x", (Annotation("mystery", 0, 1),))
    renderer = create_renderer({"known": 1}, recorder)
    with pytest.raises(ConfigurationError, match="mystery"):
        renderer(value)
    assert recorder.events == []


def test_crossing_ranges_are_split(recorder) -> None:
    value = RichText("abcd", (Annotation("a", 0, 3), Annotation("b", 1, 4)))
    events = create_renderer({"a": 1, "b": 2}, recorder)(value)
    assert events == [
        ("enter", "a"),
        ("text", "a", "root/a"),
        ("enter", "b"),
        ("text", "bc", "root/a/b"),
        ("exit", "b"),
        ("exit", "a"),
        ("enter", "b"),
        ("text", "d", "root/b"),
        ("exit", "b"),
    ]


def test_nested_ranges_ending_together(recorder) -> None:
    value = RichText("ab", (Annotation("inner", 1, 2), Annotation("outer", 0, 2)))
    events = create_renderer({"outer": 1, "inner": 2}, recorder)(value)
    assert events == [
        ("enter", "outer"),
        ("text", "a", "root/outer"),
        ("enter", "inner"),
        ("text", "b", "root/outer/inner"),
        ("exit", "inner"),
        ("exit", "outer"),
    ]


def test_empty_range_is_entered_and_exited_in_place(recorder) -> None:
    value = RichText("ab", (Annotation("mark", 1, 1),))
    events = create_renderer({"mark": 1}, recorder)(value)
    assert events == [
        ("text", "a", "root"),
        ("enter", "mark"),
        ("exit", "mark"),
        ("text", "b", "root"),
    ]


def test_plain_text_goes_to_root(recorder) -> None:
    events = create_renderer({}, recorder)(RichText("hello"))
    assert events == [("text", "hello", "root")]


def test_render_callbacks_adapter_builds_bracketed_output() -> None:
    renderer = create_renderer(
        DEFAULT_PRIORITIES,
        RenderCallbacks(
            init=list,
            enter=lambda annotation, parent: [f"<{annotation.type}>"],
            exit=lambda annotation, child, parent: parent.extend([*child, f"</{annotation.type}>"]),
            text=lambda text, state: state.append(text),
            result="".join,
        ),
    )
    value = rich_text_writer().begin("diff").write("- a\n").end("diff").compose()
    assert renderer(value) == "<diff>- a\n</diff>"


def test_renderer_is_reusable_and_idempotent(recorder) -> None:
    value = RichText("ab", (Annotation("x", 0, 1),))
    renderer = create_renderer({"x": 1}, recorder)
    first = renderer(value)
    recorder.events.clear()
    assert renderer(value) == first


def test_extend_priorities_registers_custom_types() -> None:
    table = extend_priorities(DEFAULT_PRIORITIES, {"note": 50})
    assert table["note"] == 50
    assert "note" not in DEFAULT_PRIORITIES


def test_extend_priorities_rejects_redefinition() -> None:
    with pytest.raises(ConfigurationError, match="already has priority"):
        extend_priorities(DEFAULT_PRIORITIES, {"diff": 7})
    assert extend_priorities(DEFAULT_PRIORITIES, {"diff": 7}, replace=True)["diff"] == 7


def test_default_priorities_put_structure_outside_highlights() -> None:
    assert DEFAULT_PRIORITIES["diff"] < DEFAULT_PRIORITIES["+"] < DEFAULT_PRIORITIES["highlight"]
    assert DEFAULT_PRIORITIES["matcherHint"] < DEFAULT_PRIORITIES["received"]
