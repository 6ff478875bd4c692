# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the rich-text writer."""

from __future__ import annotations

import pytest

from pyiko import ConfigurationError
from pyiko.rich_text import Annotation, AnnotationType, RichText, RichTextWriter, rich_text_writer


def test_balanced_regions_produce_one_annotation_each() -> None:
    value = (
        rich_text_writer()
        .begin("outer")
        .write("a")
        .begin("inner")
        .write("b")
        .end("inner")
        .begin("inner")
        .write("c")
        .end("inner")
        .end("outer")
        .compose()
    )
    assert value.text == "abc"
    assert value.annotations == (
        Annotation("inner", 1, 2),
        Annotation("inner", 2, 3),
        Annotation("outer", 0, 3),
    )


def test_compose_without_annotations_returns_none() -> None:
    assert rich_text_writer().write("plain").compose() == RichText("plain", None)


def test_end_on_empty_stack_fails() -> None:
    with pytest.raises(ConfigurationError, match="without a matching begin"):
        rich_text_writer().end("x")


def test_end_with_mismatched_type_fails() -> None:
    writer = rich_text_writer().begin("a").begin("b")
    with pytest.raises(ConfigurationError, match="does not match"):
        writer.end("a")


def test_compose_with_open_annotation_fails() -> None:
    writer = rich_text_writer().begin("a").write("x")
    assert writer.is_open
    with pytest.raises(ConfigurationError, match="'a'"):
        writer.compose()


def test_write_rich_text_rebases_ranges() -> None:
    fragment = RichText("cd", (Annotation("x", 0, 1),))
    value = rich_text_writer().write("ab", fragment).compose()
    assert value.text == "abcd"
    assert value.annotations == (Annotation("x", 2, 3),)


def test_write_invokes_callbacks_immediately() -> None:
    def fragment(writer: RichTextWriter) -> None:
        writer.begin("note").write(str(writer.cursor)).end("note")

    value = rich_text_writer().write("ab", fragment, "!").compose()
    assert value.text == "ab2!"
    assert value.annotations == (Annotation("note", 2, 3),)


def test_write_rejects_unsupported_parts() -> None:
    with pytest.raises(TypeError, match="int"):
        rich_text_writer().write(42)  # type: ignore[arg-type]


def test_continue_behaves_like_begin() -> None:
    value = rich_text_writer().continue_("x").write("a").end("x").compose()
    assert value.annotations == (Annotation("x", 0, 1),)


def test_enum_kinds_are_stored_as_plain_strings() -> None:
    value = rich_text_writer().begin(AnnotationType.ADDED).write("a").end("+").compose()
    annotation = value.annotation_list()[0]
    assert annotation.type == "+"
    assert type(annotation.type) is str


def test_begin_attaches_payload() -> None:
    value = rich_text_writer().begin("link", data="https://example.org", key=7).write("x").end("link").compose()
    assert value.annotations == (Annotation("link", 0, 1, "https://example.org", 7),)


def test_empty_region_is_recorded() -> None:
    value = rich_text_writer().write("a").begin("mark").end("mark").write("b").compose()
    assert value.annotations == (Annotation("mark", 1, 1),)
