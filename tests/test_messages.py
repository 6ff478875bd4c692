# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering assertion message helpers."""

from __future__ import annotations

from pyiko import PyikoSettings, err_msg, render_plain
from pyiko.messages import ErrorMessageWriter, e, matcher_hint, print_info, print_received, r
from pyiko.rich_text import Annotation, rich_text_writer


class Spacey:
    def __repr__(self) -> str:
        return "spacey  "


def test_matcher_hint_annotates_labels() -> None:
    writer = rich_text_writer()
    matcher_hint(writer, "to_be")
    value = writer.compose()
    assert value.text == "expect(received).to_be(expected)\n\n"
    assert value.annotations == (
        Annotation("received", 7, 15),
        Annotation("expected", 23, 31),
        Annotation("matcherHint", 0, 34),
    )


def test_matcher_hint_with_second_argument() -> None:
    value = err_msg().matcher_hint("to_be_close_to", "value", "target", "precision").compose()
    assert value.text == "expect(value).to_be_close_to(target, precision)\n\n"
    expected = [annotation for annotation in value.annotation_list() if annotation.type == "expected"]
    assert [value.text[a.start : a.end] for a in expected] == ["target", "precision"]


def test_received_values_are_stringified() -> None:
    value = err_msg().write("Received: ").received([1, "a"]).compose()
    assert value.text == "Received: [1, 'a']"
    assert value.annotations == (Annotation("received", 10, 18),)


def test_raw_values_are_written_verbatim() -> None:
    value = err_msg().expected("plain text", raw=True).received(3, raw=True).compose()
    assert value.text == "plain text3"
    assert [annotation.type for annotation in value.annotation_list()] == ["expected", "received"]


def test_trailing_whitespace_in_printed_values_is_highlighted() -> None:
    value = err_msg().received(Spacey()).compose()
    assert value.text == "spacey  "
    assert value.annotations == (Annotation("highlight", 6, 8), Annotation("received", 0, 8))


def test_fragments_print_values_inside_write() -> None:
    value = err_msg().write("Expected ", e(2), ", got ", r(3), ".").compose()
    assert value.text == "Expected 2, got 3."
    assert value.annotations == (Annotation("expected", 9, 10), Annotation("received", 16, 17))


def test_hint_info_and_diff_sections() -> None:
    value = err_msg().hint("h").info("i").diff("d").compose()
    assert value.annotations == (
        Annotation("hint", 0, 1),
        Annotation("info", 1, 2),
        Annotation("diff", 2, 3),
    )
    assert render_plain(value) == "hid"


def test_print_info_on_plain_writer() -> None:
    writer = rich_text_writer()
    print_info(writer, "note")
    assert writer.compose().annotations == (Annotation("info", 0, 4),)


def test_writer_settings_limit_printed_depth() -> None:
    shallow = PyikoSettings(stringify_max_depth=1)
    assert err_msg(shallow).received([[1]]).compose().text == "[[...]]"
    assert err_msg(shallow).write(e([[2]])).compose().text == "[[...]]"
    assert err_msg().received([[1]]).compose().text == "[[1]]"


def test_writer_settings_limit_printed_length() -> None:
    value = err_msg(PyikoSettings(stringify_max_length=5)).expected([[1, 2, 3]]).compose()
    assert value.text == "[[...]]"


def test_explicit_settings_on_plain_writer() -> None:
    writer = rich_text_writer()
    print_received(writer, [[1]], settings=PyikoSettings(stringify_max_depth=1))
    assert writer.compose().text == "[[...]]"


def test_error_message_writer_exposes_settings() -> None:
    settings = PyikoSettings(stringify_max_depth=3)
    assert ErrorMessageWriter(settings).settings is settings
    assert ErrorMessageWriter().settings == PyikoSettings()
