# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for composing assertion failure messages.

Matchers build their messages with :class:`ErrorMessageWriter`, a
:class:`RichTextWriter` with shortcuts for the recurring sections: the
``expect(received).matcher(expected)`` hint, free-form hints, printed values
and diffs. Values are printed with :func:`pyiko.stringify.stringify_with`, honouring
the writer's :class:`~pyiko.config.PyikoSettings`, and their trailing
whitespace highlighted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .config import PyikoSettings
from .rich_text.highlight import highlight_trailing_whitespace
from .rich_text.model import AnnotationType
from .rich_text.writer import RichTextWriter, WriterPart
from .stringify import stringify_with

WriterFragment = Callable[[RichTextWriter], None]


def matcher_hint(
    writer: RichTextWriter,
    matcher_name: str,
    received: str = "received",
    expected: str = "expected",
    second_argument: str | None = None,
) -> None:
    """Write ``expect(received).matcher_name(expected)`` followed by a blank line.

    Args:
        writer: Destination writer.
        matcher_name: Name printed after ``expect(...)``.
        received: Label for the received value.
        expected: Label for the expected value.
        second_argument: Optional label for a second matcher argument.
    """

    (
        writer.begin(AnnotationType.MATCHER_HINT)
        .write("expect(")
        .begin(AnnotationType.RECEIVED)
        .write(received)
        .end(AnnotationType.RECEIVED)
        .write(f").{matcher_name}(")
        .begin(AnnotationType.EXPECTED)
        .write(expected)
        .end(AnnotationType.EXPECTED)
    )
    if second_argument is not None:
        writer.write(", ").begin(AnnotationType.EXPECTED).write(second_argument).end(AnnotationType.EXPECTED)
    writer.write(")", "\n\n").end(AnnotationType.MATCHER_HINT)


def _settings_for(writer: RichTextWriter, settings: PyikoSettings | None) -> PyikoSettings:
    if settings is not None:
        return settings
    if isinstance(writer, ErrorMessageWriter):
        return writer.settings
    return PyikoSettings()


def _printed(value: Any, raw: bool, settings: PyikoSettings) -> WriterPart:
    if raw:
        return value if isinstance(value, str) else str(value)
    return highlight_trailing_whitespace(stringify_with(value, settings))


def print_received(
    writer: RichTextWriter,
    value: Any,
    raw: bool = False,
    settings: PyikoSettings | None = None,
) -> None:
    """Write ``value`` inside a ``received`` annotation.

    Args:
        writer: Destination writer.
        value: Value to print.
        raw: Write ``str(value)`` instead of its printed representation.
        settings: Printing limits; an :class:`ErrorMessageWriter`'s own
            settings, or the defaults, when omitted.
    """

    printed = _printed(value, raw, _settings_for(writer, settings))
    writer.begin(AnnotationType.RECEIVED).write(printed).end(AnnotationType.RECEIVED)


def print_expected(
    writer: RichTextWriter,
    value: Any,
    raw: bool = False,
    settings: PyikoSettings | None = None,
) -> None:
    """Write ``value`` inside an ``expected`` annotation; see :func:`print_received`."""

    printed = _printed(value, raw, _settings_for(writer, settings))
    writer.begin(AnnotationType.EXPECTED).write(printed).end(AnnotationType.EXPECTED)


def print_info(writer: RichTextWriter, text: str) -> None:
    """Write ``text`` inside an ``info`` annotation."""

    writer.begin(AnnotationType.INFO).write(text).end(AnnotationType.INFO)


class _ValueFragment:
    """Writer callback printing a received or expected value."""

    __slots__ = ("_printer", "_raw", "_value")

    def __init__(self, printer: Callable[[RichTextWriter, Any, bool], None], value: Any, raw: bool) -> None:
        self._printer = printer
        self._value = value
        self._raw = raw

    def __call__(self, writer: RichTextWriter) -> None:
        self._printer(writer, self._value, self._raw)


def r(value: Any, raw: bool = False) -> WriterFragment:
    """Return a writer fragment printing ``value`` as the received value."""

    return _ValueFragment(print_received, value, raw)


def e(value: Any, raw: bool = False) -> WriterFragment:
    """Return a writer fragment printing ``value`` as the expected value."""

    return _ValueFragment(print_expected, value, raw)


class ErrorMessageWriter(RichTextWriter):
    """Rich-text writer with shortcuts for assertion message sections."""

    def __init__(self, settings: PyikoSettings | None = None) -> None:
        """Initialise an empty writer.

        Args:
            settings: Limits used when printing received and expected values.
        """

        super().__init__()
        self._settings = settings or PyikoSettings()

    @property
    def settings(self) -> PyikoSettings:
        """Return the settings used to print values."""

        return self._settings

    def matcher_hint(
        self,
        matcher_name: str,
        received: str = "received",
        expected: str = "expected",
        second_argument: str | None = None,
    ) -> ErrorMessageWriter:
        """Write the matcher hint line; see :func:`matcher_hint`."""

        matcher_hint(self, matcher_name, received, expected, second_argument)
        return self

    def hint(self, *parts: WriterPart) -> ErrorMessageWriter:
        """Write ``parts`` inside a ``hint`` annotation."""

        self.begin(AnnotationType.HINT).write(*parts).end(AnnotationType.HINT)
        return self

    def info(self, *parts: WriterPart) -> ErrorMessageWriter:
        """Write ``parts`` inside an ``info`` annotation."""

        self.begin(AnnotationType.INFO).write(*parts).end(AnnotationType.INFO)
        return self

    def diff(self, *parts: WriterPart) -> ErrorMessageWriter:
        """Write ``parts`` inside a ``diff`` annotation."""

        self.begin(AnnotationType.DIFF).write(*parts).end(AnnotationType.DIFF)
        return self

    def received(self, value: Any, raw: bool = False) -> ErrorMessageWriter:
        """Write the received ``value``; ``raw`` skips stringification."""

        print_received(self, value, raw, self._settings)
        return self

    def expected(self, value: Any, raw: bool = False) -> ErrorMessageWriter:
        """Write the expected ``value``; ``raw`` skips stringification."""

        print_expected(self, value, raw, self._settings)
        return self


def err_msg(settings: PyikoSettings | None = None) -> ErrorMessageWriter:
    """Return a new :class:`ErrorMessageWriter` printing values with ``settings``."""

    return ErrorMessageWriter(settings)


__all__ = [
    "ErrorMessageWriter",
    "WriterFragment",
    "e",
    "err_msg",
    "matcher_hint",
    "print_expected",
    "print_info",
    "print_received",
    "r",
]
