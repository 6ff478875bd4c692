# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Line and unified-patch diffs rendered as annotated rich text.

Two modes exist. Line mode prints every line of both inputs prefixed with
``"+ "``, ``"- "`` or two spaces. Patch mode groups changes into hunks with a
fixed context window and prints ``@@`` headers when a hunk does not span the
whole original. Both modes highlight trailing whitespace so it stays visible
once rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Any, Final

from .config import PyikoSettings
from .rich_text.highlight import highlight_trailing_whitespace
from .rich_text.model import AnnotationType, RichText, concat
from .rich_text.writer import RichTextWriter, rich_text_writer
from .stringify import SortedFrozenSet, SortedSet, format_for_diff, format_structure_for_diff, sorted_values

LOGGER = logging.getLogger(__name__)

DIFF_CONTEXT: Final[int] = 5
ADDED_MARK: Final[str] = "+"
REMOVED_MARK: Final[str] = "-"
CONTEXT_MARK: Final[str] = " "

NO_DIFF_MESSAGE: Final[RichText] = (
    rich_text_writer()
    .begin(AnnotationType.HINT)
    .write("Compared values have no visual difference.")
    .end(AnnotationType.HINT)
    .compose()
)

SIMILAR_MESSAGE: Final[RichText] = (
    rich_text_writer()
    .begin(AnnotationType.HINT)
    .write("Compared values serialize to the same structure.\n")
    .write("Printing internal object structure without calling `__repr__` instead.")
    .end(AnnotationType.HINT)
    .compose()
)

_NUMERIC: Final[tuple[type, ...]] = (bool, int, float, complex)


@dataclass(frozen=True, slots=True)
class Hunk:
    """Contiguous change region of a unified diff.

    Attributes:
        old_start: 1-based first line in the original, or the line before an
            empty range.
        old_lines: Number of original lines covered.
        new_start: 1-based first line in the revision.
        new_lines: Number of revised lines covered.
        lines: Hunk body; each entry starts with ``" "``, ``"+"`` or ``"-"``.
    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: tuple[str, ...]

    @property
    def header(self) -> str:
        """Return the ``@@ -a,b +c,d @@`` header for the hunk."""

        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"


@dataclass(frozen=True, slots=True)
class DiffPart:
    """Run of lines that were kept, added or removed together."""

    lines: tuple[str, ...]
    added: bool = False
    removed: bool = False


def split_lines(text: str) -> list[str]:
    """Return ``text`` split after each ``"\\n"``, keeping the terminators."""

    pieces = text.split("\n")
    lines = [f"{piece}\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _matcher(old: Sequence[str], new: Sequence[str]) -> SequenceMatcher[str]:
    return SequenceMatcher(None, old, new, autojunk=False)


def line_parts(a: str, b: str) -> list[DiffPart]:
    """Return the line-level edit script turning ``a`` into ``b``.

    Replaced regions are reported as a removed part followed by an added part.

    Args:
        a: Original text.
        b: Revised text.

    Returns:
        list[DiffPart]: Parts in output order.
    """

    old = split_lines(a)
    new = split_lines(b)
    parts: list[DiffPart] = []
    for tag, i1, i2, j1, j2 in _matcher(old, new).get_opcodes():
        if tag == "equal":
            parts.append(DiffPart(tuple(old[i1:i2])))
            continue
        if tag in {"delete", "replace"}:
            parts.append(DiffPart(tuple(old[i1:i2]), removed=True))
        if tag in {"insert", "replace"}:
            parts.append(DiffPart(tuple(new[j1:j2]), added=True))
    return parts


def diff_lines(a: str, b: str) -> RichText | None:
    """Return a line-mode diff of ``a`` and ``b``.

    Args:
        a: Original text.
        b: Revised text.

    Returns:
        RichText | None: Annotated diff, or ``None`` when no line changed.
    """

    writer = rich_text_writer()
    changed = False
    for part in line_parts(a, b):
        if part.added:
            kind, prefix = AnnotationType.ADDED, "+ "
        elif part.removed:
            kind, prefix = AnnotationType.REMOVED, "- "
        else:
            for line in part.lines:
                writer.write("  ", highlight_trailing_whitespace(_strip_newline(line)), "\n")
            continue
        changed = True
        for line in part.lines:
            writer.begin(kind).write(prefix, highlight_trailing_whitespace(_strip_newline(line)), "\n").end(kind)
    return writer.compose() if changed else None


def _ensure_trailing_newline(text: str) -> str:
    return text if text.endswith("\n") else f"{text}\n"


def structured_patch(a: str, b: str, context: int = DIFF_CONTEXT) -> tuple[Hunk, ...]:
    """Return unified-diff hunks between ``a`` and ``b``.

    Both inputs are normalised to end with a newline first.

    Args:
        a: Original text.
        b: Revised text.
        context: Unchanged lines kept around each change.

    Returns:
        tuple[Hunk, ...]: Hunks in order; empty when the texts match.
    """

    old = split_lines(_ensure_trailing_newline(a))
    new = split_lines(_ensure_trailing_newline(b))
    hunks: list[Hunk] = []
    for group in _matcher(old, new).get_grouped_opcodes(context):
        old_first, old_last = group[0][1], group[-1][2]
        new_first, new_last = group[0][3], group[-1][4]
        body: list[str] = []
        for tag, i1, i2, j1, j2 in group:
            if tag == "equal":
                body.extend(CONTEXT_MARK + _strip_newline(line) for line in old[i1:i2])
                continue
            if tag in {"delete", "replace"}:
                body.extend(REMOVED_MARK + _strip_newline(line) for line in old[i1:i2])
            if tag in {"insert", "replace"}:
                body.extend(ADDED_MARK + _strip_newline(line) for line in new[j1:j2])
        old_count = old_last - old_first
        new_count = new_last - new_first
        hunks.append(
            Hunk(
                old_start=old_first + 1 if old_count else old_first,
                old_lines=old_count,
                new_start=new_first + 1 if new_count else new_first,
                new_lines=new_count,
                lines=tuple(body),
            ),
        )
    return tuple(hunks)


def _write_patch_mark(writer: RichTextWriter, hunk: Hunk) -> None:
    (
        writer.begin(AnnotationType.PATCH_MARK)
        .write("@@ ")
        .begin(AnnotationType.REMOVED)
        .write(f"-{hunk.old_start},{hunk.old_lines}")
        .end(AnnotationType.REMOVED)
        .write(" ")
        .begin(AnnotationType.ADDED)
        .write(f"+{hunk.new_start},{hunk.new_lines}")
        .end(AnnotationType.ADDED)
        .write(" @@\n")
        .end(AnnotationType.PATCH_MARK)
    )


def diff_patch(a: str, b: str, context: int = DIFF_CONTEXT) -> RichText | None:
    """Return a unified-patch diff of ``a`` and ``b``.

    Args:
        a: Original text.
        b: Revised text.
        context: Unchanged lines kept around each change.

    Returns:
        RichText | None: Annotated hunks, or ``None`` when there are none.
    """

    hunks = structured_patch(a, b, context)
    if not hunks:
        return None
    total_old_lines = _ensure_trailing_newline(a).count("\n")
    writer = rich_text_writer()
    for hunk in hunks:
        if hunk.old_lines < total_old_lines:
            _write_patch_mark(writer, hunk)
        for line in hunk.lines:
            highlighted = highlight_trailing_whitespace(line)
            if line.startswith(ADDED_MARK):
                writer.begin(AnnotationType.ADDED).write(highlighted, "\n").end(AnnotationType.ADDED)
            elif line.startswith(REMOVED_MARK):
                writer.begin(AnnotationType.REMOVED).write(highlighted, "\n").end(AnnotationType.REMOVED)
            else:
                writer.write(highlighted, "\n")
    return writer.compose()


def diff_strings(a: str, b: str, expand: bool = False, *, context: int = DIFF_CONTEXT) -> RichText:
    """Return the diff of two strings, or :data:`NO_DIFF_MESSAGE`.

    Args:
        a: Original text.
        b: Revised text.
        expand: Use patch mode instead of line mode.
        context: Context window for patch mode.

    Returns:
        RichText: Annotated diff or the no-difference sentinel.
    """

    result = diff_patch(a, b, context) if expand else diff_lines(a, b)
    return NO_DIFF_MESSAGE if result is None else result


def compare_objects(
    a: Any,
    b: Any,
    expand: bool = False,
    *,
    settings: PyikoSettings | None = None,
) -> RichText:
    """Return the diff of the printed forms of ``a`` and ``b``.

    When printing fails, or both values print identically, they are printed
    again as raw attribute structures without depth limits. A difference that
    only shows up in that second form is prefixed with :data:`SIMILAR_MESSAGE`.
    Errors raised by the second attempt propagate.

    Args:
        a: Original value.
        b: Revised value.
        expand: Use patch mode instead of line mode.
        settings: Printing limits and context window.

    Returns:
        RichText: Annotated diff or the no-difference sentinel.
    """

    active = settings or PyikoSettings()
    message: RichText | None = None
    failed = False
    try:
        message = diff_strings(
            format_for_diff(a, active),
            format_for_diff(b, active),
            expand,
            context=active.diff_context,
        )
    except Exception as exc:
        LOGGER.debug("printing values for diff failed, retrying with structural form: %s", exc)
        failed = True

    if message is None or message is NO_DIFF_MESSAGE:
        message = diff_strings(
            format_structure_for_diff(a),
            format_structure_for_diff(b),
            expand,
            context=active.diff_context,
        )
        if message is not NO_DIFF_MESSAGE and not failed:
            message = concat(SIMILAR_MESSAGE, "\n\n", message)
    return message


def canonicalize(value: Any) -> Any:
    """Return ``value`` with unordered members sorted for deterministic printing.

    Mappings become plain dicts with sorted keys; sets and frozensets iterate
    in sorted order. Other values are returned unchanged.
    """

    if isinstance(value, Mapping):
        keys = sorted_values(value.keys())
        return {key: value[key] for key in keys}
    if isinstance(value, frozenset):
        return SortedFrozenSet(value)
    if isinstance(value, set):
        return SortedSet(value)
    return value


def _values_equal(a: Any, b: Any) -> bool:
    try:
        return bool(a == b)
    except Exception as exc:
        LOGGER.debug("equality check between %s and %s failed: %s", type(a).__name__, type(b).__name__, exc)
        return False


def diff(
    a: Any,
    b: Any,
    expand: bool = False,
    *,
    settings: PyikoSettings | None = None,
) -> RichText | None:
    """Return a diff suited to the types of ``a`` and ``b``.

    Args:
        a: Received value.
        b: Expected value.
        expand: Use patch mode instead of line mode.
        settings: Printing limits and context window.

    Returns:
        RichText | None: :data:`NO_DIFF_MESSAGE` for identical or equal
        values, ``None`` for numbers and booleans (no diff section should be
        shown), otherwise the annotated diff.
    """

    if a is b or _values_equal(a, b):
        return NO_DIFF_MESSAGE
    if isinstance(a, _NUMERIC) or isinstance(b, _NUMERIC):
        return None
    active = settings or PyikoSettings()
    if isinstance(a, str) and isinstance(b, str):
        LOGGER.debug("diffing strings in %s mode", "patch" if expand else "line")
        return diff_strings(a, b, expand, context=active.diff_context)
    return compare_objects(canonicalize(a), canonicalize(b), expand, settings=active)


__all__ = [
    "DIFF_CONTEXT",
    "NO_DIFF_MESSAGE",
    "SIMILAR_MESSAGE",
    "DiffPart",
    "Hunk",
    "canonicalize",
    "compare_objects",
    "diff",
    "diff_lines",
    "diff_patch",
    "diff_strings",
    "line_parts",
    "split_lines",
    "structured_patch",
]
