# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from pyiko.rich_text import Annotation


@dataclass
class RecordingHandler:
    """Render handler recording every callback as a tuple.

    States are slash-separated paths of the open annotation types so tests
    can see which scope received each text slice.
    """

    events: list[tuple[str, ...]] = field(default_factory=list)

    def on_init(self) -> str:
        return "root"

    def on_enter(self, annotation: Annotation, parent: str) -> str:
        self.events.append(("enter", annotation.type))
        return f"{parent}/{annotation.type}"

    def on_exit(self, annotation: Annotation, child: str, parent: str) -> None:
        self.events.append(("exit", annotation.type))

    def on_text(self, text: str, state: str) -> None:
        self.events.append(("text", text, state))

    def on_result(self, state: str) -> list[tuple[str, ...]]:
        return list(self.events)


@pytest.fixture
def recorder() -> RecordingHandler:
    """Return a fresh recording handler."""
    return RecordingHandler()


@pytest.fixture
def numbered_lines() -> str:
    """Return twelve numbered lines, each terminated by a newline."""
    return "".join(f"{number}\n" for number in range(1, 13))
