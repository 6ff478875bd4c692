# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Final

from rich.color import ColorSystem
from rich.console import Console

ANSI_COLOR_SYSTEM: Final[ColorSystem] = ColorSystem.STANDARD


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def resolve_color(color: bool | None) -> bool:
    """Return the effective colour flag, detecting the terminal when ``color`` is ``None``."""

    return detect_tty() if color is None else color


class RichConsoleManager:
    """Provision Rich :class:`Console` instances used to export rendered messages."""

    def __init__(self) -> None:
        """Initialise the manager with an in-memory cache keyed by the colour flag."""

        self._cache: dict[bool, Console] = {}

    def get(self, *, color: bool) -> Console:
        """Return a console emitting ANSI styles only when ``color`` is set.

        Consoles never wrap, highlight or expand emoji so exported text keeps
        the exact characters of the rendered message.

        Args:
            color: ``True`` when ANSI colour output should be produced.

        Returns:
            Console: Cached or newly constructed console matching the preference.
        """

        if color not in self._cache:
            self._cache[color] = Console(
                color_system=ANSI_COLOR_SYSTEM.name.lower() if color else None,
                force_terminal=color,
                no_color=not color,
                emoji=False,
                highlight=False,
                markup=False,
                soft_wrap=True,
            )
        return self._cache[color]

    def __call__(self, *, color: bool) -> Console:
        """Return a console; alias of :meth:`get`."""

        return self.get(color=color)


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return a cached :class:`RichConsoleManager` instance.

    Returns:
        RichConsoleManager: Singleton console manager bound to the process.
    """

    return RichConsoleManager()


__all__ = [
    "ANSI_COLOR_SYSTEM",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "resolve_color",
]
