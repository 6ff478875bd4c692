# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers shared by the renderers."""

from .console import ANSI_COLOR_SYSTEM, RichConsoleManager, detect_tty, get_console_manager, resolve_color

__all__ = [
    "ANSI_COLOR_SYSTEM",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "resolve_color",
]
