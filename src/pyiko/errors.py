# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised by the rich-text core and the assertion layer."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .rich_text.model import Annotation, RichText

ResultT = TypeVar("ResultT")


class ConfigurationError(RuntimeError):
    """Raised when the writer or renderer is used or configured incorrectly."""


class AssertionFailure(AssertionError):
    """Assertion error carrying the annotations of its rich-text message.

    The plain message text is the exception message so test runners that know
    nothing about annotations still print something readable. Reporters that
    do understand annotations can rebuild the :class:`RichText` and render it
    with colours, possibly in a different process.
    """

    def __init__(self, message: RichText) -> None:
        """Initialise the failure from a composed rich-text message.

        Args:
            message: Composed message whose text becomes the exception text.
        """

        super().__init__(message.text)
        self.message = message.text
        self.annotations: tuple[Annotation, ...] | None = message.annotations

    @property
    def rich_text(self) -> RichText:
        """Return the message as a :class:`RichText` value.

        Returns:
            RichText: Message text paired with its annotations.
        """

        from .rich_text.model import RichText

        return RichText(self.message, self.annotations)

    def render(self, renderer: Callable[[RichText], ResultT]) -> ResultT:
        """Return the message rendered through ``renderer``.

        Args:
            renderer: Callable produced by :func:`pyiko.create_renderer`.

        Returns:
            ResultT: Whatever the renderer produces for the message.
        """

        return renderer(self.rich_text)


__all__ = ["AssertionFailure", "ConfigurationError"]
