# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Priority-based flattening of annotated text into a single output value.

The renderer sweeps the text once, keeping a stack of open annotation frames.
Each frame owns a handler-defined state value; text between boundaries is fed
to the state on top of the stack and child states are folded into their
parents on exit. When several annotations start at the same offset they are
opened in ``(priority, insertion index)`` order, so lower priority numbers end
up outermost. Annotations that cross instead of nesting are split: frames
above a closing annotation are exited and re-entered right after it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from ..errors import ConfigurationError
from .model import Annotation, RichText

LOGGER = logging.getLogger(__name__)

StateT = TypeVar("StateT")
ResultT = TypeVar("ResultT")
ResultT_co = TypeVar("ResultT_co", covariant=True)


@runtime_checkable
class RenderHandler(Protocol[StateT, ResultT_co]):
    """Callbacks driven by :class:`RichTextRenderer` while sweeping text."""

    def on_init(self) -> StateT:
        """Return the root state."""

        raise NotImplementedError

    def on_enter(self, annotation: Annotation, parent: StateT) -> StateT:
        """Return a fresh state for ``annotation`` nested under ``parent``."""

        raise NotImplementedError

    def on_exit(self, annotation: Annotation, child: StateT, parent: StateT) -> None:
        """Fold ``child``'s contribution into ``parent``."""

        raise NotImplementedError

    def on_text(self, text: str, state: StateT) -> None:
        """Feed a slice of text to ``state``."""

        raise NotImplementedError

    def on_result(self, state: StateT) -> ResultT_co:
        """Return the output value built from the root ``state``."""

        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class RenderCallbacks(Generic[StateT, ResultT]):
    """Adapt plain callables to the :class:`RenderHandler` protocol."""

    init: Callable[[], StateT]
    enter: Callable[[Annotation, StateT], StateT]
    exit: Callable[[Annotation, StateT, StateT], None]
    text: Callable[[str, StateT], None]
    result: Callable[[StateT], ResultT]

    def on_init(self) -> StateT:
        """Return the root state built by ``init``."""

        return self.init()

    def on_enter(self, annotation: Annotation, parent: StateT) -> StateT:
        """Return the state ``enter`` builds for ``annotation``.

        Args:
            annotation: Annotation being opened.
            parent: State of the enclosing scope.

        Returns:
            StateT: State for the new scope.
        """

        return self.enter(annotation, parent)

    def on_exit(self, annotation: Annotation, child: StateT, parent: StateT) -> None:
        """Fold ``child`` into ``parent`` through ``exit``.

        Args:
            annotation: Annotation being closed.
            child: State of the closing scope.
            parent: State of the enclosing scope.
        """

        self.exit(annotation, child, parent)

    def on_text(self, text: str, state: StateT) -> None:
        """Feed ``text`` to ``state`` through ``text``."""

        self.text(text, state)

    def on_result(self, state: StateT) -> ResultT:
        """Return the output ``result`` builds from the root state.

        Args:
            state: Root state after the sweep.

        Returns:
            ResultT: Rendered output.
        """

        return self.result(state)


@dataclass(slots=True)
class _Frame(Generic[StateT]):
    annotation: Annotation
    state: StateT


class _Sweep(Generic[StateT, ResultT]):
    """Single render pass over one :class:`RichText` value."""

    def __init__(
        self,
        handler: RenderHandler[StateT, ResultT],
        priorities: Mapping[str, int],
        value: RichText,
    ) -> None:
        self._handler = handler
        self._priorities = priorities
        self._value = value
        self._root: StateT = handler.on_init()
        self._stack: list[_Frame[StateT]] = []

    def run(self) -> ResultT:
        text = self._value.text
        starts = self._index_starts()
        boundaries = {0, len(text)}
        for annotation in self._value.annotation_list():
            boundaries.add(annotation.start)
            boundaries.add(annotation.end)
        cursor = 0
        for position in sorted(boundaries):
            if position > cursor:
                self._handler.on_text(text[cursor:position], self._top())
                cursor = position
            self._close_at(position)
            for annotation in starts.get(position, ()):
                self._open(annotation, position)
        return self._handler.on_result(self._root)

    def _index_starts(self) -> dict[int, list[Annotation]]:
        ranked: dict[int, list[tuple[int, int, Annotation]]] = {}
        for index, annotation in enumerate(self._value.annotation_list()):
            priority = self._priorities[annotation.type]
            ranked.setdefault(annotation.start, []).append((priority, index, annotation))
        return {
            position: [item[2] for item in sorted(batch, key=lambda item: (item[0], item[1]))]
            for position, batch in ranked.items()
        }

    def _top(self) -> StateT:
        return self._stack[-1].state if self._stack else self._root

    def _open(self, annotation: Annotation, position: int) -> None:
        parent = self._top()
        state = self._handler.on_enter(annotation, parent)
        if annotation.end == position:
            self._handler.on_exit(annotation, state, parent)
        else:
            self._stack.append(_Frame(annotation, state))

    def _close_at(self, position: int) -> None:
        depth = next(
            (index for index, frame in enumerate(self._stack) if frame.annotation.end == position),
            None,
        )
        if depth is None:
            return
        interrupted: list[Annotation] = []
        while len(self._stack) > depth:
            frame = self._stack.pop()
            self._handler.on_exit(frame.annotation, frame.state, self._top())
            if frame.annotation.end != position:
                interrupted.append(frame.annotation)
        for annotation in reversed(interrupted):
            self._stack.append(_Frame(annotation, self._handler.on_enter(annotation, self._top())))


class RichTextRenderer(Generic[StateT, ResultT]):
    """Callable turning :class:`RichText` values into ``ResultT`` outputs."""

    def __init__(self, priorities: Mapping[str, int], handler: RenderHandler[StateT, ResultT]) -> None:
        self._priorities = {str(name): int(value) for name, value in priorities.items()}
        self._handler = handler

    @property
    def priorities(self) -> Mapping[str, int]:
        """Return the priority table used to order simultaneous opens."""

        return dict(self._priorities)

    def __call__(self, value: RichText) -> ResultT:
        """Render ``value`` through the handler.

        Args:
            value: Rich text to flatten.

        Returns:
            ResultT: Output produced by the handler's ``on_result``.

        Raises:
            ConfigurationError: If an annotation type has no priority.
        """

        missing = sorted(
            {annotation.type for annotation in value.annotation_list()} - self._priorities.keys(),
        )
        if missing:
            LOGGER.debug("refusing to render %d annotation types without priority", len(missing))
            raise ConfigurationError(f"annotation types without priority: {', '.join(missing)}")
        return _Sweep(self._handler, self._priorities, value).run()


def create_renderer(
    priorities: Mapping[str, int],
    handler: RenderHandler[StateT, ResultT],
) -> RichTextRenderer[StateT, ResultT]:
    """Return a renderer ordering annotations by ``priorities``.

    Args:
        priorities: Mapping from annotation type to priority; lower numbers
            are opened first and therefore become the outer scope.
        handler: Callbacks that build the output.

    Returns:
        RichTextRenderer: Reusable renderer; state is created per call.
    """

    return RichTextRenderer(priorities, handler)


__all__ = [
    "RenderCallbacks",
    "RenderHandler",
    "RichTextRenderer",
    "create_renderer",
]
