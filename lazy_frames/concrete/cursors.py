"""
Concrete cursors for lazy-frames.

This module provides the array-backed cursor that adapts realized sequences
to the cursor protocol, plus the combinator cursors every lazy operator is
built from. A combinator wraps one or more upstream cursors and exposes the
protocol again with transformed semantics, so operators compose by nesting.

Classes:
    ArrayCursor: Iterates a realized sequence, with optional parallel positions.
    SkipCursor, SkipWhileCursor: Drop a prefix by count or by predicate.
    TakeCursor, TakeWhileCursor: Keep a prefix by count or by predicate.
    WhereCursor: Keep the elements satisfying a predicate.
    SelectCursor: Map every element through a selector.
    SelectManyCursor: Expand every element into zero or more elements.
    ConcatCursor: Chain several cursors end to end.
    MultiCursor: Advance several cursors in lockstep.

Every combinator tracks its own validity, so ``current()`` and
``current_position()`` return None before the first ``advance()`` and after
exhaustion even when an upstream cursor is less strict. Exceptions raised by
user predicates and selectors propagate unmodified.

Usage:
    from lazy_frames.concrete.cursors import ArrayCursor, SkipCursor, TakeCursor

    cursor = TakeCursor(SkipCursor(ArrayCursor([1, 2, 3, 4]), 1), 2)
    cursor.realize()  # [2, 3]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from beartype import beartype

from lazy_frames.abstract.cursor import AbstractCursor, Cursor
from lazy_frames.exceptions import ShapeMismatch
from lazy_frames.types_ import ExpandSelector, Predicate, Selector


@beartype
class ArrayCursor(AbstractCursor):
    """Cursor over a realized sequence.

    Parameters
    ----------
    values : Sequence[Any]
        The values to iterate.
    positions : Sequence[Any] | None, optional
        Labels parallel to `values`. When omitted the position of each
        value is its 0-based offset. Defaults to None.

    Raises
    ------
    ShapeMismatch
        If `positions` and `values` have different lengths.
    """

    def __init__(
        self, values: Sequence[Any], positions: Sequence[Any] | None = None
    ) -> None:
        if positions is not None and len(positions) != len(values):
            raise ShapeMismatch(
                f"Expected values and positions to have the same length, got {len(values)} values and {len(positions)} positions."
            )
        self._values = values
        self._positions = positions
        self._offset = -1

    def advance(self) -> bool:
        if self._offset < len(self._values):
            self._offset += 1
        return self._offset < len(self._values)

    def _is_valid(self) -> bool:
        return 0 <= self._offset < len(self._values)

    def current(self) -> Any:
        if not self._is_valid():
            return None
        return self._values[self._offset]

    def current_position(self) -> Any:
        if not self._is_valid():
            return None
        if self._positions is None:
            return self._offset
        return self._positions[self._offset]


@beartype
class _UpstreamCursor(AbstractCursor):
    """Bookkeeping shared by cursors that wrap a single upstream cursor."""

    def __init__(self, upstream: Cursor) -> None:
        self._upstream = upstream
        self._valid = False
        self._done = False

    def _finish(self) -> bool:
        self._valid = False
        self._done = True
        return False

    def current(self) -> Any:
        if not self._valid:
            return None
        return self._upstream.current()

    def current_position(self) -> Any:
        if not self._valid:
            return None
        return self._upstream.current_position()


@beartype
class SkipCursor(_UpstreamCursor):
    """Skip the first `count` elements of the upstream cursor."""

    def __init__(self, upstream: Cursor, count: int) -> None:
        super().__init__(upstream)
        self._count = count
        self._skipped = False

    def advance(self) -> bool:
        if self._done:
            return False
        if not self._skipped:
            self._skipped = True
            for _ in range(self._count):
                if not self._upstream.advance():
                    return self._finish()
        if not self._upstream.advance():
            return self._finish()
        self._valid = True
        return True


@beartype
class SkipWhileCursor(_UpstreamCursor):
    """Skip upstream elements while `predicate` holds, then pass everything through."""

    def __init__(self, upstream: Cursor, predicate: Predicate) -> None:
        super().__init__(upstream)
        self._predicate = predicate
        self._skipping = True

    def advance(self) -> bool:
        if self._done:
            return False
        while self._upstream.advance():
            if self._skipping and self._predicate(self._upstream.current()):
                continue
            self._skipping = False
            self._valid = True
            return True
        return self._finish()


@beartype
class TakeCursor(_UpstreamCursor):
    """Yield at most `count` upstream elements."""

    def __init__(self, upstream: Cursor, count: int) -> None:
        super().__init__(upstream)
        self._count = count
        self._taken = 0

    def advance(self) -> bool:
        if self._done or self._taken >= self._count:
            return self._finish()
        if not self._upstream.advance():
            return self._finish()
        self._taken += 1
        self._valid = True
        return True


@beartype
class TakeWhileCursor(_UpstreamCursor):
    """Yield upstream elements until the first one failing `predicate`.

    The failing element ends the cursor for good, later elements are never
    considered.
    """

    def __init__(self, upstream: Cursor, predicate: Predicate) -> None:
        super().__init__(upstream)
        self._predicate = predicate

    def advance(self) -> bool:
        if self._done:
            return False
        if self._upstream.advance() and self._predicate(self._upstream.current()):
            self._valid = True
            return True
        return self._finish()


@beartype
class WhereCursor(_UpstreamCursor):
    """Yield the upstream elements satisfying `predicate`."""

    def __init__(self, upstream: Cursor, predicate: Predicate) -> None:
        super().__init__(upstream)
        self._predicate = predicate

    def advance(self) -> bool:
        if self._done:
            return False
        while self._upstream.advance():
            if self._predicate(self._upstream.current()):
                self._valid = True
                return True
        return self._finish()


@beartype
class SelectCursor(_UpstreamCursor):
    """Map each upstream element through `selector`.

    The selector runs when ``current()`` is read, never for an element that
    is not current.
    """

    def __init__(self, upstream: Cursor, selector: Selector) -> None:
        super().__init__(upstream)
        self._selector = selector

    def advance(self) -> bool:
        if self._done:
            return False
        if not self._upstream.advance():
            return self._finish()
        self._valid = True
        return True

    def current(self) -> Any:
        if not self._valid:
            return None
        return self._selector(self._upstream.current())


@beartype
class SelectManyCursor(_UpstreamCursor):
    """Replace each upstream element with the elements of `selector(element)`.

    Every replacement element keeps the position of the upstream element it
    came from.
    """

    def __init__(self, upstream: Cursor, selector: ExpandSelector) -> None:
        super().__init__(upstream)
        self._selector = selector
        self._buffer: list[Any] = []
        self._offset = -1
        self._position: Any = None

    def advance(self) -> bool:
        if self._done:
            return False
        self._offset += 1
        while self._offset >= len(self._buffer):
            if not self._upstream.advance():
                self._buffer = []
                self._position = None
                return self._finish()
            self._buffer = list(self._selector(self._upstream.current()))
            self._position = self._upstream.current_position()
            self._offset = 0
        self._valid = True
        return True

    def current(self) -> Any:
        if not self._valid:
            return None
        return self._buffer[self._offset]

    def current_position(self) -> Any:
        if not self._valid:
            return None
        return self._position


@beartype
class ConcatCursor(AbstractCursor):
    """Iterate several cursors one after the other.

    Positions are those of the child cursors, not renumbered.
    """

    def __init__(self, cursors: Sequence[Cursor]) -> None:
        self._cursors = list(cursors)
        self._active = 0
        self._valid = False

    def advance(self) -> bool:
        while self._active < len(self._cursors):
            if self._cursors[self._active].advance():
                self._valid = True
                return True
            self._active += 1
        self._valid = False
        return False

    def current(self) -> Any:
        if not self._valid:
            return None
        return self._cursors[self._active].current()

    def current_position(self) -> Any:
        if not self._valid:
            return None
        return self._cursors[self._active].current_position()


@beartype
class MultiCursor(AbstractCursor):
    """Advance several cursors in lockstep.

    The combined cursor ends as soon as any child ends. Its current value
    and position are lists holding one entry per child.
    """

    def __init__(self, cursors: Sequence[Cursor]) -> None:
        self._cursors = list(cursors)
        self._valid = False
        self._done = False

    def advance(self) -> bool:
        if self._done:
            return False
        if not self._cursors:
            self._done = True
            return False
        for cursor in self._cursors:
            if not cursor.advance():
                self._valid = False
                self._done = True
                return False
        self._valid = True
        return True

    def current(self) -> Any:
        if not self._valid:
            return None
        return [cursor.current() for cursor in self._cursors]

    def current_position(self) -> Any:
        if not self._valid:
            return None
        return [cursor.current_position() for cursor in self._cursors]
