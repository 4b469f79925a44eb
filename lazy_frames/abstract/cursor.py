"""
The cursor protocol at the bottom of lazy-frames.

A cursor is a stateful, pull-based traversal over a sequence. Everything
else in the package (indexes, series, data frames and every operator on
them) is built by composing cursors.

Classes:
    Cursor(Protocol):
        The structural contract: ``advance``, ``current`` and
        ``current_position``. Any object with these three methods can be
        returned by a producer function, including user-written cursors.

    AbstractCursor(ABC):
        Base class for the cursors shipped with lazy-frames. Adds
        ``realize`` and Python iteration on top of the protocol.

Contract:
    - ``advance()`` moves to the next element and returns whether one exists.
      Once it has returned False it keeps returning False.
    - ``current()`` and ``current_position()`` return None before the first
      ``advance()`` and after an ``advance()`` that returned False. They
      never raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Cursor(Protocol):
    """Structural type of every cursor."""

    def advance(self) -> bool: ...

    def current(self) -> Any: ...

    def current_position(self) -> Any: ...


class AbstractCursor(ABC):
    """Base class for lazy-frames cursors."""

    @abstractmethod
    def advance(self) -> bool:
        """Move to the next element.

        Returns
        -------
        bool
            True if there is a current element after the move.
        """
        ...

    @abstractmethod
    def current(self) -> Any:
        """Get the current element, or None outside the valid window."""
        ...

    @abstractmethod
    def current_position(self) -> Any:
        """Get the position (label) of the current element, or None outside the valid window."""
        ...

    def realize(self) -> list[Any]:
        """Drain the cursor from where it stands into a new list.

        The cursor is consumed and cannot be restarted.

        Returns
        -------
        list[Any]
            The remaining elements, in order.
        """
        output = []
        while self.advance():
            output.append(self.current())
        return output

    def __iter__(self) -> Iterator[Any]:
        while self.advance():
            yield self.current()
