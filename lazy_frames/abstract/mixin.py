"""
Mixin classes for lazy-frames abstract components.

This module defines mixin classes that provide the behaviour shared by every
entity that produces cursors: indexes, series and data frames. They are
designed to be inherited by the concrete classes, which only supply the
cursor producer and a handful of hooks.

Classes:
    CursorSourceMixin(ABC):
        Terminal realizers for anything exposing ``get_iterator()``:
        ``to_values``, ``count``, ``first``, ``last`` and Python iteration.
        Each call obtains a fresh cursor, so realizing twice recomputes.

    IndexedMixin(CursorSourceMixin):
        Interface of a value sequence paired with an index (series and data
        frames). Declares the hooks the concrete operators rely on and
        implements the realizers that need the index (``to_pairs``) or the
        element view (``aggregate``, ``to_object``).

These mixin classes are not meant to be instantiated directly.

Usage:
    from lazy_frames.abstract.mixin import CursorSourceMixin

    class Labels(CursorSourceMixin):
        def get_iterator(self):
            return ArrayCursor(["a", "b"])

    Labels().to_values()  # ["a", "b"]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from functools import reduce
from typing import Any

from beartype import beartype
from typing_extensions import Self

from lazy_frames.abstract.cursor import Cursor
from lazy_frames.exceptions import EmptySequence, InvalidArgument
from lazy_frames.types_ import Aggregator, Producer, Selector
from lazy_frames.utils import expect_function


@beartype
class CursorSourceMixin(ABC):
    """A mixin class which provides the terminal realizers of a cursor producer."""

    _kind: str = "sequence"  # Used in error messages

    @abstractmethod
    def get_iterator(self) -> Any:
        """Get a fresh cursor positioned before the first element.

        Returns
        -------
        Cursor
            An independently positioned cursor.
        """
        ...

    def _view(self, value: Any) -> Any:
        """Convert a raw element to the form handed to user callables."""
        return value

    def _checked_iterator(self) -> Cursor:
        cursor = self.get_iterator()
        if not isinstance(cursor, Cursor):
            raise InvalidArgument(
                f"Expected the producer of the {self._kind} to return a cursor with 'advance', 'current' and 'current_position', instead got {type(cursor).__name__}."
            )
        return cursor

    def to_values(self) -> list[Any]:
        """Extract all values. This forces lazy evaluation to complete.

        Returns
        -------
        list[Any]
            The values, in order.
        """
        cursor = self._checked_iterator()
        values = []
        while cursor.advance():
            values.append(cursor.current())
        return values

    def count(self) -> int:
        """Count the elements, walking the whole cursor chain.

        Returns
        -------
        int
            The number of elements.
        """
        cursor = self._checked_iterator()
        total = 0
        while cursor.advance():
            total += 1
        return total

    def first(self) -> Any:
        """Get the first element.

        Raises
        ------
        EmptySequence
            If there are no elements.
        """
        cursor = self._checked_iterator()
        if not cursor.advance():
            raise EmptySequence(f"No rows in {self._kind}.")
        return self._view(cursor.current())

    def last(self) -> Any:
        """Get the last element.

        Raises
        ------
        EmptySequence
            If there are no elements.
        """
        cursor = self._checked_iterator()
        if not cursor.advance():
            raise EmptySequence(f"No rows in {self._kind}.")
        last = cursor.current()
        while cursor.advance():
            last = cursor.current()
        return self._view(last)

    def __iter__(self) -> Iterator[Any]:
        cursor = self._checked_iterator()
        while cursor.advance():
            yield cursor.current()


class IndexedMixin(CursorSourceMixin):
    """Interface of a lazily produced sequence paired with an index.

    Concrete classes provide the cursor producer and the index, and implement
    the hooks below so that the shared operators can build new objects of
    the right kind.
    """

    @abstractmethod
    def get_index(self) -> Any:
        """Retrieve the index.

        Returns
        -------
        Index
            The index, whose cursor runs in lockstep with ``get_iterator()``.
        """
        ...

    @abstractmethod
    def _derive(self, values: Producer | list[Any], index: Any) -> Self:
        """Build a new object of the same kind from a producer (or realized list) and an index."""
        ...

    @abstractmethod
    def _missing_value(self) -> Any:
        """The element used where a label has no value (see ``reindex``)."""
        ...

    @abstractmethod
    def _normalize_selector(self, selector: Any, fn_name: str) -> Selector:
        """Turn the selector accepted by ``order_by`` and ``then_by`` into a function.

        Raises
        ------
        InvalidArgument
            If the selector cannot be used.
        """
        ...

    @abstractmethod
    def _ordered(self, batch: tuple) -> Self:
        """Build the lazily sorted object for a batch of sort commands."""
        ...

    def _iter_views(self) -> Iterator[Any]:
        cursor = self._checked_iterator()
        while cursor.advance():
            yield self._view(cursor.current())

    def to_pairs(self) -> list[tuple[Any, Any]]:
        """Retrieve the data as (label, value) pairs.

        Returns
        -------
        list[tuple[Any, Any]]
            One pair per element, with the element in its user-facing form.
        """
        return list(zip(self.get_index().to_values(), self._iter_views()))

    def aggregate(self, seed_or_selector: Any, selector: Aggregator | None = None) -> Any:
        """Aggregate the values.

        Parameters
        ----------
        seed_or_selector : Any
            Either the seed of the aggregation, when `selector` is given, or
            the aggregation function itself. Without a seed the first element
            is the seed.
        selector : Aggregator | None, optional
            Function taking the accumulated value and the next element and
            returning the new accumulated value. Defaults to None.

        Returns
        -------
        Any
            The aggregated value.

        Raises
        ------
        EmptySequence
            If no seed is given and there are no elements.
        """
        if selector is None:
            expect_function(seed_or_selector, "selector", "aggregate")
            views = self._iter_views()
            try:
                seed = next(views)
            except StopIteration:
                raise EmptySequence(f"Cannot aggregate an empty {self._kind} without a seed.") from None
            return reduce(seed_or_selector, views, seed)
        expect_function(selector, "selector", "aggregate")
        return reduce(selector, self._iter_views(), seed_or_selector)

    def to_object(self, key_selector: Selector, value_selector: Selector) -> dict[Any, Any]:
        """Convert the elements to a dictionary.

        Parameters
        ----------
        key_selector : Selector
            Selects the key of each element.
        value_selector : Selector
            Selects the value of each element.

        Returns
        -------
        dict[Any, Any]
            The dictionary. Later elements overwrite earlier ones with the same key.
        """
        expect_function(key_selector, "key_selector", "to_object")
        expect_function(value_selector, "value_selector", "to_object")
        return {key_selector(view): value_selector(view) for view in self._iter_views()}
