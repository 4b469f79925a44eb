"""
Batched, deferred and memoized sorting shared by series and data frames.

``order_by`` and ``order_by_descending`` start a batch holding one sort
command. The object they return offers ``then_by`` and
``then_by_descending``, which return a new sorted object with an extended
batch and leave the original untouched.

Nothing is sorted until the values or the index of a sorted object are read.
The first read pairs every label with its value, applies the whole batch as
one stable multi-key sort and caches the result; later reads of either the
values or the index reuse the cache.

Classes:
    SortCommand(NamedTuple):
        One key of a batch: a selector, the sort method tag and whether the
        selector applies to the label instead of the value.

    LazySort:
        Executes a batch against a source sequence at most once.

    OrderedMixin:
        Adds ``then_by`` and ``then_by_descending`` to a sorted series or
        data frame.

Functions:
    sort_command: Validate and build a SortCommand.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NamedTuple

from lazy_frames.concrete.cursors import MultiCursor
from lazy_frames.exceptions import InvalidArgument
from lazy_frames.types_ import Selector, SortMethod

logger = logging.getLogger(__name__)

SORT_METHODS = ("order_by", "order_by_descending", "then_by", "then_by_descending")


class SortCommand(NamedTuple):
    selector: Selector
    method: SortMethod
    by_label: bool = False

    @property
    def descending(self) -> bool:
        return self.method.endswith("_descending")


def sort_command(selector: Any, method: Any, by_label: bool = False) -> SortCommand:
    """Validate and build a sort command.

    Raises
    ------
    InvalidArgument
        If `method` is not a known sort method or `selector` is not a function.
    """
    if method not in SORT_METHODS:
        raise InvalidArgument(
            f"Expected 'sort_method' to be one of 'order_by', 'order_by_descending', 'then_by' or 'then_by_descending', instead it is {method!r}."
        )
    if not callable(selector):
        raise InvalidArgument(f"Expected 'selector' parameter to '{method}' to be a function.")
    return SortCommand(selector, method, by_label)


class LazySort:
    """Sort a source sequence by a batch of commands, on first use only.

    Parameters
    ----------
    source : IndexedMixin
        The series or data frame to sort.
    batch : tuple[SortCommand, ...]
        The sort keys, primary key first.
    """

    def __init__(self, source: Any, batch: tuple[SortCommand, ...]) -> None:
        if not batch:
            raise InvalidArgument("Expected at least one sort command.")
        self._source = source
        self._batch = batch
        self._sorted: list[tuple[Any, Any]] | None = None

    def _key(self, command: SortCommand) -> Callable[[tuple[Any, Any]], Any]:
        selector = command.selector
        if command.by_label:
            return lambda pair: selector(pair[0])
        view = self._source._view
        return lambda pair: selector(view(pair[1]))

    def pairs(self) -> list[tuple[Any, Any]]:
        """Get the sorted (label, value) pairs, sorting on the first call."""
        if self._sorted is None:
            cursor = MultiCursor(
                [self._source.get_index().get_iterator(), self._source.get_iterator()]
            )
            pairs = [tuple(pair) for pair in cursor.realize()]
            # Python's sort is stable, so sorting by the last key first
            # leaves the primary key in charge
            for command in reversed(self._batch):
                pairs.sort(key=self._key(command), reverse=command.descending)
            logger.debug(
                "Sorted %d rows by %s",
                len(pairs),
                ", ".join(command.method for command in self._batch),
            )
            self._sorted = pairs
        return self._sorted

    def labels(self) -> list[Any]:
        return [label for label, _ in self.pairs()]

    def values(self) -> list[Any]:
        return [value for _, value in self.pairs()]


class OrderedMixin:
    """Adds secondary sort keys to a sorted series or data frame."""

    _source: Any  # The unsorted series or data frame
    _batch: tuple[SortCommand, ...]

    def then_by(self, selector: Any) -> Any:
        """Sort rows that compare equal so far by another key, ascending.

        Parameters
        ----------
        selector : Any
            Function selecting the key (data frames also accept a column
            name or position).

        Returns
        -------
        Self
            A new sorted object. This one is unchanged.
        """
        return self._extend(selector, "then_by")

    def then_by_descending(self, selector: Any) -> Any:
        """Sort rows that compare equal so far by another key, descending.

        Parameters
        ----------
        selector : Any
            Function selecting the key (data frames also accept a column
            name or position).

        Returns
        -------
        Self
            A new sorted object. This one is unchanged.
        """
        return self._extend(selector, "then_by_descending")

    def _extend(self, selector: Any, method: str) -> Any:
        selector = self._source._normalize_selector(selector, method)
        batch = self._batch + (sort_command(selector, method),)
        return self._source._ordered(batch)

    def get_sort_batch(self) -> tuple[SortCommand, ...]:
        """Get the sort commands of this object, primary key first."""
        return self._batch
