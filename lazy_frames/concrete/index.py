"""
The Index of a series or data frame.

An Index is the logical sequence of row labels. Structurally it is a series
of labels with no values layer of its own: it wraps a zero-argument producer
that returns a fresh cursor over the labels each time it is called, and every
operation builds a new Index around a new producer.

Classes:
    Index(CursorSourceMixin):
        The row-label sequence. Supports the same windowing, ordering and
        baking operations as a series so that series and data frame
        operators can transform their index in parallel with their values.

Usage:
    from lazy_frames.concrete.index import Index

    index = Index(["a", "b", "c"], name="letters")
    index.skip(1).to_values()  # ["b", "c"]
"""

from __future__ import annotations

import logging
from typing import Any

from lazy_frames.abstract.mixin import CursorSourceMixin
from lazy_frames.concrete.cursors import (
    ArrayCursor,
    SkipCursor,
    SkipWhileCursor,
    TakeCursor,
    TakeWhileCursor,
)
from lazy_frames.exceptions import InvalidArgument
from lazy_frames.types_ import Bound, BoundPredicate, LabelsInput, Predicate, Producer
from lazy_frames.utils import (
    bound_predicate,
    expect,
    expect_count,
    expect_function,
    is_array_like,
    to_list,
)

logger = logging.getLogger(__name__)


class Index(CursorSourceMixin):
    """The row-label sequence of a series or data frame.

    Parameters
    ----------
    values : LabelsInput, optional
        The labels: a realized sequence (list, tuple, numpy array, polars
        Series) or a zero-argument function returning a fresh cursor over
        them. Defaults to None, an empty index.
    name : str | None, optional
        The name of the index. Defaults to None.

    Raises
    ------
    InvalidArgument
        If `values` is neither a sequence nor a function.
    """

    _kind = "index"
    _labels: list[Any] | None  # Set when the index is backed by a realized list
    _producer: Producer

    def __init__(self, values: LabelsInput = None, name: str | None = None) -> None:
        expect(
            name,
            str | None,
            "Expected 'name' parameter to Index constructor to be a string.",
        )
        self._name = name
        if values is None:
            values = []
        if callable(values):
            self._labels = None
            self._producer = values
        elif is_array_like(values):
            labels = to_list(values)
            self._labels = labels
            self._producer = lambda: ArrayCursor(labels)
        else:
            raise InvalidArgument(
                "Expected 'values' parameter to Index constructor to be a sequence of labels or a function that returns a cursor."
            )

    @classmethod
    def sequential(cls, producer: Producer, name: str | None = None) -> Index:
        """Build the default 0..N-1 index for the N elements produced by `producer`.

        The elements are counted the first time the index is read, and again
        on every later read.

        Parameters
        ----------
        producer : Producer
            The producer of the elements to label.
        name : str | None, optional
            The name of the index. Defaults to None.

        Returns
        -------
        Index
            The generated index.
        """

        def generate():
            cursor = producer()
            length = 0
            while cursor.advance():
                length += 1
            return ArrayCursor(range(length))

        return cls(generate, name=name)

    def get_iterator(self) -> Any:
        """Get a fresh cursor over the labels."""
        return self._producer()

    def get_name(self) -> str | None:
        """Get the name of the index."""
        return self._name

    def _wrap(self, producer: Producer) -> Index:
        return Index(producer, name=self._name)

    def skip(self, num_rows: int) -> Index:
        """Skip a number of labels.

        Parameters
        ----------
        num_rows : int
            Number of labels to skip.

        Returns
        -------
        Index
            The remaining labels.
        """
        num_rows = expect_count(num_rows, "num_rows", "skip")
        return self._wrap(lambda: SkipCursor(self.get_iterator(), num_rows))

    def take(self, num_rows: int) -> Index:
        """Take a number of labels from the start.

        Parameters
        ----------
        num_rows : int
            Number of labels to take.

        Returns
        -------
        Index
            At most `num_rows` labels.
        """
        num_rows = expect_count(num_rows, "num_rows", "take")
        return self._wrap(lambda: TakeCursor(self.get_iterator(), num_rows))

    def skip_while(self, predicate: Predicate) -> Index:
        """Skip labels while `predicate` holds."""
        expect_function(predicate, "predicate", "skip_while")
        return self._wrap(lambda: SkipWhileCursor(self.get_iterator(), predicate))

    def take_while(self, predicate: Predicate) -> Index:
        """Take labels while `predicate` holds."""
        expect_function(predicate, "predicate", "take_while")
        return self._wrap(lambda: TakeWhileCursor(self.get_iterator(), predicate))

    def slice(
        self,
        start: Bound,
        end: Bound,
        predicate: BoundPredicate | None = None,
    ) -> Index:
        """Keep the labels in the half-open window [start, end).

        Parameters
        ----------
        start : Bound
            The first label to keep, or a predicate that holds for the labels
            to skip before the window.
        end : Bound
            The label just past the window, or a predicate that holds for the
            labels inside it.
        predicate : BoundPredicate | None, optional
            Extra comparison ``predicate(label, bound)`` that also counts as
            "before the bound". Defaults to None.

        Returns
        -------
        Index
            The labels inside the window.
        """
        if predicate is not None:
            expect_function(predicate, "predicate", "slice")
        start_predicate = bound_predicate(start, predicate)
        end_predicate = bound_predicate(end, predicate)
        return self._wrap(
            lambda: TakeWhileCursor(
                SkipWhileCursor(self.get_iterator(), start_predicate), end_predicate
            )
        )

    def _sorted(self, descending: bool) -> Index:
        return self._wrap(
            lambda: ArrayCursor(sorted(self.to_values(), reverse=descending))
        )

    def order(self) -> Index:
        """Sort the labels in ascending order."""
        return self._sorted(descending=False)

    def order_descending(self) -> Index:
        """Sort the labels in descending order."""
        return self._sorted(descending=True)

    def order_by_index(self) -> Index:
        """Sort by label in ascending order. The labels of an index are its own index."""
        return self._sorted(descending=False)

    def order_by_index_descending(self) -> Index:
        """Sort by label in descending order."""
        return self._sorted(descending=True)

    def reverse(self) -> Index:
        """Reverse the labels."""
        return self._wrap(lambda: ArrayCursor(self.to_values()[::-1]))

    def bake(self) -> Index:
        """Force lazy evaluation to complete and back the index with a list.

        Returns
        -------
        Index
            An equivalent index whose reads no longer recompute anything.
            An index that is already backed by a list is returned as is.
        """
        if self._labels is not None:
            return self
        labels = self.to_values()
        logger.debug("Baked index %r with %d labels", self._name, len(labels))
        return Index(labels, name=self._name)

    def __repr__(self) -> str:
        return f"Index(name={self._name!r})"
