"""
Lazy operators shared by Series and DataFrame.

Every operator follows one pattern: it returns a new object whose value
producer wraps ``self.get_iterator()`` in a combinator cursor, and whose
index performs the parallel transform so that values and labels stay in
lockstep. Operators driven by a predicate over the values run the predicate
over a ``MultiCursor`` pairing (label, value), so the retained labels are
exactly those of the retained values.

Classes:
    LabelledOperatorsMixin(IndexedMixin):
        Windowing (skip, take, slice, head, tail), filtering (skip_while,
        take_while, where and their ``until`` forms), reordering (reverse,
        reindex, order_by), concatenation, rolling windows and baking.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Any

from typing_extensions import Self

from lazy_frames.abstract.mixin import IndexedMixin
from lazy_frames.concrete.cursors import (
    ArrayCursor,
    ConcatCursor,
    MultiCursor,
    SelectCursor,
    SkipCursor,
    SkipWhileCursor,
    TakeCursor,
    TakeWhileCursor,
    WhereCursor,
)
from lazy_frames.concrete.index import Index
from lazy_frames.concrete.ordering import sort_command
from lazy_frames.exceptions import DuplicateKey, InvalidArgument
from lazy_frames.types_ import (
    Bound,
    BoundPredicate,
    LabelsInput,
    Predicate,
    WindowSelector,
)
from lazy_frames.utils import (
    bound_predicate,
    expect_count,
    expect_function,
    is_array_like,
)

logger = logging.getLogger(__name__)


def _label(pair: list[Any]) -> Any:
    return pair[0]


def _value(pair: list[Any]) -> Any:
    return pair[1]


class LabelledOperatorsMixin(IndexedMixin):
    """Lazy operators for a value sequence paired with an index."""

    def _paired_cursor(self) -> MultiCursor:
        """A cursor over [label, value] pairs."""
        return MultiCursor([self.get_index().get_iterator(), self.get_iterator()])

    def _index_through(self, wrap: Callable[[MultiCursor], Any]) -> Index:
        """Build the index obtained by passing the paired cursor through `wrap`."""
        return Index(
            lambda: SelectCursor(wrap(self._paired_cursor()), _label),
            name=self.get_index().get_name(),
        )

    def _on_value(self, predicate: Predicate) -> Predicate:
        """Apply `predicate` to the user-facing view of a raw element."""
        return lambda value: predicate(self._view(value))

    def _on_pair(self, predicate: Predicate) -> Predicate:
        """Apply `predicate` to the user-facing view of the value of a pair."""
        return lambda pair: predicate(self._view(pair[1]))

    def _expect_same_kind(self, others: tuple[Any, ...], fn_name: str) -> None:
        for other in others:
            if not (
                isinstance(other, LabelledOperatorsMixin) and other._kind == self._kind
            ):
                raise InvalidArgument(
                    f"Expected every parameter to '{fn_name}' to be a {self._kind}."
                )

    def skip(self, num_rows: int) -> Self:
        """Skip a number of rows.

        Parameters
        ----------
        num_rows : int
            Number of rows to skip.

        Returns
        -------
        Self
            The remaining rows.
        """
        num_rows = expect_count(num_rows, "num_rows", "skip")
        return self._derive(
            lambda: SkipCursor(self.get_iterator(), num_rows),
            self.get_index().skip(num_rows),
        )

    def take(self, num_rows: int) -> Self:
        """Take a number of rows from the start.

        Parameters
        ----------
        num_rows : int
            Number of rows to take.

        Returns
        -------
        Self
            At most `num_rows` rows.
        """
        num_rows = expect_count(num_rows, "num_rows", "take")
        return self._derive(
            lambda: TakeCursor(self.get_iterator(), num_rows),
            self.get_index().take(num_rows),
        )

    def head(self, num_rows: int) -> Self:
        """Get the first `num_rows` rows."""
        num_rows = expect_count(num_rows, "num_rows", "head")
        return self.take(num_rows)

    def tail(self, num_rows: int) -> Self:
        """Get the last `num_rows` rows.

        The rows are counted first, so the whole sequence is walked once
        before the result is built.
        """
        num_rows = expect_count(num_rows, "num_rows", "tail")
        return self.skip(max(self.count() - num_rows, 0))

    def skip_while(self, predicate: Predicate) -> Self:
        """Skip rows while a condition is met.

        Parameters
        ----------
        predicate : Predicate
            Return true to keep skipping.

        Returns
        -------
        Self
            The rows from the first one failing the predicate onwards.
        """
        expect_function(predicate, "predicate", "skip_while")
        return self._derive(
            lambda: SkipWhileCursor(self.get_iterator(), self._on_value(predicate)),
            self._index_through(
                lambda pairs: SkipWhileCursor(pairs, self._on_pair(predicate))
            ),
        )

    def skip_until(self, predicate: Predicate) -> Self:
        """Skip rows until a condition is met."""
        expect_function(predicate, "predicate", "skip_until")
        return self.skip_while(lambda value: not predicate(value))

    def take_while(self, predicate: Predicate) -> Self:
        """Take rows while a condition is met.

        Parameters
        ----------
        predicate : Predicate
            Return true to keep taking.

        Returns
        -------
        Self
            The rows before the first one failing the predicate.
        """
        expect_function(predicate, "predicate", "take_while")
        return self._derive(
            lambda: TakeWhileCursor(self.get_iterator(), self._on_value(predicate)),
            self._index_through(
                lambda pairs: TakeWhileCursor(pairs, self._on_pair(predicate))
            ),
        )

    def take_until(self, predicate: Predicate) -> Self:
        """Take rows until a condition is met."""
        expect_function(predicate, "predicate", "take_until")
        return self.take_while(lambda value: not predicate(value))

    def where(self, predicate: Predicate) -> Self:
        """Filter rows by a predicate.

        The filter is not memoized: each realization filters again.
        Retained rows keep their original labels.

        Parameters
        ----------
        predicate : Predicate
            Return true to keep the row.

        Returns
        -------
        Self
            The rows satisfying the predicate.
        """
        expect_function(predicate, "predicate", "where")
        return self._derive(
            lambda: WhereCursor(self.get_iterator(), self._on_value(predicate)),
            self._index_through(
                lambda pairs: WhereCursor(pairs, self._on_pair(predicate))
            ),
        )

    def slice(
        self,
        start: Bound,
        end: Bound,
        predicate: BoundPredicate | None = None,
    ) -> Self:
        """Keep the rows whose labels fall in the half-open window [start, end).

        The window is found by comparing labels, not positions.

        Parameters
        ----------
        start : Bound
            The label where the slice starts, or a predicate over labels that
            holds while rows are still before the slice.
        end : Bound
            The label one past the end of the slice, or a predicate over
            labels that holds while rows are still inside the slice.
        predicate : BoundPredicate | None, optional
            Extra comparison ``predicate(label, bound)`` that also counts as
            "before the bound". Defaults to None.

        Returns
        -------
        Self
            The rows inside the window.
        """
        if predicate is not None:
            expect_function(predicate, "predicate", "slice")
        start_predicate = bound_predicate(start, predicate)
        end_predicate = bound_predicate(end, predicate)
        return self._derive(
            lambda: SelectCursor(
                TakeWhileCursor(
                    SkipWhileCursor(
                        self._paired_cursor(),
                        lambda pair: start_predicate(pair[0]),
                    ),
                    lambda pair: end_predicate(pair[0]),
                ),
                _value,
            ),
            self.get_index().slice(start, end, predicate),
        )

    def reverse(self) -> Self:
        """Reverse the order of the rows, labels included."""
        return self._derive(
            lambda: ArrayCursor(self.to_values()[::-1]),
            self.get_index().reverse(),
        )

    def reindex(self, new_index: Index | LabelsInput) -> Self:
        """Reorder the rows to follow a new index.

        Labels of `new_index` that are not in the current index get a
        missing value.

        Parameters
        ----------
        new_index : Index | LabelsInput
            The index of the result.

        Returns
        -------
        Self
            The reindexed rows.

        Raises
        ------
        DuplicateKey
            On realization, if a label appears more than once in the current index.
        """
        if not isinstance(new_index, Index):
            if not (callable(new_index) or is_array_like(new_index)):
                raise InvalidArgument(
                    "Expected 'new_index' parameter to 'reindex' to be an index."
                )
            new_index = Index(new_index)

        def reindexed():
            lookup = {}
            for label, value in self._paired_cursor():
                if label in lookup:
                    raise DuplicateKey(
                        f"Duplicate index label {label!r} detected, failed to 'reindex'."
                    )
                lookup[label] = value
            return ArrayCursor(
                [
                    lookup[label] if label in lookup else self._missing_value()
                    for label in new_index.to_values()
                ]
            )

        return self._derive(reindexed, new_index)

    def concat(self, *others: Self) -> Self:
        """Append the rows of other sequences after these ones.

        Labels are kept as they are, not renumbered.

        Parameters
        ----------
        *others : Self
            The sequences to append, in order.

        Returns
        -------
        Self
            The concatenated rows.
        """
        self._expect_same_kind(others, "concat")
        parts = (self, *others)
        return self._derive(
            lambda: ConcatCursor([part.get_iterator() for part in parts]),
            Index(
                lambda: ConcatCursor([part.get_index().get_iterator() for part in parts]),
                name=self.get_index().get_name(),
            ),
        )

    def _zipped(
        self, others: tuple[Any, ...], selector: Callable[..., Any], fn_name: str
    ) -> tuple[Callable[[], SelectCursor], Index]:
        """Producer and index for walking this sequence and `others` side by side.

        The selector receives one (viewed) element per sequence. Walking
        stops with the shortest sequence. Labels come from this sequence.
        """
        self._expect_same_kind(others, fn_name)
        expect_function(selector, "selector", fn_name)
        parts = (self, *others)

        def combine(elements: list[Any]) -> Any:
            return selector(*(part._view(element) for part, element in zip(parts, elements)))

        index = Index(
            lambda: SelectCursor(
                MultiCursor(
                    [self.get_index().get_iterator()]
                    + [other.get_iterator() for other in others]
                ),
                _label,
            ),
            name=self.get_index().get_name(),
        )
        return (
            lambda: SelectCursor(
                MultiCursor([part.get_iterator() for part in parts]), combine
            ),
            index,
        )

    def order_by(self, selector: Any) -> Any:
        """Sort rows by a key, ascending.

        The sort runs when the result is first read, and only once.

        Parameters
        ----------
        selector : Any
            Function selecting the sort key (data frames also accept a
            column name or position).

        Returns
        -------
        Self
            A sorted object offering ``then_by`` and ``then_by_descending``.
        """
        selector = self._normalize_selector(selector, "order_by")
        return self._ordered((sort_command(selector, "order_by"),))

    def order_by_descending(self, selector: Any) -> Any:
        """Sort rows by a key, descending.

        Parameters
        ----------
        selector : Any
            Function selecting the sort key (data frames also accept a
            column name or position).

        Returns
        -------
        Self
            A sorted object offering ``then_by`` and ``then_by_descending``.
        """
        selector = self._normalize_selector(selector, "order_by_descending")
        return self._ordered((sort_command(selector, "order_by_descending"),))

    def bake(self) -> Self:
        """Force lazy evaluation to complete and hold the rows in memory.

        Returns
        -------
        Self
            An equivalent object backed by realized lists.
        """
        values = self.to_values()
        logger.debug("Baked %s with %d rows", self._kind, len(values))
        return self._derive(values, self.get_index().bake())

    def _windows(self, offsets: range, period: int, selector: WindowSelector) -> Any:
        from lazy_frames.concrete.series import Series

        labels = []
        values = []
        for window_index, offset in enumerate(offsets):
            label, value = selector(self.skip(offset).take(period), window_index)
            labels.append(label)
            values.append(value)
        return Series(values=values, index=Index(labels))

    def rolling_window(self, period: int, selector: WindowSelector) -> Any:
        """Move a window of `period` rows over the sequence, one row at a time.

        Parameters
        ----------
        period : int
            The number of rows in each window.
        selector : WindowSelector
            Called as ``selector(window, window_index)`` for each window;
            returns the (label, value) pair of the output row.

        Returns
        -------
        Series
            One row per window.
        """
        period = expect_count(period, "period", "rolling_window")
        expect_function(selector, "selector", "rolling_window")
        if period < 1:
            raise InvalidArgument("Expected 'period' parameter to 'rolling_window' to be at least 1.")
        num_windows = max(self.count() - period + 1, 0)
        return self._windows(range(num_windows), period, selector)

    def window(self, period: int, selector: WindowSelector) -> Any:
        """Move a window of `period` rows over the sequence, batch by batch.

        Parameters
        ----------
        period : int
            The number of rows in each window. The last window may be shorter.
        selector : WindowSelector
            Called as ``selector(window, window_index)`` for each window;
            returns the (label, value) pair of the output row.

        Returns
        -------
        Series
            One row per window.
        """
        period = expect_count(period, "period", "window")
        expect_function(selector, "selector", "window")
        if period < 1:
            raise InvalidArgument("Expected 'period' parameter to 'window' to be at least 1.")
        num_windows = math.ceil(self.count() / period)
        return self._windows(range(0, num_windows * period, period), period, selector)
