"""
The Series: a lazily produced sequence of values paired with an Index.

A Series owns a zero-argument producer returning a fresh value cursor and an
Index whose cursor runs in lockstep with it. Operators never mutate a
series; they return a new Series whose producer composes this one's cursor
with a combinator cursor. Nothing runs until a terminal operation
(``to_values``, ``count``, ``first``, ``bake``, ...) walks the chain.

Classes:
    Series(LabelledOperatorsMixin):
        The unit of column data.

    OrderedSeries(OrderedMixin, Series):
        A series sorted by a batch of keys, extendable with ``then_by``.

Usage:
    from lazy_frames import Series

    series = Series(values=[3, 1, 2], index=["c", "a", "b"])
    series.where(lambda value: value > 1).to_pairs()  # [("c", 3), ("b", 2)]
    series.order().to_values()  # [1, 2, 3]
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import numpy as np
import polars as pl

from lazy_frames.concrete.cursors import ArrayCursor, SelectCursor, SelectManyCursor
from lazy_frames.concrete.index import Index
from lazy_frames.concrete.mixin import LabelledOperatorsMixin
from lazy_frames.concrete.ordering import LazySort, OrderedMixin, SortCommand, sort_command
from lazy_frames.exceptions import InvalidArgument
from lazy_frames.types_ import ExpandSelector, LabelsInput, Producer, Selector, ValuesInput
from lazy_frames.utils import expect, expect_function, is_array_like, to_list


def as_index(index: Any, fn_name: str) -> Index | None:
    """Accept an Index, a sequence of labels or None for an `index` parameter."""
    if index is None or isinstance(index, Index):
        return index
    if is_array_like(index):
        return Index(index)
    raise InvalidArgument(
        f"Expected 'index' parameter to {fn_name} to be an Index or a sequence of labels."
    )


class Series(LabelledOperatorsMixin):
    """A lazily evaluated sequence of values with an index.

    Parameters
    ----------
    values : ValuesInput, optional
        A realized sequence (list, tuple, numpy array, polars Series) or a
        zero-argument function returning a fresh cursor over the values.
        Defaults to None, an empty series.
    index : Index | LabelsInput, optional
        The index. Defaults to None, which generates labels 0..N-1.
    name : str | None, optional
        The name of the series. Defaults to None.

    Raises
    ------
    InvalidArgument
        If `values` or `index` has an unsupported type.
    """

    _kind = "series"
    _producer: Producer
    _index: Index

    def __init__(
        self,
        values: ValuesInput = None,
        index: Index | LabelsInput = None,
        name: str | None = None,
    ) -> None:
        expect(
            name,
            str | None,
            "Expected 'name' parameter to Series constructor to be a string.",
        )
        self._name = name
        index = as_index(index, "Series constructor")
        if values is None:
            values = []
        if callable(values):
            self._producer = values
            self._index = index if index is not None else Index.sequential(values)
        elif is_array_like(values):
            realized = to_list(values)
            self._producer = lambda: ArrayCursor(realized)
            self._index = index if index is not None else Index(range(len(realized)))
        else:
            raise InvalidArgument(
                "Expected 'values' parameter to Series constructor to be a sequence or a function that returns a cursor."
            )

    def get_iterator(self) -> Any:
        """Get a cursor for iterating the values of the series."""
        return self._producer()

    def get_index(self) -> Index:
        """Retrieve the index of the series."""
        return self._index

    def get_name(self) -> str | None:
        """Get the name of the series."""
        return self._name

    def _derive(self, values: Producer | list[Any], index: Index) -> Series:
        return Series(values=values, index=index, name=self._name)

    def _missing_value(self) -> Any:
        return None

    def _normalize_selector(self, selector: Any, fn_name: str) -> Selector:
        expect_function(selector, "selector", fn_name)
        return selector

    def _ordered(self, batch: tuple[SortCommand, ...]) -> OrderedSeries:
        return OrderedSeries(self, batch)

    def select(self, selector: Selector) -> Series:
        """Transform each value. The index is shared with this series.

        Parameters
        ----------
        selector : Selector
            Maps a value to its replacement.

        Returns
        -------
        Series
            The transformed values.
        """
        expect_function(selector, "selector", "select")
        return self._derive(
            lambda: SelectCursor(self.get_iterator(), selector), self.get_index()
        )

    def select_many(self, selector: ExpandSelector) -> Series:
        """Replace each value with zero or more values.

        Every produced value carries the label of the value it came from.

        Parameters
        ----------
        selector : ExpandSelector
            Maps a value to an iterable of replacement values.

        Returns
        -------
        Series
            The expanded values.
        """
        expect_function(selector, "selector", "select_many")
        return self._derive(
            lambda: SelectManyCursor(self.get_iterator(), selector),
            Index(
                lambda: SelectManyCursor(
                    self._paired_cursor(),
                    lambda pair: [pair[0] for _ in selector(pair[1])],
                ),
                name=self.get_index().get_name(),
            ),
        )

    def zip(self, *others: Series, selector: Callable[..., Any]) -> Series:
        """Combine this series with others, element by element.

        Parameters
        ----------
        *others : Series
            The series to walk alongside this one.
        selector : Callable[..., Any]
            Called with one value per series, this one first; returns the
            combined value.

        Returns
        -------
        Series
            As long as the shortest input, labelled with this series' labels.
        """
        values, index = self._zipped(others, selector, "zip")
        return Series(values=values, index=index)

    def order(self) -> OrderedSeries:
        """Sort the series by value, ascending."""
        return self._ordered((sort_command(_identity, "order_by"),))

    def order_descending(self) -> OrderedSeries:
        """Sort the series by value, descending."""
        return self._ordered((sort_command(_identity, "order_by_descending"),))

    def order_by_index(self) -> OrderedSeries:
        """Sort the series by label, ascending."""
        return self._ordered((sort_command(_identity, "order_by", by_label=True),))

    def order_by_index_descending(self) -> OrderedSeries:
        """Sort the series by label, descending."""
        return self._ordered(
            (sort_command(_identity, "order_by_descending", by_label=True),)
        )

    def sum(self) -> Any:
        """Sum the values."""
        return self.aggregate(lambda total, value: total + value)

    def average(self) -> Any:
        """Average the values."""
        return self.sum() / self.count()

    def min(self) -> Any:
        """Get the smallest value."""
        return self.aggregate(lambda lowest, value: min(lowest, value))

    def max(self) -> Any:
        """Get the largest value."""
        return self.aggregate(lambda highest, value: max(highest, value))

    def percent_change(self) -> Series:
        """Compute the change of each value relative to the previous one.

        Changes are expressed as fractions (0.5 for +50%) and labelled with
        the label of the later value. A change from 0 is ``inf`` (or
        ``-inf``), and ``nan`` when the value stays at 0.

        Returns
        -------
        Series
            One value per row after the first.
        """

        def change(window: Series, _: int) -> tuple[Any, Any]:
            previous, current = window.to_values()
            label = window.get_index().skip(1).first()
            if previous == 0:
                if current == 0:
                    return label, math.nan
                return label, math.copysign(math.inf, current)
            return label, (current - previous) / previous

        return self.rolling_window(2, change)

    def inflate(self, selector: Selector | None = None) -> Any:
        """Inflate the series into a data frame.

        Parameters
        ----------
        selector : Selector | None, optional
            Maps each value to a row dictionary. Defaults to None, which
            puts the values in a single column named after the series (or
            ``"value"``).

        Returns
        -------
        DataFrame
            One row per value, sharing this series' index.
        """
        from lazy_frames.concrete.dataframe import DataFrame

        if selector is None:
            column_name = self._name if self._name is not None else "value"
            return DataFrame(
                rows=lambda: SelectCursor(self.get_iterator(), lambda value: [value]),
                column_names=[column_name],
                index=self.get_index(),
            )
        expect_function(selector, "selector", "inflate")
        return DataFrame(
            rows=lambda: SelectCursor(self.get_iterator(), selector),
            index=self.get_index(),
        )

    def to_numpy(self) -> np.ndarray:
        """Realize the values as a numpy array."""
        return np.array(self.to_values())

    def to_polars(self) -> pl.Series:
        """Realize the values as a polars Series named after this series."""
        return pl.Series(self._name if self._name is not None else "", self.to_values())

    def __repr__(self) -> str:
        return f"Series(name={self._name!r}, index={self._index!r})"


def _identity(value: Any) -> Any:
    return value


class OrderedSeries(OrderedMixin, Series):
    """A series sorted lazily by a batch of sort commands.

    Parameters
    ----------
    source : Series
        The series to sort.
    batch : tuple[SortCommand, ...]
        The sort keys, primary key first.
    """

    def __init__(self, source: Series, batch: tuple[SortCommand, ...]) -> None:
        sort = LazySort(source, batch)
        super().__init__(
            values=lambda: ArrayCursor(sort.values()),
            index=Index(
                lambda: ArrayCursor(sort.labels()), name=source.get_index().get_name()
            ),
            name=source.get_name(),
        )
        self._source = source
        self._batch = batch
