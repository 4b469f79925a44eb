"""
The DataFrame: a lazily produced sequence of rows with named columns.

A DataFrame owns three things: its column names (a list, or a function
producing one that is evaluated on first use and cached), a zero-argument
producer returning a fresh cursor over the rows, and an Index. Internally a
row is a list of cells aligned with the column names. User callables
(predicates, selectors, sort keys) receive the row as a dictionary keyed by
column name instead, and ``to_objects`` realizes rows in that form.

Like series, data frames are never mutated. Every operator returns a new
DataFrame holding closures over this one.

Classes:
    Column(NamedTuple):
        A (name, series) pair returned by ``get_columns``.

    DataFrame(LabelledOperatorsMixin):
        The unit of table data.

    OrderedDataFrame(OrderedMixin, DataFrame):
        A data frame sorted by a batch of keys, extendable with ``then_by``.

Usage:
    from lazy_frames import DataFrame

    frame = DataFrame(rows=[[1, "a"], [2, "b"]], column_names=["n", "s"])
    frame.get_series("n").to_values()  # [1, 2]
    frame.where(lambda row: row["n"] > 1).to_values()  # [[2, "b"]]
    frame.order_by_descending("n").get_index().to_values()  # [1, 0]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from functools import partial, reduce
from typing import Any, NamedTuple

import numpy as np
import polars as pl

from lazy_frames.concrete.cursors import (
    ArrayCursor,
    ConcatCursor,
    SelectCursor,
    SelectManyCursor,
)
from lazy_frames.concrete.index import Index
from lazy_frames.concrete.mixin import LabelledOperatorsMixin
from lazy_frames.concrete.ordering import LazySort, OrderedMixin, SortCommand
from lazy_frames.concrete.series import Series, as_index
from lazy_frames.exceptions import InvalidArgument, MissingColumn, ShapeMismatch
from lazy_frames.types_ import (
    ColumnNamesInput,
    ColumnSelector,
    ExpandSelector,
    LabelsInput,
    Producer,
    RowObject,
    RowsInput,
    Selector,
)
from lazy_frames.utils import copydoc, expect, expect_function, is_array_like, to_list

logger = logging.getLogger(__name__)


def _cell(row: Sequence[Any], position: int) -> Any:
    """The cell at `position`, or None for a missing column or a short row."""
    if 0 <= position < len(row):
        return row[position]
    return None


def _cells(row: Any, column_names: Sequence[str]) -> list[Any]:
    """Convert a row dictionary to a list of cells aligned with `column_names`."""
    if not isinstance(row, Mapping):
        raise InvalidArgument(
            f"Expected each row to be a dictionary of column values, instead got {type(row).__name__}."
        )
    _row_names(row)
    return [row.get(name) for name in column_names]


def _row_names(row: Mapping[Any, Any]) -> list[str]:
    """The keys of a row dictionary, which must all be column names."""
    for key in row:
        if not isinstance(key, str):
            raise InvalidArgument(
                f"Expected the keys of each row dictionary to be column names, instead got {key!r}."
            )
    return list(row)


def _copy_row(row: Any) -> Any:
    """A shallow copy of a row, so the caller's list or dictionary stays its own."""
    if isinstance(row, Mapping):
        return dict(row)
    if is_array_like(row):
        return to_list(row)
    return row


def _peek_column_names(producer: Producer) -> list[str]:
    """Read the column names from the keys of the first row dictionary."""
    cursor = producer()
    if not cursor.advance():
        return []
    first = cursor.current()
    if not isinstance(first, Mapping):
        raise InvalidArgument(
            f"Expected rows without 'column_names' to be dictionaries, instead got {type(first).__name__}."
        )
    column_names = _row_names(first)
    logger.debug("Inferred %d column names from the first row", len(column_names))
    return column_names


def _expect_names(names: Any, param: str, fn_name: str) -> list[str]:
    expect(
        names,
        Sequence[str],
        f"Expected '{param}' parameter to {fn_name} to be a list of column names.",
    )
    if isinstance(names, str):
        raise InvalidArgument(
            f"Expected '{param}' parameter to {fn_name} to be a list of column names."
        )
    return list(names)


class Column(NamedTuple):
    name: str
    series: Series


class DataFrame(LabelledOperatorsMixin):
    """A lazily evaluated table of rows with named columns and an index.

    Parameters
    ----------
    rows : RowsInput, optional
        The rows. One of:

        - a list of lists of cells. Without `column_names` the columns are
          named ``"0"``, ``"1"``, ... after the width of the first row;
        - a list of dictionaries. Without `column_names` the columns are the
          distinct keys of all rows, in first-seen order;
        - a 2-D numpy array;
        - a polars DataFrame;
        - a zero-argument function returning a fresh cursor over the rows.
          With `column_names` each row is a list of cells; without them each
          row is a dictionary and the column names are the keys of the first
          row.

        Defaults to None, an empty data frame.
    column_names : ColumnNamesInput, optional
        The column names, or a zero-argument function producing them. Only
        valid together with `rows`. Defaults to None.
    index : Index | LabelsInput, optional
        The index. Defaults to None, which generates labels 0..N-1.
    debug : bool, optional
        Check the shape of every row of a realized `rows` list eagerly.
        Defaults to False.

    Raises
    ------
    InvalidArgument
        If an argument has an unsupported type, or `column_names` is given
        without `rows`.
    ShapeMismatch
        If `debug` is set and a row does not have one cell per column.
    """

    _kind = "data frame"
    _producer: Producer
    _index: Index
    _column_names: list[str] | Any  # Either the names or a function producing them

    def __init__(
        self,
        rows: RowsInput = None,
        column_names: ColumnNamesInput = None,
        index: Index | LabelsInput = None,
        debug: bool = False,
    ) -> None:
        expect(debug, bool, "Expected 'debug' parameter to DataFrame constructor to be a bool.")
        index = as_index(index, "DataFrame constructor")
        if column_names is not None:
            if rows is None:
                raise InvalidArgument(
                    "Expected 'rows' parameter to DataFrame constructor when 'column_names' is given."
                )
            if not callable(column_names):
                column_names = _expect_names(
                    column_names, "column_names", "DataFrame constructor"
                )
        if isinstance(rows, pl.DataFrame):
            if column_names is None:
                column_names = list(rows.columns)
            rows = [list(row) for row in rows.iter_rows()]
        elif isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise InvalidArgument(
                    f"Expected 'rows' parameter to DataFrame constructor to be a 2-D array, instead it has {rows.ndim} dimensions."
                )
            if column_names is None:
                column_names = [str(position) for position in range(rows.shape[1])]
            rows = rows.tolist()

        if rows is None:
            self._column_names = []
            self._producer = lambda: ArrayCursor([])
            self._index = index if index is not None else Index([])
        elif callable(rows):
            if column_names is None:
                objects = rows
                column_names = lambda: _peek_column_names(objects)  # noqa: E731
                rows = lambda: self._objects_as_cells(objects())  # noqa: E731
            self._column_names = column_names
            self._producer = rows
            self._index = index if index is not None else Index.sequential(rows)
        elif is_array_like(rows):
            self._init_from_list(to_list(rows), column_names, debug)
            self._index = index if index is not None else Index(range(len(self._rows)))
        else:
            raise InvalidArgument(
                "Expected 'rows' parameter to DataFrame constructor to be a list of rows, a numpy array, a polars DataFrame or a function that returns a cursor."
            )

    def _init_from_list(
        self, rows: list[Any], column_names: ColumnNamesInput, debug: bool
    ) -> None:
        rows = [_copy_row(row) for row in rows]
        self._rows = rows
        objects = bool(rows) and isinstance(rows[0], Mapping)
        if debug:
            self._check_rows(rows, objects, column_names)
        if column_names is None:
            if not rows:
                column_names = []
            elif objects:
                column_names = lambda: list(  # noqa: E731
                    dict.fromkeys(name for row in rows for name in _row_names(row))
                )
            else:
                column_names = [str(position) for position in range(len(rows[0]))]
        self._column_names = column_names
        if objects:
            self._producer = lambda: self._objects_as_cells(ArrayCursor(rows))
        else:
            self._producer = lambda: ArrayCursor(rows)

    def _objects_as_cells(self, cursor: Any) -> SelectCursor:
        return SelectCursor(cursor, partial(_cells, column_names=self.get_column_names()))

    @staticmethod
    def _check_rows(
        rows: list[Any], objects: bool, column_names: ColumnNamesInput
    ) -> None:
        if objects:
            for row in rows:
                if not isinstance(row, Mapping):
                    raise InvalidArgument(
                        "Expected 'rows' parameter to DataFrame constructor to be a list of dictionaries or a list of lists, do not mix and match them."
                    )
            return
        width = len(column_names) if isinstance(column_names, list) else None
        for position, row in enumerate(rows):
            if not is_array_like(row):
                raise InvalidArgument(
                    "Expected 'rows' parameter to DataFrame constructor to be a list of dictionaries or a list of lists, do not mix and match them."
                )
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ShapeMismatch(
                    f"Expected every row to have {width} cells, row {position} has {len(row)}."
                )

    @classmethod
    def from_polars(cls, frame: pl.DataFrame, index: Index | LabelsInput = None) -> DataFrame:
        """Build a data frame from a polars DataFrame.

        Parameters
        ----------
        frame : pl.DataFrame
            The source frame. Its column names and row order are kept.
        index : Index | LabelsInput, optional
            The index. Defaults to None, which generates labels 0..N-1.

        Returns
        -------
        DataFrame
            A data frame backed by the realized rows of `frame`.
        """
        expect(
            frame,
            pl.DataFrame,
            "Expected 'frame' parameter to 'from_polars' to be a polars DataFrame.",
        )
        return cls(rows=frame, index=index)

    ###----- Accessors -----###

    def get_iterator(self) -> Any:
        """Get a cursor for iterating the rows. Each row is a list of cells."""
        return self._producer()

    def get_index(self) -> Index:
        """Retrieve the index of the data frame."""
        return self._index

    def get_column_names(self) -> list[str]:
        """Get the names of the columns.

        Names that depend on the rows are computed on the first call and
        cached.
        """
        if callable(self._column_names):
            self._column_names = list(self._column_names())
        return self._column_names

    def get_column_index(self, column_name: str) -> int:
        """Get the position of a column.

        Parameters
        ----------
        column_name : str
            The name of the column.

        Returns
        -------
        int
            The position of the column, or -1 if there is no such column.
        """
        expect(
            column_name,
            str,
            "Expected 'column_name' parameter to 'get_column_index' to be a string.",
        )
        try:
            return self.get_column_names().index(column_name)
        except ValueError:
            return -1

    def _column_position(self, column: Any, fn_name: str) -> int:
        """Resolve a column name or position to a position.

        Raises
        ------
        MissingColumn
            If the column does not exist.
        """
        if isinstance(column, str):
            position = self.get_column_index(column)
            if position < 0:
                raise MissingColumn(f"Failed to find column with name '{column}'.")
            return position
        if isinstance(column, int) and not isinstance(column, bool):
            if not 0 <= column < len(self.get_column_names()):
                raise MissingColumn(f"Failed to find column at position {column}.")
            return column
        raise InvalidArgument(
            f"Expected 'column' parameter to '{fn_name}' to be a column name or a column position."
        )

    def _view(self, value: Any) -> RowObject:
        return dict(zip(self.get_column_names(), value))

    def _derive(self, values: Producer | list[Any], index: Index) -> DataFrame:
        return DataFrame(rows=values, column_names=self.get_column_names, index=index)

    def _missing_value(self) -> list[Any]:
        return [None] * len(self.get_column_names())

    def _normalize_selector(self, selector: ColumnSelector, fn_name: str) -> Selector:
        if callable(selector):
            return selector
        if isinstance(selector, str):
            if self.get_column_index(selector) < 0:
                raise MissingColumn(f"Failed to find column with name '{selector}'.")
            name = selector
        elif isinstance(selector, int) and not isinstance(selector, bool):
            column_names = self.get_column_names()
            if not 0 <= selector < len(column_names):
                raise InvalidArgument(
                    f"Bad column index specified for 'selector' parameter to '{fn_name}', expected a column index >= 0 and < {len(column_names)}."
                )
            name = column_names[selector]
        else:
            raise InvalidArgument(
                f"Expected 'selector' parameter to '{fn_name}' to be a column name, a column index or a selector function."
            )
        return lambda row: row[name]

    def _ordered(self, batch: tuple[SortCommand, ...]) -> OrderedDataFrame:
        return OrderedDataFrame(self, batch)

    ###----- Columns -----###

    def get_series(self, column: str | int) -> Series:
        """Extract a column as a series sharing this data frame's index.

        Parameters
        ----------
        column : str | int
            The name or position of the column.

        Returns
        -------
        Series
            The column values, named after the column.

        Raises
        ------
        MissingColumn
            If the column does not exist.
        """
        position = self._column_position(column, "get_series")
        return Series(
            values=lambda: SelectCursor(
                self.get_iterator(), lambda row: _cell(row, position)
            ),
            index=self.get_index(),
            name=self.get_column_names()[position],
        )

    def has_series(self, column_name: str) -> bool:
        """Whether the data frame has a column named `column_name`."""
        return self.get_column_index(column_name) >= 0

    def expect_series(self, column: str | int) -> Series:
        """Like ``get_series``, named for call sites that require the column."""
        return self.get_series(column)

    def get_columns(self) -> list[Column]:
        """Get every column as a (name, series) pair, in column order."""
        return [Column(name, self.get_series(name)) for name in self.get_column_names()]

    def _remapped_cursor(self, column_names: Sequence[str]) -> Any:
        positions = [self.get_column_index(name) for name in column_names]
        return SelectCursor(
            self.get_iterator(),
            lambda row: [_cell(row, position) for position in positions],
        )

    def remap_columns(self, column_names: Sequence[str]) -> DataFrame:
        """Rebuild the rows to follow a new list of columns.

        Columns are matched by name. New names get None cells, and columns
        missing from `column_names` are dropped.

        Parameters
        ----------
        column_names : Sequence[str]
            The columns of the result, in order.

        Returns
        -------
        DataFrame
            The remapped data frame.
        """
        column_names = _expect_names(column_names, "column_names", "'remap_columns'")
        return DataFrame(
            rows=lambda: self._remapped_cursor(column_names),
            column_names=column_names,
            index=self.get_index(),
        )

    def subset(self, column_names: Sequence[str]) -> DataFrame:
        """Keep only the named columns, in the given order."""
        column_names = _expect_names(column_names, "column_names", "'subset'")
        return self.remap_columns(column_names)

    def drop_column(self, columns: str | Sequence[str]) -> DataFrame:
        """Remove one or more columns. Names that do not exist are ignored.

        Parameters
        ----------
        columns : str | Sequence[str]
            The name, or names, of the columns to drop.

        Returns
        -------
        DataFrame
            The data frame without those columns.
        """
        if isinstance(columns, str):
            columns = [columns]
        columns = _expect_names(columns, "columns", "'drop_column'")
        return self.remap_columns(
            [name for name in self.get_column_names() if name not in columns]
        )

    def set_series(self, column_name: str, data: Any) -> DataFrame:
        """Add a column, or replace the column with the same name.

        Parameters
        ----------
        column_name : str
            The name of the column.
        data : Series | Selector | ArrayLike
            The values of the column. A series is aligned to this data frame
            by label (series sharing this index are used as is), a function
            is called with each row dictionary, and a sequence is used
            positionally.

        Returns
        -------
        DataFrame
            The data frame with the column set.

        Raises
        ------
        InvalidArgument
            If `data` has an unsupported type.
        ShapeMismatch
            On realization, if a sequence has a different length than the
            data frame.
        """
        expect(
            column_name,
            str,
            "Expected 'column_name' parameter to 'set_series' to be a string.",
        )
        if isinstance(data, Series):
            series = data
            if series.get_index() is self.get_index():
                column = series.to_values
            else:
                column = lambda: series.reindex(self.get_index()).to_values()  # noqa: E731
        elif callable(data):
            selector = data
            column = lambda: [selector(row) for row in self.to_objects()]  # noqa: E731
        elif is_array_like(data):
            values = to_list(data)
            column = lambda: values  # noqa: E731
        else:
            raise InvalidArgument(
                "Expected 'data' parameter to 'set_series' to be a series, a function or a sequence of values."
            )

        def column_names() -> list[str]:
            names = self.get_column_names()
            return names if column_name in names else [*names, column_name]

        def rows() -> ArrayCursor:
            values = column()
            current = self.to_values()
            if len(values) != len(current):
                raise ShapeMismatch(
                    f"Expected {len(current)} values for column '{column_name}', got {len(values)}."
                )
            position = self.get_column_index(column_name)
            if position < 0:
                return ArrayCursor([[*row, value] for row, value in zip(current, values)])
            return ArrayCursor(
                [
                    [*row[:position], value, *row[position + 1 :]]
                    for row, value in zip(current, values)
                ]
            )

        return DataFrame(rows=rows, column_names=column_names, index=self.get_index())

    def rename_columns(self, column_names: Sequence[str]) -> DataFrame:
        """Replace every column name.

        Parameters
        ----------
        column_names : Sequence[str]
            One new name per existing column, in column order.

        Returns
        -------
        DataFrame
            The renamed data frame. Rows are unchanged.

        Raises
        ------
        ShapeMismatch
            If the number of names differs from the number of columns.
        """
        column_names = _expect_names(column_names, "column_names", "'rename_columns'")
        existing = len(self.get_column_names())
        if len(column_names) != existing:
            raise ShapeMismatch(
                f"Expected 'column_names' to have a name for each existing column. There are {existing} existing columns."
            )
        return DataFrame(
            rows=self.get_iterator, column_names=column_names, index=self.get_index()
        )

    def rename_column(self, column: str | int, new_name: str) -> DataFrame:
        """Rename a single column, given by name or position."""
        expect(
            new_name,
            str,
            "Expected 'new_name' parameter to 'rename_column' to be a string.",
        )
        position = self._column_position(column, "rename_column")
        column_names = list(self.get_column_names())
        column_names[position] = new_name
        return DataFrame(
            rows=self.get_iterator, column_names=column_names, index=self.get_index()
        )

    def bring_to_front(self, column_name: str) -> DataFrame:
        """Move a column to the first position."""
        position = self._column_position(column_name, "bring_to_front")
        names = self.get_column_names()
        return self.remap_columns([names[position], *names[:position], *names[position + 1 :]])

    def bring_to_back(self, column_name: str) -> DataFrame:
        """Move a column to the last position."""
        position = self._column_position(column_name, "bring_to_back")
        names = self.get_column_names()
        return self.remap_columns([*names[:position], *names[position + 1 :], names[position]])

    def transform_column(
        self,
        columns: str | Mapping[str, Selector],
        selector: Selector | None = None,
    ) -> DataFrame:
        """Apply a selector to every value of a column.

        Parameters
        ----------
        columns : str | Mapping[str, Selector]
            The name of the column, or a mapping from column names to the
            selector for each.
        selector : Selector | None, optional
            The selector, when `columns` is a single name.

        Returns
        -------
        DataFrame
            The data frame with the transformed columns. Names that do not
            exist are ignored.
        """
        if isinstance(columns, Mapping):
            return reduce(
                lambda frame, item: frame.transform_column(*item),
                columns.items(),
                self,
            )
        expect(
            columns,
            str,
            "Expected 'columns' parameter to 'transform_column' to be a string or a mapping.",
        )
        expect_function(selector, "selector", "transform_column")
        if not self.has_series(columns):
            return self
        return self.set_series(columns, self.get_series(columns).select(selector))

    def generate_columns(self, selector: Selector) -> DataFrame:
        """Add or replace columns computed from each row.

        Parameters
        ----------
        selector : Selector
            Maps a row dictionary to a dictionary of new column values.

        Returns
        -------
        DataFrame
            The data frame with the generated columns.
        """
        expect_function(selector, "selector", "generate_columns")
        generated = self.select(selector)
        return reduce(
            lambda frame, name: frame.set_series(name, generated.get_series(name)),
            generated.get_column_names(),
            self,
        )

    def inflate_column(self, column: str | int, selector: Selector | None = None) -> DataFrame:
        """Expand the values of a column into new columns.

        Parameters
        ----------
        column : str | int
            The name or position of the column.
        selector : Selector | None, optional
            Maps a value to a dictionary of new column values. Defaults to
            None, see ``Series.inflate``.

        Returns
        -------
        DataFrame
            The data frame with the inflated columns merged in.
        """
        inflated = self.get_series(column).inflate(selector)
        return reduce(
            lambda frame, name: frame.set_series(name, inflated.get_series(name)),
            inflated.get_column_names(),
            self,
        )

    ###----- Index -----###

    def set_index(self, column: str | int) -> DataFrame:
        """Use a column as the index. The column itself is kept."""
        series = self.get_series(column)
        return DataFrame(
            rows=self.get_iterator,
            column_names=self.get_column_names,
            index=Index(series.get_iterator, name=series.get_name()),
        )

    def reset_index(self) -> DataFrame:
        """Replace the index with the default 0..N-1 labels."""
        return DataFrame(
            rows=self.get_iterator,
            column_names=self.get_column_names,
            index=Index.sequential(self.get_iterator),
        )

    ###----- Projection -----###

    def select(self, selector: Selector) -> DataFrame:
        """Transform each row. The index is shared with this data frame.

        Parameters
        ----------
        selector : Selector
            Maps a row dictionary to a new row dictionary. The column names
            of the result are the keys of the first transformed row.

        Returns
        -------
        DataFrame
            The transformed rows.
        """
        expect_function(selector, "selector", "select")
        return DataFrame(
            rows=lambda: SelectCursor(
                self.get_iterator(), lambda row: selector(self._view(row))
            ),
            index=self.get_index(),
        )

    def select_many(self, selector: ExpandSelector) -> DataFrame:
        """Replace each row with zero or more rows.

        Every produced row carries the label of the row it came from.

        Parameters
        ----------
        selector : ExpandSelector
            Maps a row dictionary to an iterable of row dictionaries.

        Returns
        -------
        DataFrame
            The expanded rows.
        """
        expect_function(selector, "selector", "select_many")
        return DataFrame(
            rows=lambda: SelectManyCursor(
                self.get_iterator(), lambda row: selector(self._view(row))
            ),
            index=Index(
                lambda: SelectManyCursor(
                    self._paired_cursor(),
                    lambda pair: [pair[0] for _ in selector(self._view(pair[1]))],
                ),
                name=self.get_index().get_name(),
            ),
        )

    def deflate(self, selector: Selector) -> Series:
        """Convert each row to a single value.

        Parameters
        ----------
        selector : Selector
            Maps a row dictionary to a value.

        Returns
        -------
        Series
            The values, sharing this data frame's index.
        """
        expect_function(selector, "selector", "deflate")
        return Series(
            values=lambda: SelectCursor(
                self.get_iterator(), lambda row: selector(self._view(row))
            ),
            index=self.get_index(),
        )

    ###----- Combination and realization -----###

    @copydoc(LabelledOperatorsMixin.concat)
    def concat(self, *others: DataFrame) -> DataFrame:
        """The columns of the result are the union of all column names, in
        first-seen order. Rows get None cells for columns they lack.
        Labels are kept as they are, not renumbered.
        """
        self._expect_same_kind(others, "concat")
        frames = (self, *others)

        def column_names() -> list[str]:
            return list(
                dict.fromkeys(name for frame in frames for name in frame.get_column_names())
            )

        def rows() -> ConcatCursor:
            names = column_names()
            return ConcatCursor([frame._remapped_cursor(names) for frame in frames])

        return DataFrame(
            rows=rows,
            column_names=column_names,
            index=Index(
                lambda: ConcatCursor([frame.get_index().get_iterator() for frame in frames]),
                name=self.get_index().get_name(),
            ),
        )

    def zip(self, *others: DataFrame, selector: Callable[..., Any]) -> DataFrame:
        """Combine this data frame with others, row by row.

        Parameters
        ----------
        *others : DataFrame
            The data frames to walk alongside this one.
        selector : Callable[..., Any]
            Called with one row dictionary per data frame, this one first;
            returns the combined row dictionary.

        Returns
        -------
        DataFrame
            As long as the shortest input, labelled with this data frame's
            labels. The column names are the keys of the first combined row.
        """
        rows, index = self._zipped(others, selector, "zip")
        return DataFrame(rows=rows, index=index)

    def to_values(self) -> list[list[Any]]:
        """Extract all rows as lists of cells, aligned with the column names.

        Each row is a new list; changing it does not change the data frame.
        """
        return [list(row) for row in super().to_values()]

    def to_objects(self) -> list[RowObject]:
        """Extract all rows as dictionaries keyed by column name."""
        return list(self._iter_views())

    def aggregate(self, seed_or_selector: Any, selector: Any = None) -> Any:
        """Aggregate the rows, or each column of a mapping separately.

        Parameters
        ----------
        seed_or_selector : Any
            The seed, the aggregation function, or a mapping from column
            names to the aggregation function of each column.
        selector : Aggregator | None, optional
            The aggregation function, when a seed is given. Defaults to None.

        Returns
        -------
        Any
            The aggregated value, or a dictionary of aggregated values when
            `seed_or_selector` is a mapping.
        """
        if selector is None and isinstance(seed_or_selector, Mapping):
            return {
                name: self.get_series(name).aggregate(column_selector)
                for name, column_selector in seed_or_selector.items()
            }
        return super().aggregate(seed_or_selector, selector)

    def to_polars(self) -> pl.DataFrame:
        """Realize the data frame as a polars DataFrame. The index is not included."""
        names = self.get_column_names()
        rows = self.to_values()
        return pl.DataFrame(
            {
                name: [_cell(row, position) for row in rows]
                for position, name in enumerate(names)
            }
        )

    def __repr__(self) -> str:
        return f"DataFrame(columns={self.get_column_names()!r}, index={self._index!r})"


class OrderedDataFrame(OrderedMixin, DataFrame):
    """A data frame sorted lazily by a batch of sort commands.

    Parameters
    ----------
    source : DataFrame
        The data frame to sort.
    batch : tuple[SortCommand, ...]
        The sort keys, primary key first.
    """

    def __init__(self, source: DataFrame, batch: tuple[SortCommand, ...]) -> None:
        sort = LazySort(source, batch)
        super().__init__(
            rows=lambda: ArrayCursor(sort.values()),
            column_names=source.get_column_names,
            index=Index(
                lambda: ArrayCursor(sort.labels()), name=source.get_index().get_name()
            ),
        )
        self._source = source
        self._batch = batch
