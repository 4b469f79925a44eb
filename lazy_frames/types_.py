"""Type aliases for the lazy_frames package."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Literal

import numpy as np
import polars as pl

###----- Cursors -----###
Producer = Callable[[], Any]  # zero-argument function returning a fresh cursor

###----- Callables -----###
Predicate = Callable[[Any], Any]
Selector = Callable[[Any], Any]
BoundPredicate = Callable[[Any, Any], Any]
Aggregator = Callable[[Any, Any], Any]
WindowSelector = Callable[[Any, int], Any]

###----- Inputs -----###
ArrayLike = Sequence[Any] | np.ndarray | pl.Series
ValuesInput = ArrayLike | Producer | None
LabelsInput = ArrayLike | Producer | None
Row = Sequence[Any]
RowObject = Mapping[str, Any]
RowsInput = (
    Sequence[Row] | Sequence[RowObject] | np.ndarray | pl.DataFrame | Producer | None
)
ColumnNamesInput = Sequence[str] | Callable[[], Sequence[str]] | None
ColumnSelector = str | int | Selector
Bound = Any | Predicate
ExpandSelector = Callable[[Any], Iterable[Any]]

###----- Ordering -----###
SortMethod = Literal["order_by", "order_by_descending", "then_by", "then_by_descending"]

__all__ = [
    "Producer",
    "Predicate",
    "Selector",
    "BoundPredicate",
    "Aggregator",
    "WindowSelector",
    "ArrayLike",
    "ValuesInput",
    "LabelsInput",
    "Row",
    "RowObject",
    "RowsInput",
    "ColumnNamesInput",
    "ColumnSelector",
    "Bound",
    "ExpandSelector",
    "SortMethod",
]
