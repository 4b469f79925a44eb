"""
lazy-frames: Lazily evaluated data frames and series built on pull-based cursors.

lazy-frames models tables (data frames) and columns (series) as compositions of
cursors. Relational operators such as filtering, projection, sorting, slicing,
windowing and aggregation never materialize intermediate results: each one
returns a new object wrapping the previous one, and work only runs when a
terminal operation walks the cursor chain.

Key Features:
- A minimal cursor protocol (advance, current, current_position) shared by
  every operator
- Row labels kept in lockstep with values across arbitrary operator chains
- Batched, deferred and memoized multi-key sorting (order_by / then_by)
- Conversion to and from numpy arrays and Polars DataFrames at the boundary

Main Components:
- Index: The row-label sequence of a series or data frame
- Series: A lazily produced sequence of values paired with an Index
- DataFrame: A lazily produced sequence of rows with named columns and an Index

Usage:
    from lazy_frames import DataFrame

    frame = DataFrame(rows=[[1, "a"], [2, "b"]], column_names=["n", "s"])
    frame.where(lambda row: row["n"] > 1).to_values()  # [[2, "b"]]
    frame.order_by_descending("n").get_index().to_values()  # [1, 0]

The package logs through the standard library under the "lazy_frames" logger
and installs a NullHandler, so nothing is printed unless the application
configures logging.

For more detailed information, refer to the docstrings of each module.

License: MIT
"""

from __future__ import annotations

import logging
import os

# Enable runtime type checking if requested via environment variable
if os.getenv("LAZY_FRAMES_RUNTIME_TYPECHECKING", "").lower() in ("1", "true", "yes"):
    try:
        from beartype.claw import beartype_this_package

        beartype_this_package()
    except ImportError:
        import warnings

        warnings.warn(
            "LAZY_FRAMES_RUNTIME_TYPECHECKING is enabled but beartype is not installed.",
            ImportWarning,
            stacklevel=2,
        )

logging.getLogger(__name__).addHandler(logging.NullHandler())

from lazy_frames.abstract.cursor import AbstractCursor, Cursor
from lazy_frames.concrete.cursors import (
    ArrayCursor,
    ConcatCursor,
    MultiCursor,
    SelectCursor,
    SelectManyCursor,
    SkipCursor,
    SkipWhileCursor,
    TakeCursor,
    TakeWhileCursor,
    WhereCursor,
)
from lazy_frames.concrete.dataframe import DataFrame, OrderedDataFrame
from lazy_frames.concrete.index import Index
from lazy_frames.concrete.series import OrderedSeries, Series
from lazy_frames.exceptions import (
    DuplicateKey,
    EmptySequence,
    InvalidArgument,
    LazyFramesError,
    MissingColumn,
    ShapeMismatch,
)

__all__ = [
    "AbstractCursor",
    "ArrayCursor",
    "ConcatCursor",
    "Cursor",
    "DataFrame",
    "DuplicateKey",
    "EmptySequence",
    "Index",
    "InvalidArgument",
    "LazyFramesError",
    "MissingColumn",
    "MultiCursor",
    "OrderedDataFrame",
    "OrderedSeries",
    "SelectCursor",
    "SelectManyCursor",
    "Series",
    "ShapeMismatch",
    "SkipCursor",
    "SkipWhileCursor",
    "TakeCursor",
    "TakeWhileCursor",
    "WhereCursor",
]

__version__ = "0.1.0"
