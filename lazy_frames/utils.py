"""Utility functions for lazy_frames."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from numbers import Integral
from typing import Any

import numpy as np
import polars as pl
from beartype.door import is_bearable

from lazy_frames.exceptions import InvalidArgument


def copydoc(fromfunc, sep="\n"):
    """Copy the docstring of function or class.

    https://stackoverflow.com/a/13743316
    """

    def _decorator(func):
        sourcedoc = fromfunc.__doc__
        if func.__doc__ is None:
            func.__doc__ = sourcedoc
        else:
            func.__doc__ = sep.join([sourcedoc, func.__doc__])
        return func

    return _decorator


def expect(value: Any, hint: Any, message: str) -> None:
    """Raise InvalidArgument with `message` unless `value` satisfies the type `hint`.

    Parameters
    ----------
    value : Any
        The argument received by the caller.
    hint : Any
        A type hint understood by beartype.
    message : str
        The error message.

    Raises
    ------
    InvalidArgument
        If `value` does not satisfy `hint`.
    """
    # bool is an int subclass, never a valid count or position
    if hint is int and isinstance(value, bool):
        raise InvalidArgument(message)
    if not is_bearable(value, hint):
        raise InvalidArgument(message)


def expect_function(value: Any, param: str, fn_name: str) -> None:
    """Raise InvalidArgument unless `value` is callable."""
    expect(
        value,
        Callable,
        f"Expected '{param}' parameter to '{fn_name}' to be a function.",
    )


def expect_count(value: Any, param: str, fn_name: str) -> int:
    """Return `value` as an int, raising InvalidArgument unless it is an integer.

    numpy integers are accepted. Booleans are not.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(
            f"Expected '{param}' parameter to '{fn_name}' to be an int."
        )
    return int(value)


def is_array_like(value: Any) -> bool:
    """Whether `value` is a realized sequence usable as values or labels.

    Strings are sequences but never a valid column of values.
    """
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Sequence, np.ndarray, pl.Series))


def to_list(value: Any) -> list[Any]:
    """Convert an array-like (list, tuple, numpy array, polars Series) to a list."""
    if isinstance(value, pl.Series):
        return value.to_list()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return list(value)


def bound_predicate(bound: Any, predicate: Callable[[Any, Any], Any] | None) -> Callable[[Any], Any]:
    """Build the label test used by ``slice`` for one bound.

    A callable bound is used as is. Otherwise a label passes while it is
    lower than the bound, or while ``predicate(label, bound)`` holds when a
    predicate is supplied.
    """
    if callable(bound):
        return bound
    if predicate is None:
        return lambda label: label < bound
    return lambda label: predicate(label, bound) or label < bound
