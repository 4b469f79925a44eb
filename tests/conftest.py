"""Conftest for tests.

Shared fixtures: the small data frames and series most test modules start from.
Runtime type checking through LAZY_FRAMES_RUNTIME_TYPECHECKING is left off so
that argument validation is exercised through InvalidArgument.
"""

import pytest

from lazy_frames import DataFrame, Series


@pytest.fixture
def frame():
    return DataFrame(rows=[[1, "a"], [2, "b"]], column_names=["n", "s"])


@pytest.fixture
def sort_frame():
    return DataFrame(
        rows=[
            ["a", 1, "x"],
            ["b", 0, "y"],
            ["c", 1, "z"],
            ["d", 0, "w"],
        ],
        column_names=["id", "k1", "k2"],
    )


@pytest.fixture
def letters():
    return Series(values=[10, 20, 30, 40], index=["a", "b", "c", "d"], name="letters")
