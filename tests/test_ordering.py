import logging

import pytest
import typeguard as tg

from lazy_frames import (
    DataFrame,
    InvalidArgument,
    MissingColumn,
    OrderedDataFrame,
    OrderedSeries,
    Series,
)
from lazy_frames.concrete.ordering import LazySort, SortCommand, sort_command


@tg.typechecked
class Test_SortCommand:
    def test_sort_command(self):
        command = sort_command(len, "then_by_descending")
        assert command == SortCommand(len, "then_by_descending", False)
        assert command.descending
        assert not sort_command(len, "order_by").descending

    def test_sort_command_invalid(self):
        with pytest.raises(InvalidArgument):
            sort_command(len, "sideways")
        with pytest.raises(InvalidArgument):
            sort_command("n", "order_by")

    def test_empty_batch(self):
        with pytest.raises(InvalidArgument):
            LazySort(Series(values=[1]), ())


@tg.typechecked
class Test_OrderBy:
    def test_order_by_is_stable(self, sort_frame: DataFrame):
        ordered = sort_frame.order_by("k1")
        assert isinstance(ordered, OrderedDataFrame)
        assert ordered.get_series("id").to_values() == ["b", "d", "a", "c"]
        assert ordered.get_index().to_values() == [1, 3, 0, 2]

    def test_then_by(self, sort_frame: DataFrame):
        ordered = sort_frame.order_by("k1").then_by_descending("k2")
        assert ordered.get_series("id").to_values() == ["b", "d", "c", "a"]

        ascending = sort_frame.order_by_descending("k1").then_by(lambda row: row["k2"])
        assert ascending.get_series("id").to_values() == ["a", "c", "d", "b"]
        assert ascending.get_index().to_values() == [0, 2, 3, 1]

    def test_then_by_leaves_original_untouched(self, sort_frame: DataFrame):
        ordered = sort_frame.order_by("k1")
        extended = ordered.then_by("k2")
        assert len(ordered.get_sort_batch()) == 1
        assert [command.method for command in extended.get_sort_batch()] == ["order_by", "then_by"]
        assert ordered.get_series("id").to_values() == ["b", "d", "a", "c"]
        assert extended.get_series("id").to_values() == ["d", "b", "a", "c"]

    def test_deferred_and_memoized(self, sort_frame: DataFrame):
        calls = []

        def key(row):
            calls.append(row["id"])
            return row["k1"]

        ordered = sort_frame.order_by(key)
        assert calls == []
        ordered.to_values()
        assert len(calls) == 4
        ordered.get_index().to_values()
        ordered.to_values()
        ordered.to_pairs()
        assert len(calls) == 4

    def test_column_selectors(self, sort_frame: DataFrame):
        by_position = sort_frame.order_by(1).to_values()
        assert by_position == sort_frame.order_by("k1").to_values()

        with pytest.raises(InvalidArgument):
            sort_frame.order_by(3)
        with pytest.raises(InvalidArgument):
            sort_frame.order_by(1.5)
        with pytest.raises(MissingColumn):
            sort_frame.order_by("missing")
        with pytest.raises(MissingColumn):
            sort_frame.order_by("k1").then_by("missing")

    def test_ordered_result_supports_operators(self, sort_frame: DataFrame):
        top = sort_frame.order_by_descending("k2").take(2)
        assert top.to_pairs() == [
            (2, {"id": "c", "k1": 1, "k2": "z"}),
            (1, {"id": "b", "k1": 0, "k2": "y"}),
        ]
        assert not hasattr(top, "then_by")

    def test_series(self):
        series = Series(values=[3, 1, 2, 1], index=["a", "b", "c", "d"])
        ordered = series.order_by(lambda value: value)
        assert isinstance(ordered, OrderedSeries)
        assert ordered.to_pairs() == [("b", 1), ("d", 1), ("c", 2), ("a", 3)]

        words = Series(values=["bb", "a", "cc", "b"])
        chained = words.order_by(len).then_by_descending(lambda word: word)
        assert chained.to_values() == ["b", "a", "cc", "bb"]

        with pytest.raises(InvalidArgument):
            series.order_by("value")
        with pytest.raises(InvalidArgument):
            ordered.then_by(None)

    def test_sort_is_logged(self, sort_frame: DataFrame, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="lazy_frames"):
            sort_frame.order_by("k1").to_values()
        assert "Sorted 4 rows by order_by" in caplog.text
