import numpy as np
import polars as pl
import pytest
import typeguard as tg
from polars.testing import assert_frame_equal

from lazy_frames import (
    ArrayCursor,
    DataFrame,
    EmptySequence,
    Index,
    InvalidArgument,
    MissingColumn,
    Series,
    ShapeMismatch,
)


@tg.typechecked
class Test_DataFrame:
    def test_get_series_and_where(self, frame: DataFrame):
        assert frame.get_series("n").to_values() == [1, 2]

        filtered = frame.where(lambda row: row["n"] > 1)
        assert filtered.to_values() == [[2, "b"]]
        assert filtered.get_index().to_values() == [1]

    def test_order_by_descending(self, frame: DataFrame):
        ordered = frame.order_by_descending("n")
        assert ordered.to_values() == [[2, "b"], [1, "a"]]
        assert ordered.get_index().to_values() == [1, 0]

    def test___init__rows(self):
        frame = DataFrame(rows=[[1, 2], [3, 4]])
        assert frame.get_column_names() == ["0", "1"]
        assert frame.to_values() == [[1, 2], [3, 4]]
        assert frame.get_index().to_values() == [0, 1]

        empty = DataFrame()
        assert empty.get_column_names() == []
        assert empty.to_values() == []
        assert empty.count() == 0

        named = DataFrame(rows=[], column_names=["a"])
        assert named.get_column_names() == ["a"]
        assert named.to_values() == []

    def test___init__objects(self):
        frame = DataFrame(rows=[{"a": 1}, {"b": 2, "a": 3}])
        assert frame.get_column_names() == ["a", "b"]
        assert frame.to_values() == [[1, None], [3, 2]]

        picked = DataFrame(rows=[{"a": 1, "b": 2}], column_names=["b"])
        assert picked.to_values() == [[2]]

    def test___init__numpy(self):
        frame = DataFrame(rows=np.array([[1, 2], [3, 4]]))
        assert frame.get_column_names() == ["0", "1"]
        assert frame.to_values() == [[1, 2], [3, 4]]

        with pytest.raises(InvalidArgument):
            DataFrame(rows=np.array([1, 2]))

    def test___init__producer(self):
        frame = DataFrame(rows=lambda: ArrayCursor([{"x": 1}, {"x": 2}]))
        assert frame.get_column_names() == ["x"]
        assert frame.to_values() == [[1], [2]]
        assert frame.get_index().to_values() == [0, 1]

        cells = DataFrame(rows=lambda: ArrayCursor([[1, 2]]), column_names=["a", "b"])
        assert cells.to_objects() == [{"a": 1, "b": 2}]

        names = DataFrame(rows=lambda: ArrayCursor([[1]]), column_names=lambda: ["late"])
        assert names.get_column_names() == ["late"]

    def test___init__index(self):
        frame = DataFrame(rows=[[1], [2]], column_names=["a"], index=["x", "y"])
        assert frame.get_index().to_values() == ["x", "y"]

        index = Index([5, 6])
        assert DataFrame(rows=[[1], [2]], index=index).get_index() is index

    def test___init__invalid(self):
        with pytest.raises(InvalidArgument):
            DataFrame(column_names=["a"])
        with pytest.raises(InvalidArgument):
            DataFrame(rows=5)
        with pytest.raises(InvalidArgument):
            DataFrame(rows=[[1]], column_names="a")
        with pytest.raises(InvalidArgument):
            DataFrame(rows=[[1]], debug="yes")
        with pytest.raises(TypeError):
            DataFrame(rows=[[1]], columns=["a"])

    def test___init__debug(self):
        with pytest.raises(ShapeMismatch):
            DataFrame(rows=[[1, 2], [3]], column_names=["a", "b"], debug=True)
        with pytest.raises(ShapeMismatch):
            DataFrame(rows=[[1, 2], [3]], debug=True)
        with pytest.raises(InvalidArgument):
            DataFrame(rows=[[1], {"a": 1}], debug=True)
        with pytest.raises(InvalidArgument):
            DataFrame(rows=[{"a": 1}, [1]], debug=True)

        # Without debug, short rows read as None
        ragged = DataFrame(rows=[[1, 2], [3]], column_names=["a", "b"])
        assert ragged.get_series("b").to_values() == [2, None]

    def test_polars(self):
        source = pl.DataFrame({"a": [1, 2], "b": ["x", "y"]})
        frame = DataFrame.from_polars(source)
        assert frame.get_column_names() == ["a", "b"]
        assert frame.to_values() == [[1, "x"], [2, "y"]]
        assert_frame_equal(frame.to_polars(), source)
        assert DataFrame.from_polars(source, index=["p", "q"]).get_index().to_values() == ["p", "q"]

        with pytest.raises(InvalidArgument):
            DataFrame.from_polars([[1, 2]])

    def test_get_column_index(self, frame: DataFrame):
        assert frame.get_column_index("n") == 0
        assert frame.get_column_index("s") == 1
        assert frame.get_column_index("missing") == -1

        with pytest.raises(InvalidArgument):
            frame.get_column_index(0)

    def test_get_series(self, frame: DataFrame):
        series = frame.get_series(1)
        assert series.to_values() == ["a", "b"]
        assert series.get_name() == "s"
        assert series.get_index() is frame.get_index()

        with pytest.raises(MissingColumn):
            frame.get_series("missing")
        with pytest.raises(KeyError):
            frame.get_series(2)

    def test_has_expect_series(self, frame: DataFrame):
        assert frame.has_series("n")
        assert not frame.has_series("missing")
        assert frame.expect_series("s").to_values() == ["a", "b"]

        with pytest.raises(MissingColumn):
            frame.expect_series("missing")

    def test_get_columns(self, frame: DataFrame):
        columns = frame.get_columns()
        assert [column.name for column in columns] == ["n", "s"]
        assert [column.series.to_values() for column in columns] == [[1, 2], ["a", "b"]]

    def test_subset_remap_columns(self, frame: DataFrame):
        subset = frame.subset(["s"])
        assert subset.get_column_names() == ["s"]
        assert subset.to_values() == [["a"], ["b"]]

        remapped = frame.remap_columns(["s", "x"])
        assert remapped.to_values() == [["a", None], ["b", None]]
        assert remapped.get_index() is frame.get_index()

        with pytest.raises(InvalidArgument):
            frame.subset("s")

    def test_drop_column(self, frame: DataFrame):
        dropped = frame.drop_column("n")
        assert dropped.get_column_names() == ["s"]
        assert dropped.to_values() == [["a"], ["b"]]
        assert frame.drop_column(["n", "s"]).to_values() == [[], []]
        assert frame.drop_column("missing").to_values() == frame.to_values()

    def test_set_series(self, frame: DataFrame):
        added = frame.set_series("flag", [True, False])
        assert added.get_column_names() == ["n", "s", "flag"]
        assert added.to_values() == [[1, "a", True], [2, "b", False]]

        replaced = frame.set_series("n", lambda row: row["n"] * 10)
        assert replaced.get_column_names() == ["n", "s"]
        assert replaced.to_values() == [[10, "a"], [20, "b"]]

        aligned = frame.set_series("n", Series(values=[5, 6], index=[1, 0]))
        assert aligned.to_values() == [[6, "a"], [5, "b"]]

        with pytest.raises(ShapeMismatch):
            frame.set_series("n", [1]).to_values()
        with pytest.raises(InvalidArgument):
            frame.set_series("n", 5)

    def test_rename(self, frame: DataFrame):
        renamed = frame.rename_columns(["x", "y"])
        assert renamed.get_column_names() == ["x", "y"]
        assert renamed.to_values() == frame.to_values()
        assert frame.rename_column("s", "t").get_column_names() == ["n", "t"]
        assert frame.rename_column(0, "m").get_column_names() == ["m", "s"]
        assert frame.get_column_names() == ["n", "s"]

        with pytest.raises(ShapeMismatch):
            frame.rename_columns(["x"])
        with pytest.raises(MissingColumn):
            frame.rename_column("missing", "t")

    def test_bring_to_front_back(self, frame: DataFrame):
        front = frame.bring_to_front("s")
        assert front.get_column_names() == ["s", "n"]
        assert front.to_values() == [["a", 1], ["b", 2]]
        assert frame.bring_to_back("n").get_column_names() == ["s", "n"]

        with pytest.raises(MissingColumn):
            frame.bring_to_front("missing")

    def test_transform_column(self, frame: DataFrame):
        transformed = frame.transform_column("n", lambda value: value + 1)
        assert transformed.to_values() == [[2, "a"], [3, "b"]]

        both = frame.transform_column({"n": lambda value: -value, "s": str.upper})
        assert both.to_values() == [[-1, "A"], [-2, "B"]]

        assert frame.transform_column("missing", lambda value: value) is frame

    def test_generate_columns(self, frame: DataFrame):
        generated = frame.generate_columns(lambda row: {"double": row["n"] * 2})
        assert generated.get_column_names() == ["n", "s", "double"]
        assert generated.to_values() == [[1, "a", 2], [2, "b", 4]]

    def test_inflate_column(self, frame: DataFrame):
        inflated = frame.inflate_column("n", lambda value: {"sq": value * value})
        assert inflated.get_column_names() == ["n", "s", "sq"]
        assert inflated.to_values() == [[1, "a", 1], [2, "b", 4]]

    def test_set_reset_index(self, frame: DataFrame):
        indexed = frame.set_index("s")
        assert indexed.get_index().to_values() == ["a", "b"]
        assert indexed.get_index().get_name() == "s"
        assert indexed.to_values() == frame.to_values()
        assert indexed.where(lambda row: row["n"] > 1).to_pairs() == [("b", {"n": 2, "s": "b"})]

        reset = frame.where(lambda row: row["n"] > 1).reset_index()
        assert reset.get_index().to_values() == [0]

    def test_select(self, frame: DataFrame):
        selected = frame.select(lambda row: {"m": row["n"] + 1})
        assert selected.get_column_names() == ["m"]
        assert selected.to_values() == [[2], [3]]
        assert selected.get_index() is frame.get_index()

    def test_select_many(self, frame: DataFrame):
        expanded = frame.select_many(lambda row: [row] * row["n"])
        assert expanded.get_column_names() == ["n", "s"]
        assert expanded.to_values() == [[1, "a"], [2, "b"], [2, "b"]]
        assert expanded.get_index().to_values() == [0, 1, 1]

    def test_deflate(self, frame: DataFrame):
        deflated = frame.deflate(lambda row: row["s"] * row["n"])
        assert deflated.to_values() == ["a", "bb"]
        assert deflated.get_index() is frame.get_index()

    def test_realizers(self, frame: DataFrame):
        assert frame.to_objects() == [{"n": 1, "s": "a"}, {"n": 2, "s": "b"}]
        assert frame.to_pairs() == [(0, {"n": 1, "s": "a"}), (1, {"n": 2, "s": "b"})]
        assert frame.first() == {"n": 1, "s": "a"}
        assert frame.last() == {"n": 2, "s": "b"}
        assert frame.count() == 2
        assert frame.to_object(lambda row: row["s"], lambda row: row["n"]) == {"a": 1, "b": 2}

        with pytest.raises(EmptySequence):
            DataFrame(rows=[], column_names=["n"]).first()

    def test_aggregate(self, frame: DataFrame):
        assert frame.aggregate({"n": lambda total, value: total + value}) == {"n": 3}
        assert frame.aggregate(0, lambda total, row: total + row["n"]) == 3
        merged = frame.aggregate(lambda left, right: {"n": left["n"] + right["n"]})
        assert merged == {"n": 3}

    def test_skip_take(self, frame: DataFrame):
        assert frame.skip(1).to_pairs() == [(1, {"n": 2, "s": "b"})]
        assert frame.take(1).get_column_names() == ["n", "s"]
        assert frame.tail(1).to_values() == [[2, "b"]]
        assert frame.head(1).to_values() == [[1, "a"]]
        assert frame.skip_while(lambda row: row["n"] < 2).get_index().to_values() == [1]
        assert frame.take_until(lambda row: row["s"] == "b").to_values() == [[1, "a"]]

    def test_slice(self, frame: DataFrame):
        assert frame.slice(1, 2).to_values() == [[2, "b"]]
        assert frame.slice(1, 2).get_index().to_values() == [1]

    def test_reverse(self, frame: DataFrame):
        reversed_frame = frame.reverse()
        assert reversed_frame.to_values() == [[2, "b"], [1, "a"]]
        assert reversed_frame.get_index().to_values() == [1, 0]

    def test_reindex(self, frame: DataFrame):
        reindexed = frame.reindex([1, 5])
        assert reindexed.to_values() == [[2, "b"], [None, None]]
        assert reindexed.get_column_names() == ["n", "s"]

    def test_concat(self, frame: DataFrame):
        combined = frame.concat(DataFrame(rows=[{"n": 3, "t": True}]))
        assert combined.get_column_names() == ["n", "s", "t"]
        assert combined.to_values() == [[1, "a", None], [2, "b", None], [3, None, True]]
        assert combined.get_index().to_values() == [0, 1, 0]

        with pytest.raises(InvalidArgument):
            frame.concat(Series(values=[1]))

    def test_windows(self, frame: DataFrame):
        batched = frame.window(1, lambda window, i: (i, window.first()["n"]))
        assert batched.to_values() == [1, 2]

        rolled = frame.rolling_window(
            2, lambda window, i: (window.get_index().last(), window.get_series("n").sum())
        )
        assert rolled.to_pairs() == [(1, 3)]

    def test_bake(self, frame: DataFrame):
        calls = []

        def predicate(row):
            calls.append(row)
            return row["n"] > 1

        baked = frame.where(predicate).bake()
        calls_after_bake = len(calls)
        assert baked.to_values() == [[2, "b"]]
        assert baked.get_index().to_values() == [1]
        assert baked.get_column_names() == ["n", "s"]
        assert len(calls) == calls_after_bake
        assert baked.bake().to_values() == baked.to_values()

    def test_user_errors_propagate(self, frame: DataFrame):
        broken = frame.where(lambda row: row["missing"])
        with pytest.raises(KeyError):
            broken.to_values()

    def test_non_string_keys(self):
        with pytest.raises(InvalidArgument, match="column names"):
            DataFrame(rows=[{1: "a", 2: "b"}]).get_column_names()

        frame = DataFrame(rows=[[1]], column_names=["n"])
        with pytest.raises(InvalidArgument):
            frame.select(lambda row: {0: row["n"]}).to_values()
        with pytest.raises(InvalidArgument):
            DataFrame(rows=[{"n": 1}, {"n": 2, 3: "x"}]).get_column_names()

    def test_zip(self, frame: DataFrame):
        other = DataFrame(rows=[[10], [20], [30]], column_names=["m"], index=["x", "y", "z"])
        zipped = frame.zip(other, selector=lambda left, right: {"total": left["n"] + right["m"]})
        assert zipped.get_column_names() == ["total"]
        assert zipped.to_pairs() == [(0, {"total": 11}), (1, {"total": 22})]
        assert zipped.get_index().count() == zipped.count()

        shorter = other.zip(frame, selector=lambda left, right: {"s": right["s"]})
        assert shorter.get_index().to_values() == ["x", "y"]

        with pytest.raises(InvalidArgument):
            frame.zip(other, selector="total")
        with pytest.raises(InvalidArgument):
            frame.zip(Series(values=[1]), selector=lambda left, right: left)

    def test_rows_are_not_shared(self):
        source = [[1, "a"]]
        frame = DataFrame(rows=source, column_names=["n", "s"])
        source[0].append("outside")
        frame.to_values()[0].append("leak")
        assert frame.to_values() == [[1, "a"]]

        objects = [{"n": 1}]
        from_objects = DataFrame(rows=objects)
        objects[0]["n"] = 2
        assert from_objects.to_objects() == [{"n": 1}]
