"""
Concrete implementations of lazy-frames components.

This package provides the cursors and the user-facing entities built on the
abstract interfaces of lazy_frames.abstract.

Modules:
    cursors: ArrayCursor and the combinator cursors every operator is built from.
    index: The Index class, the row-label sequence.
    mixin: LabelledOperatorsMixin, the operators shared by Series and DataFrame.
    ordering: The batched, deferred and memoized order-by engine.
    series: The Series and OrderedSeries classes.
    dataframe: The DataFrame and OrderedDataFrame classes.

Usage:
    Users normally import the entities from the top-level package:

    from lazy_frames import DataFrame, Index, Series

    series = Series(values=[1, 2, 3], index=Index(["a", "b", "c"], name="letters"))
    frame = series.inflate()
"""
