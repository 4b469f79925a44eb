"""
lazy-frames abstract components.

This package contains the cursor protocol and the mixins that define the
interfaces shared by every lazy-frames entity.

Classes:
    cursor.py:
        - Cursor: Runtime-checkable protocol of a pull-based cursor.
        - AbstractCursor: Base class of the concrete cursors, adding
          ``realize()`` and Python iteration.

    mixin.py:
        - CursorSourceMixin: Terminal realizers for anything producing cursors.
        - IndexedMixin: Interface of a value sequence paired with an index.

Usage:
    These classes are not meant to be instantiated directly. Instead, they
    should be inherited by the concrete implementations in lazy_frames.concrete.

    For example:

    from lazy_frames.abstract.cursor import AbstractCursor

    class Countdown(AbstractCursor):
        # Implement advance, current and current_position here
        ...

Note:
    The abstract classes use Python's ABC (Abstract Base Class) module to define
    abstract methods that must be implemented by concrete subclasses.
"""
