"""Exceptions raised by lazy-frames.

Every error derives from :class:`LazyFramesError` and from the builtin
exception a caller would naturally expect, so ``except ValueError`` or
``except KeyError`` keep working.
"""

from __future__ import annotations


class LazyFramesError(Exception):
    """Base class of every lazy-frames error."""


class InvalidArgument(LazyFramesError, ValueError, TypeError):
    """An argument has the wrong type or shape, or a required option is missing."""


class ShapeMismatch(LazyFramesError, ValueError):
    """Two sequences that must be paired have different lengths."""


class EmptySequence(LazyFramesError, ValueError):
    """An operation that needs at least one element ran on an empty sequence."""


class DuplicateKey(LazyFramesError, ValueError):
    """A label appears more than once where labels must be unique."""


class MissingColumn(LazyFramesError, KeyError):
    """The requested column does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""
