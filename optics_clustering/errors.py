"""Exception types raised by the OPTICS library."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A precondition of an OPTICS operation was violated."""


class CoordinateIndexError(InvalidArgumentError, IndexError):
    """A coordinate index lies outside the dimensionality of a point."""


class OrderingAborted(RuntimeError):
    """Raised from a progress hook to stop an ordering run early.

    Points emitted before the abort keep their processed state and
    reachability distance.
    """


__all__ = ["InvalidArgumentError", "CoordinateIndexError", "OrderingAborted"]
