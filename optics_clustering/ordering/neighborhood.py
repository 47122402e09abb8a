"""Distance and epsilon-neighborhood primitives.

All distances are squared Euclidean distances. Consumers only compare or
threshold them, so the square root is never taken.
"""

from __future__ import annotations

import math
from typing import Iterable, List

import numpy as np

from optics_clustering.errors import InvalidArgumentError
from .data_point import DataPoint


def validate_eps(eps: float) -> float:
    """Return ``eps`` as float, raising for negative or NaN radii."""
    eps = float(eps)
    if math.isnan(eps) or eps < 0:
        raise InvalidArgumentError(f"eps must not be negative, got {eps!r}.")
    return eps


def squared_distance(a: DataPoint, b: DataPoint) -> float:
    """Squared Euclidean distance between two points of equal dimensionality."""
    if a.dim != b.dim:
        raise InvalidArgumentError(
            "Data-vectors of both points must have the same dimensionality "
            f"({a.dim} != {b.dim})."
        )
    diff = a.data - b.data
    return float(np.dot(diff, diff))


def get_neighbors(
    p: DataPoint, eps: float, db: Iterable[DataPoint]
) -> List[DataPoint]:
    """Return every point of ``db`` within ``eps`` of ``p``, ``p`` included.

    This is an exhaustive scan in ``db`` order.
    """
    eps = validate_eps(eps)
    eps_sq = eps * eps
    return [q for q in db if squared_distance(p, q) <= eps_sq]


__all__ = ["get_neighbors", "squared_distance", "validate_eps"]
