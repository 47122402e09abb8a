"""Core-distance computation."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from optics_clustering.errors import InvalidArgumentError
from .data_point import UNDEFINED, DataPoint
from .neighborhood import squared_distance


def validate_min_pts(min_pts: int) -> int:
    """Return ``min_pts`` as int, raising unless it is a positive integer."""
    if isinstance(min_pts, bool) or not isinstance(min_pts, (int, np.integer)):
        raise InvalidArgumentError(
            f"min_pts must be an integer, got {type(min_pts).__name__}."
        )
    if min_pts <= 0:
        raise InvalidArgumentError(f"min_pts must be greater than 0, got {min_pts}.")
    return int(min_pts)


def squared_core_distance(
    p: DataPoint, min_pts: int, neighbors: Sequence[DataPoint]
) -> Optional[float]:
    """
    Squared core distance of ``p`` given its epsilon-neighborhood.

    Parameters
    ----------
    p
        The point to examine.
    min_pts
        Minimum neighbor count. ``p`` is a core point only if the neighborhood
        holds strictly more than ``min_pts`` points.
    neighbors
        All points within eps of ``p``, including ``p`` itself.

    Returns
    -------
    float or None
        Squared distance from ``p`` to the neighbor at sorted position
        ``min_pts`` (0-based), or ``None`` when ``p`` is not a core point.

    Notes
    -----
    Uses ``numpy.partition`` so only a partial selection is performed; the
    result equals indexing the fully sorted distances.
    """
    min_pts = validate_min_pts(min_pts)
    if len(neighbors) <= min_pts:
        return UNDEFINED

    distances = np.fromiter(
        (squared_distance(p, q) for q in neighbors),
        dtype=np.float64,
        count=len(neighbors),
    )
    return float(np.partition(distances, min_pts)[min_pts])


__all__ = ["squared_core_distance", "validate_min_pts"]
