"""Top-level OPTICS driver."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .core_distance import validate_min_pts
from .data_point import DataPoint
from .expansion import PointCallback, expand_cluster_order
from .neighborhood import validate_eps

logger = logging.getLogger(__name__)


def optics(
    db: Iterable[DataPoint],
    eps: float,
    min_pts: int,
    on_point_processed: Optional[PointCallback] = None,
) -> List[DataPoint]:
    """
    Compute the OPTICS cluster ordering of ``db``.

    Parameters
    ----------
    db
        Points to order, iterated once in the given order. Reachability and
        processed state of every point is mutated. Points that are already
        processed are skipped; see :func:`reset_points`.
    eps
        Neighborhood radius, ``>= 0``. ``math.inf`` makes every point a
        neighbor of every other point.
    min_pts
        Minimum neighbor count, ``> 0``.
    on_point_processed
        Optional hook invoked synchronously with every point appended to the
        ordering. Raising from the hook (e.g. :class:`OrderingAborted`) stops
        the run.

    Returns
    -------
    list[DataPoint]
        Points in cluster order with squared reachability distances set.
    """
    eps = validate_eps(eps)
    min_pts = validate_min_pts(min_pts)
    points = list(db)

    logger.debug(
        "Running OPTICS on %d points (eps=%s, min_pts=%d).", len(points), eps, min_pts
    )
    ordering: List[DataPoint] = []
    n_runs = 0
    for p in points:
        if p.processed:
            continue
        expand_cluster_order(points, p, eps, min_pts, ordering, on_point_processed)
        n_runs += 1

    logger.debug(
        "OPTICS ordered %d points in %d expansion runs.", len(ordering), n_runs
    )
    return ordering


__all__ = ["optics"]
