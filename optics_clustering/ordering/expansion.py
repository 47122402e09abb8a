"""Cluster-order expansion and seed updates.

Based on "OPTICS: Ordering Points To Identify the Clustering Structure"
(Ankerst, Breunig, Kriegel & Sander, 1999).
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from optics_clustering.errors import InvalidArgumentError
from .core_distance import squared_core_distance, validate_min_pts
from .data_point import UNDEFINED, DataPoint
from .neighborhood import get_neighbors, squared_distance, validate_eps
from .seed_frontier import SeedFrontier

PointCallback = Callable[[DataPoint], None]


def update_seeds(
    neighbors: Sequence[DataPoint],
    center: DataPoint,
    core_dist: float,
    seeds: SeedFrontier,
) -> None:
    """
    Queue unprocessed neighbors of ``center`` or improve their reachability.

    Parameters
    ----------
    neighbors
        Epsilon-neighborhood of ``center`` (``center`` included).
    center
        The core point the neighbors are reached from.
    core_dist
        Squared core distance of ``center``. Must be defined.
    seeds
        Frontier that is modified in place.
    """
    if core_dist is None:
        raise InvalidArgumentError(
            "The core distance must be defined when updating seeds."
        )

    for o in neighbors:
        if o.processed:
            continue
        new_r_dist = max(core_dist, squared_distance(center, o))
        if o.reachability_distance is None or o not in seeds:
            # first discovery (a value left over from an aborted run is stale)
            o.reachability_distance = new_r_dist
            seeds.insert(o)
        elif new_r_dist < o.reachability_distance:
            seeds.decrease(o, new_r_dist)


def _process(
    point: DataPoint,
    core_dist: Optional[float],
    ordering: List[DataPoint],
    on_point_processed: Optional[PointCallback],
) -> None:
    point.core_distance = core_dist
    point.processed = True
    ordering.append(point)
    if on_point_processed is not None:
        on_point_processed(point)


def expand_cluster_order(
    db: Sequence[DataPoint],
    p: DataPoint,
    eps: float,
    min_pts: int,
    ordering: List[DataPoint],
    on_point_processed: Optional[PointCallback] = None,
) -> None:
    """
    Append ``p`` and everything density-reachable from it to ``ordering``.

    Parameters
    ----------
    db
        All points considered by the algorithm. Their state is mutated.
    p
        Unprocessed start point. Its reachability is reset to undefined.
    eps
        Neighborhood radius.
    min_pts
        Minimum neighbor count (exclusive) for a core point.
    ordering
        Output list; processed points are appended in order.
    on_point_processed
        Optional hook called with each point right after it was appended.
        Exceptions raised by the hook propagate to the caller.
    """
    eps = validate_eps(eps)
    min_pts = validate_min_pts(min_pts)

    neighbors = get_neighbors(p, eps, db)
    p.reachability_distance = UNDEFINED
    core_dist = squared_core_distance(p, min_pts, neighbors)
    _process(p, core_dist, ordering, on_point_processed)
    if core_dist is None:
        return

    seeds = SeedFrontier()
    update_seeds(neighbors, p, core_dist, seeds)
    while seeds:
        q = seeds.pop_min()
        q_neighbors = get_neighbors(q, eps, db)
        q_core_dist = squared_core_distance(q, min_pts, q_neighbors)
        _process(q, q_core_dist, ordering, on_point_processed)
        if q_core_dist is not None:
            update_seeds(q_neighbors, q, q_core_dist, seeds)


__all__ = ["expand_cluster_order", "update_seeds", "PointCallback"]
