"""Partition an OPTICS ordering into clusters along border indices."""

from __future__ import annotations

import math
import numbers
from typing import List, Optional, Sequence

from optics_clustering import config
from optics_clustering.errors import InvalidArgumentError
from optics_clustering.ordering.data_point import DataPoint


def _validate_borders(borders: Sequence[int], n_points: int) -> List[int]:
    checked: List[int] = []
    previous = 0
    for raw in borders:
        if isinstance(raw, bool) or not isinstance(raw, numbers.Integral):
            raise InvalidArgumentError(f"Cluster borders must be integers, got {raw!r}.")
        border = int(raw)
        if not 0 <= border <= n_points:
            raise InvalidArgumentError(
                f"Cluster border {border} is outside the ordering range [0, {n_points}]."
            )
        if border < previous:
            raise InvalidArgumentError(
                "Cluster borders must be sorted in ascending order."
            )
        checked.append(border)
        previous = border
    return checked


def is_outlier(reachability: Optional[float], outlier_threshold: float) -> bool:
    """True if ``reachability`` lies above the threshold.

    Undefined reachability counts as above every finite threshold.
    """
    if reachability is None:
        return not math.isinf(outlier_threshold)
    return reachability > outlier_threshold


def extract_clusters(
    ordering: Sequence[DataPoint],
    cluster_borders: Sequence[int],
    outlier_threshold: float = config.DEFAULT_OUTLIER_THRESHOLD,
) -> List[List[DataPoint]]:
    """
    Partition an OPTICS ordering along the given cluster borders.

    Parameters
    ----------
    ordering
        Output of :func:`optics`. Not modified.
    cluster_borders
        Indices into ``ordering``, sorted ascending, each in
        ``[0, len(ordering)]``. Group ``i`` spans ``[borders[i-1], borders[i])``.
    outlier_threshold
        Points whose (squared) reachability distance exceeds this value go to
        the outlier bucket. Values ``<= 0`` disable outlier filtering.

    Returns
    -------
    list[list[DataPoint]]
        ``len(cluster_borders) + 2`` disjoint groups. Index 0 holds the
        outliers; the rest are the border slices without their outliers.
        Relative order of the ordering is preserved within every group.

    Raises
    ------
    InvalidArgumentError
        If the borders are unsorted or out of range, or the threshold is NaN.
    """
    borders = _validate_borders(cluster_borders, len(ordering))
    outlier_threshold = float(outlier_threshold)
    if math.isnan(outlier_threshold):
        raise InvalidArgumentError("outlier_threshold must not be NaN.")
    if outlier_threshold <= 0:
        outlier_threshold = math.inf

    outliers: List[DataPoint] = []
    groups: List[List[DataPoint]] = [outliers]
    bounds = [0] + borders + [len(ordering)]
    for lower_idx, upper_idx in zip(bounds[:-1], bounds[1:]):
        cluster: List[DataPoint] = []
        for p in ordering[lower_idx:upper_idx]:
            if is_outlier(p.reachability_distance, outlier_threshold):
                outliers.append(p)
            else:
                cluster.append(p)
        groups.append(cluster)
    return groups


__all__ = ["extract_clusters", "is_outlier"]
