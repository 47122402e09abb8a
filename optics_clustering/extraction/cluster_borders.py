"""Cluster-border detection on reachability plots.

Clusters show up as valleys of the reachability plot, so the most persistent
peaks separate them. Peak persistence is measured as the topographic
prominence computed by :func:`scipy.signal.find_peaks`.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import List, Optional, Sequence

import numpy as np
from scipy.signal import find_peaks

from optics_clustering.errors import InvalidArgumentError
from optics_clustering.ordering.data_point import DataPoint

logger = logging.getLogger(__name__)


def reachabilities(ordering: Sequence[DataPoint]) -> List[Optional[float]]:
    """Reachability distances of an ordering, in order (``None`` = undefined)."""
    return [p.reachability_distance for p in ordering]


def _to_signal(
    values: Sequence[Optional[float]], undefined_fill: Optional[float]
) -> np.ndarray:
    finite = [float(v) for v in values if v is not None]
    if undefined_fill is None:
        undefined_fill = max(finite) if finite else 1.0
    elif math.isnan(undefined_fill):
        raise InvalidArgumentError("undefined_fill must not be NaN.")
    return np.array(
        [undefined_fill if v is None else float(v) for v in values], dtype=np.float64
    )


def find_cluster_borders(
    values: Sequence[Optional[float]],
    persistence: Optional[float] = None,
    n_clusters: Optional[int] = None,
    undefined_fill: Optional[float] = None,
) -> List[int]:
    """
    Find cluster borders as peaks of an OPTICS reachability sequence.

    Parameters
    ----------
    values
        Reachability distances in ordering order, e.g. from
        :func:`reachabilities`. ``None`` marks an undefined distance.
    persistence
        Keep every peak whose prominence is at least this value.
    n_clusters
        Keep the ``n_clusters - 1`` most prominent peaks instead. If fewer
        peaks exist, all of them are returned.
    undefined_fill
        Value substituted for undefined distances before peak detection.
        Defaults to the largest finite reachability (``1.0`` if none).

    Returns
    -------
    list[int]
        Border indices sorted in ascending order, usable with
        :func:`extract_clusters`.

    Raises
    ------
    InvalidArgumentError
        Unless exactly one of ``persistence`` and ``n_clusters`` is given
        with a valid value.
    """
    if (persistence is None) == (n_clusters is None):
        raise InvalidArgumentError(
            "Exactly one of 'persistence' and 'n_clusters' must be given."
        )
    if persistence is not None and not persistence >= 0:
        raise InvalidArgumentError(
            f"persistence must not be negative, got {persistence!r}."
        )
    if n_clusters is not None and (
        isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral)
    ):
        raise InvalidArgumentError(
            f"n_clusters must be an integer, got {type(n_clusters).__name__}."
        )
    if n_clusters is not None and n_clusters < 1:
        raise InvalidArgumentError(f"n_clusters must be at least 1, got {n_clusters}.")

    signal = _to_signal(values, undefined_fill)
    if signal.size < 3:
        return []

    if persistence is not None:
        peaks, _ = find_peaks(signal, prominence=float(persistence))
        borders = sorted(int(i) for i in peaks)
    else:
        peaks, properties = find_peaks(signal, prominence=0.0)
        prominences = properties["prominences"]
        # most prominent first, earlier position wins ties
        ranked = sorted(zip(-prominences, peaks))[: int(n_clusters) - 1]
        borders = sorted(int(i) for _, i in ranked)

    logger.debug("Detected %d cluster borders in %d values.", len(borders), signal.size)
    return borders


__all__ = ["find_cluster_borders", "reachabilities"]
