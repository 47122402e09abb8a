from __future__ import annotations

from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd

from optics_clustering import config
from optics_clustering.errors import InvalidArgumentError
from optics_clustering.ordering.data_point import DataPoint


def points_from_array(
    X: np.ndarray, labels: Optional[Sequence[Any]] = None
) -> List[DataPoint]:
    """Build one DataPoint per row of a feature matrix.

    Parameters
    ----------
    X
        Array-like of shape ``(n_samples, n_features)``.
    labels
        Optional payload per row; defaults to the row index.

    Returns
    -------
    list[DataPoint]
        Points in row order.

    Raises
    ------
    InvalidArgumentError
        If ``X`` is not two-dimensional or ``labels`` has the wrong length.
    """
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2D array, got shape {X.shape}.")
    if labels is None:
        labels = range(X.shape[0])
    elif len(labels) != X.shape[0]:
        raise InvalidArgumentError(
            f"Got {len(labels)} labels for {X.shape[0]} rows."
        )
    return [DataPoint(row, label=label) for row, label in zip(X, labels)]


def points_from_mask(
    mask: np.ndarray, threshold: float = config.MASK_THRESHOLD
) -> List[DataPoint]:
    """Turn bright pixels of an image array into ``(row, col)`` points.

    A pixel becomes a point when its first channel exceeds ``threshold``.
    Points are created in row-major order and labelled with ``(row, col)``.
    """
    mask = np.asarray(mask)
    if mask.ndim == 3:
        mask = mask[..., 0]
    elif mask.ndim != 2:
        raise InvalidArgumentError(
            f"Expected a 2D or 3D image array, got shape {mask.shape}."
        )
    rows, cols = np.nonzero(mask > threshold)
    return [
        DataPoint((r, c), label=(int(r), int(c))) for r, c in zip(rows, cols)
    ]


def ordering_to_frame(ordering: Sequence[DataPoint]) -> pd.DataFrame:
    """Tabulate an OPTICS ordering.

    Returns
    -------
    pandas.DataFrame
        Indexed by ordering position with columns ``uid``, ``label``,
        ``reachability_distance``, ``core_distance``, ``is_core`` and one
        ``x{i}`` column per coordinate. Undefined distances are ``np.inf``.
    """
    dim = ordering[0].dim if len(ordering) else 0
    columns = ["uid", "label", "reachability_distance", "core_distance", "is_core"]
    columns += [f"x{i}" for i in range(dim)]

    rows = []
    for p in ordering:
        row = {
            "uid": p.uid,
            "label": p.label,
            "reachability_distance": np.inf
            if p.reachability_distance is None
            else p.reachability_distance,
            "core_distance": np.inf if p.core_distance is None else p.core_distance,
            "is_core": p.is_core,
        }
        row.update({f"x{i}": float(v) for i, v in enumerate(p.data)})
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns)
    df.index.name = "position"
    return df


__all__ = ["points_from_array", "points_from_mask", "ordering_to_frame"]
