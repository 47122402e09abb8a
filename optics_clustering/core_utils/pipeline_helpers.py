"""
Helpers for generating synthetic OPTICS inputs.

Used by tests and the pipeline examples.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from sklearn.datasets import make_blobs

from optics_clustering.ordering.data_point import DataPoint
from .data_utils import points_from_array


def make_blob_points(
    n_samples: int = 60,
    centers=3,
    cluster_std: float = 0.5,
    n_features: int = 2,
    random_state: Optional[int] = 42,
) -> Tuple[List[DataPoint], np.ndarray]:
    """Create Gaussian blobs as DataPoints using :func:`sklearn.datasets.make_blobs`.

    Returns
    -------
    tuple[list[DataPoint], np.ndarray]
        Points labelled with their row index, and the true blob id per row.
    """
    X, y_true = make_blobs(
        n_samples=n_samples,
        n_features=n_features,
        centers=centers,
        cluster_std=cluster_std,
        random_state=random_state,
    )
    return points_from_array(X), np.asarray(y_true)


__all__ = ["make_blob_points"]
