"""Cross-check core distances against scikit-learn's OPTICS."""

import numpy as np
import pytest
from sklearn.cluster import OPTICS

from optics_clustering.core_utils.data_utils import points_from_array
from optics_clustering.ordering.optics import optics


@pytest.mark.parametrize("min_pts", [1, 3, 6])
@pytest.mark.parametrize("eps", [np.inf, 0.2])
def test_core_distances_match_sklearn(min_pts: int, eps: float) -> None:
    rng = np.random.default_rng(11)
    X = rng.random((60, 2))
    points = points_from_array(X)

    optics(points, eps, min_pts)

    ours = np.array(
        [np.inf if p.core_distance is None else np.sqrt(p.core_distance) for p in points]
    )
    # sklearn counts the point itself in min_samples
    model = OPTICS(min_samples=min_pts + 1, max_eps=eps).fit(X)
    np.testing.assert_allclose(ours, model.core_distances_, rtol=1e-9, atol=1e-12)
