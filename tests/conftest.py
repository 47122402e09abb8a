from __future__ import annotations

import numpy as np
import pytest

from optics_clustering.core_utils.pipeline_helpers import make_blob_points
from optics_clustering.ordering.data_point import DataPoint

BLOB_CENTERS = [[0.0, 0.0], [10.0, 0.0], [0.0, 10.0]]


@pytest.fixture
def three_points() -> list[DataPoint]:
    """Two close points and one far away point."""
    return [
        DataPoint([0.0, 0.0], label="a"),
        DataPoint([1.0, 0.0], label="b"),
        DataPoint([10.0, 10.0], label="c"),
    ]


@pytest.fixture
def blob_points() -> tuple[list[DataPoint], np.ndarray]:
    """Three well separated Gaussian blobs of 30 points each."""
    return make_blob_points(
        n_samples=90, centers=BLOB_CENTERS, cluster_std=0.3, random_state=7
    )


@pytest.fixture
def random_points() -> list[DataPoint]:
    rng = np.random.default_rng(0)
    return [DataPoint(row, label=i) for i, row in enumerate(rng.random((40, 2)))]


def make_ordering(reachabilities) -> list[DataPoint]:
    """Processed points with the given reachability values, in order."""
    ordering = []
    for i, r in enumerate(reachabilities):
        p = DataPoint([float(i), 0.0], label=i)
        p.reachability_distance = r
        p.processed = True
        ordering.append(p)
    return ordering


@pytest.fixture
def ordering_factory():
    return make_ordering
