"""Cluster extraction from OPTICS orderings."""

from .extract_clusters import extract_clusters, is_outlier
from .cluster_borders import find_cluster_borders, reachabilities
from .cluster_assignments import (
    OUTLIER_CLUSTER_ID,
    build_cluster_assignments,
    build_point_cluster_assignments,
)

__all__ = [
    "extract_clusters",
    "is_outlier",
    "find_cluster_borders",
    "reachabilities",
    "OUTLIER_CLUSTER_ID",
    "build_cluster_assignments",
    "build_point_cluster_assignments",
]
