"""
OPTICS (Ordering Points To Identify the Clustering Structure) for Python.

The plotting helpers live in :mod:`optics_clustering.plot` and are imported
separately.
"""

from .errors import CoordinateIndexError, InvalidArgumentError, OrderingAborted
from .ordering import (
    UNDEFINED,
    DataPoint,
    ProgressLogger,
    SeedFrontier,
    expand_cluster_order,
    get_neighbors,
    is_undefined,
    optics,
    reset_points,
    squared_core_distance,
    squared_distance,
    update_seeds,
)
from .extraction import (
    build_cluster_assignments,
    build_point_cluster_assignments,
    extract_clusters,
    find_cluster_borders,
    reachabilities,
)
from .core_utils import (
    make_blob_points,
    ordering_to_frame,
    points_from_array,
    points_from_mask,
)
from .pipeline import OpticsResult, run_optics_pipeline

__all__ = [
    "CoordinateIndexError",
    "InvalidArgumentError",
    "OrderingAborted",
    "UNDEFINED",
    "DataPoint",
    "ProgressLogger",
    "SeedFrontier",
    "expand_cluster_order",
    "get_neighbors",
    "is_undefined",
    "optics",
    "reset_points",
    "squared_core_distance",
    "squared_distance",
    "update_seeds",
    "build_cluster_assignments",
    "build_point_cluster_assignments",
    "extract_clusters",
    "find_cluster_borders",
    "reachabilities",
    "make_blob_points",
    "ordering_to_frame",
    "points_from_array",
    "points_from_mask",
    "OpticsResult",
    "run_optics_pipeline",
]
