"""OPTICS cluster ordering: points, neighborhoods, seed frontier and driver."""

from .data_point import UNDEFINED, DataPoint, is_undefined, reset_points
from .neighborhood import get_neighbors, squared_distance
from .core_distance import squared_core_distance
from .seed_frontier import SeedFrontier, frontier_key
from .expansion import expand_cluster_order, update_seeds
from .optics import optics
from .progress import ProgressLogger

__all__ = [
    "UNDEFINED",
    "DataPoint",
    "is_undefined",
    "reset_points",
    "get_neighbors",
    "squared_distance",
    "squared_core_distance",
    "SeedFrontier",
    "frontier_key",
    "expand_cluster_order",
    "update_seeds",
    "optics",
    "ProgressLogger",
]
