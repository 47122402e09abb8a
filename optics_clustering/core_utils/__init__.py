"""Dataset construction and export helpers."""

from .data_utils import ordering_to_frame, points_from_array, points_from_mask
from .pipeline_helpers import make_blob_points

__all__ = [
    "ordering_to_frame",
    "points_from_array",
    "points_from_mask",
    "make_blob_points",
]
