"""
Central configuration for the OPTICS clustering library.
"""

import math

# --- Ordering Parameters ---

# Default neighborhood radius. Unbounded means every point is a candidate
# neighbor of every other point (the ordering then only depends on min_pts).
DEFAULT_EPS: float = math.inf

# Default minimum neighbor count. A point is a core point when strictly more
# than DEFAULT_MIN_PTS points (itself included) lie within eps.
DEFAULT_MIN_PTS: int = 5

# --- Extraction Parameters ---

# Reachability values above this threshold are moved to the outlier bucket.
# Values <= 0 disable outlier filtering. Compared against squared distances.
DEFAULT_OUTLIER_THRESHOLD: float = 0.0

# --- Progress Reporting ---

# Number of processed points between two progress log lines.
PROGRESS_LOG_INTERVAL: int = 100

# --- Dataset Construction ---

# Pixels whose first channel exceeds this value become data points.
MASK_THRESHOLD: int = 128
