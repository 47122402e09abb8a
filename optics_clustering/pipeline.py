"""End-to-end OPTICS run: ordering, border detection, cluster extraction."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

import pandas as pd

from optics_clustering import config
from optics_clustering.core_utils.data_utils import ordering_to_frame
from optics_clustering.extraction.cluster_assignments import (
    build_point_cluster_assignments,
)
from optics_clustering.extraction.cluster_borders import (
    find_cluster_borders,
    reachabilities,
)
from optics_clustering.extraction.extract_clusters import extract_clusters
from optics_clustering.ordering.data_point import DataPoint
from optics_clustering.ordering.optics import optics
from optics_clustering.ordering.progress import ProgressLogger


def _default_pipeline_logger() -> logging.Logger:
    return logging.getLogger("optics_clustering.pipeline")


@dataclass
class OpticsResult:
    """Everything produced by :func:`run_optics_pipeline`."""

    ordering: List[DataPoint]
    borders: List[int]
    clusters: List[List[DataPoint]]
    frame: pd.DataFrame
    assignments: pd.DataFrame
    n_unreachable: int

    @property
    def outliers(self) -> List[DataPoint]:
        return self.clusters[0]

    @property
    def n_clusters(self) -> int:
        """Number of non-empty cluster groups (outlier bucket excluded)."""
        return sum(1 for group in self.clusters[1:] if group)


def run_optics_pipeline(
    points: Iterable[DataPoint],
    eps: Optional[float] = None,
    min_pts: int = config.DEFAULT_MIN_PTS,
    persistence: Optional[float] = None,
    n_clusters: Optional[int] = None,
    outlier_threshold: float = config.DEFAULT_OUTLIER_THRESHOLD,
    progress_every: int = config.PROGRESS_LOG_INTERVAL,
    logger: Optional[logging.Logger] = None,
) -> OpticsResult:
    """
    Order ``points`` with OPTICS and cut the ordering into clusters.

    Parameters
    ----------
    points
        Unprocessed points; their state is mutated.
    eps
        Neighborhood radius. ``None`` or a negative value means unbounded.
    min_pts
        Minimum neighbor count for core points.
    persistence, n_clusters
        Border detection mode, see :func:`find_cluster_borders`. If both are
        ``None`` the whole ordering forms a single cluster.
    outlier_threshold
        Passed to :func:`extract_clusters`; ``<= 0`` disables outliers.
    progress_every
        Log progress every this many processed points.
    logger
        Logger for progress and summary lines.

    Returns
    -------
    OpticsResult
    """
    logger = logger or _default_pipeline_logger()
    points = list(points)
    if eps is None or eps < 0:
        eps = config.DEFAULT_EPS

    logger.info(
        "OPTICS parameters: eps=%s, min_pts=%d, persistence=%s, n_clusters=%s, "
        "outlier_threshold=%s",
        eps,
        min_pts,
        persistence,
        n_clusters,
        outlier_threshold,
    )
    logger.info("Running OPTICS with %d samples.", len(points))
    progress = ProgressLogger(len(points), every=progress_every, logger=logger)
    ordering = optics(points, eps, min_pts, on_point_processed=progress)
    logger.info("Done. Found %d results.", len(ordering))

    values = reachabilities(ordering)
    n_unreachable = sum(1 for v in values if v is None)
    logger.info("# unreachables: %d", n_unreachable)

    if persistence is None and n_clusters is None:
        borders: List[int] = []
    else:
        borders = find_cluster_borders(
            values, persistence=persistence, n_clusters=n_clusters
        )
    clusters = extract_clusters(ordering, borders, outlier_threshold)
    logger.info(
        "Extracted %d cluster groups and %d outliers.",
        len(clusters) - 1,
        len(clusters[0]),
    )

    return OpticsResult(
        ordering=ordering,
        borders=borders,
        clusters=clusters,
        frame=ordering_to_frame(ordering),
        assignments=build_point_cluster_assignments(ordering, clusters),
        n_unreachable=n_unreachable,
    )


__all__ = ["OpticsResult", "run_optics_pipeline"]
