"""Static reachability plot of an OPTICS ordering."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from optics_clustering.extraction.cluster_assignments import OUTLIER_CLUSTER_ID
from optics_clustering.extraction.cluster_borders import reachabilities
from optics_clustering.extraction.extract_clusters import extract_clusters
from optics_clustering.ordering.data_point import DataPoint

from .cluster_color_mapping import build_cluster_colors
from .config import (
    BAR_STYLE,
    BORDER_LINE_STYLE,
    THRESHOLD_LINE_STYLE,
    UNDEFINED_BAR_COLOR,
    UNDEFINED_HEIGHT_FACTOR,
)


def plot_reachability(
    ordering: Sequence[DataPoint],
    borders: Optional[Sequence[int]] = None,
    outlier_threshold: Optional[float] = None,
    ax=None,
    show: bool = False,
):
    """Draw the reachability bar chart of an ordering.

    Bars are colored by the cluster :func:`extract_clusters` assigns them to,
    undefined reachabilities are drawn slightly above the tallest finite bar in
    their own color, borders become vertical lines and a positive
    ``outlier_threshold`` a horizontal line.

    Returns
    -------
    tuple
        ``(fig, ax)``.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))
    else:
        fig = ax.figure

    borders = list(borders) if borders is not None else []
    threshold = float(outlier_threshold) if outlier_threshold is not None else 0.0

    values = reachabilities(ordering)
    finite = [v for v in values if v is not None]
    top = max(finite) if finite and max(finite) > 0 else 1.0
    undefined_height = top * UNDEFINED_HEIGHT_FACTOR

    groups = extract_clusters(ordering, borders, threshold)
    id_to_color = build_cluster_colors(len(groups) - 1)
    cluster_of = {p.uid: OUTLIER_CLUSTER_ID for p in groups[0]}
    for cluster_id, members in enumerate(groups[1:]):
        cluster_of.update({p.uid: cluster_id for p in members})

    heights = np.array(
        [undefined_height if v is None else v for v in values], dtype=float
    )
    bar_colors = [
        UNDEFINED_BAR_COLOR if v is None else id_to_color[cluster_of[p.uid]]
        for p, v in zip(ordering, values)
    ]
    if values:
        ax.bar(np.arange(len(values)), heights, color=bar_colors, **BAR_STYLE)

    for border in borders:
        ax.axvline(border, **BORDER_LINE_STYLE)
    if threshold > 0:
        ax.axhline(threshold, **THRESHOLD_LINE_STYLE)

    ax.set_xlim(0, max(len(values), 1))
    ax.set_xlabel("Ordering position")
    ax.set_ylabel("Squared reachability distance")
    ax.set_title("OPTICS reachability plot")

    if show:
        plt.show()
    return fig, ax


__all__ = ["plot_reachability"]
