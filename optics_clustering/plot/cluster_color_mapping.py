"""
Discrete color assignment for OPTICS clusters.

Cluster ids ``0..n-1`` take colors from tab10 / tab20; larger counts fall
back to evenly spread golden-ratio hues. The outlier bucket (id ``-1``) keeps
its own color.
"""

from __future__ import annotations

import colorsys
from typing import Dict, List

import matplotlib.pyplot as plt
import matplotlib.colors as mcolors

from .config import OUTLIER_BAR_COLOR

_GOLDEN_RATIO = (1 + 5**0.5) / 2


def cluster_palette(n: int) -> List[str]:
    """Return ``n`` distinct hex colors, deterministic for a given ``n``."""
    if n <= 0:
        return []
    if n <= 20:
        cmap = plt.get_cmap("tab10" if n <= 10 else "tab20")
        return [mcolors.to_hex(cmap.colors[i]) for i in range(n)]
    return [
        mcolors.to_hex(colorsys.hsv_to_rgb((i / _GOLDEN_RATIO) % 1.0, 0.65, 0.95))
        for i in range(n)
    ]


def build_cluster_colors(
    n_clusters: int, *, outlier_color: str = OUTLIER_BAR_COLOR
) -> Dict[int, str]:
    """Map cluster ids ``0..n_clusters-1`` (and ``-1``) to hex colors."""
    n_clusters = int(n_clusters)
    if n_clusters < 0:
        raise ValueError("n_clusters must be >= 0")

    id_to_color: Dict[int, str] = dict(enumerate(cluster_palette(n_clusters)))
    id_to_color[-1] = outlier_color
    return id_to_color


__all__ = ["build_cluster_colors", "cluster_palette"]
