"""Plotting helpers for OPTICS orderings."""

from .cluster_color_mapping import build_cluster_colors, cluster_palette
from .reachability_plot import plot_reachability

__all__ = ["build_cluster_colors", "cluster_palette", "plot_reachability"]
