"""Tests for the static reachability plot."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import pytest

from optics_clustering.ordering.optics import optics
from optics_clustering.plot.cluster_color_mapping import (
    build_cluster_colors,
    cluster_palette,
)
from optics_clustering.plot.config import OUTLIER_BAR_COLOR, UNDEFINED_BAR_COLOR
from optics_clustering.plot.reachability_plot import plot_reachability


def test_plot_draws_one_bar_per_point(blob_points) -> None:
    points, _ = blob_points
    ordering = optics(points, float("inf"), 4)

    fig, ax = plot_reachability(ordering, borders=[30, 60], outlier_threshold=50.0)

    assert fig is not None
    assert len(ax.patches) == len(ordering)
    # two border lines and one threshold line
    assert len(ax.lines) == 3
    assert ax.get_xlabel() == "Ordering position"

    plt.close(fig)


def test_undefined_bars_use_their_own_color(three_points) -> None:
    ordering = optics(three_points, 2.0, 1)
    fig, ax = plt.subplots()

    returned_fig, returned_ax = plot_reachability(ordering, ax=ax)

    assert returned_fig is fig
    assert returned_ax is ax
    heights = [bar.get_height() for bar in ax.patches]
    assert heights[1] == 1.0
    assert heights[0] == heights[2] > 1.0
    assert mcolors.same_color(ax.patches[0].get_facecolor(), UNDEFINED_BAR_COLOR)
    assert not mcolors.same_color(ax.patches[1].get_facecolor(), UNDEFINED_BAR_COLOR)
    assert len(ax.lines) == 0

    plt.close(fig)


def test_plot_of_empty_ordering() -> None:
    fig, ax = plot_reachability([])
    assert len(ax.patches) == 0
    plt.close(fig)


def test_cluster_colors_are_discrete_and_reserve_outliers() -> None:
    colors = build_cluster_colors(3)
    assert set(colors) == {-1, 0, 1, 2}
    assert colors[-1] == OUTLIER_BAR_COLOR
    assert len({colors[0], colors[1], colors[2]}) == 3

    many = build_cluster_colors(25)
    assert len({many[i] for i in range(25)}) == 25

    with pytest.raises(ValueError):
        build_cluster_colors(-1)


@pytest.mark.parametrize("n", [0, 1, 10, 11, 20, 21, 40])
def test_cluster_palette_gives_distinct_colors(n) -> None:
    palette = cluster_palette(n)
    assert len(palette) == n
    assert len(set(palette)) == n
    assert palette == cluster_palette(n)
