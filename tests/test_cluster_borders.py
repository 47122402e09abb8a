import pytest

from optics_clustering.errors import InvalidArgumentError
from optics_clustering.extraction.cluster_borders import (
    find_cluster_borders,
    reachabilities,
)

# Two valleys separated by a small peak at 3 and a large one at 7.
VALUES = [None, 1.0, 1.0, 5.0, 1.0, 1.0, 1.0, 8.0, 1.0, 1.0]


@pytest.mark.parametrize(
    "persistence,expected",
    [(0.0, [3, 7]), (2.0, [3, 7]), (4.0, [3, 7]), (5.0, [7]), (100.0, [])],
)
def test_persistence_filters_peaks(persistence, expected) -> None:
    assert find_cluster_borders(VALUES, persistence=persistence) == expected


@pytest.mark.parametrize(
    "n_clusters,expected", [(1, []), (2, [7]), (3, [3, 7]), (10, [3, 7])]
)
def test_n_clusters_keeps_most_prominent_peaks(n_clusters, expected) -> None:
    assert find_cluster_borders(VALUES, n_clusters=n_clusters) == expected


def test_undefined_fill_changes_peak_prominence() -> None:
    values = [0.5, None, 0.5, 2.0, 0.5]
    assert find_cluster_borders(values, persistence=1.0) == [1, 3]
    assert find_cluster_borders(values, persistence=1.0, undefined_fill=0.5) == [3]


def test_short_or_flat_sequences_have_no_borders() -> None:
    assert find_cluster_borders([], persistence=0.0) == []
    assert find_cluster_borders([None, 1.0], persistence=0.0) == []
    assert find_cluster_borders([None, 2.0, 2.0, 2.0], n_clusters=3) == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"persistence": 1.0, "n_clusters": 2},
        {"persistence": -1.0},
        {"persistence": float("nan")},
        {"n_clusters": 0},
        {"n_clusters": 2.5},
        {"n_clusters": True},
        {"persistence": 1.0, "undefined_fill": float("nan")},
    ],
)
def test_invalid_parameters_raise(kwargs) -> None:
    with pytest.raises(InvalidArgumentError):
        find_cluster_borders(VALUES, **kwargs)


def test_reachabilities_reads_the_ordering(ordering_factory) -> None:
    ordering = ordering_factory([None, 0.5, 2.0])
    assert reachabilities(ordering) == [None, 0.5, 2.0]
