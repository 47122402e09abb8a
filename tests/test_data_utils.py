import numpy as np
import pytest

from optics_clustering.core_utils.data_utils import (
    ordering_to_frame,
    points_from_array,
    points_from_mask,
)
from optics_clustering.core_utils.pipeline_helpers import make_blob_points
from optics_clustering.errors import InvalidArgumentError
from optics_clustering.ordering.optics import optics


def test_points_from_array_labels_rows() -> None:
    X = np.array([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])

    points = points_from_array(X)

    assert [p.label for p in points] == [0, 1, 2]
    np.testing.assert_array_equal(points[1].data, [2.0, 3.0])

    named = points_from_array(X, labels=["x", "y", "z"])
    assert [p.label for p in named] == ["x", "y", "z"]


def test_points_from_array_validates_shape_and_labels() -> None:
    with pytest.raises(InvalidArgumentError, match="2D array"):
        points_from_array(np.zeros(3))
    with pytest.raises(InvalidArgumentError, match="labels"):
        points_from_array(np.zeros((3, 2)), labels=["a"])


def test_points_from_mask_scans_row_major() -> None:
    image = np.zeros((3, 4, 3), dtype=np.uint8)
    image[0, 2, 0] = 255
    image[2, 1, 0] = 200
    image[1, 1, 0] = 128  # not above the threshold
    image[1, 3, 1] = 255  # only the first channel counts

    points = points_from_mask(image)

    assert [p.label for p in points] == [(0, 2), (2, 1)]
    np.testing.assert_array_equal(points[0].data, [0.0, 2.0])

    gray = image[..., 0]
    assert [p.label for p in points_from_mask(gray, threshold=100)] == [
        (0, 2),
        (1, 1),
        (2, 1),
    ]


def test_points_from_mask_rejects_bad_shapes() -> None:
    with pytest.raises(InvalidArgumentError):
        points_from_mask(np.zeros(5))


def test_ordering_to_frame(three_points) -> None:
    ordering = optics(three_points, 2.0, 1)

    df = ordering_to_frame(ordering)

    assert df.index.name == "position"
    assert list(df.columns) == [
        "uid",
        "label",
        "reachability_distance",
        "core_distance",
        "is_core",
        "x0",
        "x1",
    ]
    assert df["label"].tolist() == ["a", "b", "c"]
    assert df["reachability_distance"].tolist() == [np.inf, 1.0, np.inf]
    assert df["core_distance"].tolist() == [1.0, 1.0, np.inf]
    assert df["is_core"].tolist() == [True, True, False]
    assert df.loc[2, "x1"] == 10.0


def test_ordering_to_frame_empty() -> None:
    df = ordering_to_frame([])
    assert df.empty
    assert "reachability_distance" in df.columns


def test_make_blob_points_is_reproducible() -> None:
    points_a, y_a = make_blob_points(n_samples=20, random_state=3)
    points_b, y_b = make_blob_points(n_samples=20, random_state=3)

    assert len(points_a) == 20
    assert points_a[0].dim == 2
    np.testing.assert_array_equal(y_a, y_b)
    for a, b in zip(points_a, points_b):
        np.testing.assert_array_equal(a.data, b.data)
