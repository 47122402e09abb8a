"""Multi-dimensional data points carrying OPTICS algorithm state."""

from __future__ import annotations

import itertools
import math
from typing import Any, Iterable, Optional

import numpy as np

from optics_clustering.errors import CoordinateIndexError, InvalidArgumentError

# Marker for an unset distance. Undefined distances sort after every finite one.
UNDEFINED = None

_uid_counter = itertools.count()


def is_undefined(distance: Optional[float]) -> bool:
    """Return True if ``distance`` is the undefined marker."""
    return distance is None


class DataPoint:
    """A numeric point plus the mutable state the OPTICS ordering needs.

    Parameters
    ----------
    data
        Coordinates of the point. Copied into a one-dimensional float64 array.
    label
        Optional opaque payload, e.g. the row of the source table the point
        was built from. It has no effect on the algorithm.

    Notes
    -----
    Every point gets an integer ``uid`` in creation order. The seed frontier
    uses it to break ties between equal reachability distances, so two
    distinct points never collapse onto the same key.
    """

    def __init__(self, data: Iterable[float] = (), label: Any = None):
        if not isinstance(data, (np.ndarray, list, tuple)):
            data = list(data)
        self._data = np.array(data, dtype=np.float64).ravel()
        self._reachability_distance: Optional[float] = UNDEFINED
        self._processed = False
        self.core_distance: Optional[float] = UNDEFINED
        self.label = label
        self.uid = next(_uid_counter)

    # ---------------- Algorithm state ----------------

    @property
    def reachability_distance(self) -> Optional[float]:
        """Squared reachability distance, or ``None`` while undefined."""
        return self._reachability_distance

    @reachability_distance.setter
    def reachability_distance(self, value: Optional[float]) -> None:
        if value is None:
            self._reachability_distance = UNDEFINED
            return
        value = float(value)
        if math.isnan(value) or value < 0:
            raise InvalidArgumentError(
                f"Reachability distance must not be negative, got {value!r}."
            )
        self._reachability_distance = value

    @property
    def processed(self) -> bool:
        return self._processed

    @processed.setter
    def processed(self, flag: bool) -> None:
        self._processed = bool(flag)

    @property
    def is_core(self) -> bool:
        return self.core_distance is not None

    def reset(self) -> None:
        """Return the point to its unseen state so it can be ordered again."""
        self._reachability_distance = UNDEFINED
        self.core_distance = UNDEFINED
        self._processed = False

    # ---------------- Coordinates ----------------

    @property
    def data(self) -> np.ndarray:
        """The coordinate array itself; writes change the point."""
        return self._data

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the coordinates."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def dim(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, idx: int) -> float:
        n = self.dim
        if not -n <= idx < n:
            raise CoordinateIndexError(
                f"Coordinate index {idx} is out of range for a {n}-dimensional point."
            )
        return float(self._data[idx])

    def __repr__(self) -> str:
        coords = ", ".join(f"{x:g}" for x in self._data)
        return (
            f"DataPoint(uid={self.uid}, data=[{coords}], "
            f"reachability_distance={self._reachability_distance!r}, "
            f"processed={self._processed})"
        )


def reset_points(points: Iterable[DataPoint]) -> None:
    """Reset every point so the same dataset can be passed to ``optics`` again."""
    for point in points:
        point.reset()


__all__ = ["UNDEFINED", "DataPoint", "is_undefined", "reset_points"]
