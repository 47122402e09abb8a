"""Priority structure for the OPTICS seed list.

Reachability distances of queued points improve while the frontier is
being worked off, so the structure supports decrease-key as
erase-then-reinsert. Erasure is lazy: the heap entry is invalidated in
place and skipped when it surfaces.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Tuple

from optics_clustering.errors import InvalidArgumentError
from .data_point import DataPoint

_REMOVED = None


def frontier_key(point: DataPoint) -> Tuple[int, float, int]:
    """Total order key: reachability ascending, undefined last, then ``uid``."""
    reachability = point.reachability_distance
    if reachability is None:
        return (1, 0.0, point.uid)
    return (0, reachability, point.uid)


class SeedFrontier:
    """Min-ordered set of discovered, not yet processed points.

    Keys are captured on insertion. A queued point's reachability must only
    be changed through :meth:`decrease` (or remove, change, insert).
    """

    def __init__(self):
        self._heap: List[list] = []
        self._entries: Dict[int, list] = {}
        # insertion counter; keeps a requeued entry from tying with its stale copy
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, point: DataPoint) -> bool:
        return point.uid in self._entries

    def insert(self, point: DataPoint) -> None:
        if point.uid in self._entries:
            raise InvalidArgumentError(f"Point {point.uid} is already in the frontier.")
        entry = [frontier_key(point), next(self._counter), point]
        self._entries[point.uid] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, point: DataPoint) -> None:
        entry = self._entries.pop(point.uid, None)
        if entry is None:
            raise KeyError(f"Point {point.uid} is not in the frontier.")
        entry[-1] = _REMOVED

    def decrease(self, point: DataPoint, reachability: float) -> None:
        """Lower the reachability of a queued point and requeue it."""
        self.remove(point)
        point.reachability_distance = reachability
        self.insert(point)

    def peek(self) -> Optional[DataPoint]:
        self._discard_removed()
        return self._heap[0][-1] if self._heap else None

    def pop_min(self) -> DataPoint:
        """Remove and return the point with the smallest key."""
        self._discard_removed()
        if not self._heap:
            raise KeyError("pop from an empty seed frontier")
        _key, _count, point = heapq.heappop(self._heap)
        del self._entries[point.uid]
        return point

    def _discard_removed(self) -> None:
        while self._heap and self._heap[0][-1] is _REMOVED:
            heapq.heappop(self._heap)


__all__ = ["SeedFrontier", "frontier_key"]
