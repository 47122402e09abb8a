"""Pure functions for building cluster assignment structures.

These convert the groups returned by :func:`extract_clusters` into cluster
metadata dictionaries and per-point DataFrames.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from optics_clustering.ordering.data_point import DataPoint

OUTLIER_CLUSTER_ID = -1


def build_cluster_assignments(
    groups: Sequence[Sequence[DataPoint]],
) -> dict[int, dict[str, object]]:
    """Build a cluster assignment dictionary from extracted groups.

    Parameters
    ----------
    groups
        Output of :func:`extract_clusters`; ``groups[0]`` is the outlier bucket.

    Returns
    -------
    dict[int, dict[str, object]]
        Mapping from cluster id to ``members`` and ``size``. Cluster ids count
        from 0 for ``groups[1]``; empty groups are skipped but keep their id.
        A non-empty outlier bucket is reported under ``-1``.
    """
    cluster_assignments: dict[int, dict[str, object]] = {}
    if groups and groups[0]:
        cluster_assignments[OUTLIER_CLUSTER_ID] = {
            "members": list(groups[0]),
            "size": len(groups[0]),
        }
    for cluster_index, members in enumerate(groups[1:]):
        if not members:
            continue
        cluster_assignments[cluster_index] = {
            "members": list(members),
            "size": len(members),
        }
    return cluster_assignments


def build_point_cluster_assignments(
    ordering: Sequence[DataPoint],
    groups: Sequence[Sequence[DataPoint]],
) -> pd.DataFrame:
    """Build per-point cluster assignments aligned to the ordering.

    Returns
    -------
    pandas.DataFrame
        Indexed by ordering position (``position``) with columns:

        - ``uid``: point handle
        - ``label``: the point's label payload
        - ``cluster_id``: cluster identifier, ``-1`` for outliers
        - ``cluster_size``: number of points in that cluster
    """
    columns = ["uid", "label", "cluster_id", "cluster_size"]
    cluster_of: Dict[int, int] = {}
    size_of: Dict[int, int] = {}
    for cluster_id, info in build_cluster_assignments(groups).items():
        size_of[cluster_id] = int(info["size"])
        for p in info["members"]:
            cluster_of[p.uid] = cluster_id

    rows: List[Dict[str, object]] = []
    for p in ordering:
        cluster_id = cluster_of.get(p.uid, OUTLIER_CLUSTER_ID)
        rows.append(
            {
                "uid": p.uid,
                "label": p.label,
                "cluster_id": cluster_id,
                "cluster_size": size_of.get(cluster_id, 0),
            }
        )

    df = pd.DataFrame(rows, columns=columns)
    df.index.name = "position"
    return df


__all__ = [
    "OUTLIER_CLUSTER_ID",
    "build_cluster_assignments",
    "build_point_cluster_assignments",
]
