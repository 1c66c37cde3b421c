"""
Axis Clustering

Groups rectangles into rows or columns by a tolerance threshold.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

from ..protocol import Number

T = TypeVar("T")

DEFAULT_ALIGNMENT_THRESHOLD = 20


@dataclass
class Cluster(Generic[T]):
    """Items sharing a row or column.

    ``key`` is the cross-axis coordinate of the first member and is never
    recomputed as members join.
    """

    key: Number
    members: List[T] = field(default_factory=list)


def group_by_axis(
    items: Sequence[T],
    axis: str = "x",
    threshold: Number = DEFAULT_ALIGNMENT_THRESHOLD,
) -> List[Cluster[T]]:
    """
    Group items lying along the given axis.

    ``axis="x"`` collects items laid out along the x axis, so they are keyed
    by ``y`` and each cluster is a row. ``axis="y"`` keys by ``x`` and each
    cluster is a column.

    Items join the first existing cluster whose key is within ``threshold``
    (inclusive) of their own key, so the result depends on input order.
    """
    if axis not in ("x", "y"):
        raise ValueError(f"Invalid axis: {axis!r}. Use 'x' or 'y'")

    clusters: List[Cluster[T]] = []
    for item in items:
        key = item.y if axis == "x" else item.x
        for cluster in clusters:
            if abs(cluster.key - key) <= threshold:
                cluster.members.append(item)
                break
        else:
            clusters.append(Cluster(key=key, members=[item]))
    return clusters
