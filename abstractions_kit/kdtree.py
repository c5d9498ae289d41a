"""A k-d tree for k-nearest-neighbour search over point clouds."""

from __future__ import annotations

import heapq
import itertools
import operator
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass
class _Node:
    id: int
    point_idx: int = 0
    axis: int = 0
    split: float = 0.0
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class KdTree:
    """A k-d tree built over a cloud of points of equal dimension.

    Each internal node splits on the axis of largest variance at the mean
    along that axis. Points that cannot be separated (all equal) collapse
    into a single leaf holding the first of them.

    In approximate mode the far side of a split is only searched when the
    squared distance to the split plane is below ``alpha`` times the current
    worst squared distance among the neighbours found.
    """

    def __init__(self, approximate: bool = True, alpha: float = 0.1) -> None:
        self._approximate = approximate
        self._alpha = alpha
        self._cloud = np.empty((0, 0))
        self._root: _Node | None = None
        self._nodes: dict[int, _Node] = {}
        self._size = 0

    def set_ann(self, use_ann: bool = True, alpha: float = 0.1) -> None:
        """Switch approximate search on or off and set its factor."""
        self._approximate = use_ann
        self._alpha = alpha

    def __len__(self) -> int:
        """Return the number of leaves, i.e. the number of searchable points."""
        return self._size

    def clear(self) -> None:
        """Drop the tree and its points."""
        self._cloud = np.empty((0, 0))
        self._root = None
        self._nodes = {}
        self._size = 0

    def build(self, cloud: Sequence[Sequence[float]] | np.ndarray) -> None:
        """Build the tree over ``cloud``, an (n, d) array of points."""
        points = np.asarray(cloud, dtype=float)
        if points.size == 0:
            raise ValueError("cannot build a tree from an empty cloud")
        if points.ndim != 2:
            raise ValueError("cloud must be a two-dimensional array of points")
        self.clear()
        self._cloud = points

        # Nodes are numbered in pre-order: a node, its whole left subtree, then its right.
        pending: list[tuple[_Node | None, str, np.ndarray]] = [
            (None, "root", np.arange(len(points)))
        ]
        next_id = itertools.count()
        while pending:
            parent, side, indices = pending.pop()
            node = _Node(id=next(next_id))
            self._nodes[node.id] = node
            if parent is None:
                self._root = node
            else:
                setattr(parent, side, node)

            if len(indices) == 1:
                node.point_idx = int(indices[0])
                self._size += 1
                continue
            split = self._find_split(indices)
            if split is None:
                node.point_idx = int(indices[0])
                self._size += 1
                continue
            node.axis, node.split, left, right = split
            pending.append((node, "right", right))
            pending.append((node, "left", left))

    def _find_split(self, indices: np.ndarray) -> tuple[int, float, np.ndarray, np.ndarray] | None:
        subset = self._cloud[indices]
        mean = subset.mean(axis=0)
        var = subset.var(axis=0)
        axis = int(np.argmax(var))
        threshold = float(mean[axis])
        mask = subset[:, axis] < threshold
        left = indices[mask]
        right = indices[~mask]
        if len(left) == 0 or len(right) == 0:
            return None
        return axis, threshold, left, right

    def closest_points(self, point: Sequence[float] | np.ndarray, k: int = 5) -> list[int]:
        """Return the indices of the ``k`` points nearest ``point``, nearest first."""
        k = operator.index(k)
        if self._root is None:
            raise ValueError("the tree is empty")
        if k < 1:
            raise ValueError("k must be at least 1")
        if k > self._size:
            raise ValueError(f"cannot set k larger than cloud size: {k}, {self._size}")
        query = np.asarray(point, dtype=float)
        if query.shape != (self._cloud.shape[1],):
            raise ValueError(
                f"point must have {self._cloud.shape[1]} coordinates, got shape {query.shape}"
            )
        return self._knn(query, k)

    def _knn(self, query: np.ndarray, k: int) -> list[int]:
        # Max-heap on squared distance, stored negated.
        heap: list[tuple[float, int, int]] = []
        counter = itertools.count()
        work: list[tuple[str, _Node, _Node | None]] = [("visit", self._root, None)]
        while work:
            action, node, other = work.pop()
            if action == "visit":
                if node.is_leaf:
                    self._offer_leaf(query, node, heap, k, counter)
                    continue
                if query[node.axis] < node.split:
                    this_side, that_side = node.left, node.right
                else:
                    this_side, that_side = node.right, node.left
                work.append(("expand", node, that_side))
                work.append(("visit", this_side, None))
            elif self._need_expand(query, node, heap, k):
                work.append(("visit", other, None))
        ordered = sorted(heap, key=lambda entry: (-entry[0], entry[1]))
        return [idx for _, _, idx in ordered]

    def _offer_leaf(self, query, node, heap, k, counter) -> None:
        diff = query - self._cloud[node.point_idx]
        dis2 = float(diff @ diff)
        if len(heap) < k:
            heapq.heappush(heap, (-dis2, next(counter), node.point_idx))
        elif dis2 < -heap[0][0]:
            heapq.heapreplace(heap, (-dis2, next(counter), node.point_idx))

    def _need_expand(self, query, node, heap, k) -> bool:
        if len(heap) < k:
            return True
        d = float(query[node.axis]) - node.split
        worst = -heap[0][0]
        limit = worst * self._alpha if self._approximate else worst
        return d * d < limit

    def closest_points_many(
        self, cloud: Sequence[Sequence[float]] | np.ndarray, k: int = 5
    ) -> list[tuple[int | None, int]]:
        """Find ``k`` neighbours for every point of ``cloud``.

        Returns ``len(cloud) * k`` pairs ``(tree_index, query_index)``; where
        no neighbour could be found the tree index is None.
        """
        k = operator.index(k)
        queries = np.asarray(cloud, dtype=float)
        matches: list[tuple[int | None, int]] = []
        for query_idx, query in enumerate(queries):
            try:
                found = self.closest_points(query, k)
            except ValueError:
                found = []
            for i in range(k):
                matches.append((found[i] if i < len(found) else None, query_idx))
        return matches

    def describe(self) -> list[str]:
        """Return one line per node, in node id order."""
        lines = []
        for node_id in sorted(self._nodes):
            node = self._nodes[node_id]
            if node.is_leaf:
                lines.append(f"leaf node: {node.id}, idx: {node.point_idx}")
            else:
                lines.append(f"node: {node.id}, axis: {node.axis}, th: {node.split:g}")
        return lines