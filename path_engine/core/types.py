"""
Result types produced by the all-pairs shortest path engine.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import math

import numpy as np


@dataclass(frozen=True)
class PathRecord:
    """
    Shortest path between one ordered pair of distinct vertices.

    Attributes:
        source: 0-based index of the first vertex.
        target: 0-based index of the last vertex.
        path: Vertices visited from source to target, both included.
        distance: Sum of edge weights along the path.
    """
    source: int
    target: int
    path: Tuple[int, ...]
    distance: float

    @property
    def hops(self) -> int:
        return len(self.path) - 1

    def labels(self, one_based: bool = True) -> List[int]:
        offset = 1 if one_based else 0
        return [vertex + offset for vertex in self.path]

    def describe(self, one_based: bool = True) -> str:
        """Render the path as 'a -> b -> c'."""
        return ' -> '.join(str(label) for label in self.labels(one_based))

    def to_dict(self, one_based: bool = True) -> Dict[str, object]:
        offset = 1 if one_based else 0
        return {
            'from': self.source + offset,
            'to': self.target + offset,
            'path': self.labels(one_based),
            'distance': self.distance,
        }


@dataclass(frozen=True, eq=False)
class AllPairsResult:
    """
    Everything a run of the engine produces.

    ``snapshots[k]`` is the distance matrix once vertices 0..k have been
    allowed as intermediates. ``paths`` holds one record per reachable
    ordered pair, in row-major order.
    """
    vertex_count: int
    distances: np.ndarray
    next_hops: np.ndarray
    snapshots: Tuple[np.ndarray, ...] = field(default_factory=tuple)
    paths: Tuple[PathRecord, ...] = field(default_factory=tuple)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"Vertex {vertex} out of range for {self.vertex_count} vertices")

    def distance(self, source: int, target: int) -> float:
        """Shortest distance from source to target, math.inf if unreachable."""
        self._check_vertex(source)
        self._check_vertex(target)
        return float(self.distances[source, target])

    def has_path(self, source: int, target: int) -> bool:
        return not math.isinf(self.distance(source, target))

    def path(self, source: int, target: int) -> Optional[PathRecord]:
        """Return the record for (source, target), or None if none was produced."""
        self._check_vertex(source)
        self._check_vertex(target)
        for record in self.paths:
            if record.source == source and record.target == target:
                return record
        return None

    def iteration(self, k: int) -> np.ndarray:
        """Distance matrix after round k (0-based)."""
        if not 0 <= k < len(self.snapshots):
            raise IndexError(f"Round {k} out of range for {len(self.snapshots)} rounds")
        return self.snapshots[k]

    @property
    def reachable_pairs(self) -> int:
        return len(self.paths)

    @property
    def unreachable_pairs(self) -> int:
        return self.vertex_count * (self.vertex_count - 1) - len(self.paths)
