import logging
from typing import Any, List, Optional, Sequence

import numpy as np

from path_engine.core.constants import UNREACHABLE
from path_engine.core.exceptions import EngineStateError, VertexLimitExceededError
from path_engine.core.matrix_input import build_adjacency_matrix, validate_vertex_count
from path_engine.core.types import AllPairsResult, PathRecord
from path_engine.settings import MAX_VERTICES

logger = logging.getLogger(__name__)


class PathEngine:
    """
    Floyd-Warshall all-pairs shortest paths with next-hop path reconstruction.

    Negative edge weights are accepted. Negative cycles are not detected:
    pairs affected by one get whatever the N relaxation rounds produce.
    """

    def __init__(self, max_vertices: Optional[int] = None, strict: bool = False):
        """
        Initialize the path engine.

        Args:
            max_vertices: Largest accepted vertex count. Defaults to settings.MAX_VERTICES.
            strict: Reject malformed matrix cells instead of treating them as 'no edge'.
        """
        self.max_vertices = max_vertices if max_vertices is not None else MAX_VERTICES
        self.strict = strict
        self.vertex_count = 0
        self.dist: Optional[np.ndarray] = None
        self.next_hop: Optional[np.ndarray] = None
        self.snapshots: List[np.ndarray] = []
        self._initial_dist: Optional[np.ndarray] = None
        self._initial_next_hop: Optional[np.ndarray] = None
        self._relaxed = False

    def initialize(self, vertices: int, adjacency: Sequence[Sequence[Any]]) -> None:
        """
        Load the adjacency matrix and build the starting distance and next-hop matrices.

        Args:
            vertices: Number of vertices N.
            adjacency: N x N weights; math.inf (or 'inf') where there is no edge.
                       The diagonal is ignored.

        Raises:
            InvalidVertexCountError: If N is negative or not an integer.
            VertexLimitExceededError: If N is above max_vertices.
            MatrixDimensionError: If the matrix is not N x N.
            MalformedWeightError: In strict mode, on a malformed cell.
        """
        vertices = validate_vertex_count(vertices)
        if vertices > self.max_vertices:
            raise VertexLimitExceededError(
                f"Graph has {vertices} vertices, the limit is {self.max_vertices}"
            )

        weights = build_adjacency_matrix(vertices, adjacency, strict=self.strict)

        dist = weights.copy()
        np.fill_diagonal(dist, 0.0)

        has_edge = np.isfinite(weights)
        np.fill_diagonal(has_edge, False)
        columns = np.broadcast_to(np.arange(vertices), (vertices, vertices))
        next_hop = np.where(has_edge, columns, UNREACHABLE)

        self.vertex_count = vertices
        self._initial_dist = dist
        self._initial_next_hop = next_hop
        self.dist = dist.copy()
        self.next_hop = next_hop.copy()
        self.snapshots = []
        self._relaxed = False

        logger.debug(f"Initialized {vertices} vertices with {int(has_edge.sum())} edges")

    def relax(self) -> List[np.ndarray]:
        """
        Run the N relaxation rounds from the initial matrices.

        Returns:
            The per-round snapshots; snapshot k is read-only and reflects
            vertices 0..k as allowed intermediates.

        Raises:
            EngineStateError: If initialize() has not been called.
        """
        if self._initial_dist is None:
            raise EngineStateError("initialize() must be called before relax()")

        self.dist = self._initial_dist.copy()
        self.next_hop = self._initial_next_hop.copy()
        self.snapshots = []

        for k in range(self.vertex_count):
            updated = self._relax_round(k)

            snapshot = self.dist.copy()
            snapshot.setflags(write=False)
            self.snapshots.append(snapshot)
            logger.debug(f"Round {k}: {updated} distances improved")

        self._relaxed = True
        return list(self.snapshots)

    def _relax_round(self, k: int) -> int:
        """
        Route every pair through vertex k where that is shorter.

        Row k and column k are read once at the start of the round, so all
        pairs are compared against the same values.
        """
        to_k = self.dist[:, k].copy()
        from_k = self.dist[k, :].copy()
        hop_toward_k = self.next_hop[:, k].copy()

        # An infinite leg means there is no route through k; never add infinities
        both_finite = np.isfinite(to_k)[:, np.newaxis] & np.isfinite(from_k)[np.newaxis, :]
        through_k = np.full_like(self.dist, np.inf)
        np.add(to_k[:, np.newaxis], from_k[np.newaxis, :], out=through_k, where=both_finite)

        improved = both_finite & (through_k < self.dist)
        self.dist[improved] = through_k[improved]
        rows, _ = np.nonzero(improved)
        self.next_hop[improved] = hop_toward_k[rows]
        return len(rows)

    def reconstruct_path(self, source: int, target: int) -> List[int]:
        """
        Rebuild the path from source to target by following next hops.

        Returns:
            Vertices from source to target inclusive, or [] if there is no
            path or the next-hop table does not lead to target.
        """
        if not self._relaxed:
            raise EngineStateError("relax() must be called before reconstructing paths")
        for vertex in (source, target):
            if not 0 <= vertex < self.vertex_count:
                raise IndexError(f"Vertex {vertex} out of range for {self.vertex_count} vertices")
        if self.next_hop[source, target] == UNREACHABLE:
            return []

        path = [source]
        cursor = source
        while cursor != target:
            cursor = int(self.next_hop[cursor, target])
            if cursor == UNREACHABLE:
                logger.warning(f"Next-hop chain from {source} to {target} is broken")
                return []
            path.append(cursor)
            # A shortest path visits each vertex at most once
            if len(path) > self.vertex_count:
                logger.warning(f"Next-hop chain from {source} to {target} loops; "
                               "the graph likely has a negative cycle")
                return []
        return path

    def reconstruct_all_paths(self) -> List[PathRecord]:
        """
        Build a PathRecord for every reachable ordered pair (i, j) with i != j.

        Pairs are visited row-major; unreachable pairs are omitted.
        """
        if not self._relaxed:
            raise EngineStateError("relax() must be called before reconstructing paths")

        records = []
        for i in range(self.vertex_count):
            for j in range(self.vertex_count):
                if i == j:
                    continue
                path = self.reconstruct_path(i, j)
                if not path:
                    continue
                records.append(PathRecord(
                    source=i,
                    target=j,
                    path=tuple(path),
                    distance=float(self.dist[i, j])
                ))
        return records

    def solve(self) -> AllPairsResult:
        """
        Relax and reconstruct on the matrices loaded by initialize().

        Returns:
            AllPairsResult holding copies of the final matrices, the
            snapshots and the path records.
        """
        self.relax()
        paths = self.reconstruct_all_paths()

        logger.info(f"Computed all-pairs shortest paths for {self.vertex_count} vertices: "
                    f"{len(paths)} reachable pairs")

        distances = self.dist.copy()
        distances.setflags(write=False)
        next_hops = self.next_hop.copy()
        next_hops.setflags(write=False)
        return AllPairsResult(
            vertex_count=self.vertex_count,
            distances=distances,
            next_hops=next_hops,
            snapshots=tuple(self.snapshots),
            paths=tuple(paths)
        )

    def run(self, vertices: int, adjacency: Sequence[Sequence[Any]]) -> AllPairsResult:
        """Initialize, relax and reconstruct in one call."""
        self.initialize(vertices, adjacency)
        return self.solve()
