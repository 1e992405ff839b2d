import logging
from typing import Any, Optional, Sequence

import numpy as np

from path_engine.core.floyd_warshall import PathEngine
from path_engine.core.types import AllPairsResult
from path_engine.settings import STRICT_WEIGHTS

logger = logging.getLogger(__name__)


def contains_negative_weight(matrix: np.ndarray) -> bool:
    finite = matrix[np.isfinite(matrix)]
    return bool((finite < 0).any())


def compute_all_pairs(
    vertices: int,
    rows: Sequence[Sequence[Any]],
    strict: Optional[bool] = None,
    max_vertices: Optional[int] = None
) -> AllPairsResult:
    """
    Parse a raw adjacency matrix and compute all-pairs shortest paths.

    The vertex limit is enforced before any cell is parsed or any matrix
    is allocated.

    Args:
        vertices: Number of vertices N.
        rows: N x N cells; numbers, numeric strings or 'inf'.
        strict: Reject malformed cells. Defaults to settings.STRICT_WEIGHTS.
        max_vertices: Override for the engine's vertex limit.

    Returns:
        AllPairsResult with final distances, snapshots and path records.
    """
    if strict is None:
        strict = STRICT_WEIGHTS

    engine = PathEngine(max_vertices=max_vertices, strict=strict)
    engine.initialize(vertices, rows)
    # Diagonal is already 0, so only real edges can be negative here
    if contains_negative_weight(engine.dist):
        logger.info("Graph has negative edge weights; negative cycles are not detected")

    return engine.solve()
