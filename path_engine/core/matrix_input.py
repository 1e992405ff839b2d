"""
Adjacency matrix input utilities.

This module turns user supplied matrix cells (numbers, numeric strings or the
'inf' marker) into the dense float matrix consumed by the path engine.
"""
from typing import Any, List, Sequence
import logging
import math
import numbers
import re

import numpy as np

from path_engine.core.constants import INFINITY_TOKEN
from path_engine.core.exceptions import (
    InvalidVertexCountError,
    MalformedWeightError,
    MatrixDimensionError,
)

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def validate_vertex_count(vertices: Any) -> int:
    """
    Ensure the vertex count is a non-negative integer.

    Raises:
        InvalidVertexCountError: If the count is negative or not an integer.
    """
    if isinstance(vertices, bool) or not isinstance(vertices, numbers.Integral):
        raise InvalidVertexCountError(f"Vertex count must be an integer, got {vertices!r}")
    if vertices < 0:
        raise InvalidVertexCountError(f"Vertex count must be non-negative, got {vertices}")
    return int(vertices)


def _coerce_weight(value: Any) -> float:
    """Return the weight for a cell, or raise ValueError if it is malformed."""
    if isinstance(value, bool) or value is None:
        raise ValueError("not a weight")

    if isinstance(value, str):
        text = value.strip().lower()
        if text == INFINITY_TOKEN:
            return math.inf
        # Leading number wins, so '12abc' and '3 km' read as 12 and 3
        match = _LEADING_NUMBER.match(text)
        if match is None:
            raise ValueError("not a weight")
        weight = float(match.group(0))
    elif isinstance(value, numbers.Real):
        weight = float(value)
    else:
        raise ValueError("not a weight")

    # +inf is the no-edge marker; NaN and -inf are never valid edge weights
    if math.isnan(weight) or weight == -math.inf:
        raise ValueError("not a weight")
    return weight


def parse_weight(value: Any, strict: bool = False, row: int = -1, col: int = -1) -> float:
    """
    Parse a single adjacency matrix cell.

    Args:
        value: Number, numeric string, or the 'inf' marker (case-insensitive).
        strict: If True, malformed cells raise instead of becoming 'no edge'.
        row, col: Cell position, used for error reporting.

    Returns:
        The edge weight as a float; math.inf when there is no edge.

    Raises:
        MalformedWeightError: In strict mode, if the cell cannot be parsed.
    """
    try:
        return _coerce_weight(value)
    except (TypeError, ValueError):
        if strict:
            raise MalformedWeightError(row, col, value)
        logger.warning(f"Malformed weight {value!r} at ({row}, {col}); treating as no edge")
        return math.inf


def build_adjacency_matrix(
    vertices: int,
    rows: Sequence[Sequence[Any]],
    strict: bool = False
) -> np.ndarray:
    """
    Build a dense adjacency matrix from raw rows.

    Args:
        vertices: Number of vertices N.
        rows: N rows of N cells each.
        strict: Reject malformed cells instead of coercing them to 'no edge'.

    Returns:
        N x N float numpy array, math.inf where there is no edge and 0 on
        the diagonal whatever the input holds there.

    Raises:
        InvalidVertexCountError: If N is negative or not an integer.
        MatrixDimensionError: If the rows do not form an N x N grid.
        MalformedWeightError: In strict mode, on the first malformed cell.
    """
    vertices = validate_vertex_count(vertices)

    if isinstance(rows, np.ndarray):
        if rows.ndim != 2 or rows.shape != (vertices, vertices):
            raise MatrixDimensionError(
                f"Expected a {vertices}x{vertices} matrix, got shape {rows.shape}"
            )
        rows = rows.tolist()

    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise MatrixDimensionError("Matrix must be a sequence of rows")
    if len(rows) != vertices:
        raise MatrixDimensionError(f"Expected {vertices} rows, got {len(rows)}")

    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise MatrixDimensionError(f"Row {i} is not a sequence of cells")
        if len(row) != vertices:
            raise MatrixDimensionError(f"Row {i} has {len(row)} cells, expected {vertices}")

    # Diagonal cells are never read: distance to self is always 0
    matrix = np.zeros((vertices, vertices))
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if i != j:
                matrix[i, j] = parse_weight(value, strict=strict, row=i, col=j)

    return matrix


def empty_adjacency_matrix(vertices: int) -> List[List[float]]:
    """Return an N x N grid with no edges."""
    vertices = validate_vertex_count(vertices)
    return [[math.inf] * vertices for _ in range(vertices)]
