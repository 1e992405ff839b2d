"""
Exceptions raised by the all-pairs shortest path engine.

Everything derives from ValueError so callers that already guard path
finding with ``except ValueError`` keep working.
"""


class PathEngineError(ValueError):
    """Base class for all engine errors."""


class InvalidVertexCountError(PathEngineError):
    """Vertex count is negative or not an integer."""


class MatrixDimensionError(PathEngineError):
    """Adjacency matrix is not N x N."""


class MalformedWeightError(PathEngineError):
    """A matrix cell is neither a number nor the infinity marker (strict mode only)."""

    def __init__(self, row: int, col: int, value):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(f"Malformed weight {value!r} at ({row}, {col})")


class VertexLimitExceededError(PathEngineError):
    """Vertex count is above the configured maximum."""


class EngineStateError(PathEngineError):
    """A phase was requested before the phase it depends on has run."""
