import math
from typing import Any, Dict, List, Optional

import numpy as np

from path_engine.core.constants import INFINITY_TOKEN
from path_engine.core.types import AllPairsResult
from path_engine.settings import ONE_BASED_LABELS


class ResultFormatter:
    """
    Service for turning engine results into JSON-safe structures for display.
    """

    @staticmethod
    def format_value(value: float) -> Any:
        """
        Render one distance; infinite values become the 'inf' marker.

        Whole numbers are returned as ints so 7.0 renders as 7.
        """
        value = float(value)
        if math.isinf(value):
            return INFINITY_TOKEN if value > 0 else '-' + INFINITY_TOKEN
        if value.is_integer():
            return int(value)
        return value

    @staticmethod
    def format_matrix(matrix: np.ndarray) -> List[List[Any]]:
        return [[ResultFormatter.format_value(value) for value in row] for row in matrix]

    @staticmethod
    def format_result(result: AllPairsResult, one_based: Optional[bool] = None) -> Dict[str, Any]:
        """
        Format a full engine result.

        Args:
            result: The engine output to render.
            one_based: Label vertices from 1 instead of 0. Defaults to
                       settings.ONE_BASED_LABELS.

        Returns:
            Dictionary with 'labels', 'distances', 'iterations', 'paths'
            and 'summary' keys.
        """
        if one_based is None:
            one_based = ONE_BASED_LABELS
        offset = 1 if one_based else 0

        iterations = []
        for k, snapshot in enumerate(result.snapshots):
            iterations.append({
                'iteration': k + 1,
                'intermediate': k + offset,
                'distances': ResultFormatter.format_matrix(snapshot)
            })

        paths = []
        for record in result.paths:
            entry = record.to_dict(one_based)
            entry['distance'] = ResultFormatter.format_value(record.distance)
            entry['description'] = record.describe(one_based)
            paths.append(entry)

        return {
            'labels': [vertex + offset for vertex in range(result.vertex_count)],
            'distances': ResultFormatter.format_matrix(result.distances),
            'iterations': iterations,
            'paths': paths,
            'summary': {
                'vertex_count': result.vertex_count,
                'rounds': len(result.snapshots),
                'reachable_pairs': result.reachable_pairs,
                'unreachable_pairs': result.unreachable_pairs
            }
        }
