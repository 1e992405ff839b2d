import math

import pytest

from path_engine.app import app


@pytest.fixture
def three_vertex_matrix():
    """1->2 (4), 2->3 (3), 1->3 (10); vertex 3 has no outgoing edges."""
    return [
        [0, 4, 10],
        ['inf', 0, 3],
        ['inf', 'inf', 0]
    ]


@pytest.fixture
def negative_weight_matrix():
    """Negative edges but no negative cycle."""
    return [
        [math.inf, 4, 3, math.inf],
        [math.inf, math.inf, -2, 2],
        [math.inf, math.inf, math.inf, 3],
        [math.inf, math.inf, math.inf, math.inf]
    ]


@pytest.fixture
def flask_client():
    """Flask test client"""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
