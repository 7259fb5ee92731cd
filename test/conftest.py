import math
from collections import deque

import numpy as np
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # main() installs sinks bound to captured streams
    logger.remove()


@pytest.fixture
def random_points():
    def make(seed, count=40, low=-50, high=50):
        rng = np.random.default_rng(seed)
        return [tuple(point) for point in rng.integers(low, high, size=(count, 2)).tolist()]
    return make


@pytest.fixture
def widest_path_values():
    """Brute-force maximin value from node 0 to every node."""
    def solve(num_nodes, edges):
        best = [None] * num_nodes
        best[0] = math.inf
        for threshold in sorted({edge.weight for edge in edges}, reverse=True):
            adjacency = [[] for _ in range(num_nodes)]
            for edge in edges:
                if edge.weight >= threshold:
                    adjacency[edge.source].append(edge.target)
                    adjacency[edge.target].append(edge.source)
            seen = {0}
            queue = deque([0])
            while queue:
                node = queue.popleft()
                for other in adjacency[node]:
                    if other not in seen:
                        seen.add(other)
                        queue.append(other)
            for node in seen:
                if best[node] is None:
                    best[node] = threshold
        return best
    return solve
