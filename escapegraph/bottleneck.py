import math

import numpy as np
from loguru import logger

from .disjoint_set import DisjointSet
from .face_graph import OUTSIDE_NODE

# Width of the outside node; compares exactly against ints and Fractions of any size
UNBOUNDED_WIDTH = math.inf


class DisconnectedFaceGraphError(RuntimeError):
    """The face graph does not connect every face to the outside node."""


def build_bottleneck_tree(num_nodes, edges):
    """
    Build a maximum spanning tree with Kruskal's algorithm.

    Edges are taken in decreasing weight order (stable for equal weights), so
    the minimum weight on the tree path between two nodes is the largest
    achievable minimum over all paths between them in the graph.

    Args:
        num_nodes (int): Number of nodes, ids 0..num_nodes-1.
        edges (list of FaceEdge): Weighted undirected edges.

    Returns:
        list of lists: Tree edges incident to each node.

    Raises:
        DisconnectedFaceGraphError: If the edges do not connect all nodes.
    """
    tree = [[] for _ in range(num_nodes)]
    forest = DisjointSet(num_nodes)
    if num_nodes <= 1:
        return tree

    weights = np.array([edge.weight for edge in edges], dtype=object)
    for index in np.argsort(-weights, kind='stable'):
        edge = edges[index]
        if not forest.union(edge.source, edge.target):
            continue
        tree[edge.source].append(edge)
        tree[edge.target].append(edge)
        if forest.components == 1:
            break

    if forest.components != 1:
        raise DisconnectedFaceGraphError(
            f'{forest.components} components left after processing {len(edges)} edges'
        )
    logger.debug(f'Bottleneck tree spans {num_nodes} nodes')
    return tree


def propagate_bottlenecks(tree, root=OUTSIDE_NODE):
    """
    Compute the minimum edge weight on each node's tree path to root.

    Args:
        tree (list of lists): Output of build_bottleneck_tree.
        root (int): Node whose bottleneck is UNBOUNDED_WIDTH.

    Returns:
        numpy.ndarray: Object array of exact bottleneck values per node.
    """
    bottleneck = np.full(len(tree), None, dtype=object)
    bottleneck[root] = UNBOUNDED_WIDTH

    stack = [root]
    while stack:
        node = stack.pop()
        for edge in tree[node]:
            child = edge.target if edge.source == node else edge.source
            if bottleneck[child] is not None:
                continue
            bottleneck[child] = min(bottleneck[node], edge.weight)
            stack.append(child)
    return bottleneck
