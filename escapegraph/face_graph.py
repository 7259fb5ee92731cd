from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple

from loguru import logger

from .config import HULL_EDGE_GAP, EscapeConfig
from .geometry import squared_distance

# Virtual node standing for the unbounded space outside the hull
OUTSIDE_NODE = 0


class FaceEdge(NamedTuple):
    """Undirected face-graph edge; weight is an exact squared width."""
    source: int
    target: int
    weight: object


@dataclass
class FaceGraph:
    """
    Weighted adjacency graph over triangulation faces.

    Attributes:
        face_ids (dict): Finite face -> id in 1..num_faces.
        escape_widths (list): Squared circumradius per id, None at OUTSIDE_NODE.
        edges (list of FaceEdge): Edges over ids 0..num_faces.
    """
    face_ids: Dict[tuple, int] = field(default_factory=dict)
    escape_widths: List[object] = field(default_factory=lambda: [None])
    edges: List[FaceEdge] = field(default_factory=list)

    @property
    def num_faces(self):
        return len(self.face_ids)

    @property
    def num_nodes(self):
        return len(self.face_ids) + 1


def escape_width(triangulation, face):
    """
    Squared distance from a face's Voronoi vertex to its obstacle vertices.

    Args:
        triangulation (DelaunayTriangulation): Owner of the face.
        face (tuple): A finite face.

    Returns:
        Fraction: Exact squared circumradius of the face.
    """
    center = triangulation.dual(face)
    return squared_distance(center, triangulation.points[face[0]])


def build_face_graph(triangulation, config=None):
    """
    Number the finite faces and derive the weighted face-graph edges.

    Each adjacency is emitted once, from the face with the larger id. Crossing
    into a real neighbor costs the squared length of the shared edge; leaving
    through a hull edge costs the face's escape width (or the hull edge's
    squared length with HULL_EDGE_GAP).

    Args:
        triangulation (DelaunayTriangulation): Triangulated obstacles.
        config (EscapeConfig): Edge weighting options.

    Returns:
        FaceGraph: Face ids, escape widths and edges.
    """
    config = config or EscapeConfig()
    graph = FaceGraph()

    faces = triangulation.finite_faces()
    for face_id, face in enumerate(faces, start=1):
        graph.face_ids[face] = face_id
        graph.escape_widths.append(escape_width(triangulation, face))

    points = triangulation.points
    for face in faces:
        current = graph.face_ids[face]
        width = graph.escape_widths[current]
        for u, v, neighbor in triangulation.neighbors(face):
            if triangulation.is_infinite(neighbor):
                target = OUTSIDE_NODE
            else:
                target = graph.face_ids[neighbor]
            if target > current:
                continue

            if target != OUTSIDE_NODE or config.hull_edge_weight == HULL_EDGE_GAP:
                weight = squared_distance(points[u], points[v])
            else:
                weight = width
            graph.edges.append(FaceEdge(current, target, weight))

        if config.universal_escape_edge:
            graph.edges.append(FaceEdge(current, OUTSIDE_NODE, width))

    logger.debug(f'Face graph has {graph.num_nodes} nodes and {len(graph.edges)} edges')
    return graph
