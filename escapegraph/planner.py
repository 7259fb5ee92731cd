from loguru import logger

from .bottleneck import build_bottleneck_tree, propagate_bottlenecks
from .config import EscapeConfig
from .face_graph import OUTSIDE_NODE, build_face_graph
from .geometry import squared_distance
from .triangulation import DelaunayTriangulation


class EscapePlanner:
    """
    Escape-feasibility oracle over a fixed set of point obstacles.

    Construction triangulates the obstacles, builds the face graph and its
    maximum bottleneck tree, and stores for every face the widest squared
    corridor width on any route to open space. Queries are read-only.
    """

    def __init__(self, obstacles, config=None):
        self.config = config or EscapeConfig()

        # --- Preprocess obstacles into the bottleneck structure ---
        self.triangulation = DelaunayTriangulation(obstacles)
        self.face_graph = build_face_graph(self.triangulation, self.config)
        self.tree = build_bottleneck_tree(self.face_graph.num_nodes, self.face_graph.edges)
        self.bottleneck = propagate_bottlenecks(self.tree)

        logger.info(
            f'Escape structure ready: {len(self.triangulation.points)} obstacles, '
            f'{self.face_graph.num_faces} faces, {len(self.face_graph.edges)} face edges'
        )

    # -----------------------------
    # Queries
    # -----------------------------

    def _face_id_of(self, face):
        if face is None or self.triangulation.is_infinite(face):
            return OUTSIDE_NODE
        return self.face_graph.face_ids[face]

    def face_id(self, point):
        """Id of the face containing point, OUTSIDE_NODE outside the hull."""
        return self._face_id_of(self.triangulation.locate(point))

    def escape_width(self, point):
        """Widest squared corridor width on a route from point to open space."""
        return self.bottleneck[self.face_id(point)]

    def nearest_obstacle_distance(self, point, near_face=None):
        """
        Squared distance from point to the closest obstacle.

        Args:
            point (tuple): Query coordinates (x, y).
            near_face (tuple): Already located face of point, if known.

        Returns:
            int or None: Exact squared distance, or None without obstacles.
        """
        nearest = self.triangulation.nearest_vertex(point, near_face)
        if nearest is None:
            return None
        return squared_distance(self.triangulation.points[nearest], point)

    def can_escape(self, point, clearance):
        """
        Decide whether a disc keeping `clearance` from every obstacle can
        leave point and reach unbounded free space.

        Args:
            point (tuple): Start coordinates (x, y).
            clearance (int or Fraction): Required distance to every obstacle.

        Returns:
            bool: True if escape is possible.
        """
        required = clearance * clearance
        face = self.triangulation.locate_face(point)

        distance = self.nearest_obstacle_distance(point, face)
        if distance is not None and distance < required:
            logger.debug(f'Start {point} is within clearance {clearance} of an obstacle')
            return False

        # The corridor has to fit the whole disc: diameter squared is 4 r^2
        return 4 * required <= self.bottleneck[self._face_id_of(face)]

    def answer(self, queries, radius):
        """
        Evaluate a batch of queries sharing the agent radius.

        Args:
            queries (list of EscapeQuery): Query points with their margins.
            radius (int or Fraction): Base agent radius.

        Returns:
            list of bool: One answer per query, in order.
        """
        return [self.can_escape(query.point, radius + query.margin) for query in queries]
