"""
Exact Delaunay triangulation of integer obstacle points.

Faces are counter-clockwise vertex-index triples. Every hull edge is closed by
an infinite face holding the symbolic INFINITE_VERTEX, so each directed edge
of the triangulation has exactly one owning face and walking never falls off
the mesh.
"""
from loguru import logger

from .geometry import circumcenter, in_circle, on_segment, orientation, squared_distance

# Symbolic vertex shared by all faces outside the convex hull
INFINITE_VERTEX = -1


def _canonical(face):
    """Rotate a face so the infinite vertex is last, or the smallest index first."""
    if INFINITE_VERTEX in face:
        pivot = (face.index(INFINITE_VERTEX) + 1) % 3
    else:
        pivot = face.index(min(face))
    return face[pivot:] + face[:pivot]


def _directed_edges(face):
    return ((face[0], face[1]), (face[1], face[2]), (face[2], face[0]))


class DelaunayTriangulation:
    """
    Incremental Bowyer-Watson triangulation with exact predicates.

    Points are deduplicated and inserted in lexicographic order, so the
    resulting faces and their order only depend on the set of points.

    Attributes:
        points (list of tuple): Distinct obstacle points, indexed by vertex id.
        dimension (int): -1 for no points, 0 for one point, 1 when all points
            are collinear, 2 when at least one finite face exists.
    """

    def __init__(self, points):
        raw_points = [(int(x), int(y)) for x, y in points]
        self.points = sorted(set(raw_points))
        if len(self.points) < len(raw_points):
            logger.warning(f'Ignoring {len(raw_points) - len(self.points)} duplicate obstacle point(s)')

        self.dimension = min(len(self.points) - 1, 1)
        self._faces = {}
        self._edge_face = {}
        self._last_face = None
        self._vertex_neighbors = None

        self._build()

    # -----------------------------
    # Construction
    # -----------------------------

    def _build(self):
        first = self._first_triangle()
        if first is None:
            if len(self.points) >= 3:
                logger.debug('All obstacle points are collinear, no finite faces')
            return

        a, b, c = first
        self.dimension = 2
        self._add_face((a, b, c))
        self._add_face((b, a, INFINITE_VERTEX))
        self._add_face((c, b, INFINITE_VERTEX))
        self._add_face((a, c, INFINITE_VERTEX))
        self._last_face = _canonical((a, b, c))

        for index in range(len(self.points)):
            if index not in first:
                self._insert(index)

        neighbors = [set() for _ in self.points]
        for u, v in self._edge_face:
            if u != INFINITE_VERTEX and v != INFINITE_VERTEX:
                neighbors[u].add(v)
        self._vertex_neighbors = [sorted(adjacent) for adjacent in neighbors]

        logger.debug(f'Triangulated {len(self.points)} points into {len(self.finite_faces())} faces')

    def _first_triangle(self):
        """Return the first non-degenerate CCW triple (0, 1, k), or None."""
        if len(self.points) < 3:
            return None
        p0, p1 = self.points[0], self.points[1]
        for k in range(2, len(self.points)):
            turn = orientation(p0, p1, self.points[k])
            if turn > 0:
                return (0, 1, k)
            if turn < 0:
                return (1, 0, k)
        return None

    def _add_face(self, face):
        face = _canonical(face)
        self._faces[face] = None
        for edge in _directed_edges(face):
            self._edge_face[edge] = face
        return face

    def _remove_face(self, face):
        del self._faces[face]
        for edge in _directed_edges(face):
            del self._edge_face[edge]

    def _in_conflict(self, face, point):
        """Check whether inserting point destroys the empty-circle property of face."""
        a, b, c = face
        if c == INFINITE_VERTEX:
            # Outer side of the hull edge, or strictly inside the edge itself
            pa, pb = self.points[a], self.points[b]
            turn = orientation(pa, pb, point)
            return turn > 0 or (turn == 0 and on_segment(point, pa, pb))
        return in_circle(self.points[a], self.points[b], self.points[c], point) > 0

    def _insert(self, index):
        point = self.points[index]
        start = self._walk(point)
        if start is None:
            start = next(face for face in self._faces if self._in_conflict(face, point))

        # Grow the conflict region from the located face
        cavity = {start}
        rejected = set()
        stack = [start]
        while stack:
            face = stack.pop()
            for u, v in _directed_edges(face):
                other = self._edge_face[(v, u)]
                if other in cavity or other in rejected:
                    continue
                if self._in_conflict(other, point):
                    cavity.add(other)
                    stack.append(other)
                else:
                    rejected.add(other)

        boundary = [
            (u, v)
            for face in cavity
            for u, v in _directed_edges(face)
            if self._edge_face[(v, u)] not in cavity
        ]

        for face in cavity:
            self._remove_face(face)
        new_faces = [self._add_face((u, v, index)) for u, v in boundary]
        self._last_face = next(face for face in new_faces if not self.is_infinite(face))

    def _walk(self, point):
        """
        Visibility walk from the most recent face towards point.

        Returns:
            tuple: The finite face whose closed triangle contains point, the
            infinite face entered when point lies strictly outside the hull,
            or None if the walk did not settle.
        """
        face = self._last_face
        for _ in range(len(self._faces) + 1):
            if self.is_infinite(face):
                return face
            for u, v in _directed_edges(face):
                if orientation(self.points[u], self.points[v], point) < 0:
                    face = self._edge_face[(v, u)]
                    break
            else:
                return face
        logger.debug(f'Visibility walk towards {point} did not settle')
        return None

    # -----------------------------
    # Queries
    # -----------------------------

    def is_infinite(self, face):
        return INFINITE_VERTEX in face

    def finite_faces(self):
        """List the finite faces in a deterministic order."""
        return [face for face in self._faces if not self.is_infinite(face)]

    def neighbors(self, face):
        """
        Yield the three edges of a face with the face across each of them.

        Yields:
            tuple: (u, v, neighbor) where u->v is a directed edge of face and
            neighbor is the (possibly infinite) face on its other side.
        """
        for u, v in _directed_edges(face):
            yield u, v, self._edge_face[(v, u)]

    def dual(self, face):
        """Exact circumcenter of a finite face (its Voronoi vertex)."""
        return circumcenter(*(self.points[index] for index in face))

    def locate_face(self, point):
        """
        Find the face, finite or infinite, reached by walking towards point.

        Returns:
            tuple or None: The finite face containing point, an infinite face
            seeing point when it lies outside the hull, or None when there are
            no faces or point was not found in any finite face.
        """
        if self.dimension < 2:
            return None
        point = tuple(point)
        face = self._walk(point)
        if face is None:
            face = next((candidate for candidate in self.finite_faces() if self._contains(candidate, point)),
                        None)
        return face

    def locate(self, point):
        """
        Find the finite face containing point.

        Args:
            point (tuple): Query coordinates (x, y).

        Returns:
            tuple or None: A finite face whose closed triangle contains point,
            or None when point lies in the unbounded exterior.
        """
        face = self.locate_face(point)
        if face is None or self.is_infinite(face):
            return None
        return face

    def _contains(self, face, point):
        return all(orientation(self.points[u], self.points[v], point) >= 0
                   for u, v in _directed_edges(face))

    def nearest_vertex(self, point, near_face=None):
        """
        Find an obstacle point nearest to point.

        Greedy descent over Delaunay neighbors, which always reaches a nearest
        vertex of a Delaunay triangulation.

        Args:
            point (tuple): Query coordinates (x, y).
            near_face (tuple): Face from locate_face(point) to start the
                descent from; walked to when omitted.

        Returns:
            int or None: Vertex index, or None if there are no obstacles.
        """
        if not self.points:
            return None
        point = tuple(point)
        if self._vertex_neighbors is None:
            return min(range(len(self.points)), key=lambda index: squared_distance(self.points[index], point))

        face = near_face if near_face is not None else self._walk(point)
        current = face[0] if face is not None else 0
        best = squared_distance(self.points[current], point)
        improved = True
        while improved:
            improved = False
            for other in self._vertex_neighbors[current]:
                distance = squared_distance(self.points[other], point)
                if distance < best:
                    current, best = other, distance
                    improved = True
                    break
        return current
