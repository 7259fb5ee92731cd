import random
from fractions import Fraction

import pytest

from escapegraph.cases import EscapeQuery
from escapegraph.config import HULL_EDGE_GAP, EscapeConfig
from escapegraph.face_graph import OUTSIDE_NODE
from escapegraph.planner import EscapePlanner

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
CLUSTER = [(0, 0), (3, 1), (1, 4), (5, 5), (2, 2), (6, 0), (4, 7)]


def test_far_outside_cluster_escapes():
    planner = EscapePlanner(CLUSTER)
    assert planner.face_id((1000, 1000)) == OUTSIDE_NODE
    assert planner.can_escape((1000, 1000), 1)


def test_too_wide_between_two_obstacles():
    planner = EscapePlanner([(0, 0), (10, 0)])
    assert not planner.can_escape((5, 0), 6)


def test_fits_between_two_obstacles():
    planner = EscapePlanner([(0, 0), (10, 0)])
    assert planner.can_escape((5, 0), 4)
    assert planner.can_escape((5, 0), 5)


@pytest.mark.parametrize('clearance, expected', [(3, True), (4, False)])
def test_square_escape_width_weighting(clearance, expected):
    planner = EscapePlanner(SQUARE)
    assert planner.escape_width((5, 4)) == 50
    assert planner.can_escape((5, 4), clearance) is expected


@pytest.mark.parametrize('clearance, expected', [(4, True), (5, True), (6, False)])
def test_square_gap_weighting(clearance, expected):
    planner = EscapePlanner(SQUARE, EscapeConfig(hull_edge_weight=HULL_EDGE_GAP))
    assert planner.escape_width((5, 4)) == 100
    assert planner.can_escape((5, 4), clearance) is expected


def test_fractional_clearance():
    planner = EscapePlanner(SQUARE)
    # 4 * (7/2)^2 = 49 <= 50
    assert planner.can_escape((5, 4), Fraction(7, 2))
    assert not planner.can_escape((5, 4), Fraction(36, 10))


def test_proximity_short_circuit_outside_hull():
    planner = EscapePlanner([(0, 0), (10, 0), (0, 10)])
    assert planner.face_id((-1, 0)) == OUTSIDE_NODE
    assert not planner.can_escape((-1, 0), 2)
    assert planner.can_escape((-1, 0), 1)


@pytest.mark.parametrize('seed', [0, 1])
def test_proximity_short_circuit(seed, random_points):
    planner = EscapePlanner(random_points(seed))
    rng = random.Random(seed)
    for _ in range(100):
        query = (rng.randint(-60, 60), rng.randint(-60, 60))
        clearance = rng.randint(1, 8)
        if planner.nearest_obstacle_distance(query) < clearance * clearance:
            assert not planner.can_escape(query, clearance)


def test_without_obstacles_everything_escapes():
    planner = EscapePlanner([])
    assert planner.nearest_obstacle_distance((0, 0)) is None
    assert planner.can_escape((0, 0), 100)


def test_universal_escape_edge_bounds_bottleneck(random_points):
    planner = EscapePlanner(random_points(2))
    widths = planner.face_graph.escape_widths
    for face_id in range(1, planner.face_graph.num_nodes):
        assert planner.bottleneck[face_id] >= widths[face_id]


def test_rebuilding_is_idempotent(random_points):
    points = random_points(3)
    assert list(EscapePlanner(points).bottleneck) == list(EscapePlanner(points).bottleneck)


@pytest.mark.parametrize('seed', [0, 4])
def test_obstacle_order_does_not_change_answers(seed, random_points):
    points = random_points(seed)
    shuffled = list(points)
    random.Random(seed).shuffle(shuffled)
    rng = random.Random(seed + 100)
    queries = [EscapeQuery(rng.randint(-60, 60), rng.randint(-60, 60), Fraction(rng.randint(0, 20), 4))
               for _ in range(100)]
    radius = Fraction(1, 2)
    assert EscapePlanner(points).answer(queries, radius) == EscapePlanner(shuffled).answer(queries, radius)


def test_answer_uses_radius_plus_margin():
    planner = EscapePlanner([(0, 0), (10, 0)])
    queries = [EscapeQuery(5, 0, Fraction(5)), EscapeQuery(5, 0, Fraction(3))]
    assert planner.answer(queries, Fraction(1)) == [False, True]


@pytest.mark.parametrize('query', [(5, 4), (1000, 1000), (-1, 5)])
def test_each_query_walks_once(query, monkeypatch):
    planner = EscapePlanner(SQUARE)
    triangulation = planner.triangulation
    walk = triangulation._walk
    calls = []

    def counting_walk(point):
        calls.append(point)
        return walk(point)

    monkeypatch.setattr(triangulation, '_walk', counting_walk)
    assert planner.can_escape(query, 1)
    assert len(calls) == 1


def test_nearest_vertex_from_located_face(random_points):
    planner = EscapePlanner(random_points(6))
    rng = random.Random(6)
    for _ in range(100):
        query = (rng.randint(-60, 60), rng.randint(-60, 60))
        face = planner.triangulation.locate_face(query)
        assert planner.nearest_obstacle_distance(query, face) == planner.nearest_obstacle_distance(query)
