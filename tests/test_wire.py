import pygame
import pytest

from gatesim.constants import DARKGRAY, RED, GateType
from gatesim.gate import Gate
from gatesim.geometry import Vec2
from gatesim.wire import Wire


def _orthogonal(points):
    return all(a.x == b.x or a.y == b.y for a, b in zip(points, points[1:]))


def test_simple_route_horizontal_first():
    wire = Wire(0, 1, 0)
    wire.calculate_route(Vec2(0, 0), Vec2(100, 10))
    assert len(wire.waypoints) == 4
    assert wire.waypoints[0] == Vec2(0, 0)
    assert wire.waypoints[-1] == Vec2(100, 10)
    assert wire.waypoints[1].x == pytest.approx(70.0)
    assert wire.waypoints[1].y == 0
    assert wire.waypoints[2].y == 10


def test_simple_route_vertical_first():
    start, end = Vec2(0, 0), Vec2(10, 100)
    wire = Wire(0, 1, 0)
    wire.calculate_route(start, end)
    assert len(wire.waypoints) == 4
    assert wire.waypoints[1].x == start.x
    assert wire.waypoints[2].x == end.x
    assert wire.waypoints[2].y == wire.waypoints[1].y
    assert _orthogonal(wire.waypoints)


def test_empty_gate_list_matches_no_gates():
    a = Wire(0, 1, 0)
    b = Wire(0, 1, 0)
    a.calculate_route(Vec2(5, 5), Vec2(300, 90))
    b.calculate_route(Vec2(5, 5), Vec2(300, 90), [])
    assert a.waypoints == b.waypoints


def test_route_replaces_previous_waypoints():
    wire = Wire(0, 1, 0)
    wire.calculate_route(Vec2(0, 0), Vec2(100, 10))
    wire.calculate_route(Vec2(50, 50), Vec2(60, 200))
    assert wire.waypoints[0] == Vec2(50, 50)
    assert len(wire.waypoints) == 4


def test_endpoint_gates_are_not_obstacles():
    source = Gate(GateType.INPUT, (100, 100))
    target = Gate(GateType.OUTPUT, (500, 100))
    start, end = source.output_point(), target.input_point(0)
    wire = Wire(0, 1, 0)
    wire.calculate_route(start, end, [source, target])
    assert wire.waypoints[0] == start
    assert wire.waypoints[-1] == end
    assert wire.waypoints[1].y == start.y
    assert wire.waypoints[1].x == pytest.approx((start.x + end.x) / 2)
    assert _orthogonal(wire.waypoints)


def test_route_avoids_obstacle():
    source = Gate(GateType.INPUT, (100, 100))
    target = Gate(GateType.OUTPUT, (500, 300))
    obstacle = Gate(GateType.AND, (300, 200))
    gates = [source, target, obstacle]
    start, end = source.output_point(), target.input_point(0)

    wire = Wire(0, 1, 0)
    wire.calculate_route(start, end, gates)

    assert wire.waypoints[0] == start
    assert wire.waypoints[-1] == end
    assert _orthogonal(wire.waypoints)
    for a, b in zip(wire.waypoints, wire.waypoints[1:]):
        assert not (
            min(a.x, b.x) <= obstacle.bounds.right
            and max(a.x, b.x) >= obstacle.bounds.x
            and min(a.y, b.y) <= obstacle.bounds.bottom
            and max(a.y, b.y) >= obstacle.bounds.y
        )


def test_is_near_path():
    wire = Wire(0, 1, 0)
    wire.calculate_route(Vec2(0, 50), Vec2(200, 50))
    assert wire.is_near_path(Vec2(100, 55))
    assert wire.is_near_path(Vec2(100, 60), threshold=10.0)
    assert not wire.is_near_path(Vec2(100, 61), threshold=10.0)
    assert not wire.is_near_path(Vec2(100, 150))


def test_is_near_path_needs_two_points():
    wire = Wire(0, 1, 0)
    assert not wire.is_near_path(Vec2(0, 0))
    wire.waypoints = [Vec2(0, 0)]
    assert not wire.is_near_path(Vec2(0, 0))


def test_draw_paints_segments():
    surface = pygame.Surface((300, 100))
    surface.fill((255, 255, 255))
    wire = Wire(0, 1, 0)
    wire.calculate_route(Vec2(0, 50), Vec2(200, 50))
    wire.draw(surface, RED)
    assert tuple(surface.get_at((70, 50))) == RED
    wire.draw(surface, DARKGRAY)
    assert tuple(surface.get_at((70, 50))) == DARKGRAY
    assert tuple(surface.get_at((70, 90))) == (255, 255, 255, 255)


def test_draw_without_route_paints_nothing():
    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    Wire(0, 1, 0).draw(surface, RED)
    assert tuple(surface.get_at((0, 0))) == (255, 255, 255, 255)