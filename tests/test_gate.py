from types import SimpleNamespace

import pygame
import pytest

from gatesim.constants import (
    DARKGRAY,
    DARKGREEN,
    GATE_DATA,
    YELLOW,
    GateType,
)
from gatesim.gate import Gate
from gatesim.geometry import Vec2

LOGIC = [GateType.AND, GateType.OR, GateType.NOT, GateType.NAND, GateType.NOR]


@pytest.mark.parametrize(
    "gate_type, a, b, expected",
    [
        (GateType.AND, True, True, True),
        (GateType.AND, True, False, False),
        (GateType.OR, False, True, True),
        (GateType.OR, False, False, False),
        (GateType.NOT, False, True, True),
        (GateType.NOT, True, False, False),
        (GateType.NAND, True, True, False),
        (GateType.NAND, False, True, True),
        (GateType.NOR, False, False, True),
        (GateType.NOR, True, False, False),
        (GateType.INPUT, True, False, True),
        (GateType.OUTPUT, False, True, False),
    ],
)
def test_truth_tables(gate_type, a, b, expected):
    gate = Gate(gate_type, Vec2(0, 0))
    gate.input1, gate.input2 = a, b
    gate.compute_output()
    assert gate.output is expected


def test_properties_come_from_gate_data():
    gate = Gate(GateType.NAND, (10, 20))
    info = GATE_DATA[GateType.NAND]
    assert gate.size == info.size
    assert gate.color == info.color
    assert gate.label == info.label
    assert gate.gate_type is GateType.NAND


def test_bounds_and_contains():
    gate = Gate(GateType.AND, Vec2(100, 100))
    assert gate.bounds.x == 100 and gate.bounds.width == gate.size.x
    assert gate.contains_point(gate.bounds.center)
    assert not gate.contains_point(Vec2(99, 99))


def test_collision_between_gates():
    a = Gate(GateType.AND, Vec2(100, 100))
    near = Gate(GateType.OR, Vec2(110, 110))
    far = Gate(GateType.OR, Vec2(100 + a.size.x, 100))
    assert a.collides_with(near)
    assert not a.collides_with(far)


@pytest.mark.parametrize(
    "gate_type, inputs, has_output",
    [
        (GateType.INPUT, 0, True),
        (GateType.OUTPUT, 1, False),
        (GateType.NOT, 1, True),
        (GateType.AND, 2, True),
        (GateType.NOR, 2, True),
    ],
)
def test_pin_counts(gate_type, inputs, has_output):
    gate = Gate(gate_type, Vec2(0, 0))
    assert gate.input_count == inputs
    assert gate.has_output is has_output
    points = gate.connection_points(4)
    assert len(points) == inputs + int(has_output)
    assert all(p.gate_index == 4 for p in points)
    assert [p.is_input for p in points] == [True] * inputs + [False] * int(has_output)


def test_pins_sit_outside_body():
    gate = Gate(GateType.OR, Vec2(300, 200))
    for i in range(gate.input_count):
        assert gate.input_point(i).x < gate.bounds.x
    assert gate.output_point().x > gate.bounds.right
    assert gate.input_point(0).y < gate.input_point(1).y


def test_pins_follow_gate_when_moved():
    gate = Gate(GateType.AND, Vec2(300, 200))
    before = [p.position for p in gate.connection_points(0)]
    shift = Vec2(17, -9)
    gate.position = gate.position + shift
    after = [p.position for p in gate.connection_points(0)]
    for old, new in zip(before, after):
        assert new.x == pytest.approx(old.x + shift.x)
        assert new.y == pytest.approx(old.y + shift.y)


def test_terminal_input_is_centered():
    gate = Gate(GateType.OUTPUT, Vec2(400, 400))
    assert gate.input_point(0).y == pytest.approx(gate.bounds.center.y)
    assert gate.output_point().y == pytest.approx(gate.bounds.center.y)


def test_textured_gate_pins(monkeypatch):
    plain_not = Gate(GateType.NOT, Vec2(300, 200))
    plain_and = Gate(GateType.AND, Vec2(300, 200))
    monkeypatch.setattr(GATE_DATA[GateType.NOT], "texture", pygame.Surface((8, 8)))
    monkeypatch.setattr(GATE_DATA[GateType.AND], "texture", pygame.Surface((8, 8)))
    textured_not = Gate(GateType.NOT, Vec2(300, 200))
    textured_and = Gate(GateType.AND, Vec2(300, 200))

    assert textured_not.input_point(0).y == pytest.approx(textured_not.bounds.center.y)
    assert plain_not.input_point(0).y < plain_not.bounds.center.y
    assert textured_and.input_point(0).x < plain_and.input_point(0).x
    assert textured_and.output_point().x < plain_and.output_point().x
    assert textured_and.output_point().x > textured_and.bounds.right


def test_gate_keeps_texture_state_from_creation(monkeypatch):
    gate = Gate(GateType.OR, Vec2(300, 200))
    before = gate.output_point()
    monkeypatch.setattr(GATE_DATA[GateType.OR], "texture", pygame.Surface((8, 8)))
    assert gate.output_point() == before


def test_is_input_connected_checks_input_index():
    gate = Gate(GateType.AND, Vec2(0, 0))
    wires = [SimpleNamespace(to_input_index=1)]
    assert gate.is_input_connected(1, wires)
    assert not gate.is_input_connected(0, wires)
    assert not gate.is_input_connected(0, [])


@pytest.fixture
def canvas():
    surface = pygame.Surface((400, 300))
    surface.fill((0, 0, 0))
    return surface


def test_draw_fills_body_with_gate_colour(canvas):
    gate = Gate(GateType.AND, Vec2(100, 100))
    gate.draw(canvas)
    assert tuple(canvas.get_at((103, 103)))[:3] == DARKGREEN[:3]


def test_draw_highlight_uses_yellow_border(canvas):
    gate = Gate(GateType.AND, Vec2(100, 100))
    gate.draw(canvas, highlight=True)
    assert tuple(canvas.get_at((100, 100)))[:3] == YELLOW[:3]


def test_draw_shows_pins_except_in_preview(canvas):
    gate = Gate(GateType.AND, Vec2(100, 100))
    pin = gate.input_point(0)
    spot = (int(pin.x), int(pin.y))

    gate.draw(canvas, preview=True)
    assert tuple(canvas.get_at(spot))[:3] == (0, 0, 0)

    gate.draw(canvas)
    assert tuple(canvas.get_at(spot))[:3] == DARKGRAY[:3]