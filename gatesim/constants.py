"""Screen layout, colours, gate kinds and the gate property table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from gatesim.geometry import Vec2

SCREEN_WIDTH = 1800
SCREEN_HEIGHT = 880
SIDEBAR_WIDTH = 200
CONNECTION_POINT_RADIUS = 6.0
CONNECTION_SNAP_DISTANCE = 15.0

GRID_SIZE = 30
SHOW_GRID_DEFAULT = True

Color = tuple[int, int, int, int]

LIGHTGRAY: Color = (200, 200, 200, 255)
GRAY: Color = (130, 130, 130, 255)
DARKGRAY: Color = (80, 80, 80, 255)
YELLOW: Color = (253, 249, 0, 255)
ORANGE: Color = (255, 161, 0, 255)
RED: Color = (230, 41, 55, 255)
MAROON: Color = (190, 33, 55, 255)
GREEN: Color = (0, 228, 48, 255)
LIME: Color = (0, 158, 47, 255)
DARKGREEN: Color = (0, 117, 44, 255)
SKYBLUE: Color = (102, 191, 255, 255)
BLUE: Color = (0, 121, 241, 255)
DARKBLUE: Color = (0, 82, 172, 255)
PURPLE: Color = (200, 122, 255, 255)
WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RAYWHITE: Color = (245, 245, 245, 255)


class GateType(Enum):
    INPUT = 0
    OUTPUT = 1
    AND = 2
    OR = 3
    NOT = 4
    NAND = 5
    NOR = 6

    def __str__(self) -> str:
        return self.name


class SimulatorMode(Enum):
    PLACEMENT = 0
    WIRING = 1


@dataclass
class GateInfo:
    """Display properties of one gate kind; ``texture`` is filled in at runtime."""

    size: Vec2
    color: Color
    label: str
    image_path: Optional[str]
    texture: Any = None


@dataclass
class ConnectionPoint:
    """A pin of a placed gate."""

    position: Vec2
    is_input: bool
    gate_index: int
    input_index: int = 0


GATE_DATA: dict[GateType, GateInfo] = {
    GateType.INPUT: GateInfo(Vec2(60, 40), LIGHTGRAY, "INP", None),
    GateType.OUTPUT: GateInfo(Vec2(60, 40), SKYBLUE, "OUT", None),
    GateType.AND: GateInfo(Vec2(75, 50), DARKGREEN, "AND", "resources/and_gate.png"),
    GateType.OR: GateInfo(Vec2(75, 50), DARKBLUE, "OR", "resources/or_gate.png"),
    GateType.NOT: GateInfo(Vec2(75, 50), MAROON, "NOT", "resources/not_gate.png"),
    GateType.NAND: GateInfo(Vec2(75, 50), LIME, "NAND", "resources/nand_gate.png"),
    GateType.NOR: GateInfo(Vec2(75, 50), PURPLE, "NOR", "resources/nor_gate.png"),
}