"""A placed logic gate: its logic, geometry and drawing."""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import Iterable, Union

import pygame

from gatesim.constants import (
    BLACK,
    CONNECTION_POINT_RADIUS,
    DARKGRAY,
    GATE_DATA,
    LIME,
    RED,
    WHITE,
    YELLOW,
    Color,
    ConnectionPoint,
    GateType,
)
from gatesim.geometry import Rect, Vec2

_TERMINALS = (GateType.INPUT, GateType.OUTPUT)
_OUTPUT_PIN_TYPES = (GateType.NAND, GateType.NOR, GateType.NOT, GateType.INPUT)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _brighten(color: Color, factor: float) -> Color:
    r, g, b, a = color
    if factor < 0:
        scale = 1 + factor
        r, g, b = r * scale, g * scale, b * scale
    else:
        r, g, b = ((255 - c) * factor + c for c in (r, g, b))
    return (int(r), int(g), int(b), a)


def _pg_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def _fill_rect(surface: pygame.Surface, rect: Rect, color: Color) -> None:
    if color[3] < 255:
        layer = pygame.Surface((int(rect.width), int(rect.height)), pygame.SRCALPHA)
        layer.fill(color)
        surface.blit(layer, (int(rect.x), int(rect.y)))
    else:
        pygame.draw.rect(surface, color, _pg_rect(rect))


def _scaled(image: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.transform.smoothscale(image, size)
    except ValueError:
        return pygame.transform.scale(image, size)


def _draw_pin(surface: pygame.Surface, center: Vec2, active: bool) -> None:
    pos = tuple(center)
    pygame.draw.circle(surface, WHITE, pos, CONNECTION_POINT_RADIUS)
    pygame.draw.circle(surface, RED if active else DARKGRAY, pos, CONNECTION_POINT_RADIUS - 1)
    pygame.draw.circle(surface, BLACK, pos, CONNECTION_POINT_RADIUS, 1)


class Gate:
    """A gate placed on the canvas, with two input latches and one output."""

    def __init__(self, gate_type: GateType, position: Union[Vec2, tuple[float, float]]) -> None:
        self._type = gate_type
        self._info = dataclasses.replace(GATE_DATA[gate_type])
        self.position = Vec2(*position)
        self.input1 = False
        self.input2 = False
        self.output = False

    def __repr__(self) -> str:
        return f"Gate({self._type}, {self.position})"

    @property
    def gate_type(self) -> GateType:
        return self._type

    @property
    def size(self) -> Vec2:
        return self._info.size

    @property
    def color(self) -> Color:
        return self._info.color

    @property
    def label(self) -> str:
        return self._info.label

    @property
    def _textured(self) -> bool:
        return self._info.texture is not None

    def compute_output(self) -> None:
        """Set ``output`` from the current inputs."""
        a, b = self.input1, self.input2
        self.output = {
            GateType.INPUT: a,
            GateType.OUTPUT: a,
            GateType.AND: a and b,
            GateType.OR: a or b,
            GateType.NOT: not a,
            GateType.NAND: not (a and b),
            GateType.NOR: not (a or b),
        }[self._type]

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def contains_point(self, point: Vec2) -> bool:
        return self.bounds.contains_point(point)

    def collides_with(self, other: Gate) -> bool:
        return self.bounds.collides_with(other.bounds)

    def input_point(self, input_index: int = 0) -> Vec2:
        """Where the pin of the given input sits."""
        x, y = self.position
        height = self.size.y
        if self._type in _TERMINALS:
            return Vec2(x - 8, y + height * 0.5)
        offset_y = height * 0.33 if input_index == 0 else height * 0.66
        if self._textured:
            if self._type is GateType.NOT:
                return Vec2(x - 12, y + height * 0.5)
            return Vec2(x - 12, y + offset_y)
        return Vec2(x - 8, y + offset_y)

    def output_point(self) -> Vec2:
        """Where the output pin sits."""
        gap = 4 if self._textured and self._type not in _TERMINALS else 8
        return Vec2(self.position.x + self.size.x + gap, self.position.y + self.size.y * 0.5)

    @property
    def input_count(self) -> int:
        if self._type is GateType.INPUT:
            return 0
        if self._type in (GateType.OUTPUT, GateType.NOT):
            return 1
        return 2

    @property
    def has_output(self) -> bool:
        return self._type is not GateType.OUTPUT

    def connection_points(self, gate_index: int) -> list[ConnectionPoint]:
        """All pins of this gate, inputs first, tagged with ``gate_index``."""
        points = [
            ConnectionPoint(self.input_point(i), True, gate_index, i)
            for i in range(self.input_count)
        ]
        if self.has_output:
            points.append(ConnectionPoint(self.output_point(), False, gate_index, 0))
        return points

    def is_input_connected(self, input_index: int, wires: Iterable) -> bool:
        """True if any wire feeds an input with this index."""
        return any(wire.to_input_index == input_index for wire in wires)

    def _draw_centered_text(self, surface: pygame.Surface, text: str, size: int, color: Color) -> None:
        font = _font(size)
        width, _ = font.size(text)
        image = font.render(text, True, color[:3])
        x = self.position.x + (self.size.x - width) / 2
        y = self.position.y + (self.size.y - size) / 2
        surface.blit(image, (int(x), int(y)))

    def _draw_connection_points(self, surface: pygame.Surface) -> None:
        states = (self.input1, self.input2)
        for i in range(self.input_count):
            _draw_pin(surface, self.input_point(i), states[i])
        if self.has_output and self._type in _OUTPUT_PIN_TYPES:
            _draw_pin(surface, self.output_point(), self.output)

    def draw(self, surface: pygame.Surface, preview: bool = False, highlight: bool = False) -> None:
        """Draw the gate; a preview is translucent and shows no pins."""
        body = self.bounds
        color = self.color
        if preview:
            color = (*color[:3], 128)
        if highlight:
            color = _brighten(color, 0.3)

        texture = self._info.texture
        if texture is not None and self._type not in _TERMINALS:
            image = _scaled(texture, (int(body.width), int(body.height)))
            if preview:
                image.set_alpha(128)
            surface.blit(image, (int(body.x), int(body.y)))
            if highlight:
                pygame.draw.rect(surface, YELLOW, _pg_rect(body), 3)
        else:
            _fill_rect(surface, body, color)
            if self._type in _TERMINALS:
                if not preview:
                    self._draw_centered_text(
                        surface, "1" if self.output else "0", 24, LIME if self.output else RED
                    )
            else:
                self._draw_centered_text(surface, self.label, 18, WHITE)
            pygame.draw.rect(
                surface, YELLOW if highlight else BLACK, _pg_rect(body), 3 if highlight else 2
            )

        if not preview:
            self._draw_connection_points(surface)