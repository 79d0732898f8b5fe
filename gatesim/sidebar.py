"""The left-hand panel: gate palette, clear button and mode switch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import pygame

from gatesim.constants import (
    BLACK,
    BLUE,
    DARKGRAY,
    GATE_DATA,
    GRAY,
    GREEN,
    ORANGE,
    RAYWHITE,
    SCREEN_HEIGHT,
    SIDEBAR_WIDTH,
    WHITE,
    YELLOW,
    Color,
    GateType,
    SimulatorMode,
)
from gatesim.gate import _font, _pg_rect, _scaled
from gatesim.geometry import Rect, Vec2

_BUTTON_X = 40
_BUTTON_TOP = 120
_BUTTON_STEP = 60
_BUTTON_WIDTH = 75
_BUTTON_HEIGHT = 50
_PIN_TYPES = (GateType.NAND, GateType.NOR, GateType.NOT)

MODE_BUTTON = Rect(10, SCREEN_HEIGHT - 60, 180, 40)

_WIRING_HELP = (
    ("Click output", 120),
    ("then input", 140),
    ("to connect", 160),
    ("Right-click", 200),
    ("wire to", 220),
    ("delete", 240),
)


def _draw_text(
    surface: pygame.Surface, text: str, x: float, y: float, size: int, color: Color
) -> None:
    image = _font(size).render(text, True, color[:3])
    surface.blit(image, (int(x), int(y)))


def _text_width(text: str, size: int) -> int:
    return _font(size).size(text)[0]


@dataclass(frozen=True)
class SidebarAction:
    """What a click on the sidebar asks for."""

    gate_type: Optional[GateType] = None
    deselect: bool = False
    toggle_mode: bool = False


class Sidebar:
    """The palette of gate kinds shown at the left of the window."""

    def __init__(self) -> None:
        self.gate_types: list[GateType] = [
            GateType.INPUT,
            GateType.OUTPUT,
            GateType.AND,
            GateType.OR,
            GateType.NOT,
            GateType.NAND,
            GateType.NOR,
        ]

    def _button_rects(self) -> list[tuple[GateType, Rect]]:
        return [
            (
                gate_type,
                Rect(_BUTTON_X, _BUTTON_TOP + _BUTTON_STEP * i, _BUTTON_WIDTH, _BUTTON_HEIGHT),
            )
            for i, gate_type in enumerate(self.gate_types)
        ]

    def _deselect_rect(self) -> Rect:
        y = _BUTTON_TOP + _BUTTON_STEP * len(self.gate_types)
        return Rect(_BUTTON_X, y + 20, _BUTTON_WIDTH, 30)

    def draw(
        self,
        surface: pygame.Surface,
        has_selection: bool,
        selected_type: GateType,
        mode: SimulatorMode,
    ) -> None:
        """Draw the sidebar for the given selection and mode."""
        pygame.draw.rect(surface, DARKGRAY, pygame.Rect(0, 0, SIDEBAR_WIDTH, SCREEN_HEIGHT))

        placing = mode is SimulatorMode.PLACEMENT
        _draw_text(
            surface, "PLACE MODE" if placing else "WIRE MODE", 10, 10, 16,
            GREEN if placing else ORANGE,
        )
        _draw_text(surface, "GATES", 10, 50, 50, RAYWHITE)

        if placing:
            for gate_type, button in self._button_rects():
                self._draw_button(surface, gate_type, button, has_selection and selected_type is gate_type)
            self._draw_deselect(surface)
        else:
            for line, y in _WIRING_HELP:
                _draw_text(surface, line, 10, y, 12, WHITE)

        pygame.draw.rect(surface, BLUE, _pg_rect(MODE_BUTTON))
        pygame.draw.rect(surface, BLACK, _pg_rect(MODE_BUTTON), 2)
        label = "Switch to WIRING" if placing else "Switch to PLACEMENT"
        _draw_text(
            surface,
            label,
            MODE_BUTTON.x + (MODE_BUTTON.width - _text_width(label, 12)) / 2,
            MODE_BUTTON.y + 13,
            12,
            WHITE,
        )

    @staticmethod
    def _draw_button(
        surface: pygame.Surface, gate_type: GateType, button: Rect, selected: bool
    ) -> None:
        info = GATE_DATA[gate_type]
        if info.texture is not None:
            dest = Rect(button.x + 5, button.y + 5, button.width - 10, button.height - 10)
            image = _scaled(info.texture, (int(dest.width), int(dest.height)))
            surface.blit(image, (int(dest.x), int(dest.y)))
            if gate_type in _PIN_TYPES:
                pin = (dest.right + 3, dest.y + dest.height * 0.5)
                pygame.draw.circle(surface, WHITE, pin, 3)
                pygame.draw.circle(surface, BLACK, pin, 3, 1)
            if selected:
                pygame.draw.rect(surface, YELLOW, _pg_rect(dest), 2)
        else:
            pygame.draw.rect(surface, info.color, _pg_rect(button))
            _draw_text(
                surface,
                info.label,
                button.x + (button.width - _text_width(info.label, 14)) / 2,
                button.y + 13,
                14,
                WHITE,
            )
            pygame.draw.rect(
                surface, YELLOW if selected else BLACK, _pg_rect(button), 3 if selected else 2
            )

    def _draw_deselect(self, surface: pygame.Surface) -> None:
        rect = self._deselect_rect()
        pygame.draw.rect(surface, GRAY, _pg_rect(rect))
        pygame.draw.rect(surface, BLACK, _pg_rect(rect), 2)
        label = "CLEAR"
        _draw_text(
            surface, label, rect.x + (rect.width - _text_width(label, 12)) / 2, rect.y + 9, 12, WHITE
        )

    def check_button_click(
        self, mouse_pos: Union[Vec2, tuple[float, float]], mode: SimulatorMode
    ) -> SidebarAction:
        """Work out what a left click at ``mouse_pos`` on the sidebar asks for."""
        pos = Vec2(*mouse_pos)
        if pos.x > SIDEBAR_WIDTH:
            return SidebarAction()
        if MODE_BUTTON.contains_point(pos):
            return SidebarAction(toggle_mode=True)
        if mode is not SimulatorMode.PLACEMENT:
            return SidebarAction()
        for gate_type, button in self._button_rects():
            if button.contains_point(pos):
                return SidebarAction(gate_type=gate_type)
        if self._deselect_rect().contains_point(pos):
            return SidebarAction(deselect=True)
        return SidebarAction()