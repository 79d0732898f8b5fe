"""The simulator's state, input handling, drawing and main loop."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence, Union

import pygame

from gatesim.constants import (
    BLACK,
    DARKGRAY,
    GATE_DATA,
    GRAY,
    GRID_SIZE,
    LIGHTGRAY,
    RED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHOW_GRID_DEFAULT,
    SIDEBAR_WIDTH,
    GateType,
    SimulatorMode,
)
from gatesim.gate import Gate
from gatesim.geometry import Vec2, distance
from gatesim.sidebar import Sidebar, _draw_text
from gatesim.textures import load_gate_textures, unload_gate_textures
from gatesim.wiring import WiringSystem

logger = logging.getLogger(__name__)

Point = Union[Vec2, tuple[float, float]]

_CONTROLS = "Controls: DEL = Delete selected gate, Right-click = Delete wire, G = Toggle grid"


class Simulator:
    """Everything on the canvas and the editing state around it."""

    def __init__(self) -> None:
        self.gates: list[Gate] = []
        self.sidebar = Sidebar()
        self.wiring = WiringSystem()
        self.mode = SimulatorMode.PLACEMENT
        self.has_selected_gate = False
        self.selected_gate_type = GateType.INPUT
        self.dragged_gate_index: Optional[int] = None
        self.drag_offset = Vec2()
        self.show_grid = SHOW_GRID_DEFAULT

    def left_click(self, mouse_pos: Point, snap: bool = False) -> None:
        """Handle a left click; ``snap`` aligns a new gate to the grid when it is shown."""
        pos = Vec2(*mouse_pos)
        action = self.sidebar.check_button_click(pos, self.mode)
        if action.toggle_mode:
            self.mode = (
                SimulatorMode.WIRING
                if self.mode is SimulatorMode.PLACEMENT
                else SimulatorMode.PLACEMENT
            )
            self.has_selected_gate = False
        elif action.deselect:
            self.has_selected_gate = False
        elif action.gate_type is not None:
            self.selected_gate_type = action.gate_type
            self.has_selected_gate = True
        elif pos.x > SIDEBAR_WIDTH:
            if self.mode is SimulatorMode.PLACEMENT:
                self._placement_click(pos, snap)
            else:
                self.wiring.handle_wire_click(pos, self.gates)

    def _placement_click(self, pos: Vec2, snap: bool) -> None:
        for index, gate in enumerate(self.gates):
            if gate.contains_point(pos):
                if gate.gate_type is GateType.INPUT:
                    gate.input1 = not gate.input1
                self.dragged_gate_index = index
                self.drag_offset = pos - gate.position
                return

        if not self.has_selected_gate:
            return
        size = GATE_DATA[self.selected_gate_type].size
        x, y = pos.x - size.x / 2, pos.y - size.y / 2
        if self.show_grid and snap:
            x = int(x / GRID_SIZE) * GRID_SIZE
            y = int(y / GRID_SIZE) * GRID_SIZE
        new_gate = Gate(self.selected_gate_type, Vec2(x, y))
        if not any(new_gate.collides_with(existing) for existing in self.gates):
            self.gates.append(new_gate)

    def right_click(self, mouse_pos: Point) -> bool:
        """Delete a wire under the mouse in wiring mode; True if one went."""
        pos = Vec2(*mouse_pos)
        if self.mode is SimulatorMode.WIRING and pos.x > SIDEBAR_WIDTH:
            return self.wiring.handle_wire_deletion(pos)
        return False

    def drag(self, mouse_pos: Point) -> None:
        """Move the gate being dragged so it follows the mouse."""
        if self.mode is not SimulatorMode.PLACEMENT or self.dragged_gate_index is None:
            return
        gate = self.gates[self.dragged_gate_index]
        old = gate.position
        gate.position = Vec2(*mouse_pos) - self.drag_offset
        if distance(old, gate.position) > 1.0:
            self.wiring.recalculate_wires_for_gate(self.dragged_gate_index, self.gates)

    def release(self) -> None:
        """Stop dragging when the left button is let go in placement mode."""
        if self.mode is SimulatorMode.PLACEMENT:
            self.dragged_gate_index = None

    def delete_selected(self) -> bool:
        """Remove the gate being dragged and its wires; True if one was removed."""
        index = self.dragged_gate_index
        if index is None:
            return False
        self.wiring.remove_wires_for_gate(index)
        del self.gates[index]
        self.wiring.update_wire_indices(index)
        self.dragged_gate_index = None
        return True

    def toggle_grid(self) -> bool:
        """Show or hide the grid and return whether it is now shown."""
        self.show_grid = not self.show_grid
        return self.show_grid

    def step(self) -> None:
        """Propagate signals through the circuit once."""
        self.wiring.update_signals(self.gates)

    def status_text(self) -> str:
        """The status line shown at the top of the canvas."""
        parts = [f"Mode: {self.mode.name}"]
        if self.mode is SimulatorMode.PLACEMENT:
            selected = GATE_DATA[self.selected_gate_type].label if self.has_selected_gate else "None"
            parts.append(f"Selected: {selected}")
        else:
            parts.append("Click output then input to connect")
        parts.append(f"Grid: {'ON' if self.show_grid else 'OFF'}")
        return " | ".join(parts)

    def _draw_grid(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for step, base, alpha in ((GRID_SIZE, GRAY, 0.3), (GRID_SIZE * 5, DARKGRAY, 0.5)):
            color = (*base[:3], int(255 * alpha))
            for x in range(SIDEBAR_WIDTH, SCREEN_WIDTH, step):
                pygame.draw.line(overlay, color, (x, 0), (x, SCREEN_HEIGHT))
            for y in range(0, SCREEN_HEIGHT, step):
                pygame.draw.line(overlay, color, (SIDEBAR_WIDTH, y), (SCREEN_WIDTH, y))
        surface.blit(overlay, (0, 0))

    def draw(self, surface: pygame.Surface, mouse_pos: Point, show_debug: bool = False) -> None:
        """Draw one frame of the whole window."""
        pos = Vec2(*mouse_pos)
        surface.fill(LIGHTGRAY)
        if self.show_grid:
            self._draw_grid(surface)

        self.sidebar.draw(surface, self.has_selected_gate, self.selected_gate_type, self.mode)

        for index, gate in enumerate(self.gates):
            gate.draw(surface, False, self.dragged_gate_index == index)

        self.wiring.draw_wires(surface, self.gates, pos)

        if (
            self.mode is SimulatorMode.PLACEMENT
            and self.has_selected_gate
            and pos.x > SIDEBAR_WIDTH
            and self.dragged_gate_index is None
        ):
            size = GATE_DATA[self.selected_gate_type].size
            preview = Gate(self.selected_gate_type, Vec2(pos.x - size.x / 2, pos.y - size.y / 2))
            preview.draw(surface, True)

        if self.mode is SimulatorMode.WIRING:
            self.wiring.highlight_connection_points(surface, self.gates, pos)

        _draw_text(surface, self.status_text(), SIDEBAR_WIDTH + 10, 10, 16, BLACK)
        _draw_text(surface, _CONTROLS, SIDEBAR_WIDTH + 10, SCREEN_HEIGHT - 30, 12, DARKGRAY)

        if show_debug:
            _draw_text(surface, "TEXTURE DEBUG (F1)", SIDEBAR_WIDTH + 500, 10, 20, RED)
            for row, info in enumerate(GATE_DATA.values()):
                if info.texture is not None:
                    width, height = info.texture.get_size()
                    line = f"{info.label} Texture: loaded ({width}x{height})"
                else:
                    line = f"{info.label} Texture: none"
                _draw_text(surface, line, SIDEBAR_WIDTH + 500, 60 + 20 * row, 10, BLACK)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the simulator window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="gatesim", description="Interactive logic gate simulator.")
    parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Logic Gate Simulator")
        clock = pygame.time.Clock()
        loaded = load_gate_textures()
        for gate_type, info in GATE_DATA.items():
            logger.info("%s: texture %s", info.label, "loaded" if gate_type in loaded else "none")

        sim = Simulator()
        running = True
        while running:
            left_pressed = right_pressed = left_released = False
            delete_pressed = grid_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    left_pressed |= event.button == 1
                    right_pressed |= event.button == 3
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    left_released = True
                elif event.type == pygame.KEYDOWN:
                    delete_pressed |= event.key == pygame.K_DELETE
                    grid_pressed |= event.key == pygame.K_g
            if not running:
                break

            mouse_pos = Vec2(*pygame.mouse.get_pos())
            if left_pressed:
                shift = bool(pygame.key.get_mods() & pygame.KMOD_LSHIFT)
                sim.left_click(mouse_pos, snap=shift)
            if right_pressed:
                sim.right_click(mouse_pos)
            if pygame.mouse.get_pressed()[0]:
                sim.drag(mouse_pos)
            if left_released:
                sim.release()
            if delete_pressed:
                sim.delete_selected()
            if grid_pressed:
                sim.toggle_grid()

            sim.step()
            sim.draw(surface, mouse_pos, bool(pygame.key.get_pressed()[pygame.K_F1]))
            pygame.display.flip()
            clock.tick(60)
    finally:
        unload_gate_textures()
        pygame.quit()
    return 0