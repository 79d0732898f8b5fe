"""Creating, deleting and routing wires, and propagating signals along them."""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence

import pygame

from gatesim.constants import (
    CONNECTION_POINT_RADIUS,
    CONNECTION_SNAP_DISTANCE,
    DARKGRAY,
    GREEN,
    RED,
    YELLOW,
    ConnectionPoint,
    GateType,
)
from gatesim.gate import Gate
from gatesim.geometry import Vec2, distance
from gatesim.wire import Wire


class WiringSystem:
    """Holds the wires of a circuit and the state of a wire being drawn."""

    def __init__(self) -> None:
        self.wires: list[Wire] = []
        self.is_creating_wire = False
        self.wire_source_gate = -1

    def _cancel_creation(self) -> None:
        self.is_creating_wire = False
        self.wire_source_gate = -1

    def _input_taken(self, gate_index: int, input_index: int) -> bool:
        return any(
            wire.to_gate_index == gate_index and wire.to_input_index == input_index
            for wire in self.wires
        )

    @staticmethod
    def _valid(index: int, gates: Sequence[Gate]) -> bool:
        return 0 <= index < len(gates)

    def find_connection_point(
        self, mouse_pos: Vec2, gates: Sequence[Gate]
    ) -> Optional[ConnectionPoint]:
        """The first pin within snapping distance of ``mouse_pos``, if any."""
        for index, gate in enumerate(gates):
            for point in gate.connection_points(index):
                if distance(mouse_pos, point.position) <= CONNECTION_SNAP_DISTANCE:
                    return point
        return None

    def handle_wire_click(self, mouse_pos: Vec2, gates: Sequence[Gate]) -> bool:
        """Start, finish or cancel a wire; True if the click was consumed."""
        point = self.find_connection_point(mouse_pos, gates)

        if point is None:
            if self.is_creating_wire:
                self._cancel_creation()
                return True
            return False

        if not self.is_creating_wire:
            if not point.is_input:
                self.is_creating_wire = True
                self.wire_source_gate = point.gate_index
                return True
            return False

        if (
            point.is_input
            and point.gate_index != self.wire_source_gate
            and not self._input_taken(point.gate_index, point.input_index)
        ):
            wire = Wire(self.wire_source_gate, point.gate_index, point.input_index)
            start = gates[self.wire_source_gate].output_point()
            end = gates[point.gate_index].input_point(point.input_index)
            wire.calculate_route(start, end, gates)
            self.wires.append(wire)

        self._cancel_creation()
        return True

    def handle_wire_deletion(self, mouse_pos: Vec2) -> bool:
        """Delete the first wire near ``mouse_pos``; True if one was deleted."""
        for index, wire in enumerate(self.wires):
            if wire.is_near_path(mouse_pos, 10.0):
                del self.wires[index]
                return True
        return False

    def update_signals(self, gates: MutableSequence[Gate]) -> None:
        """Propagate one step of signals from gate outputs through the wires."""
        for gate in gates:
            if gate.gate_type is GateType.INPUT:
                gate.compute_output()
            else:
                gate.input1 = False
                gate.input2 = False

        for wire in self.wires:
            if self._valid(wire.from_gate_index, gates) and self._valid(wire.to_gate_index, gates):
                signal = gates[wire.from_gate_index].output
                wire.state = signal
                target = gates[wire.to_gate_index]
                if wire.to_input_index == 0:
                    target.input1 = signal
                elif wire.to_input_index == 1:
                    target.input2 = signal

        for gate in gates:
            if gate.gate_type is not GateType.INPUT:
                gate.compute_output()

    def draw_wires(self, surface: pygame.Surface, gates: Sequence[Gate], mouse_pos: Vec2) -> None:
        """Draw every wire and, while one is being drawn, its preview to the mouse."""
        for wire in self.wires:
            if self._valid(wire.from_gate_index, gates) and self._valid(wire.to_gate_index, gates):
                wire.draw(surface, RED if wire.state else DARKGRAY)

        if self.is_creating_wire and self._valid(self.wire_source_gate, gates):
            start = gates[self.wire_source_gate].output_point()
            preview = Wire(self.wire_source_gate, -1, 0)
            preview.calculate_route(start, mouse_pos, gates)
            preview.draw(surface, YELLOW)

    def highlight_connection_points(
        self, surface: pygame.Surface, gates: Sequence[Gate], mouse_pos: Vec2
    ) -> None:
        """Ring the pin under the mouse, coloured by whether it can be connected."""
        nearby = self.find_connection_point(mouse_pos, gates)
        if nearby is None:
            return

        for index, gate in enumerate(gates):
            for point in gate.connection_points(index):
                if (
                    point.gate_index != nearby.gate_index
                    or point.input_index != nearby.input_index
                    or point.is_input != nearby.is_input
                ):
                    continue
                color = YELLOW
                if self.is_creating_wire:
                    if point.is_input and point.gate_index != self.wire_source_gate:
                        taken = self._input_taken(point.gate_index, point.input_index)
                        color = RED if taken else GREEN
                    else:
                        color = RED
                pygame.draw.circle(
                    surface, color, tuple(point.position), CONNECTION_POINT_RADIUS + 3
                )

    def remove_wires_for_gate(self, gate_index: int) -> None:
        """Drop every wire attached to the given gate."""
        self.wires = [
            wire
            for wire in self.wires
            if wire.from_gate_index != gate_index and wire.to_gate_index != gate_index
        ]

    def update_wire_indices(self, removed_index: int) -> None:
        """Shift gate indices down after the gate at ``removed_index`` was removed."""
        for wire in self.wires:
            if wire.from_gate_index > removed_index:
                wire.from_gate_index -= 1
            if wire.to_gate_index > removed_index:
                wire.to_gate_index -= 1

    def recalculate_wires_for_gate(self, gate_index: int, gates: Sequence[Gate]) -> None:
        """Re-route every wire attached to a gate that has moved."""
        for wire in self.wires:
            if gate_index not in (wire.from_gate_index, wire.to_gate_index):
                continue
            if self._valid(wire.from_gate_index, gates) and self._valid(wire.to_gate_index, gates):
                start = gates[wire.from_gate_index].output_point()
                end = gates[wire.to_gate_index].input_point(wire.to_input_index)
                wire.calculate_route(start, end, gates)