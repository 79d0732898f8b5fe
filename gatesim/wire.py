"""A wire between two gates, routed as an L with simple obstacle avoidance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence

import pygame

from gatesim.constants import Color
from gatesim.gate import _brighten
from gatesim.geometry import Rect, Vec2, distance_to_segment

if TYPE_CHECKING:
    from gatesim.gate import Gate

CLEARANCE = 15.0
_PERCENTAGES = (0.5, 0.7, 0.3, 0.8, 0.2)
_OFFSETS = (60.0, 120.0, 180.0, -60.0, -120.0, -180.0)


@dataclass
class Wire:
    """A connection from a gate's output to an input of another gate."""

    from_gate_index: int
    to_gate_index: int
    to_input_index: int
    state: bool = False
    waypoints: list[Vec2] = field(default_factory=list)

    def calculate_route(
        self, start: Vec2, end: Vec2, gates: Optional[Sequence[Gate]] = None
    ) -> None:
        """Route the wire from ``start`` to ``end``, avoiding other gates if given."""
        self.waypoints = [start]
        if not gates:
            self.waypoints.extend(self._simple_route(start, end))
        else:
            corner = self._avoidance_route(start, end, gates, CLEARANCE)
            if corner is not None:
                self.waypoints.extend([corner, Vec2(corner.x, end.y)])
            else:
                self.waypoints.extend(self._simple_route(start, end))
        self.waypoints.append(end)

    def is_near_path(self, point: Vec2, threshold: float = 10.0) -> bool:
        """True if ``point`` lies within ``threshold`` of any segment of the route."""
        return any(
            distance_to_segment(point, a, b) <= threshold
            for a, b in zip(self.waypoints, self.waypoints[1:])
        )

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        """Draw the route with rounded joints."""
        if len(self.waypoints) < 2:
            return
        for a, b in zip(self.waypoints, self.waypoints[1:]):
            pygame.draw.line(surface, color, tuple(a), tuple(b), 4)

        for end_point in (self.waypoints[0], self.waypoints[-1]):
            pygame.draw.circle(surface, color, tuple(end_point), 4)
            pygame.draw.circle(surface, _brighten(color, 0.3), tuple(end_point), 3)

        for corner in self.waypoints[1:-1]:
            pygame.draw.circle(surface, color, tuple(corner), 3)
            pygame.draw.circle(surface, _brighten(color, 0.2), tuple(corner), 2)

    @staticmethod
    def _simple_route(start: Vec2, end: Vec2) -> list[Vec2]:
        dx = end.x - start.x
        dy = end.y - start.y
        if abs(dx) > abs(dy):
            corner = Vec2(start.x + dx * 0.7, start.y)
            return [corner, Vec2(corner.x, end.y)]
        corner = Vec2(start.x, start.y + dy * 0.7)
        return [corner, Vec2(end.x, corner.y)]

    def _avoidance_route(
        self, start: Vec2, end: Vec2, gates: Sequence[Gate], clearance: float
    ) -> Optional[Vec2]:
        dx = end.x - start.x
        dy = end.y - start.y

        def clear(corner: Vec2, second: Vec2) -> bool:
            return not self._route_hits((start, corner, second, end), gates, clearance)

        for pct in _PERCENTAGES:
            horizontal = Vec2(start.x + dx * pct, start.y)
            if clear(horizontal, Vec2(horizontal.x, end.y)):
                return horizontal
            vertical = Vec2(start.x, start.y + dy * pct)
            if clear(vertical, Vec2(end.x, vertical.y)):
                return vertical

        for offset in _OFFSETS:
            for pct in _PERCENTAGES:
                candidate = Vec2(start.x + dx * pct, start.y + offset)
                if clear(candidate, Vec2(candidate.x, end.y)):
                    return candidate
                candidate = Vec2(start.x + offset, start.y + dy * pct)
                if clear(candidate, Vec2(end.x, candidate.y)):
                    return candidate
        return None

    def _route_hits(
        self, points: Sequence[Vec2], gates: Sequence[Gate], clearance: float
    ) -> bool:
        return any(
            self._segment_hits(a, b, gates, clearance) for a, b in zip(points, points[1:])
        )

    def _segment_hits(
        self, start: Vec2, end: Vec2, gates: Sequence[Gate], clearance: float
    ) -> bool:
        segment = Rect(
            min(start.x, end.x),
            min(start.y, end.y),
            abs(end.x - start.x) + 1.0,
            abs(end.y - start.y) + 1.0,
        )
        return any(
            segment.collides_with(gate.bounds.expanded(clearance))
            for index, gate in enumerate(gates)
            if index not in (self.from_gate_index, self.to_gate_index)
        )