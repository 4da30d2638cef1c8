"""Drawing of simulated objects, the background grid and the countdown clock."""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Tuple

import pygame

from .actor import Actor
from .managers import RenderObject
from .timing import VisibleTimer

PI = 3.14159
TIMER_PI = 3.14
CIRCLE_POINTS = 100
CIRCLE_SEGMENTS = 20
GRID_SPACING = 1

Point = Tuple[float, float]
Line = Tuple[Tuple[int, int], Tuple[int, int]]


def _to_rgb(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """Convert a colour with 0..1 channels (clamped) to 0..255 channels."""
    return tuple(round(min(max(channel, 0.0), 1.0) * 255) for channel in (r, g, b))


OBJECT_COLOR = _to_rgb(0.0, 1.5, 0.0)
GRID_COLOR = _to_rgb(0.184314, 0.309804, 0.309804)


def circle_points(
    radius: float, count: int = CIRCLE_POINTS, segments: int = CIRCLE_SEGMENTS
) -> List[Point]:
    """Points around a circle of ``radius``, ``segments`` steps per turn."""
    if segments <= 0:
        raise ValueError("segments must be positive")
    return [
        (
            radius * math.cos(i * 2.0 * PI / segments),
            radius * math.sin(i * 2.0 * PI / segments),
        )
        for i in range(count)
    ]


def grid_lines(width: int, height: int, spacing: int = GRID_SPACING) -> List[Line]:
    """Horizontal lines, then vertical lines, covering a ``width`` x ``height`` area."""
    if spacing <= 0:
        raise ValueError("spacing must be positive")
    horizontal = [((0, y), (width, y)) for y in range(0, height, spacing)]
    vertical = [((x, 0), (x, height)) for x in range(0, width, spacing)]
    return horizontal + vertical


def _transform(points: Sequence[Point], angle: float, dx: float, dy: float) -> List[Point]:
    """Rotate ``points`` by ``angle`` degrees about the origin, then translate."""
    theta = math.radians(angle)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return [(x * cos_t - y * sin_t + dx, x * sin_t + y * cos_t + dy) for x, y in points]


def _fill_fan(surface: Any, color: Tuple[int, int, int], points: Sequence[Point]) -> None:
    if len(points) >= 3:
        pygame.draw.polygon(surface, color, list(points))


class ObjectRenderer(RenderObject):
    """Draws its parent actor as a filled green disc."""

    def __init__(self, parent: Actor) -> None:
        self.parent = parent

    def render(self, surface: Any) -> None:
        """Draw the parent at its position and heading."""
        parent = self.parent
        outline = circle_points(parent.radius)
        _fill_fan(surface, OBJECT_COLOR, _transform(outline, parent.angle, parent.x, parent.y))


class WorldRenderer(RenderObject):
    """Draws the background grid of the world."""

    def __init__(self, width: int, height: int, spacing: int = GRID_SPACING) -> None:
        self.width = width
        self.height = height
        self.spacing = spacing

    def render(self, surface: Any) -> None:
        """Draw every grid line onto ``surface``."""
        for start, end in grid_lines(self.width, self.height, self.spacing):
            pygame.draw.line(surface, GRID_COLOR, start, end, 1)


def _timer_fan(timer: VisibleTimer, count: int) -> List[Point]:
    ticks = timer.number_of_ticks
    if ticks <= 0:
        return []
    points = [(0.0, 0.0)] + [
        (
            timer.radius * math.cos(i * 2 * TIMER_PI / ticks),
            timer.radius * math.sin(i * 2 * TIMER_PI / ticks),
        )
        for i in range(count + 1)
    ]
    # The clock starts its ticks at the top and moves clockwise.
    return _transform(points, 90.0, timer.pos.x, timer.pos.y)


def draw_visible_timer(surface: Any, timer: VisibleTimer) -> None:
    """Advance ``timer`` and draw it: ticks while running, flashing once expired."""
    timer.update_tick_count()
    if timer.expired:
        grey = timer.flash_color()
        _fill_fan(surface, _to_rgb(grey, grey, grey), _timer_fan(timer, timer.number_of_ticks))
        return
    clock = timer.clock_color
    _fill_fan(
        surface,
        _to_rgb(clock.r, clock.g, clock.b),
        _timer_fan(timer, timer.number_of_ticks),
    )
    tick = timer.tick_color
    _fill_fan(surface, _to_rgb(tick.r, tick.g, tick.b), _timer_fan(timer, timer.tick_count))