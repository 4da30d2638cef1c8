"""Simulated objects that bounce around the world, and the world itself."""

from __future__ import annotations

import logging
import math
import random
from typing import Optional, Tuple

from .actor import Actor
from .managers import ComponentManager, ComponentObject, RenderManager
from .render import ObjectRenderer, WorldRenderer

log = logging.getLogger(__name__)

PI = 3.14159
DEG_TO_RAD = PI / 180.0
OBJECT_VELOCITY = 30

Bounds = Tuple[float, float]


class ObjectMover(ComponentObject):
    """Moves its parent along its heading and bounces it off the bounds."""

    def __init__(self, parent: Actor, bounds: Bounds) -> None:
        super().__init__()
        self.parent = parent
        self.bounds = bounds

    def update(self, delta_time: float) -> None:
        """Advance the parent by ``delta_time`` seconds."""
        parent = self.parent
        parent.velocity = OBJECT_VELOCITY
        heading = parent.angle * DEG_TO_RAD
        step = parent.velocity * delta_time
        self.next_x_move = parent.x + -math.sin(heading) * step
        self.next_y_move = parent.y + math.cos(heading) * step

        width, height = self.bounds
        if self.next_x_move > width:
            parent.x = width - parent.radius
            parent.angle = -parent.angle
        elif self.next_x_move < 0:
            parent.x = 0 + parent.radius
            parent.angle = -parent.angle
        else:
            parent.x = self.next_x_move

        if self.next_y_move > height:
            parent.y = height - parent.radius
            parent.angle = parent.angle - 180
        elif self.next_y_move < 0:
            parent.y = 0
            parent.angle = parent.angle + 180
        else:
            parent.y = self.next_y_move


class SimObject(Actor):
    """A disc-shaped object with a random heading."""

    def __init__(self, who_am_i: int, rng: Optional[random.Random] = None) -> None:
        radius = 10
        super().__init__(
            x=1,
            y=2,
            radius=radius,
            width=int(radius * 2.0),
            height=int(radius * 2.0),
            speed=1.0,
            velocity=0.0,
        )
        self.who_am_i = who_am_i
        self.angle = (rng or random.Random()).randrange(360)
        self.renderer: Optional[ObjectRenderer] = None
        self.mover: Optional[ObjectMover] = None
        log.debug(
            "object %d: radius=%s x=%s y=%s width=%d height=%d speed=%s velocity=%s",
            who_am_i, self.radius, self.x, self.y, self.width, self.height,
            self.speed, self.velocity,
        )

    def attach(
        self,
        render_manager: RenderManager,
        component_manager: ComponentManager,
        bounds: Bounds,
    ) -> None:
        """Create this object's renderer and mover and register them."""
        self.renderer = ObjectRenderer(self)
        render_manager.add(self.renderer)
        self.mover = ObjectMover(self, bounds)
        component_manager.add(self.mover)

    def detach(self, render_manager: RenderManager, component_manager: ComponentManager) -> None:
        """Unregister and drop this object's renderer and mover."""
        if self.renderer is not None:
            render_manager.remove(self.renderer)
            self.renderer = None
        if self.mover is not None:
            component_manager.remove(self.mover)
            self.mover = None


class World(Actor):
    """The area the objects live in, drawn as a grid."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width=width, height=height)
        self.renderer: Optional[WorldRenderer] = None

    def attach(self, render_manager: RenderManager) -> None:
        """Create the grid renderer and register it."""
        self.renderer = WorldRenderer(self.width, self.height)
        render_manager.add(self.renderer)

    def detach(self, render_manager: RenderManager) -> None:
        """Unregister and drop the grid renderer."""
        if self.renderer is not None:
            render_manager.remove(self.renderer)
            self.renderer = None