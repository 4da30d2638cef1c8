"""The simulation loop and the command that starts it."""

from __future__ import annotations

import argparse
import random
from typing import Any, List, Optional, Sequence

from .envfile import EnvConfig, read_env
from .managers import ComponentManager, RenderManager
from .objects import SimObject
from .render import draw_visible_timer
from .timing import Clock, Timer, VisibleTimer

TIME_LIMIT_SECONDS = 60.0
WINDOW_TITLE = "Welcome to gorobot, press F1 key to exit."
BACKGROUND = (0, 0, 0)


class Simulation:
    """Owns the objects, their managers and the clocks, and runs one frame at a time."""

    def __init__(
        self,
        config: EnvConfig,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self._clock = clock
        self._rng = rng or random.Random()
        self.render_manager = RenderManager()
        self.component_manager = ComponentManager()
        self.objects: List[SimObject] = []
        self.timer: Optional[Timer] = None
        self.world_time: Optional[VisibleTimer] = None
        self.you_lose = False
        self.you_win = False
        self.delta_time = 0.0
        self.elapsed_seconds = 0.0

    def init(self) -> None:
        """Create the objects and start the clocks."""
        self.you_lose = self.you_win = False
        bounds = (self.config.width, self.config.height)
        for index in range(self.config.num_objects):
            obj = SimObject(index, self._rng)
            obj.attach(self.render_manager, self.component_manager, bounds)
            self.objects.append(obj)
        self.timer = Timer(self._clock)
        self.world_time = VisibleTimer(clock=self._clock, window_size=bounds)

    def update(self, surface: Any = None) -> None:
        """Run one frame: move every object and, given a surface, draw the scene."""
        if self.timer is None:
            raise RuntimeError("simulation has not been initialised")
        self.delta_time = self.timer.delta_time()
        self.elapsed_seconds = self.timer.elapsed_seconds()
        if self.elapsed_seconds >= TIME_LIMIT_SECONDS:
            self.you_lose = True

        if surface is not None:
            surface.fill(BACKGROUND)
        self.component_manager.update(self.delta_time)
        if surface is not None:
            self.render_manager.update(surface)
            if self.world_time is not None:
                draw_visible_timer(surface, self.world_time)

    def shutdown(self) -> None:
        """Remove every object from the managers and stop the clocks."""
        for obj in self.objects:
            obj.detach(self.render_manager, self.component_manager)
        self.objects.clear()
        self.timer = None
        self.world_time = None


def run(config: EnvConfig) -> None:
    """Open a window and run the simulation until it is closed or F1 is pressed."""
    import pygame

    print(f"Height is {config.height} and width is {config.width}")
    simulation = Simulation(config)
    simulation.init()
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.height, config.width))
        pygame.display.set_caption(WINDOW_TITLE)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F1:
                    running = False
            if running:
                simulation.update(screen)
                pygame.display.flip()
    finally:
        print("Calling Simulation shutdown ...")
        simulation.shutdown()
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the environment file and run the simulation."""
    parser = argparse.ArgumentParser(prog="gorobot", description="Bouncing object simulation.")
    parser.add_argument("env", nargs="?", default="env.txt", help="environment file")
    args = parser.parse_args(argv)
    print("Entering main")
    config = read_env(args.env)
    run(config)
    print("Leaving main")
    return 0