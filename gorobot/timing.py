"""Frame timing and the on-screen countdown clock's state."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

DEFAULT_RADIUS = 50
DEFAULT_TICKS = 60
DEFAULT_TIME = 60
FLASH_INTERVAL_MS = 500.0
FALLBACK_POSITION = 300.0

Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Timer:
    """Measures elapsed and per-frame time from a millisecond clock."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or _monotonic_ms
        self.start_time = self.last_delta_check = float(self._clock())

    def elapsed_seconds(self) -> float:
        """Seconds since the timer was created."""
        return (self._clock() - self.start_time) / 1000.0

    def delta_time(self) -> float:
        """Seconds since the previous call (or since creation)."""
        now = float(self._clock())
        delta = now - self.last_delta_check
        self.last_delta_check = now
        return delta / 1000.0


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Color:
    r: float
    g: float
    b: float


class VisibleTimer:
    """Countdown clock divided into ticks that flashes once it runs out."""

    def __init__(
        self,
        total_time: float = DEFAULT_TIME,
        num_ticks: int = DEFAULT_TICKS,
        clock: Optional[Clock] = None,
        window_size: Optional[Tuple[int, int]] = None,
    ) -> None:
        self._clock = clock or _monotonic_ms
        self.window_size = window_size
        self.radius = DEFAULT_RADIUS
        self.pos = Position(690.0, 60.0)
        self.clock_color = Color(1.0, 1.0, 1.0)
        self.tick_color = Color(1.0, 0.0, 0.0)
        self.total_time_in_seconds = float(total_time)
        self.number_of_ticks = num_ticks
        self.seconds_per_tick = self._seconds_per_tick()
        self.tick_count = 0
        self.start_time = float(self._clock())
        self.expired = False
        self.last_flash_at = 0.0
        self._flash_value = 0.0

    def _seconds_per_tick(self) -> float:
        if self.number_of_ticks == 0:
            return math.inf
        return self.total_time_in_seconds / self.number_of_ticks

    def set_number_of_ticks(self, num_ticks: int) -> None:
        """Set the tick count; negative counts fall back to the default."""
        self.number_of_ticks = DEFAULT_TICKS if num_ticks < 0 else num_ticks
        self.seconds_per_tick = self._seconds_per_tick()

    def set_time_seconds(self, seconds: float) -> None:
        """Set the total duration of the countdown."""
        self.total_time_in_seconds = float(seconds)
        self.seconds_per_tick = self._seconds_per_tick()

    def set_radius(self, radius: int) -> None:
        """Set the radius; one larger than the window falls back to the default."""
        if self.window_size is not None:
            width, height = self.window_size
            if radius > width or radius > height:
                self.radius = DEFAULT_RADIUS
                return
        self.radius = radius

    def set_position(self, x: float, y: float) -> None:
        """Place the clock; coordinates beyond the window fall back to 300."""
        if self.window_size is not None:
            width, height = self.window_size
            if x > width:
                x = FALLBACK_POSITION
            if y > height:
                y = FALLBACK_POSITION
        self.pos = Position(x, y)

    def start_timer(self) -> None:
        """Restart the countdown from now."""
        self.start_time = float(self._clock())
        self.tick_count = 0
        self.expired = False
        self.last_flash_at = 0.0

    def update_tick_count(self) -> None:
        """Recompute the passed ticks and mark the timer expired when it runs out."""
        if self.expired:
            return
        now = float(self._clock())
        elapsed = (now - self.start_time) / 1000.0
        if self.seconds_per_tick == 0:
            self.tick_count = self.number_of_ticks + 1
        else:
            self.tick_count = int(elapsed / self.seconds_per_tick)
        if self.tick_count > self.number_of_ticks:
            self.expired = True
            self.last_flash_at = now

    def flash_color(self) -> float:
        """Grey level of the expired clock, toggling between 0 and 1 every half second."""
        now = float(self._clock())
        if now - self.last_flash_at > FLASH_INTERVAL_MS:
            self.last_flash_at = now
            self._flash_value = 1.0 if self._flash_value == 0.0 else 0.0
        return self._flash_value