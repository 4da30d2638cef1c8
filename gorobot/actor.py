"""Base state shared by everything that lives in the simulated world."""

from __future__ import annotations


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into the range [-360, 360] by whole turns."""
    while angle > 360.0:
        angle -= 360.0
    while angle < -360.0:
        angle += 360.0
    return angle


class Actor:
    """Position, size, heading and motion of a world inhabitant."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        radius: int = 0,
        width: int = 0,
        height: int = 0,
        angle: float = 0.0,
        speed: float = 0.0,
        velocity: float = 0.0,
    ) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.width = width
        self.height = height
        self.speed = speed
        self.velocity = velocity
        self._angle = normalize_angle(angle)

    @property
    def angle(self) -> float:
        """Heading in degrees, kept within [-360, 360]."""
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = normalize_angle(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, radius={self.radius!r}, "
            f"angle={self._angle!r}, velocity={self.velocity!r})"
        )