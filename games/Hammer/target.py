"""
Hammer - Moving target entity.

Targets travel in straight lines and bounce off the play area edges.
"""
from dataclasses import dataclass

from models import Rect


@dataclass
class MovingTarget:
    """A square target with constant speed.

    Attributes:
        x, y: Center position (normalized)
        vx, vy: Velocity (normalized units/second)
        half_width, half_height: Half extents of the drawn square
    """
    x: float
    y: float
    vx: float
    vy: float
    half_width: float
    half_height: float

    @property
    def rect(self) -> Rect:
        """Drawn footprint of the target."""
        return Rect(x=self.x, y=self.y, half_width=self.half_width, half_height=self.half_height)

    @property
    def hit_rect(self) -> Rect:
        """Horizontal segment through the center used against the hammer band.

        A target counts as inside the band when its center line is,
        regardless of its own height.
        """
        return Rect(x=self.x, y=self.y, half_width=self.half_width, half_height=0.0)

    def integrate(self, dt: float) -> None:
        """Advance the position by one step of `dt` seconds."""
        self.x += self.vx * dt
        self.y += self.vy * dt
