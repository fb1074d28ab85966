"""rectsim physics and collision detection."""

from .collision import (
    overlaps,
    reflect_velocity,
    reflect_if_out_of_bounds,
    mirror_into_range,
)

__all__ = [
    'overlaps',
    'reflect_velocity',
    'reflect_if_out_of_bounds',
    'mirror_into_range',
]
