"""
Shared primitive data types for the simulations.

This module provides the basic geometric and color types used throughout
the codebase: the simulation cores, the renderers and the input adapters.

All coordinates live in normalized space: the visible area spans [-1, 1]
on each axis with +y pointing up.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and velocities.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, +y up)

    Examples:
        >>> pos = Point2D(x=0.25, y=-0.5)
        >>> vel = Point2D(x=-1.0, y=0.5)  # Moving left and up
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.3f}, y={self.y:.3f})"


# Alias used by the input layer
Vector2D = Point2D


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> red = Color(r=255, g=0, b=0)
        >>> red.as_tuple
        (255, 0, 0, 255)
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rect(BaseModel):
    """Immutable axis-aligned rectangle defined by center and half-extents.

    Used for the player actor, targets, tower blocks and hit-boxes.
    Half-extents may be zero (a degenerate rectangle), which is how a
    point or a line segment is tested against a band.

    Attributes:
        x: X coordinate of the center
        y: Y coordinate of the center
        half_width: Half of the width (non-negative)
        half_height: Half of the height (non-negative)

    Examples:
        >>> rect = Rect(x=0.0, y=0.0, half_width=0.5, half_height=0.25)
        >>> rect.min_x, rect.max_y
        (-0.5, 0.25)
    """
    x: float
    y: float
    half_width: float = Field(..., ge=0)
    half_height: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> 'Rect':
        """Build a rectangle from its corners.

        Corners given in either order are accepted; the result always has
        non-negative extents.
        """
        lo_x, hi_x = min(min_x, max_x), max(min_x, max_x)
        lo_y, hi_y = min(min_y, max_y), max(min_y, max_y)
        return cls(
            x=(lo_x + hi_x) / 2,
            y=(lo_y + hi_y) / 2,
            half_width=(hi_x - lo_x) / 2,
            half_height=(hi_y - lo_y) / 2,
        )

    @property
    def min_x(self) -> float:
        """Left edge."""
        return self.x - self.half_width

    @property
    def max_x(self) -> float:
        """Right edge."""
        return self.x + self.half_width

    @property
    def min_y(self) -> float:
        """Bottom edge."""
        return self.y - self.half_height

    @property
    def max_y(self) -> float:
        """Top edge."""
        return self.y + self.half_height

    @property
    def width(self) -> float:
        return 2 * self.half_width

    @property
    def height(self) -> float:
        return 2 * self.half_height

    @property
    def is_degenerate(self) -> bool:
        """True when the rectangle has zero area."""
        return self.half_width == 0 or self.half_height == 0

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"Rect([{self.min_x:.3f}, {self.max_x:.3f}] x "
                f"[{self.min_y:.3f}, {self.max_y:.3f}])")
