"""
Stacker - Tower blocks and placement.

Placement is a pure function of the level's span and the top block so it
can be tested without running a game.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from models import Rect


@dataclass(frozen=True)
class Block:
    """A placed tower block: horizontal span on a fixed row."""
    left: float
    right: float
    y: float
    height: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def center_x(self) -> float:
        return 0.5 * (self.left + self.right)

    @property
    def span(self) -> Tuple[float, float]:
        return (self.left, self.right)

    @property
    def rect(self) -> Rect:
        return Rect(x=self.center_x, y=self.y, half_width=0.5 * self.width, half_height=0.5 * self.height)


def overlap_span(a: Tuple[float, float], b: Tuple[float, float]) -> Optional[Tuple[float, float]]:
    """Intersection of two spans, or None if they only touch or are apart.

    Examples:
        >>> overlap_span((0.0, 1.0), (0.5, 2.0))
        (0.5, 1.0)
        >>> overlap_span((0.0, 1.0), (1.0, 2.0)) is None
        True
    """
    left = max(a[0], b[0])
    right = min(a[1], b[1])
    if right <= left:
        return None
    return (left, right)


def place_block(
    x: float,
    width: float,
    y: float,
    height: float,
    top: Optional[Block],
    min_width: float,
) -> Optional[Block]:
    """Resolve dropping a level of `width` centred on `x` onto the tower.

    Args:
        x: Level centre
        width: Level width
        y: Row centre of the new block
        height: Row height
        top: Current top block (None for an empty tower)
        min_width: Narrowest block a successful placement may leave

    Returns:
        The new block, or None if the level misses the top block.
    """
    span = (x - 0.5 * width, x + 0.5 * width)
    if top is None:
        return Block(left=span[0], right=span[1], y=y, height=height)

    overlap = overlap_span(span, top.span)
    if overlap is None:
        return None

    center = 0.5 * (overlap[0] + overlap[1])
    new_width = max(overlap[1] - overlap[0], min_width)
    return Block(left=center - 0.5 * new_width, right=center + 0.5 * new_width, y=y, height=height)
