"""Collision detection and bounds handling for rectangle games.

Handles rectangle-rectangle overlap, velocity reflection off the play
area edges, and mirror reflection of oscillating positions.
"""

from typing import Literal, Protocol, Tuple

from models import Rect


class MovingEntity(Protocol):
    """Anything with a center position and a mutable velocity."""
    x: float
    y: float
    vx: float
    vy: float


def overlaps(a: Rect, b: Rect) -> bool:
    """Check if two rectangles overlap.

    Uses strict inequalities on both axes, so rectangles that only share
    an edge (or a corner) do not overlap. A degenerate rectangle still
    overlaps when it lies strictly inside the other one's span.

    Args:
        a: First rectangle
        b: Second rectangle

    Returns:
        True if the interiors intersect
    """
    return (a.min_x < b.max_x and a.max_x > b.min_x and
            a.min_y < b.max_y and a.max_y > b.min_y)


def reflect_velocity(position: float, velocity: float, lower: float, upper: float) -> float:
    """Point a velocity component back into [lower, upper].

    This is a direct sign assignment, not an elastic bounce: re-applying
    it on every frame an entity spends outside the bounds keeps the same
    result instead of flipping back and forth.

    Args:
        position: Coordinate on the axis
        velocity: Velocity component on the axis
        lower: Lowest legal coordinate
        upper: Highest legal coordinate

    Returns:
        Velocity component pointing inward (unchanged when inside)
    """
    if position <= lower:
        return abs(velocity)
    elif position >= upper:
        return -abs(velocity)
    return velocity


def reflect_if_out_of_bounds(
    entity: MovingEntity,
    axis: Literal["x", "y"],
    lower: float,
    upper: float,
) -> float:
    """Apply reflect_velocity to one axis of an entity, in place.

    Args:
        entity: Entity whose vx/vy is updated
        axis: Which axis to check (its center coordinate and velocity)
        lower: Lowest legal center coordinate
        upper: Highest legal center coordinate

    Returns:
        The new velocity component
    """
    attr = 'vx' if axis == "x" else 'vy'
    position = getattr(entity, axis)
    velocity = reflect_velocity(position, getattr(entity, attr), lower, upper)
    setattr(entity, attr, velocity)
    return velocity


def mirror_into_range(position: float, lower: float, upper: float) -> Tuple[float, bool]:
    """Fold a position back into [lower, upper] by mirror reflection.

    Each crossing maps x to 2 * bound - x, which keeps the distance
    travelled past the bound instead of discarding it.

    Args:
        position: Possibly out-of-range coordinate
        lower: Lowest legal coordinate
        upper: Highest legal coordinate

    Returns:
        Tuple of (position inside the range, True if the direction of
        travel is reversed, i.e. an odd number of reflections happened)
    """
    if lower >= upper:
        return (lower + upper) / 2, False

    flipped = False
    while position < lower or position > upper:
        if position > upper:
            position = 2 * upper - position
        else:
            position = 2 * lower - position
        flipped = not flipped
    return position, flipped
