"""
Saturating difficulty helpers shared by every game's ramp.

Each game keeps its own parameter bundle and step table; these helpers
only guarantee that a single adjustment never crosses its limit.
"""
import math


def ramp_up(value: float, step: float, cap: float) -> float:
    """Increase `value` by `step`, saturating at `cap`."""
    return min(cap, value + step)


def ramp_down(value: float, step: float, floor: float) -> float:
    """Decrease `value` by `step`, saturating at `floor`."""
    return max(floor, value - step)


def ramp_magnitude(value: float, step: float, cap: float) -> float:
    """Grow |value| by `step` up to `cap`, keeping its sign.

    Zero is treated as positive.

    Examples:
        >>> ramp_magnitude(-0.5, 0.25, 2.0)
        -0.75
        >>> ramp_magnitude(1.9, 0.25, 2.0)
        2.0
    """
    magnitude = min(cap, abs(value) + step)
    return math.copysign(magnitude, value) if value != 0 else magnitude


def check_range(name: str, floor: float, cap: float) -> None:
    """Raise ValueError unless floor <= cap.

    Used by configuration validators so a broken difficulty curve is
    rejected at construction instead of misbehaving mid-round.
    """
    if floor > cap:
        raise ValueError(f"{name}: floor {floor} is greater than cap {cap}")


def check_within(name: str, value: float, floor: float, cap: float) -> None:
    """Raise ValueError unless floor <= value <= cap."""
    check_range(name, floor, cap)
    if not floor <= value <= cap:
        raise ValueError(f"{name}: start value {value} outside [{floor}, {cap}]")
