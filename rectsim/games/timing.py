"""
Frame timing helpers.

Physics never sees more than one frame's worth of elapsed time: a stalled
frame (window drag, debugger pause) would otherwise tunnel fast targets
through collision bands or drain all health at once.
"""

DEFAULT_MAX_FRAME_TIME = 1.0 / 60.0


def clamp_elapsed(elapsed: float, max_elapsed: float = DEFAULT_MAX_FRAME_TIME) -> float:
    """Clamp a frame's elapsed time into [0, max_elapsed].

    Args:
        elapsed: Raw seconds since the previous frame
        max_elapsed: Largest step the simulation accepts

    Returns:
        Elapsed time safe to integrate with
    """
    if elapsed < 0.0:
        return 0.0
    return min(elapsed, max_elapsed)
