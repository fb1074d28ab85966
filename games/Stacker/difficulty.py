"""
Stacker - Difficulty ramp.

Each placed block speeds the level up. Completing a tower raises the
speed every later round starts from.
"""
from dataclasses import dataclass

from games.Stacker.config import StackerConfig
from rectsim.games.difficulty import ramp_magnitude, ramp_up


@dataclass(frozen=True)
class StackerDifficulty:
    """Current difficulty parameters."""
    level_speed: float      # Signed horizontal speed of the level
    starting_speed: float   # Speed each round starts from

    @classmethod
    def initial(cls, config: StackerConfig) -> 'StackerDifficulty':
        """Starting difficulty of a fresh game."""
        return cls(level_speed=config.starting_speed, starting_speed=config.starting_speed)


def on_success(params: StackerDifficulty, config: StackerConfig) -> StackerDifficulty:
    """Speed the level up after a placement, keeping its direction."""
    return StackerDifficulty(
        level_speed=ramp_magnitude(params.level_speed, config.speed_increment, config.max_speed),
        starting_speed=params.starting_speed,
    )


def on_reset(params: StackerDifficulty, config: StackerConfig, won: bool) -> StackerDifficulty:
    """Difficulty for the round after a restart.

    A completed tower raises the starting speed; a lost round replays at
    the same baseline.
    """
    starting_speed = params.starting_speed
    if won:
        starting_speed = ramp_up(starting_speed, config.starting_speed_increment, config.max_speed)
    return StackerDifficulty(level_speed=starting_speed, starting_speed=starting_speed)
