"""
Hammer - Difficulty ramp.

Every successful hit makes targets appear sooner, move faster and drain
health faster, each up to its configured limit.
"""
from dataclasses import dataclass

from games.Hammer.config import HammerConfig
from rectsim.games.difficulty import ramp_down, ramp_up


@dataclass(frozen=True)
class HammerDifficulty:
    """Current difficulty parameters."""
    spawn_delay: float    # Seconds between spawn attempts
    drain: float          # Health lost per second (and per passive contact)
    target_speed: float   # Speed of newly spawned targets

    @classmethod
    def initial(cls, config: HammerConfig) -> 'HammerDifficulty':
        """Starting difficulty of a fresh game."""
        return cls(
            spawn_delay=config.spawn_delay_start,
            drain=config.drain_start,
            target_speed=config.target_speed_start,
        )


def on_success(params: HammerDifficulty, config: HammerConfig) -> HammerDifficulty:
    """Ramp difficulty after a scored hit."""
    return HammerDifficulty(
        spawn_delay=ramp_down(params.spawn_delay, config.spawn_delay_decrease, config.min_spawn_delay),
        drain=ramp_up(params.drain, config.drain_increase, config.max_drain),
        target_speed=ramp_up(params.target_speed, config.target_speed_increase, config.max_target_speed),
    )


def on_reset(params: HammerDifficulty, config: HammerConfig) -> HammerDifficulty:
    """Difficulty for the round after a restart.

    'reset' goes back to the starting curve; 'carry' keeps the ramp
    reached so far.
    """
    if config.restart_policy == "carry":
        return params
    return HammerDifficulty.initial(config)
