"""
Hammer - Configuration loader with difficulty presets.

Defaults come from the environment (a `.env` file next to this module is
loaded first), are bundled into an immutable HammerConfig, and can be
replaced wholesale by a named preset or a YAML file.
"""
import math
import os
from pathlib import Path
from typing import Dict, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from rectsim.games.config_loader import load_model
from rectsim.games.difficulty import check_range, check_within
from rectsim.games.timing import DEFAULT_MAX_FRAME_TIME

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Reference display the piece size is measured against
REFERENCE_WIDTH = _get_int('HAMMER_REFERENCE_WIDTH', 640)
REFERENCE_HEIGHT = _get_int('HAMMER_REFERENCE_HEIGHT', 480)
PIECE_PIXELS = _get_float('HAMMER_PIECE_PIXELS', 25.0)

# Difficulty ramp
SPAWN_DELAY_START = _get_float('HAMMER_SPAWN_DELAY_START', 0.5)
SPAWN_DELAY_DECREASE = _get_float('HAMMER_SPAWN_DELAY_DECREASE', 0.01)
MIN_SPAWN_DELAY = _get_float('HAMMER_MIN_SPAWN_DELAY', 0.25)
DRAIN_START = _get_float('HAMMER_DRAIN_START', 0.1)
DRAIN_INCREASE = _get_float('HAMMER_DRAIN_INCREASE', 0.001)
MAX_DRAIN = _get_float('HAMMER_MAX_DRAIN', 0.3)
TARGET_SPEED_START = _get_float('HAMMER_TARGET_SPEED_START', 1.0)
TARGET_SPEED_INCREASE = _get_float('HAMMER_TARGET_SPEED_INCREASE', 0.01)
MAX_TARGET_SPEED = _get_float('HAMMER_MAX_TARGET_SPEED', 2.5)

# Health economy
MAX_HAMMER_LENGTH = _get_float('HAMMER_MAX_LENGTH', 4.0)
GAIN = _get_float('HAMMER_GAIN', 0.5)

# Spawning
MAX_TARGETS = _get_int('HAMMER_MAX_TARGETS', 25)
SPAWN_ANGLE_MIN = _get_float('HAMMER_SPAWN_ANGLE_MIN', 60.0)   # degrees
SPAWN_ANGLE_MAX = _get_float('HAMMER_SPAWN_ANGLE_MAX', 120.0)  # degrees

# Visual (RGB)
HAMMER_COLOR = (255, 255, 255)
BAND_COLOR = (0, 0, 255)
TARGET_COLOR = (255, 255, 255)


class HammerConfig(BaseModel):
    """Immutable difficulty curve and rules for one Hammer simulation.

    Every ramped parameter has a start value inside [floor, cap]; a curve
    that violates this is rejected at construction.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    reference_width: int = Field(default=REFERENCE_WIDTH, gt=0)
    reference_height: int = Field(default=REFERENCE_HEIGHT, gt=0)
    piece_pixels: float = Field(default=PIECE_PIXELS, gt=0)

    spawn_delay_start: float = Field(default=SPAWN_DELAY_START, gt=0)
    spawn_delay_decrease: float = Field(default=SPAWN_DELAY_DECREASE, ge=0)
    min_spawn_delay: float = Field(default=MIN_SPAWN_DELAY, gt=0)

    drain_start: float = Field(default=DRAIN_START, ge=0)
    drain_increase: float = Field(default=DRAIN_INCREASE, ge=0)
    max_drain: float = Field(default=MAX_DRAIN, ge=0)

    target_speed_start: float = Field(default=TARGET_SPEED_START, ge=0)
    target_speed_increase: float = Field(default=TARGET_SPEED_INCREASE, ge=0)
    max_target_speed: float = Field(default=MAX_TARGET_SPEED, ge=0)

    max_hammer_length: float = Field(default=MAX_HAMMER_LENGTH, gt=0)
    gain: float = Field(default=GAIN, ge=0)
    starting_health: Optional[float] = Field(
        default=None,
        description="Health at round start (None = max_hammer_length)",
        gt=0,
    )

    max_targets: int = Field(default=MAX_TARGETS, ge=0)
    spawn_angle_min: float = Field(default=SPAWN_ANGLE_MIN, gt=0, lt=180)
    spawn_angle_max: float = Field(default=SPAWN_ANGLE_MAX, gt=0, lt=180)

    max_frame_time: float = Field(default=DEFAULT_MAX_FRAME_TIME, gt=0)
    restart_policy: Literal["reset", "carry"] = Field(
        default="reset",
        description="'reset' restarts at the starting difficulty, 'carry' keeps the ramp",
    )
    restart_key: str = 'r'

    @model_validator(mode='after')
    def validate_ranges(self) -> 'HammerConfig':
        """Ensure every ramp starts inside its [floor, cap] range."""
        check_within('spawn_delay', self.spawn_delay_start,
                     self.min_spawn_delay, math.inf)
        check_within('drain', self.drain_start, 0.0, self.max_drain)
        check_within('target_speed', self.target_speed_start, 0.0, self.max_target_speed)
        check_range('spawn_angle', self.spawn_angle_min, self.spawn_angle_max)
        if self.target_width >= 2.0 or self.target_height >= 2.0:
            raise ValueError("piece_pixels must be smaller than the reference display")
        return self

    @property
    def target_width(self) -> float:
        """Normalized width of one target (and of one hammer unit)."""
        return self.piece_pixels / self.reference_width * 2.0

    @property
    def target_height(self) -> float:
        """Normalized height of one target (and of the hammer)."""
        return self.piece_pixels / self.reference_height * 2.0

    @property
    def initial_health(self) -> float:
        """Hammer length at round start."""
        if self.starting_health is None:
            return self.max_hammer_length
        return min(self.starting_health, self.max_hammer_length)


PRESETS: Dict[str, HammerConfig] = {
    'classic': HammerConfig(),
    'relaxed': HammerConfig(
        spawn_delay_start=0.8,
        min_spawn_delay=0.4,
        drain_start=0.05,
        max_drain=0.15,
        target_speed_start=0.7,
        max_target_speed=1.6,
        max_targets=15,
    ),
    'frantic': HammerConfig(
        spawn_delay_start=0.35,
        spawn_delay_decrease=0.015,
        min_spawn_delay=0.15,
        drain_start=0.15,
        drain_increase=0.002,
        max_drain=0.45,
        target_speed_start=1.4,
        target_speed_increase=0.02,
        max_target_speed=3.5,
    ),
}

DEFAULT_PRESET = os.getenv('HAMMER_DEFAULT_PRESET', 'classic')


def get_preset(name: str) -> HammerConfig:
    """Get preset by name, with fallback to classic."""
    return PRESETS.get(name, PRESETS['classic'])


def load_config(path: Union[str, Path], **overrides) -> HammerConfig:
    """Load a HammerConfig from a YAML file.

    Args:
        path: YAML mapping of HammerConfig field names to values
        **overrides: Values that take precedence over the file
    """
    return load_model(path, HammerConfig, **overrides)
