"""
Stacker - Configuration loader with difficulty presets.

Defaults come from the environment (a `.env` file next to this module is
loaded first), are bundled into an immutable StackerConfig, and can be
replaced by a named preset or a YAML file.
"""
import os
from pathlib import Path
from typing import Dict, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from rectsim.games.config_loader import load_model
from rectsim.games.difficulty import check_within
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


# Display
SCREEN_WIDTH = _get_int('STACKER_SCREEN_WIDTH', 640)
SCREEN_HEIGHT = _get_int('STACKER_SCREEN_HEIGHT', 480)

# Tower geometry (normalized units)
ROW_HEIGHT = _get_float('STACKER_ROW_HEIGHT', 0.125)
LEVEL_WIDTH_START = _get_float('STACKER_LEVEL_WIDTH_START', 0.6)
MIN_BLOCK_WIDTH = _get_float('STACKER_MIN_BLOCK_WIDTH', 0.05)
MAX_LEVEL = _get_int('STACKER_MAX_LEVEL', 15)

# Level speed ramp (normalized units/second)
STARTING_SPEED = _get_float('STACKER_STARTING_SPEED', 0.6)
SPEED_INCREMENT = _get_float('STACKER_SPEED_INCREMENT', 0.05)
STARTING_SPEED_INCREMENT = _get_float('STACKER_STARTING_SPEED_INCREMENT', 0.1)
MAX_SPEED = _get_float('STACKER_MAX_SPEED', 3.0)

# Visual (RGB)
BLOCK_COLOR = (100, 150, 255)
COMPLETE_COLOR = (0, 255, 0)
LEVEL_ACTIVE_COLOR = (255, 255, 255)
LEVEL_TERMINAL_COLOR = (255, 0, 0)


class StackerConfig(BaseModel):
    """Immutable tower geometry and speed curve for one Stacker simulation."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    row_height: float = Field(default=ROW_HEIGHT, gt=0, le=2)
    level_width_start: float = Field(default=LEVEL_WIDTH_START, gt=0, le=2)
    min_block_width: float = Field(default=MIN_BLOCK_WIDTH, gt=0)
    max_level: int = Field(default=MAX_LEVEL, ge=1, description="Blocks in a complete tower")

    starting_speed: float = Field(default=STARTING_SPEED, ge=0)
    speed_increment: float = Field(default=SPEED_INCREMENT, ge=0)
    starting_speed_increment: float = Field(default=STARTING_SPEED_INCREMENT, ge=0)
    max_speed: float = Field(default=MAX_SPEED, ge=0)

    max_frame_time: float = Field(default=DEFAULT_MAX_FRAME_TIME, gt=0)
    restart_key: str = 'r'

    @model_validator(mode='after')
    def validate_ranges(self) -> 'StackerConfig':
        """Ensure the speed curve is consistent and the tower fits on screen."""
        check_within('block_width', self.level_width_start, self.min_block_width, 2.0)
        check_within('level_speed', self.starting_speed, 0.0, self.max_speed)
        if self.max_level * self.row_height > 2.0:
            raise ValueError(
                f"a tower of {self.max_level} rows of height {self.row_height} does not fit on screen"
            )
        return self


PRESETS: Dict[str, StackerConfig] = {
    'classic': StackerConfig(),
    'gentle': StackerConfig(
        level_width_start=0.9,
        starting_speed=0.4,
        speed_increment=0.03,
        max_level=10,
        row_height=0.2,
    ),
    'skyscraper': StackerConfig(
        row_height=0.08,
        level_width_start=0.5,
        min_block_width=0.03,
        max_level=24,
        starting_speed=0.8,
        speed_increment=0.06,
        max_speed=4.0,
    ),
}

DEFAULT_PRESET = os.getenv('STACKER_DEFAULT_PRESET', 'classic')


def get_preset(name: str) -> StackerConfig:
    """Get preset by name, with fallback to classic."""
    return PRESETS.get(name, PRESETS['classic'])


def load_config(path: Union[str, Path], **overrides) -> StackerConfig:
    """Load a StackerConfig from a YAML file.

    Args:
        path: YAML mapping of StackerConfig field names to values
        **overrides: Values that take precedence over the file
    """
    return load_model(path, StackerConfig, **overrides)
