"""
Stacker Game Mode

Stacking game: a level block slides left and right above the tower. Each
click drops it; only the part resting on the block below survives, so
the tower narrows as it grows. Missing the top block ends the round;
reaching the configured height completes the tower.
"""
from pathlib import Path
from typing import List, Optional, Union

from games.Stacker import config as stacker_config
from games.Stacker.config import PRESETS, StackerConfig, get_preset, load_config
from games.Stacker.difficulty import StackerDifficulty, on_reset, on_success
from games.Stacker.tower import Block, place_block
from models import Color, DrawCommand, NotificationKind, Rect
from rectsim.games.base_game import BaseGame
from rectsim.games.entity_store import EntityStore
from rectsim.games.game_state import GameState, RoundOutcome
from rectsim.games.input.input_event import InputEvent, InputEventType
from rectsim.games.physics.collision import mirror_into_range
from rectsim.games.rng import RandomSource
from rectsim.logging import get_logger

log = get_logger('stacker')


def _color(rgb) -> Color:
    r, g, b = rgb
    return Color(r=r, g=g, b=b)


class StackerMode(BaseGame):
    """Stacker game mode - build a tower one sliding block at a time."""

    # Game metadata
    NAME = "Stacker"
    DESCRIPTION = "Drop sliding blocks onto the tower; only the overlap survives."
    VERSION = "1.0.0"
    AUTHOR = "rectsim"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--preset',
            'type': str,
            'default': 'classic',
            'choices': list(PRESETS.keys()),
            'help': 'Tower and speed preset'
        },
        {
            'name': '--max-level',
            'type': int,
            'default': None,
            'help': 'Blocks needed to complete the tower'
        },
    ]

    def __init__(
        self,
        config: Optional[StackerConfig] = None,
        preset: str = 'classic',
        config_file: Optional[Union[str, Path]] = None,
        max_level: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        **kwargs,
    ):
        """Initialize Stacker game.

        Args:
            config: Explicit configuration (wins over preset/config_file)
            preset: Named preset
            config_file: YAML file with StackerConfig fields
            max_level: Override of config.max_level
            rng: Random source (unused by the rules, kept for the shared interface)
            seed: Seed used when no rng is given
        """
        if config is None:
            overrides = {}
            if max_level is not None:
                overrides['max_level'] = max_level
            if config_file is not None:
                config = load_config(config_file, **overrides)
            else:
                config = get_preset(preset)
                if overrides:
                    config = StackerConfig.model_validate({**config.model_dump(), **overrides})

        self._config = config

        super().__init__(
            max_frame_time=config.max_frame_time,
            restart_key=config.restart_key,
            rng=rng,
            seed=seed,
            **kwargs,
        )

        self._difficulty = StackerDifficulty.initial(config)
        self._tower: EntityStore[Block] = EntityStore(capacity=config.max_level)
        self._towers_completed = 0

        self._level_x = 0.0
        self._level_width = config.level_width_start

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def config(self) -> StackerConfig:
        return self._config

    @property
    def difficulty(self) -> StackerDifficulty:
        return self._difficulty

    @property
    def tower(self) -> EntityStore[Block]:
        """Placed blocks, bottom first."""
        return self._tower

    @property
    def towers_completed(self) -> int:
        return self._towers_completed

    @property
    def level_x(self) -> float:
        return self._level_x

    @property
    def level_y(self) -> float:
        """Centre of the row the level will be dropped into."""
        return self._row_y(len(self._tower))

    @property
    def level_width(self) -> float:
        return self._level_width

    def level_rect(self) -> Rect:
        return Rect(
            x=self._level_x,
            y=self.level_y,
            half_width=0.5 * self._level_width,
            half_height=0.5 * self._config.row_height,
        )

    def get_score(self) -> int:
        """Blocks in the tower."""
        return len(self._tower)

    def _row_y(self, row: int) -> float:
        row_height = self._config.row_height
        return -1.0 + 0.5 * row_height + row * row_height

    # =========================================================================
    # Input
    # =========================================================================

    def _handle_idle_event(self, event: InputEvent) -> None:
        """First click starts the level moving without placing."""
        if event.event_type == InputEventType.POINTER_DOWN:
            self._set_state(GameState.ACTIVE)

    def _handle_active_event(self, event: InputEvent) -> None:
        if event.event_type == InputEventType.POINTER_DOWN:
            self._place()

    # =========================================================================
    # Simulation
    # =========================================================================

    def _step_active(self, elapsed: float) -> None:
        """Slide the level, mirroring it back off the screen edges."""
        half = 0.5 * self._level_width
        x = self._level_x + self._difficulty.level_speed * elapsed
        self._level_x, flipped = mirror_into_range(x, -1.0 + half, 1.0 - half)
        if flipped:
            self._difficulty = StackerDifficulty(
                level_speed=-self._difficulty.level_speed,
                starting_speed=self._difficulty.starting_speed,
            )

    def _place(self) -> None:
        """Drop the level onto the tower."""
        config = self._config
        block = place_block(
            x=self._level_x,
            width=self._level_width,
            y=self.level_y,
            height=config.row_height,
            top=self._tower.top(),
            min_width=config.min_block_width,
        )
        if block is None:
            log.info("missed the tower at level %d", len(self._tower) + 1)
            self._set_state(GameState.TERMINAL, RoundOutcome.LOSE)
            self._notify(NotificationKind.OUTCOME, len(self._tower), "tower collapsed")
            return

        self._tower.append(block)
        level = len(self._tower)
        self._notify(NotificationKind.LEVEL, level, f"Level {level}")

        if level >= config.max_level:
            self._towers_completed += 1
            self._set_state(GameState.TERMINAL, RoundOutcome.WIN)
            self._notify(NotificationKind.OUTCOME, self._towers_completed, "tower complete")
            return

        self._difficulty = on_success(self._difficulty, config)
        self._level_width = block.width
        log.debug("placed block %d width=%.3f speed=%.3f",
                  level, block.width, self._difficulty.level_speed)

    def _reset_round(self) -> None:
        won = self._outcome == RoundOutcome.WIN
        self._difficulty = on_reset(self._difficulty, self._config, won)
        self._tower.clear()
        self._level_x = 0.0
        self._level_width = self._config.level_width_start
        log.info("round reset (won=%s), starting speed %.3f", won, self._difficulty.starting_speed)

    # =========================================================================
    # Output
    # =========================================================================

    def draw_list(self) -> List[DrawCommand]:
        """Tower blocks, then the level indicator."""
        won = self._state == GameState.TERMINAL and self._outcome == RoundOutcome.WIN
        block_color = _color(stacker_config.COMPLETE_COLOR if won else stacker_config.BLOCK_COLOR)
        commands = [DrawCommand(rect=block.rect, color=block_color) for block in self._tower]

        if self._state == GameState.TERMINAL:
            level_color = _color(stacker_config.LEVEL_TERMINAL_COLOR)
        else:
            level_color = _color(stacker_config.LEVEL_ACTIVE_COLOR)
        commands.append(DrawCommand(rect=self.level_rect(), color=level_color))
        return commands
