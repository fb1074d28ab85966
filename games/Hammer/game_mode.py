"""
Hammer Game Mode

Reflex game: targets enter from the top and bottom edges and bounce around
the screen. The player slides a hammer along the horizontal center band.
Targets found inside the band at the start of a frame are smashed for
points and health; targets that drift into the band while moving hurt.
Health drains continuously and doubles as the hammer's length.
"""
from pathlib import Path
from typing import List, Optional, Union

from games.Hammer import config as hammer_config
from games.Hammer.config import HammerConfig, PRESETS, get_preset, load_config
from games.Hammer.difficulty import HammerDifficulty, on_reset, on_success
from games.Hammer.spawner import TargetSpawner
from games.Hammer.target import MovingTarget
from models import Color, DrawCommand, NotificationKind, Rect
from rectsim.games.base_game import BaseGame
from rectsim.games.entity_store import EntityStore
from rectsim.games.game_state import GameState, RoundOutcome
from rectsim.games.input.input_event import InputEvent, InputEventType
from rectsim.games.physics.collision import overlaps, reflect_if_out_of_bounds
from rectsim.games.rng import RandomSource
from rectsim.logging import get_logger

log = get_logger('hammer')


class HammerMode(BaseGame):
    """Hammer game mode - keep the hammer alive by smashing targets.

    Per active frame:
    1. Clamp the hammer inside the screen for its current length
    2. Drain health by elapsed * drain
    3. Smash targets inside the hit-box (+gain, +1 point, ramp difficulty)
    4. Run the spawner
    5. Move targets, bounce them off the edges, and penalize any that
       enter the hit-box while moving (-drain each)
    6. Hammer length = min(health, max); zero length ends the round
    """

    # Game metadata
    NAME = "Hammer"
    DESCRIPTION = "Smash targets crossing the center band before your hammer wears away."
    VERSION = "1.0.0"
    AUTHOR = "rectsim"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--preset',
            'type': str,
            'default': 'classic',
            'choices': list(PRESETS.keys()),
            'help': 'Difficulty curve preset'
        },
        {
            'name': '--restart-policy',
            'type': str,
            'default': None,
            'choices': ['reset', 'carry'],
            'help': 'Restart at starting difficulty (reset) or keep the ramp (carry)'
        },
    ]

    def __init__(
        self,
        config: Optional[HammerConfig] = None,
        preset: str = 'classic',
        config_file: Optional[Union[str, Path]] = None,
        restart_policy: Optional[str] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        **kwargs,
    ):
        """Initialize Hammer game.

        Args:
            config: Explicit configuration (wins over preset/config_file)
            preset: Named difficulty preset
            config_file: YAML file with HammerConfig fields
            restart_policy: Override of config.restart_policy
            rng: Random source for spawning
            seed: Seed used when no rng is given
        """
        if config is None:
            overrides = {}
            if restart_policy is not None:
                overrides['restart_policy'] = restart_policy
            if config_file is not None:
                config = load_config(config_file, **overrides)
            else:
                config = get_preset(preset)
                if overrides:
                    config = HammerConfig.model_validate({**config.model_dump(), **overrides})

        self._config = config

        super().__init__(
            max_frame_time=config.max_frame_time,
            restart_key=config.restart_key,
            rng=rng,
            seed=seed,
            **kwargs,
        )

        self._difficulty = HammerDifficulty.initial(config)
        self._targets: EntityStore[MovingTarget] = EntityStore(capacity=config.max_targets)
        self._spawner = TargetSpawner(config, self._rng)

        self._hammer_x = 0.0
        self._hammer_length = config.initial_health
        self._score = 0

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def config(self) -> HammerConfig:
        return self._config

    @property
    def difficulty(self) -> HammerDifficulty:
        """Current difficulty parameters."""
        return self._difficulty

    @property
    def targets(self) -> EntityStore[MovingTarget]:
        """Live targets."""
        return self._targets

    @property
    def spawner(self) -> TargetSpawner:
        return self._spawner

    @property
    def hammer_x(self) -> float:
        return self._hammer_x

    @property
    def hammer_length(self) -> float:
        """Visible hammer length, which is also the player's health."""
        return self._hammer_length

    @property
    def health(self) -> float:
        return self._hammer_length

    @property
    def health_fraction(self) -> float:
        """Health relative to the maximum, in [0, 1]."""
        return self._hammer_length / self._config.max_hammer_length

    def get_score(self) -> int:
        """Get current score."""
        return self._score

    def hammer_hit_box(self) -> Rect:
        """Band in which targets are smashed (or hurt the player).

        As wide as the hammer and twice a target's height, centered on
        the hammer.
        """
        return Rect(
            x=self._hammer_x,
            y=0.0,
            half_width=0.5 * self._hammer_length * self._config.target_width,
            half_height=self._config.target_height,
        )

    # =========================================================================
    # Input
    # =========================================================================

    def _handle_idle_event(self, event: InputEvent) -> None:
        """First click starts the round; pointer moves are ignored."""
        if event.event_type == InputEventType.POINTER_DOWN:
            self._set_state(GameState.ACTIVE)

    def _handle_active_event(self, event: InputEvent) -> None:
        """Pointer movement steers the hammer."""
        if event.event_type == InputEventType.POINTER_MOVE and event.position is not None:
            self._hammer_x = event.position.x

    # =========================================================================
    # Simulation
    # =========================================================================

    def _step_active(self, elapsed: float) -> None:
        config = self._config

        # Keep the whole hammer on screen
        half_span = 0.5 * self._hammer_length * config.target_width
        if self._hammer_x > 1.0 - half_span:
            self._hammer_x = 1.0 - half_span
        elif self._hammer_x < -1.0 + half_span:
            self._hammer_x = -1.0 + half_span

        health = self._hammer_length - elapsed * self._difficulty.drain
        hit_box = self.hammer_hit_box()

        # Smash: targets already inside the band score
        smashed = self._targets.retain_if(lambda t: not overlaps(t.hit_rect, hit_box))
        for _ in smashed:
            health += config.gain
            self._difficulty = on_success(self._difficulty, config)
            self._score += 1
            self._notify(NotificationKind.SCORE, self._score)
        if smashed:
            log.debug("smashed %d target(s), score=%d, difficulty=%s",
                      len(smashed), self._score, self._difficulty)

        self._spawner.update(elapsed, self._difficulty, self._targets)

        # Targets that move into the band hurt instead
        self._move_targets(elapsed)
        contacts = self._targets.retain_if(lambda t: not overlaps(t.hit_rect, hit_box))
        for _ in contacts:
            health -= self._difficulty.drain
        if contacts:
            log.debug("%d target(s) hit the hammer, health=%.3f", len(contacts), health)

        self._hammer_length = min(health, config.max_hammer_length)
        if self._hammer_length <= 0.0:
            self._hammer_length = 0.0
            self._set_state(GameState.TERMINAL, RoundOutcome.LOSE)
            self._notify(NotificationKind.OUTCOME, self._score, "game over")

    def _step_terminal(self, elapsed: float) -> None:
        """Targets keep bouncing after the round ends."""
        self._move_targets(elapsed)

    def _move_targets(self, elapsed: float) -> None:
        """Integrate every target and bounce it off the screen edges."""
        half_w = 0.5 * self._config.target_width
        half_h = 0.5 * self._config.target_height
        for target in self._targets:
            target.integrate(elapsed)
            reflect_if_out_of_bounds(target, "x", -1.0 + half_w, 1.0 - half_w)
            reflect_if_out_of_bounds(target, "y", -1.0 + half_h, 1.0 - half_h)

    def _reset_round(self) -> None:
        """Clear the board and restart the health economy."""
        self._difficulty = on_reset(self._difficulty, self._config)
        cleared = self._targets.clear()
        self._spawner.reset()
        self._hammer_length = self._config.initial_health
        self._score = 0
        log.info("round reset (%s policy), cleared %d target(s)",
                 self._config.restart_policy, cleared)

    # =========================================================================
    # Output
    # =========================================================================

    def draw_list(self) -> List[DrawCommand]:
        """Hammer, boundary bands and targets."""
        tw = self._config.target_width
        th = self._config.target_height
        commands: List[DrawCommand] = []

        if self._hammer_length > 1.0:
            hammer = Rect(x=self._hammer_x, y=0.0,
                          half_width=0.5 * self._hammer_length * tw, half_height=0.5 * th)
            r, g, b = hammer_config.HAMMER_COLOR
            color = Color(r=r, g=g, b=b)
        else:
            # Short hammer fades to red
            level = int(255 * max(0.0, self._hammer_length))
            hammer = Rect(x=self._hammer_x, y=0.0, half_width=0.5 * tw, half_height=0.5 * th)
            color = Color(r=255, g=level, b=level)
        commands.append(DrawCommand(rect=hammer, color=color))

        r, g, b = hammer_config.BAND_COLOR
        band_color = Color(r=r, g=g, b=b)
        commands.append(DrawCommand(rect=Rect.from_bounds(-1.0, 0.5 * th, 1.0, 0.6 * th),
                                    color=band_color))
        commands.append(DrawCommand(rect=Rect.from_bounds(-1.0, -0.6 * th, 1.0, -0.5 * th),
                                    color=band_color))

        r, g, b = hammer_config.TARGET_COLOR
        target_color = Color(r=r, g=g, b=b)
        for target in self._targets:
            commands.append(DrawCommand(rect=target.rect, color=target_color))

        return commands
