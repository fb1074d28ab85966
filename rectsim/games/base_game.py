"""Base class for all rectsim games.

All games inherit from BaseGame to get a consistent interface with
dev_game.py, the standalone launchers and the game registry.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin
architecture.

The simulation itself is a synchronous function of (previous state,
elapsed time, input events). BaseGame owns the finite state, clamps the
elapsed time and dispatches per-state behaviour through tables keyed by
every GameState member; subclasses fill in the per-state steps.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional

import pygame

from models import DrawCommand, Notification, NotificationKind
from rectsim.games.game_state import GameState, RoundOutcome
from rectsim.games.input.input_event import InputEvent
from rectsim.games.renderer import render_draw_list
from rectsim.games.rng import RandomSource, SeededRandom
from rectsim.games.timing import DEFAULT_MAX_FRAME_TIME, clamp_elapsed
from rectsim.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all rectsim games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - get_score() -> int: Return current score/progress
        - draw_list() -> List[DrawCommand]: Describe the frame
        - _reset_round(): Re-initialize entities and difficulty on restart
        - _step_active(elapsed), _handle_active_event(event)

    Optional overrides (default: do nothing):
        - _step_idle(elapsed), _step_terminal(elapsed)
        - _handle_idle_event(event), _handle_terminal_event(event)
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to every game; game-specific entries take precedence
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible spawns'
        },
        {
            'name': '--config-file',
            'type': str,
            'default': None,
            'help': 'YAML file overriding the difficulty configuration'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in list(cls.ARGUMENTS) + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(
        self,
        max_frame_time: float = DEFAULT_MAX_FRAME_TIME,
        restart_key: str = 'r',
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        **kwargs,
    ):
        """Initialize base game.

        Args:
            max_frame_time: Largest elapsed time one update may integrate
            restart_key: Key that restarts a finished round
            rng: Random source for spawning (default: SeededRandom(seed))
            seed: Seed used when no rng is given
        """
        if kwargs:
            log.debug("%s ignoring options: %s", self.NAME, sorted(kwargs))

        self._max_frame_time = max_frame_time
        self._restart_key = restart_key
        self._rng: RandomSource = rng if rng is not None else SeededRandom(seed)

        self._state = GameState.IDLE
        self._outcome = RoundOutcome.NONE
        self._notifications: List[Notification] = []

        self._steps: Dict[GameState, Callable[[float], None]] = {
            GameState.IDLE: self._step_idle,
            GameState.ACTIVE: self._step_active,
            GameState.TERMINAL: self._step_terminal,
        }
        self._event_handlers: Dict[GameState, Callable[[InputEvent], None]] = {
            GameState.IDLE: self._handle_idle_event,
            GameState.ACTIVE: self._handle_active_event,
            GameState.TERMINAL: self._handle_terminal_event,
        }

    @property
    def state(self) -> GameState:
        """Current simulation state."""
        return self._state

    @property
    def outcome(self) -> RoundOutcome:
        """How the round ended (NONE unless TERMINAL)."""
        return self._outcome

    @property
    def rng(self) -> RandomSource:
        """Random source used for spawning."""
        return self._rng

    @property
    def max_frame_time(self) -> float:
        return self._max_frame_time

    @abstractmethod
    def get_score(self) -> int:
        """Get current score/progress counter."""
        pass

    @abstractmethod
    def draw_list(self) -> List[DrawCommand]:
        """Describe the current frame for the renderer."""
        pass

    # =========================================================================
    # Frame interface
    # =========================================================================

    def handle_input(self, events: Iterable[InputEvent]) -> None:
        """Process input events.

        Quit events are left to the launcher; the restart key is handled
        here for every game; everything else goes to the handler for the
        current state.

        Args:
            events: InputEvents collected since the last frame
        """
        for event in events:
            if event.is_quit:
                continue
            if event.is_key(self._restart_key):
                self.restart()
                continue
            self._event_handlers[self._state](event)

    def update(self, dt: float) -> None:
        """Advance the simulation by one frame.

        Args:
            dt: Seconds since the previous frame (clamped to max_frame_time)
        """
        elapsed = clamp_elapsed(dt, self._max_frame_time)
        self._steps[self._state](elapsed)

    def render(self, screen: pygame.Surface) -> None:
        """Draw the current frame onto a pygame surface."""
        render_draw_list(screen, self.draw_list())

    def restart(self) -> bool:
        """Start a new round from TERMINAL.

        Ignored in any other state, so a repeated restart is a no-op
        until the round ends again.

        Returns:
            True if a new round was started
        """
        if self._state != GameState.TERMINAL:
            log.debug("%s: restart ignored in state %s", self.NAME, self._state.value)
            return False

        self._reset_round()
        self._outcome = RoundOutcome.NONE
        self._set_state(GameState.ACTIVE)
        return True

    def pop_notifications(self) -> List[Notification]:
        """Return and clear notifications emitted since the last call."""
        notifications = self._notifications
        self._notifications = []
        return notifications

    # =========================================================================
    # Subclass hooks
    # =========================================================================

    @abstractmethod
    def _reset_round(self) -> None:
        """Re-initialize difficulty, entities and counters for a new round."""
        pass

    def _step_idle(self, elapsed: float) -> None:
        pass

    @abstractmethod
    def _step_active(self, elapsed: float) -> None:
        pass

    def _step_terminal(self, elapsed: float) -> None:
        pass

    def _handle_idle_event(self, event: InputEvent) -> None:
        pass

    @abstractmethod
    def _handle_active_event(self, event: InputEvent) -> None:
        pass

    def _handle_terminal_event(self, event: InputEvent) -> None:
        pass

    # =========================================================================
    # Helpers
    # =========================================================================

    def _set_state(self, state: GameState, outcome: RoundOutcome = RoundOutcome.NONE) -> None:
        """Transition to `state`, logging the change."""
        if state == GameState.TERMINAL:
            self._outcome = outcome
        log.info("%s: %s -> %s%s", self.NAME, self._state.value, state.value,
                 f" ({outcome.value})" if state == GameState.TERMINAL else "")
        self._state = state

    def _notify(self, kind: NotificationKind, value: int, text: Optional[str] = None) -> None:
        """Queue a progress notification for the UI layer."""
        self._notifications.append(
            Notification(kind=kind, value=value, text=text if text is not None else str(value))
        )
