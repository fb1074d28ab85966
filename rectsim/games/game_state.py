"""Common GameState enum for all rectsim games.

All games report one of these states via their `state` property, and
dispatch per-state behaviour through a table keyed by every member so a
state can never silently fall through.

Usage in game_mode.py:
    from rectsim.games.game_state import GameState

    class MyGameMode(BaseGame):
        def __init__(self):
            self._state = GameState.IDLE
            self._steps = {
                GameState.IDLE: self._step_idle,
                GameState.ACTIVE: self._step_active,
                GameState.TERMINAL: self._step_terminal,
            }
"""
from enum import Enum


class GameState(Enum):
    """Standard simulation states.

    States:
        IDLE: Waiting for the player to start
        ACTIVE: Gameplay running
        TERMINAL: Round ended; needs an explicit restart input
    """
    IDLE = "idle"
    ACTIVE = "active"
    TERMINAL = "terminal"


class RoundOutcome(Enum):
    """How the current round ended (NONE while not TERMINAL)."""
    NONE = "none"
    LOSE = "lose"
    WIN = "win"
