"""
rectsim Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: GameState / RoundOutcome enums
- entity_store: bounded entity collection with compacting removal
- difficulty: saturating ramp helpers
- rng: injectable random source
- timing: elapsed-time clamping
- config_loader: YAML + pydantic configuration loading
- physics: rectangle collision and bounds reflection
- input: abstract input events and sources
"""

from rectsim.games.game_state import GameState, RoundOutcome
from rectsim.games.base_game import BaseGame
from rectsim.games.entity_store import EntityStore
from rectsim.games.rng import RandomSource, SeededRandom
from rectsim.games.timing import DEFAULT_MAX_FRAME_TIME, clamp_elapsed

__all__ = [
    'GameState',
    'RoundOutcome',
    'BaseGame',
    'EntityStore',
    'RandomSource',
    'SeededRandom',
    'DEFAULT_MAX_FRAME_TIME',
    'clamp_elapsed',
]
