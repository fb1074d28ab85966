"""
rectsim - shared simulation skeleton for small real-time arcade games.

Subpackages:
- games: state machine base class, entity store, difficulty helpers,
  spawning randomness, frame timing, collision, input and rendering
- logging: per-module logger configured from the environment
"""

__version__ = "1.0.0"
