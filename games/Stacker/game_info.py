"""Stacker - Game Info for Registry.

Used by GameRegistry when the game class can't be imported directly.
"""

NAME = "Stacker"
DESCRIPTION = "Drop sliding blocks onto the tower; only the overlap survives."
VERSION = "1.0.0"
AUTHOR = "rectsim"


def get_game_mode(**kwargs):
    """Factory function to create a Stacker game instance."""
    from games.Stacker.game_mode import StackerMode
    return StackerMode(**kwargs)
