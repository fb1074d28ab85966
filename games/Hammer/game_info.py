"""Hammer - Game Info for Registry.

Used by GameRegistry when the game class can't be imported directly.
"""

NAME = "Hammer"
DESCRIPTION = "Smash targets crossing the center band before your hammer wears away."
VERSION = "1.0.0"
AUTHOR = "rectsim"


def get_game_mode(**kwargs):
    """Factory function to create a Hammer game instance.

    Args:
        **kwargs: Game configuration options (from CLI)

    Returns:
        HammerMode instance
    """
    from games.Hammer.game_mode import HammerMode
    return HammerMode(**kwargs)
