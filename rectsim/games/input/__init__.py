"""
Common input handling for rectsim games.

Games consume abstract InputEvents; the pygame adapter lives in
rectsim.games.input.sources.pygame_events so headless code never
imports pygame.
"""
from rectsim.games.input.input_event import InputEvent, InputEventType
from rectsim.games.input.sources.base import InputSource, ScriptedInputSource

__all__ = [
    'InputEvent',
    'InputEventType',
    'InputSource',
    'ScriptedInputSource',
]
