"""Input sources: abstract base, scripted input and the pygame window."""
from rectsim.games.input.sources.base import InputSource, ScriptedInputSource

__all__ = ['InputSource', 'ScriptedInputSource']
