"""
Base Input Source - Abstract interface for input backends.

This is a shared module used by all games.
"""
from abc import ABC, abstractmethod
from typing import List

from rectsim.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends (pygame window, scripted test input) must implement
    this interface.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass


class ScriptedInputSource(InputSource):
    """Input source fed by code instead of a device.

    Used by tests and headless runs: queued events are released on the
    next update() and handed out by poll_events().
    """

    def __init__(self) -> None:
        self._pending: List[InputEvent] = []
        self._ready: List[InputEvent] = []

    def push(self, *events: InputEvent) -> None:
        """Queue events for the next update."""
        self._pending.extend(events)

    def update(self, dt: float) -> None:
        self._ready.extend(self._pending)
        self._pending.clear()

    def poll_events(self) -> List[InputEvent]:
        events = self._ready.copy()
        self._ready.clear()
        return events
