"""
Pygame Input Source - Window input for standalone play.

This is a shared module used by all games. Converts pygame events into
abstract InputEvents with normalized positions.
"""
import time
from typing import List, Optional, Tuple

import pygame

from rectsim.games.input.input_event import InputEvent
from rectsim.games.input.sources.base import InputSource


def screen_to_normalized(px: float, py: float, width: int, height: int) -> Tuple[float, float]:
    """Map a pixel position to normalized [-1, 1] coordinates (+y up).

    Samples the pixel center, so pixel 0 maps slightly inside -1.
    """
    x = (px + 0.5) / width * 2.0 - 1.0
    y = 1.0 - (py + 0.5) / height * 2.0
    return x, y


def translate_event(event: pygame.event.Event, width: int, height: int) -> Optional[InputEvent]:
    """Convert one pygame event into an InputEvent.

    Args:
        event: Raw pygame event
        width: Window width in pixels
        height: Window height in pixels

    Returns:
        InputEvent, or None for events the games don't consume
    """
    now = time.monotonic()

    if event.type == pygame.QUIT:
        return InputEvent.quit_requested(timestamp=now)

    if event.type == pygame.MOUSEMOTION:
        x, y = screen_to_normalized(event.pos[0], event.pos[1], width, height)
        return InputEvent.pointer_move(x, y, timestamp=now)

    if event.type == pygame.MOUSEBUTTONDOWN:
        x, y = screen_to_normalized(event.pos[0], event.pos[1], width, height)
        return InputEvent.pointer_down(event.button, x, y, timestamp=now)

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return InputEvent.quit_requested(timestamp=now)
        return InputEvent.key_down(pygame.key.name(event.key), timestamp=now)

    return None


class PygameInputSource(InputSource):
    """Collects pygame window events as InputEvents.

    Drains the whole pygame event queue on update(); events the games
    don't consume are discarded.
    """

    def __init__(self, width: int, height: int):
        """Initialize the source.

        Args:
            width: Window width in pixels
            height: Window height in pixels
        """
        self._width = width
        self._height = height
        self._event_queue: List[InputEvent] = []

    def resize(self, width: int, height: int) -> None:
        """Track a window size change."""
        self._width = width
        self._height = height

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            translated = translate_event(event, self._width, self._height)
            if translated is not None:
                self._event_queue.append(translated)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
