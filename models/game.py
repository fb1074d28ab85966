"""
Generic game data models shared by the simulations and their front-ends.

These are the only things a renderer or console layer ever sees: a draw
list of colored rectangles and a stream of notifications.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .primitives import Color, Rect


class NotificationKind(str, Enum):
    """What a notification reports."""
    SCORE = "score"
    LEVEL = "level"
    OUTCOME = "outcome"


class DrawCommand(BaseModel):
    """A single filled rectangle to draw this frame."""
    rect: Rect
    color: Color

    model_config = ConfigDict(frozen=True)


class Notification(BaseModel):
    """Numeric progress update for display by the UI/console layer.

    Attributes:
        kind: Which counter changed
        value: New value of that counter
        text: Human readable form ("12", "Level 3", "win")
    """
    kind: NotificationKind
    value: int
    text: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.text
