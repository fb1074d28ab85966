"""
Input Event - Represents a single abstract input action.

This is a shared module used by all games. Events are produced by an
input source (pygame, a test script) and consumed by BaseGame.handle_input.
Positions are already in normalized coordinates.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from models import Vector2D


class InputEventType(Enum):
    """Kinds of abstract input."""
    POINTER_MOVE = "pointer_move"
    POINTER_DOWN = "pointer_down"
    KEY_DOWN = "key_down"
    QUIT = "quit"


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Attributes:
        event_type: What happened
        position: Pointer position (POINTER_MOVE, and POINTER_DOWN when known)
        button: Pointer button number (POINTER_DOWN)
        key: Lower-case key name, e.g. "r" or "escape" (KEY_DOWN)
        timestamp: Time when the event occurred (seconds, monotonic clock)
    """
    event_type: InputEventType
    position: Optional[Vector2D] = None
    button: Optional[int] = None
    key: Optional[str] = None
    timestamp: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @field_validator('key')
    @classmethod
    def normalize_key(cls, v: Optional[str]) -> Optional[str]:
        """Key names are compared case-insensitively."""
        return v.lower() if v is not None else None

    @classmethod
    def pointer_move(cls, x: float, y: float, timestamp: float = 0.0) -> 'InputEvent':
        return cls(event_type=InputEventType.POINTER_MOVE,
                   position=Vector2D(x=x, y=y), timestamp=timestamp)

    @classmethod
    def pointer_down(
        cls,
        button: int = 1,
        x: Optional[float] = None,
        y: Optional[float] = None,
        timestamp: float = 0.0,
    ) -> 'InputEvent':
        position = Vector2D(x=x, y=y) if x is not None and y is not None else None
        return cls(event_type=InputEventType.POINTER_DOWN, button=button,
                   position=position, timestamp=timestamp)

    @classmethod
    def key_down(cls, key: str, timestamp: float = 0.0) -> 'InputEvent':
        return cls(event_type=InputEventType.KEY_DOWN, key=key, timestamp=timestamp)

    @classmethod
    def quit_requested(cls, timestamp: float = 0.0) -> 'InputEvent':
        return cls(event_type=InputEventType.QUIT, timestamp=timestamp)

    @property
    def is_quit(self) -> bool:
        return self.event_type == InputEventType.QUIT

    def is_key(self, key: str) -> bool:
        """True for a KEY_DOWN of `key` (case-insensitive)."""
        return self.event_type == InputEventType.KEY_DOWN and self.key == key.lower()

    def __str__(self) -> str:
        """String representation for debugging."""
        detail = ""
        if self.position is not None:
            detail = f" pos=({self.position.x:.3f}, {self.position.y:.3f})"
        if self.button is not None:
            detail += f" button={self.button}"
        if self.key is not None:
            detail += f" key={self.key}"
        return f"InputEvent({self.event_type.value}{detail}, t={self.timestamp:.3f})"
