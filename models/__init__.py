"""
Unified models library for the rectsim games.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Vector2D, Color, Rect)
- Game: Draw list and notification models handed to front-ends

Usage:
    >>> from models import Rect, Color
    >>> from models.game import DrawCommand
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Color,
    Rect,
)

# ============================================================================
# Generic game models
# ============================================================================
from .game import (
    DrawCommand,
    Notification,
    NotificationKind,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Color',
    'Rect',
    'DrawCommand',
    'Notification',
    'NotificationKind',
]
