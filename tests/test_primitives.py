"""Tests for the shared geometry and draw-list models."""

import pytest
from pydantic import ValidationError

from models import Color, DrawCommand, Notification, NotificationKind, Point2D, Rect


class TestRect:
    """Tests for Rect."""

    def test_bounds_from_half_extents(self):
        """Min/max edges derived from center and half extents."""
        rect = Rect(x=0.5, y=-0.25, half_width=0.25, half_height=0.5)
        assert rect.min_x == pytest.approx(0.25)
        assert rect.max_x == pytest.approx(0.75)
        assert rect.min_y == pytest.approx(-0.75)
        assert rect.max_y == pytest.approx(0.25)
        assert rect.width == pytest.approx(0.5)
        assert rect.height == pytest.approx(1.0)

    def test_from_bounds(self):
        """Corner constructor produces the same rectangle."""
        rect = Rect.from_bounds(-1.0, 0.1, 1.0, 0.3)
        assert rect.x == pytest.approx(0.0)
        assert rect.y == pytest.approx(0.2)
        assert rect.half_width == pytest.approx(1.0)
        assert rect.half_height == pytest.approx(0.1)

    def test_negative_extent_rejected(self):
        """Half extents can't be negative."""
        with pytest.raises(ValidationError):
            Rect(x=0, y=0, half_width=-0.1, half_height=0.1)

    def test_degenerate_allowed(self):
        """Zero-area rectangles are valid but flagged."""
        rect = Rect(x=0, y=0, half_width=0.5, half_height=0.0)
        assert rect.is_degenerate
        assert not Rect(x=0, y=0, half_width=0.5, half_height=0.5).is_degenerate

    def test_frozen(self):
        """Rectangles are immutable."""
        rect = Rect(x=0, y=0, half_width=1, half_height=1)
        with pytest.raises(ValidationError):
            rect.x = 1.0


class TestColor:
    """Tests for Color."""

    def test_tuples(self):
        color = Color(r=10, g=20, b=30)
        assert color.as_tuple == (10, 20, 30, 255)
        assert color.as_rgb_tuple == (10, 20, 30)

    def test_out_of_range(self):
        """Components outside 0-255 are rejected."""
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)


class TestNotification:
    """Tests for Notification."""

    def test_str_is_text(self):
        note = Notification(kind=NotificationKind.LEVEL, value=3, text="Level 3")
        assert str(note) == "Level 3"

    def test_draw_command_holds_rect_and_color(self):
        command = DrawCommand(rect=Rect(x=0, y=0, half_width=1, half_height=1),
                              color=Color(r=1, g=2, b=3))
        assert command.color.as_rgb_tuple == (1, 2, 3)

    def test_point_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 3.0
