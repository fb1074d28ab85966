"""Tests for rectangle overlap and boundary reflection."""

import pytest

from games.Hammer.target import MovingTarget
from models import Rect
from rectsim.games.physics import (
    mirror_into_range,
    overlaps,
    reflect_if_out_of_bounds,
    reflect_velocity,
)


class TestOverlaps:
    """Tests for strict rectangle overlap."""

    def test_overlapping(self):
        a = Rect(x=0, y=0, half_width=0.5, half_height=0.5)
        b = Rect(x=0.5, y=0.5, half_width=0.5, half_height=0.5)
        assert overlaps(a, b)
        assert overlaps(b, a)

    def test_touching_edges_do_not_overlap(self):
        """Shared edges are not an overlap on either axis."""
        a = Rect(x=0, y=0, half_width=0.5, half_height=0.5)
        right = Rect(x=1.0, y=0, half_width=0.5, half_height=0.5)
        above = Rect(x=0, y=1.0, half_width=0.5, half_height=0.5)
        assert not overlaps(a, right)
        assert not overlaps(a, above)

    def test_separated(self):
        a = Rect(x=-0.8, y=0, half_width=0.1, half_height=0.1)
        b = Rect(x=0.8, y=0, half_width=0.1, half_height=0.1)
        assert not overlaps(a, b)

    def test_degenerate_segment_inside_band(self):
        """A zero-height segment strictly inside a band overlaps it."""
        band = Rect(x=0, y=0, half_width=0.2, half_height=0.1)
        segment = Rect(x=0.1, y=0.05, half_width=0.05, half_height=0.0)
        assert overlaps(segment, band)

    def test_degenerate_segment_on_band_edge(self):
        """A segment lying exactly on the band edge does not overlap."""
        band = Rect(x=0, y=0, half_width=0.2, half_height=0.1)
        segment = Rect(x=0.0, y=0.1, half_width=0.05, half_height=0.0)
        assert not overlaps(segment, band)


class TestReflectVelocity:
    """Tests for velocity-only bounce."""

    def test_inside_unchanged(self):
        assert reflect_velocity(0.0, 0.5, -1.0, 1.0) == 0.5
        assert reflect_velocity(0.0, -0.5, -1.0, 1.0) == -0.5

    def test_past_upper_points_down(self):
        assert reflect_velocity(1.2, 0.5, -1.0, 1.0) == -0.5
        # Already heading back: stays heading back
        assert reflect_velocity(1.2, -0.5, -1.0, 1.0) == -0.5

    def test_past_lower_points_up(self):
        assert reflect_velocity(-1.2, -0.5, -1.0, 1.0) == 0.5

    def test_on_bound_counts_as_out(self):
        assert reflect_velocity(1.0, 0.5, -1.0, 1.0) == -0.5

    def test_entity_pulled_back_next_frame(self):
        """Position may overshoot by one frame, then moves back inside."""
        target = MovingTarget(x=0.95, y=0.0, vx=1.0, vy=0.0, half_width=0.05, half_height=0.05)
        target.integrate(0.1)
        reflect_if_out_of_bounds(target, "x", -0.95, 0.95)
        assert target.vx == -1.0
        assert target.x == pytest.approx(1.05)

        target.integrate(0.1)
        assert target.x == pytest.approx(0.95)

    def test_entity_axis_y(self):
        target = MovingTarget(x=0.0, y=-1.0, vx=0.0, vy=-2.0, half_width=0.05, half_height=0.05)
        assert reflect_if_out_of_bounds(target, "y", -0.95, 0.95) == 2.0
        assert target.vy == 2.0
        assert target.vx == 0.0


class TestMirrorIntoRange:
    """Tests for mirror reflection of positions."""

    def test_inside_unchanged(self):
        assert mirror_into_range(0.2, -0.7, 0.7) == (0.2, False)

    def test_single_reflection(self):
        position, flipped = mirror_into_range(1.0, -0.7, 0.7)
        assert position == pytest.approx(0.4)
        assert flipped

    def test_lower_reflection(self):
        position, flipped = mirror_into_range(-0.9, -0.7, 0.7)
        assert position == pytest.approx(-0.5)
        assert flipped

    def test_double_reflection_keeps_direction(self):
        """Crossing both bounds in one step is an even number of flips."""
        position, flipped = mirror_into_range(2.0, -0.5, 0.5)
        # 2.0 -> -1.0 -> 0.0
        assert position == pytest.approx(0.0)
        assert not flipped

    @pytest.mark.parametrize("position", [-5.3, -1.01, 0.69, 0.71, 2.2, 7.7])
    def test_result_always_in_range(self, position):
        result, _ = mirror_into_range(position, -0.7, 0.7)
        assert -0.7 <= result <= 0.7

    def test_degenerate_range(self):
        assert mirror_into_range(0.3, 0.5, 0.5) == (0.5, False)
