"""Tests for the difficulty ramps of both games."""

import pytest

from games.Hammer.config import HammerConfig
from games.Hammer.difficulty import HammerDifficulty
from games.Hammer.difficulty import on_reset as hammer_on_reset
from games.Hammer.difficulty import on_success as hammer_on_success
from games.Stacker.config import StackerConfig
from games.Stacker.difficulty import StackerDifficulty
from games.Stacker.difficulty import on_reset as stacker_on_reset
from games.Stacker.difficulty import on_success as stacker_on_success
from rectsim.games.difficulty import check_range, check_within, ramp_down, ramp_magnitude, ramp_up


class TestRampHelpers:
    """Tests for the saturating helpers."""

    def test_ramp_up_saturates(self):
        assert ramp_up(1.0, 0.5, 2.0) == 1.5
        assert ramp_up(1.8, 0.5, 2.0) == 2.0

    def test_ramp_down_saturates(self):
        assert ramp_down(1.0, 0.5, 0.25) == 0.5
        assert ramp_down(0.3, 0.5, 0.25) == 0.25

    def test_ramp_magnitude_keeps_sign(self):
        assert ramp_magnitude(0.5, 0.25, 2.0) == pytest.approx(0.75)
        assert ramp_magnitude(-0.5, 0.25, 2.0) == pytest.approx(-0.75)
        assert ramp_magnitude(-1.9, 0.25, 2.0) == pytest.approx(-2.0)

    def test_ramp_magnitude_zero_is_positive(self):
        assert ramp_magnitude(0.0, 0.25, 2.0) == pytest.approx(0.25)

    def test_check_range(self):
        check_range('x', 0.0, 0.0)
        with pytest.raises(ValueError):
            check_range('x', 1.0, 0.5)

    def test_check_within(self):
        check_within('x', 0.5, 0.0, 1.0)
        with pytest.raises(ValueError):
            check_within('x', 1.5, 0.0, 1.0)


class TestHammerDifficulty:
    """Tests for the Hammer ramp."""

    def test_initial(self):
        config = HammerConfig()
        params = HammerDifficulty.initial(config)
        assert params.spawn_delay == config.spawn_delay_start
        assert params.drain == config.drain_start
        assert params.target_speed == config.target_speed_start

    def test_single_success(self):
        config = HammerConfig()
        params = hammer_on_success(HammerDifficulty.initial(config), config)
        assert params.spawn_delay == pytest.approx(0.49)
        assert params.drain == pytest.approx(0.101)
        assert params.target_speed == pytest.approx(1.01)

    def test_repeated_success_respects_limits(self):
        """No number of successes pushes a parameter past its limit."""
        config = HammerConfig()
        params = HammerDifficulty.initial(config)
        for _ in range(1000):
            params = hammer_on_success(params, config)
            assert params.spawn_delay >= config.min_spawn_delay
            assert params.drain <= config.max_drain
            assert params.target_speed <= config.max_target_speed

        assert params.spawn_delay == config.min_spawn_delay
        assert params.drain == config.max_drain
        assert params.target_speed == config.max_target_speed

    def test_ramp_is_monotonic(self):
        config = HammerConfig()
        before = HammerDifficulty.initial(config)
        after = hammer_on_success(before, config)
        assert after.spawn_delay <= before.spawn_delay
        assert after.drain >= before.drain
        assert after.target_speed >= before.target_speed

    def test_reset_policy(self):
        config = HammerConfig()
        ramped = hammer_on_success(HammerDifficulty.initial(config), config)
        assert hammer_on_reset(ramped, config) == HammerDifficulty.initial(config)

    def test_carry_policy(self):
        config = HammerConfig(restart_policy="carry")
        ramped = hammer_on_success(HammerDifficulty.initial(config), config)
        assert hammer_on_reset(ramped, config) == ramped


class TestStackerDifficulty:
    """Tests for the Stacker ramp."""

    def test_success_keeps_direction(self):
        config = StackerConfig()
        left = StackerDifficulty(level_speed=-0.6, starting_speed=0.6)
        assert stacker_on_success(left, config).level_speed == pytest.approx(-0.65)

        right = StackerDifficulty(level_speed=0.6, starting_speed=0.6)
        assert stacker_on_success(right, config).level_speed == pytest.approx(0.65)

    def test_success_capped(self):
        config = StackerConfig()
        params = StackerDifficulty(level_speed=-2.99, starting_speed=0.6)
        for _ in range(10):
            params = stacker_on_success(params, config)
        assert params.level_speed == pytest.approx(-config.max_speed)
        assert params.starting_speed == 0.6

    def test_reset_after_win_raises_baseline(self):
        config = StackerConfig()
        params = StackerDifficulty(level_speed=-1.2, starting_speed=0.6)
        reset = stacker_on_reset(params, config, won=True)
        assert reset.starting_speed == pytest.approx(0.7)
        assert reset.level_speed == pytest.approx(0.7)

    def test_reset_after_loss_keeps_baseline(self):
        config = StackerConfig()
        params = StackerDifficulty(level_speed=-1.2, starting_speed=0.6)
        reset = stacker_on_reset(params, config, won=False)
        assert reset.starting_speed == pytest.approx(0.6)
        assert reset.level_speed == pytest.approx(0.6)

    def test_baseline_capped(self):
        config = StackerConfig(starting_speed=2.95)
        params = StackerDifficulty.initial(config)
        reset = stacker_on_reset(params, config, won=True)
        assert reset.starting_speed == config.max_speed
