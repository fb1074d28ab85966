"""Tests for the Stacker game mode."""

import pytest

from games.Stacker import config as stacker_config
from games.Stacker.config import StackerConfig
from games.Stacker.game_mode import StackerMode
from models import NotificationKind
from rectsim.games.game_state import GameState, RoundOutcome
from rectsim.games.input.input_event import InputEvent

CLICK = InputEvent.pointer_down()


def start(game):
    game.handle_input([CLICK])
    assert game.state == GameState.ACTIVE
    return game


@pytest.fixture
def game(stacker_config):
    return start(StackerMode(config=stacker_config))


class TestIdle:
    """Tests for the waiting state."""

    def test_level_static_while_idle(self, stacker_config):
        game = StackerMode(config=stacker_config)
        game.update(1.0)
        assert game.level_x == 0.0
        assert game.state == GameState.IDLE

    def test_first_click_only_starts(self, stacker_config):
        game = start(StackerMode(config=stacker_config))
        assert len(game.tower) == 0
        assert game.pop_notifications() == []


class TestMovement:
    """Tests for the sliding level."""

    def test_slides_at_level_speed(self, game):
        game.update(0.5)
        assert game.level_x == pytest.approx(0.3)

    def test_mirrors_off_edge(self):
        game = start(StackerMode(config=StackerConfig(starting_speed=1.0, max_frame_time=1.0)))

        game.update(1.0)

        # Legal range is [-0.7, 0.7] for the 0.6 wide level
        assert game.level_x == pytest.approx(0.4)
        assert game.difficulty.level_speed == pytest.approx(-1.0)

        game.update(0.5)
        assert game.level_x == pytest.approx(-0.1)

    def test_stays_in_range(self):
        game = start(StackerMode(config=StackerConfig(starting_speed=3.0, max_frame_time=1.0)))
        half = 0.5 * game.level_width
        for _ in range(20):
            game.update(0.37)
            assert -1.0 + half <= game.level_x <= 1.0 - half

    def test_pointer_moves_ignored(self, game):
        game.handle_input([InputEvent.pointer_move(0.9, 0.0)])
        assert game.level_x == 0.0


class TestPlacement:
    """Tests for dropping blocks."""

    def test_first_placement(self, game):
        """First block spans the whole level; speed ramps in its direction."""
        game.handle_input([CLICK])

        assert len(game.tower) == 1
        assert game.tower[0].span == pytest.approx((-0.3, 0.3))
        assert game.difficulty.level_speed == pytest.approx(0.65)
        assert game.get_score() == 1
        notes = game.pop_notifications()
        assert [(n.kind, n.text) for n in notes] == [(NotificationKind.LEVEL, "Level 1")]

    def test_level_moves_up_a_row(self, game):
        row_height = game.config.row_height
        assert game.level_y == pytest.approx(-1.0 + 0.5 * row_height)

        game.handle_input([CLICK])

        assert game.level_y == pytest.approx(-1.0 + 1.5 * row_height)
        assert game.tower[0].y == pytest.approx(-1.0 + 0.5 * row_height)

    def test_offset_first_placement(self, game):
        game.update(0.5)
        game.handle_input([CLICK])
        assert game.tower[0].span == pytest.approx((0.0, 0.6))

    def test_partial_overlap_shrinks_level(self, game):
        game.handle_input([CLICK])
        game.update(0.2)  # x = 0.13 at speed 0.65

        game.handle_input([CLICK])

        assert len(game.tower) == 2
        assert game.tower[1].span == pytest.approx((-0.17, 0.3))
        assert game.level_width == pytest.approx(0.47)

    def test_miss_loses(self, game):
        """A level that misses the top block ends the round; tower unchanged."""
        game.handle_input([CLICK])
        game.update(1.0)  # x = 0.65, span (0.35, 0.95)

        game.handle_input([CLICK])

        assert game.state == GameState.TERMINAL
        assert game.outcome == RoundOutcome.LOSE
        assert len(game.tower) == 1
        notes = game.pop_notifications()
        assert notes[-1].kind == NotificationKind.OUTCOME

    def test_static_after_loss(self, game):
        game.handle_input([CLICK])
        game.update(1.0)
        game.handle_input([CLICK])
        x = game.level_x

        game.update(0.5)
        game.handle_input([CLICK])

        assert game.level_x == x
        assert len(game.tower) == 1


class TestCompletion:
    """Tests for finishing a tower."""

    @pytest.fixture
    def won(self):
        game = start(StackerMode(config=StackerConfig(max_level=3, max_frame_time=1.0)))
        for _ in range(3):
            game.handle_input([CLICK])
        return game

    def test_reaching_max_level_wins(self, won):
        assert won.state == GameState.TERMINAL
        assert won.outcome == RoundOutcome.WIN
        assert won.towers_completed == 1
        assert won.get_score() == 3
        texts = [n.text for n in won.pop_notifications() if n.kind == NotificationKind.LEVEL]
        assert texts == ["Level 1", "Level 2", "Level 3"]

    def test_win_raises_starting_speed(self, won):
        previous = won.difficulty.starting_speed

        won.handle_input([InputEvent.key_down('r')])

        assert won.state == GameState.ACTIVE
        assert won.difficulty.starting_speed > previous
        assert won.difficulty.level_speed == pytest.approx(won.difficulty.starting_speed)
        assert len(won.tower) == 0
        assert won.level_x == 0.0
        assert won.level_width == won.config.level_width_start

    def test_loss_keeps_starting_speed(self, game):
        game.handle_input([CLICK])
        game.update(1.0)
        game.handle_input([CLICK])
        assert game.outcome == RoundOutcome.LOSE

        game.restart()

        assert game.difficulty.starting_speed == pytest.approx(0.6)
        assert game.difficulty.level_speed == pytest.approx(0.6)

    def test_double_restart_is_noop(self, won):
        assert won.restart()
        difficulty = won.difficulty

        assert not won.restart()
        assert won.difficulty == difficulty
        assert won.towers_completed == 1

    def test_complete_tower_drawn_green(self, won):
        commands = won.draw_list()
        blocks, level = commands[:-1], commands[-1]
        assert len(blocks) == 3
        for command in blocks:
            assert command.color.as_rgb_tuple == stacker_config.COMPLETE_COLOR
        assert level.color.as_rgb_tuple == stacker_config.LEVEL_TERMINAL_COLOR


class TestDrawList:
    """Tests for the active draw list."""

    def test_active_colors(self, game):
        game.handle_input([CLICK])
        block, level = game.draw_list()
        assert block.color.as_rgb_tuple == stacker_config.BLOCK_COLOR
        assert level.color.as_rgb_tuple == stacker_config.LEVEL_ACTIVE_COLOR
        assert level.rect.width == pytest.approx(game.level_width)

    def test_max_level_override(self):
        game = StackerMode(max_level=4)
        assert game.config.max_level == 4
        assert game.config.row_height == StackerConfig().row_height
