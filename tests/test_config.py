"""Tests for game configuration models, presets and YAML loading."""

import pytest
import yaml
from pydantic import ValidationError

from games.Hammer import config as hammer_config
from games.Hammer.config import HammerConfig
from games.Stacker import config as stacker_config
from games.Stacker.config import StackerConfig
from rectsim.games.config_loader import load_model, read_yaml_mapping


class TestHammerConfig:
    """Tests for HammerConfig validation."""

    def test_defaults(self):
        config = HammerConfig()
        assert config.max_targets == 25
        assert config.max_hammer_length == 4.0
        assert config.initial_health == 4.0
        assert config.target_width == pytest.approx(25 / 640 * 2)
        assert config.target_height == pytest.approx(25 / 480 * 2)

    def test_starting_health_capped_by_max(self):
        assert HammerConfig(starting_health=10.0).initial_health == 4.0
        assert HammerConfig(starting_health=0.5).initial_health == 0.5

    def test_start_above_cap_rejected(self):
        """A curve whose start exceeds its cap is a configuration error."""
        with pytest.raises(ValidationError):
            HammerConfig(drain_start=0.5, max_drain=0.3)

    def test_delay_below_floor_rejected(self):
        with pytest.raises(ValidationError):
            HammerConfig(spawn_delay_start=0.1, min_spawn_delay=0.25)

    def test_inverted_angle_range_rejected(self):
        with pytest.raises(ValidationError):
            HammerConfig(spawn_angle_min=120, spawn_angle_max=60)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            HammerConfig(hammer_colour="red")

    def test_unknown_restart_policy_rejected(self):
        with pytest.raises(ValidationError):
            HammerConfig(restart_policy="sometimes")

    def test_frozen(self):
        config = HammerConfig()
        with pytest.raises(ValidationError):
            config.gain = 1.0

    def test_presets_valid_and_distinct(self):
        assert set(hammer_config.PRESETS) == {'classic', 'relaxed', 'frantic'}
        assert hammer_config.get_preset('frantic').drain_start > hammer_config.get_preset('classic').drain_start

    def test_unknown_preset_falls_back(self):
        assert hammer_config.get_preset('nope') == hammer_config.PRESETS['classic']


class TestStackerConfig:
    """Tests for StackerConfig validation."""

    def test_defaults(self):
        config = StackerConfig()
        assert config.max_level * config.row_height <= 2.0
        assert config.min_block_width <= config.level_width_start

    def test_tower_must_fit(self):
        with pytest.raises(ValidationError):
            StackerConfig(row_height=0.25, max_level=9)

    def test_start_width_below_minimum_rejected(self):
        with pytest.raises(ValidationError):
            StackerConfig(level_width_start=0.02, min_block_width=0.05)

    def test_starting_speed_above_max_rejected(self):
        with pytest.raises(ValidationError):
            StackerConfig(starting_speed=5.0, max_speed=3.0)

    def test_presets(self):
        for name, config in stacker_config.PRESETS.items():
            assert stacker_config.get_preset(name) is config


class TestYamlLoading:
    """Tests for the YAML config loader."""

    def test_load_hammer_config(self, tmp_path):
        path = tmp_path / "hammer.yaml"
        path.write_text(yaml.safe_dump({'drain_start': 0.2, 'max_targets': 5}))

        config = hammer_config.load_config(path)

        assert config.drain_start == 0.2
        assert config.max_targets == 5
        assert config.gain == HammerConfig().gain

    def test_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "stacker.yaml"
        path.write_text("max_level: 5\nstarting_speed: 0.5\n")

        config = stacker_config.load_config(path, max_level=3)

        assert config.max_level == 3
        assert config.starting_speed == 0.5

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_model(path, StackerConfig) == StackerConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_yaml_mapping(tmp_path / "missing.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            read_yaml_mapping(path)

    def test_invalid_values_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("max_targets: -3\n")
        with pytest.raises(ValidationError):
            hammer_config.load_config(path)
