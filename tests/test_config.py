"""
Test suite for configuration loading and validation.
"""

import pytest

from eyegrid.config import Config, ConfigError, load_config, validate_config, validate_canvas


class TestLoadConfig:
    """Test YAML loading with defaults."""

    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "nope.yaml"))
        assert config == Config()

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == Config()

    def test_partial_sections_merge_with_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "canvas:\n"
            "  width: 1280\n"
            "eyes:\n"
            "  num_pairs: 5\n"
            "blink:\n"
            "  chance: 0.5\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        config = load_config(str(path))
        assert config.canvas.width == 1280
        assert config.canvas.height == 600
        assert config.eyes.num_pairs == 5
        assert config.eyes.eye_spacing == 90.0
        assert config.blink.chance == 0.5
        assert config.blink.interval == 3.0
        assert config.log_level == "DEBUG"

    def test_lists_become_tuples(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "gaze:\n"
            "  hue_range: [10, 200]\n"
            "agent:\n"
            "  color: [255, 200, 0]\n"
        )
        config = load_config(str(path))
        assert config.gaze.hue_range == (10, 200)
        assert config.agent.color == (255, 200, 0)

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("agent:\n  wings: 2\n  speed: 6\n")
        config = load_config(str(path))
        assert config.agent.speed == 6
        assert not hasattr(config.agent, "wings")

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("blink:\n  chance: 1.5\n")
        with pytest.raises(ConfigError):
            load_config(str(path))


class TestValidation:
    """Test configuration preconditions."""

    def test_defaults_are_valid(self):
        validate_config(Config())

    def test_zero_canvas_rejected(self):
        with pytest.raises(ConfigError):
            validate_canvas(0, 600, Config().eyes)

    def test_narrow_canvas_rejected(self):
        # Needs 40 + 90 + 40 = 170 px
        with pytest.raises(ConfigError):
            validate_canvas(160, 600, Config().eyes)

    def test_minimal_canvas_accepted(self):
        validate_canvas(170, 80, Config().eyes)

    def test_short_canvas_rejected(self):
        with pytest.raises(ConfigError):
            validate_canvas(800, 79, Config().eyes)

    def test_non_positive_pair_count_rejected(self):
        config = Config()
        config.eyes.num_pairs = 0
        with pytest.raises(ConfigError):
            validate_config(config)

    def test_inverted_size_range_rejected(self):
        config = Config()
        config.eyes.eye_size_min = 90
        with pytest.raises(ConfigError):
            validate_config(config)

    def test_zero_width_gaze_range_rejected(self):
        config = Config()
        config.gaze.hue_distance = (100, 100)
        with pytest.raises(ConfigError):
            validate_config(config)

    def test_non_positive_speed_rejected(self):
        config = Config()
        config.agent.speed = 0
        with pytest.raises(ConfigError):
            validate_config(config)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
