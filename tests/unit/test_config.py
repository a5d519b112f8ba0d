"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from blockwrap.models.config import (
    BLOCK_CAPACITY_BOUNDS,
    LINE_CAPACITY_BOUNDS,
    CapacityConfig,
    Config,
    DisplayConfig,
    EditorConfig,
    clamp,
    whole_number,
)


class TestClamp:
    """Test the clamp helper."""

    @pytest.mark.parametrize("value,expected", [(5, 10), (10, 10), (64, 64), (120, 120), (500, 120)])
    def test_clamp(self, value, expected):
        """Test values are pulled into the inclusive range."""
        assert clamp(value, LINE_CAPACITY_BOUNDS) == expected


class TestCapacityConfig:
    """Test capacity configuration model."""

    def test_defaults(self):
        """Test default capacities."""
        config = CapacityConfig()

        assert config.line_capacity == 30
        assert config.block_capacity == 8
        assert config.mode == "lines"

    def test_out_of_range_values_are_clamped(self):
        """Test out-of-range capacities are clamped, not rejected."""
        config = CapacityConfig(line_capacity=3, block_capacity=999)

        assert config.line_capacity == LINE_CAPACITY_BOUNDS[0]
        assert config.block_capacity == BLOCK_CAPACITY_BOUNDS[1]

    def test_zero_block_capacity_clamped_to_one(self):
        """Test a block always holds at least one line."""
        assert CapacityConfig(block_capacity=0).block_capacity == 1

    def test_numeric_strings_accepted(self):
        """Test numeric strings (e.g. from YAML or env) are coerced."""
        config = CapacityConfig(line_capacity="40", block_capacity="3")

        assert config.line_capacity == 40
        assert config.block_capacity == 3

    def test_non_numeric_rejected(self):
        """Test values that are not numbers fail validation."""
        with pytest.raises(ValidationError):
            CapacityConfig(line_capacity="wide")

    @pytest.mark.parametrize("value", [12.9, None, True, "12.5", [12]])
    def test_non_whole_numbers_rejected(self, value):
        """Test fractions, null and other non-integers fail instead of truncating."""
        with pytest.raises(ValidationError):
            CapacityConfig(line_capacity=value)

    def test_integral_float_accepted(self):
        """Test 12.0 is read as 12."""
        assert CapacityConfig(block_capacity=12.0).block_capacity == 12

    def test_null_in_yaml_is_validation_error(self, tmp_path):
        """Test an empty YAML value is reported by validation."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("capacity:\n  line_capacity:\n")

        with pytest.raises(ValidationError):
            Config.load(config_file)

    def test_unknown_mode_rejected(self):
        """Test only 'lines' and 'height' modes exist."""
        with pytest.raises(ValidationError):
            CapacityConfig(mode="pixels")

    def test_capacity_config_immutable(self):
        """Test that capacity config is frozen (immutable)."""
        config = CapacityConfig()

        with pytest.raises(Exception):  # Pydantic ValidationError
            config.line_capacity = 50


class TestEditorConfig:
    """Test editor configuration model."""

    def test_default_commit_delay(self):
        assert EditorConfig().commit_delay == 1.5

    @pytest.mark.parametrize("delay", [0.0, 30.0])
    def test_commit_delay_bounds(self, delay):
        """Test commit delay outside its range is rejected."""
        with pytest.raises(ValidationError):
            EditorConfig(commit_delay=delay)


class TestDisplayConfig:
    """Test display configuration model."""

    def test_default_block_width(self):
        assert DisplayConfig().block_width == 34

    def test_block_width_too_narrow(self):
        with pytest.raises(ValidationError):
            DisplayConfig(block_width=5)


class TestConfig:
    """Test root configuration model."""

    def test_all_sections_default(self):
        """Test an empty config is valid."""
        config = Config()

        assert config.capacity == CapacityConfig()
        assert config.editor == EditorConfig()
        assert config.display == DisplayConfig()

    def test_load_from_file(self, tmp_path):
        """Test loading config from YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
capacity:
  line_capacity: 40
  block_capacity: 4
  mode: height

editor:
  commit_delay: 0.5
""")

        config = Config.load(config_file)

        assert config.capacity.line_capacity == 40
        assert config.capacity.block_capacity == 4
        assert config.capacity.mode == "height"
        assert config.editor.commit_delay == 0.5
        assert config.display.block_width == 34

    def test_load_missing_file(self, tmp_path):
        """Test Config.load() explains the expected format when the file is missing."""
        with pytest.raises(FileNotFoundError, match="line_capacity: 30"):
            Config.load(tmp_path / "missing.yaml")

    def test_load_invalid_yaml(self, tmp_path):
        """Test invalid YAML raises ValueError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("capacity: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            Config.load(config_file)

    def test_load_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert Config.load(config_file) == Config()


class TestWholeNumber:
    """Test capacity value coercion."""

    @pytest.mark.parametrize("value,expected", [(7, 7), (7.0, 7), ("7", 7), (" 42 ", 42), (-3, -3)])
    def test_accepted(self, value, expected):
        assert whole_number(value) == expected

    @pytest.mark.parametrize("value", [7.5, "7.5", "", None, False, object()])
    def test_rejected(self, value):
        with pytest.raises(ValueError, match="expected a whole number"):
            whole_number(value)
