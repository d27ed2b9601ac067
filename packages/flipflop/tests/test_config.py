"""Tests for SimulatorConfig validation."""
import dataclasses

import pytest
from flipflop.config import SimulatorConfig


class TestSimulatorConfig:
    def test_defaults(self):
        cfg = SimulatorConfig()
        assert (cfg.min_width, cfg.max_width) == (1, 3)
        assert cfg.state_col_width == 20
        assert cfg.input_col_width == 30
        assert cfg.invalid_marker == "X"

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            SimulatorConfig().max_width = 5  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["state_col_width", "input_col_width"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_column_width_must_be_positive(self, field, value):
        with pytest.raises(ValueError):
            SimulatorConfig(**{field: value})

    @pytest.mark.parametrize("min_width,max_width", [(0, 3), (3, 2)])
    def test_width_bounds(self, min_width, max_width):
        with pytest.raises(ValueError):
            SimulatorConfig(min_width=min_width, max_width=max_width)

    @pytest.mark.parametrize("marker", ["0", "1", "", "XX"])
    def test_invalid_marker_must_be_one_non_bit_char(self, marker):
        with pytest.raises(ValueError):
            SimulatorConfig(invalid_marker=marker)

    def test_custom_marker_accepted(self):
        assert SimulatorConfig(invalid_marker="?").invalid_marker == "?"
