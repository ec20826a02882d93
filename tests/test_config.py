#!/usr/bin/env python3
"""Tests for analytics configuration loading."""

import pytest

from busfleet import AnalyticsConfig, load_config


class TestDefaults:
    """Tests for AnalyticsConfig defaults."""

    def test_cost_constants(self):
        config = AnalyticsConfig()
        assert config.fuel_price_per_gallon == 3.50
        assert config.bus_mpg == 6.0
        assert config.maintenance_cost_per_mile == 0.20
        assert config.driver_hourly_rate == 16.50
        assert config.driver_hours_per_route == 2.0
        assert config.activity_driver_stipend == 50.0

    def test_limits(self):
        config = AnalyticsConfig()
        assert config.max_range_days == 365
        assert config.default_vehicle_capacity == 72

    def test_no_file_no_env(self):
        assert load_config(environ={}) == AnalyticsConfig()


class TestLoadConfig:
    """Tests for load_config."""

    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fuelPricePerGallon: 4.25\nmaxRangeDays: 90\n")
        config = load_config(path, environ={})
        assert config.fuel_price_per_gallon == 4.25
        assert config.max_range_days == 90

    def test_snake_case_keys(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("bus_mpg: 7\n")
        assert load_config(path, environ={}).bus_mpg == 7.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path, environ={}) == AnalyticsConfig()

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("busMpg: 7\nlogLevel: INFO\n")
        config = load_config(
            path, environ={"BUSFLEET_BUS_MPG": "8.5", "OTHER_VAR": "x"}
        )
        assert config.bus_mpg == 8.5
        assert config.log_level == "INFO"

    def test_environment_int_coercion(self):
        config = load_config(environ={"BUSFLEET_MAX_RANGE_DAYS": "30"})
        assert config.max_range_days == 30

    def test_unknown_key_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fuelPrice: 4\n")
        with pytest.raises(ValueError, match="fuelPrice"):
            load_config(path, environ={})

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path, environ={})
