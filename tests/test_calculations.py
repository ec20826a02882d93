#!/usr/bin/env python3
"""Tests for calculation helper functions."""
import pytest
from datetime import date
from busfleet.calculations import (
    age_score,
    contains_any,
    cost_efficiency_score,
    efficiency_score,
    estimate_fuel_cost,
    health_status,
    leg_miles,
    mileage_score,
    miles_since,
    overall_health_score,
    performance_rating,
)
from busfleet import HealthStatus, PerformanceRating


class TestLegMiles:
    """Tests for leg_miles helper function."""

    def test_normal_leg(self):
        assert leg_miles(100, 150) == 50.0

    def test_end_before_begin_clamps_to_zero(self):
        """Corrupted readings never contribute negative miles."""
        assert leg_miles(150, 100) == 0.0

    def test_equal_readings(self):
        assert leg_miles(100, 100) == 0.0

    def test_missing_reading(self):
        assert leg_miles(None, 150) == 0.0
        assert leg_miles(100, None) == 0.0


class TestEstimateFuelCost:
    """Tests for estimate_fuel_cost helper function."""

    def test_default_economy(self):
        """60 miles at 6 mpg and $3.50 is 10 gallons."""
        assert estimate_fuel_cost(60) == 35.0

    def test_rounds_to_cents(self):
        assert estimate_fuel_cost(50) == 29.17

    def test_zero_miles(self):
        assert estimate_fuel_cost(0) == 0.0

    def test_custom_economy(self):
        assert estimate_fuel_cost(80, mpg=8.0, price_per_gallon=4.0) == 40.0


class TestEfficiencyScore:
    """Tests for efficiency_score heuristic."""

    def test_short_route_with_riders(self):
        """50 miles, 10 riders: 50 + (10/50)*20."""
        assert efficiency_score(50, 10) == pytest.approx(54.0)

    def test_rider_bonus_capped(self):
        assert efficiency_score(10, 100) == 80.0

    def test_long_sparse_route_penalized(self):
        """Over 50 miles with fewer than 10 riders loses 20 points."""
        assert efficiency_score(60, 5) == pytest.approx(50 + 5 / 60 * 20 - 20)

    def test_zero_miles(self):
        assert efficiency_score(0, 20) == 0.0

    def test_short_distance_uses_one_mile_floor(self):
        assert efficiency_score(0.5, 1) == pytest.approx(70.0)


class TestComponentScores:
    """Tests for age, mileage and cost step scores."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2025, 100), (2023, 100), (2020, 90), (2015, 75), (2010, 60), (2005, 40), (1990, 20)],
    )
    def test_age_score(self, year, expected):
        assert age_score(year, date(2025, 6, 1)) == expected

    @pytest.mark.parametrize(
        "miles,expected",
        [(0, 100), (50000, 100), (50001, 85), (150000, 70), (250000, 40), (400000, 25)],
    )
    def test_mileage_score(self, miles, expected):
        assert mileage_score(miles) == expected

    def test_mileage_score_truncates_fraction(self):
        assert mileage_score(50000.9) == 100

    @pytest.mark.parametrize(
        "average,expected",
        [(150, 100), (200, 100), (450, 85), (900, 70), (1500, 55), (2500, 30)],
    )
    def test_cost_efficiency_score(self, average, expected):
        assert cost_efficiency_score(average) == expected


class TestOverallHealthScore:
    """Tests for overall_health_score weighting."""

    def test_neutral_new_vehicle(self):
        """75.5 rounds to 76."""
        assert overall_health_score(50, 100, 100, 70, 70) == 76

    def test_all_perfect(self):
        assert overall_health_score(100, 100, 100, 100, 100) == 100

    def test_all_zero(self):
        assert overall_health_score(0, 0, 0, 0, 0) == 0

    @pytest.mark.parametrize("value", [0, 17, 33, 50, 67, 83, 100])
    def test_always_in_bounds(self, value):
        score = overall_health_score(value, 100 - value, value, 100 - value, value)
        assert 0 <= score <= 100


class TestHealthStatus:
    """Tests for health_status thresholds."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (85, HealthStatus.EXCELLENT),
            (84, HealthStatus.GOOD),
            (70, HealthStatus.GOOD),
            (55, HealthStatus.FAIR),
            (40, HealthStatus.POOR),
            (39, HealthStatus.CRITICAL),
        ],
    )
    def test_thresholds(self, score, expected):
        assert health_status(score) == expected


class TestPerformanceRating:
    """Tests for performance_rating thresholds."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (80, PerformanceRating.EXCELLENT),
            (79.9, PerformanceRating.GOOD),
            (60, PerformanceRating.AVERAGE),
            (50, PerformanceRating.BELOW_AVERAGE),
            (49.9, PerformanceRating.NEEDS_IMPROVEMENT),
        ],
    )
    def test_thresholds(self, score, expected):
        assert performance_rating(score) == expected


class TestMilesSince:
    """Tests for miles_since helper function."""

    def test_with_odometer(self):
        assert miles_since(16200, 10000) == 6200

    def test_never_serviced_counts_all_miles(self):
        assert miles_since(16200, None) == 16200


class TestContainsAny:
    """Tests for contains_any keyword matching."""

    def test_case_insensitive(self):
        assert contains_any("Towed to shop", ["tow"])

    def test_no_match(self):
        assert not contains_any("Routine service", ["breakdown", "tow"])

    def test_empty_text(self):
        assert not contains_any(None, ["tow"])
        assert not contains_any("", ["tow"])
