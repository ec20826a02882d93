#!/usr/bin/env python3
"""Tests for CostAnalyzer and its helpers."""
from datetime import date

import pytest

from busfleet import (
    CostAnalyzer,
    CostTrend,
    FleetData,
    InvalidRange,
    MaintenanceRecord,
    NotFound,
    Vehicle,
)
from busfleet.costs import cost_trend, month_key, projected_annual_cost

HISTORY = [
    MaintenanceRecord(1, date(2025, 1, 10), "Oil Change", cost=100),
    MaintenanceRecord(1, date(2025, 2, 10), "Oil Change", cost=100),
    MaintenanceRecord(1, date(2025, 3, 10), "Brake Inspection", cost=800),
    MaintenanceRecord(1, date(2025, 4, 10), None, cost=900),
    MaintenanceRecord(1, date(2024, 12, 1), "Oil Change", cost=5000),
    MaintenanceRecord(1, None, "Oil Change", cost=5000),
    MaintenanceRecord(2, date(2025, 2, 1), "Oil Change", cost=70),
]


@pytest.fixture
def analyzer():
    fleet = FleetData(vehicles=[Vehicle(1, "BUS-001"), Vehicle(2)], maintenance=HISTORY)
    return CostAnalyzer(fleet)


class TestHelpers:
    """Tests for month_key, projected_annual_cost and cost_trend."""

    def test_month_key(self):
        assert month_key(date(2025, 3, 9)) == "2025-03"
        assert month_key(None) == "0000-00"

    def test_projection_over_span(self):
        records = HISTORY[:4]
        assert projected_annual_cost(records) == pytest.approx(1900 / 90 * 365)

    def test_projection_single_day_counts_as_year(self):
        records = [MaintenanceRecord(1, date(2025, 1, 1), cost=300)]
        assert projected_annual_cost(records) == pytest.approx(300)

    def test_projection_empty(self):
        assert projected_annual_cost([]) == 0.0

    def test_trend_increasing(self):
        assert cost_trend(HISTORY[:4]) == CostTrend.INCREASING

    def test_trend_orders_by_date(self):
        """Input order does not matter."""
        assert cost_trend(list(reversed(HISTORY[:4]))) == CostTrend.INCREASING

    def test_trend_decreasing(self):
        records = [
            MaintenanceRecord(1, date(2025, 1, 1), cost=1000),
            MaintenanceRecord(1, date(2025, 2, 1), cost=100),
        ]
        assert cost_trend(records) == CostTrend.DECREASING

    def test_trend_stable(self):
        records = [
            MaintenanceRecord(1, date(2025, 1, 1), cost=100),
            MaintenanceRecord(1, date(2025, 2, 1), cost=600),
        ]
        assert cost_trend(records) == CostTrend.STABLE

    def test_trend_insufficient(self):
        assert cost_trend(HISTORY[:1]) == CostTrend.INSUFFICIENT_DATA


class TestAnalyze:
    """Tests for CostAnalyzer.analyze."""

    def test_period_totals(self, analyzer):
        analysis = analyzer.analyze(1, date(2025, 1, 1), date(2025, 12, 31))
        assert analysis.registration_number == "BUS-001"
        assert analysis.service_count == 4
        assert analysis.total_cost == 1900
        assert analysis.average_cost_per_service == 475
        assert analysis.cost_trend == CostTrend.INCREASING

    def test_categories(self, analyzer):
        analysis = analyzer.analyze(1, date(2025, 1, 1), date(2025, 12, 31))
        assert analysis.cost_by_category == {
            "Oil Change": 200,
            "Brake Inspection": 800,
            "Other": 900,
        }

    def test_monthly_costs_sorted(self, analyzer):
        analysis = analyzer.analyze(1, date(2024, 12, 1), date(2025, 2, 28))
        assert list(analysis.monthly_costs) == ["2024-12", "2025-01", "2025-02"]

    def test_range_is_inclusive(self, analyzer):
        analysis = analyzer.analyze(1, date(2025, 1, 10), date(2025, 1, 10))
        assert analysis.service_count == 1

    def test_empty_period(self, analyzer):
        analysis = analyzer.analyze(2, date(2023, 1, 1), date(2023, 12, 31))
        assert analysis.service_count == 0
        assert analysis.total_cost == 0
        assert analysis.average_cost_per_service == 0
        assert analysis.projected_annual_cost == 0
        assert analysis.cost_trend == CostTrend.INSUFFICIENT_DATA
        assert analysis.registration_number == "Unknown"

    def test_long_periods_allowed(self, analyzer):
        analysis = analyzer.analyze(1, date(2020, 1, 1), date(2025, 12, 31))
        assert analysis.service_count == 5

    def test_inverted_range(self, analyzer):
        with pytest.raises(InvalidRange):
            analyzer.analyze(1, date(2025, 2, 1), date(2025, 1, 1))

    def test_unknown_vehicle(self, analyzer):
        with pytest.raises(NotFound):
            analyzer.analyze(3, date(2025, 1, 1), date(2025, 2, 1))
