#!/usr/bin/env python3
"""Tests for HealthScorer."""
from datetime import date, timedelta

import pytest

from busfleet import (
    FleetData,
    FuelRecord,
    HealthScorer,
    HealthStatus,
    MaintenanceRecord,
    NotFound,
    Vehicle,
)

AS_OF = date(2025, 6, 1)


def scorer_for(vehicle, maintenance=(), fuel=()):
    fleet = FleetData(vehicles=[vehicle], maintenance=list(maintenance), fuel=list(fuel))
    return HealthScorer(fleet, as_of=AS_OF)


class TestComponentScores:
    """Tests for the history-based component scores."""

    @pytest.fixture
    def scorer(self):
        return scorer_for(Vehicle(1, "BUS-001", 2020))

    def test_compliance_neutral_without_history(self, scorer):
        assert scorer.compliance_score([]) == 50

    def test_compliance_floor_when_all_old(self, scorer):
        old = [MaintenanceRecord(1, date(2020, 1, 1), "Oil Change")]
        assert scorer.compliance_score(old) == 10

    def test_compliance_counts_recent(self, scorer):
        recent = [MaintenanceRecord(1, AS_OF - timedelta(days=30 * i)) for i in range(3)]
        assert scorer.compliance_score(recent) == 75

    def test_compliance_capped(self, scorer):
        recent = [MaintenanceRecord(1, AS_OF - timedelta(days=i)) for i in range(6)]
        assert scorer.compliance_score(recent) == 100

    def test_recent_window_is_twelve_months(self, scorer):
        history = [
            MaintenanceRecord(1, date(2024, 6, 1)),
            MaintenanceRecord(1, date(2024, 5, 31)),
            MaintenanceRecord(1, None),
        ]
        assert scorer.recent(history) == history[:1]

    def test_reliability_neutral(self, scorer):
        assert scorer.reliability_score([]) == 70

    def test_reliability_counts_breakdowns(self, scorer):
        history = [
            MaintenanceRecord(1, AS_OF, "Repair", notes="Towed after BREAKDOWN"),
            MaintenanceRecord(1, AS_OF, "Oil Change", notes="routine"),
            MaintenanceRecord(1, AS_OF, "Oil Change"),
            MaintenanceRecord(1, AS_OF, "Repair", notes="Emergency call"),
        ]
        assert scorer.reliability_score(history) == 50

    def test_cost_score_neutral(self, scorer):
        assert scorer.cost_score([MaintenanceRecord(1, AS_OF, "Oil Change")]) == 70

    def test_cost_score_from_average(self, scorer):
        history = [
            MaintenanceRecord(1, AS_OF, cost=400),
            MaintenanceRecord(1, AS_OF, cost=800),
        ]
        assert scorer.cost_score(history) == 70


class TestScore:
    """Tests for HealthScorer.score."""

    def test_new_vehicle_scores_good(self):
        """Built this year, no history, no miles: 75.5 rounds to 76."""
        result = scorer_for(Vehicle(1, "BUS-001", AS_OF.year)).score(1)
        assert result.age_score == 100
        assert result.mileage_score == 100
        assert result.maintenance_compliance_score == 50
        assert result.reliability_score == 70
        assert result.cost_efficiency_score == 70
        assert result.overall_score == 76
        assert result.health_status == HealthStatus.GOOD
        assert result.recommendations == ("Increase preventive maintenance frequency",)
        assert result.calculated_date == AS_OF

    def test_unknown_year_treated_as_new(self):
        assert scorer_for(Vehicle(1)).score(1).age_score == 100

    def test_worn_vehicle(self):
        history = [
            MaintenanceRecord(1, AS_OF - timedelta(days=10), "Repair", cost=2500,
                              notes="tow to shop"),
            MaintenanceRecord(1, AS_OF - timedelta(days=20), "Repair", cost=2600,
                              notes="engine failure"),
        ]
        result = scorer_for(
            Vehicle(1, "BUS-OLD", 1995),
            maintenance=history,
            fuel=[FuelRecord(1, AS_OF, 320000)],
        ).score(1)
        assert result.reliability_score == 0
        assert result.cost_efficiency_score == 30
        assert result.mileage_score == 25
        assert result.age_score == 20
        assert result.overall_score == 24
        assert result.health_status == HealthStatus.CRITICAL
        assert result.recommendations == (
            "Increase preventive maintenance frequency",
            "Focus on addressing recurring issues",
            "Review maintenance costs - consider different service providers",
            "Consider vehicle replacement evaluation",
        )

    def test_unknown_vehicle(self):
        with pytest.raises(NotFound):
            scorer_for(Vehicle(1)).score(2)
