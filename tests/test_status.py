#!/usr/bin/env python3
"""Tests for status enums."""

from busfleet import (
    AlertSeverity,
    CostTrend,
    HealthStatus,
    MaintenancePriority,
    PerformanceRating,
    SuggestionPriority,
    SuggestionType,
)


class TestOrdering:
    """Enum values order members from least to most severe."""

    def test_maintenance_priority(self):
        values = [p.value for p in MaintenancePriority]
        assert values == sorted(values)
        assert MaintenancePriority.CRITICAL.value > MaintenancePriority.HIGH.value

    def test_alert_severity(self):
        assert AlertSeverity.CRITICAL.value > AlertSeverity.URGENT.value
        assert AlertSeverity.URGENT.value > AlertSeverity.WARNING.value

    def test_health_status(self):
        assert HealthStatus.EXCELLENT.value > HealthStatus.CRITICAL.value

    def test_performance_rating(self):
        assert PerformanceRating.EXCELLENT.value > PerformanceRating.NEEDS_IMPROVEMENT.value

    def test_suggestion_priority(self):
        assert SuggestionPriority.HIGH.value > SuggestionPriority.MEDIUM.value


class TestLabels:
    """String-valued enums carry display labels."""

    def test_suggestion_type(self):
        assert SuggestionType.EFFICIENCY_IMPROVEMENT.value == "EfficiencyImprovement"
        assert SuggestionType.MILEAGE_REDUCTION.value == "MileageReduction"
        assert SuggestionType.VEHICLE_UTILIZATION.value == "VehicleUtilization"

    def test_cost_trend(self):
        assert CostTrend.INSUFFICIENT_DATA.value == "Insufficient data"
        assert CostTrend.STABLE.value == "Stable"
