"""Enums for priorities, severities and rating categories."""

from enum import Enum


class MaintenancePriority(Enum):
    """Urgency of a predicted service. Higher value = more urgent."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class AlertSeverity(Enum):
    """Alert levels. Higher value = more severe."""

    INFORMATION = 1
    WARNING = 2
    URGENT = 3
    CRITICAL = 4


class HealthStatus(Enum):
    """Vehicle health categories, worst first."""

    CRITICAL = 1
    POOR = 2
    FAIR = 3
    GOOD = 4
    EXCELLENT = 5


class PerformanceRating(Enum):
    """Driver performance categories, worst first."""

    NEEDS_IMPROVEMENT = 1
    BELOW_AVERAGE = 2
    AVERAGE = 3
    GOOD = 4
    EXCELLENT = 5


class SuggestionType(Enum):
    """Kinds of route optimization suggestions."""

    EFFICIENCY_IMPROVEMENT = "EfficiencyImprovement"
    MILEAGE_REDUCTION = "MileageReduction"
    VEHICLE_UTILIZATION = "VehicleUtilization"


class SuggestionPriority(Enum):
    """Priority of an optimization suggestion. Higher value = more important."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class CostTrend(Enum):
    """Direction of maintenance spend across a period."""

    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"
    INSUFFICIENT_DATA = "Insufficient data"
