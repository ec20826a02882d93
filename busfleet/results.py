"""Result dataclasses returned by the analytics engines.

All results are built fresh on every call and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

from .status import (
    AlertSeverity,
    CostTrend,
    HealthStatus,
    MaintenancePriority,
    PerformanceRating,
    SuggestionPriority,
    SuggestionType,
)


@dataclass(frozen=True)
class MaintenancePrediction:
    """Next expected service of one maintenance type for a vehicle."""

    vehicle_id: int
    maintenance_type: str
    predicted_date: date
    priority: MaintenancePriority
    estimated_cost: float
    reason: str
    based_on_mileage: bool
    predicted_mileage: Optional[int] = None


@dataclass(frozen=True)
class MaintenanceRecommendation:
    """A prediction that falls inside a scheduling window."""

    vehicle_id: int
    registration_number: str
    maintenance_type: str
    recommended_date: date
    priority: MaintenancePriority
    estimated_cost: float
    reason: str
    current_mileage: float


@dataclass(frozen=True)
class VehicleHealthScore:
    """Composite health of a vehicle from five 0-100 component scores."""

    vehicle_id: int
    registration_number: str
    calculated_date: date
    maintenance_compliance_score: int
    age_score: int
    mileage_score: int
    reliability_score: int
    cost_efficiency_score: int
    overall_score: int
    health_status: HealthStatus
    recommendations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MaintenanceCostAnalysis:
    """Maintenance spend for a vehicle over a period."""

    vehicle_id: int
    registration_number: str
    period_start: date
    period_end: date
    total_cost: float
    average_cost_per_service: float
    service_count: int
    cost_by_category: Dict[str, float]
    monthly_costs: Dict[str, float]
    projected_annual_cost: float
    cost_trend: CostTrend


@dataclass(frozen=True)
class MaintenanceAlert:
    """An urgent or critical maintenance item found by a fleet sweep."""

    vehicle_id: int
    registration_number: str
    severity: AlertSeverity
    message: str
    due_date: date
    estimated_cost: float


@dataclass(frozen=True)
class AlertSweep:
    """Alerts from a fleet sweep plus the vehicles that could not be scanned."""

    alerts: List[MaintenanceAlert]
    skipped_vehicle_ids: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class RouteEfficiencyMetrics:
    """Derived mileage, ridership and efficiency figures for one route."""

    route_id: Optional[int]
    route_name: str
    date: Optional[date]
    am_total_miles: float
    am_riders: int
    am_vehicle_id: Optional[int]
    am_driver_id: Optional[int]
    pm_total_miles: float
    pm_riders: int
    pm_vehicle_id: Optional[int]
    pm_driver_id: Optional[int]
    total_miles: float
    total_riders: int
    miles_per_rider: float
    efficiency_score: float
    estimated_fuel_cost: float


@dataclass(frozen=True)
class RouteOptimizationSuggestion:
    route_id: int
    route_name: str
    suggestion_type: SuggestionType
    description: str
    potential_savings: float
    priority: SuggestionPriority


@dataclass(frozen=True)
class DriverPerformanceMetrics:
    """Route totals and averaged efficiency for one driver over a period."""

    driver_id: int
    name: str
    period_start: date
    period_end: date
    total_routes: int
    total_miles: float
    total_riders: int
    average_miles_per_route: float
    average_riders_per_route: float
    overall_efficiency_score: float
    performance_rating: PerformanceRating


@dataclass(frozen=True)
class FleetAnalyticsSummary:
    """Fleet-wide route totals over a period.

    ``completed`` is False when the day loop stopped early on timeout; the
    figures then cover ``days_processed`` days only.
    """

    period_start: date
    period_end: date
    total_routes: int
    total_miles: float
    total_riders: int
    average_efficiency_score: float
    average_miles_per_rider: float
    vehicle_utilization_rate: float
    active_vehicles: int
    out_of_service_vehicles: int
    estimated_fuel_costs: float
    top_performing_routes: List[str]
    days_processed: int
    completed: bool = True


@dataclass(frozen=True)
class MileageStats:
    total_miles: float
    average_daily_miles: float
    max_daily_miles: float
    min_daily_miles: float
    miles_per_vehicle: float
    route_breakdown: Dict[str, float]
    daily_trend: Dict[date, float]


@dataclass(frozen=True)
class RidershipStats:
    total_riders: int
    average_daily_riders: float
    max_daily_riders: int
    min_daily_riders: int
    capacity_utilization: float
    route_ridership: Dict[str, int]
    daily_trend: Dict[date, int]


@dataclass(frozen=True)
class CostPerStudentMetrics:
    """Unit transport costs for routes and activity trips."""

    start_date: date
    end_date: date
    route_cost_per_student_per_day: float
    sports_cost_per_student: float
    field_trip_cost_per_student: float
    total_route_student_days: int
    total_sports_students: int
    total_field_trip_students: int
    total_route_costs: float
    total_sports_costs: float
    total_field_trip_costs: float
