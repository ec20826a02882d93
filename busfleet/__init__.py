"""
School bus fleet analytics and predictive maintenance.

This package turns maintenance, fuel, route and activity records into:
- MaintenancePredictor: next-service predictions per vehicle
- HealthScorer: composite vehicle health scores
- CostAnalyzer: maintenance spend by category and month, with trend
- AlertGenerator: fleet-wide urgent/critical maintenance alerts
- RouteEfficiencyCalculator: per-route mileage and efficiency metrics
- RouteOptimizationAdvisor: ranked route and vehicle suggestions
- FleetAggregator: driver and fleet roll-ups over date ranges
- CostPerStudentCalculator: per-student transport costs

Record classes (Vehicle, Driver, MaintenanceRecord, FuelRecord, Route,
Activity) are read through FleetData, which load_fleet builds from YAML.
"""

from .status import (
    AlertSeverity,
    CostTrend,
    HealthStatus,
    MaintenancePriority,
    PerformanceRating,
    SuggestionPriority,
    SuggestionType,
)
from .errors import ComputationFailure, FleetAnalyticsError, InvalidRange, NotFound
from .vehicle import Vehicle
from .driver import Driver
from .maintenance_record import MaintenanceRecord
from .fuel_record import FuelRecord
from .route import Leg, Route
from .activity import Activity
from .fleet_data import FleetData
from .config import AnalyticsConfig, load_config
from .loader import load_fleet, parse_fleet
from .date_range import CancellationToken, iter_days, validate_range
from .predictor import MaintenancePredictor
from .health import HealthScorer
from .costs import CostAnalyzer
from .alerts import AlertGenerator
from .routes import RouteEfficiencyCalculator
from .optimizer import RouteOptimizationAdvisor
from .aggregator import FleetAggregator
from .cost_per_student import CostPerStudentCalculator

__all__ = [
    "AlertSeverity",
    "CostTrend",
    "HealthStatus",
    "MaintenancePriority",
    "PerformanceRating",
    "SuggestionPriority",
    "SuggestionType",
    "ComputationFailure",
    "FleetAnalyticsError",
    "InvalidRange",
    "NotFound",
    "Vehicle",
    "Driver",
    "MaintenanceRecord",
    "FuelRecord",
    "Leg",
    "Route",
    "Activity",
    "FleetData",
    "AnalyticsConfig",
    "load_config",
    "load_fleet",
    "parse_fleet",
    "CancellationToken",
    "iter_days",
    "validate_range",
    "MaintenancePredictor",
    "HealthScorer",
    "CostAnalyzer",
    "AlertGenerator",
    "RouteEfficiencyCalculator",
    "RouteOptimizationAdvisor",
    "FleetAggregator",
    "CostPerStudentCalculator",
]
