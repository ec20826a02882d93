"""Per-route mileage, ridership and efficiency metrics."""

import logging
from datetime import date
from typing import List, Optional

from .calculations import efficiency_score, estimate_fuel_cost, leg_miles
from .config import AnalyticsConfig
from .date_range import iter_days
from .errors import ComputationFailure
from .route import Route
from .results import RouteEfficiencyMetrics

logger = logging.getLogger(__name__)


def has_meaningful_data(route: Route) -> bool:
    """False for routes with no id, no name and two empty legs."""
    has_id = route.route_id is not None and route.route_id > 0
    has_name = bool(route.name and route.name.strip())
    return has_id or has_name or not (route.am.is_empty and route.pm.is_empty)


def route_miles(route: Route) -> float:
    """Clamped AM plus PM leg miles."""
    return leg_miles(route.am.begin_miles, route.am.end_miles) + leg_miles(
        route.pm.begin_miles, route.pm.end_miles
    )


def route_riders(route: Route) -> int:
    return (route.am.riders or 0) + (route.pm.riders or 0)


class RouteEfficiencyCalculator:
    """Computes RouteEfficiencyMetrics for single routes or date ranges."""

    def __init__(self, data=None, config: Optional[AnalyticsConfig] = None):
        self.data = data
        self.config = config or AnalyticsConfig()

    def fuel_cost(self, miles: float) -> float:
        return estimate_fuel_cost(
            miles, self.config.bus_mpg, self.config.fuel_price_per_gallon
        )

    def efficiency(self, route: Optional[Route]) -> Optional[RouteEfficiencyMetrics]:
        """
        Metrics for a route, or None when the route carries no usable data.

        Unexpected errors are logged and re-raised as ComputationFailure.
        """
        if route is None or not has_meaningful_data(route):
            return None
        try:
            return self._compute(route)
        except Exception as exc:
            logger.error("Failed to compute efficiency for route %s: %s", route.route_id, exc)
            raise ComputationFailure(
                f"Failed to compute efficiency for route {route.route_id}: {exc}"
            ) from exc

    def _compute(self, route: Route) -> RouteEfficiencyMetrics:
        am_miles = leg_miles(route.am.begin_miles, route.am.end_miles)
        pm_miles = leg_miles(route.pm.begin_miles, route.pm.end_miles)
        am_riders = route.am.riders or 0
        pm_riders = route.pm.riders or 0
        total_miles = am_miles + pm_miles
        total_riders = am_riders + pm_riders

        miles_per_rider = 0.0
        score = 0.0
        if total_riders > 0:
            miles_per_rider = round(total_miles / total_riders, 2)
            score = efficiency_score(total_miles, total_riders)

        return RouteEfficiencyMetrics(
            route_id=route.route_id,
            route_name=route.name or "Unknown",
            date=route.date,
            am_total_miles=am_miles,
            am_riders=am_riders,
            am_vehicle_id=route.am.vehicle_id,
            am_driver_id=route.am.driver_id,
            pm_total_miles=pm_miles,
            pm_riders=pm_riders,
            pm_vehicle_id=route.pm.vehicle_id,
            pm_driver_id=route.pm.driver_id,
            total_miles=total_miles,
            total_riders=total_riders,
            miles_per_rider=miles_per_rider,
            efficiency_score=score,
            estimated_fuel_cost=self.fuel_cost(total_miles),
        )

    def efficiency_range(self, start: date, end: date) -> List[RouteEfficiencyMetrics]:
        """Metrics for every route between start and end, by date then name."""
        metrics = []
        for day in iter_days(start, end, self.config.max_range_days):
            for route in self.data.get_routes_by_date(day):
                result = self.efficiency(route)
                if result is not None:
                    metrics.append(result)
        return sorted(metrics, key=lambda m: (m.date or date.min, m.route_name))
