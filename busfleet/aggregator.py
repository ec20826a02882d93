"""Driver and fleet roll-ups over date ranges."""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Tuple

from .calculations import leg_miles, performance_rating
from .config import AnalyticsConfig
from .date_range import CancellationToken, iter_days, validate_range
from .errors import NotFound
from .results import (
    DriverPerformanceMetrics,
    FleetAnalyticsSummary,
    MileageStats,
    RidershipStats,
    RouteEfficiencyMetrics,
)
from .route import Route
from .routes import RouteEfficiencyCalculator, route_miles, route_riders

logger = logging.getLogger(__name__)

TOP_ROUTE_COUNT = 5


def _average(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class FleetAggregator:
    """
    Rolls route metrics up per driver or across the fleet.

    All operations walk the range one day at a time, capped at
    ``config.max_range_days`` days. The fleet summary can additionally be
    cut short by a CancellationToken (by default one that expires after
    ``config.fleet_summary_timeout_seconds``); partial totals are then
    returned with ``completed=False``.
    """

    def __init__(
        self,
        data,
        config: Optional[AnalyticsConfig] = None,
        calculator: Optional[RouteEfficiencyCalculator] = None,
    ):
        self.data = data
        self.config = config or AnalyticsConfig()
        self.calculator = calculator or RouteEfficiencyCalculator(data, self.config)

    def _routes_between(
        self, start: date, end: date, token: Optional[CancellationToken] = None
    ) -> Tuple[List[Route], int]:
        """Routes run in the range plus the number of days visited."""
        routes: List[Route] = []
        days = 0
        for day in iter_days(start, end, self.config.max_range_days, token):
            routes.extend(self.data.get_routes_by_date(day))
            days += 1
        return routes, days

    def _metrics(self, routes: List[Route]) -> List[RouteEfficiencyMetrics]:
        return [m for m in map(self.calculator.efficiency, routes) if m is not None]

    def driver_performance(
        self, driver_id: int, start: date, end: date
    ) -> DriverPerformanceMetrics:
        """Miles, riders and averaged route efficiency for one driver."""
        validate_range(start, end, self.config.max_range_days)
        driver = self.data.get_driver(driver_id)
        if driver is None:
            raise NotFound("Driver", driver_id)

        routes, _ = self._routes_between(start, end)
        routes = [r for r in routes if r.uses_driver(driver_id)]

        total_miles = 0.0
        total_riders = 0
        for route in routes:
            for leg in (route.am, route.pm):
                if leg.driver_id == driver_id:
                    total_miles += leg_miles(leg.begin_miles, leg.end_miles)
                    total_riders += leg.riders or 0

        total_routes = len(routes)
        scores = [m.efficiency_score for m in self._metrics(routes)]
        overall = round(_average(scores), 1)

        return DriverPerformanceMetrics(
            driver_id=driver_id,
            name=driver.name,
            period_start=start,
            period_end=end,
            total_routes=total_routes,
            total_miles=total_miles,
            total_riders=total_riders,
            average_miles_per_route=(
                round(total_miles / total_routes, 2) if total_routes else 0.0
            ),
            average_riders_per_route=(
                round(total_riders / total_routes, 1) if total_routes else 0.0
            ),
            overall_efficiency_score=overall,
            performance_rating=performance_rating(overall),
        )

    def fleet_summary(
        self, start: date, end: date, token: Optional[CancellationToken] = None
    ) -> FleetAnalyticsSummary:
        """Fleet-wide totals, utilisation and best routes for a period."""
        validate_range(start, end, self.config.max_range_days)
        if token is None:
            token = CancellationToken(timeout=self.config.fleet_summary_timeout_seconds)

        expected_days = min((end - start).days + 1, self.config.max_range_days)
        routes, days = self._routes_between(start, end, token)
        completed = days >= expected_days
        if not completed:
            logger.warning(
                "Fleet summary for %s..%s cancelled after %d of %d days; "
                "returning partial results",
                start,
                end,
                days,
                expected_days,
            )

        metrics = self._metrics(routes)
        total_miles = sum(route_miles(r) for r in routes)

        vehicles = self.data.get_vehicles()
        used = {vehicle_id for r in routes for vehicle_id in r.vehicle_ids}
        utilization = round(len(used) / len(vehicles) * 100, 1) if vehicles else 0.0

        top = sorted(metrics, key=lambda m: m.efficiency_score, reverse=True)
        return FleetAnalyticsSummary(
            period_start=start,
            period_end=end,
            total_routes=len(routes),
            total_miles=total_miles,
            total_riders=sum(route_riders(r) for r in routes),
            average_efficiency_score=round(
                _average([m.efficiency_score for m in metrics]), 1
            ),
            average_miles_per_rider=round(
                _average([m.miles_per_rider for m in metrics]), 2
            ),
            vehicle_utilization_rate=utilization,
            active_vehicles=sum(1 for v in vehicles if v.is_active),
            out_of_service_vehicles=sum(1 for v in vehicles if v.is_out_of_service),
            estimated_fuel_costs=self.calculator.fuel_cost(total_miles),
            top_performing_routes=[
                f"{m.route_name} ({m.efficiency_score:.1f}%)"
                for m in top[:TOP_ROUTE_COUNT]
            ],
            days_processed=days,
            completed=completed,
        )

    def mileage_stats(self, start: date, end: date) -> MileageStats:
        """Total and per-day mileage, broken down by route name."""
        routes, _ = self._routes_between(start, end)
        daily: Dict[date, float] = defaultdict(float)
        by_route: Dict[str, float] = defaultdict(float)
        for route in routes:
            miles = route_miles(route)
            daily[route.date] += miles
            by_route[route.name or "Unknown Route"] += miles

        total = sum(daily.values())
        vehicle_count = len(self.data.get_vehicles())
        return MileageStats(
            total_miles=total,
            average_daily_miles=_average(list(daily.values())),
            max_daily_miles=max(daily.values(), default=0.0),
            min_daily_miles=min(daily.values(), default=0.0),
            miles_per_vehicle=total / vehicle_count if vehicle_count else 0.0,
            route_breakdown=dict(by_route),
            daily_trend=dict(sorted(daily.items())),
        )

    def ridership_stats(self, start: date, end: date) -> RidershipStats:
        """Total and per-day riders plus seat capacity utilisation."""
        routes, _ = self._routes_between(start, end)
        daily: Dict[date, int] = defaultdict(int)
        by_route: Dict[str, int] = defaultdict(int)
        for route in routes:
            riders = route_riders(route)
            daily[route.date] += riders
            by_route[route.name or "Unknown Route"] += riders

        average = _average(list(daily.values()))
        capacity = sum(
            v.capacity if v.capacity and v.capacity > 0
            else self.config.default_vehicle_capacity
            for v in self.data.get_vehicles()
        )
        return RidershipStats(
            total_riders=sum(daily.values()),
            average_daily_riders=average,
            max_daily_riders=max(daily.values(), default=0),
            min_daily_riders=min(daily.values(), default=0),
            capacity_utilization=average / capacity * 100 if capacity else 0.0,
            route_ridership=dict(by_route),
            daily_trend=dict(sorted(daily.items())),
        )
