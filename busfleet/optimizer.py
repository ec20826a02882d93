"""Route optimization suggestions for a single day."""

from collections import Counter
from datetime import date
from typing import List, Optional

from .results import RouteEfficiencyMetrics, RouteOptimizationSuggestion
from .routes import RouteEfficiencyCalculator
from .status import SuggestionPriority, SuggestionType

LOW_EFFICIENCY_SCORE = 60
VERY_LOW_EFFICIENCY_SCORE = 40
HIGH_MILES_PER_RIDER = 5.0
# Share of inefficient miles assumed recoverable
RECOVERABLE_MILES_FACTOR = 0.3
SAVINGS_PER_MILE_PER_RIDER = 2.5
SAVINGS_PER_UNDERUSED_VEHICLE = 25.0


class RouteOptimizationAdvisor:
    """Flags inefficient routes and underused vehicles."""

    def __init__(self, data, calculator: Optional[RouteEfficiencyCalculator] = None):
        self.data = data
        self.calculator = calculator or RouteEfficiencyCalculator(data)

    def potential_savings(self, metrics: RouteEfficiencyMetrics) -> float:
        """Fuel cost of the share of miles an efficient route would not drive."""
        inefficiency = (100 - metrics.efficiency_score) / 100
        return self.calculator.fuel_cost(
            metrics.total_miles * inefficiency * RECOVERABLE_MILES_FACTOR
        )

    def suggest(self, day: date) -> List[RouteOptimizationSuggestion]:
        """Suggestions for routes run on day, highest priority and savings first."""
        routes = self.data.get_routes_by_date(day)
        metrics = [m for m in map(self.calculator.efficiency, routes) if m is not None]
        suggestions = []

        for m in metrics:
            if m.efficiency_score < LOW_EFFICIENCY_SCORE:
                suggestions.append(
                    RouteOptimizationSuggestion(
                        route_id=m.route_id or 0,
                        route_name=m.route_name,
                        suggestion_type=SuggestionType.EFFICIENCY_IMPROVEMENT,
                        description=(
                            f"Route efficiency score is {m.efficiency_score:.1f}%. "
                            "Consider consolidating stops or adjusting route path."
                        ),
                        potential_savings=self.potential_savings(m),
                        priority=(
                            SuggestionPriority.HIGH
                            if m.efficiency_score < VERY_LOW_EFFICIENCY_SCORE
                            else SuggestionPriority.MEDIUM
                        ),
                    )
                )

        for m in metrics:
            if m.miles_per_rider > HIGH_MILES_PER_RIDER:
                suggestions.append(
                    RouteOptimizationSuggestion(
                        route_id=m.route_id or 0,
                        route_name=m.route_name,
                        suggestion_type=SuggestionType.MILEAGE_REDUCTION,
                        description=(
                            f"High miles per rider ({m.miles_per_rider:.1f}). "
                            "Consider route consolidation."
                        ),
                        potential_savings=round(
                            m.miles_per_rider * SAVINGS_PER_MILE_PER_RIDER, 2
                        ),
                        priority=SuggestionPriority.MEDIUM,
                    )
                )

        suggestions.extend(self.vehicle_utilization(routes))

        return sorted(
            suggestions,
            key=lambda s: (s.priority.value, s.potential_savings),
            reverse=True,
        )

    def vehicle_utilization(self, routes) -> List[RouteOptimizationSuggestion]:
        """One aggregate suggestion when any vehicle runs a single leg all day."""
        usage: Counter = Counter()
        for route in routes:
            if route.am.vehicle_id is not None:
                usage[route.am.vehicle_id] += 1
            if route.pm.vehicle_id is not None and route.pm.vehicle_id != route.am.vehicle_id:
                usage[route.pm.vehicle_id] += 1

        underused = [vehicle_id for vehicle_id, count in usage.items() if count == 1]
        if not underused:
            return []
        return [
            RouteOptimizationSuggestion(
                route_id=0,
                route_name="Fleet Utilization",
                suggestion_type=SuggestionType.VEHICLE_UTILIZATION,
                description=(
                    f"{len(underused)} vehicles used only once. "
                    "Consider route consolidation."
                ),
                potential_savings=len(underused) * SAVINGS_PER_UNDERUSED_VEHICLE,
                priority=SuggestionPriority.MEDIUM,
            )
        ]
