"""Per-student transport costs for routes and activity trips."""

from datetime import date
from typing import Optional

from .config import AnalyticsConfig
from .date_range import iter_days
from .results import CostPerStudentMetrics
from .routes import RouteEfficiencyCalculator, route_miles, route_riders

# Activity trips carry no mileage or headcount; these are estimates
SPORTS_TRIP_MILES = 50
SPORTS_TRIP_STUDENTS = 20
FIELD_TRIP_MILES = 75
FIELD_TRIP_STUDENTS = 25


class CostPerStudentCalculator:
    """Converts route and activity costs into per-student unit costs."""

    def __init__(
        self,
        data,
        config: Optional[AnalyticsConfig] = None,
        calculator: Optional[RouteEfficiencyCalculator] = None,
    ):
        self.data = data
        self.config = config or AnalyticsConfig()
        self.calculator = calculator or RouteEfficiencyCalculator(data, self.config)

    def route_cost(self, miles: float) -> float:
        """Fuel, per-mile maintenance and driver time for one route day."""
        return (
            self.calculator.fuel_cost(miles)
            + miles * self.config.maintenance_cost_per_mile
            + self.config.driver_hourly_rate * self.config.driver_hours_per_route
        )

    def trip_cost(self, miles: float) -> float:
        """Fuel, per-mile maintenance and a flat driver stipend for one trip."""
        return (
            self.calculator.fuel_cost(miles)
            + miles * self.config.maintenance_cost_per_mile
            + self.config.activity_driver_stipend
        )

    def cost_per_student(self, start: date, end: date) -> CostPerStudentMetrics:
        route_costs = 0.0
        student_days = 0
        sports_costs = 0.0
        sports_students = 0
        field_costs = 0.0
        field_students = 0

        for day in iter_days(start, end, self.config.max_range_days):
            for route in self.data.get_routes_by_date(day):
                route_costs += self.route_cost(route_miles(route))
                student_days += route_riders(route)

            for activity in self.data.get_activities_by_date(day):
                # "Sports Trip" is a sports activity, not a field trip
                if activity.type_contains("Sports"):
                    sports_costs += self.trip_cost(SPORTS_TRIP_MILES)
                    sports_students += SPORTS_TRIP_STUDENTS
                elif activity.type_contains("Field") or activity.type_contains("Trip"):
                    field_costs += self.trip_cost(FIELD_TRIP_MILES)
                    field_students += FIELD_TRIP_STUDENTS

        return CostPerStudentMetrics(
            start_date=start,
            end_date=end,
            route_cost_per_student_per_day=(
                round(route_costs / student_days, 2) if student_days else 0.0
            ),
            sports_cost_per_student=(
                round(sports_costs / sports_students, 2) if sports_students else 0.0
            ),
            field_trip_cost_per_student=(
                round(field_costs / field_students, 2) if field_students else 0.0
            ),
            total_route_student_days=student_days,
            total_sports_students=sports_students,
            total_field_trip_students=field_students,
            total_route_costs=round(route_costs, 2),
            total_sports_costs=round(sports_costs, 2),
            total_field_trip_costs=round(field_costs, 2),
        )
