#!/usr/bin/env python3
"""
Unified CLI for school bus fleet analytics.

Commands:
  predict           - Predicted maintenance for a vehicle
  health            - Composite health score for a vehicle
  costs             - Maintenance cost analysis for a vehicle
  alerts            - Urgent and critical maintenance across the fleet
  schedule          - Fleet maintenance schedule for a date window
  routes            - Route efficiency metrics for a date range
  optimize          - Route optimization suggestions for a day
  driver            - Driver performance over a date range
  fleet             - Fleet analytics summary over a date range
  cost-per-student  - Per-student transport costs over a date range
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from tabulate import tabulate

from busfleet import (
    AlertGenerator,
    CostAnalyzer,
    CostPerStudentCalculator,
    FleetAggregator,
    FleetAnalyticsError,
    HealthScorer,
    MaintenancePredictor,
    RouteEfficiencyCalculator,
    RouteOptimizationAdvisor,
    load_config,
    load_fleet,
)
from busfleet.results import (
    MaintenanceAlert,
    MaintenancePrediction,
    MaintenanceRecommendation,
    RouteEfficiencyMetrics,
    RouteOptimizationSuggestion,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_miles(miles: Optional[float]) -> str:
    """Format mileage for display."""
    return f"{miles:,.0f}" if miles is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return f"${cost:,.2f}" if cost is not None else "-"


def format_label(value) -> str:
    """Enum member name as a title-cased label (DUE_SOON -> Due Soon)."""
    return value.name.replace("_", " ").title()


def format_amounts(amounts: Dict[str, float]) -> List[List[str]]:
    return [[key, format_cost(value)] for key, value in amounts.items()]


# =============================================================================
# Table builders
# =============================================================================


def make_prediction_table(predictions: List[MaintenancePrediction]) -> List[List[str]]:
    return [
        [
            p.maintenance_type,
            p.predicted_date.isoformat(),
            format_label(p.priority),
            format_cost(p.estimated_cost),
            p.reason,
        ]
        for p in predictions
    ]


def make_alert_table(alerts: List[MaintenanceAlert]) -> List[List[str]]:
    return [
        [
            a.registration_number,
            format_label(a.severity),
            a.message,
            a.due_date.isoformat(),
            format_cost(a.estimated_cost),
        ]
        for a in alerts
    ]


def make_schedule_table(items: List[MaintenanceRecommendation]) -> List[List[str]]:
    return [
        [
            r.registration_number,
            r.maintenance_type,
            r.recommended_date.isoformat(),
            format_label(r.priority),
            format_cost(r.estimated_cost),
            format_miles(r.current_mileage),
        ]
        for r in items
    ]


def make_route_table(metrics: List[RouteEfficiencyMetrics]) -> List[List[str]]:
    return [
        [
            m.date.isoformat() if m.date else "-",
            m.route_name,
            format_miles(m.total_miles),
            str(m.total_riders),
            f"{m.miles_per_rider:.2f}",
            f"{m.efficiency_score:.1f}",
            format_cost(m.estimated_fuel_cost),
        ]
        for m in metrics
    ]


def make_suggestion_table(
    suggestions: List[RouteOptimizationSuggestion],
) -> List[List[str]]:
    return [
        [
            s.route_name,
            s.suggestion_type.value,
            format_label(s.priority),
            format_cost(s.potential_savings),
            s.description,
        ]
        for s in suggestions
    ]


# =============================================================================
# Command handlers
# =============================================================================


def cmd_predict(args, fleet, config):
    """Predicted maintenance for a vehicle."""
    predictions = MaintenancePredictor(fleet, as_of=args.as_of).predict(args.vehicle_id)
    if not predictions:
        print("No maintenance predicted.")
        return 0
    headers = ["Type", "Date", "Priority", "Cost", "Reason"]
    print(tabulate(make_prediction_table(predictions), headers=headers, tablefmt="simple"))
    return 0


def cmd_health(args, fleet, config):
    """Composite health score for a vehicle."""
    score = HealthScorer(fleet, as_of=args.as_of).score(args.vehicle_id)
    print(f"Vehicle: {score.registration_number}")
    print(f"Overall: {score.overall_score} ({format_label(score.health_status)})")
    print()
    rows = [
        ["Maintenance compliance", score.maintenance_compliance_score],
        ["Age", score.age_score],
        ["Mileage", score.mileage_score],
        ["Reliability", score.reliability_score],
        ["Cost efficiency", score.cost_efficiency_score],
    ]
    print(tabulate(rows, headers=["Component", "Score"], tablefmt="simple"))
    if score.recommendations:
        print()
        print("Recommendations:")
        for recommendation in score.recommendations:
            print(f"  {recommendation}")
    return 0


def cmd_costs(args, fleet, config):
    """Maintenance cost analysis for a vehicle."""
    analysis = CostAnalyzer(fleet).analyze(args.vehicle_id, args.start, args.end)
    print(f"Vehicle: {analysis.registration_number}")
    print(f"Period: {analysis.period_start} to {analysis.period_end}")
    print(f"Services: {analysis.service_count}")
    print(f"Total cost: {format_cost(analysis.total_cost)}")
    print(f"Average per service: {format_cost(analysis.average_cost_per_service)}")
    print(f"Projected annual cost: {format_cost(analysis.projected_annual_cost)}")
    print(f"Trend: {analysis.cost_trend.value}")
    if analysis.cost_by_category:
        print()
        print(tabulate(format_amounts(analysis.cost_by_category),
                       headers=["Category", "Cost"], tablefmt="simple"))
    if analysis.monthly_costs:
        print()
        print(tabulate(format_amounts(analysis.monthly_costs),
                       headers=["Month", "Cost"], tablefmt="simple"))
    return 0


def cmd_alerts(args, fleet, config):
    """Urgent and critical maintenance across the fleet."""
    predictor = MaintenancePredictor(fleet, as_of=args.as_of)
    sweep = AlertGenerator(fleet, predictor).sweep()
    if sweep.alerts:
        headers = ["Vehicle", "Severity", "Message", "Due", "Cost"]
        print(tabulate(make_alert_table(sweep.alerts), headers=headers, tablefmt="simple"))
    else:
        print("No alerts.")
    if sweep.skipped_vehicle_ids:
        skipped = ", ".join(str(v) for v in sweep.skipped_vehicle_ids)
        print()
        print(f"Skipped vehicles: {skipped}")
    return 0


def cmd_schedule(args, fleet, config):
    """Fleet maintenance schedule for a date window."""
    predictor = MaintenancePredictor(fleet, as_of=args.as_of)
    items = predictor.fleet_schedule(args.start, args.end)
    if not items:
        print("Nothing scheduled.")
        return 0
    headers = ["Vehicle", "Type", "Date", "Priority", "Cost", "Mileage"]
    print(tabulate(make_schedule_table(items), headers=headers, tablefmt="simple"))
    return 0


def cmd_routes(args, fleet, config):
    """Route efficiency metrics for a date range."""
    metrics = RouteEfficiencyCalculator(fleet, config).efficiency_range(args.start, args.end)
    if not metrics:
        print("No routes found.")
        return 0
    headers = ["Date", "Route", "Miles", "Riders", "Mi/Rider", "Score", "Fuel"]
    print(tabulate(make_route_table(metrics), headers=headers, tablefmt="simple",
                   disable_numparse=True))
    return 0


def cmd_optimize(args, fleet, config):
    """Route optimization suggestions for a day."""
    calculator = RouteEfficiencyCalculator(fleet, config)
    suggestions = RouteOptimizationAdvisor(fleet, calculator).suggest(args.day)
    if not suggestions:
        print("No suggestions.")
        return 0
    headers = ["Route", "Type", "Priority", "Savings", "Description"]
    print(tabulate(make_suggestion_table(suggestions), headers=headers, tablefmt="simple"))
    return 0


def cmd_driver(args, fleet, config):
    """Driver performance over a date range."""
    m = FleetAggregator(fleet, config).driver_performance(args.driver_id, args.start, args.end)
    rows = [
        ["Driver", m.name],
        ["Routes", m.total_routes],
        ["Miles", format_miles(m.total_miles)],
        ["Riders", m.total_riders],
        ["Avg miles/route", f"{m.average_miles_per_route:.2f}"],
        ["Avg riders/route", f"{m.average_riders_per_route:.1f}"],
        ["Efficiency", f"{m.overall_efficiency_score:.1f}"],
        ["Rating", format_label(m.performance_rating)],
    ]
    print(tabulate(rows, tablefmt="simple", disable_numparse=True))
    return 0


def cmd_fleet(args, fleet, config):
    """Fleet analytics summary over a date range."""
    s = FleetAggregator(fleet, config).fleet_summary(args.start, args.end)
    rows = [
        ["Routes", s.total_routes],
        ["Miles", format_miles(s.total_miles)],
        ["Riders", s.total_riders],
        ["Avg efficiency", f"{s.average_efficiency_score:.1f}"],
        ["Avg miles/rider", f"{s.average_miles_per_rider:.2f}"],
        ["Vehicle utilization", f"{s.vehicle_utilization_rate:.1f}%"],
        ["Active vehicles", s.active_vehicles],
        ["Out of service", s.out_of_service_vehicles],
        ["Est. fuel cost", format_cost(s.estimated_fuel_costs)],
    ]
    print(tabulate(rows, tablefmt="simple", disable_numparse=True))
    if not s.completed:
        print(f"(partial: {s.days_processed} days processed before timeout)")
    if s.top_performing_routes:
        print()
        print("Top routes:")
        for name in s.top_performing_routes:
            print(f"  {name}")
    return 0


def cmd_cost_per_student(args, fleet, config):
    """Per-student transport costs over a date range."""
    m = CostPerStudentCalculator(fleet, config).cost_per_student(args.start, args.end)
    rows = [
        ["Routes", format_cost(m.total_route_costs), m.total_route_student_days,
         format_cost(m.route_cost_per_student_per_day)],
        ["Sports trips", format_cost(m.total_sports_costs), m.total_sports_students,
         format_cost(m.sports_cost_per_student)],
        ["Field trips", format_cost(m.total_field_trip_costs), m.total_field_trip_students,
         format_cost(m.field_trip_cost_per_student)],
    ]
    headers = ["Category", "Total Cost", "Students", "Per Student"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    return 0


COMMANDS = {
    "predict": cmd_predict,
    "health": cmd_health,
    "costs": cmd_costs,
    "alerts": cmd_alerts,
    "schedule": cmd_schedule,
    "routes": cmd_routes,
    "optimize": cmd_optimize,
    "driver": cmd_driver,
    "fleet": cmd_fleet,
    "cost-per-student": cmd_cost_per_student,
}


# =============================================================================
# Main
# =============================================================================


def add_range_arguments(parser):
    parser.add_argument("--start", type=date.fromisoformat, required=True,
                        help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, required=True,
                        help="Last day, inclusive (YYYY-MM-DD)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="School bus fleet analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleet.yaml predict 12
  %(prog)s fleet.yaml --as-of 2025-03-01 health 12
  %(prog)s fleet.yaml costs 12 --start 2024-01-01 --end 2024-12-31
  %(prog)s fleet.yaml alerts
  %(prog)s fleet.yaml optimize 2025-02-14
  %(prog)s fleet.yaml fleet --start 2025-01-01 --end 2025-01-31
""",
    )
    parser.add_argument("fleet_file", type=Path, help="Path to fleet YAML file")
    parser.add_argument("--as-of", type=date.fromisoformat,
                        help="Reference date for predictions (default: today)")
    parser.add_argument("--config", type=Path, help="Path to analytics config YAML")

    subparsers = parser.add_subparsers(dest="command", required=True)

    predict_parser = subparsers.add_parser("predict", help="Predicted maintenance for a vehicle")
    predict_parser.add_argument("vehicle_id", type=int)

    health_parser = subparsers.add_parser("health", help="Health score for a vehicle")
    health_parser.add_argument("vehicle_id", type=int)

    costs_parser = subparsers.add_parser("costs", help="Maintenance cost analysis")
    costs_parser.add_argument("vehicle_id", type=int)
    add_range_arguments(costs_parser)

    subparsers.add_parser("alerts", help="Fleet-wide maintenance alerts")

    schedule_parser = subparsers.add_parser("schedule", help="Fleet maintenance schedule")
    add_range_arguments(schedule_parser)

    routes_parser = subparsers.add_parser("routes", help="Route efficiency metrics")
    add_range_arguments(routes_parser)

    optimize_parser = subparsers.add_parser("optimize", help="Route optimization suggestions")
    optimize_parser.add_argument("day", type=date.fromisoformat, help="Day (YYYY-MM-DD)")

    driver_parser = subparsers.add_parser("driver", help="Driver performance")
    driver_parser.add_argument("driver_id", type=int)
    add_range_arguments(driver_parser)

    fleet_parser = subparsers.add_parser("fleet", help="Fleet analytics summary")
    add_range_arguments(fleet_parser)

    cps_parser = subparsers.add_parser("cost-per-student", help="Per-student costs")
    add_range_arguments(cps_parser)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    config = load_config(args.config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    fleet = load_fleet(args.fleet_file)

    try:
        return COMMANDS[args.command](args, fleet, config)
    except FleetAnalyticsError as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
