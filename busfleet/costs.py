"""Maintenance cost aggregation and trend analysis."""

from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional

from .date_range import validate_range
from .maintenance_record import MaintenanceRecord
from .predictor import MaintenancePredictor
from .results import MaintenanceCostAnalysis
from .status import CostTrend

TREND_THRESHOLD = 500
UNCATEGORIZED = "Other"


def record_cost(record: MaintenanceRecord) -> float:
    return record.cost if record.cost is not None else 0.0


def month_key(day: Optional[date]) -> str:
    """YYYY-MM bucket for a date; undated records bucket to 0000-00."""
    if day is None:
        return "0000-00"
    return f"{day.year:04d}-{day.month:02d}"


def projected_annual_cost(records: List[MaintenanceRecord]) -> float:
    """
    Annualize spend over the span between the first and last record.

    A span of zero days (single record, or all on one date) counts as a
    full year.
    """
    if not records:
        return 0.0
    dates = [m.date for m in records if m.date is not None]
    span = (max(dates) - min(dates)).days if dates else 0
    if span <= 0:
        span = 365
    total = sum(record_cost(m) for m in records)
    return total / span * 365


def cost_trend(records: List[MaintenanceRecord]) -> CostTrend:
    """Compare spend in the later half of the records with the earlier half."""
    if len(records) < 2:
        return CostTrend.INSUFFICIENT_DATA
    ordered = sorted(records, key=lambda m: (m.date is not None, m.date or date.min))
    half = len(ordered) // 2
    first = sum(record_cost(m) for m in ordered[:half])
    second = sum(record_cost(m) for m in ordered[half:])
    difference = second - first
    if difference > TREND_THRESHOLD:
        return CostTrend.INCREASING
    if difference < -TREND_THRESHOLD:
        return CostTrend.DECREASING
    return CostTrend.STABLE


class CostAnalyzer:
    """Summarizes a vehicle's maintenance spend over a period."""

    def __init__(self, data, predictor: Optional[MaintenancePredictor] = None):
        self.data = data
        self.predictor = predictor or MaintenancePredictor(data)

    def analyze(self, vehicle_id: int, start: date, end: date) -> MaintenanceCostAnalysis:
        vehicle = self.predictor.get_vehicle(vehicle_id)
        validate_range(start, end, max_days=None)

        records = [
            m for m in self.data.get_maintenance_by_vehicle(vehicle_id)
            if m.date is not None and start <= m.date <= end
        ]

        total = sum(record_cost(m) for m in records)
        by_category: Dict[str, float] = defaultdict(float)
        by_month: Dict[str, float] = defaultdict(float)
        for m in records:
            by_category[m.maintenance_type or UNCATEGORIZED] += record_cost(m)
            by_month[month_key(m.date)] += record_cost(m)

        return MaintenanceCostAnalysis(
            vehicle_id=vehicle_id,
            registration_number=vehicle.name,
            period_start=start,
            period_end=end,
            total_cost=total,
            average_cost_per_service=total / len(records) if records else 0.0,
            service_count=len(records),
            cost_by_category=dict(by_category),
            monthly_costs=dict(sorted(by_month.items())),
            projected_annual_cost=projected_annual_cost(records),
            cost_trend=cost_trend(records),
        )
