"""Composite vehicle health scoring."""

from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from .calculations import (
    age_score,
    contains_any,
    cost_efficiency_score,
    health_status,
    mileage_score,
    overall_health_score,
)
from .maintenance_record import MaintenanceRecord
from .predictor import MaintenancePredictor
from .results import VehicleHealthScore

BREAKDOWN_KEYWORDS = ("breakdown", "emergency", "tow", "failure")

# Scores used when there is no history to judge from
NEUTRAL_COMPLIANCE_SCORE = 50
NEUTRAL_RELIABILITY_SCORE = 70
NEUTRAL_COST_EFFICIENCY_SCORE = 70


class HealthScorer:
    """Scores a vehicle on compliance, age, mileage, reliability and cost."""

    def __init__(
        self,
        data,
        predictor: Optional[MaintenancePredictor] = None,
        as_of: Optional[date] = None,
    ):
        self.data = data
        self.predictor = predictor or MaintenancePredictor(data, as_of=as_of)
        self._as_of = as_of

    @property
    def today(self) -> date:
        return self._as_of or date.today()

    def recent(self, history: List[MaintenanceRecord]) -> List[MaintenanceRecord]:
        """Records dated within the trailing 12 months."""
        cutoff = self.today - relativedelta(months=12)
        return [m for m in history if m.date is not None and m.date >= cutoff]

    def compliance_score(self, history: List[MaintenanceRecord]) -> int:
        if not history:
            return NEUTRAL_COMPLIANCE_SCORE
        score = min(100, len(self.recent(history)) * 25)
        return max(10, score)

    def reliability_score(self, history: List[MaintenanceRecord]) -> int:
        recent = self.recent(history)
        if not recent:
            return NEUTRAL_RELIABILITY_SCORE
        breakdowns = sum(1 for m in recent if contains_any(m.notes, BREAKDOWN_KEYWORDS))
        return round((1 - breakdowns / len(recent)) * 100)

    def cost_score(self, history: List[MaintenanceRecord]) -> int:
        costs = [m.cost for m in self.recent(history) if m.cost is not None]
        if not costs:
            return NEUTRAL_COST_EFFICIENCY_SCORE
        return cost_efficiency_score(sum(costs) / len(costs))

    def score(self, vehicle_id: int) -> VehicleHealthScore:
        """Composite health score and recommendations for a vehicle."""
        vehicle = self.predictor.get_vehicle(vehicle_id)
        history = self.data.get_maintenance_by_vehicle(vehicle_id)
        mileage = self.predictor.current_mileage(vehicle_id)

        compliance = self.compliance_score(history)
        age = age_score(vehicle.year or self.today.year, self.today)
        miles = mileage_score(mileage)
        reliability = self.reliability_score(history)
        cost = self.cost_score(history)
        overall = overall_health_score(compliance, age, miles, reliability, cost)

        recommendations = []
        if compliance < 60:
            recommendations.append("Increase preventive maintenance frequency")
        if reliability < 70:
            recommendations.append("Focus on addressing recurring issues")
        if cost < 60:
            recommendations.append(
                "Review maintenance costs - consider different service providers"
            )
        if overall < 50:
            recommendations.append("Consider vehicle replacement evaluation")

        return VehicleHealthScore(
            vehicle_id=vehicle_id,
            registration_number=vehicle.name,
            calculated_date=self.today,
            maintenance_compliance_score=compliance,
            age_score=age,
            mileage_score=miles,
            reliability_score=reliability,
            cost_efficiency_score=cost,
            overall_score=overall,
            health_status=health_status(overall),
            recommendations=tuple(recommendations),
        )
