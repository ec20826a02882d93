"""Maintenance prediction from mileage and time since last service."""

import logging
from datetime import date, timedelta
from typing import List, Optional

from .calculations import miles_since
from .date_range import validate_range
from .errors import NotFound
from .maintenance_record import MaintenanceRecord
from .results import MaintenancePrediction, MaintenanceRecommendation
from .status import MaintenancePriority
from .vehicle import Vehicle

logger = logging.getLogger(__name__)

OIL_CHANGE_INTERVAL_MILES = 5000
OIL_CHANGE_INTERVAL_DAYS = 180
OIL_CHANGE_GRACE_MILES = 1000
OIL_CHANGE_GRACE_DAYS = 30
# Assumed age of the last oil change when none is on record
OIL_CHANGE_UNKNOWN_DAYS = 365
BRAKE_INTERVAL_MILES = 25000
TIRE_INTERVAL_MILES = 8000
ENGINE_INTERVAL_MILES = 100000
INSPECTION_INTERVAL_DAYS = 365
INSPECTION_WARNING_DAYS = 330


def _date_key(record) -> tuple:
    # Undated records sort before every dated one
    return (record.date is not None, record.date or date.min)


def last_of_type(
    history: List[MaintenanceRecord], type_text: str
) -> Optional[MaintenanceRecord]:
    """Most recent record whose type contains type_text (case-insensitive)."""
    matching = [m for m in history if m.type_contains(type_text)]
    if not matching:
        return None
    return max(matching, key=_date_key)


class MaintenancePredictor:
    """
    Predicts the next service of each maintenance type for a vehicle.

    Five independent checks run per vehicle (oil change, brakes, tires,
    annual inspection, major engine service); each yields at most one
    prediction.
    """

    def __init__(self, data, as_of: Optional[date] = None):
        self.data = data
        self._as_of = as_of

    @property
    def today(self) -> date:
        """Reference date for predictions, defaults to today."""
        return self._as_of or date.today()

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        if vehicle_id is None or vehicle_id <= 0:
            raise NotFound("Vehicle", vehicle_id)
        vehicle = self.data.get_vehicle(vehicle_id)
        if vehicle is None:
            raise NotFound("Vehicle", vehicle_id)
        return vehicle

    def current_mileage(self, vehicle_id: int) -> float:
        """
        Latest known odometer reading for a vehicle.

        Uses the most recent fuel record with a reading, else the higher
        end-mileage of the vehicle's most recent route, else 0.
        """
        fuel = [
            f for f in self.data.get_fuel_by_vehicle(vehicle_id)
            if f.odometer is not None
        ]
        if fuel:
            return float(max(fuel, key=_date_key).odometer)

        routes = [r for r in self.data.get_routes() if r.uses_vehicle(vehicle_id)]
        if routes:
            latest = max(routes, key=_date_key)
            return float(max(latest.am.end_miles or 0, latest.pm.end_miles or 0))

        return 0.0

    def predict(self, vehicle_id: int) -> List[MaintenancePrediction]:
        """All due or upcoming services for a vehicle, soonest first."""
        vehicle = self.get_vehicle(vehicle_id)
        history = self.data.get_maintenance_by_vehicle(vehicle_id)
        mileage = self.current_mileage(vehicle_id)

        candidates = [
            self._predict_oil_change(vehicle_id, last_of_type(history, "Oil Change"), mileage),
            self._predict_brakes(vehicle_id, last_of_type(history, "Brake"), mileage),
            self._predict_tires(vehicle_id, last_of_type(history, "Tire"), mileage),
            self._predict_inspection(vehicle),
            self._predict_engine(vehicle_id, last_of_type(history, "Engine"), mileage),
        ]
        predictions = [p for p in candidates if p is not None]
        return sorted(predictions, key=lambda p: p.predicted_date)

    def fleet_schedule(self, start: date, end: date) -> List[MaintenanceRecommendation]:
        """
        Predictions across the fleet that fall between start and end.

        Vehicles whose prediction fails are logged and skipped. Results
        are ordered most urgent first, then by date.
        """
        validate_range(start, end, max_days=None)
        recommendations = []
        for vehicle in self.data.get_vehicles():
            try:
                predictions = self.predict(vehicle.vehicle_id)
                mileage = self.current_mileage(vehicle.vehicle_id)
            except Exception as exc:
                logger.warning(
                    "Skipping vehicle %s in maintenance schedule: %s",
                    vehicle.vehicle_id,
                    exc,
                )
                continue
            for prediction in predictions:
                if not start <= prediction.predicted_date <= end:
                    continue
                recommendations.append(
                    MaintenanceRecommendation(
                        vehicle_id=vehicle.vehicle_id,
                        registration_number=vehicle.name,
                        maintenance_type=prediction.maintenance_type,
                        recommended_date=prediction.predicted_date,
                        priority=prediction.priority,
                        estimated_cost=prediction.estimated_cost,
                        reason=prediction.reason,
                        current_mileage=mileage,
                    )
                )
        return sorted(
            recommendations,
            key=lambda r: (-r.priority.value, r.recommended_date),
        )

    # -------------------------------------------------------------------------
    # Per-type checks
    # -------------------------------------------------------------------------

    def _predict_oil_change(
        self, vehicle_id: int, last: Optional[MaintenanceRecord], mileage: float
    ) -> Optional[MaintenancePrediction]:
        miles = miles_since(mileage, last.odometer if last else None)
        if last is not None and last.date is not None:
            days = (self.today - last.date).days
        else:
            days = OIL_CHANGE_UNKNOWN_DAYS

        if miles < OIL_CHANGE_INTERVAL_MILES and days < OIL_CHANGE_INTERVAL_DAYS:
            return None

        overdue = (
            miles > OIL_CHANGE_INTERVAL_MILES + OIL_CHANGE_GRACE_MILES
            or days > OIL_CHANGE_INTERVAL_DAYS + OIL_CHANGE_GRACE_DAYS
        )
        priority = MaintenancePriority.HIGH if overdue else MaintenancePriority.MEDIUM
        return MaintenancePrediction(
            vehicle_id=vehicle_id,
            maintenance_type="Oil Change",
            predicted_date=self.today + timedelta(days=7 if overdue else 14),
            priority=priority,
            estimated_cost=75.0,
            reason=f"Due - {miles:,.0f} miles since last service",
            based_on_mileage=True,
            predicted_mileage=int(mileage),
        )

    def _predict_brakes(
        self, vehicle_id: int, last: Optional[MaintenanceRecord], mileage: float
    ) -> Optional[MaintenancePrediction]:
        miles = miles_since(mileage, last.odometer if last else None)
        if miles < BRAKE_INTERVAL_MILES * 0.8:
            return None

        overdue = miles >= BRAKE_INTERVAL_MILES
        return MaintenancePrediction(
            vehicle_id=vehicle_id,
            maintenance_type="Brake Inspection",
            predicted_date=self.today + timedelta(days=14 if overdue else 30),
            priority=MaintenancePriority.HIGH if overdue else MaintenancePriority.MEDIUM,
            estimated_cost=200.0,
            reason=f"Brake service due - {miles:,.0f} miles since last service",
            based_on_mileage=True,
            predicted_mileage=int(mileage),
        )

    def _predict_tires(
        self, vehicle_id: int, last: Optional[MaintenanceRecord], mileage: float
    ) -> Optional[MaintenancePrediction]:
        miles = miles_since(mileage, last.odometer if last else None)
        if miles < TIRE_INTERVAL_MILES:
            return None

        return MaintenancePrediction(
            vehicle_id=vehicle_id,
            maintenance_type="Tire Rotation/Inspection",
            predicted_date=self.today + timedelta(days=21),
            priority=MaintenancePriority.MEDIUM,
            estimated_cost=100.0,
            reason=f"Tire rotation due - {miles:,.0f} miles since last service",
            based_on_mileage=True,
            predicted_mileage=int(mileage),
        )

    def _predict_inspection(self, vehicle: Vehicle) -> Optional[MaintenancePrediction]:
        # Calendar-anchored: never inferred without a known inspection date
        if vehicle.last_inspection_date is None:
            return None

        days = (self.today - vehicle.last_inspection_date).days
        if days < INSPECTION_WARNING_DAYS:
            return None

        priority = (
            MaintenancePriority.CRITICAL
            if days >= INSPECTION_INTERVAL_DAYS
            else MaintenancePriority.HIGH
        )
        return MaintenancePrediction(
            vehicle_id=vehicle.vehicle_id,
            maintenance_type="Annual Inspection",
            predicted_date=vehicle.last_inspection_date
            + timedelta(days=INSPECTION_INTERVAL_DAYS),
            priority=priority,
            estimated_cost=150.0,
            reason="Annual inspection due",
            based_on_mileage=False,
        )

    def _predict_engine(
        self, vehicle_id: int, last: Optional[MaintenanceRecord], mileage: float
    ) -> Optional[MaintenancePrediction]:
        miles = miles_since(mileage, last.odometer if last else None)
        if miles < ENGINE_INTERVAL_MILES * 0.9:
            return None

        overdue = miles >= ENGINE_INTERVAL_MILES
        return MaintenancePrediction(
            vehicle_id=vehicle_id,
            maintenance_type="Major Engine Service",
            predicted_date=self.today + timedelta(days=30 if overdue else 90),
            priority=MaintenancePriority.HIGH if overdue else MaintenancePriority.LOW,
            estimated_cost=1500.0,
            reason=(
                f"Major engine service approaching - {miles:,.0f} miles "
                "since last service"
            ),
            based_on_mileage=True,
            predicted_mileage=int(mileage),
        )
