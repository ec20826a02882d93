"""Fleet-wide sweep for urgent and critical maintenance."""

import logging
from datetime import date, timedelta
from typing import List, Optional

from .predictor import INSPECTION_INTERVAL_DAYS, MaintenancePredictor
from .results import AlertSweep, MaintenanceAlert
from .status import AlertSeverity, MaintenancePriority

logger = logging.getLogger(__name__)

URGENT_WINDOW_DAYS = 7
INSPECTION_COST = 150.0


class AlertGenerator:
    """Turns predictions for every vehicle into a sorted alert list."""

    def __init__(self, data, predictor: Optional[MaintenancePredictor] = None):
        self.data = data
        self.predictor = predictor or MaintenancePredictor(data)

    @property
    def today(self) -> date:
        return self.predictor.today

    def sweep(self) -> AlertSweep:
        """
        Scan the whole fleet.

        A vehicle whose prediction raises is logged, recorded in
        ``skipped_vehicle_ids`` and left out; the sweep continues.
        Alerts are ordered most severe first, then by due date.
        """
        today = self.today
        alerts: List[MaintenanceAlert] = []
        skipped: List[int] = []

        for vehicle in self.data.get_vehicles():
            try:
                predictions = self.predictor.predict(vehicle.vehicle_id)
            except Exception as exc:
                logger.warning(
                    "Skipping vehicle %s in alert sweep: %s", vehicle.vehicle_id, exc
                )
                skipped.append(vehicle.vehicle_id)
                continue

            urgent_cutoff = today + timedelta(days=URGENT_WINDOW_DAYS)
            for prediction in predictions:
                critical = prediction.priority == MaintenancePriority.CRITICAL
                urgent = (
                    prediction.priority == MaintenancePriority.HIGH
                    and prediction.predicted_date <= urgent_cutoff
                )
                if not (critical or urgent):
                    continue
                alerts.append(
                    MaintenanceAlert(
                        vehicle_id=vehicle.vehicle_id,
                        registration_number=vehicle.name,
                        severity=AlertSeverity.CRITICAL if critical else AlertSeverity.URGENT,
                        message=f"{prediction.maintenance_type} due for {vehicle.name}",
                        due_date=prediction.predicted_date,
                        estimated_cost=prediction.estimated_cost,
                    )
                )

            if vehicle.last_inspection_date is not None:
                days = (today - vehicle.last_inspection_date).days
                if days > INSPECTION_INTERVAL_DAYS:
                    alerts.append(
                        MaintenanceAlert(
                            vehicle_id=vehicle.vehicle_id,
                            registration_number=vehicle.name,
                            severity=AlertSeverity.CRITICAL,
                            message=(
                                "Annual inspection overdue by "
                                f"{days - INSPECTION_INTERVAL_DAYS} days"
                            ),
                            due_date=vehicle.last_inspection_date
                            + timedelta(days=INSPECTION_INTERVAL_DAYS),
                            estimated_cost=INSPECTION_COST,
                        )
                    )

        alerts.sort(key=lambda a: (-a.severity.value, a.due_date))
        return AlertSweep(alerts=alerts, skipped_vehicle_ids=skipped)

    def sweep_all(self) -> List[MaintenanceAlert]:
        return self.sweep().alerts
