"""MaintenanceRecord class for completed service events."""
from datetime import date
from typing import Optional


class MaintenanceRecord:
    """A record of maintenance performed on a vehicle."""

    def __init__(
            self,
            vehicle_id: Optional[int] = None,
            date: Optional[date] = None,
            maintenance_type: Optional[str] = None,
            odometer: Optional[float] = None,
            cost: Optional[float] = None,
            notes: Optional[str] = None,
    ):
        self.vehicle_id = vehicle_id
        self.date = date
        self.maintenance_type = maintenance_type
        self.odometer = odometer
        self.cost = cost
        self.notes = notes

    def type_contains(self, text: str) -> bool:
        """Case-insensitive substring match on the maintenance type."""
        if not self.maintenance_type:
            return False
        return text.lower() in self.maintenance_type.lower()
