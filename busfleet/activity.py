"""Activity class for non-route trips (sports, field trips)."""
from datetime import date
from typing import Optional


class Activity:
    """A scheduled activity trip."""

    def __init__(
            self,
            date: Optional[date] = None,
            activity_type: Optional[str] = None,
            vehicle_id: Optional[int] = None,
            driver_id: Optional[int] = None,
    ):
        self.date = date
        self.activity_type = activity_type
        self.vehicle_id = vehicle_id
        self.driver_id = driver_id

    def type_contains(self, text: str) -> bool:
        if not self.activity_type:
            return False
        return text.lower() in self.activity_type.lower()
