"""Vehicle class - a bus in the fleet."""

from datetime import date
from typing import Optional


class Vehicle:
    """Fleet vehicle identification and inspection state."""

    def __init__(
        self,
        vehicle_id: int,
        registration_number: Optional[str] = None,
        year: Optional[int] = None,
        status: Optional[str] = None,
        last_inspection_date: Optional[date] = None,
        capacity: Optional[int] = None,
    ):
        self.vehicle_id = vehicle_id
        self.registration_number = registration_number
        self.year = year
        self.status = status
        self.last_inspection_date = last_inspection_date
        self.capacity = capacity

    @property
    def name(self) -> str:
        """Registration number, or a placeholder when unset."""
        return self.registration_number or "Unknown"

    @property
    def is_active(self) -> bool:
        return (self.status or "").strip().lower() == "active"

    @property
    def is_out_of_service(self) -> bool:
        return (self.status or "").strip().lower() == "out of service"
