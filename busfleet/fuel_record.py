"""FuelRecord class for fill-ups."""
from datetime import date
from typing import Optional


class FuelRecord:
    """A fuel purchase, carrying the odometer reading at fill-up."""

    def __init__(
            self,
            vehicle_id: Optional[int] = None,
            date: Optional[date] = None,
            odometer: Optional[float] = None,
            cost: Optional[float] = None,
    ):
        self.vehicle_id = vehicle_id
        self.date = date
        self.odometer = odometer
        self.cost = cost
