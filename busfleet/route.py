"""Route and Leg classes for a day's bus route."""

from datetime import date
from typing import List, Optional


class Leg:
    """One half-day (AM or PM) run of a route."""

    def __init__(
        self,
        vehicle_id: Optional[int] = None,
        driver_id: Optional[int] = None,
        begin_miles: Optional[float] = None,
        end_miles: Optional[float] = None,
        riders: Optional[int] = None,
    ):
        self.vehicle_id = vehicle_id
        self.driver_id = driver_id
        self.begin_miles = begin_miles
        self.end_miles = end_miles
        self.riders = riders

    @property
    def has_mileage(self) -> bool:
        return self.begin_miles is not None and self.end_miles is not None

    @property
    def is_empty(self) -> bool:
        """True when the leg has no vehicle, no driver and no usable mileage."""
        return (
            self.vehicle_id is None
            and self.driver_id is None
            and not self.has_mileage
        )


class Route:
    """A route run on a given date, split into AM and PM legs."""

    def __init__(
        self,
        route_id: Optional[int] = None,
        date: Optional[date] = None,
        name: Optional[str] = None,
        am: Optional[Leg] = None,
        pm: Optional[Leg] = None,
    ):
        self.route_id = route_id
        self.date = date
        self.name = name
        self.am = am or Leg()
        self.pm = pm or Leg()

    @property
    def vehicle_ids(self) -> List[int]:
        """Distinct vehicle ids assigned to either leg, AM first."""
        ids = []
        for leg in (self.am, self.pm):
            if leg.vehicle_id is not None and leg.vehicle_id not in ids:
                ids.append(leg.vehicle_id)
        return ids

    def uses_driver(self, driver_id: int) -> bool:
        return driver_id in (self.am.driver_id, self.pm.driver_id)

    def uses_vehicle(self, vehicle_id: int) -> bool:
        return vehicle_id in (self.am.vehicle_id, self.pm.vehicle_id)
