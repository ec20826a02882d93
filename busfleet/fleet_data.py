"""FleetData - in-memory read access to fleet records.

The analytics engines only call the methods below, so any object that
provides them (a database-backed repository, a test double) can stand in
for FleetData.
"""

from datetime import date
from typing import List, Optional

from .activity import Activity
from .driver import Driver
from .fuel_record import FuelRecord
from .maintenance_record import MaintenanceRecord
from .route import Route
from .vehicle import Vehicle


class FleetData:
    """Collections of vehicles, drivers and their records."""

    def __init__(
        self,
        vehicles: Optional[List[Vehicle]] = None,
        drivers: Optional[List[Driver]] = None,
        maintenance: Optional[List[MaintenanceRecord]] = None,
        fuel: Optional[List[FuelRecord]] = None,
        routes: Optional[List[Route]] = None,
        activities: Optional[List[Activity]] = None,
    ):
        self.vehicles = vehicles or []
        self.drivers = drivers or []
        self.maintenance = maintenance or []
        self.fuel = fuel or []
        self.routes = routes or []
        self.activities = activities or []

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.vehicle_id == vehicle_id:
                return vehicle
        return None

    def get_vehicles(self) -> List[Vehicle]:
        return list(self.vehicles)

    def get_driver(self, driver_id: int) -> Optional[Driver]:
        for driver in self.drivers:
            if driver.driver_id == driver_id:
                return driver
        return None

    def get_drivers(self) -> List[Driver]:
        return list(self.drivers)

    def get_maintenance_by_vehicle(self, vehicle_id: int) -> List[MaintenanceRecord]:
        return [m for m in self.maintenance if m.vehicle_id == vehicle_id]

    def get_fuel_by_vehicle(self, vehicle_id: int) -> List[FuelRecord]:
        return [f for f in self.fuel if f.vehicle_id == vehicle_id]

    def get_routes(self) -> List[Route]:
        return list(self.routes)

    def get_routes_by_date(self, day: date) -> List[Route]:
        return [r for r in self.routes if r.date == day]

    def get_activities_by_date(self, day: date) -> List[Activity]:
        return [a for a in self.activities if a.date == day]
