"""YAML loading utilities for fleet data files."""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .activity import Activity
from .driver import Driver
from .fleet_data import FleetData
from .fuel_record import FuelRecord
from .maintenance_record import MaintenanceRecord
from .route import Leg, Route
from .vehicle import Vehicle


def parse_date(value: Any) -> Optional[date]:
    """Accept YAML dates, datetimes or ISO strings; None stays None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_vehicle(dct: Dict[str, Any]) -> Vehicle:
    return Vehicle(
        dct["id"],
        dct.get("registrationNumber"),
        dct.get("year"),
        dct.get("status"),
        parse_date(dct.get("lastInspectionDate")),
        dct.get("capacity"),
    )


def _parse_driver(dct: Dict[str, Any]) -> Driver:
    return Driver(dct["id"], dct.get("name") or "")


def _parse_maintenance(dct: Dict[str, Any]) -> MaintenanceRecord:
    return MaintenanceRecord(
        dct.get("vehicleId"),
        parse_date(dct.get("date")),
        dct.get("maintenanceType"),
        dct.get("odometer"),
        dct.get("cost"),
        dct.get("notes"),
    )


def _parse_fuel(dct: Dict[str, Any]) -> FuelRecord:
    return FuelRecord(
        dct.get("vehicleId"),
        parse_date(dct.get("date")),
        dct.get("odometer"),
        dct.get("cost"),
    )


def _parse_leg(dct: Optional[Dict[str, Any]]) -> Leg:
    dct = dct or {}
    return Leg(
        dct.get("vehicleId"),
        dct.get("driverId"),
        dct.get("beginMiles"),
        dct.get("endMiles"),
        dct.get("riders"),
    )


def _parse_route(dct: Dict[str, Any]) -> Route:
    return Route(
        dct.get("id"),
        parse_date(dct.get("date")),
        dct.get("name"),
        _parse_leg(dct.get("am")),
        _parse_leg(dct.get("pm")),
    )


def _parse_activity(dct: Dict[str, Any]) -> Activity:
    return Activity(
        parse_date(dct.get("date")),
        dct.get("activityType"),
        dct.get("vehicleId"),
        dct.get("driverId"),
    )


def parse_fleet(data: Optional[Dict[str, Any]]) -> FleetData:
    """Build FleetData from an already-parsed YAML mapping."""
    data = data or {}
    return FleetData(
        vehicles=[_parse_vehicle(d) for d in data.get("vehicles") or []],
        drivers=[_parse_driver(d) for d in data.get("drivers") or []],
        maintenance=[_parse_maintenance(d) for d in data.get("maintenance") or []],
        fuel=[_parse_fuel(d) for d in data.get("fuel") or []],
        routes=[_parse_route(d) for d in data.get("routes") or []],
        activities=[_parse_activity(d) for d in data.get("activities") or []],
    )


def load_fleet(filename: Union[str, Path]) -> FleetData:
    """Load fleet data from a YAML file."""
    with open(filename, "rb") as fp:
        return parse_fleet(yaml.load(fp, Loader=yaml.SafeLoader))
