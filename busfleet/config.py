"""Analytics configuration loaded from YAML and the environment."""

import logging
import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "BUSFLEET_"


@dataclass(frozen=True)
class AnalyticsConfig:
    """Cost constants, iteration limits and logging level."""

    fuel_price_per_gallon: float = 3.50
    bus_mpg: float = 6.0
    maintenance_cost_per_mile: float = 0.20
    driver_hourly_rate: float = 16.50
    driver_hours_per_route: float = 2.0
    activity_driver_stipend: float = 50.0
    max_range_days: int = 365
    fleet_summary_timeout_seconds: float = 120.0
    default_vehicle_capacity: int = 72
    log_level: str = "WARNING"


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw value to the type of the named field."""
    field_type = {f.name: f.type for f in fields(AnalyticsConfig)}[name]
    if field_type in (float, "float"):
        return float(value)
    if field_type in (int, "int"):
        return int(value)
    return str(value)


def _apply(config: AnalyticsConfig, values: Dict[str, Any], source: str) -> AnalyticsConfig:
    known = {f.name for f in fields(AnalyticsConfig)}
    updates = {}
    for key, value in values.items():
        name = _snake_case(key)
        if name not in known:
            raise ValueError(f"Unknown config key '{key}' in {source}")
        updates[name] = _coerce(name, value)
    return replace(config, **updates)


def load_config(
    filename: Optional[Union[str, Path]] = None,
    environ: Optional[Dict[str, str]] = None,
) -> AnalyticsConfig:
    """
    Build the configuration.

    Defaults are overridden by the optional YAML file (camelCase or
    snake_case keys), then by BUSFLEET_* environment variables.
    """
    config = AnalyticsConfig()

    if filename is not None:
        with open(filename, "r") as fp:
            data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {filename} must contain a mapping")
        config = _apply(config, data, str(filename))

    environ = os.environ if environ is None else environ
    env_values = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
    }
    if env_values:
        config = _apply(config, env_values, "environment")

    logger.debug("Loaded analytics config: %s", config)
    return config
