"""Exceptions raised by the analytics engines."""

from datetime import date
from typing import Optional


class FleetAnalyticsError(Exception):
    """Base class for all analytics errors."""


class NotFound(FleetAnalyticsError):
    """An id does not resolve to a vehicle or driver."""

    def __init__(self, kind: str, entity_id):
        super().__init__(f"{kind} with ID {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class InvalidRange(FleetAnalyticsError):
    """A date range is inverted or longer than the iteration cap."""

    def __init__(self, start: date, end: date, reason: Optional[str] = None):
        message = f"Invalid date range {start.isoformat()} .. {end.isoformat()}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.start = start
        self.end = end


class ComputationFailure(FleetAnalyticsError):
    """Unexpected error while computing a derived metric."""
