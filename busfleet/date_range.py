"""Bounded day-by-day iteration over date ranges."""

import logging
import threading
import time
from datetime import date, timedelta
from typing import Callable, Iterator, Optional

from .errors import InvalidRange

logger = logging.getLogger(__name__)

MAX_RANGE_DAYS = 365


class CancellationToken:
    """
    Cooperative stop signal for long loops.

    Trips when ``cancel()`` is called or, if a timeout is given, once
    that many seconds have passed since construction.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._event = threading.Event()
        self._clock = clock
        self._deadline = clock() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and self._clock() >= self._deadline:
            self._event.set()
            return True
        return False


def validate_range(start: date, end: date, max_days: Optional[int] = MAX_RANGE_DAYS) -> None:
    """Raise InvalidRange for inverted ranges or spans over max_days."""
    if start > end:
        raise InvalidRange(start, end, "start is after end")
    if max_days is not None and (end - start).days > max_days:
        raise InvalidRange(start, end, f"span exceeds {max_days} days")


def iter_days(
    start: date,
    end: date,
    max_days: int = MAX_RANGE_DAYS,
    token: Optional[CancellationToken] = None,
) -> Iterator[date]:
    """
    Iterate each day from start to end inclusive.

    The range is validated eagerly, before an iterator is returned. At
    most ``min(days_in_range + 1, max_days)`` days are produced. When a
    token is given, iteration stops quietly as soon as it is cancelled;
    callers detect that through the token.
    """
    validate_range(start, end, max_days)
    limit = min((end - start).days + 1, max_days)
    if limit < (end - start).days + 1:
        logger.warning(
            "Date range %s..%s truncated to %d days", start, end, limit
        )
    return _walk(start, limit, token)


def _walk(
    start: date, limit: int, token: Optional[CancellationToken]
) -> Iterator[date]:
    current = start
    for _ in range(limit):
        if token is not None and token.cancelled:
            return
        yield current
        current += timedelta(days=1)
