"""Helper functions for mileage, cost and score calculations."""

from datetime import date
from typing import Iterable, Optional, Sequence, Tuple

from .status import HealthStatus, PerformanceRating

DEFAULT_BUS_MPG = 6.0
DEFAULT_FUEL_PRICE = 3.50

# (upper bound inclusive, score) pairs, checked in order
AGE_SCORE_STEPS = ((2, 100), (5, 90), (10, 75), (15, 60), (20, 40))
AGE_SCORE_FLOOR = 20
MILEAGE_SCORE_STEPS = (
    (50000, 100),
    (100000, 85),
    (150000, 70),
    (200000, 55),
    (300000, 40),
)
MILEAGE_SCORE_FLOOR = 25
COST_SCORE_STEPS = ((200, 100), (500, 85), (1000, 70), (2000, 55))
COST_SCORE_FLOOR = 30

# Weights in percent; integer arithmetic keeps exact .5 ties for round()
HEALTH_WEIGHTS = {
    "compliance": 25,
    "age": 15,
    "mileage": 20,
    "reliability": 30,
    "cost_efficiency": 10,
}


def leg_miles(begin: Optional[float], end: Optional[float]) -> float:
    """
    Miles driven on one leg.

    Zero when either reading is missing or the end reading does not
    exceed the begin reading.
    """
    if begin is None or end is None or end <= begin:
        return 0.0
    return float(end - begin)


def estimate_fuel_cost(
    miles: float,
    mpg: float = DEFAULT_BUS_MPG,
    price_per_gallon: float = DEFAULT_FUEL_PRICE,
) -> float:
    """Fuel cost for a distance at a fixed economy and price."""
    if miles <= 0:
        return 0.0
    gallons = miles / mpg
    return round(gallons * price_per_gallon, 2)


def efficiency_score(total_miles: float, total_riders: int) -> float:
    """
    Route efficiency heuristic in [0, 100].

    Base 50, plus up to 30 for rider density, minus 20 for long routes
    (over 50 miles) carrying fewer than 10 riders.
    """
    if total_miles <= 0:
        return 0.0
    rider_density = total_riders / max(total_miles, 1)
    rider_bonus = min(rider_density * 20, 30)
    length_penalty = 20 if total_miles > 50 and total_riders < 10 else 0
    score = 50.0 + rider_bonus - length_penalty
    return max(0.0, min(100.0, score))


def step_score(value: float, steps: Sequence[Tuple[float, int]], floor: int) -> int:
    """Score of the first step whose bound is >= value, else floor."""
    for bound, score in steps:
        if value <= bound:
            return score
    return floor


def age_score(year: int, today: date) -> int:
    return step_score(today.year - year, AGE_SCORE_STEPS, AGE_SCORE_FLOOR)


def mileage_score(miles: float) -> int:
    return step_score(int(miles), MILEAGE_SCORE_STEPS, MILEAGE_SCORE_FLOOR)


def cost_efficiency_score(average_cost: float) -> int:
    return step_score(average_cost, COST_SCORE_STEPS, COST_SCORE_FLOOR)


def overall_health_score(
    compliance: int, age: int, mileage: int, reliability: int, cost_efficiency: int
) -> int:
    """Weighted composite of the five component scores."""
    weighted = (
        compliance * HEALTH_WEIGHTS["compliance"]
        + age * HEALTH_WEIGHTS["age"]
        + mileage * HEALTH_WEIGHTS["mileage"]
        + reliability * HEALTH_WEIGHTS["reliability"]
        + cost_efficiency * HEALTH_WEIGHTS["cost_efficiency"]
    )
    return max(0, min(100, round(weighted / 100)))


def health_status(score: int) -> HealthStatus:
    if score >= 85:
        return HealthStatus.EXCELLENT
    if score >= 70:
        return HealthStatus.GOOD
    if score >= 55:
        return HealthStatus.FAIR
    if score >= 40:
        return HealthStatus.POOR
    return HealthStatus.CRITICAL


def performance_rating(score: float) -> PerformanceRating:
    if score >= 80:
        return PerformanceRating.EXCELLENT
    if score >= 70:
        return PerformanceRating.GOOD
    if score >= 60:
        return PerformanceRating.AVERAGE
    if score >= 50:
        return PerformanceRating.BELOW_AVERAGE
    return PerformanceRating.NEEDS_IMPROVEMENT


def miles_since(current_miles: float, last_odometer: Optional[float]) -> float:
    """
    Miles driven since a service.

    Without an odometer reading on the last service, the full current
    mileage counts (never serviced = maximally overdue).
    """
    if last_odometer is None:
        return current_miles
    return current_miles - last_odometer


def contains_any(text: Optional[str], keywords: Iterable[str]) -> bool:
    """Case-insensitive check for any keyword inside text."""
    if not text:
        return False
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)
