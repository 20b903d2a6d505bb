from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Sequence

from gpstrips.core.distance import point_distance_km
from gpstrips.core.point import Point

def round_half_up(value: float, digits: int) -> float:
    """
    Round halves away from zero, on the shortest decimal form of the float.
    round_half_up(0.25, 1) == 0.3
    """
    quantum = Decimal(10) ** -digits
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))

@dataclass(frozen=True)
class TripStats:
    total_distance_km: float
    duration_min: float
    avg_speed_kmh: float
    max_speed_kmh: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

def calculate_trip_stats(points: Sequence[Point]) -> TripStats:
    """
    Summary statistics of one trip.

    Metrics:
    - total_distance_km: sum of haversine distances between consecutive fixes (3 dp).
    - duration_min: last minus first timestamp, in minutes (1 dp).
    - avg_speed_kmh: total distance over the wall-clock duration; 0 for a zero duration (2 dp).
    - max_speed_kmh: fastest consecutive pair, ignoring pairs with dt <= 0 (2 dp).

    Args:
        points: Time-ordered fixes of the trip, at least two.

    Returns:
        TripStats for the trip.
    """
    if len(points) < 2:
        raise ValueError("Trip statistics need at least 2 points")

    total = 0.0
    max_speed = 0.0
    for prev, p in zip(points, points[1:]):
        d = point_distance_km(prev, p)
        dt = p.t - prev.t
        total += d
        if dt > 0:
            max_speed = max(max_speed, d / (dt / 3600))

    duration_sec = points[-1].t - points[0].t
    avg_speed = total / (duration_sec / 3600) if duration_sec > 0 else 0.0

    return TripStats(
        total_distance_km=round_half_up(total, 3),
        duration_min=round_half_up(duration_sec / 60, 1),
        avg_speed_kmh=round_half_up(avg_speed, 2),
        max_speed_kmh=round_half_up(max_speed, 2),
    )
