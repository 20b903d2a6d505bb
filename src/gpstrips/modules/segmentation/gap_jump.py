from typing import Iterable, List, Optional

from gpstrips.config import TripConfig
from gpstrips.core.distance import point_distance_km
from gpstrips.core.point import Point
from gpstrips.core.trip import Trip

class TripSegmenter:
    """
    Splits a time-ordered stream of fixes into trips.

    A new trip starts whenever the time gap to the previous fix exceeds
    gap_seconds OR the great-circle jump exceeds jump_km. Runs shorter than
    min_points are dropped.
    """

    def __init__(self, config: Optional[TripConfig] = None):
        """
        Args:
            config: Thresholds to split on. Defaults to TripConfig().
        """
        self.config = config or TripConfig()

        # Points of the trip in progress
        self.current: List[Point] = []
        self.prev: Optional[Point] = None

    def is_break(self, prev: Point, p: Point) -> bool:
        gap = p.t - prev.t
        if gap > self.config.gap_seconds:
            return True
        return point_distance_km(prev, p) > self.config.jump_km

    def _finish(self, points: List[Point]) -> List[Trip]:
        if len(points) < self.config.min_points:
            return []
        return [Trip(points=tuple(points))]

    def process_point(self, p: Point) -> List[Trip]:
        """
        Consumes the next point of a time-ordered stream.
        Returns the trip closed by this point, if any.
        """
        if self.prev is not None and p.t < self.prev.t:
            raise ValueError(
                f"Points must arrive in time order (got t={p.t} after t={self.prev.t})"
            )

        trips = []
        if self.prev is not None and self.is_break(self.prev, p):
            trips = self._finish(self.current)
            self.current = [p]
        else:
            self.current.append(p)
        self.prev = p
        return trips

    def flush(self) -> List[Trip]:
        """
        Emits the trip in progress at the end of the stream and resets state.
        """
        trips = self._finish(self.current)
        self.current = []
        self.prev = None
        return trips

    def process(self, points: Iterable[Point]) -> List[Trip]:
        """
        Batch entry: orders points by time and segments them in one pass.
        The sort is stable, so fixes sharing a timestamp keep their input order.
        """
        trips = []
        for p in sorted(points, key=lambda q: q.t):
            trips.extend(self.process_point(p))
        trips.extend(self.flush())
        return trips
