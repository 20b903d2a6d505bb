from dataclasses import dataclass
from typing import List, Tuple
from .point import Point

@dataclass(frozen=True)
class Trip:
    """
    A finished movement episode: time-ordered points where every consecutive
    pair stayed within the gap and jump thresholds.
    """
    points: Tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start_time(self) -> int:
        if not self.points:
            raise ValueError("Trip is empty")
        return self.points[0].t

    @property
    def end_time(self) -> int:
        if not self.points:
            raise ValueError("Trip is empty")
        return self.points[-1].t

    @property
    def coordinates(self) -> List[List[float]]:
        return [p.lonlat for p in self.points]
