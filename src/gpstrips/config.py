import math
from dataclasses import dataclass
from typing import Tuple

DEFAULT_GAP_SECONDS = 25 * 60
DEFAULT_JUMP_KM = 2.0
DEFAULT_MIN_POINTS = 2

DEFAULT_INPUT = "points.csv"
DEFAULT_REJECTS = "rejects.log"

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)

@dataclass(frozen=True)
class TripConfig:
    """
    Thresholds and presentation settings shared by the segmenter and the exporter.

    Args:
        gap_seconds: Largest allowed time gap between consecutive fixes of a trip.
        jump_km: Largest allowed great-circle jump between consecutive fixes of a trip.
        min_points: Smallest number of fixes a trip must have to be emitted.
        palette: Colors assigned to trips in order, cycled.
    """
    gap_seconds: int = DEFAULT_GAP_SECONDS
    jump_km: float = DEFAULT_JUMP_KM
    min_points: int = DEFAULT_MIN_POINTS
    palette: Tuple[str, ...] = DEFAULT_PALETTE

    def __post_init__(self):
        if not math.isfinite(self.gap_seconds) or self.gap_seconds < 0:
            raise ValueError(f"gap_seconds must be a finite number >= 0, got {self.gap_seconds}")
        if not math.isfinite(self.jump_km) or self.jump_km < 0:
            raise ValueError(f"jump_km must be a finite number >= 0, got {self.jump_km}")
        if self.min_points < 2:
            raise ValueError(f"min_points must be >= 2, got {self.min_points}")
        if not self.palette:
            raise ValueError("palette must contain at least one color")

    def color_for(self, index: int) -> str:
        return self.palette[index % len(self.palette)]
