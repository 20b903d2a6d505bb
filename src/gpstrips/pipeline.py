from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from gpstrips.config import TripConfig, DEFAULT_INPUT, DEFAULT_REJECTS
from gpstrips.core.rejects import RejectionLog
from gpstrips.core.stream import PointReader
from gpstrips.export.geojson import build_feature_collection
from gpstrips.modules.segmentation.gap_jump import TripSegmenter

@dataclass(frozen=True)
class RunSummary:
    points: int
    rejected: int
    trips: int

    def __str__(self):
        return f"{self.points} points accepted, {self.rejected} rows rejected, {self.trips} trips"

def run(
    input_path: str | Path = DEFAULT_INPUT,
    rejects_path: str | Path = DEFAULT_REJECTS,
    config: Optional[TripConfig] = None,
) -> tuple[Dict, RunSummary]:
    """
    Reads, validates, segments and summarises one input file.

    Args:
        input_path: CSV file with a header row naming lat/lon/time columns.
        rejects_path: Log file for rejected rows. Truncated on each run.
        config: Segmentation thresholds and palette.

    Returns:
        The GeoJSON FeatureCollection and a RunSummary.

    Raises:
        FileNotFoundError: If the input file does not exist.
        MissingColumnsError: If a required column is missing from the header.
    """
    config = config or TripConfig()
    reader = PointReader(input_path)

    with RejectionLog(rejects_path) as rejects:
        reader.rejects = rejects
        points = reader.read_all()

    trips = TripSegmenter(config).process(points)
    collection = build_feature_collection(trips, config)
    summary = RunSummary(points=len(points), rejected=reader.rejected, trips=len(trips))
    return collection, summary
