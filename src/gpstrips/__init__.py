"""
Trip reconstruction from raw GPS fixes: ingestion, gap/jump segmentation,
per-trip statistics and GeoJSON export.
"""

from .config import TripConfig, DEFAULT_PALETTE
from .core.point import Point
from .core.trip import Trip
from .core.distance import haversine_km
from .core.timeparse import resolve_time
from .modules.segmentation.gap_jump import TripSegmenter
from .metrics.trip_stats import TripStats, calculate_trip_stats
from .export.geojson import build_feature_collection

__version__ = "0.1.0"
