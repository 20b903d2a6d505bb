import json
from typing import Dict, List, Optional, Sequence, TextIO

from shapely.geometry import LineString, mapping

from gpstrips.config import TripConfig
from gpstrips.core.trip import Trip
from gpstrips.metrics.trip_stats import calculate_trip_stats

def _line_geometry(trip: Trip) -> Dict:
    geom = mapping(LineString(trip.coordinates))
    # mapping() yields nested tuples; keep plain [lon, lat] lists
    return {"type": geom["type"], "coordinates": [list(c) for c in geom["coordinates"]]}

def trip_to_feature(trip: Trip, index: int, config: Optional[TripConfig] = None) -> Dict:
    """
    GeoJSON Feature for the trip at position `index` (0-based) of the output.
    Properties are the trip statistics followed by id, color, point count and time span.
    """
    config = config or TripConfig()
    properties = calculate_trip_stats(trip.points).as_dict()
    properties.update({
        "trip_id": f"trip_{index + 1}",
        "color": config.color_for(index),
        "points": len(trip),
        "start_ts": trip.start_time,
        "end_ts": trip.end_time,
    })
    return {
        "type": "Feature",
        "geometry": _line_geometry(trip),
        "properties": properties,
    }

def build_feature_collection(trips: Sequence[Trip], config: Optional[TripConfig] = None) -> Dict:
    features: List[Dict] = [trip_to_feature(trip, i, config) for i, trip in enumerate(trips)]
    return {"type": "FeatureCollection", "features": features}

def dump_feature_collection(collection: Dict, out: TextIO):
    out.write(json.dumps(collection, indent=4) + "\n")
