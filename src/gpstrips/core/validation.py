import math
from typing import Optional, Sequence

from .point import Point
from .timeparse import resolve_time

def parse_coordinate(value) -> Optional[float]:
    """
    Parse a raw coordinate field. Returns None for missing, non-numeric
    or non-finite values.
    """
    if value is None:
        return None
    text = str(value).strip()
    # float() also takes digit separators and non-ASCII digits
    if "_" in text or not text.isascii():
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number

def is_valid_coordinate(lat, lon) -> bool:
    lat_f = parse_coordinate(lat)
    lon_f = parse_coordinate(lon)
    if lat_f is None or lon_f is None:
        return False
    return -90.0 <= lat_f <= 90.0 and -180.0 <= lon_f <= 180.0

def _field(fields: Sequence[str], idx: int) -> Optional[str]:
    return fields[idx] if 0 <= idx < len(fields) else None

def validate_record(fields: Sequence[str], columns) -> Optional[Point]:
    """
    Build a Point from one raw record, or return None if it must be rejected.

    Args:
        fields: Raw string fields of the record.
        columns: Resolved column positions (anything with lat, lon and time indices).

    Returns:
        The Point when both coordinates are in range and the time field resolves,
        otherwise None. Fields missing from a short record count as invalid.
    """
    lat = _field(fields, columns.lat)
    lon = _field(fields, columns.lon)
    if not is_valid_coordinate(lat, lon):
        return None

    t = resolve_time(_field(fields, columns.time))
    if t is None:
        return None
    return Point(lat=parse_coordinate(lat), lon=parse_coordinate(lon), t=t)
