import math

from .point import Point

# Mean Earth radius (IUGG), km
EARTH_RADIUS_KM = 6371.0088

def haversine_km(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    """
    Great-circle distance in kilometers between two coordinates given in degrees.
    """
    phi_a = math.radians(lat_a)
    phi_b = math.radians(lat_b)
    d_phi = math.radians(lat_b - lat_a)
    d_lambda = math.radians(lon_b - lon_a)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi_a) * math.cos(phi_b) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a a hair above 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

def point_distance_km(p1: Point, p2: Point) -> float:
    return haversine_km(p1.lat, p1.lon, p2.lat, p2.lon)
