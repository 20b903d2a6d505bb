from dataclasses import dataclass

@dataclass(frozen=True)
class Point:
    """
    A single validated GPS fix.
    t is whole seconds since the Unix epoch (UTC), resolved once at ingestion.
    """
    lat: float
    lon: float
    t: int

    @property
    def lonlat(self):
        return [self.lon, self.lat]
