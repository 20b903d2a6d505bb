import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Dict, List, Optional, Sequence, Tuple

from .point import Point
from .rejects import RejectionLog
from .validation import validate_record

# Accepted header spellings per semantic field, compared lower-cased.
HEADER_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    'lat': ('lat', 'latitude'),
    'lon': ('lon', 'lng', 'longitude'),
    'time': ('timestamp', 'time', 'datetime', 'date'),
}

class MissingColumnsError(ValueError):
    """The header lacks a lat, lon or time column."""

@dataclass(frozen=True)
class RawRecord:
    """One CSV record as read, with its 1-based line number (header is line 1)."""
    fields: Tuple[str, ...]
    line_number: int

@dataclass(frozen=True)
class ColumnMap:
    lat: int
    lon: int
    time: int

def resolve_columns(header: Optional[Sequence[str]]) -> ColumnMap:
    """
    Map header cells to the lat/lon/time positions.
    Matching is case-insensitive; if several cells match one field the last wins.

    Raises:
        MissingColumnsError: If any of the three fields has no matching column.
    """
    found = {'lat': -1, 'lon': -1, 'time': -1}
    for i, cell in enumerate(header or []):
        name = cell.strip().lower()
        for key, synonyms in HEADER_SYNONYMS.items():
            if name in synonyms:
                found[key] = i

    missing = [key for key, idx in found.items() if idx < 0]
    if missing:
        raise MissingColumnsError(
            f"Missing required headers (lat, lon, timestamp). Not found: {', '.join(missing)}"
        )
    return ColumnMap(lat=found['lat'], lon=found['lon'], time=found['time'])

class PointReader:
    """
    Reads a delimited file of GPS fixes with a header row and yields validated Points.
    Rows that fail validation go to the rejection log, when one is given.
    """

    def __init__(
        self,
        filepath: str | Path,
        rejects: Optional[RejectionLog] = None,
        sep: str = ',',
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"Missing {self.filepath}")
        self.rejects = rejects
        self.sep = sep
        self.columns: Optional[ColumnMap] = None
        self.accepted = 0
        self.rejected = 0

    def records(self) -> Iterator[RawRecord]:
        """
        Yields raw records after resolving the header.
        The header is checked before the first data row is read. Bytes that are
        not valid UTF-8 are carried through as surrogates and written back
        unchanged by the rejection log.
        """
        with open(self.filepath, mode="r", newline="", encoding="utf-8-sig", errors="surrogateescape") as f:
            reader = csv.reader(f, delimiter=self.sep)
            header = next(reader, None)
            self.columns = resolve_columns(header)

            for line_number, row in enumerate(reader, start=2):
                yield RawRecord(fields=tuple(row), line_number=line_number)

    def stream(self) -> Iterator[Point]:
        """
        Yields points in file order, skipping (and logging) invalid rows.
        """
        for record in self.records():
            point = validate_record(record.fields, self.columns)
            if point is None:
                self.rejected += 1
                if self.rejects is not None:
                    self.rejects.record(record.line_number, record.fields)
                continue
            self.accepted += 1
            yield point

    def read_all(self) -> List[Point]:
        return list(self.stream())
