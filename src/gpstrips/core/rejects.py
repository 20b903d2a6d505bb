from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, Tuple

@dataclass(frozen=True)
class RejectionRecord:
    line_number: int
    raw_fields: Tuple[str, ...]

    def format(self) -> str:
        return f"Line {self.line_number} rejected: {','.join(self.raw_fields)}"

class RejectionLog:
    """
    Append-only sink for rows excluded from processing.
    Writes to an open text stream, or to a file that is truncated on open.
    """

    def __init__(self, target: str | Path | TextIO):
        self._owns_handle = isinstance(target, (str, Path))
        if self._owns_handle:
            self._handle = open(Path(target), mode="w", encoding="utf-8", errors="surrogateescape")
        else:
            self._handle = target
        self.count = 0

    def record(self, line_number: int, fields) -> RejectionRecord:
        entry = RejectionRecord(line_number=line_number, raw_fields=tuple(fields))
        self._handle.write(entry.format() + "\n")
        self.count += 1
        return entry

    def close(self):
        if self._owns_handle and not self._handle.closed:
            self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
