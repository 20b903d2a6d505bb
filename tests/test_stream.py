import io

import pytest

from gpstrips.core.point import Point
from gpstrips.core.rejects import RejectionLog, RejectionRecord
from gpstrips.core.stream import ColumnMap, PointReader, resolve_columns

@pytest.fixture
def sample_csv(tmp_path):
    p = tmp_path / "points.csv"
    p.write_text(
        "device,Latitude,LNG,Time\n"
        "a,45.5,-73.6,1700000000\n"
        "a,91,-73.6,1700000060\n"
        "a,45.6,-73.7,not-a-date\n"
        "\n"
        "a,45.7,-73.8,2023-11-14 22:15:00\n"
    )
    return p

def test_resolve_columns_synonyms():
    assert resolve_columns(["lat", "lon", "timestamp"]) == ColumnMap(lat=0, lon=1, time=2)
    assert resolve_columns([" DateTime ", "Longitude", "LATITUDE"]) == ColumnMap(lat=2, lon=1, time=0)
    assert resolve_columns(["date", "lng", "lat"]) == ColumnMap(lat=2, lon=1, time=0)

def test_resolve_columns_last_match_wins():
    columns = resolve_columns(["lat", "time", "latitude", "lon"])
    assert columns.lat == 2

@pytest.mark.parametrize("header", [["lat", "lon"], ["latitude", "time"], [], None])
def test_resolve_columns_missing(header):
    with pytest.raises(ValueError, match="Missing required headers"):
        resolve_columns(header)

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Missing"):
        PointReader(tmp_path / "nope.csv")

def test_stream_points_and_rejects(sample_csv):
    sink = io.StringIO()
    reader = PointReader(sample_csv, rejects=RejectionLog(sink))
    points = reader.read_all()

    assert points == [
        Point(lat=45.5, lon=-73.6, t=1700000000),
        Point(lat=45.7, lon=-73.8, t=1700000100),
    ]
    assert reader.accepted == 2
    assert reader.rejected == 3
    assert sink.getvalue().splitlines() == [
        "Line 3 rejected: a,91,-73.6,1700000060",
        "Line 4 rejected: a,45.6,-73.7,not-a-date",
        "Line 5 rejected: ",
    ]

def test_header_checked_before_rows(tmp_path):
    p = tmp_path / "bad.csv"
    p.write_text("x,y,when\n1,2,3\n")
    sink = io.StringIO()
    reader = PointReader(p, rejects=RejectionLog(sink))
    with pytest.raises(ValueError, match="Missing required headers"):
        reader.read_all()
    assert sink.getvalue() == ""

def test_empty_file_is_missing_headers(tmp_path):
    p = tmp_path / "empty.csv"
    p.write_text("")
    with pytest.raises(ValueError, match="Missing required headers"):
        PointReader(p).read_all()

def test_bom_and_quoted_fields(tmp_path):
    p = tmp_path / "bom.csv"
    p.write_text('\ufefflat,lon,timestamp,note\n10,20,1700000000,"a, b"\n', encoding="utf-8")
    points = PointReader(p).read_all()
    assert points == [Point(lat=10.0, lon=20.0, t=1700000000)]

def test_rejection_log_truncates_file(tmp_path):
    log_path = tmp_path / "rejects.log"
    log_path.write_text("stale entry\n")
    with RejectionLog(log_path) as log:
        entry = log.record(7, ["x", "y"])
    assert entry == RejectionRecord(line_number=7, raw_fields=("x", "y"))
    assert log_path.read_text() == "Line 7 rejected: x,y\n"
    assert log.count == 1

def test_undecodable_bytes_stay_in_their_row(tmp_path):
    p = tmp_path / "latin1.csv"
    p.write_bytes(
        b"lat,lon,timestamp,note\n"
        b"10,20,1700000000,caf\xe9\n"
        b"4\xe95,20,1700000060,x\n"
    )
    log_path = tmp_path / "rejects.log"
    with RejectionLog(log_path) as log:
        points = PointReader(p, rejects=log).read_all()

    assert points == [Point(lat=10.0, lon=20.0, t=1700000000)]
    assert log_path.read_bytes() == b"Line 3 rejected: 4\xe95,20,1700000060,x\n"
