import pytest

from gpstrips.core.timeparse import resolve_time

def test_epoch_seconds():
    assert resolve_time("1700000000") == 1700000000
    assert resolve_time("0") == 0

def test_epoch_milliseconds():
    # More than 10 digits is read as milliseconds, truncated
    assert resolve_time("1700000000000") == 1700000000
    assert resolve_time("1700000000999") == 1700000000
    assert resolve_time("12345678901") == 12345678

def test_ten_digits_stay_seconds():
    assert resolve_time("9999999999") == 9999999999

def test_whitespace_is_trimmed():
    assert resolve_time("  1700000000\t") == 1700000000

@pytest.mark.parametrize("raw", ["", "   ", None])
def test_empty_values(raw):
    assert resolve_time(raw) is None

@pytest.mark.parametrize("raw", ["not-a-date", "2023-13-45 99:99:99", "abc123"])
def test_unparseable_strings(raw):
    assert resolve_time(raw) is None

@pytest.mark.parametrize("raw", [
    "2023-11-14T22:13:20Z",
    "2023-11-14T22:13:20",
    "2023-11-14 22:13:20",
    "2023-11-14T23:13:20+01:00",
    "2023-11-14T22:13:20.750Z",
])
def test_calendar_strings(raw):
    assert resolve_time(raw) == 1700000000

def test_date_only():
    assert resolve_time("2023-11-14") == 1699920000

@pytest.mark.parametrize("raw", ["1700000000", "1700000000000", "2023-11-14 22:13:20"])
def test_idempotent_on_resolved_values(raw):
    once = resolve_time(raw)
    assert resolve_time(str(once)) == once
