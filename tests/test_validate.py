from __future__ import annotations

import datetime as dt
import time
from collections.abc import Iterator

import pytest

from tasktrack.core.errors import InvalidFormat
from tasktrack.core.validate import (
    format_date,
    parse_deadline,
    parse_priority,
    validate_deadline,
    validate_priority,
)


@pytest.mark.parametrize("p", range(-2, 9))
def test_validate_priority_matches_range(p: int) -> None:
    assert validate_priority(p) == (1 <= p <= 5)


def test_validate_deadline_is_by_calendar_day() -> None:
    today = dt.date(2024, 3, 15)
    assert validate_deadline(dt.date(2024, 3, 15), today)
    assert validate_deadline(dt.date(2024, 3, 16), today)
    assert not validate_deadline(dt.date(2024, 3, 14), today)


def test_validate_deadline_ignores_time_of_day() -> None:
    today = dt.date(2024, 3, 15)
    assert validate_deadline(dt.datetime(2024, 3, 15, 0, 0), today)
    assert validate_deadline(dt.datetime(2024, 3, 15, 23, 59, 59), today)
    assert not validate_deadline(dt.datetime(2024, 3, 14, 23, 59, 59), today)


def test_validate_deadline_defaults_to_real_today() -> None:
    assert validate_deadline(dt.date.today())
    assert not validate_deadline(dt.date.today() - dt.timedelta(days=1))


@pytest.mark.parametrize("text", ["", "   ", None])
def test_parse_priority_blank_is_absent(text: str | None) -> None:
    assert parse_priority(text) is None


def test_parse_priority_does_not_check_range() -> None:
    assert parse_priority("3") == 3
    assert parse_priority(" 9 ") == 9
    assert parse_priority("-1") == -1


@pytest.mark.parametrize("text", ["high", "1.5", "3x"])
def test_parse_priority_rejects_non_integers(text: str) -> None:
    with pytest.raises(InvalidFormat):
        parse_priority(text)


def test_parse_deadline_blank_is_absent() -> None:
    assert parse_deadline("") is None
    assert parse_deadline("  ") is None


def test_parse_deadline_accepts_fixed_format_and_past_dates() -> None:
    assert parse_deadline("2024-03-15") == dt.date(2024, 3, 15)
    assert parse_deadline("2000-01-01") == dt.date(2000, 1, 1)


@pytest.mark.parametrize(
    "text",
    ["2024-3-15", "15/03/2024", "2024-02-30", "2024-03-15T10:00", "tomorrow", "24-03-15"],
)
def test_parse_deadline_rejects_other_shapes(text: str) -> None:
    with pytest.raises(InvalidFormat) as ei:
        parse_deadline(text)
    assert "YYYY-MM-DD" in str(ei.value)


def test_format_date() -> None:
    assert format_date(dt.date(2024, 3, 5)) == "2024-03-05"
    assert format_date(dt.datetime(2024, 3, 5, 12, 30)) == "2024-03-05"
    assert format_date(None) == ""


@pytest.fixture()
def pacific_time(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable")
    monkeypatch.setenv("TZ", "America/Los_Angeles")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_format_date_shows_timestamps_in_local_day(pacific_time: None) -> None:
    evening = dt.datetime(2024, 3, 6, 3, 0, tzinfo=dt.UTC)

    assert format_date(evening) == "2024-03-05"
    assert format_date(dt.date(2024, 3, 6)) == "2024-03-06"
