import datetime as dt

import pytest

from json_http.dates import ensure_utc, get_utc_web_date

UTC = dt.timezone.utc


def test_get_utc_web_date_formats_milliseconds() -> None:
    moment = dt.datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
    assert get_utc_web_date(moment) == "2024-01-02T03:04:05.678Z"


def test_get_utc_web_date_converts_offsets() -> None:
    moment = dt.datetime(2024, 1, 1, 22, 0, 0, 5000, tzinfo=dt.timezone(dt.timedelta(hours=-5)))
    assert get_utc_web_date(moment) == "2024-01-02T03:00:00.005Z"


def test_get_utc_web_date_treats_naive_values_as_local() -> None:
    naive = dt.datetime(2024, 1, 2, 3, 4, 5, 678000)
    expected = naive.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.678Z")
    assert get_utc_web_date(naive) == expected


def test_ensure_utc_passes_through_missing_and_utc_values() -> None:
    moment = dt.datetime(2024, 6, 1, 12, 30, tzinfo=UTC)
    assert ensure_utc(None) is None
    assert ensure_utc(moment) is moment


def test_ensure_utc_converts_other_zones() -> None:
    moment = dt.datetime(2024, 6, 1, 14, 30, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    converted = ensure_utc(moment)
    assert converted.tzinfo is UTC
    assert converted == moment
    assert converted.hour == 12


@pytest.mark.parametrize(
    "value",
    [
        None,
        dt.datetime(2024, 1, 2, 3, 4, 5),
        dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt.timezone(dt.timedelta(hours=5, minutes=30))),
    ],
)
def test_ensure_utc_is_idempotent(value) -> None:
    once = ensure_utc(value)
    assert ensure_utc(once) == once
