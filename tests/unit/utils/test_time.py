"""Unit tests for timestamp conversion."""

from datetime import datetime, timedelta, timezone

import pytest

from polyfeed.data.utils import EXCHANGE_TZ, format_date, from_millis, to_millis


def test_from_millis_is_exchange_local():
    value = from_millis(1549314000000)
    assert value.tzinfo == EXCHANGE_TZ
    assert value == datetime(2019, 2, 4, 21, 0, tzinfo=timezone.utc)
    assert value.utcoffset() == timedelta(hours=-5)


def test_from_millis_keeps_millisecond_precision():
    value = from_millis(1577818659365)
    assert value.microsecond == 365000


def test_from_millis_other_zone():
    value = from_millis(0, tz=timezone.utc)
    assert value == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("millis", [0, 1536036818784, 1577818283019])
def test_to_millis_inverts_from_millis(millis):
    assert to_millis(from_millis(millis)) == millis


def test_to_millis_naive_is_exchange_time():
    # 16:00 in New York on a winter day is 21:00 UTC.
    assert to_millis(datetime(2019, 2, 4, 16, 0)) == 1549314000000


def test_format_date_uses_utc_date():
    late_evening = datetime(2019, 2, 4, 22, 0, tzinfo=EXCHANGE_TZ)
    assert format_date(late_evening) == "2019-02-05"
    assert format_date(datetime(2019, 2, 4)) == "2019-02-04"
