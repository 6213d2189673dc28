import time
from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest

from phpfuncs.dates import checkdate, date, date_add, sleep, time_, usleep

MOMENT = datetime(2009, 11, 10, 23, 4, 5, tzinfo=timezone.utc)


def test_date_numeric_fields():
    assert date("Y-m-d H:i:s", MOMENT) == "2009-11-10 23:04:05"


def test_date_short_year_and_unpadded_fields():
    moment = datetime(2003, 3, 7, 9, 0, 0, tzinfo=timezone.utc)
    assert date("y/n/j", moment) == "03/3/7"


def test_date_names():
    assert date("F", MOMENT) == "November"
    assert date("M", MOMENT) == "November"[:3]
    assert date("D", MOMENT) == date("l", MOMENT)[:3]


def test_date_rfc2822():
    assert date("r", MOMENT) == "Tue, 10 Nov 2009 23:04:05 +0000"


def test_date_twelve_hour_clock_at_midnight():
    moment = datetime(2009, 11, 10, 0, 5, tzinfo=timezone.utc)
    assert date("g:i a", moment) == "12:05 am"
    assert date("h A", moment) == "12 AM"


def test_date_afternoon_markers():
    assert date("a", MOMENT) == "pm"
    assert date("A", MOMENT) == "PM"


def test_date_offsets():
    zone = timezone(timedelta(hours=-7))
    moment = MOMENT.replace(tzinfo=zone)
    assert date("O", moment) == "-0700"
    assert date("P", moment) == "-07:00"


def test_date_zone_name():
    assert date("T", MOMENT) == "UTC"


def test_date_keeps_other_characters():
    assert date("[Y]", MOMENT) == "[2009]"


def test_date_defaults_to_now():
    assert date("Y") in {str(datetime.now().year), str(datetime.now().year - 1)}


def test_date_add_simple():
    moment = datetime(2020, 5, 15, 8, 30)
    assert date_add(moment, 1, 2, 3) == datetime(2021, 7, 18, 8, 30)


def test_date_add_normalises_day_overflow():
    assert date_add(datetime(2020, 1, 31), 0, 1, 0) == datetime(2020, 3, 2)


def test_date_add_month_carries_into_year():
    assert date_add(datetime(2020, 11, 1), 0, 3, 0) == datetime(2021, 2, 1)
    assert date_add(datetime(2020, 1, 1), 0, -1, 0) == datetime(2019, 12, 1)


def test_date_add_round_trip_days():
    moment = datetime(2019, 2, 27, 12, tzinfo=timezone.utc)
    assert date_add(date_add(moment, 0, 0, 10), 0, 0, -10) == moment


@pytest.mark.parametrize(
    "month, day, year, expected",
    [
        (2, 29, 2000, True),
        (2, 29, 1900, False),
        (2, 29, 2004, True),
        (2, 29, 2003, False),
        (4, 31, 2020, False),
        (12, 31, 2020, True),
        (13, 1, 2020, False),
        (1, 0, 2020, False),
        (1, 1, 0, False),
        (1, 1, 32767, True),
        (1, 1, 32768, False),
    ],
)
def test_checkdate(month, day, year, expected):
    assert checkdate(month, day, year) is expected


def test_time_is_current():
    before = int(time.time())
    stamp = time_()
    after = int(time.time())
    assert before <= stamp <= after


def test_sleep_waits_seconds():
    with mock.patch("time.sleep") as fake:
        result = sleep(2)
    assert result is None
    assert fake.call_args_list == [mock.call(2)]


def test_sleep_negative_returns_at_once():
    with mock.patch("time.sleep") as fake:
        result = sleep(-5)
    assert result is None
    assert fake.call_args_list == [mock.call(0)]


def test_usleep_converts_microseconds():
    with mock.patch("time.sleep") as fake:
        result = usleep(1500)
    assert result is None
    assert fake.call_count == 1
    assert fake.call_args.args[0] == pytest.approx(0.0015)