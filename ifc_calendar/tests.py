from datetime import date, datetime, time, timedelta, timezone

import pytest

from . import core
from .core import IfcDate, InvalidDateError, LeapDay, Weekday, YearDay


def _iso_range(start: date, end: date):
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def _ifc_year(year: int):
    d = IfcDate(year, 1, 1)
    for _ in range(core.year_length(year)):
        yield d
        d = core.next_day(d)


def test_leap_year_rule():
    assert core.is_leap_year(2016)
    assert core.is_leap_year(2000)
    assert core.is_leap_year(2400)
    assert not core.is_leap_year(2017)
    assert not core.is_leap_year(1900)
    assert not core.is_leap_year(2100)


def test_ordinary_days_valid_in_every_month():
    for m in range(1, 14):
        for d in range(1, 29):
            assert core.is_valid(2017, m, d)
        assert not core.is_valid(2017, m, 0)
        assert not core.is_valid(2017, m, 30)
    assert not core.is_valid(2017, 0, 1)
    assert not core.is_valid(2017, 14, 1)


def test_day_29_only_for_intercalary_days():
    for m in range(1, 13):
        if m != 6:
            assert not core.is_valid(2016, m, 29)


def test_leap_day_exists_only_in_leap_years():
    for y in range(1890, 2110):
        assert core.is_valid(y, 6, 29) == core.is_leap_year(y)


def test_year_day_exists_every_year():
    for y in range(1890, 2110):
        assert core.is_valid(y, 13, 29)


def test_is_valid_rejects_non_integers():
    assert not core.is_valid("2016", 1, 1)
    assert not core.is_valid(2016, 1.0, 1)
    assert not core.is_valid(2016, True, 1)
    assert not core.is_valid(None, None, None)


def test_make_and_constructor_validate():
    assert core.make(2016, 6, 29) == IfcDate(2016, 6, 29)
    with pytest.raises(InvalidDateError) as excinfo:
        core.make(2017, 6, 29)
    assert (excinfo.value.year, excinfo.value.month, excinfo.value.day) == (2017, 6, 29)
    assert "Leap Day" in str(excinfo.value)
    with pytest.raises(InvalidDateError):
        IfcDate(2017, 2, 29)
    with pytest.raises(InvalidDateError):
        core.make(2017, 14, 1)


def test_invalid_date_error_is_value_error():
    with pytest.raises(ValueError):
        core.make(2017, 1, 30)


def test_ifc_date_str_and_flags():
    assert str(IfcDate(2016, 1, 1)) == "2016-01-01"
    assert IfcDate(2016, 13, 29).is_year_day
    assert IfcDate(2016, 6, 29).is_leap_day
    assert not IfcDate(2016, 6, 28).is_intercalary
    assert IfcDate(2016, 1, 28) < IfcDate(2016, 2, 1)


def test_days_in_month_and_year_length():
    assert core.days_in_month(2016, 6) == 29
    assert core.days_in_month(2017, 6) == 28
    assert core.days_in_month(2017, 13) == 29
    assert core.days_in_month(2017, 7) == 28
    for y in (2015, 2016, 1900, 2000):
        assert sum(core.days_in_month(y, m) for m in range(1, 14)) == core.year_length(y)
    with pytest.raises(InvalidDateError):
        core.days_in_month(2017, 0)


def test_month_names():
    assert core.month_name(1) == "January"
    assert core.month_name(6) == "June"
    assert core.month_name(7) == "Sol"
    assert core.month_name(13) == "December"
    with pytest.raises(ValueError):
        core.month_name(14)


@pytest.mark.parametrize(
    "iso, expected",
    [
        (date(2016, 1, 1), IfcDate(2016, 1, 1)),
        (date(2016, 1, 28), IfcDate(2016, 1, 28)),
        (date(2016, 1, 29), IfcDate(2016, 2, 1)),
        (date(2016, 6, 16), IfcDate(2016, 6, 28)),
        (date(2016, 6, 17), LeapDay(2016)),
        (date(2016, 6, 18), IfcDate(2016, 7, 1)),
        (date(2016, 12, 30), IfcDate(2016, 13, 28)),
        (date(2016, 12, 31), YearDay(2016)),
        (date(2017, 6, 17), IfcDate(2017, 6, 28)),
        (date(2017, 6, 18), IfcDate(2017, 7, 1)),
        (date(2017, 12, 30), IfcDate(2017, 13, 28)),
        (date(2017, 12, 31), YearDay(2017)),
        (date(2018, 1, 1), IfcDate(2018, 1, 1)),
    ],
)
def test_to_ifc(iso, expected):
    assert core.to_ifc(iso) == expected


def test_to_ifc_accepts_datetime():
    assert core.to_ifc(datetime(2016, 6, 17, 23, 59)) == LeapDay(2016)


def test_round_trip_iso_ifc_iso():
    for d in _iso_range(date(2015, 1, 1), date(2021, 12, 31)):
        ifc = core.to_ifc(d)
        assert core.to_iso(ifc) == d
        assert core.to_iso(core.ordinary(ifc)) == d


def test_round_trip_century_years():
    for y in (1900, 2000, 2100):
        for d in _iso_range(date(y, 6, 10), date(y, 6, 25)):
            assert core.to_iso(core.to_ifc(d)) == d


def test_ifc_day_of_year_matches_gregorian():
    for d in _iso_range(date(2015, 1, 1), date(2017, 12, 31)):
        ifc = core.ordinary(core.to_ifc(d))
        assert core.day_of_year(ifc) == d.timetuple().tm_yday
        assert core.from_day_of_year(d.year, d.timetuple().tm_yday) == ifc


def test_consecutive_iso_days_follow_next_day():
    d = date(2015, 1, 1)
    while d < date(2018, 1, 1):
        today = core.ordinary(core.to_ifc(d))
        tomorrow = core.ordinary(core.to_ifc(d + timedelta(days=1)))
        assert core.next_day(today) == tomorrow
        d += timedelta(days=1)


def test_to_iso_special_days():
    assert core.to_iso(YearDay(2017)) == date(2017, 12, 31)
    assert core.to_iso(YearDay(2016)) == date(2016, 12, 31)
    assert core.to_iso(LeapDay(2016)) == date(2016, 6, 17)
    assert core.to_iso(IfcDate(2016, 6, 29)) == date(2016, 6, 17)
    assert core.to_iso(IfcDate(2016, 7, 1)) == date(2016, 6, 18)
    assert core.to_iso(IfcDate(2017, 7, 1)) == date(2017, 6, 18)


def test_to_iso_rejects_leap_day_of_common_year():
    with pytest.raises(InvalidDateError) as excinfo:
        core.to_iso(LeapDay(2017))
    assert excinfo.value.year == 2017


def test_to_iso_rejects_forged_and_out_of_range_dates():
    forged = IfcDate(2017, 1, 1)
    object.__setattr__(forged, "day", 29)
    with pytest.raises(InvalidDateError):
        core.to_iso(forged)
    with pytest.raises(InvalidDateError):
        core.to_iso(IfcDate(10000, 1, 1))
    with pytest.raises(InvalidDateError):
        core.to_iso(IfcDate(0, 1, 1))
    with pytest.raises(InvalidDateError):
        core.to_iso((2017, 1, 1))


def test_ordinary_and_special_tagging():
    assert core.ordinary(YearDay(2017)) == IfcDate(2017, 13, 29)
    assert core.ordinary(LeapDay(2016)) == IfcDate(2016, 6, 29)
    assert core.special(IfcDate(2017, 13, 29)) == YearDay(2017)
    assert core.special(IfcDate(2016, 6, 29)) == LeapDay(2016)
    assert core.special(IfcDate(2016, 6, 28)) == IfcDate(2016, 6, 28)
    with pytest.raises(InvalidDateError):
        core.ordinary(LeapDay(2017))


def test_datetime_passes_time_through():
    tz = timezone(timedelta(hours=2))
    dt = datetime(2016, 6, 17, 13, 45, 12, 500, tzinfo=tz)
    value, at = core.to_ifc_datetime(dt)
    assert value == LeapDay(2016)
    assert at == time(13, 45, 12, 500, tzinfo=tz)
    assert core.to_iso_datetime(value, at) == dt
    assert core.to_iso_datetime(IfcDate(2017, 1, 1)) == datetime(2017, 1, 1)


@pytest.mark.parametrize(
    "current, expected",
    [
        (IfcDate(2016, 13, 28), IfcDate(2016, 13, 29)),
        (IfcDate(2016, 13, 29), IfcDate(2017, 1, 1)),
        (IfcDate(2016, 6, 28), IfcDate(2016, 6, 29)),
        (IfcDate(2017, 6, 28), IfcDate(2017, 7, 1)),
        (IfcDate(2016, 6, 29), IfcDate(2016, 7, 1)),
        (IfcDate(2016, 1, 28), IfcDate(2016, 2, 1)),
        (IfcDate(2016, 12, 28), IfcDate(2016, 13, 1)),
        (IfcDate(2016, 3, 5), IfcDate(2016, 3, 6)),
    ],
)
def test_next_day_transitions(current, expected):
    assert core.next_day(current) == expected
    assert core.prev_day(expected) == current


def test_prev_day_crosses_year_boundary():
    assert core.prev_day(IfcDate(2016, 1, 1)) == IfcDate(2015, 13, 29)
    assert core.prev_day(IfcDate(2017, 7, 1)) == IfcDate(2017, 6, 28)
    assert core.prev_day(IfcDate(2016, 7, 1)) == IfcDate(2016, 6, 29)


def test_next_and_prev_are_inverse():
    for y in (1900, 2015, 2016, 2000):
        for d in _ifc_year(y):
            assert core.prev_day(core.next_day(d)) == d
            assert core.next_day(core.prev_day(d)) == d


def test_stepping_a_year_visits_every_day_once():
    days = list(_ifc_year(2016))
    assert len(set(days)) == 366
    assert core.next_day(days[-1]) == IfcDate(2017, 1, 1)
    assert days[-1] == IfcDate(2016, 13, 29)


def test_arithmetic_rejects_invalid_dates():
    forged = IfcDate(2017, 6, 28)
    object.__setattr__(forged, "day", 29)
    with pytest.raises(InvalidDateError):
        core.next_day(forged)
    with pytest.raises(InvalidDateError):
        core.prev_day(forged)


def test_add_days():
    start = IfcDate(2016, 13, 28)
    assert core.add_days(start, 0) == start
    assert core.add_days(start, 2) == IfcDate(2017, 1, 1)
    assert core.add_days(IfcDate(2017, 1, 1), -1) == IfcDate(2016, 13, 29)
    for n in (-800, -366, -1, 1, 29, 365, 366, 1000):
        assert core.to_iso(core.add_days(start, n)) == core.to_iso(start) + timedelta(days=n)


def test_from_day_of_year_rejects_out_of_range():
    with pytest.raises(InvalidDateError):
        core.from_day_of_year(2017, 366)
    with pytest.raises(InvalidDateError):
        core.from_day_of_year(2017, 0)
    assert core.from_day_of_year(2016, 366) == IfcDate(2016, 13, 29)
    assert core.from_day_of_year(2016, 169) == IfcDate(2016, 6, 29)


def test_weekday_uniform_across_months():
    for y in (2016, 2017):
        for d in range(1, 29):
            expected = core.day_of_week(y, 1, d)
            for m in range(2, 13):
                assert core.day_of_week(y, m, d) == expected


def test_weekday_values():
    assert core.day_of_week(2016, 1, 1) == Weekday.SUNDAY
    assert core.day_of_week(2016, 1, 7) == Weekday.SATURDAY
    assert core.day_of_week(2016, 1, 8) == Weekday.SUNDAY
    assert core.day_of_week(2016, 1, 13) == Weekday.FRIDAY
    assert (
        core.day_of_week(2016, 1, 13)
        == core.day_of_week(2016, 2, 13)
        == core.day_of_week(2016, 3, 13)
    )
    assert core.day_of_week(2016, 13, 28) == Weekday.SATURDAY


def test_weekday_of_intercalary_days():
    assert core.day_of_week(2016, 6, 29) == Weekday.LEAP_DAY
    assert core.day_of_week(2017, 13, 29) == Weekday.YEAR_DAY
    assert not Weekday.LEAP_DAY.is_week_day
    assert Weekday.YEAR_DAY.label == "Year Day"
    assert Weekday.FRIDAY.label == "Friday"
    assert IfcDate(2016, 6, 29).weekday() == Weekday.LEAP_DAY


def test_weekday_rejects_invalid_days():
    for args in [(2017, 6, 29), (2016, 1, 29), (2016, 1, 30), (2016, 1, 0), (2016, 14, 1)]:
        with pytest.raises(InvalidDateError):
            core.day_of_week(*args)
