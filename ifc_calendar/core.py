"""International Fixed Calendar engine.

This module is the single source of truth for the International Fixed
Calendar (IFC) used across the project.  The IFC splits the year into 13
months of exactly 28 days and adds two intercalary days that belong to no
week:

* Year Day, month 13 day 29, present every year;
* Leap Day, month 6 day 29, present in Gregorian leap years only.

Every month starts on a Sunday.  Internally both intercalary days are plain
``IfcDate`` values with ``day == 29``; ``YearDay`` and ``LeapDay`` tag them
at the conversion boundary.  Nothing here depends on Django.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import IntEnum
from typing import List, Tuple, Union

MONTHS_IN_YEAR: int = 13
DAYS_IN_MONTH: int = 28
DAYS_IN_WEEK: int = 7
INTERCALARY_DAY: int = 29
LEAP_DAY_MONTH: int = 6
YEAR_DAY_MONTH: int = 13
# Zero-based ISO day-of-year of Leap Day (June 17 in leap years).
LEAP_DAY_OFFSET: int = LEAP_DAY_MONTH * DAYS_IN_MONTH

MONTH_NAMES: List[str] = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "Sol",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
WEEKDAY_NAMES: List[str] = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


class InvalidDateError(ValueError):
    """Raised when a value does not denote a real IFC date.

    Carries the offending ``year``/``month``/``day`` (``None`` where the
    request had no such part) and a short ``reason``.
    """

    def __init__(self, year, month=None, day=None, reason: str = "invalid IFC date"):
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        parts = [p for p in (year, month, day) if p is not None]
        super().__init__(f"{reason}: {'-'.join(repr(p) for p in parts)}")


class Weekday(IntEnum):
    """Day-of-week codes; the two intercalary days get codes of their own."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7
    LEAP_DAY = 8
    YEAR_DAY = 9

    @property
    def is_week_day(self) -> bool:
        return self <= Weekday.SATURDAY

    @property
    def label(self) -> str:
        if self is Weekday.LEAP_DAY:
            return "Leap Day"
        if self is Weekday.YEAR_DAY:
            return "Year Day"
        return WEEKDAY_NAMES[self - 1]


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is leap; same rule as the Gregorian calendar."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid(year, month, day) -> bool:
    """Return True if ``(year, month, day)`` denotes a real IFC date."""

    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        return False
    if not 1 <= month <= MONTHS_IN_YEAR:
        return False
    if 1 <= day <= DAYS_IN_MONTH:
        return True
    if day == INTERCALARY_DAY:
        if month == YEAR_DAY_MONTH:
            return True
        return month == LEAP_DAY_MONTH and is_leap_year(year)
    return False


@dataclass(frozen=True, order=True)
class IfcDate:
    """An IFC calendar date; validated on construction."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid(self.year, self.month, self.day):
            raise InvalidDateError(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def is_year_day(self) -> bool:
        return self.month == YEAR_DAY_MONTH and self.day == INTERCALARY_DAY

    @property
    def is_leap_day(self) -> bool:
        return self.month == LEAP_DAY_MONTH and self.day == INTERCALARY_DAY

    @property
    def is_intercalary(self) -> bool:
        return self.day == INTERCALARY_DAY

    def weekday(self) -> Weekday:
        return day_of_week(self.year, self.month, self.day)


@dataclass(frozen=True)
class YearDay:
    """Year Day of ``year`` (IFC month 13 day 29, ISO December 31)."""

    year: int


@dataclass(frozen=True)
class LeapDay:
    """Leap Day of ``year`` (IFC month 6 day 29, ISO June 17)."""

    year: int


IfcValue = Union[IfcDate, YearDay, LeapDay]


def make(year: int, month: int, day: int) -> IfcDate:
    """Build a validated ``IfcDate`` or raise :class:`InvalidDateError`."""

    if not is_valid(year, month, day):
        if _is_int(month) and month == LEAP_DAY_MONTH and day == INTERCALARY_DAY:
            raise InvalidDateError(year, month, day, "no Leap Day in non-leap year")
        raise InvalidDateError(year, month, day)
    return IfcDate(year, month, day)


def _checked(value: IfcDate) -> IfcDate:
    # IfcDate validates itself, but frozen dataclasses can still be forged.
    if not isinstance(value, IfcDate):
        raise InvalidDateError(value, reason="not an IFC date")
    return make(value.year, value.month, value.day)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month``, intercalary day included."""

    if not _is_int(month) or not 1 <= month <= MONTHS_IN_YEAR:
        raise InvalidDateError(year, month, reason="month out of range")
    if month == YEAR_DAY_MONTH or (month == LEAP_DAY_MONTH and is_leap_year(year)):
        return INTERCALARY_DAY
    return DAYS_IN_MONTH


def year_length(year: int) -> int:
    """Return the number of days in ``year``."""

    return 366 if is_leap_year(year) else 365


def month_name(month: int) -> str:
    """Return the English name of IFC ``month`` (1-based)."""

    if not 1 <= month <= MONTHS_IN_YEAR:
        raise ValueError("month must be 1..13")
    return MONTH_NAMES[month - 1]


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def ordinary(value: IfcValue) -> IfcDate:
    """Fold ``YearDay``/``LeapDay`` into their day-29 ``IfcDate`` form."""

    if isinstance(value, YearDay):
        return make(value.year, YEAR_DAY_MONTH, INTERCALARY_DAY)
    if isinstance(value, LeapDay):
        return make(value.year, LEAP_DAY_MONTH, INTERCALARY_DAY)
    return _checked(value)


def special(value: IfcDate) -> IfcValue:
    """Tag an intercalary ``IfcDate`` as ``YearDay``/``LeapDay``."""

    value = _checked(value)
    if value.is_year_day:
        return YearDay(value.year)
    if value.is_leap_day:
        return LeapDay(value.year)
    return value


def _year_start(year: int) -> date:
    try:
        return date(year, 1, 1)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(year, reason="year outside ISO range") from exc


def to_ifc(iso_date: date) -> IfcValue:
    """Convert a Gregorian ``date`` to its IFC value.

    December 31 always maps to ``YearDay`` and June 17 of a leap year to
    ``LeapDay``; every other day falls into a 28-day month bucket.  A
    ``datetime`` is accepted and only its date part is used.
    """

    if isinstance(iso_date, datetime):
        iso_date = iso_date.date()
    year = iso_date.year
    if (iso_date.month, iso_date.day) == (12, 31):
        return YearDay(year)

    offset = iso_date.toordinal() - date(year, 1, 1).toordinal()
    if is_leap_year(year):
        if offset == LEAP_DAY_OFFSET:
            return LeapDay(year)
        if offset > LEAP_DAY_OFFSET:
            offset -= 1
    return IfcDate(year, offset // DAYS_IN_MONTH + 1, offset % DAYS_IN_MONTH + 1)


def to_iso(value: IfcValue) -> date:
    """Convert an IFC value back to a Gregorian ``date``.

    Raises :class:`InvalidDateError` for an invalid date, a ``LeapDay`` of a
    non-leap year or a year outside ``date``'s 1..9999 range.
    """

    ifc = ordinary(value)
    start = _year_start(ifc.year)
    if ifc.is_year_day:
        return date(ifc.year, 12, 31)
    if ifc.is_leap_day:
        return start + timedelta(days=LEAP_DAY_OFFSET)

    offset = (ifc.month - 1) * DAYS_IN_MONTH + (ifc.day - 1)
    if is_leap_year(ifc.year) and offset >= LEAP_DAY_OFFSET:
        offset += 1
    return start + timedelta(days=offset)


def to_ifc_datetime(value: datetime) -> Tuple[IfcValue, time]:
    """Convert the date part of ``value``; its time is returned untouched."""

    return to_ifc(value.date()), value.timetz()


def to_iso_datetime(value: IfcValue, at: time = time()) -> datetime:
    """Inverse of :func:`to_ifc_datetime`."""

    return datetime.combine(to_iso(value), at)


def day_of_year(value: IfcDate) -> int:
    """Return the 1-based day of year of ``value``.

    Leap Day follows June 28 and Year Day closes the year, so the result
    equals the Gregorian day of year of the same day.
    """

    value = _checked(value)
    if value.is_year_day:
        return year_length(value.year)
    if value.is_leap_day:
        return LEAP_DAY_OFFSET + 1
    doy = (value.month - 1) * DAYS_IN_MONTH + value.day
    if is_leap_year(value.year) and value.month > LEAP_DAY_MONTH:
        doy += 1
    return doy


def from_day_of_year(year: int, doy: int) -> IfcDate:
    """Return the ``IfcDate`` for 1-based day-of-year ``doy``."""

    length = year_length(year)
    if not 1 <= doy <= length:
        raise InvalidDateError(year, reason=f"day-of-year {doy} out of range")
    if doy == length:
        return IfcDate(year, YEAR_DAY_MONTH, INTERCALARY_DAY)
    if is_leap_year(year):
        if doy == LEAP_DAY_OFFSET + 1:
            return IfcDate(year, LEAP_DAY_MONTH, INTERCALARY_DAY)
        if doy > LEAP_DAY_OFFSET + 1:
            doy -= 1
    offset = doy - 1
    return IfcDate(year, offset // DAYS_IN_MONTH + 1, offset % DAYS_IN_MONTH + 1)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def next_day(value: IfcDate) -> IfcDate:
    """Return the day after ``value``."""

    value = _checked(value)
    y, m, d = value.year, value.month, value.day
    if (m, d) == (YEAR_DAY_MONTH, DAYS_IN_MONTH):
        return IfcDate(y, YEAR_DAY_MONTH, INTERCALARY_DAY)
    if (m, d) == (YEAR_DAY_MONTH, INTERCALARY_DAY):
        return IfcDate(y + 1, 1, 1)
    if (m, d) == (LEAP_DAY_MONTH, DAYS_IN_MONTH):
        if is_leap_year(y):
            return IfcDate(y, LEAP_DAY_MONTH, INTERCALARY_DAY)
        return IfcDate(y, LEAP_DAY_MONTH + 1, 1)
    if (m, d) == (LEAP_DAY_MONTH, INTERCALARY_DAY):
        return IfcDate(y, LEAP_DAY_MONTH + 1, 1)
    if d == DAYS_IN_MONTH:
        return IfcDate(y, m + 1, 1)
    return IfcDate(y, m, d + 1)


def prev_day(value: IfcDate) -> IfcDate:
    """Return the day before ``value``; exact inverse of :func:`next_day`."""

    value = _checked(value)
    y, m, d = value.year, value.month, value.day
    if (m, d) == (1, 1):
        return IfcDate(y - 1, YEAR_DAY_MONTH, INTERCALARY_DAY)
    if (m, d) == (YEAR_DAY_MONTH, INTERCALARY_DAY):
        return IfcDate(y, YEAR_DAY_MONTH, DAYS_IN_MONTH)
    if (m, d) == (LEAP_DAY_MONTH + 1, 1):
        if is_leap_year(y):
            return IfcDate(y, LEAP_DAY_MONTH, INTERCALARY_DAY)
        return IfcDate(y, LEAP_DAY_MONTH, DAYS_IN_MONTH)
    if (m, d) == (LEAP_DAY_MONTH, INTERCALARY_DAY):
        return IfcDate(y, LEAP_DAY_MONTH, DAYS_IN_MONTH)
    if d == 1:
        return IfcDate(y, m - 1, DAYS_IN_MONTH)
    return IfcDate(y, m, d - 1)


def add_days(value: IfcDate, days: int) -> IfcDate:
    """Return ``value`` moved by ``days`` (negative steps backwards)."""

    year = value.year
    doy = day_of_year(value) + days
    while doy > year_length(year):
        doy -= year_length(year)
        year += 1
    while doy < 1:
        year -= 1
        doy += year_length(year)
    return from_day_of_year(year, doy)


def day_of_week(year: int, month: int, day: int) -> Weekday:
    """Return the weekday of an IFC date.

    Months are exactly four weeks long, so the weekday depends on ``day``
    alone.  Leap Day and Year Day return their own codes.
    """

    if not is_valid(year, month, day):
        raise InvalidDateError(year, month, day)
    if day == INTERCALARY_DAY:
        if month == YEAR_DAY_MONTH:
            return Weekday.YEAR_DAY
        return Weekday.LEAP_DAY
    return Weekday((day - 1) % DAYS_IN_WEEK + 1)
