from datetime import date

import pytest
from django.core.exceptions import ValidationError

from ifc_calendar.core import IfcDate, LeapDay, YearDay
from ifc_calendar.utils import format_ifc_date, parse_ifc_date
from ifc_calendar.validators import validate_ifc_date_parts


def test_parse_empty_values():
    assert parse_ifc_date(None) is None
    assert parse_ifc_date("") is None
    assert parse_ifc_date(b"") is None
    assert parse_ifc_date("   ") is None


def test_parse_iso_format():
    assert parse_ifc_date("2016-06-29") == IfcDate(2016, 6, 29)
    assert parse_ifc_date(" 2017-13-29 ") == IfcDate(2017, 13, 29)


def test_parse_dd_mm_yyyy():
    assert parse_ifc_date("01-07-2017") == IfcDate(2017, 7, 1)


def test_parse_dd_mm_yyyy_can_be_disabled():
    with pytest.raises(ValidationError):
        parse_ifc_date("01-07-2017", accept_dmy=False)


def test_parse_bytes_and_components():
    assert parse_ifc_date(b"2016-13-01") == IfcDate(2016, 13, 1)
    assert parse_ifc_date(("2016", "6", "29")) == IfcDate(2016, 6, 29)
    assert parse_ifc_date([2016, 1, 1]) == IfcDate(2016, 1, 1)


def test_parse_engine_values_and_gregorian_dates():
    assert parse_ifc_date(YearDay(2017)) == IfcDate(2017, 13, 29)
    assert parse_ifc_date(LeapDay(2016)) == IfcDate(2016, 6, 29)
    assert parse_ifc_date(date(2016, 6, 18)) == IfcDate(2016, 7, 1)
    with pytest.raises(ValidationError):
        parse_ifc_date(LeapDay(2017))


def test_parse_with_dots_rejected():
    with pytest.raises(ValidationError):
        parse_ifc_date("01.07.2017")


def test_parse_rejects_leap_day_in_common_year():
    with pytest.raises(ValidationError) as excinfo:
        parse_ifc_date("2017-06-29")
    assert "Month 6 has 28 days in year 2017" in excinfo.value.messages


def test_parse_rejects_bad_components():
    with pytest.raises(ValidationError):
        parse_ifc_date(("x", 1, 1))
    with pytest.raises(ValidationError):
        parse_ifc_date(object())


def test_validate_parts_messages():
    with pytest.raises(ValidationError, match="Month must be 1–13"):
        validate_ifc_date_parts(2017, 14, 1)
    with pytest.raises(ValidationError, match="Year must be 1–9999"):
        validate_ifc_date_parts(0, 1, 1)
    with pytest.raises(ValidationError, match="Month 2 has 28 days in year 2016"):
        validate_ifc_date_parts(2016, 2, 29)
    validate_ifc_date_parts(2016, 6, 29)


def test_format_canonical():
    assert format_ifc_date(IfcDate(16, 2, 3)) == "0016-02-03"
    assert format_ifc_date(YearDay(2017)) == "2017-13-29"
    assert format_ifc_date(LeapDay(2016)) == "2016-06-29"
