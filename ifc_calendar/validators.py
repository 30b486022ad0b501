"""Validators for IFC calendar dates."""

from django.core.exceptions import ValidationError

from . import core


def validate_ifc_date_parts(year: int, month: int, day: int) -> None:
    """Validate numeric parts of an IFC date."""
    if not 1 <= year <= 9999:
        raise ValidationError("Year must be 1–9999")
    if not 1 <= month <= core.MONTHS_IN_YEAR:
        raise ValidationError("Month must be 1–13")
    if not core.is_valid(year, month, day):
        max_day = core.days_in_month(year, month)
        raise ValidationError(f"Month {month} has {max_day} days in year {year}")


def validate_ifc_date(value: core.IfcDate) -> None:
    """Field-level validator for already parsed ``IfcDate`` values."""
    validate_ifc_date_parts(value.year, value.month, value.day)
