from __future__ import annotations

from django import forms

from .core import IfcDate, LeapDay, YearDay
from .utils import format_ifc_date, parse_ifc_date
from .validators import validate_ifc_date


class IfcDateFormField(forms.Field):
    """\
    Text field for an IFC date (13 months, Leap Day and Year Day as day 29).
    clean() returns an ``IfcDate``, or ``None`` for an empty optional field.
    """

    default_validators = [validate_ifc_date]

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "YYYY-MM-DD"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in self.empty_values:
            return None
        return parse_ifc_date(value)

    def prepare_value(self, value):
        if isinstance(value, IfcDate | YearDay | LeapDay):
            return format_ifc_date(value)
        return value


class IfcDateForm(forms.Form):
    ifc_date = IfcDateFormField()
