import pytest
from django import forms

from ifc_calendar.core import IfcDate
from ifc_calendar.forms import IfcDateForm, IfcDateFormField


def test_formfield_clean_and_prepare():
    field = IfcDateFormField()
    assert field.clean("2016-06-29") == IfcDate(2016, 6, 29)
    assert field.prepare_value(IfcDate(2016, 6, 29)) == "2016-06-29"
    assert field.prepare_value("2016-06-29") == "2016-06-29"


def test_formfield_optional_empty():
    field = IfcDateFormField(required=False)
    assert field.clean("") is None


def test_invalid_day():
    field = IfcDateFormField()
    with pytest.raises(forms.ValidationError):
        field.clean("2017-06-29")
    with pytest.raises(forms.ValidationError):
        field.clean("2017-01-29")


def test_form_reports_errors():
    form = IfcDateForm(data={"ifc_date": "2017-14-01"})
    assert not form.is_valid()
    assert form.errors["ifc_date"] == ["Month must be 1–13"]
