from io import StringIO

from django.core.management import call_command

from ifc_calendar.render import render_year


def test_render_header_and_first_month():
    lines = render_year(2016).splitlines()
    assert len(lines) == 15
    assert lines[0] == (
        "|     |  S  M  T  W  T  F  S |  S  M  T  W  T  F  S |"
        "  S  M  T  W  T  F  S |  S  M  T  W  T  F  S |    |"
    )
    assert lines[1] == (
        "| --- | -------------------- | -------------------- |"
        " -------------------- | -------------------- | -- |"
    )
    assert lines[2] == (
        "| Jan |  1  2  3  4  5  6  7 |  8  9 10 11 12 13 14 |"
        " 15 16 17 18 19 20 21 | 22 23 24 25 26 27 28 |    |"
    )


def test_render_intercalary_columns():
    leap = render_year(2016).splitlines()
    common = render_year(2017).splitlines()
    assert leap[7].startswith("| Jun |") and leap[7].endswith(" 29 |")
    assert common[7].startswith("| Jun |") and common[7].endswith("    |")
    assert leap[8].startswith("| Sol |")
    assert leap[14].startswith("| Dec |") and leap[14].endswith(" 29 |")
    assert common[14].endswith(" 29 |")


def test_print_year_command():
    out = StringIO()
    call_command("ifc_print_year", "2016", stdout=out)
    assert out.getvalue().strip() == render_year(2016)


def test_print_year_command_defaults_to_current_year():
    out = StringIO()
    call_command("ifc_print_year", stdout=out)
    assert "| Sol |" in out.getvalue()
