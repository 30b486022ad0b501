import pytest
from django.test import RequestFactory, override_settings

from ifc_calendar import context_processors


@pytest.mark.django_db
def test_set_ifc_date_stores_session(client):
    resp = client.post("/ifc/date/set/", {"ifc_date": "2016-06-29"}, HTTP_REFERER="/back/")
    assert resp.status_code == 302
    assert resp["Location"] == "/back/"
    assert client.session["ifc_current_date"] == "2016-06-29"


@pytest.mark.django_db
def test_set_ifc_date_ajax(client):
    resp = client.post(
        "/ifc/date/set/",
        {"ifc_date": "01-07-2017"},
        HTTP_X_REQUESTED_WITH="XMLHttpRequest",
    )
    assert resp.json() == {"ok": True, "value": "2017-07-01"}


@pytest.mark.django_db
def test_set_ifc_date_rejects_invalid(client):
    resp = client.post(
        "/ifc/date/set/",
        {"ifc_date": "2017-06-29"},
        HTTP_X_REQUESTED_WITH="XMLHttpRequest",
    )
    assert resp.status_code == 400
    assert "Month 6 has 28 days in year 2017" in resp.json()["error"]
    resp = client.post("/ifc/date/set/", {"ifc_date": "nope"})
    assert resp.status_code == 400
    assert "ifc_current_date" not in client.session


def test_set_ifc_date_requires_post(client):
    assert client.get("/ifc/date/set/").status_code == 405


def test_year_meta(client):
    data = client.get("/ifc/year/2016/meta/").json()
    assert data["leap"] is True
    assert data["year_length"] == 366
    assert data["month_lengths"][5] == 29
    assert data["month_lengths"][12] == 29
    assert sum(data["month_lengths"]) == 366
    assert data["month_names"][6] == "Sol"

    data = client.get("/api/ifc_calendar/year/2017/meta").json()
    assert data["leap"] is False
    assert data["month_lengths"][5] == 28


@override_settings(TIME_ZONE="UTC")
def test_context_processor():
    request = RequestFactory().get("/")
    request.session = {"ifc_current_date": "2016-13-29"}
    ctx = context_processors.ifc_date(request)
    assert ctx["IFC_CURRENT_DATE"] == "2016-13-29"
    assert len(ctx["IFC_TODAY"]) == 10
    assert ctx["IFC_TODAY_WEEKDAY"]
    assert ctx["IFC_TODAY_MONTH"]


def test_context_processor_without_session():
    request = RequestFactory().get("/")
    assert context_processors.ifc_date(request)["IFC_CURRENT_DATE"] == ""
