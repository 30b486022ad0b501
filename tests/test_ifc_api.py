def test_to_ifc_ordinary(client):
    data = client.get("/api/ifc/to-ifc/", {"date": "2016-01-29"}).json()
    assert data["ifc"] == "2016-02-01"
    assert data["iso"] == "2016-01-29"
    assert data["kind"] == "ordinary"
    assert data["weekday"] == "Sunday"
    assert data["month_name"] == "February"
    assert data["day_of_year"] == 29


def test_to_ifc_intercalary_days(client):
    leap = client.get("/api/ifc/to-ifc/", {"date": "2016-06-17"}).json()
    assert leap["ifc"] == "2016-06-29"
    assert leap["kind"] == "leap_day"
    assert leap["weekday"] == "Leap Day"

    year_day = client.get("/api/ifc/to-ifc/", {"date": "2017-12-31"}).json()
    assert year_day["ifc"] == "2017-13-29"
    assert year_day["kind"] == "year_day"
    assert year_day["weekday"] == "Year Day"


def test_to_ifc_rejects_bad_date(client):
    resp = client.get("/api/ifc/to-ifc/", {"date": "2017-02-30"})
    assert resp.status_code == 400
    assert "date" in resp.json()
    assert client.get("/api/ifc/to-ifc/").status_code == 400


def test_to_iso(client):
    data = client.get("/api/ifc/to-iso/", {"date": "2016-07-01"}).json()
    assert data["iso"] == "2016-06-18"
    assert data["month_name"] == "Sol"


def test_to_iso_rejects_missing_leap_day(client):
    resp = client.get("/api/ifc/to-iso/", {"date": "2017-06-29"})
    assert resp.status_code == 400
    assert resp.json()["date"] == ["Month 6 has 28 days in year 2017"]


def test_step_defaults_to_next_day(client):
    data = client.get("/api/ifc/step/", {"date": "2016-13-29"}).json()
    assert data["ifc"] == "2017-01-01"


def test_step_backwards_and_many_days(client):
    data = client.get("/api/ifc/step/", {"date": "2016-01-01", "days": "-1"}).json()
    assert data["ifc"] == "2015-13-29"
    data = client.get("/api/ifc/step/", {"date": "2016-06-28", "days": "2"}).json()
    assert data["ifc"] == "2016-07-01"


def test_step_rejects_bad_days(client):
    resp = client.get("/api/ifc/step/", {"date": "2016-01-01", "days": "x"})
    assert resp.status_code == 400
    assert "days" in resp.json()
