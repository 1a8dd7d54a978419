from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from restaurant_api.config import settings
from restaurant_api.main import app
from restaurant_api.services import reservation_service


def _set_status(client, reservation_id, status):
    return client.put(f"/reservations/{reservation_id}/status", json={"data": {"status": status}})


def test_create_reservation_happy_path(client, reservation_payload):
    resp = client.post("/reservations", json={"data": reservation_payload(people=4)})
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["reservation_id"]
    assert data["people"] == 4
    assert data["status"] == "booked"
    assert data["reservation_time"] == "18:00:00"


@pytest.mark.parametrize(
    "field",
    ["first_name", "last_name", "mobile_number", "reservation_date", "reservation_time", "people"],
)
def test_create_reservation_requires_every_field(client, reservation_payload, field):
    payload = reservation_payload()
    payload.pop(field)
    resp = client.post("/reservations", json={"data": payload})
    assert resp.status_code == 400
    assert resp.json()["error"] == f"Reservation must include a {field}"


def test_create_reservation_rejects_zero_people(client, reservation_payload):
    resp = client.post("/reservations", json={"data": reservation_payload(people=0)})
    assert resp.status_code == 400
    assert resp.json()["error"] == "people must be at least 1"


def test_create_reservation_rejects_bad_date(client, reservation_payload):
    resp = client.post("/reservations", json={"data": reservation_payload(reservation_date="not-a-date")})
    assert resp.status_code == 400
    assert "reservation_date" in resp.json()["error"]


@pytest.mark.parametrize("status", ["seated", "finished"])
def test_create_reservation_must_start_booked(client, reservation_payload, status):
    resp = client.post("/reservations", json={"data": reservation_payload(status=status)})
    assert resp.status_code == 400
    assert status in resp.json()["error"]


def test_create_reservation_accepts_explicit_booked(client, reservation_payload):
    resp = client.post("/reservations", json={"data": reservation_payload(status="booked")})
    assert resp.status_code == 201


def test_create_reservation_on_closed_day(client, reservation_payload, closed_day):
    resp = client.post("/reservations", json={"data": reservation_payload(reservation_date=closed_day.isoformat())})
    assert resp.status_code == 400
    assert "closed" in resp.json()["error"]


def test_create_reservation_in_the_past(client, reservation_payload):
    past = date.today() - timedelta(days=30)
    while past.weekday() in settings.CLOSED_WEEKDAYS:
        past -= timedelta(days=1)
    resp = client.post("/reservations", json={"data": reservation_payload(reservation_date=past.isoformat())})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Reservation must be made for a future date and time"


@pytest.mark.parametrize("reservation_time", ["09:00", "22:15"])
def test_create_reservation_outside_opening_hours(client, reservation_payload, reservation_time):
    resp = client.post("/reservations", json={"data": reservation_payload(reservation_time=reservation_time)})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Reservation time must be between 10:30 and 21:30"


@pytest.mark.parametrize("reservation_time", ["18:00:00Z", "18:00:00+02:00"])
def test_create_reservation_rejects_timezone_aware_time(client, reservation_payload, reservation_time):
    resp = client.post("/reservations", json={"data": reservation_payload(reservation_time=reservation_time)})
    assert resp.status_code == 400
    assert resp.json()["error"] == "reservation_time must not include a timezone"


@pytest.mark.parametrize(
    "field, limit",
    [("first_name", 100), ("last_name", 100), ("mobile_number", 30)],
)
def test_create_reservation_rejects_overlong_text(client, reservation_payload, field, limit):
    resp = client.post("/reservations", json={"data": reservation_payload(**{field: "9" * (limit + 1)})})
    assert resp.status_code == 400
    assert field in resp.json()["error"]


def test_read_reservation_is_idempotent(client, create_reservation):
    reservation = create_reservation()
    first = client.get(f"/reservations/{reservation['reservation_id']}")
    second = client.get(f"/reservations/{reservation['reservation_id']}")
    assert first.status_code == 200
    assert first.json() == second.json()
    assert first.json()["data"]["first_name"] == "Rick"


def test_read_unknown_reservation_is_404(client):
    resp = client.get("/reservations/99999")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Reservation 99999 cannot be found."


def test_list_by_date_hides_finished_and_cancelled(client, create_reservation, open_day):
    # three weeks later falls on the same open weekday
    day = open_day + timedelta(days=21)
    late = create_reservation(reservation_date=day.isoformat(), reservation_time="20:00")
    early = create_reservation(reservation_date=day.isoformat(), reservation_time="12:00")
    cancelled = create_reservation(reservation_date=day.isoformat(), reservation_time="13:00")
    assert _set_status(client, cancelled["reservation_id"], "cancelled").status_code == 200

    resp = client.get(f"/reservations?date={day.isoformat()}")
    assert resp.status_code == 200
    ids = [r["reservation_id"] for r in resp.json()["data"]]
    assert cancelled["reservation_id"] not in ids
    assert ids.index(early["reservation_id"]) < ids.index(late["reservation_id"])


def test_search_by_mobile_number_ignores_punctuation(client, create_reservation):
    reservation = create_reservation(mobile_number="(808) 555-0199")
    for query in ("8085550199", "555-0199", "808"):
        resp = client.get("/reservations", params={"mobile_number": query})
        assert resp.status_code == 200
        assert any(r["reservation_id"] == reservation["reservation_id"] for r in resp.json()["data"])

    resp = client.get("/reservations", params={"mobile_number": "000000000"})
    assert all(r["reservation_id"] != reservation["reservation_id"] for r in resp.json()["data"])


def test_search_by_mobile_number_without_digits_matches_nothing(client, create_reservation):
    create_reservation(mobile_number="(808) 555-0142")
    for query in ("abc", "()-"):
        resp = client.get("/reservations", params={"mobile_number": query})
        assert resp.status_code == 200
        assert resp.json()["data"] == []


def test_status_update_booked_to_cancelled(client, create_reservation):
    reservation = create_reservation()
    resp = _set_status(client, reservation["reservation_id"], "cancelled")
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "cancelled"


def test_status_update_rejects_unknown_status(client, create_reservation):
    reservation = create_reservation()
    resp = _set_status(client, reservation["reservation_id"], "bogus")
    assert resp.status_code == 400
    assert resp.json()["error"] == "unknown status: bogus"


def test_status_update_requires_status(client, create_reservation):
    reservation = create_reservation()
    resp = client.put(f"/reservations/{reservation['reservation_id']}/status", json={"data": {}})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Body must include a status"


def test_status_update_unknown_reservation_is_404(client):
    resp = _set_status(client, 99999, "cancelled")
    assert resp.status_code == 404
    assert "99999" in resp.json()["error"]


def test_finished_reservation_cannot_change(client, create_reservation, create_table):
    table = create_table("Booth #40", 4)
    reservation = create_reservation()
    seat = client.put(f"/tables/{table['table_id']}/seat", json={"data": {"reservation_id": reservation["reservation_id"]}})
    assert seat.status_code == 200
    assert client.delete(f"/tables/{table['table_id']}/seat").status_code == 200

    resp = _set_status(client, reservation["reservation_id"], "booked")
    assert resp.status_code == 400
    assert resp.json()["error"] == "a finished reservation cannot be updated"


@pytest.mark.parametrize("status", ["seated", "finished"])
def test_status_endpoint_leaves_seating_to_tables(client, create_reservation, status):
    reservation = create_reservation()
    resp = _set_status(client, reservation["reservation_id"], status)
    assert resp.status_code == 400
    assert resp.json()["error"] == f"status {status} is set by seating or finishing a table"

    detail = client.get(f"/reservations/{reservation['reservation_id']}").json()["data"]
    assert detail["status"] == "booked"


@pytest.mark.parametrize(
    "method, path",
    [
        ("delete", "/reservations"),
        ("put", "/reservations"),
        ("delete", "/reservations/1"),
        ("post", "/reservations/1"),
        ("get", "/reservations/1/status"),
        ("post", "/reservations/1/status"),
    ],
)
def test_unsupported_methods_are_405(client, method, path):
    resp = client.request(method.upper(), path)
    assert resp.status_code == 405
    assert "not allowed" in resp.json()["error"]


def test_unknown_path_is_404(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Path not found: /nowhere"


def test_unhandled_errors_are_500_without_internals(monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("connection refused to db at 10.0.0.5")

    monkeypatch.setattr(reservation_service, "list_reservations", _boom)
    resp = TestClient(app, raise_server_exceptions=False).get("/reservations")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Something went wrong!"}
