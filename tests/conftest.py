import os
from datetime import date, timedelta

os.environ["DATABASE_URL"] = "sqlite:///./test_restaurant.db"

import pytest
from fastapi.testclient import TestClient

from restaurant_api.config import settings
from restaurant_api.database import Base, engine
from restaurant_api.main import app


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists("test_restaurant.db"):
        os.remove("test_restaurant.db")


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


def open_date(days_ahead=7):
    """A future date the restaurant is open on."""
    d = date.today() + timedelta(days=days_ahead)
    while d.weekday() in settings.CLOSED_WEEKDAYS:
        d += timedelta(days=1)
    return d


def closed_date():
    d = date.today() + timedelta(days=7)
    while d.weekday() not in settings.CLOSED_WEEKDAYS:
        d += timedelta(days=1)
    return d


@pytest.fixture
def reservation_payload():
    def _payload(**overrides):
        payload = {
            "first_name": "Rick",
            "last_name": "Sanchez",
            "mobile_number": "202-555-0164",
            "reservation_date": open_date().isoformat(),
            "reservation_time": "18:00",
            "people": 2,
        }
        payload.update(overrides)
        return payload
    return _payload


@pytest.fixture
def create_reservation(client, reservation_payload):
    def _create(**overrides):
        resp = client.post("/reservations", json={"data": reservation_payload(**overrides)})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _create


@pytest.fixture
def create_table(client):
    def _create(table_name="Patio", capacity=4):
        resp = client.post("/tables", json={"data": {"table_name": table_name, "capacity": capacity}})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _create


@pytest.fixture
def open_day():
    return open_date()


@pytest.fixture
def closed_day():
    return closed_date()
