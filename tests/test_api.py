import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from coffeeshop.core.db import get_db
from coffeeshop.main import app
from coffeeshop.scripts.seed import seed


@pytest.fixture
def client(schema):
    with Session(bind=schema) as s:
        seed(s)

    def _get_db():
        db = Session(bind=schema)
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def test_health_ok(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.json()["ok"] is True


def test_db_ping(client):
    r = client.get("/db-ping")

    assert r.json()["data"]["select1"] == 1


def test_list_suppliers_sorted_by_zip(client):
    r = client.get("/suppliers", params={"sort": "zip"})
    body = r.json()

    assert r.status_code == 200
    assert body["meta"]["count"] == 5
    assert body["data"][0]["zip"] == "12342"
    assert body["data"][-1]["zip"] == "95199"


def test_unknown_sort_field(client):
    r = client.get("/suppliers", params={"sort": "phone"})

    assert r.status_code == 422
    assert r.json()["ok"] is False


def test_search_supplier(client):
    r = client.get("/suppliers/search", params={"name": "Flaf, Inc."})

    assert r.json()["data"]["id"] == 102
    assert client.get("/suppliers/search", params={"name": "Nobody"}).status_code == 404


def test_price_range(client):
    data = client.get("/coffees/price-range").json()["data"]

    assert data["min"] == pytest.approx(7.99)
    assert data["max"] == pytest.approx(9.99)


def test_coffees_with_suppliers(client):
    body = client.get("/coffees/with-suppliers").json()

    assert body["meta"]["count"] == 5
    assert all(p["coffee"]["sup_id"] == p["supplier"]["id"] for p in body["data"])


def test_orphan_coffee_conflict(client):
    r = client.post("/coffees", json=[{"name": "Orphan", "sup_id": 999, "price": 3.5}])

    assert r.status_code == 409
    assert r.json()["meta"]["kind"] == "ConstraintViolationError"


def test_create_replace_delete_coffee(client):
    r = client.post("/coffees", json=[{"name": "Mocha", "sup_id": 104, "price": 6.5}])
    assert r.status_code == 201
    assert r.json()["data"]["inserted"] == 1

    r = client.put("/coffees/Mocha", json={"name": "Mocha_Decaf", "sup_id": 104, "price": 6.75})
    assert r.status_code == 200

    names = [c["name"] for c in client.get("/coffees").json()["data"]]
    assert "Mocha_Decaf" in names and "Mocha" not in names

    assert client.delete("/coffees/Mocha_Decaf").status_code == 200
    assert client.delete("/coffees/Mocha_Decaf").status_code == 404
    assert client.get("/coffees").json()["meta"]["count"] == 5


def test_negative_price_is_a_validation_error(client):
    r = client.post("/coffees", json=[{"name": "Bad", "sup_id": 101, "price": -1}])

    assert r.status_code == 422
    assert r.json()["error"] == "Validation error"
