import json

from coffeeshop.core.api import fail_data_access, ok_list, status_for, to_plain
from coffeeshop.core.errors import (
    ConnectivityError,
    ConstraintViolationError,
    QueryError,
    RecordDecodeError,
)
from coffeeshop.scripts.seed import COFFEES, SUPPLIERS


def test_status_for_each_error_kind():
    assert status_for(ConnectivityError("connect", "down")) == 503
    assert status_for(ConstraintViolationError("insert_coffees", "FOREIGN KEY constraint failed")) == 409
    assert status_for(QueryError("list_coffees", "no such table")) == 400
    assert status_for(RecordDecodeError("decode CoffeeRecord", "short row")) == 400


def test_to_plain_records_and_pairs():
    assert to_plain(SUPPLIERS[0])["name"] == "Acme, Inc."

    pair = to_plain((SUPPLIERS[0], COFFEES[0]))

    assert pair["supplier"]["id"] == 101
    assert pair["coffee"]["name"] == "Colombian"
    assert to_plain([COFFEES[0], COFFEES[1]])[1]["price"] == 8.99


def test_ok_list_counts_records():
    body = json.loads(ok_list(COFFEES).body)

    assert body["ok"] is True
    assert body["meta"]["count"] == 5
    assert body["data"][2]["name"] == "Espresso"


def test_fail_data_access_envelope():
    resp = fail_data_access(ConstraintViolationError("insert_coffees", "FOREIGN KEY constraint failed"))
    body = json.loads(resp.body)

    assert resp.status_code == 409
    assert body["ok"] is False
    assert body["meta"] == {"kind": "ConstraintViolationError", "operation": "insert_coffees"}
