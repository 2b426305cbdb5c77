from coffeeshop.projections import (
    coffee_from_row,
    coffee_to_row,
    split_pair,
    supplier_from_row,
    supplier_to_row,
)
from coffeeshop.schemas import CoffeeRecord, SupplierRecord


def test_supplier_row_is_keyed_by_attribute_in_field_order():
    rec = SupplierRecord(id=101, name="Acme, Inc.", street="99 Market Street",
                         city="Groundsville", state="CA", zip="95199")

    row = supplier_to_row(rec)

    assert list(row) == ["id", "name", "street", "city", "state", "zip"]
    assert supplier_from_row(tuple(row.values())) == rec


def test_coffee_defaults_counters_to_zero():
    rec = coffee_from_row(("Colombian", 101, 7.99, 0, 0))

    assert rec == CoffeeRecord(name="Colombian", sup_id=101, price=7.99)
    assert coffee_to_row(rec) == {"name": "Colombian", "sup_id": 101, "price": 7.99, "sales": 0, "total": 0}


def test_split_pair():
    row = (102, "Flaf, Inc.", "1 Market Street", "Hammersfield", "ON", "12342",
           "Espresso", 103, 9.99, 0, 0)

    sup, cof = split_pair(row)

    assert sup.id == 102
    assert cof.name == "Espresso"
