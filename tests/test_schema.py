from sqlalchemy import inspect

from coffeeshop.core.db import create_schema, drop_schema, list_tables
from coffeeshop.models import Coffee, Supplier, SUPPLIER_PROJECTION, COFFEE_PROJECTION
from coffeeshop.projections import COFFEE_FIELDS, SUPPLIER_FIELDS


def test_create_schema_yields_two_tables(schema):
    tables = list_tables(schema)

    assert len(tables) == 2
    assert sum(t.lower() == "suppliers" for t in tables) == 1
    assert sum(t.lower() == "coffees" for t in tables) == 1


def test_create_schema_is_idempotent(schema):
    create_schema(schema)
    create_schema(schema)

    assert sorted(list_tables(schema)) == ["COFFEES", "SUPPLIERS"]


def test_drop_schema_removes_tables(schema):
    drop_schema(schema)

    assert list_tables(schema) == []


def test_column_names_follow_ddl(schema):
    insp = inspect(schema)
    sup_cols = [c["name"] for c in insp.get_columns("SUPPLIERS")]
    cof_cols = [c["name"] for c in insp.get_columns("COFFEES")]

    assert sup_cols == ["SUP_ID", "SUP_NAME", "STREET", "CITY", "STATE", "ZIP"]
    assert cof_cols == ["COF_NAME", "SUP_ID", "PRICE", "SALES", "TOTAL"]
    assert insp.get_pk_constraint("SUPPLIERS")["constrained_columns"] == ["SUP_ID"]
    assert insp.get_pk_constraint("COFFEES")["constrained_columns"] == ["COF_NAME"]


def test_foreign_key_declared(schema):
    fks = inspect(schema).get_foreign_keys("COFFEES")

    assert len(fks) == 1
    assert fks[0]["referred_table"] == "SUPPLIERS"
    assert fks[0]["constrained_columns"] == ["SUP_ID"]
    assert fks[0]["referred_columns"] == ["SUP_ID"]


def test_projection_order_matches_record_fields():
    assert tuple(a.key for a in SUPPLIER_PROJECTION) == SUPPLIER_FIELDS
    assert tuple(a.key for a in COFFEE_PROJECTION) == COFFEE_FIELDS
    assert [c.name for c in Supplier.__table__.columns] == [a.expression.name for a in SUPPLIER_PROJECTION]
    assert [c.name for c in Coffee.__table__.columns] == [a.expression.name for a in COFFEE_PROJECTION]
