# coffeeshop/services/coffee_service.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from sqlalchemy import delete, insert, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import ColumnElement, Select

from coffeeshop import queries as q
from coffeeshop.core.errors import translate
from coffeeshop.models import Coffee, Supplier
from coffeeshop.projections import (
    coffee_from_row,
    coffee_to_row,
    split_pair,
    supplier_from_row,
    supplier_to_row,
)
from coffeeshop.schemas import CoffeeRecord, PriceRange, SupplierRecord

logger = logging.getLogger(__name__)

Pair = Tuple[SupplierRecord, CoffeeRecord]


def _dialect(db: Session) -> str:
    try:
        return db.get_bind().dialect.name
    except Exception:
        return "unknown"


@contextmanager
def _reading(db: Session, operation: str) -> Iterator[None]:
    """Roll back, log and re-raise translated on any read failure."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s failed", operation)
        raise translate(operation, e) from e


def _rows(db: Session, stmt, operation: str) -> list:
    with _reading(db, operation):
        return list(db.execute(stmt).all())


def _write(db: Session, stmt, operation: str, params: Optional[list] = None) -> int:
    """
    Run a DML statement and commit; on failure roll back and re-raise translated.

    Returns the affected row count: the number of parameter sets for a bulk
    insert (its ORM result carries no rowcount), the cursor rowcount otherwise.
    """
    try:
        if params is not None:
            db.execute(stmt, params)
            count = len(params)
        else:
            count = db.execute(stmt).rowcount
        db.commit()
        return count
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s failed", operation)
        raise translate(operation, e) from e


# ---- inserts ----

def insert_suppliers(db: Session, records: Iterable[SupplierRecord]) -> int:
    rows = [supplier_to_row(r) for r in records]
    if not rows:
        return 0
    n = _write(db, insert(Supplier), "insert_suppliers", rows)
    logger.info("inserted %d supplier(s)", n)
    return n


def insert_coffees(db: Session, records: Iterable[CoffeeRecord]) -> int:
    rows = [coffee_to_row(r) for r in records]
    if not rows:
        return 0
    n = _write(db, insert(Coffee), "insert_coffees", rows)
    logger.info("inserted %d coffee(s)", n)
    return n


# ---- scans, projection, filtering ----

def list_suppliers(db: Session) -> List[SupplierRecord]:
    return [supplier_from_row(r) for r in _rows(db, q.suppliers(), "list_suppliers")]


def list_coffees(db: Session) -> List[CoffeeRecord]:
    return [coffee_from_row(r) for r in _rows(db, q.coffees(), "list_coffees")]


def select_columns(db: Session, *cols, where: Sequence[ColumnElement] = ()) -> List[tuple]:
    return [tuple(r) for r in _rows(db, q.columns(*cols, where=where), "select_columns")]


def filter_suppliers(db: Session, *criteria: ColumnElement) -> List[SupplierRecord]:
    return [supplier_from_row(r) for r in _rows(db, q.suppliers(*criteria), "filter_suppliers")]


def filter_coffees(db: Session, *criteria: ColumnElement) -> List[CoffeeRecord]:
    return [coffee_from_row(r) for r in _rows(db, q.coffees(*criteria), "filter_coffees")]


def first_supplier(db: Session, *criteria: ColumnElement) -> Optional[SupplierRecord]:
    with _reading(db, "first_supplier"):
        row = db.execute(q.suppliers(*criteria).limit(1)).first()
    return supplier_from_row(row) if row is not None else None


def find_supplier_by_name(db: Session, name: str) -> Optional[SupplierRecord]:
    return first_supplier(db, Supplier.name == name)


def find_coffee(db: Session, name: str) -> Optional[CoffeeRecord]:
    with _reading(db, "find_coffee"):
        row = db.execute(q.coffees(Coffee.name == name).limit(1)).first()
    return coffee_from_row(row) if row is not None else None


# ---- sorting ----

def sorted_suppliers(db: Session, sort: str = "id") -> List[SupplierRecord]:
    stmt = q.sort_by(q.suppliers(), sort, q.SUPPLIER_SORT_FIELDS)
    return [supplier_from_row(r) for r in _rows(db, stmt, "sorted_suppliers")]


def sorted_coffees(db: Session, sort: str = "name") -> List[CoffeeRecord]:
    stmt = q.sort_by(q.coffees(), sort, q.COFFEE_SORT_FIELDS)
    return [coffee_from_row(r) for r in _rows(db, stmt, "sorted_coffees")]


# ---- joins, union, zip ----

def cross_join(db: Session) -> List[Pair]:
    return [split_pair(r) for r in _rows(db, q.join(Supplier, Coffee), "cross_join")]


def inner_join(db: Session) -> List[Pair]:
    return [split_pair(r) for r in _rows(db, q.suppliers_with_coffees(), "inner_join")]


def union_suppliers(
    db: Session, first: Sequence[ColumnElement], second: Sequence[ColumnElement]
) -> List[SupplierRecord]:
    stmt = q.union_of(q.suppliers(*first), q.suppliers(*second))
    return [supplier_from_row(r) for r in _rows(db, stmt, "union_suppliers")]


def zip_suppliers_coffees(db: Session) -> List[Pair]:
    stmt = q.zip_with(Supplier, Coffee, Supplier.id, Coffee.name)
    return [split_pair(r) for r in _rows(db, stmt, "zip_suppliers_coffees")]


# ---- aggregates and subqueries ----

def _scalar(db: Session, stmt: Select, operation: str):
    with _reading(db, operation):
        return db.execute(stmt).scalar_one()


def min_price(db: Session) -> Optional[float]:
    return _scalar(db, q.min_of(Coffee.price), "min_price")


def max_price(db: Session) -> Optional[float]:
    return _scalar(db, q.max_of(Coffee.price), "max_price")


def price_range(db: Session) -> PriceRange:
    return PriceRange(min=min_price(db), max=max_price(db))


def coffees_in(db: Session, subquery: Select) -> List[CoffeeRecord]:
    """Coffees whose name is in the single-column ``subquery``."""
    return filter_coffees(db, q.in_subquery(Coffee.name, subquery))


def coffees_above_random_price(db: Session) -> List[CoffeeRecord]:
    crit = q.above_random_share_of_max(Coffee.price, _dialect(db))
    stmt = q.sort_by(q.coffees(crit), "price", q.COFFEE_SORT_FIELDS)
    return [coffee_from_row(r) for r in _rows(db, stmt, "coffees_above_random_price")]


# ---- updates, deletes ----

def update_coffees(db: Session, record: CoffeeRecord, *criteria: ColumnElement) -> int:
    """Replace every coffee matching ``criteria`` with ``record``; returns matched rows."""
    stmt = update(Coffee).where(*criteria).values(**coffee_to_row(record))
    count = _write(db, stmt, "update_coffees")
    logger.info("updated %d coffee(s) -> %s", count, record.name)
    return count


def delete_coffees(db: Session, *criteria: ColumnElement) -> int:
    stmt = delete(Coffee).where(*criteria)
    count = _write(db, stmt, "delete_coffees")
    logger.info("deleted %d coffee(s)", count)
    return count


# ---- plain SQL ----

def raw_coffees(db: Session) -> List[CoffeeRecord]:
    rows = _rows(db, text('SELECT * FROM "COFFEES"'), "raw_coffees")
    return [coffee_from_row(r) for r in rows]


def raw_suppliers(db: Session) -> List[SupplierRecord]:
    rows = _rows(db, text('SELECT * FROM "SUPPLIERS"'), "raw_suppliers")
    return [supplier_from_row(r) for r in rows]
