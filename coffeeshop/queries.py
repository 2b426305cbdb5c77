# coffeeshop/queries.py
"""
Statement builders. Nothing here touches a session: every function returns a
SQLAlchemy construct that the access layer executes.

Entities are addressed through their projection (the mapped columns in record
field order), so every built statement yields positional rows that
``coffeeshop.projections`` can decode.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from sqlalchemy import Float, Integer, func, select, true, union
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.sql.expression import ColumnElement, Select
from sqlalchemy.sql.selectable import CompoundSelect

from .models import COFFEE_PROJECTION, SUPPLIER_PROJECTION, Coffee, Supplier

PROJECTIONS: Dict[type, tuple] = {
    Supplier: SUPPLIER_PROJECTION,
    Coffee: COFFEE_PROJECTION,
}

SUPPLIER_SORT_FIELDS: Mapping[str, Any] = {
    "id": Supplier.id,
    "name": Supplier.name,
    "city": Supplier.city,
    "state": Supplier.state,
    "zip": Supplier.zip,
}

COFFEE_SORT_FIELDS: Mapping[str, Any] = {
    "name": Coffee.name,
    "sup_id": Coffee.sup_id,
    "price": Coffee.price,
    "sales": Coffee.sales,
    "total": Coffee.total,
}


def projection(entity: type) -> tuple:
    try:
        return PROJECTIONS[entity]
    except KeyError:
        raise ValueError(f"no projection for {entity!r}") from None


def suppliers(*criteria: ColumnElement) -> Select:
    return select(*SUPPLIER_PROJECTION).where(*criteria)


def coffees(*criteria: ColumnElement) -> Select:
    return select(*COFFEE_PROJECTION).where(*criteria)


def columns(*cols, where: Iterable[ColumnElement] = ()) -> Select:
    return select(*cols).where(*where)


def sort_by(stmt: Select, sort: str, fields: Mapping[str, Any]) -> Select:
    """
    Order ``stmt`` by a named field: "zip" ascending, "-zip" descending.
    Unknown names raise ValueError.
    """
    desc = sort.startswith("-")
    key = sort[1:] if desc else sort
    if key not in fields:
        raise ValueError(f"unknown sort field {key!r}; allowed: {', '.join(fields)}")
    col = fields[key]
    return stmt.order_by(col.desc() if desc else col.asc())


def join(left: type, right: type, on: Optional[ColumnElement] = None) -> Select:
    """
    Explicit join of two tables: rows are (left columns..., right columns...).

    ``on=None`` pairs every left row with every right row (cross join); an
    equality predicate gives the equi-join.
    """
    onclause = on if on is not None else true()
    return select(*projection(left), *projection(right)).join_from(left, right, onclause)


def suppliers_with_coffees() -> Select:
    return join(Supplier, Coffee, Coffee.sup_id == Supplier.id)


def union_of(first: Select, second: Select) -> CompoundSelect:
    # UNION, not UNION ALL: duplicates are removed by the database
    return union(first, second)


def min_of(col) -> Select:
    return select(func.min(col))


def max_of(col) -> Select:
    return select(func.max(col))


def in_subquery(col, subquery: Select) -> ColumnElement:
    return col.in_(subquery)


def random_fraction(dialect_name: str) -> ColumnElement:
    """A per-row random value in [0, 1)."""
    if dialect_name == "sqlite":
        # SQLite random() is a signed 64-bit integer
        r = func.random(type_=Integer)
        return ((r % 1000000 + 1000000) % 1000000) / 1000000.0
    if dialect_name in ("postgresql", "postgres"):
        return func.random(type_=Float)
    return func.rand(type_=Float)


def above_random_share_of_max(col, dialect_name: str) -> ColumnElement:
    """``col > (SELECT max(col)) * RAND()``"""
    max_subq = select(func.max(col)).scalar_subquery()
    return col > max_subq * random_fraction(dialect_name)


def zip_with(left: type, right: type, left_order, right_order) -> Select:
    """
    Pair the n-th left row with the n-th right row.

    Both sides are numbered with row_number() under their own ordering and
    joined on that number; the shorter side bounds the result.
    """
    lq = select(*projection(left), func.row_number().over(order_by=left_order).label("rn")).subquery("lz")
    rq = select(*projection(right), func.row_number().over(order_by=right_order).label("rn")).subquery("rz")
    lcols = list(lq.c)[:-1]
    rcols = list(rq.c)[:-1]
    return (
        select(*lcols, *rcols)
        .select_from(lq.join(rq, lq.c.rn == rq.c.rn))
        .order_by(lq.c.rn)
    )


def compiled_sql(stmt, dialect: Optional[Dialect] = None) -> str:
    return str(stmt.compile(dialect=dialect or sqlite.dialect()))
