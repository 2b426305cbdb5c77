# coffeeshop/projections.py
"""
Explicit conversion between stored rows and record shapes.

``*_to_row`` gives the insert/update values keyed by mapped attribute name;
``*_from_row`` decodes a positional row (ORM ``Row`` or raw DBAPI tuple) laid
out in projection order.
"""
from __future__ import annotations

from typing import Any, Dict, Sequence

from pydantic import ValidationError

from .core.errors import RecordDecodeError
from .schemas import CoffeeRecord, SupplierRecord

SUPPLIER_FIELDS = ("id", "name", "street", "city", "state", "zip")
COFFEE_FIELDS = ("name", "sup_id", "price", "sales", "total")


def _decode(model, fields: Sequence[str], row: Sequence[Any]):
    values = tuple(row)
    if len(values) != len(fields):
        raise RecordDecodeError(
            f"decode {model.__name__}",
            f"expected {len(fields)} columns, got {len(values)}",
        )
    try:
        return model(**dict(zip(fields, values)))
    except ValidationError as e:
        raise RecordDecodeError(f"decode {model.__name__}", str(e)) from e


def supplier_to_row(rec: SupplierRecord) -> Dict[str, Any]:
    return {f: getattr(rec, f) for f in SUPPLIER_FIELDS}


def supplier_from_row(row: Sequence[Any]) -> SupplierRecord:
    return _decode(SupplierRecord, SUPPLIER_FIELDS, row)


def coffee_to_row(rec: CoffeeRecord) -> Dict[str, Any]:
    return {f: getattr(rec, f) for f in COFFEE_FIELDS}


def coffee_from_row(row: Sequence[Any]) -> CoffeeRecord:
    return _decode(CoffeeRecord, COFFEE_FIELDS, row)


def split_pair(row: Sequence[Any]) -> tuple[SupplierRecord, CoffeeRecord]:
    """Decode a joined (supplier columns..., coffee columns...) row."""
    values = tuple(row)
    n = len(SUPPLIER_FIELDS)
    return supplier_from_row(values[:n]), coffee_from_row(values[n:])
