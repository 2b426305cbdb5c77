# coffeeshop/core/api.py
from __future__ import annotations
from typing import Any, Dict, Optional, Sequence
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .errors import DataAccessError, ConnectivityError, ConstraintViolationError

# UTF-8 charset on every JSON response
class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"

# Data access failure -> HTTP status
ERROR_STATUS = (
    (ConnectivityError, 503),
    (ConstraintViolationError, 409),
    (DataAccessError, 400),
)

def status_for(exc: DataAccessError) -> int:
    for cls, code in ERROR_STATUS:
        if isinstance(exc, cls):
            return code
    return 500

def to_plain(data: Any) -> Any:
    """Records become dicts; a (supplier, coffee) pair becomes {"supplier":..., "coffee":...}."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, tuple) and len(data) == 2 and all(isinstance(x, BaseModel) for x in data):
        return {"supplier": data[0].model_dump(), "coffee": data[1].model_dump()}
    if isinstance(data, (list, tuple)):
        return [to_plain(x) for x in data]
    return data

def list_meta(items: Optional[Sequence[Any]] = None, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    meta: Dict[str, Any] = {}
    if items is not None:
        meta["count"] = len(items)
    if extra:
        meta.update(extra)
    return meta

def ok(data: Any = True, meta: Optional[Dict[str, Any]] = None, status_code: int = 200):
    payload: Dict[str, Any] = {"ok": True, "data": to_plain(data)}
    if meta:
        payload["meta"] = meta
    return UTF8JSONResponse(content=payload, status_code=status_code)

def ok_list(items: Sequence[Any], status_code: int = 200):
    return ok(items, meta=list_meta(items), status_code=status_code)

def fail(error: str, status_code: int = 400, meta: Optional[Dict[str, Any]] = None):
    payload: Dict[str, Any] = {"ok": False, "error": error}
    if meta:
        payload["meta"] = meta
    return UTF8JSONResponse(content=payload, status_code=status_code)

def fail_data_access(exc: DataAccessError):
    return fail(str(exc), status_code=status_for(exc), meta={"kind": exc.__class__.__name__, "operation": exc.operation})
