# coffeeshop/routers/suppliers.py
from typing import List
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session

from ..core.db import get_db
from ..core.api import ok, ok_list
from ..schemas import SupplierRecord
from ..services import coffee_service as svc

router = APIRouter(prefix="/suppliers", tags=["suppliers"])

@router.get("")
def list_suppliers(
    sort: str = Query("id", description="Allowed: id, name, city, state, zip (prefix '-' for descending)"),
    db: Session = Depends(get_db),
):
    try:
        items = svc.sorted_suppliers(db, sort)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ok_list(items)

@router.get("/search")
def search_supplier(name: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    s = svc.find_supplier_by_name(db, name)
    if s is None:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return ok(s)

@router.post("", status_code=201)
def create_suppliers(payload: List[SupplierRecord], db: Session = Depends(get_db)):
    n = svc.insert_suppliers(db, payload)
    return ok({"inserted": n}, status_code=201)
