# coffeeshop/routers/coffees.py
from typing import List
from fastapi import APIRouter, Depends, Path, Query, HTTPException
from sqlalchemy.orm import Session

from ..core.db import get_db
from ..core.api import ok, ok_list
from ..models import Coffee
from ..schemas import CoffeeRecord
from ..services import coffee_service as svc

router = APIRouter(prefix="/coffees", tags=["coffees"])

@router.get("")
def list_coffees(
    sort: str = Query("name", description="Allowed: name, sup_id, price, sales, total (prefix '-' for descending)"),
    db: Session = Depends(get_db),
):
    try:
        items = svc.sorted_coffees(db, sort)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ok_list(items)

@router.get("/price-range")
def price_range(db: Session = Depends(get_db)):
    return ok(svc.price_range(db))

@router.get("/with-suppliers")
def coffees_with_suppliers(db: Session = Depends(get_db)):
    return ok_list(svc.inner_join(db))

@router.post("", status_code=201)
def create_coffees(payload: List[CoffeeRecord], db: Session = Depends(get_db)):
    n = svc.insert_coffees(db, payload)
    return ok({"inserted": n}, status_code=201)

@router.put("/{name}")
def replace_coffee(payload: CoffeeRecord, name: str = Path(..., min_length=1), db: Session = Depends(get_db)):
    n = svc.update_coffees(db, payload, Coffee.name == name)
    if n == 0:
        raise HTTPException(status_code=404, detail="Coffee not found")
    return ok(payload)

@router.delete("/{name}")
def delete_coffee(name: str = Path(..., min_length=1), db: Session = Depends(get_db)):
    n = svc.delete_coffees(db, Coffee.name == name)
    if n == 0:
        raise HTTPException(status_code=404, detail="Coffee not found")
    return ok({"deleted": n})
