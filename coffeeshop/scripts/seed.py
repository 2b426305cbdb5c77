# coffeeshop/scripts/seed.py
import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from coffeeshop.core.config import configure_logging
from coffeeshop.core.db import engine as default_engine, create_schema, session_scope
from coffeeshop.models import Coffee, Supplier
from coffeeshop.schemas import CoffeeRecord, SupplierRecord
from coffeeshop.services.coffee_service import insert_coffees, insert_suppliers

logger = logging.getLogger(__name__)

# ---------- seed data ----------

SUPPLIERS = [
    SupplierRecord(id=101, name="Acme, Inc.",   street="99 Market Street", city="Groundsville", state="CA", zip="95199"),
    SupplierRecord(id=102, name="Flaf, Inc.",   street="1 Market Street",  city="Hammersfield", state="ON", zip="12342"),
    SupplierRecord(id=103, name="Pepco, Inc.",  street="13 Cross",         city="LA",           state="CA", zip="93762"),
    SupplierRecord(id=104, name="SunDream",     street="65 Trade Square",  city="New York",     state="NY", zip="13262"),
    SupplierRecord(id=105, name="Sisters Inc.", street="15 Trade Square",  city="New York",     state="NY", zip="14262"),
]

COFFEES = [
    CoffeeRecord(name="Colombian",          sup_id=101, price=7.99),
    CoffeeRecord(name="French_Roast",       sup_id=101, price=8.99),
    CoffeeRecord(name="Espresso",           sup_id=103, price=9.99),
    CoffeeRecord(name="Colombian_Decaf",    sup_id=103, price=8.99),
    CoffeeRecord(name="French_Roast_Decaf", sup_id=105, price=9.99),
]


def _count(db: Session, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def seed(db: Session, *, with_coffees: bool = True) -> None:
    """Insert the seed rows into empty tables; non-empty tables are left alone."""
    if _count(db, Supplier) == 0:
        insert_suppliers(db, SUPPLIERS)
    else:
        logger.info("SUPPLIERS not empty, skipped")

    if with_coffees:
        if _count(db, Coffee) == 0:
            insert_coffees(db, COFFEES)
        else:
            logger.info("COFFEES not empty, skipped")


def run(bind: Engine | None = None) -> None:
    bind = bind or default_engine
    create_schema(bind)
    with session_scope(bind) as db:
        seed(db)
    logger.info("seed done")


if __name__ == "__main__":
    configure_logging()
    run()
