# coffeeshop/main.py
import logging
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from sqlalchemy import text

from coffeeshop.core.config import configure_logging
from coffeeshop.core.db import get_db, engine, create_schema
from coffeeshop.core.errors import DataAccessError
from coffeeshop.core.api import ok, fail, fail_data_access, UTF8JSONResponse

from coffeeshop.routers.suppliers import router as suppliers_router
from coffeeshop.routers.coffees import router as coffees_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Coffeeshop", default_response_class=UTF8JSONResponse)


# -----------------------------
# Error envelopes
# -----------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
    return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
    return fail("Validation error", status_code=422, meta={"errors": jsonable_errors(exc)})

@app.exception_handler(DataAccessError)
async def data_access_error_to_envelope(request: Request, exc: DataAccessError):
    logger.warning("%s %s -> %s", request.method, request.url.path, exc)
    return fail_data_access(exc)


def jsonable_errors(exc: RequestValidationError):
    # ctx may carry exception objects, keep only the printable parts
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]


# ---- startup: make sure both tables exist ----
@app.on_event("startup")
def _ensure_schema():
    create_schema(engine)


# ---- health ----
@app.get("/health")
def health():
    return ok({"service": "coffeeshop"})

@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    val = db.execute(text("SELECT 1")).scalar()
    return ok({"db": "ok", "select1": val})


app.include_router(suppliers_router)
app.include_router(coffees_router)
