# coffeeshop/core/db.py
import logging
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from . import config
from .errors import ConnectivityError

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_fks(dbapi_conn, _record):
    # SQLite ships with FK enforcement off; it has to be switched on per connection
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


def make_engine(dsn: str | None = None, echo: bool | None = None) -> Engine:
    """
    Build an engine for the given URL (default: DATABASE_URL).

    In-memory SQLite gets a StaticPool so every session of the engine sees the
    same database; file SQLite only turns off the thread check.
    """
    dsn = dsn or config.DATABASE_URL
    url = make_url(dsn)
    engine_kwargs = dict(echo=config.SQL_ECHO if echo is None else echo)

    backend = url.get_backend_name()
    if backend.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **engine_kwargs)
    if backend.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_fks)
    logger.debug("engine created for %s", url.render_as_string(hide_password=True))
    return engine


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@contextmanager
def session_scope(bind: Engine | None = None) -> Iterator[Session]:
    """Open a session, commit on success, roll back on failure, always close."""
    db = Session(bind=bind) if bind is not None else SessionLocal()
    try:
        try:
            db.connection()
        except OperationalError as e:
            raise ConnectivityError("connect", str(e.orig)) from e
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_schema(bind: Engine) -> None:
    """Create every mapped table that does not exist yet."""
    from .. import models  # noqa: F401  (fills Base.metadata)

    Base.metadata.create_all(bind=bind, checkfirst=True)
    logger.info("schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_schema(bind: Engine) -> None:
    from .. import models  # noqa: F401

    Base.metadata.drop_all(bind=bind, checkfirst=True)
    logger.info("schema dropped")


def list_tables(bind: Engine) -> List[str]:
    return inspect(bind).get_table_names()
