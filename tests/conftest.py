import pytest

from coffeeshop.core.db import make_engine, create_schema, session_scope
from coffeeshop.scripts.seed import seed


@pytest.fixture
def engine():
    """A fresh in-memory database per test."""
    eng = make_engine("sqlite+pysqlite:///:memory:", echo=False)
    yield eng
    eng.dispose()


@pytest.fixture
def schema(engine):
    create_schema(engine)
    return engine


@pytest.fixture
def db(schema):
    with session_scope(schema) as session:
        yield session


@pytest.fixture
def suppliers_only(db):
    seed(db, with_coffees=False)
    return db


@pytest.fixture
def seeded(db):
    seed(db)
    return db
