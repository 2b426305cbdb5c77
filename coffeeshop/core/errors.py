# coffeeshop/core/errors.py
"""
Data access error taxonomy.

Nothing here is recovered locally: the access layer rolls back, translates the
SQLAlchemy error into one of these, and re-raises it to the caller.
"""
from __future__ import annotations

from sqlalchemy.exc import DBAPIError, DisconnectionError, IntegrityError, SQLAlchemyError


class DataAccessError(Exception):
    """Base class for every failure surfaced by the access layer."""

    def __init__(self, operation: str, detail: str):
        super().__init__(f"{operation}: {detail}")
        self.operation = operation
        self.detail = detail


class ConnectivityError(DataAccessError):
    """Database unreachable or the connection was invalidated."""


class ConstraintViolationError(DataAccessError):
    """Duplicate primary key, dangling foreign key or failed CHECK."""


class QueryError(DataAccessError):
    """Malformed statement or a type mismatch."""


class RecordDecodeError(QueryError):
    """A result row could not be decoded into a record shape."""


def _detail(exc: BaseException) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def translate(operation: str, exc: SQLAlchemyError) -> DataAccessError:
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError(operation, _detail(exc))
    if isinstance(exc, DisconnectionError):
        return ConnectivityError(operation, _detail(exc))
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return ConnectivityError(operation, _detail(exc))
    return QueryError(operation, _detail(exc))

