"""
Classification of database driver errors.

SQLite reports constraint failures only through the message text; PostgreSQL
drivers expose the SQLSTATE code.
"""

import asyncio

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"

# Failures that mean "could not ask the database", as opposed to "the database said no"
CONNECTIVITY_ERRORS = (
    OperationalError,
    InterfaceError,
    PoolTimeoutError,
    asyncio.TimeoutError,
    ConnectionError,
)


def _sqlstate(exc: IntegrityError):
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == FOREIGN_KEY_VIOLATION
    return "FOREIGN KEY" in str(exc.orig).upper()


def is_unique_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == UNIQUE_VIOLATION
    return "UNIQUE" in str(exc.orig).upper()
