from __future__ import annotations

from sqlalchemy.exc import DBAPIError, IntegrityError

from src.application.errors import (
    AppError,
    DuplicateAccessRequest,
    StoreOperationError,
    StorePolicyError,
)

# Postgres SQLSTATE codes, also reported verbatim by PostgREST
INSUFFICIENT_PRIVILEGE = "42501"
UNIQUE_VIOLATION = "23505"


def classify_store_error(code: str | None, message: str) -> AppError:
    """Map a store error code onto the application error the recorder reports."""
    if code == INSUFFICIENT_PRIVILEGE:
        return StorePolicyError(message, details={"store_code": code})
    if code == UNIQUE_VIOLATION:
        return DuplicateAccessRequest(message, details={"store_code": code})
    return StoreOperationError(message, store_code=code)


def sqlstate_of(exc: DBAPIError) -> str | None:
    orig = exc.orig
    # asyncpg exposes sqlstate/pgcode on the adapted error, psycopg exposes sqlstate
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return str(code)
    # SQLite reports no code; recognise its unique constraint message instead
    if isinstance(exc, IntegrityError) and "unique" in str(orig).lower():
        return UNIQUE_VIOLATION
    return None


def translate_dbapi_error(exc: DBAPIError) -> AppError:
    return classify_store_error(sqlstate_of(exc), str(exc.orig))
