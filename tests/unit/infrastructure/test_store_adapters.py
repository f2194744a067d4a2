from __future__ import annotations

from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod
from sqlalchemy import Text
from sqlalchemy.exc import IntegrityError, OperationalError

from src.application.errors import (
    DuplicateAccessRequest,
    StoreOperationError,
    StorePolicyError,
)
from src.config.settings import Settings
from src.domain.models.access_request import AccessRequest
from src.infrastructure.db.errors import classify_store_error, sqlstate_of
from src.infrastructure.db.orm.early_access_request import EarlyAccessRequestORM
from src.infrastructure.db.store import build_store
from src.infrastructure.repos.early_access_requests_supabase import (
    EarlyAccessRequestsSupabaseRepository,
)


class FakeQuery:
    def __init__(self, *, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error

    def execute(self):
        if self.error is not None:
            raise self.error
        return self.result


class FakeTable:
    def __init__(self, *, insert_error=None, count: int | None = 0, select_error=None) -> None:
        self.inserted: list[dict] = []
        self.returning: list = []
        self.select_args: tuple | None = None
        self.insert_error = insert_error
        self.count = count
        self.select_error = select_error

    def insert(self, row: dict, *, returning=None) -> FakeQuery:
        self.inserted.append(row)
        self.returning.append(returning)
        return FakeQuery(result=SimpleNamespace(data=[row]), error=self.insert_error)

    def select(self, *columns, **kwargs) -> FakeQuery:
        self.select_args = (columns, kwargs)
        return FakeQuery(result=SimpleNamespace(data=[], count=self.count), error=self.select_error)


class FakeClient:
    def __init__(self, table: FakeTable) -> None:
        self._table = table
        self.tables: list[str] = []

    def table(self, name: str) -> FakeTable:
        self.tables.append(name)
        return self._table


def _api_error(code: str, message: str) -> APIError:
    return APIError({"message": message, "code": code, "hint": None, "details": None})


def test_classify_store_error_by_code():
    assert isinstance(classify_store_error("42501", "denied"), StorePolicyError)
    assert isinstance(classify_store_error("23505", "duplicate"), DuplicateAccessRequest)
    generic = classify_store_error("08006", "connection failure")
    assert isinstance(generic, StoreOperationError)
    assert generic.store_code == "08006"
    assert generic.message == "connection failure"
    assert isinstance(classify_store_error(None, "???"), StoreOperationError)


def test_sqlstate_read_from_driver_error():
    asyncpg_like = IntegrityError("INSERT", {}, SimpleNamespace(sqlstate="23505"))
    psycopg2_like = OperationalError("INSERT", {}, SimpleNamespace(pgcode="42501"))
    sqlite_unique = IntegrityError(
        "INSERT", {}, Exception("UNIQUE constraint failed: early_access_requests.email")
    )
    sqlite_other = OperationalError("SELECT", {}, Exception("no such table"))

    assert sqlstate_of(asyncpg_like) == "23505"
    assert sqlstate_of(psycopg2_like) == "42501"
    assert sqlstate_of(sqlite_unique) == "23505"
    assert sqlstate_of(sqlite_other) is None


@pytest.mark.asyncio
async def test_supabase_insert_sends_row():
    table = FakeTable()
    client = FakeClient(table)
    repo = EarlyAccessRequestsSupabaseRepository(client)
    request = AccessRequest.create(name="Jo", email="jo@x.com", preferences="dragons and castles")
    stored = await repo.add(request)
    assert stored is request
    assert client.tables == ["early_access_requests"]
    assert table.inserted == [
        {"name": "Jo", "email": "jo@x.com", "preferences": "dragons and castles"}
    ]
    assert table.returning == [ReturnMethod.minimal]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("23505", DuplicateAccessRequest),
        ("42501", StorePolicyError),
        ("PGRST204", StoreOperationError),
    ],
)
async def test_supabase_insert_translates_api_errors(code, expected):
    table = FakeTable(insert_error=_api_error(code, "store said no"))
    repo = EarlyAccessRequestsSupabaseRepository(FakeClient(table))
    request = AccessRequest.create(name="Jo", email="jo@x.com", preferences="dragons and castles")
    with pytest.raises(expected) as info:
        await repo.add(request)
    assert info.value.message == "store said no"


@pytest.mark.asyncio
async def test_supabase_count_uses_exact_head_count():
    table = FakeTable(count=17)
    repo = EarlyAccessRequestsSupabaseRepository(FakeClient(table))
    assert await repo.count() == 17
    assert table.select_args == (("*",), {"count": "exact", "head": True})

    table.count = None
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_supabase_count_error_is_store_error():
    table = FakeTable(select_error=_api_error("42P01", "relation does not exist"))
    repo = EarlyAccessRequestsSupabaseRepository(FakeClient(table))
    with pytest.raises(StoreOperationError):
        await repo.count()


def test_build_store_returns_none_without_credentials():
    settings = Settings.model_validate(
        {"store_backend": "supabase", "supabase_url": "", "supabase_key": None}
    )
    assert build_store(settings) is None

    settings = Settings.model_validate({"store_backend": "sqlalchemy", "database_url": ""})
    assert build_store(settings) is None


@pytest.mark.asyncio
async def test_build_store_sqlalchemy(tmp_path):
    settings = Settings.model_validate(
        {"store_backend": "sqlalchemy", "database_url": f"sqlite+aiosqlite:///{tmp_path}/s.db"}
    )
    store = build_store(settings)
    assert store is not None
    assert store.backend == "sqlalchemy"
    assert store.engine is not None
    await store.dispose()


def test_table_allows_long_names_and_unique_email_ignoring_case():
    table = EarlyAccessRequestORM.__table__
    assert isinstance(table.c.name.type, Text)
    (index,) = [ix for ix in table.indexes if ix.name == "ux_early_access_requests_email"]
    assert index.unique
    assert "lower(email)" in str(index.expressions[0]).replace("early_access_requests.", "")
