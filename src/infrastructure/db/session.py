from __future__ import annotations

import logging

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.db.errors import translate_dbapi_error
from src.infrastructure.repos.early_access_requests_sqlalchemy import (
    EarlyAccessRequestsSQLAlchemyRepository,
)

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    # pre-ping so a waitlist count after an idle spell does not hit a dead connection
    return create_async_engine(database_url, echo=False, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """One session per waitlist operation; driver errors surface as application errors."""

    early_access_requests: EarlyAccessRequestsSQLAlchemyRepository

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.early_access_requests = EarlyAccessRequestsSQLAlchemyRepository(self._session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            if exc is not None:
                logger.debug("Rolling back early access session after %s", exc_type.__name__)
                await session.rollback()
        finally:
            await session.close()

    async def commit(self) -> None:
        if self._session is None:
            return
        try:
            await self._session.commit()
        except DBAPIError as exc:
            logger.warning("Commit of early access session failed: %s", exc.orig)
            raise translate_dbapi_error(exc) from exc

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()
