from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import StoreOperationError
from src.application.interfaces.repositories.early_access_requests import (
    EarlyAccessRequestsRepository,
)
from src.domain.models.access_request import AccessRequest
from src.infrastructure.db.errors import classify_store_error, sqlstate_of
from src.infrastructure.db.orm.early_access_request import EarlyAccessRequestORM

logger = logging.getLogger(__name__)


class EarlyAccessRequestsSQLAlchemyRepository(EarlyAccessRequestsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EarlyAccessRequestORM) -> AccessRequest:
        return AccessRequest(
            id=orm.id,
            name=orm.name,
            email=orm.email,
            preferences=orm.preferences,
            created_at=orm.created_at,
        )

    async def add(self, request: AccessRequest) -> AccessRequest:
        orm = EarlyAccessRequestORM(
            id=request.id,
            name=request.name,
            email=request.email,
            preferences=request.preferences,
            created_at=request.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except DBAPIError as exc:
            code = sqlstate_of(exc)
            logger.warning("Insert into early_access_requests failed: code=%s err=%s", code, exc.orig)
            raise classify_store_error(code, str(exc.orig)) from exc
        return self._to_domain(orm)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(EarlyAccessRequestORM)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreOperationError(str(exc)) from exc
        return int(result.scalar_one() or 0)
