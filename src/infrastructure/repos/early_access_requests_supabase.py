from __future__ import annotations

import logging

import anyio
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod
from supabase import Client

from src.application.errors import StoreOperationError
from src.application.interfaces.repositories.early_access_requests import (
    EarlyAccessRequestsRepository,
)
from src.domain.models.access_request import AccessRequest
from src.infrastructure.db.errors import classify_store_error

logger = logging.getLogger(__name__)

TABLE = "early_access_requests"


class EarlyAccessRequestsSupabaseRepository(EarlyAccessRequestsRepository):
    def __init__(self, client: Client) -> None:
        self.client = client

    async def add(self, request: AccessRequest) -> AccessRequest:
        # id and created_at are left to the table defaults
        row = {"name": request.name, "email": request.email, "preferences": request.preferences}
        try:
            # minimal return: an insert-only policy must not need SELECT on the table
            await anyio.to_thread.run_sync(
                lambda: self.client.table(TABLE)
                .insert(row, returning=ReturnMethod.minimal)
                .execute()
            )
        except APIError as exc:
            logger.warning("Supabase insert error: code=%s message=%s", exc.code, exc.message)
            raise classify_store_error(exc.code, exc.message or str(exc)) from exc
        return request

    async def count(self) -> int:
        try:
            result = await anyio.to_thread.run_sync(
                lambda: self.client.table(TABLE).select("*", count="exact", head=True).execute()
            )
        except APIError as exc:
            raise StoreOperationError(exc.message or str(exc), store_code=exc.code) from exc
        return int(result.count or 0)
