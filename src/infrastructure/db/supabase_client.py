"""
Supabase client for the waitlist table.

Uses the official Supabase Python client. The client is created once per
process from the configured project URL and API key.
"""

from __future__ import annotations

import logging

from supabase import Client, create_client

from src.application.errors import StoreNotConfigured
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def create_supabase_client(url: str | None, key: str | None) -> Client:
    if not url or not key:
        raise StoreNotConfigured("Supabase credentials are not configured.")
    logger.info("Creating Supabase client for %s", url)
    return create_client(url, key)


class SupabaseUnitOfWork(UnitOfWork):
    """PostgREST writes are applied per request, so commit and rollback are no-ops."""

    def __init__(self, client: Client) -> None:
        self._client = client
        self.early_access_requests = None

    async def __aenter__(self) -> UnitOfWork:
        from src.infrastructure.repos.early_access_requests_supabase import (
            EarlyAccessRequestsSupabaseRepository,
        )

        self.early_access_requests = EarlyAccessRequestsSupabaseRepository(self._client)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.early_access_requests = None

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None
