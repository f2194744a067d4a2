from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from src.application.errors import StoreNotConfigured
from src.application.interfaces.unit_of_work import UnitOfWorkFactory
from src.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Store:
    """A configured persistence backend and the unit-of-work factory that opens it."""

    backend: str
    uow_factory: UnitOfWorkFactory
    engine: AsyncEngine | None = None

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def _build_sqlalchemy_store(settings: Settings) -> Store:
    from src.infrastructure.db.session import (
        SQLAlchemyUnitOfWork,
        create_engine,
        create_session_factory,
    )

    if not settings.database_url:
        raise StoreNotConfigured("DATABASE_URL is not configured.")
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    return Store(
        backend="sqlalchemy",
        uow_factory=lambda: SQLAlchemyUnitOfWork(session_factory),
        engine=engine,
    )


def _build_supabase_store(settings: Settings) -> Store:
    from src.infrastructure.db.supabase_client import SupabaseUnitOfWork, create_supabase_client

    key = settings.supabase_key.get_secret_value() if settings.supabase_key else None
    client = create_supabase_client(settings.supabase_url, key)
    return Store(backend="supabase", uow_factory=lambda: SupabaseUnitOfWork(client))


def build_store(settings: Settings) -> Store | None:
    """Build the configured store, or None when its credentials are missing or invalid."""
    try:
        if settings.store_backend == "supabase":
            return _build_supabase_store(settings)
        return _build_sqlalchemy_store(settings)
    except StoreNotConfigured as exc:
        logger.error("Store credentials are not configured (%s): %s", settings.store_backend, exc)
        return None
    except Exception as exc:
        logger.error("Failed to create %s store client: %s", settings.store_backend, exc)
        return None
