from __future__ import annotations

import logging

from src.application.interfaces.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


async def execute(uow_factory: UnitOfWorkFactory | None) -> int:
    """Waitlist size; 0 when the store is missing or unreachable."""
    if uow_factory is None:
        logger.error("Error fetching count: store is not configured")
        return 0
    try:
        async with uow_factory() as uow:
            return await uow.early_access_requests.count()
    except Exception as exc:
        logger.error("Error fetching count: %s", exc)
        return 0
