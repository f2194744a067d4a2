from __future__ import annotations

from typing import Callable, Protocol

from src.application.interfaces.repositories.early_access_requests import (
    EarlyAccessRequestsRepository,
)


class UnitOfWork(Protocol):
    early_access_requests: EarlyAccessRequestsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


# None stands for a store whose credentials are not configured
UnitOfWorkFactory = Callable[[], UnitOfWork]
