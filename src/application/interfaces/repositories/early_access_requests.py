from __future__ import annotations

from typing import Protocol

from src.domain.models.access_request import AccessRequest


class EarlyAccessRequestsRepository(Protocol):
    async def add(self, request: AccessRequest) -> AccessRequest: ...
    async def count(self) -> int: ...
