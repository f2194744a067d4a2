from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class AccessRequest:
    id: UUID
    name: str
    email: str
    preferences: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, *, name: str, email: str, preferences: str) -> AccessRequest:
        return cls(
            id=uuid4(),
            name=name,
            email=email,
            preferences=preferences,
            created_at=datetime.now(timezone.utc),
        )
