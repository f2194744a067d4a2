from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("STORE_BACKEND", "sqlalchemy")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import early_access_request  # noqa: F401
from src.interfaces.http.main import create_app


class StubStoryWriter:
    def __init__(
        self,
        *,
        blurb: str = "Dragons, castles and a brave hero named after you!",
        story: str = "The Kind Dragon\n\nOnce upon a time...",
        error: Exception | None = None,
    ) -> None:
        self.blurb = blurb
        self.story = story
        self.error = error
        self.blurb_calls: list[dict[str, str]] = []
        self.story_calls: list[str] = []

    async def write_blurb(self, *, user_name: str, story_preferences: str) -> str:
        self.blurb_calls.append({"user_name": user_name, "story_preferences": story_preferences})
        if self.error is not None:
            raise self.error
        return self.blurb

    async def write_story(self, *, prompt: str) -> str:
        self.story_calls.append(prompt)
        if self.error is not None:
            raise self.error
        return self.story


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "store_backend": "sqlalchemy",
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "openai_api_key": None,
        }
    )


@pytest.fixture()
def story_writer() -> StubStoryWriter:
    return StubStoryWriter()


@pytest.fixture()
def app(test_settings: Settings, story_writer: StubStoryWriter):
    return create_app(settings=test_settings, story_writer=story_writer)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    store = app.state.store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = store.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await store.dispose()
