from __future__ import annotations

from fastapi import Request

from src.application.interfaces.text_generation import StoryWriter
from src.application.interfaces.unit_of_work import UnitOfWorkFactory
from src.config.settings import Settings, get_settings


def get_app_settings() -> Settings:
    return get_settings()


def get_uow_factory(request: Request) -> UnitOfWorkFactory | None:
    store = getattr(request.app.state, "store", None)
    if store is None:
        return None
    return store.uow_factory


def get_story_writer(request: Request) -> StoryWriter | None:
    return getattr(request.app.state, "story_writer", None)
