from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.interfaces.text_generation import StoryWriter
from src.config.settings import Settings, get_settings
from src.infrastructure.db.store import Store, build_store
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.routers import early_access, stories
from src.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        store = getattr(app.state, "store", None)
        if store is not None:
            await store.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def _build_story_writer(settings: Settings) -> StoryWriter | None:
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not configured; blurbs will use the fallback text")
        return None
    from src.infrastructure.services.openai_service import OpenAIStoryWriter

    return OpenAIStoryWriter(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.openai_model,
        timeout=settings.openai_timeout_seconds,
        max_tokens=settings.openai_max_tokens,
    )


def create_app(
    *,
    settings: Settings | None = None,
    store: Store | None = None,
    story_writer: StoryWriter | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Storybook Early Access API",
        version="0.1.0",
        description="Waitlist signups and personalised blurbs for the storybook generator",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or build_store(settings)
    app.state.story_writer = story_writer or _build_story_writer(settings)
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(early_access.router)
    api.include_router(stories.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
