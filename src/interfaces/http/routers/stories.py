from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.interfaces.text_generation import StoryWriter
from src.application.use_cases.stories import generate_story
from src.domain.models.storybook import SAMPLE_STORY
from src.interfaces.http.deps import get_story_writer
from src.interfaces.http.schemas.stories import (
    StorybookResponse,
    StoryGenerateRequest,
    StoryGenerateResponse,
)

router = APIRouter(prefix="/stories", tags=["stories"])


@router.get("/sample", response_model=StorybookResponse)
async def sample_story() -> StorybookResponse:
    return StorybookResponse.model_validate(SAMPLE_STORY)


@router.post("/generate", response_model=StoryGenerateResponse)
async def create_story(
    payload: StoryGenerateRequest,
    writer: StoryWriter | None = Depends(get_story_writer),
) -> StoryGenerateResponse:
    story = await generate_story.execute(writer, payload.prompt)
    return StoryGenerateResponse(success=True, story=story)
