from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from src.domain.models.storybook import PageKind


class StoryPageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: PageKind
    text: str
    image: str | None = None
    alt: str | None = None
    end_text: str | None = None


class StorybookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    pages: list[StoryPageResponse]


class StoryGenerateRequest(BaseModel):
    prompt: str


class StoryGenerateResponse(BaseModel):
    success: bool
    story: str
