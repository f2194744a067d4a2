from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EarlyAccessPayload(BaseModel):
    """Signup form body; field rules are applied by the access request validator."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(
        default=None, validation_alias=AliasChoices("name", "userName", "user_name")
    )
    email: str | None = None
    preferences: str | None = Field(
        default=None,
        validation_alias=AliasChoices("preferences", "storyPreferences", "story_preferences"),
    )


class EarlyAccessResponse(BaseModel):
    success: bool
    message: str
    blurb: str | None = None
    error: str | None = None


class WaitlistCountResponse(BaseModel):
    count: int
