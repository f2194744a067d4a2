from __future__ import annotations

from typing import Protocol


class StoryWriter(Protocol):
    """Text-generation backend for personalised copy."""

    async def write_blurb(self, *, user_name: str, story_preferences: str) -> str: ...

    async def write_story(self, *, prompt: str) -> str: ...
