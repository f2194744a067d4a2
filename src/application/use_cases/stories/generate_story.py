from __future__ import annotations

import logging

from src.application.errors import GenerationError, GenerationUnavailable, ValidationError
from src.application.interfaces.text_generation import StoryWriter

logger = logging.getLogger(__name__)

PROMPT_MIN_LENGTH = 10
PROMPT_MAX_LENGTH = 500


async def execute(writer: StoryWriter | None, prompt: str) -> str:
    prompt = (prompt or "").strip()
    if len(prompt) < PROMPT_MIN_LENGTH:
        raise ValidationError(
            "Invalid input.",
            details={
                "fields": [
                    {"field": "prompt", "message": "Please enter a prompt of at least 10 characters."}
                ]
            },
        )
    if len(prompt) > PROMPT_MAX_LENGTH:
        raise ValidationError(
            "Invalid input.",
            details={
                "fields": [
                    {"field": "prompt", "message": "Your prompt can be up to 500 characters long."}
                ]
            },
        )
    if writer is None:
        raise GenerationUnavailable("Story generation is not configured.")
    try:
        story = await writer.write_story(prompt=prompt)
    except Exception as exc:
        logger.error("Story generation failed: %s", exc)
        raise GenerationError("Failed to generate story.", details={"reason": str(exc)}) from exc
    story = (story or "").strip()
    if not story:
        raise GenerationError("Failed to generate story.", details={"reason": "empty output"})
    return story
