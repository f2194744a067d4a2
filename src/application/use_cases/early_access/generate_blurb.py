from __future__ import annotations

import logging

from src.application.interfaces.text_generation import StoryWriter

logger = logging.getLogger(__name__)

PREFERENCES_EXCERPT_LENGTH = 120


def fallback_blurb(name: str, preferences: str) -> str:
    excerpt = " ".join(preferences.split())
    if len(excerpt) > PREFERENCES_EXCERPT_LENGTH:
        excerpt = excerpt[: PREFERENCES_EXCERPT_LENGTH - 1].rstrip() + "…"
    return (
        f"Welcome aboard, {name}! We can't wait to help you bring stories about "
        f"{excerpt} to life. Keep an eye on your inbox for your access key."
    )


async def execute(writer: StoryWriter | None, name: str, preferences: str) -> str:
    if writer is None:
        logger.warning("Blurb generation unavailable; using fallback")
        return fallback_blurb(name, preferences)
    try:
        blurb = await writer.write_blurb(user_name=name, story_preferences=preferences)
    except Exception as exc:
        logger.warning("Blurb generation failed, using fallback: %s", exc)
        return fallback_blurb(name, preferences)
    blurb = (blurb or "").strip()
    if not blurb:
        logger.warning("Blurb generation returned empty text; using fallback")
        return fallback_blurb(name, preferences)
    return blurb
