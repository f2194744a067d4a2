from __future__ import annotations

import logging
from typing import Any

from src.infrastructure.services.prompt_renderer import PromptRenderer

logger = logging.getLogger(__name__)


class OpenAIStoryWriter:
    """Story and blurb copy via the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str = "gpt-4o-mini",
        timeout: float = 20.0,
        max_tokens: int = 400,
        renderer: PromptRenderer | None = None,
        client: Any | None = None,
    ) -> None:
        if client is None:
            from openai import AsyncOpenAI

            client = AsyncOpenAI(api_key=api_key, timeout=timeout)
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.renderer = renderer or PromptRenderer.create_default()

    async def write_blurb(self, *, user_name: str, story_preferences: str) -> str:
        prompt = self.renderer.render(
            "personalized_blurb",
            {"user_name": user_name, "story_preferences": story_preferences},
        )
        return await self._complete(prompt, temperature=0.8)

    async def write_story(self, *, prompt: str) -> str:
        rendered = self.renderer.render("storybook", {"prompt": prompt})
        return await self._complete(rendered, temperature=0.9, max_tokens=self.max_tokens * 3)

    async def _complete(
        self, prompt: str, *, temperature: float, max_tokens: int | None = None
    ) -> str:
        """
        Send a single user message and return the stripped reply.

        Raises:
            ValueError: If the model returns no text
            Exception: For OpenAI API errors
        """
        logger.info("Requesting completion model=%s prompt_len=%s", self.model, len(prompt))
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens or self.max_tokens,
            temperature=temperature,
        )
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError) as exc:
            logger.error("Failed to read response content: %s", exc)
            raise ValueError("Malformed response from OpenAI") from exc
        text = (content or "").strip()
        if not text:
            raise ValueError("Empty response from OpenAI")
        return text
