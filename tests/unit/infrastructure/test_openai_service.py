from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.infrastructure.services.openai_service import OpenAIStoryWriter
from src.infrastructure.services.prompt_renderer import PromptRenderer


class StubCompletions:
    def __init__(self, content: str | None) -> None:
        self.content = content
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(content: str | None):
    completions = StubCompletions(content)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_blurb_template_includes_user_details():
    renderer = PromptRenderer.create_default()
    prompt = renderer.render(
        "personalized_blurb", {"user_name": "Jo", "story_preferences": "dragons & castles"}
    )
    assert "User Name: Jo" in prompt
    # plain-text prompts are not HTML-escaped
    assert "Story Preferences: dragons & castles" in prompt
    assert prompt.endswith("Personalized Blurb:")


@pytest.mark.asyncio
async def test_write_blurb_sends_rendered_prompt():
    client, completions = make_client("  Welcome, Jo!  ")
    writer = OpenAIStoryWriter(client=client, model="gpt-4o-mini")
    blurb = await writer.write_blurb(user_name="Jo", story_preferences="dragons and castles")
    assert blurb == "Welcome, Jo!"
    call = completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert "User Name: Jo" in call["messages"][0]["content"]


@pytest.mark.asyncio
async def test_write_story_uses_story_template():
    client, completions = make_client("The Moon Fox\n\nOnce upon a time...")
    writer = OpenAIStoryWriter(client=client, max_tokens=100)
    story = await writer.write_story(prompt="a fox who visits the moon")
    assert story.startswith("The Moon Fox")
    call = completions.calls[0]
    assert "Story idea: a fox who visits the moon" in call["messages"][0]["content"]
    assert call["max_tokens"] == 300


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, "", "   "])
async def test_empty_completion_raises(content):
    client, _ = make_client(content)
    writer = OpenAIStoryWriter(client=client)
    with pytest.raises(ValueError):
        await writer.write_blurb(user_name="Jo", story_preferences="dragons and castles")
