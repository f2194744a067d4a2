from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


@dataclass(slots=True)
class PromptRenderer:
    base_path: Path
    env: Environment

    @classmethod
    def create_default(cls) -> PromptRenderer:
        base = Path(__file__).resolve().parent / "prompts"
        env = Environment(
            loader=FileSystemLoader(str(base)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            enable_async=False,
        )
        return cls(base_path=base, env=env)

    def render(self, template_key: str, context: dict[str, Any]) -> str:
        # e.g. personalized_blurb -> personalized_blurb.txt.j2
        template = self.env.get_template(f"{template_key}.txt.j2")
        return template.render(context).strip()
