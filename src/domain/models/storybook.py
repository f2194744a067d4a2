from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PageKind(str, Enum):
    COVER = "cover"
    PAGE = "page"
    END = "end"


@dataclass(frozen=True, slots=True)
class StoryPage:
    kind: PageKind
    text: str
    image: str | None = None
    alt: str | None = None
    end_text: str | None = None


@dataclass(frozen=True, slots=True)
class Storybook:
    title: str
    pages: tuple[StoryPage, ...]


_IMAGE_BASE = "https://res.cloudinary.com/dsukslmgr/image/upload"

# Sample shown on the landing page.
SAMPLE_STORY = Storybook(
    title="Luna and the Magic Star",
    pages=(
        StoryPage(
            kind=PageKind.COVER,
            image=f"{_IMAGE_BASE}/v1752134304/Gemini_Generated_Image_xhnahjxhnahjxhna_wvuv6m.png",
            alt="A dreamy night sky with a little girl looking out of her window.",
            text="Luna and the Magic Star",
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "Luna loved to watch the stars from her bedroom window every night. "
                "She dreamed of magical adventures far above the clouds."
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            image=f"{_IMAGE_BASE}/v1752134305/Gemini_Generated_Image_8xyfge8xyfge8xyf_uzii99.png",
            alt="A bright shooting star streaks across the night sky as Luna watches from her window.",
            text="One evening, she saw something special: a shiny star falling from the sky!",
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "Without thinking twice, Luna put on her boots, grabbed her teddy, "
                "and tiptoed outside to find the fallen star."
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "In the meadow, she found the tiniest star, sparkling softly. "
                "“Hello,” said Luna kindly. “Are you lost?”"
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "The little star blinked. “I fell… and I can’t find my way "
                "back home,” it whispered sadly."
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            image=f"{_IMAGE_BASE}/v1752134304/Gemini_Generated_Image_86f1g86f1g86f1g8_koclw2.png",
            alt="Luna floating gently above the meadow, holding a glowing star.",
            text=(
                "“Don’t worry!” Luna smiled. “I’ll help you!” "
                "She gently picked up the star, and suddenly, WHOOSH! They began to float!"
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "Up, up they soared, past clouds shaped like animals, past shimmering "
                "planets, until the stars twinkled all around them."
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "The little star beamed happily. “I see my home!” it sang. "
                "Luna giggled as they danced among the constellations."
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            text=(
                "With a gentle hug, Luna placed the star back where it belonged. "
                "“Thank you,” the star whispered. “You are my hero.”"
            ),
        ),
        StoryPage(
            kind=PageKind.PAGE,
            image=f"{_IMAGE_BASE}/v1752134302/Gemini_Generated_Image_24o5j24o5j24o5j2_rd7ukv.png",
            alt="Luna peacefully asleep in her cozy bed, moonlight shining through the window.",
            text=(
                "Luna floated gently back to her bed, the sky above sparkling brighter "
                "than ever. Her heart felt warm and full."
            ),
        ),
        StoryPage(
            kind=PageKind.END,
            text=(
                "And every night after, Luna knew: With kindness and courage, even the "
                "smallest hearts can shine the brightest."
            ),
            end_text="The End",
        ),
    ),
)
