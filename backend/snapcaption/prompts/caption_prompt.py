import random
from typing import Optional, Sequence

from snapcaption.prompts.styles import (
    ENDINGS,
    MOODS,
    OPENERS,
    PERSPECTIVES,
    RATING_TONES,
    STYLES,
)


def pick_framing(rng: random.Random) -> dict[str, str]:
    """One uniform draw from each framing list."""
    return {
        "opener":      rng.choice(OPENERS),
        "perspective": rng.choice(PERSPECTIVES),
        "ending":      rng.choice(ENDINGS),
        "mood":        rng.choice(MOODS),
    }


def build_caption_prompt(
    description: str,
    styles: Sequence[str],
    place_name: Optional[str] = None,
    rating: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Build the caption prompt sent alongside the photo.
    `styles` must be keys of STYLES; the model is asked for one caption per style.
    """
    rng = rng or random.Random()
    framing = pick_framing(rng)

    context_lines = [f'- Background from the user: "{description}"']
    if place_name:
        context_lines.append(f'- Place / attraction: "{place_name}". Mention it naturally.')
    if rating is not None:
        context_lines.append(f"- Star rating: {rating}/5. {RATING_TONES[rating]}")

    style_lines = []
    for i, key in enumerate(styles, 1):
        info = STYLES[key]
        style_lines.append(f'{i}. "{key}" {info.emoji} {info.label}: {info.description}')

    example = ", ".join(f'{{"style": "{key}", "content": "..."}}' for key in styles)

    return f"""You are a social media copywriter (Facebook / Instagram) who writes engaging, shareable posts.

Task: look at this photo and, using the context below, write {len(styles)} post(s), one for each style listed.

## Context
{chr(10).join(context_lines)}

## Styles
{chr(10).join(style_lines)}

## Writing direction
- {framing["opener"]}
- {framing["perspective"]}
- Overall mood: {framing["mood"]}.
- {framing["ending"]}

## Requirements
1. Natural, conversational tone that fits modern social media
2. Add a few relevant emoji
3. Each post is 50-150 characters
4. Posts should invite likes, comments and shares

Return ONLY a JSON array, no extra text, in this format:
[{example}]"""
