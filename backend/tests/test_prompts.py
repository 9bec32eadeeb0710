import random

from snapcaption.prompts.caption_prompt import build_caption_prompt, pick_framing
from snapcaption.prompts.place_prompt import build_place_prompt
from snapcaption.prompts.styles import (
    DEFAULT_STYLES,
    ENDINGS,
    MOODS,
    OPENERS,
    PERSPECTIVES,
    RATING_TONES,
    STYLES,
)


def test_default_styles_exist_in_table():
    assert all(key in STYLES for key in DEFAULT_STYLES)


def test_rating_tones_cover_one_to_five():
    assert sorted(RATING_TONES) == [1, 2, 3, 4, 5]


def test_framing_draws_one_item_from_each_list():
    framing = pick_framing(random.Random(7))
    assert framing["opener"] in OPENERS
    assert framing["perspective"] in PERSPECTIVES
    assert framing["ending"] in ENDINGS
    assert framing["mood"] in MOODS


def test_framing_is_reproducible_with_seed():
    assert pick_framing(random.Random(42)) == pick_framing(random.Random(42))


def test_caption_prompt_includes_context_and_styles():
    prompt = build_caption_prompt(
        description="Sunset at the pier",
        styles=["poetic", "concise"],
        place_name="Santa Monica Pier",
        rating=5,
        rng=random.Random(1),
    )
    assert '"Sunset at the pier"' in prompt
    assert "Santa Monica Pier" in prompt
    assert RATING_TONES[5] in prompt
    assert STYLES["poetic"].description in prompt
    assert STYLES["concise"].emoji in prompt
    assert "write 2 post(s)" in prompt
    assert '{"style": "poetic", "content": "..."}' in prompt


def test_caption_prompt_omits_optional_context():
    prompt = build_caption_prompt("A cat", ["humorous"], rng=random.Random(3))
    assert "Place / attraction" not in prompt
    assert "Star rating" not in prompt


def test_place_prompt_interpolates_name():
    prompt = build_place_prompt("Taipei 101")
    assert '"Taipei 101"' in prompt
    assert '"best_time_to_visit"' in prompt
