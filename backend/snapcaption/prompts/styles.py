# Static lookup tables used when building prompts.

from typing import NamedTuple


class StyleInfo(NamedTuple):
    label: str
    description: str
    emoji: str


STYLES: dict[str, StyleInfo] = {
    "humorous": StyleInfo(
        "Humorous",
        "Playful and light-hearted, with a witty twist or a gentle joke",
        "😂",
    ),
    "emotional": StyleInfo(
        "Emotional",
        "Warm and heartfelt, focused on feelings and memories",
        "💖",
    ),
    "concise": StyleInfo(
        "Concise",
        "Short, punchy and direct; one or two strong lines",
        "⚡",
    ),
    "poetic": StyleInfo(
        "Poetic",
        "Lyrical imagery and rhythm, like a short prose poem",
        "🌙",
    ),
    "informative": StyleInfo(
        "Informative",
        "Shares a useful detail or fact about what is in the photo",
        "📍",
    ),
    "storytelling": StyleInfo(
        "Storytelling",
        "Tells a tiny first-person story about the moment",
        "📖",
    ),
    "inspirational": StyleInfo(
        "Inspirational",
        "Uplifting and motivating, ends on a positive note",
        "✨",
    ),
}

DEFAULT_STYLES = ("humorous", "emotional", "concise")

RATING_TONES: dict[int, str] = {
    1: "The experience was disappointing. Be honest and a little wry, but never rude.",
    2: "The experience was below expectations. Keep it balanced and mention what could be better.",
    3: "The experience was okay. Keep the tone neutral and matter-of-fact.",
    4: "The experience was great. Sound pleased and recommend it.",
    5: "The experience was outstanding. Be enthusiastic and wholeheartedly recommend it.",
}

OPENERS = (
    "Picture this:",
    "Start with a hook that makes people stop scrolling.",
    "Open with a question to the reader.",
    "Begin in the middle of the moment.",
    "Lead with a bold one-line statement.",
)

PERSPECTIVES = (
    "Write in the first person, as the person who took the photo.",
    "Write as if talking directly to a close friend.",
    "Write as a traveller sharing a discovery.",
    "Write as a local showing off a favourite spot.",
)

ENDINGS = (
    "End by inviting followers to share their own experience in the comments.",
    "End with a question that encourages replies.",
    "End with a call to tag someone who would love this.",
    "End with a short memorable line.",
)

MOODS = (
    "cheerful",
    "relaxed",
    "nostalgic",
    "adventurous",
    "cosy",
    "energetic",
)
