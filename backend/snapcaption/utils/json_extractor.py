"""
JSON Extractor
──────────────
Pulls the JSON payload out of free-form model output.

Models wrap their answer in markdown fences, add a sentence before or after
it, or both. extract_json_text() strips the fences and cuts the text down to
the widest bracketed span. It never raises: parsing (and deciding what to do
when parsing fails) is left to the caller.
"""
import re

EMPTY_ARRAY = "[]"

# Opening fence with an optional "json" tag, or a bare closing fence,
# together with any whitespace that follows it.
_FENCE_RE = re.compile(r"```(?:json)?\s*")


def strip_code_fences(text: str) -> str:
    """Remove every markdown code fence marker, wherever it appears."""
    return _FENCE_RE.sub("", text)


def extract_json_text(text: str | None) -> str:
    """
    Return the best candidate JSON substring of `text`, trimmed.

    Empty or missing input gives "[]". Text without brackets is returned
    fence-stripped and trimmed, so json.loads() on it fails in the caller.
    """
    if not text:
        return EMPTY_ARRAY

    clean = strip_code_fences(text.strip())

    first_square = clean.find("[")
    first_curly = clean.find("{")
    last_square = clean.rfind("]")
    last_curly = clean.rfind("}")

    result = clean

    # Array span: only when the array opens before any object does.
    if first_square != -1 and last_square > first_square:
        if first_curly == -1 or first_square < first_curly:
            result = clean[first_square:last_square + 1]

    # Object span, checked against the same positions. Runs last, so it
    # takes precedence whenever both spans qualify.
    if first_curly != -1 and last_curly > first_curly:
        if first_square == -1 or first_curly < first_square:
            result = clean[first_curly:last_curly + 1]

    return result.strip()
