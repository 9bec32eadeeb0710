# Place Information Prompt

PLACE_INFO_PROMPT = """You are a knowledgeable travel guide.

Give accurate, concise information about this place or attraction: "{name}"

Return ONLY a JSON object, no extra text, in this format:
{{
  "name": "official name of the place",
  "summary": "2-3 sentence overview",
  "highlights": ["must-see thing 1", "must-see thing 2", "must-see thing 3"],
  "best_time_to_visit": "season or time of day",
  "tips": ["practical tip 1", "practical tip 2"]
}}

If you do not recognise the place, say so in "summary" and leave the lists empty."""


def build_place_prompt(name: str) -> str:
    return PLACE_INFO_PROMPT.format(name=name)
