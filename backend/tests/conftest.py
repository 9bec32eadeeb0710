import io
from typing import Optional

import pytest
from PIL import Image


class FakeModelClient:
    """Stands in for GenerativeModelClient: records calls, returns canned text or raises."""

    def __init__(self, response: str = "", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls = []

    async def generate(self, prompt, api_key, model, image=None, mime_type=None):
        self.calls.append({
            "prompt": prompt,
            "api_key": api_key,
            "model": model,
            "image": image,
            "mime_type": mime_type,
        })
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()
