import base64
from typing import Any, Callable, Optional

import openai
from openai import AsyncOpenAI

from snapcaption.config.settings import settings
from snapcaption.errors import InvalidApiKeyError, ModelCallError
from snapcaption.utils.logger import get_logger

logger = get_logger(__name__)


def _message_text(content: Any) -> str:
    """Flatten message content into one string; some backends return a list of parts."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict):
            parts.append(part.get("text") or "")
        else:
            parts.append(getattr(part, "text", "") or "")
    return "".join(parts)


class GenerativeModelClient:
    """
    Thin wrapper around the OpenAI chat API: prompt (+ optional image) in, raw text out.
    A new client is built per call because every request brings its own API key.
    """

    def __init__(self, client_factory: Optional[Callable[..., AsyncOpenAI]] = None):
        self._client_factory = client_factory or AsyncOpenAI

    async def generate(
        self,
        prompt: str,
        api_key: str,
        model: str,
        image: Optional[bytes] = None,
        mime_type: Optional[str] = None,
    ) -> str:
        content: list[dict] = [{"type": "text", "text": prompt}]
        if image is not None:
            data = base64.b64encode(image).decode("ascii")
            content.append({
                "type": "image_url",
                "image_url": {"url": f"data:{mime_type or 'image/jpeg'};base64,{data}"},
            })

        client = self._client_factory(api_key=api_key, base_url=settings.openai_base_url)
        try:
            logger.info(f"Calling {model} (image={'yes' if image is not None else 'no'})")
            response = await client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": content}],
                temperature=settings.temperature,
                top_p=settings.top_p,
                max_tokens=settings.max_output_tokens,
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            logger.warning(f"Model rejected the API key: {e}")
            raise InvalidApiKeyError() from e
        except openai.OpenAIError as e:
            logger.error(f"Model call failed: {e}")
            raise ModelCallError() from e
        finally:
            await client.close()

        if not response.choices:
            return ""
        return _message_text(response.choices[0].message.content)


generative_client = GenerativeModelClient()
