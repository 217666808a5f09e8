"""
Gemini Completion Client

Completion adapter for Google Gemini via the google-genai SDK. Gemini reports
quota exhaustion as HTTP 429 / RESOURCE_EXHAUSTED and carries the suggested
delay in a google.rpc.RetryInfo entry of the error details.

Dependencies:
- google-genai: For the Gemini client, request config and error types.
- httpx: For transport-level exception types raised by the SDK.
- loguru: For logging operations.
"""

import time
from typing import Any, Optional
import httpx
from google import genai
from google.genai import errors, types
from loguru import logger
from app.core.prompt_templates import SYSTEM_PROMPT
from app.errors.exceptions import ProviderError, ProviderThrottled, ProviderUnavailable
from app.services.completion.base import CompletionClient

RETRY_INFO_TYPE = "type.googleapis.com/google.rpc.RetryInfo"


def retry_delay_from_details(details: Any) -> Optional[str]:
    """
    Find RetryInfo.retryDelay (e.g. "37s") in a Gemini error payload.

    The SDK stores either the whole response body ({"error": {...}}) or the
    inner error object, so both shapes are accepted.
    """
    if not isinstance(details, dict):
        return None
    payload = details.get("error", details)
    if not isinstance(payload, dict):
        return None
    for detail in payload.get("details") or []:
        if isinstance(detail, dict) and "RetryInfo" in str(detail.get("@type", "")):
            delay = detail.get("retryDelay")
            if delay:
                return str(delay)
    return None


class GeminiCompletionClient(CompletionClient):
    """
    Completion client backed by google.genai.Client.

    Attributes:
        client (genai.Client): SDK client; calls go through its async surface.
    """

    provider = "gemini"

    def __init__(self, client: genai.Client, model: str, temperature: float = 0.7):
        super().__init__(model=model, temperature=temperature)
        self.client = client

    async def _complete(self, prompt: str) -> str:
        start_time = time.time()
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    temperature=self.temperature,
                ),
            )
        except errors.APIError as e:
            status = str(getattr(e, "status", "") or "")
            if e.code == 429 or status == "RESOURCE_EXHAUSTED":
                retry_after = retry_delay_from_details(getattr(e, "details", None))
                logger.warning(f"Gemini quota exceeded (retry after {retry_after}): {e}")
                raise ProviderThrottled(str(e), retry_after=retry_after) from e
            if e.code in (401, 403):
                logger.error(f"Gemini rejected credentials: {e}")
                raise ProviderUnavailable(str(e)) from e
            logger.error(f"Gemini API error {e.code}: {e}")
            raise ProviderError(str(e)) from e
        except httpx.TransportError as e:
            logger.error(f"Gemini connection error: {e}")
            raise ProviderUnavailable(str(e)) from e

        logger.info(f"Gemini completion finished in {time.time() - start_time:.3f}s")

        text = response.text
        if not text:
            raise ProviderError("Gemini returned an empty completion")
        return text

    async def close(self) -> None:
        await self.client.aio.aclose()
