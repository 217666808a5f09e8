"""
OpenAI-Compatible Completion Client

Completion adapter for providers that speak the OpenAI chat-completions
protocol: OpenAI itself, Groq and Nebius. They differ only in base URL and API
key, so one AsyncOpenAI-backed adapter serves all three.

Dependencies:
- openai: For the AsyncOpenAI client and its exception types.
- loguru: For logging operations.
- app.core.prompt_templates: For the system prompt.
- app.errors.exceptions: For the normalized provider errors.
"""

import math
import re
import time
from typing import Optional
from openai import (
    AsyncOpenAI,
    APIConnectionError,
    APIStatusError,
    AuthenticationError,
    PermissionDeniedError,
    RateLimitError,
    OpenAIError,
)
from loguru import logger
from app.core.prompt_templates import SYSTEM_PROMPT
from app.errors.exceptions import ProviderError, ProviderThrottled, ProviderUnavailable
from app.services.completion.base import CompletionClient

# "Please try again in 7.66s" style hints found in Groq/OpenAI 429 messages
TRY_AGAIN_PATTERN = re.compile(r"try again in\s+(\d+(?:\.\d+)?)\s*(ms|s)\b", re.IGNORECASE)


def retry_after_from_rate_limit(exc: RateLimitError) -> Optional[str]:
    """
    Extract the provider-suggested retry delay from a 429 error.

    Checks the Retry-After header first, then the error message.

    Returns:
        Optional[str]: Delay formatted as "<seconds>s", or None if the provider gave none.
    """
    response = getattr(exc, "response", None)
    headers = getattr(response, "headers", None) or {}
    header_value = headers.get("retry-after")
    if header_value:
        try:
            delay = float(header_value)
            if math.isfinite(delay) and delay >= 0:
                return f"{delay:g}s"
            logger.debug(f"Ignoring out-of-range Retry-After header: {header_value}")
        except ValueError:
            logger.debug(f"Ignoring non-numeric Retry-After header: {header_value}")

    match = TRY_AGAIN_PATTERN.search(str(exc))
    if match:
        value = float(match.group(1))
        if match.group(2).lower() == "ms":
            value = value / 1000
        return f"{value:g}s"
    return None


class OpenAICompatibleCompletionClient(CompletionClient):
    """
    Completion client backed by AsyncOpenAI.

    Attributes:
        client (AsyncOpenAI): SDK client configured with the provider's base URL and key.
    """

    def __init__(self, client: AsyncOpenAI, model: str, provider: str = "openai", temperature: float = 0.7):
        super().__init__(model=model, temperature=temperature)
        self.client = client
        self.provider = provider

    async def _complete(self, prompt: str) -> str:
        start_time = time.time()
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except RateLimitError as e:
            retry_after = retry_after_from_rate_limit(e)
            logger.warning(f"{self.provider} rate limit hit (retry after {retry_after}): {e}")
            raise ProviderThrottled(str(e), retry_after=retry_after) from e
        except (AuthenticationError, PermissionDeniedError) as e:
            logger.error(f"{self.provider} rejected credentials: {e}")
            raise ProviderUnavailable(str(e)) from e
        except APIConnectionError as e:
            logger.error(f"{self.provider} connection error: {e}")
            raise ProviderUnavailable(str(e)) from e
        except APIStatusError as e:
            logger.error(f"{self.provider} returned status {e.status_code}: {e}")
            raise ProviderError(str(e)) from e
        except OpenAIError as e:
            logger.error(f"{self.provider} client error: {e}")
            raise ProviderError(str(e)) from e

        logger.info(f"{self.provider} completion finished in {time.time() - start_time:.3f}s")

        if not response.choices or not response.choices[0].message.content:
            raise ProviderError(f"{self.provider} returned an empty completion")
        return response.choices[0].message.content

    async def close(self) -> None:
        await self.client.close()
