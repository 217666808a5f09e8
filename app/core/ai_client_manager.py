"""
AI Client Manager

This module builds the completion client for the provider a deployment is
configured with. It runs once during application startup; the resulting client
is kept on app.state and shared by every request.
"""

from typing import Dict, Optional
import httpx
from openai import AsyncOpenAI
from google import genai
from loguru import logger
from app.core.settings import Settings
from app.errors.exceptions import ConfigMissing
from app.services.completion import CompletionClient, OpenAICompatibleCompletionClient, GeminiCompletionClient

OPENAI_COMPATIBLE_BASE_URLS: Dict[str, str] = {
    "openai": "https://api.openai.com/v1",
    "groq": "https://api.groq.com/openai/v1",
    "nebius": "https://api.studio.nebius.com/v1",
}


def create_completion_client(settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> CompletionClient:
    """
    Create the completion client for settings.llm_provider.

    Args:
        settings (Settings): Loaded application settings.
        http_client (httpx.AsyncClient, optional): Transport for OpenAI-compatible
            providers; the SDK default is used when omitted.

    Returns:
        CompletionClient: Adapter bound to the configured provider and model.

    Raises:
        ConfigMissing: If the provider is not supported.
    """
    provider = settings.llm_provider

    if provider == "gemini":
        client = GeminiCompletionClient(
            client=genai.Client(api_key=settings.llm_api_key),
            model=settings.llm_model,
            temperature=settings.llm_temperature,
        )
    elif provider in OPENAI_COMPATIBLE_BASE_URLS:
        base_url = settings.llm_base_url or OPENAI_COMPATIBLE_BASE_URLS[provider]
        client = OpenAICompatibleCompletionClient(
            client=AsyncOpenAI(
                api_key=settings.llm_api_key,
                base_url=base_url,
                # Failures surface to the caller as-is; the SDK must not retry
                max_retries=0,
                http_client=http_client,
            ),
            model=settings.llm_model,
            provider=provider,
            temperature=settings.llm_temperature,
        )
    else:
        raise ConfigMissing(f"Unsupported LLM provider: {provider}")

    logger.info(f"Initialized {provider} completion client with model {settings.llm_model}")
    return client
