"""
Application Settings Module

This module reads the process configuration from the environment (and a .env
file, if present) once at startup. Missing credentials raise ConfigMissing so
the process can stop before serving any request.

Dependencies:
- dotenv: For environment variable loading.
- pydantic: For the settings model.
- app.errors.exceptions: For ConfigMissing.
"""

import os
from typing import Dict, Optional
from dotenv import load_dotenv
from pydantic import BaseModel
from app.errors.exceptions import ConfigMissing

PROVIDER_API_KEY_VARS: Dict[str, str] = {
    "groq": "GROQ_API_KEY",
    "openai": "OPENAI_API_KEY",
    "nebius": "NEBIUS_API_KEY",
    "gemini": "GEMINI_API_KEY",
}

DEFAULT_MODELS: Dict[str, str] = {
    "groq": "llama-3.3-70b-versatile",
    "openai": "gpt-4o-mini",
    "nebius": "meta-llama/Meta-Llama-3.1-70B-Instruct",
    "gemini": "gemini-2.0-flash",
}


class Settings(BaseModel):
    mongodb_uri: str
    mongodb_db: str = "interview_generator"
    llm_provider: str = "groq"
    llm_api_key: str
    llm_model: str
    llm_base_url: Optional[str] = None
    llm_temperature: float = 0.7
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Returns:
        Settings: The validated process configuration.

    Raises:
        ConfigMissing: If MONGODB_URI or the selected provider's API key is
            missing, or LLM_PROVIDER names an unknown provider.
    """
    load_dotenv()

    mongodb_uri = os.getenv("MONGODB_URI")
    if not mongodb_uri:
        raise ConfigMissing("MONGODB_URI environment variable is not set.")

    provider = os.getenv("LLM_PROVIDER", "groq").strip().lower()
    if provider not in PROVIDER_API_KEY_VARS:
        raise ConfigMissing(
            f"Unsupported LLM_PROVIDER: {provider}. Available: {list(PROVIDER_API_KEY_VARS)}"
        )

    key_var = PROVIDER_API_KEY_VARS[provider]
    api_key = os.getenv(key_var)
    if not api_key:
        raise ConfigMissing(f"{key_var} environment variable is not set.")

    return Settings(
        mongodb_uri=mongodb_uri,
        mongodb_db=os.getenv("MONGODB_DB", "interview_generator"),
        llm_provider=provider,
        llm_api_key=api_key,
        llm_model=os.getenv("LLM_MODEL") or DEFAULT_MODELS[provider],
        llm_base_url=os.getenv("LLM_BASE_URL") or None,
        llm_temperature=float(os.getenv("LLM_TEMPERATURE", "0.7")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
