from .base import CompletionClient
from .openai_compatible import OpenAICompatibleCompletionClient
from .gemini import GeminiCompletionClient

__all__ = [
    "CompletionClient",
    "OpenAICompatibleCompletionClient",
    "GeminiCompletionClient"
]
