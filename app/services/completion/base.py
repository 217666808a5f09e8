"""
Completion Client Interface

This module defines the single capability the request pipeline needs from an
LLM provider: submit a prompt, get back the completion text. Concrete adapters
translate their SDK's failures into the normalized ProviderError family from
app.errors.exceptions so callers never handle provider-specific exceptions.

Dependencies:
- abc: For the abstract base class.
"""

from abc import ABC, abstractmethod


class CompletionClient(ABC):
    """
    Abstract completion client bound to one provider and one model.

    Attributes:
        provider (str): Provider name, e.g. "groq" or "gemini".
        model (str): Model identifier sent with every request.
        temperature (float): Sampling temperature sent with every request.
    """

    provider: str = "unknown"

    def __init__(self, model: str, temperature: float = 0.7):
        self.model = model
        self.temperature = temperature

    async def complete(self, prompt: str) -> str:
        """
        Submit a prompt and return the text of the first completion choice.

        Args:
            prompt (str): The rendered user prompt. Must not be blank.

        Returns:
            str: Raw completion text.

        Raises:
            ValueError: If the prompt is empty.
            ProviderUnavailable: On transport or authentication failure.
            ProviderThrottled: On quota or rate-limit failure.
            ProviderError: On any other provider failure.
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must be non-empty text")
        return await self._complete(prompt)

    @abstractmethod
    async def _complete(self, prompt: str) -> str:
        pass

    async def close(self) -> None:
        """Release SDK resources. Adapters without any keep this no-op."""
        return None
