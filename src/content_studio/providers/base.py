"""Base class for generative text providers."""

from abc import ABC, abstractmethod


class BaseAPIProvider(ABC):
    """Interface for a provider that answers a text prompt."""

    name: str = "base"

    @abstractmethod
    def query(self, prompt: str, system_instruction: str | None = None, temperature: float | None = None) -> str:
        """
        Send a prompt and return the generated text.

        Args:
            prompt: User prompt
            system_instruction: Optional system instruction
            temperature: Optional sampling temperature

        Returns:
            Generated text, possibly empty

        Raises:
            ProviderError: If the provider cannot answer
        """
