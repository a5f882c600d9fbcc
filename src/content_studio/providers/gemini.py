"""Gemini provider built on the google-genai client."""

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..config import Config
from ..exceptions import ProviderError
from ..logger import get_logger
from .base import BaseAPIProvider

logger = get_logger(__name__)


class GeminiAPI(BaseAPIProvider):
    """Query Gemini models for generated text."""

    name = "gemini"

    def __init__(self, config: Config | None = None, client: genai.Client | None = None):
        self.config = config or Config()
        self.model = self.config.gemini_model
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.config.gemini_api_key:
                raise ProviderError("API Key not found")
            self._client = genai.Client(api_key=self.config.gemini_api_key)
        return self._client

    def query(self, prompt: str, system_instruction: str | None = None, temperature: float | None = None) -> str:
        generation_config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
        )
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=generation_config,
            )
        except genai_errors.APIError as e:
            logger.error("Gemini request failed", extra={"model": self.model, "error": str(e)})
            raise ProviderError(f"Gemini request failed: {e}", {"model": self.model}) from e
        return response.text or ""
