"""Generative text provider implementations."""

from .base import BaseAPIProvider
from .gemini import GeminiAPI

__all__ = ["BaseAPIProvider", "GeminiAPI"]
