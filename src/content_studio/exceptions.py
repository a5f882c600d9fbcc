"""Exception hierarchy for content studio."""

from typing import Any


class StudioError(Exception):
    """Base exception carrying a user-facing message and structured details."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging and serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class BackendError(StudioError):
    """Raised when a remote JSON backend fails or answers with an error payload."""

    def __init__(self, message: str, status_code: int | None = None, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class InvalidReferenceError(StudioError, ValueError):
    """Raised when an article reference has no usable URL."""


class ContentTooShortError(StudioError):
    """Raised by a strategy whose content is below the acceptable length."""

    def __init__(self, length: int, minimum: int):
        super().__init__(
            f"Extracted content too short ({length} < {minimum} characters)",
            {"length": length, "minimum": minimum},
        )
        self.length = length
        self.minimum = minimum


class ExtractionError(StudioError):
    """Raised when every extraction strategy failed for a URL."""

    DEFAULT_MESSAGE = "Content could not be extracted by any available method"

    def __init__(self, url: str, attempts: list[dict[str, str]]):
        super().__init__(self.DEFAULT_MESSAGE, {"url": url, "attempts": attempts})
        self.url = url
        self.attempts = attempts

    def describe(self) -> str:
        """Consolidated message followed by each strategy's own error."""
        reasons = "; ".join(f"{a['strategy']}: {a['error']}" for a in self.attempts)
        return f"{self.message} ({reasons})" if reasons else self.message


class TransformationError(StudioError):
    """Raised when a rewrite or translate request fails."""


class ProviderError(StudioError):
    """Raised when the generative text provider cannot answer."""


class ImportFailedError(StudioError):
    """Raised when a partner or manual import cannot produce an article."""
