"""Configuration for content studio."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Runtime settings for backends, locale handling and batch mode."""

    service_url: str = "https://api.gnews.media"
    listing_url: str = "https://api.gnews.media/api"
    request_timeout: float = 30.0
    min_content_length: int = 100
    translate_locale: str = "en-US"
    listing_limit: int = 50
    display_timezone: str = "Asia/Jakarta"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    log_level: str = "INFO"
    json_logs: bool = False

    # Batch mode column mapping
    id_column: str = "id"
    url_columns: list[str] = field(default_factory=lambda: ["url"])

    def __post_init__(self):
        self.service_url = self.service_url.rstrip("/")
        self.listing_url = self.listing_url.rstrip("/")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.min_content_length < 0:
            raise ValueError("min_content_length must not be negative")
        if not self.url_columns:
            raise ValueError("At least one URL column is required")

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "Config":
        """
        Build configuration from environment variables.

        Args:
            dotenv_path: Optional .env file to load first. Existing variables win.

        Returns:
            Config populated from the environment
        """
        load_dotenv(dotenv_path)
        defaults = cls()

        url_columns = os.environ.get("STUDIO_URL_COLUMNS")
        return cls(
            service_url=os.environ.get("STUDIO_SERVICE_URL", defaults.service_url),
            listing_url=os.environ.get("STUDIO_LISTING_URL", defaults.listing_url),
            request_timeout=_env_float("STUDIO_REQUEST_TIMEOUT", defaults.request_timeout),
            min_content_length=_env_int("STUDIO_MIN_CONTENT_LENGTH", defaults.min_content_length),
            translate_locale=os.environ.get("STUDIO_TRANSLATE_LOCALE", defaults.translate_locale),
            listing_limit=_env_int("STUDIO_LISTING_LIMIT", defaults.listing_limit),
            display_timezone=os.environ.get("STUDIO_DISPLAY_TIMEZONE", defaults.display_timezone),
            gemini_api_key=os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY", ""),
            gemini_model=os.environ.get("GEMINI_MODEL", defaults.gemini_model),
            log_level=os.environ.get("LOG_LEVEL", defaults.log_level),
            json_logs=_env_bool("USE_JSON_LOGGING", defaults.json_logs),
            id_column=os.environ.get("STUDIO_ID_COLUMN", defaults.id_column),
            url_columns=(
                [col.strip() for col in url_columns.split(",") if col.strip()]
                if url_columns
                else defaults.url_columns
            ),
        )
