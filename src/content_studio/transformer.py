"""Rewrite and translate articles through the generation backend."""

from collections.abc import Callable, Sequence
from typing import Any

import requests

from .backend import request_json, unwrap_data
from .config import Config
from .exceptions import BackendError, TransformationError
from .logger import get_logger
from .markup import strip_markup
from .models import ExtractedArticle, TransformationRequest, TransformationResult

logger = get_logger(__name__)

Accessor = Callable[[dict], Any]


def _field(name: str) -> Accessor:
    return lambda data: data.get(name)


# Rewrite and translate return the same data under different keys; order is precedence.
TITLE_CHAIN: tuple[Accessor, ...] = (
    _field("new_title"),
    _field("translated_title"),
    _field("title"),
    _field("original_title"),
)

CONTENT_CHAIN: tuple[Accessor, ...] = (
    _field("rewritten_content"),
    _field("translated_content"),
    _field("content"),
)


def first_present(data: dict, accessors: Sequence[Accessor], default: Any = None) -> Any:
    """Return the first non-empty value produced by ``accessors``, else ``default``."""
    for accessor in accessors:
        value = accessor(data)
        if value:
            return value
    return default


def normalize_result(data: dict) -> TransformationResult:
    alternatives = data.get("alternative_titles") or []
    if isinstance(alternatives, str):
        alternatives = [alternatives]
    return TransformationResult(
        title=first_present(data, TITLE_CHAIN),
        alternative_titles=tuple(str(title) for title in alternatives if title),
        content=first_present(data, CONTENT_CHAIN, default=""),
        meta_description=data.get("meta_description") or "",
    )


def request_from_article(
    article: ExtractedArticle, target_locale: str, grounding_enabled: bool = False
) -> TransformationRequest:
    """Build a request from an article, preferring its plain-text body."""
    return TransformationRequest(
        title=article.title,
        content=article.text_content or strip_markup(article.content),
        target_locale=target_locale,
        grounding_enabled=grounding_enabled,
    )


class ArticleTransformer:
    """Submit articles to the rewrite or translate operation."""

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or Config()
        self.session = session or requests.Session()

    def endpoint_for(self, target_locale: str) -> str:
        operation = "translate" if target_locale == self.config.translate_locale else "rewrite"
        return f"{self.config.service_url}/{operation}"

    def transform(self, request: TransformationRequest) -> TransformationResult:
        """
        Rewrite or translate an article.

        The translate operation is used when the target locale equals the
        configured translate locale; every other locale is rewritten.

        Raises:
            TransformationError: On any transport, status or payload failure
        """
        endpoint = self.endpoint_for(request.target_locale)
        logger.info(
            "Submitting transformation",
            extra={"endpoint": endpoint, "locale": request.target_locale, "grounding": request.grounding_enabled},
        )
        try:
            payload = request_json(
                self.session,
                "POST",
                endpoint,
                json={
                    "title": request.title,
                    "content": request.content,
                    "search_grounding": request.grounding_enabled,
                },
                timeout=self.config.request_timeout,
                default_error="Processing failed",
            )
            data = unwrap_data(payload)
        except BackendError as e:
            logger.error("Transformation failed", extra={"endpoint": endpoint, "error": e.message})
            raise TransformationError(e.message, {"endpoint": endpoint, "status_code": e.status_code}) from e

        return normalize_result(data)

    def transform_article(
        self, article: ExtractedArticle, target_locale: str, grounding_enabled: bool = False
    ) -> TransformationResult:
        return self.transform(request_from_article(article, target_locale, grounding_enabled))
