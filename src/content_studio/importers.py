"""Build reader articles from a partner API or from manual input."""

from datetime import datetime, timezone
from urllib.parse import urlsplit

import requests
from dateutil import parser as date_parser

from .backend import request_json
from .config import Config
from .exceptions import BackendError, ImportFailedError, InvalidReferenceError
from .logger import get_logger
from .markup import paragraphs_from_text
from .models import ArticleReference, ExtractedArticle, ListingArticle

logger = get_logger(__name__)


def _excerpt(text: str, length: int) -> str:
    return text[:length] + "..."


def _parse_published(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    try:
        parsed = date_parser.parse(value)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug("Date normalization failed", extra={"date_str": value, "error": str(e)})
        return datetime.now(timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def reference_for_url(url: str) -> tuple[ArticleReference, ListingArticle]:
    """Reference plus a placeholder feed item for an arbitrary external URL."""
    url = (url or "").strip()
    hostname = urlsplit(url).hostname if url else None
    if not hostname:
        raise InvalidReferenceError("URL is required")
    now = datetime.now(timezone.utc)
    placeholder = ListingArticle(
        title="Loading External Source...",
        url=url,
        source=hostname,
        date=now.date().isoformat(),
        image="",
        timestamp=int(now.timestamp() * 1000),
    )
    return ArticleReference(url=url), placeholder


def import_manual(title: str, content: str) -> tuple[ListingArticle, ExtractedArticle]:
    """Wrap user-supplied title and body as an already-extracted article."""
    if not title or not title.strip() or not content or not content.strip():
        raise ImportFailedError("Title and Content are required")
    now = datetime.now(timezone.utc)
    item = ListingArticle(
        title=title,
        url="",
        source="Manual Input",
        date=now.date().isoformat(),
        image="",
        timestamp=int(now.timestamp() * 1000),
    )
    article = ExtractedArticle(
        title=title,
        content=content,
        text_content=content,
        excerpt=_excerpt(content, 100),
        byline="User Input",
        site_name="Manual Source",
        url="",
        image="",
        extraction_method="manual",
    )
    return item, article


class PartnerImporter:
    """Import articles from the partner article API."""

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or Config()
        self.session = session or requests.Session()

    def import_from_partner(self, url: str) -> tuple[ListingArticle, ExtractedArticle]:
        """
        Fetch a partner article and convert it into reader records.

        Raises:
            ImportFailedError: If the URL is missing or the partner API fails
        """
        if not url or not url.strip():
            raise ImportFailedError("URL is required")
        url = url.strip()

        try:
            data = request_json(
                self.session,
                "GET",
                f"{self.config.listing_url}/article",
                params={"url": url},
                timeout=self.config.request_timeout,
                default_error="API returned error status",
            )
        except BackendError as e:
            logger.warning("Partner import failed", extra={"url": url, "error": e.message})
            raise ImportFailedError("Failed to fetch partner article", {"url": url, "error": e.message}) from e
        if not isinstance(data, dict):
            raise ImportFailedError("Failed to fetch partner article", {"url": url})

        text = data.get("content_text") or ""
        title = data.get("title") or "No Title"
        featured = data.get("featured_image")
        image = featured.get("url") if isinstance(featured, dict) else None
        if not isinstance(image, str):
            image = ""
        article_url = data.get("url") or url
        published = _parse_published(data.get("published_at"))

        item = ListingArticle(
            title=title,
            url=article_url,
            source="Partner API",
            date=published.date().isoformat(),
            image=image,
            timestamp=int(published.timestamp() * 1000),
        )
        article = ExtractedArticle(
            title=title,
            content=paragraphs_from_text(text),
            text_content=text,
            excerpt=_excerpt(text, 150),
            byline="Partner API",
            site_name="Partner Import",
            url=article_url,
            image=image,
            extraction_method="partner",
        )
        return item, article
