"""Article extraction with a reader backend and a WordPress fallback."""

import posixpath
from collections.abc import Callable
from pathlib import Path
from urllib.parse import urlsplit

import pandas as pd
import requests

from .backend import request_json, unwrap_data
from .config import Config
from .exceptions import BackendError, ContentTooShortError, ExtractionError, InvalidReferenceError, StudioError
from .logger import get_logger
from .markup import paragraphs_from_text, strip_markup, strip_video_embeds
from .models import ArticleReference, ExtractedArticle, ExtractionResult

logger = get_logger(__name__)

READER_DEFAULT_BYLINE = "Unknown"
WORDPRESS_DEFAULT_BYLINE = "WordPress"
EXCERPT_LENGTH = 150

Strategy = Callable[[str], ExtractedArticle]


def normalize_byline(author: object, default: str) -> str:
    """Join an author list with ", ", or fall back to ``default`` when absent."""
    if isinstance(author, (list, tuple)):
        names = [str(name).strip() for name in author if name and str(name).strip()]
        return ", ".join(names) if names else default
    if isinstance(author, str) and author.strip():
        return author.strip()
    return default


def complete_bodies(content: str, text_content: str) -> tuple[str, str]:
    """Derive whichever of markup and plain text is missing from the other."""
    if content and not text_content:
        text_content = strip_markup(content)
    elif text_content and not content:
        content = paragraphs_from_text(text_content)
    return content, text_content


def derive_slug(url: str) -> str:
    """Last non-empty path segment of the URL, without an .html/.htm suffix."""
    path = urlsplit(url).path.rstrip("/")
    slug = posixpath.basename(path)
    for suffix in (".html", ".htm"):
        if slug.endswith(suffix):
            slug = slug[: -len(suffix)]
    return slug


def _embedded_first(post: dict, key: str) -> dict:
    items = (post.get("_embedded") or {}).get(key) or []
    if items and isinstance(items[0], dict):
        return items[0]
    return {}


def _rendered(post: dict, key: str) -> str:
    value = post.get(key)
    if isinstance(value, dict):
        return value.get("rendered") or ""
    return value or ""


class ArticleExtractor:
    """Extract article content from URLs by trying strategies in priority order."""

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        """
        Initialize article extractor.

        Args:
            config: Optional Config instance. If None, defaults are used.
            session: Optional requests session shared by all strategies.
        """
        self.config = config or Config()
        self.session = session or requests.Session()

    @property
    def strategies(self) -> list[tuple[str, Strategy]]:
        return [
            ("reader", self.extract_with_reader),
            ("wordpress", self.extract_with_wordpress),
        ]

    def _check_length(self, text_content: str) -> None:
        length = len(text_content.strip())
        if length < self.config.min_content_length:
            raise ContentTooShortError(length, self.config.min_content_length)

    def extract_with_reader(self, url: str) -> ExtractedArticle:
        """
        Extract article using the readability backend.

        Args:
            url: URL to extract

        Returns:
            ExtractedArticle built from the backend's document record

        Raises:
            BackendError: If the backend call fails
            ContentTooShortError: If the body is below the minimum length
        """
        payload = request_json(
            self.session,
            "GET",
            f"{self.config.service_url}/read",
            params={"url": url},
            timeout=self.config.request_timeout,
            default_error="Failed to fetch URL",
        )
        data = unwrap_data(payload)

        content, text_content = complete_bodies(data.get("content") or "", data.get("textContent") or "")
        self._check_length(text_content)

        return ExtractedArticle(
            title=data.get("title") or "",
            content=content,
            text_content=text_content,
            excerpt=data.get("excerpt") or "",
            byline=normalize_byline(data.get("author") or data.get("byline"), READER_DEFAULT_BYLINE),
            site_name=data.get("siteName") or "",
            url=data.get("url") or url,
            image=data.get("image") or "",
            extraction_method="reader",
        )

    def extract_with_wordpress(self, url: str) -> ExtractedArticle:
        """
        Extract article through the site's WordPress REST API.

        Args:
            url: URL to extract

        Returns:
            ExtractedArticle rebuilt from the matching post

        Raises:
            BackendError: If the API call fails or no post matches the slug
            ContentTooShortError: If the post has no body text at all
        """
        parts = urlsplit(url)
        slug = derive_slug(url)
        if not slug:
            raise BackendError("No content slug in URL path")

        posts = request_json(
            self.session,
            "GET",
            f"{parts.scheme}://{parts.netloc}/wp-json/wp/v2/posts",
            params={"slug": slug, "_embed": ""},
            timeout=self.config.request_timeout,
            default_error="WordPress API error",
        )
        if not isinstance(posts, list) or not posts or not isinstance(posts[0], dict):
            raise BackendError(f"No WordPress post found for slug '{slug}'")
        post = posts[0]

        content = strip_video_embeds(_rendered(post, "content"))
        content, text_content = complete_bodies(content, "")
        if not text_content.strip():
            raise ContentTooShortError(0, 1)

        excerpt = strip_markup(_rendered(post, "excerpt"))
        if not excerpt:
            excerpt = text_content[:EXCERPT_LENGTH] + "..." if len(text_content) > EXCERPT_LENGTH else text_content

        media = _embedded_first(post, "wp:featuredmedia")
        author = _embedded_first(post, "author")

        return ExtractedArticle(
            title=strip_markup(_rendered(post, "title")),
            content=content,
            text_content=text_content,
            excerpt=excerpt,
            byline=normalize_byline(author.get("name"), WORDPRESS_DEFAULT_BYLINE),
            site_name=parts.hostname or "",
            url=post.get("link") or url,
            image=media.get("source_url") or "",
            extraction_method="wordpress",
        )

    def extract_from_url(self, url: str) -> ExtractedArticle:
        """
        Extract article from URL, falling back through the strategies.

        A strategy that returns too little content is a soft failure and a
        strategy that raises is a hard failure; both move on to the next one.

        Args:
            url: URL to extract

        Returns:
            ExtractedArticle from the first successful strategy

        Raises:
            InvalidReferenceError: If the URL is empty or has no host
            ExtractionError: If every strategy failed
        """
        if not url or not isinstance(url, str) or not url.strip():
            raise InvalidReferenceError("Invalid URL provided")
        url = url.strip()
        if not urlsplit(url).hostname:
            raise InvalidReferenceError("Invalid URL provided", {"url": url})

        logger.info("Starting extraction", extra={"url": url})

        attempts: list[dict[str, str]] = []
        last_error: Exception | None = None
        for name, attempt in self.strategies:
            try:
                article = attempt(url)
            except ContentTooShortError as e:
                logger.info("Insufficient content", extra={"url": url, "method": name, "text_length": e.length})
                attempts.append({"strategy": name, "outcome": "soft_failure", "error": e.message})
                last_error = e
                continue
            except (StudioError, requests.RequestException, ValueError, KeyError, TypeError) as e:
                logger.warning("Extraction strategy failed", extra={"url": url, "method": name, "error": str(e)})
                attempts.append({"strategy": name, "outcome": "hard_failure", "error": str(e)})
                last_error = e
                continue

            logger.info("Extraction successful", extra={"url": url, "method": name})
            return article

        logger.error("All extraction methods failed", extra={"url": url, "attempts": attempts})
        raise ExtractionError(url, attempts) from last_error

    def extract(self, reference: ArticleReference) -> ExtractedArticle:
        return self.extract_from_url(reference.url)

    def process_csv(self, input_csv: str | Path, output_csv: str | Path, config: Config | None = None) -> None:
        """
        Process CSV file and extract articles from URLs.

        Args:
            input_csv: Path to input CSV file
            output_csv: Path to output CSV file
            config: Configuration with column mappings. Defaults to the extractor's.
        """
        config = config or self.config
        logger.info("Starting CSV processing", extra={"input": str(input_csv), "output": str(output_csv)})

        df = pd.read_csv(input_csv, dtype=str, keep_default_na=False)
        logger.info("CSV loaded", extra={"rows": len(df), "columns": list(df.columns)})

        if config.id_column not in df.columns:
            raise ValueError(f"ID column '{config.id_column}' not found in CSV")

        missing_cols = [col for col in config.url_columns if col not in df.columns]
        if missing_cols:
            raise ValueError(f"URL columns not found in CSV: {missing_cols}")

        results = []
        total_urls = len(df) * len(config.url_columns)
        processed = 0

        for _, row in df.iterrows():
            id_value = str(row[config.id_column])

            for url_col in config.url_columns:
                url = row[url_col]
                processed += 1

                logger.info(
                    "Processing URL",
                    extra={"progress": f"{processed}/{total_urls}", "id": id_value, "column": url_col},
                )

                try:
                    article = self.extract_from_url(url)
                except ExtractionError as e:
                    results.append(ExtractionResult.create_error(id_value=id_value, url=url, error_message=e.describe()))
                    continue
                except StudioError as e:
                    results.append(ExtractionResult.create_error(id_value=id_value, url=url, error_message=e.message))
                    continue
                results.append(ExtractionResult.from_article(id_value, url, article))

        output_df = pd.DataFrame(
            [
                {
                    "id": r.id_value,
                    "url": r.url,
                    "title": r.title,
                    "text_content": r.text_content,
                    "site_name": r.site_name,
                    "byline": r.byline,
                    "extraction_method": r.extraction_method,
                    "status": r.status,
                    "error_message": r.error_message,
                }
                for r in results
            ],
            columns=[
                "id", "url", "title", "text_content", "site_name", "byline",
                "extraction_method", "status", "error_message",
            ],
        )

        output_df.to_csv(output_csv, index=False)
        logger.info(
            "CSV processing complete",
            extra={
                "output": str(output_csv),
                "total": len(results),
                "success": sum(1 for r in results if r.status == "success"),
                "errors": sum(1 for r in results if r.status == "error"),
            },
        )
