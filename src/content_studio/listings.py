"""Topic, news and discover feeds with offline fallbacks."""

from collections.abc import Iterable

import requests

from .backend import request_json
from .config import Config
from .dates import format_display_date
from .exceptions import BackendError
from .fallback import FALLBACK_ARTICLES, FALLBACK_TOPICS
from .logger import get_logger
from .models import ListingArticle, ListingResponse, TopicsResponse

logger = get_logger(__name__)

TRENDING = "Trending"
LOCALES = ("id-ID", "en-US")


def country_for(locale: str) -> str:
    return "ID" if locale == "id-ID" else "US"


def newest_first(articles: Iterable[ListingArticle]) -> list[ListingArticle]:
    return sorted(articles, key=lambda article: article.timestamp, reverse=True)


def filter_articles(articles: Iterable[ListingArticle], term: str) -> list[ListingArticle]:
    """Case-insensitive match of ``term`` against title or source."""
    articles = list(articles)
    if not term:
        return articles
    term = term.lower()
    return [a for a in articles if term in a.title.lower() or term in a.source.lower()]


class NewsClient:
    """Client for the listing backend.

    Listing failures never reach the caller: they are logged and replaced by
    the static fallback datasets.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or Config()
        self.session = session or requests.Session()

    def _get(self, path: str, params: dict | None = None, default_error: str = "API Error") -> dict:
        payload = request_json(
            self.session,
            "GET",
            f"{self.config.listing_url}/{path}",
            params=params,
            timeout=self.config.request_timeout,
            default_error=default_error,
        )
        if not isinstance(payload, dict):
            raise BackendError("Invalid response format from API")
        return payload

    def localize(self, response: ListingResponse, locale: str) -> ListingResponse:
        """Replace every item's date with its rendering in ``locale``."""
        articles = tuple(
            article.with_date(format_display_date(article.timestamp, locale, self.config.display_timezone))
            for article in response.articles
        )
        return ListingResponse(articles=articles, source=response.source, status=response.status, total=response.total)

    def fetch_topics(self) -> TopicsResponse:
        try:
            return TopicsResponse.from_dict(self._get("topics", default_error="Failed to fetch topics"))
        except (BackendError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Using fallback topics due to API error", extra={"error": str(e)})
            return FALLBACK_TOPICS

    def fetch_news(self, topic: str, locale: str) -> ListingResponse:
        params = {"limit": self.config.listing_limit, "country": country_for(locale), "locale": locale}
        try:
            response = ListingResponse.from_dict(self._get(f"news/{topic.lower()}", params=params))
        except (BackendError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Using fallback articles due to API error", extra={"topic": topic, "error": str(e)})
            response = FALLBACK_ARTICLES
        return self.localize(response, locale)

    def fetch_discover(self, locale: str) -> ListingResponse:
        params = {"country": country_for(locale), "locale": locale, "limit": self.config.listing_limit}
        try:
            response = ListingResponse.from_dict(self._get("discover", params=params))
        except (BackendError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Using fallback articles due to API error", extra={"topic": TRENDING, "error": str(e)})
            response = FALLBACK_ARTICLES
        return self.localize(response, locale)

    def topic_tabs(self) -> tuple[list[str], list[str]]:
        """Main topic tabs, led by the trending feed, and the secondary topics."""
        topics = self.fetch_topics()
        return [TRENDING, *topics.main_topics], list(topics.sub_topics)

    def load_feed(self, topic: str, locale: str) -> list[ListingArticle]:
        if topic == TRENDING:
            response = self.fetch_discover(locale)
        else:
            response = self.fetch_news(topic, locale)
        return newest_first(response.articles)
