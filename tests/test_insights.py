from unittest.mock import Mock

import pytest

from content_studio.config import Config
from content_studio.exceptions import ProviderError
from content_studio.insights import EMPTY_RESPONSE, UNAVAILABLE, build_prompt, generate_news_insights
from content_studio.models import ListingArticle
from content_studio.providers.base import BaseAPIProvider
from content_studio.providers.gemini import GeminiAPI

ARTICLES = [
    ListingArticle(title="Rupiah menguat", url="", source="Bisnis", date="2025-12-02", image="", timestamp=1),
    ListingArticle(title="Cuaca ekstrem", url="", source="Kompas", date="2025-12-03", image="", timestamp=2),
]


def _provider(**kwargs) -> Mock:
    provider = Mock(spec=BaseAPIProvider)
    provider.name = "fake"
    provider.query.configure_mock(**kwargs)
    return provider


def test_prompt_lists_headlines():
    prompt = build_prompt(ARTICLES)
    assert "- Rupiah menguat (Source: Bisnis, Date: 2025-12-02)" in prompt
    assert "Executive Briefing" in prompt


def test_briefing_is_returned():
    provider = _provider(return_value="  - Point one\n")
    assert generate_news_insights(ARTICLES, provider) == "- Point one"
    _, kwargs = provider.query.call_args
    assert kwargs["temperature"] == 0.3


def test_empty_output():
    assert generate_news_insights(ARTICLES, _provider(return_value="")) == EMPTY_RESPONSE


def test_provider_failure_degrades():
    provider = _provider(side_effect=ProviderError("API Key not found"))
    assert generate_news_insights(ARTICLES, provider) == UNAVAILABLE


def test_gemini_requires_api_key():
    with pytest.raises(ProviderError, match="API Key not found"):
        GeminiAPI(Config(gemini_api_key="")).query("hi")


def test_gemini_uses_injected_client():
    client = Mock()
    client.models.generate_content.return_value = Mock(text="Briefing")
    api = GeminiAPI(Config(gemini_model="gemini-test"), client=client)

    assert api.query("prompt", system_instruction="sys", temperature=0.3) == "Briefing"
    _, kwargs = client.models.generate_content.call_args
    assert kwargs["model"] == "gemini-test"
    assert kwargs["contents"] == "prompt"
    assert kwargs["config"].temperature == 0.3
