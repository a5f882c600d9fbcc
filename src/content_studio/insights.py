"""Executive briefing over a set of headlines."""

from collections.abc import Iterable

from .exceptions import ProviderError
from .logger import get_logger
from .models import ListingArticle
from .providers.base import BaseAPIProvider

logger = get_logger(__name__)

SYSTEM_INSTRUCTION = "You are a professional news analyst providing brief updates."
TEMPERATURE = 0.3

EMPTY_RESPONSE = "Unable to generate insights at this time."
UNAVAILABLE = "AI Insight service is temporarily unavailable. Please check your API key."


def build_prompt(articles: Iterable[ListingArticle]) -> str:
    headlines = "\n".join(f"- {a.title} (Source: {a.source}, Date: {a.date})" for a in articles)
    return (
        'Based on the following news headlines, provide a concise "Executive Briefing" in 3 bullet points '
        "summarizing the key events and prevailing sentiment. Keep it professional and under 100 words."
        f"\n\n{headlines}"
    )


def generate_news_insights(articles: Iterable[ListingArticle], provider: BaseAPIProvider) -> str:
    """Summarize headlines; provider failures degrade to a fixed notice."""
    prompt = build_prompt(articles)
    try:
        text = provider.query(prompt, system_instruction=SYSTEM_INSTRUCTION, temperature=TEMPERATURE)
    except ProviderError as e:
        logger.error("Insight generation failed", extra={"provider": provider.name, "error": e.message})
        return UNAVAILABLE
    return text.strip() or EMPTY_RESPONSE
