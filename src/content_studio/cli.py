"""Command-line interface for content studio."""

import argparse
import json
import sys

from .config import Config
from .exceptions import ExtractionError, InvalidReferenceError, StudioError
from .extractor import ArticleExtractor
from .importers import PartnerImporter, import_manual, reference_for_url
from .insights import generate_news_insights
from .listings import LOCALES, TRENDING, NewsClient, filter_articles
from .logger import configure_logging, get_logger
from .markup import render_source
from .providers.gemini import GeminiAPI
from .transformer import ArticleTransformer

logger = get_logger(__name__)


def _dump(data) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def cmd_read(args: argparse.Namespace, config: Config) -> int:
    article = ArticleExtractor(config).extract_from_url(args.url)
    data = article.to_dict()
    if args.render:
        data["rendered"] = render_source(article)
    _dump(data)
    return 0


def cmd_transform(args: argparse.Namespace, config: Config) -> int:
    article = ArticleExtractor(config).extract_from_url(args.url)
    result = ArticleTransformer(config).transform_article(article, args.locale, args.grounding)
    _dump(result.to_dict())
    return 0


def cmd_import(args: argparse.Namespace, config: Config) -> int:
    if args.partner:
        item, article = PartnerImporter(config).import_from_partner(args.partner)
    elif args.url:
        reference, item = reference_for_url(args.url)
        article = ArticleExtractor(config).extract(reference)
    else:
        item, article = import_manual(args.title, args.content or "")

    data = {"item": item.to_dict(), "article": article.to_dict(), "rendered": render_source(article)}
    if args.locale:
        result = ArticleTransformer(config).transform_article(article, args.locale, args.grounding)
        data["transformation"] = result.to_dict()
    _dump(data)
    return 0


def cmd_topics(args: argparse.Namespace, config: Config) -> int:
    main_topics, sub_topics = NewsClient(config).topic_tabs()
    _dump({"main_topics": main_topics, "sub_topics": sub_topics})
    return 0


def cmd_news(args: argparse.Namespace, config: Config) -> int:
    articles = filter_articles(NewsClient(config).load_feed(args.topic, args.locale), args.search)
    _dump([article.to_dict() for article in articles])
    return 0


def cmd_discover(args: argparse.Namespace, config: Config) -> int:
    articles = filter_articles(NewsClient(config).load_feed(TRENDING, args.locale), args.search)
    _dump([article.to_dict() for article in articles])
    return 0


def cmd_insights(args: argparse.Namespace, config: Config) -> int:
    articles = NewsClient(config).load_feed(args.topic, args.locale)
    print(generate_news_insights(articles, GeminiAPI(config)))
    return 0


def cmd_batch(args: argparse.Namespace, config: Config) -> int:
    ArticleExtractor(config).process_csv(args.input_csv, args.output_csv, config)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="content-studio", description="Read, rewrite and translate news articles.")
    parser.add_argument("--env-file", help="Path to a .env file with configuration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    read = subparsers.add_parser("read", help="Extract an article")
    read.add_argument("url")
    read.add_argument("--render", action="store_true", help="Include sanitized markup for display")
    read.set_defaults(func=cmd_read)

    transform = subparsers.add_parser("transform", help="Extract, then rewrite or translate an article")
    transform.add_argument("url")
    transform.add_argument("--locale", choices=LOCALES, default="id-ID")
    transform.add_argument("--grounding", action="store_true", help="Enable search grounding")
    transform.set_defaults(func=cmd_transform)

    imports = subparsers.add_parser("import", help="Import an article from a partner, a URL or manual input")
    source = imports.add_mutually_exclusive_group(required=True)
    source.add_argument("--partner", metavar="URL", help="Fetch the article through the partner API")
    source.add_argument("--url", help="Extract an arbitrary external URL")
    source.add_argument("--title", help="Title of a manually entered article")
    imports.add_argument("--content", help="Body of a manually entered article")
    imports.add_argument("--locale", choices=LOCALES, help="Also rewrite or translate the imported article")
    imports.add_argument("--grounding", action="store_true", help="Enable search grounding")
    imports.set_defaults(func=cmd_import)

    topics = subparsers.add_parser("topics", help="List topic tabs")
    topics.set_defaults(func=cmd_topics)

    news = subparsers.add_parser("news", help="List articles for a topic")
    news.add_argument("topic")
    news.add_argument("--locale", choices=LOCALES, default="id-ID")
    news.add_argument("--search", default="", help="Keep articles whose title or source contains this term")
    news.set_defaults(func=cmd_news)

    discover = subparsers.add_parser("discover", help="List trending articles")
    discover.add_argument("--locale", choices=LOCALES, default="id-ID")
    discover.add_argument("--search", default="", help="Keep articles whose title or source contains this term")
    discover.set_defaults(func=cmd_discover)

    insights = subparsers.add_parser("insights", help="Executive briefing for a feed")
    insights.add_argument("--topic", default=TRENDING)
    insights.add_argument("--locale", choices=LOCALES, default="id-ID")
    insights.set_defaults(func=cmd_insights)

    batch = subparsers.add_parser("batch", help="Extract every URL listed in a CSV file")
    batch.add_argument("input_csv")
    batch.add_argument("output_csv")
    batch.set_defaults(func=cmd_batch)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env(args.env_file)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(config.log_level, config.json_logs)

    try:
        return args.func(args, config)
    except ExtractionError as e:
        print(f"{e.message}. You can still open the original URL: {e.url}", file=sys.stderr)
        for attempt in e.attempts:
            print(f"  {attempt['strategy']}: {attempt['error']}", file=sys.stderr)
    except (InvalidReferenceError, ValueError) as e:
        print(str(e), file=sys.stderr)
    except StudioError as e:
        logger.error("Command failed", extra={"command": args.command, "error": e.message})
        print(e.message, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
