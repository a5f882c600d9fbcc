"""Data models for content studio."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ArticleReference:
    """Identifies a remote document to read."""

    url: str


@dataclass(frozen=True)
class ExtractedArticle:
    """Normalized article record produced by an extraction strategy."""

    title: str
    content: str
    text_content: str
    excerpt: str
    byline: str
    site_name: str
    url: str
    image: str
    extraction_method: str = ""
    format: str = "html"

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "content": self.content,
            "textContent": self.text_content,
            "excerpt": self.excerpt,
            "byline": self.byline,
            "siteName": self.site_name,
            "url": self.url,
            "image": self.image,
            "extractionMethod": self.extraction_method,
            "format": self.format,
        }


@dataclass(frozen=True)
class TransformationRequest:
    """Title and body to submit for rewriting or translation."""

    title: str
    content: str
    target_locale: str
    grounding_enabled: bool = False


@dataclass(frozen=True)
class TransformationResult:
    """Normalized output of a rewrite or translate operation."""

    content: str
    title: str | None = None
    alternative_titles: tuple[str, ...] = ()
    meta_description: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "alternativeTitles": list(self.alternative_titles),
            "content": self.content,
            "metaDescription": self.meta_description,
        }


@dataclass(frozen=True)
class ListingArticle:
    """One item of a topic or discover feed."""

    title: str
    url: str
    source: str
    date: str
    image: str
    timestamp: int

    @classmethod
    def from_dict(cls, data: dict) -> "ListingArticle":
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            source=data.get("source") or "",
            date=data.get("date") or "",
            image=data.get("image") or "",
            timestamp=int(data.get("timestamp") or 0),
        )

    def with_date(self, date: str) -> "ListingArticle":
        return replace(self, date=date)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "date": self.date,
            "image": self.image,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ListingResponse:
    """A collection of feed articles."""

    articles: tuple[ListingArticle, ...]
    source: str = ""
    status: str = "success"
    total: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "ListingResponse":
        articles = tuple(ListingArticle.from_dict(item) for item in data.get("articles") or [])
        return cls(
            articles=articles,
            source=data.get("source") or "",
            status=data.get("status") or "success",
            total=int(data.get("total") or len(articles)),
        )

    def to_dict(self) -> dict:
        return {
            "articles": [article.to_dict() for article in self.articles],
            "source": self.source,
            "status": self.status,
            "total": self.total,
        }


@dataclass(frozen=True)
class TopicsResponse:
    """Main and secondary topic names offered by the listing backend."""

    main_topics: tuple[str, ...] = ()
    sub_topics: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "TopicsResponse":
        return cls(
            main_topics=tuple(data.get("main_topics") or ()),
            sub_topics=tuple(data.get("sub_topics") or ()),
        )


@dataclass
class ExtractionResult:
    """Result of extracting one URL in batch mode."""

    id_value: str
    url: str
    title: str
    text_content: str
    site_name: str
    byline: str
    extraction_method: str
    status: str
    error_message: str | None = None

    @classmethod
    def from_article(cls, id_value: str, url: str, article: ExtractedArticle) -> "ExtractionResult":
        return cls(
            id_value=id_value,
            url=url,
            title=article.title,
            text_content=article.text_content,
            site_name=article.site_name,
            byline=article.byline,
            extraction_method=article.extraction_method,
            status="success",
        )

    @classmethod
    def create_error(cls, id_value: str, url: str, error_message: str) -> "ExtractionResult":
        return cls(
            id_value=id_value,
            url=url,
            title="",
            text_content="",
            site_name="",
            byline="",
            extraction_method="",
            status="error",
            error_message=error_message,
        )
