"""Markup helpers for article bodies."""

import html
import re

from lxml import etree
from lxml import html as lxml_html

from .models import ExtractedArticle

VIDEO_HOSTS = (
    "youtube.com",
    "youtube-nocookie.com",
    "youtu.be",
    "vimeo.com",
    "dailymotion.com",
    "dai.ly",
    "facebook.com/plugins/video",
    "tiktok.com",
)

FORBIDDEN_TAGS = ("script", "style", "iframe", "form", "input", "button")
FORBIDDEN_ATTRS = ("style", "onclick", "onmouseover")

BLOCK_TAGS = (
    "p", "div", "br", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6",
    "blockquote", "figure", "figcaption", "pre", "table", "tr", "section", "article",
)

_ADVERTISEMENT = re.compile(r"ADVERTISEMENT", re.IGNORECASE)
_WRAPPER = "div"


def _parse_fragment(markup: str) -> lxml_html.HtmlElement:
    """Parse markup under a wrapper element; unparsable documents give an empty wrapper."""
    try:
        return lxml_html.fragment_fromstring(markup, create_parent=_WRAPPER)
    except (etree.LxmlError, AssertionError):
        # Whole documents without a <body> (or with nothing at all) are not fragments.
        pass

    root = lxml_html.Element(_WRAPPER)
    try:
        document = lxml_html.document_fromstring(markup)
    except (etree.LxmlError, ValueError):
        return root
    body = document.find("body")
    if body is not None:
        root.text = body.text
        root.extend(list(body))
    return root


def _serialize_fragment(root: lxml_html.HtmlElement) -> str:
    parts = [html.escape(root.text, quote=False)] if root.text else []
    parts.extend(etree.tostring(child, encoding="unicode", method="html") for child in root)
    return "".join(parts)


def strip_markup(markup: str) -> str:
    """Convert a markup fragment into plain text, one block per line."""
    if not markup or not markup.strip():
        return ""
    root = _parse_fragment(markup)
    for element in root.iter(*BLOCK_TAGS):
        element.tail = "\n" + (element.tail or "")
    lines = [" ".join(line.split()) for line in root.text_content().splitlines()]
    return "\n".join(line for line in lines if line)


def paragraphs_from_text(text: str) -> str:
    """Wrap every non-blank line of plain text into a paragraph element."""
    if not text:
        return ""
    return "".join(
        f"<p>{html.escape(line.strip(), quote=False)}</p>" for line in text.split("\n") if line.strip()
    )


def is_video_source(src: str | None) -> bool:
    if not src:
        return False
    src = src.lower()
    return any(host in src for host in VIDEO_HOSTS)


def strip_video_embeds(markup: str) -> str:
    """Remove iframe/embed blocks that point at a video hosting domain."""
    if not markup or not markup.strip():
        return markup or ""
    root = _parse_fragment(markup)
    for element in list(root.iter("iframe", "embed", "object")):
        src = element.get("src") or element.get("data")
        if not is_video_source(src):
            continue
        # WordPress wraps embeds in <figure class="wp-block-embed ...">
        target = element
        for ancestor in element.iterancestors("figure"):
            if "wp-block-embed" in (ancestor.get("class") or ""):
                target = ancestor
                break
        if target.getparent() is not None:
            target.drop_tree()
    return _serialize_fragment(root)


def sanitize_markup(markup: str) -> str:
    """Drop active elements and inline handlers before display."""
    if not markup or not markup.strip():
        return ""
    root = _parse_fragment(markup)
    for element in list(root.iter(*FORBIDDEN_TAGS)):
        if element.getparent() is not None:
            element.drop_tree()
    for element in root.iter():
        for attr in FORBIDDEN_ATTRS:
            element.attrib.pop(attr, None)
    return _serialize_fragment(root)


def render_source(article: ExtractedArticle) -> str:
    """Markup to show in the reader for an extracted article."""
    if article.content:
        return sanitize_markup(_ADVERTISEMENT.sub("", article.content))
    return paragraphs_from_text(article.text_content)
