import pytest

from content_studio.markup import (
    is_video_source,
    paragraphs_from_text,
    render_source,
    sanitize_markup,
    strip_markup,
    strip_video_embeds,
)
from content_studio.models import ExtractedArticle


def _article(content: str = "", text_content: str = "") -> ExtractedArticle:
    return ExtractedArticle(
        title="", content=content, text_content=text_content, excerpt="", byline="", site_name="", url="", image="",
    )


def test_strip_markup_keeps_block_boundaries():
    assert strip_markup("<h2>Title</h2><p>First &amp; second</p><p>Third<br>line</p>") == (
        "Title\nFirst & second\nThird\nline"
    )


def test_strip_markup_empty():
    assert strip_markup("") == ""
    assert strip_markup("   ") == ""


@pytest.mark.parametrize("markup", ["<!DOCTYPE html>", "<html></html>", "<html><head></head></html>"])
def test_bodiless_documents_have_no_text(markup):
    assert strip_markup(markup) == ""
    assert sanitize_markup(markup) == ""
    assert strip_video_embeds(markup) == ""


def test_full_document_keeps_body_text():
    assert strip_markup("<html><head><title>x</title></head><body><p>Hi</p></body></html>") == "Hi"


def test_paragraphs_skip_blank_lines_and_escape():
    assert paragraphs_from_text("a < b\n\n  \nc") == "<p>a &lt; b</p><p>c</p>"


def test_video_sources():
    assert is_video_source("https://www.youtube.com/embed/x")
    assert is_video_source("//player.vimeo.com/video/1")
    assert not is_video_source("https://maps.example.com/embed")
    assert not is_video_source(None)


def test_strip_video_embeds_removes_only_video_frames():
    markup = (
        "Lead text"
        '<p>Body</p><iframe src="https://www.youtube.com/embed/abc"></iframe>'
        '<iframe src="https://www.example.com/widget"></iframe>'
        '<embed src="https://vimeo.com/1">'
    )
    result = strip_video_embeds(markup)
    assert result.startswith("Lead text<p>Body</p>")
    assert "youtube" not in result
    assert "vimeo" not in result
    assert "example.com/widget" in result


def test_sanitize_drops_active_content():
    result = sanitize_markup('<p style="color:red" onclick="x()">Hi</p><script>alert(1)</script><form></form>')
    assert result == "<p>Hi</p>"


def test_render_source_prefers_markup_and_removes_ad_markers():
    rendered = render_source(_article(content="<p>Intro</p><p>advertisement</p><p>End</p>", text_content="ignored"))
    assert "advertisement" not in rendered.lower()
    assert "ignored" not in rendered
    assert "<p>End</p>" in rendered


def test_render_source_falls_back_to_text():
    assert render_source(_article(text_content="one\ntwo")) == "<p>one</p><p>two</p>"
