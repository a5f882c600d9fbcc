import json
import logging
from unittest.mock import patch

import pytest

from content_studio import cli
from content_studio.config import Config
from content_studio.exceptions import ExtractionError
from content_studio.models import ExtractedArticle, ListingArticle, TransformationResult


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.min_content_length == 100
        assert config.translate_locale == "en-US"
        assert config.url_columns == ["url"]

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STUDIO_SERVICE_URL", "https://proxy.test/")
        monkeypatch.setenv("STUDIO_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("STUDIO_URL_COLUMNS", "url, mirror_url")
        monkeypatch.setenv("USE_JSON_LOGGING", "true")
        monkeypatch.setenv("GEMINI_API_KEY", "secret")

        config = Config.from_env(str(tmp_path / "missing.env"))

        assert config.service_url == "https://proxy.test"
        assert config.request_timeout == 12.5
        assert config.url_columns == ["url", "mirror_url"]
        assert config.json_logs is True
        assert config.gemini_api_key == "secret"

    def test_invalid_number(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STUDIO_MIN_CONTENT_LENGTH", "many")
        with pytest.raises(ValueError, match="STUDIO_MIN_CONTENT_LENGTH"):
            Config.from_env(str(tmp_path / "missing.env"))

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            Config(request_timeout=0)


class TestCli:
    @pytest.fixture(autouse=True)
    def reset_package_logger(self):
        yield
        package_logger = logging.getLogger("content_studio")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)

    def test_read_prints_article_json(self, capsys):
        article = ExtractedArticle(
            title="Judul", content="<p>x</p>", text_content="x", excerpt="", byline="A",
            site_name="S", url="https://a.test/x", image="", extraction_method="reader",
        )
        with patch.object(cli.ArticleExtractor, "extract_from_url", return_value=article):
            code = cli.main(["read", "https://a.test/x"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["title"] == "Judul"

    def test_read_failure_shows_message_and_attempts(self, capsys):
        error = ExtractionError("https://a.test/x", [{"strategy": "reader", "outcome": "hard_failure", "error": "Blocked"}])
        with patch.object(cli.ArticleExtractor, "extract_from_url", side_effect=error):
            code = cli.main(["read", "https://a.test/x"])

        err = capsys.readouterr().err
        assert code == 1
        assert ExtractionError.DEFAULT_MESSAGE in err
        assert "reader: Blocked" in err

    def test_subcommand_is_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

    def test_invalid_environment_is_reported_not_raised(self, monkeypatch, capsys):
        monkeypatch.setenv("STUDIO_REQUEST_TIMEOUT", "abc")

        code = cli.main(["topics"])

        assert code == 1
        err = capsys.readouterr().err
        assert "Invalid configuration" in err
        assert "STUDIO_REQUEST_TIMEOUT" in err

    def test_import_manual_article(self, capsys):
        code = cli.main(["import", "--title", "Catatan Redaksi", "--content", "Baris satu"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["item"]["source"] == "Manual Input"
        assert data["article"]["extractionMethod"] == "manual"
        assert data["rendered"] == "Baris satu"
        assert "transformation" not in data

    def test_import_manual_requires_content(self, capsys):
        code = cli.main(["import", "--title", "Catatan Redaksi"])

        assert code == 1
        assert "Title and Content are required" in capsys.readouterr().err

    def test_import_partner_and_transform(self, capsys):
        item = ListingArticle(
            title="Judul", url="https://partner.test/1", source="Partner API", date="2025-12-02", image="",
            timestamp=1764646200000,
        )
        article = ExtractedArticle(
            title="Judul", content="<p>Isi</p>", text_content="Isi", excerpt="Isi...", byline="Partner API",
            site_name="Partner Import", url="https://partner.test/1", image="", extraction_method="partner",
        )
        result = TransformationResult(title="Title", alternative_titles=("Alt",), content="<p>Body</p>", meta_description="")
        with patch.object(cli.PartnerImporter, "import_from_partner", return_value=(item, article)) as importer, \
                patch.object(cli.ArticleTransformer, "transform_article", return_value=result) as transformer:
            code = cli.main(["import", "--partner", "https://partner.test/1", "--locale", "en-US"])

        assert code == 0
        importer.assert_called_once_with("https://partner.test/1")
        transformer.assert_called_once_with(article, "en-US", False)
        data = json.loads(capsys.readouterr().out)
        assert data["article"]["siteName"] == "Partner Import"
        assert data["rendered"] == "<p>Isi</p>"
        assert data["transformation"]["title"] == "Title"

    def test_import_url_extracts_article(self, capsys):
        article = ExtractedArticle(
            title="Judul", content="<p>x</p>", text_content="x", excerpt="", byline="A",
            site_name="S", url="https://a.test/x", image="", extraction_method="reader",
        )
        with patch.object(cli.ArticleExtractor, "extract_from_url", return_value=article) as extract:
            code = cli.main(["import", "--url", "https://a.test/x"])

        assert code == 0
        extract.assert_called_once_with("https://a.test/x")
        data = json.loads(capsys.readouterr().out)
        assert data["item"]["source"] == "a.test"
        assert data["article"]["title"] == "Judul"

    def test_import_source_is_required(self):
        with pytest.raises(SystemExit):
            cli.main(["import"])

    def test_news_search_filters_feed(self, capsys):
        feed = [
            ListingArticle(title="Banjir di Jakarta", url="u1", source="Kompas", date="d", image="", timestamp=2),
            ListingArticle(title="Harga beras naik", url="u2", source="Tempo", date="d", image="", timestamp=1),
        ]
        with patch.object(cli.NewsClient, "load_feed", return_value=feed):
            code = cli.main(["news", "Nasional", "--search", "tempo"])

        assert code == 0
        assert [a["url"] for a in json.loads(capsys.readouterr().out)] == ["u2"]

    def test_read_can_include_rendered_markup(self, capsys):
        article = ExtractedArticle(
            title="Judul", content="<p onclick='x()'>Isi</p><script>1</script>", text_content="Isi", excerpt="",
            byline="A", site_name="S", url="https://a.test/x", image="", extraction_method="reader",
        )
        with patch.object(cli.ArticleExtractor, "extract_from_url", return_value=article):
            code = cli.main(["read", "https://a.test/x", "--render"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["rendered"] == "<p>Isi</p>"
