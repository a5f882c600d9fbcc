"""Content Studio - read news articles and prepare AI rewrites or translations."""

__version__ = "0.1.0"
__license__ = "MIT"

from .extractor import ArticleExtractor
from .importers import PartnerImporter, import_manual, reference_for_url
from .listings import NewsClient
from .transformer import ArticleTransformer

__all__ = [
    "ArticleExtractor",
    "ArticleTransformer",
    "NewsClient",
    "PartnerImporter",
    "import_manual",
    "reference_for_url",
]
