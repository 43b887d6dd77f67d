"""Turn a web serial's chapters into an offline EPUB."""

from serialbook.chapterExtractor import extractChapterHTML, renderBody
from serialbook.config import DEFAULT_RULES, NavigationRules, Settings
from serialbook.models import Chapter
from serialbook.scraper.chapterScraper import ChapterScraper, discoverChapters

__version__ = "1.0.0"

__all__ = [
    "Chapter",
    "ChapterScraper",
    "DEFAULT_RULES",
    "NavigationRules",
    "Settings",
    "discoverChapters",
    "extractChapterHTML",
    "renderBody",
]
