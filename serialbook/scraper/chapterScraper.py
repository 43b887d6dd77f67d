"""
Chapter scraper for web serials.
Reads the table of contents page, discovers chapter links in document order,
and fetches individual chapter pages for extraction.
"""

import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from bs4.element import PageElement

from serialbook.chapterExtractor import extractChapterHTML
from serialbook.config import DEFAULT_RULES, NavigationRules, Settings
from serialbook.errors import ExtractionError, FetchError
from serialbook.htmlTree import extractText, getAttribute, iterElements, parseDocument
from serialbook.models import Chapter

logger = logging.getLogger(__name__)


def is_chapter_title(title: str, rules: NavigationRules = DEFAULT_RULES) -> bool:
    """Check whether link text names a chapter rather than another page."""
    return bool(rules.chapterPattern.search(title)) and rules.tocTitlePhrase not in title.lower()


def discoverChapters(
    root: PageElement,
    site_domain: str = Settings.siteDomain,
    toc_marker: str = Settings.tocHrefMarker,
    rules: NavigationRules = DEFAULT_RULES,
) -> List[Chapter]:
    """
    Collect chapter links from a table of contents tree.

    Anchors are visited in pre-order. A link counts when its href points at
    the site, is not the table of contents itself, and its text looks like a
    chapter title. Duplicate links are kept as separate chapters.
    """
    chapters = []

    for anchor in iterElements(root):
        if anchor.name != "a":
            continue

        href = getAttribute(anchor, "href")
        if not href or site_domain not in href or toc_marker in href:
            continue

        title = extractText(anchor)
        if not title or not is_chapter_title(title, rules):
            continue

        chapters.append(Chapter(title=title.strip(), url=href, index=len(chapters)))

    chapters.sort(key=lambda chapter: chapter.index)
    return chapters


class ChapterScraper:
    """Fetches the chapter listing and chapter pages of a web serial."""

    def __init__(self, settings: Optional[Settings] = None, rules: NavigationRules = DEFAULT_RULES):
        """Initialize the scraper."""
        self.settings = settings or Settings()
        self.rules = rules

        # Session for HTTP requests
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': self.settings.userAgent
        })

    def fetch_and_parse(self, url: str) -> BeautifulSoup:
        """Download a page and parse it, raising FetchError on transport failure."""
        try:
            logger.debug(f"Fetching {url}")
            response = self.session.get(url, timeout=self.settings.requestTimeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, e) from e

        return parseDocument(response.content)

    def fetch_table_of_contents(self) -> List[Chapter]:
        """Fetch the listing page and return its chapters in reading order."""
        logger.info(f"Fetching table of contents from {self.settings.tocUrl}")
        doc = self.fetch_and_parse(self.settings.tocUrl)

        chapters = discoverChapters(
            doc,
            site_domain=self.settings.siteDomain,
            toc_marker=self.settings.tocHrefMarker,
            rules=self.rules,
        )
        logger.info(f"Found {len(chapters)} chapters in table of contents")
        return chapters

    def fetch_chapter_content(self, url: str, title: str) -> str:
        """Fetch a chapter page and return its extracted HTML, or "" if none."""
        doc = self.fetch_and_parse(url)

        try:
            content = extractChapterHTML(doc, title, self.rules)
        except RecursionError as e:
            raise ExtractionError(url, e) from e

        if not content:
            logger.warning(f"No content container found for {title} ({url})")
        return content
