import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ebooklib import epub

from serialbook.config import PALETTE, Settings
from serialbook.errors import EpubCreationError, ExtractionError, FetchError
from serialbook.filenames import generateFilename
from serialbook.models import Chapter

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]

BASE_CSS = """body {
    font-family: Georgia, serif;
    line-height: 1.6;
    color: #333;
}
h1 {
    color: #2c3e50;
    text-align: center;
    border-bottom: 2px solid #3498db;
    padding-bottom: 10px;
}
p {
    margin-bottom: 1em;
    text-align: justify;
}
"""


def buildStylesheet() -> str:
    """Base reader styles plus one rule per palette color class."""
    colorRules = "".join(f".{name} {{ color: {value}; }}\n" for name, value in PALETTE.items())
    return BASE_CSS + colorRules


class EpubCreator:
    """Assembles fetched chapters into a single EPUB file."""

    def __init__(self, settings: Optional[Settings] = None, css: Optional[str] = None):
        self.settings = settings or Settings()
        self.css = css if css is not None else buildStylesheet()
        self.progressCallback: Optional[ProgressCallback] = None

    def setProgressCallback(self, callback: ProgressCallback) -> None:
        self.progressCallback = callback

    def createEpub(self, chapters: Sequence[Chapter], fetcher, outputDir: str = ".") -> Path:
        """
        Fetch every chapter and write the EPUB.

        A chapter that fails to download, cannot be extracted or has no
        content is logged and skipped; the rest of the run continues.

        Args:
            chapters: Chapters to include, in reading order
            fetcher: Object with fetch_chapter_content(url, title) -> str
            outputDir: Directory the EPUB is written to

        Returns:
            Path of the written EPUB

        Raises:
            EpubCreationError: If no chapter produced any content
        """
        filename = generateFilename(chapters, self.settings)

        book = epub.EpubBook()
        book.set_identifier(Path(filename).stem)
        book.set_title(self.settings.epubTitle)
        book.set_language(self.settings.epubLanguage)
        book.add_author(self.settings.epubAuthor)
        book.add_metadata('DC', 'description', self.settings.epubDescription)

        stylesheet = epub.EpubItem(uid="style_default", file_name="style/default.css",
                                   media_type="text/css", content=self.css)
        book.add_item(stylesheet)

        sections: List[epub.EpubHtml] = []
        total = len(chapters)

        for position, chapter in enumerate(chapters, 1):
            if self.progressCallback:
                self.progressCallback(position, total, chapter.title)

            try:
                content = fetcher.fetch_chapter_content(chapter.url, chapter.title)
            except FetchError as e:
                logger.warning(f"Failed to fetch chapter {chapter.title}: {e}")
                continue
            except ExtractionError as e:
                logger.warning(f"Failed to extract chapter {chapter.title}: {e}")
                continue

            if not content:
                logger.warning(f"Skipping chapter {chapter.title}: no content extracted")
                continue

            section = epub.EpubHtml(title=chapter.title, file_name=f"chapter_{position:04d}.xhtml",
                                    lang=self.settings.epubLanguage)
            section.content = content
            section.add_item(stylesheet)
            book.add_item(section)
            sections.append(section)

        if not sections:
            raise EpubCreationError("No chapter content could be fetched")

        book.toc = tuple(sections)
        book.spine = ['nav'] + sections
        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())

        outputPath = Path(outputDir)
        outputPath.mkdir(parents=True, exist_ok=True)
        epubPath = outputPath / filename

        try:
            epub.write_epub(str(epubPath), book, {})
        except OSError as e:
            raise EpubCreationError(f"Could not write {epubPath}: {e}") from e

        logger.info(f"EPUB created successfully: {epubPath} ({len(sections)}/{total} chapters)")
        return epubPath
