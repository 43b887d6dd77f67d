#!/usr/bin/env python3
"""
Main CLI entry point for the web serial EPUB creator.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from serialbook.chapterExtractor import extractChapterHTML
from serialbook.config import Settings
from serialbook.epubCreator import EpubCreator
from serialbook.errors import SerialBookError
from serialbook.htmlTree import parseDocument
from serialbook.models import Chapter
from serialbook.scraper.chapterScraper import ChapterScraper

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="serialbook",
    help="Turn a web serial's published chapters into an offline EPUB",
    no_args_is_help=True
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging")
) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def _loadSettings() -> Settings:
    try:
        return Settings.fromEnvironment()
    except SerialBookError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(1)


def _fetchChapters(scraper: ChapterScraper) -> List[Chapter]:
    try:
        chapters = scraper.fetch_table_of_contents()
    except SerialBookError as e:
        logger.error(f"Error fetching table of contents: {e}")
        raise typer.Exit(1)

    if not chapters:
        logger.error("No chapters found in table of contents")
        raise typer.Exit(1)
    return chapters


def _printChapters(chapters: List[Chapter], latest: Optional[int]) -> None:
    typer.echo(f"Found {len(chapters)} chapters")
    start = 0
    if latest is not None:
        start = max(0, len(chapters) - latest)
        typer.echo(f"Latest {latest} chapters:")
    for position in range(start, len(chapters)):
        typer.echo(f"{position + 1}. {chapters[position].title}")


def _promptChapter(message: str, low: int, high: int, default: Optional[int] = None) -> int:
    while True:
        value = typer.prompt(f"{message} ({low}-{high})", type=int, default=default)
        if low <= value <= high:
            return value
        typer.echo(f"Please enter a number between {low} and {high}.")


def _checkRange(value: int, low: int, high: int, name: str) -> int:
    if value < low or value > high:
        raise typer.BadParameter(f"must be between {low} and {high}", param_hint=name)
    return value


@app.command("list-chapters")
def list_chapters(
    showAll: bool = typer.Option(False, "--all", help="List every chapter instead of only the latest ones")
) -> None:
    """List the chapters found in the table of contents."""
    settings = _loadSettings()
    chapters = _fetchChapters(ChapterScraper(settings))
    _printChapters(chapters, None if showAll else settings.latestChaptersCount)


@app.command("create-epub")
def create_epub(
    start: Optional[int] = typer.Option(None, "--start", "-s", help="First chapter to include (1-based)"),
    end: Optional[int] = typer.Option(None, "--end", "-e", help="Last chapter to include (1-based, inclusive)"),
    outputDir: str = typer.Option(".", "--output", "-o", help="Directory to write the EPUB into"),
) -> None:
    """
    Download a range of chapters and bundle them into an EPUB.

    When --start or --end is missing the chapter list is shown and the
    missing bound is asked for interactively.
    """
    settings = _loadSettings()
    scraper = ChapterScraper(settings)
    chapters = _fetchChapters(scraper)
    total = len(chapters)

    if start is None or end is None:
        _printChapters(chapters, settings.latestChaptersCount)

    if start is None:
        start = _promptChapter("Enter starting chapter number", 1, total)
    else:
        _checkRange(start, 1, total, "--start")

    if end is None:
        end = _promptChapter("Enter ending chapter number", start, total, default=total)
    else:
        _checkRange(end, start, total, "--end")

    selected = chapters[start - 1:end]
    typer.echo(f"Creating EPUB with {len(selected)} chapters (chapters {start} to {end})...")

    creator = EpubCreator(settings)
    creator.setProgressCallback(
        lambda current, count, title: typer.echo(f"Downloading chapter {current}/{count}: {title}")
    )

    try:
        epubPath = creator.createEpub(selected, scraper, outputDir)
    except SerialBookError as e:
        logger.error(f"Error creating EPUB: {e}")
        raise typer.Exit(1)

    typer.echo(f"EPUB created successfully: {epubPath}")


@app.command("extract-chapter")
def extract_chapter(
    title: str = typer.Option(..., "--title", "-t", help="Chapter title for the heading"),
    url: str = typer.Option("", "--url", "-u", help="Chapter page to download"),
    inputFile: str = typer.Option("", "--input", "-i", help="Saved chapter page to read instead of downloading"),
    outputFile: str = typer.Option("", "--output", "-o", help="File to write the HTML to (defaults to stdout)"),
) -> None:
    """Extract one chapter's cleaned HTML from a URL or a saved page."""
    if bool(url) == bool(inputFile):
        raise typer.BadParameter("pass exactly one of --url or --input")

    if inputFile:
        path = Path(inputFile)
        if not path.is_file():
            logger.error(f"Input file not found: {inputFile}")
            raise typer.Exit(1)
        content = extractChapterHTML(parseDocument(path.read_bytes()), title)
    else:
        try:
            content = ChapterScraper(_loadSettings()).fetch_chapter_content(url, title)
        except SerialBookError as e:
            logger.error(f"Error fetching chapter: {e}")
            raise typer.Exit(1)

    if not content:
        logger.error(f"No chapter content found for {title}")
        raise typer.Exit(1)

    if outputFile:
        Path(outputFile).write_text(content, encoding='utf-8')
        typer.echo(f"Chapter written to {outputFile}")
    else:
        typer.echo(content, nl=False)


if __name__ == "__main__":
    app()
