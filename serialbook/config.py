"""
Static configuration for the serial-to-EPUB pipeline.

NavigationRules holds the heuristics used to tell chapter content apart from
site chrome. Settings holds the run-time knobs (URLs, metadata, HTTP) and can
be overridden through SERIALBOOK_* environment variables or a .env file.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from serialbook.errors import ConfigurationError


@dataclass(frozen=True)
class NavigationRules:
    """Immutable rule set shared by the classifier, sanitizer and extractor."""

    navigationPhrases: Tuple[str, ...] = (
        "previous chapter",
        "next chapter",
        "← previous",
        "next →",
        "table of contents",
        "chapter index",
        "first chapter",
        "last chapter",
    )
    # Short markers that are also fragments of real words ("restock")
    navigationWords: Tuple[str, ...] = ("toc",)
    navigationClasses: Tuple[str, ...] = (
        "navigation",
        "nav",
        "chapter-nav",
        "post-nav",
        "entry-nav",
        "pagination",
        "prev-next",
        "chapter-links",
    )
    symbolPattern: re.Pattern = field(default_factory=lambda: re.compile(r"^(←|→|«|»|\|)+$"))
    shortTextThreshold: int = 30
    shortNavigationLabels: Tuple[str, ...] = ("previous", "next")
    shortNavigationArrows: Tuple[str, ...] = ("← ", " →")
    # Declared order decides ties when a class string holds several markers
    colorClasses: Tuple[Tuple[str, str], ...] = (
        ("has-red-color", "red"),
        ("has-blue-color", "blue"),
        ("has-green-color", "green"),
        ("has-purple-color", "purple"),
        ("has-orange-color", "orange"),
        ("has-yellow-color", "yellow"),
        ("has-brown-color", "brown"),
        ("has-pink-color", "pink"),
        ("has-cyan-color", "cyan"),
        ("has-gray-color", "gray"),
        ("has-grey-color", "gray"),
        ("has-gold-color", "gold"),
        ("has-silver-color", "silver"),
        ("has-crimson-color", "crimson"),
        ("has-maroon-color", "maroon"),
        ("has-navy-color", "navy"),
        ("has-teal-color", "teal"),
    )
    containerTags: Tuple[str, ...] = ("div", "article")
    containerClasses: Tuple[str, ...] = ("entry-content", "post-content")
    prunedTags: Tuple[str, ...] = ("script", "style", "nav", "footer", "header")
    chapterPattern: re.Pattern = field(
        default_factory=lambda: re.compile(r"(chapter|prologue|epilogue|interlude|\d+\.\d+)", re.IGNORECASE)
    )
    tocTitlePhrase: str = "table of contents"


DEFAULT_RULES = NavigationRules()

# Hex values used by the EPUB stylesheet for each canonical color class
PALETTE = {
    "red": "#e74c3c",
    "blue": "#3498db",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "orange": "#e67e22",
    "yellow": "#f1c40f",
    "brown": "#8b4513",
    "pink": "#e91e63",
    "cyan": "#1abc9c",
    "gray": "#7f8c8d",
    "gold": "#ffd700",
    "silver": "#c0c0c0",
    "crimson": "#dc143c",
    "maroon": "#800000",
    "navy": "#000080",
    "teal": "#008080",
}


@dataclass
class Settings:
    """Run-time settings for scraping and EPUB assembly."""

    tocUrl: str = "https://wanderinginn.com/table-of-contents/"
    siteDomain: str = "wanderinginn.com"
    tocHrefMarker: str = "table-of-contents"
    epubTitle: str = "The Wandering Inn"
    epubAuthor: str = "pirateaba"
    epubDescription: str = "The Wandering Inn web serial"
    epubLanguage: str = "en"
    filenamePrefix: str = "wandering_inn"
    defaultFilename: str = "wandering_inn.epub"
    maxFilenameLength: int = 50
    latestChaptersCount: int = 20
    requestTimeout: float = 30.0
    userAgent: str = "SerialBook/1.0 (Offline Reader)"

    @classmethod
    def fromEnvironment(cls, envFile: Optional[str] = None) -> "Settings":
        """
        Build settings from SERIALBOOK_* environment variables.

        A .env file (the given path, or one found from the working directory)
        is loaded first; variables already set in the environment win.

        Raises:
            ConfigurationError: If a numeric variable does not parse
        """
        load_dotenv(envFile)
        defaults = cls()

        def env(name: str, default):
            value = os.getenv(f"SERIALBOOK_{name}")
            if value is None or value == "":
                return default
            try:
                return type(default)(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"SERIALBOOK_{name}={value!r} is not a valid {type(default).__name__}"
                ) from e

        return cls(
            tocUrl=env("TOC_URL", defaults.tocUrl),
            siteDomain=env("SITE_DOMAIN", defaults.siteDomain),
            tocHrefMarker=env("TOC_HREF_MARKER", defaults.tocHrefMarker),
            epubTitle=env("EPUB_TITLE", defaults.epubTitle),
            epubAuthor=env("EPUB_AUTHOR", defaults.epubAuthor),
            epubDescription=env("EPUB_DESCRIPTION", defaults.epubDescription),
            epubLanguage=env("EPUB_LANGUAGE", defaults.epubLanguage),
            filenamePrefix=env("FILENAME_PREFIX", defaults.filenamePrefix),
            defaultFilename=env("DEFAULT_FILENAME", defaults.defaultFilename),
            maxFilenameLength=env("MAX_FILENAME_LENGTH", defaults.maxFilenameLength),
            latestChaptersCount=env("LATEST_CHAPTERS", defaults.latestChaptersCount),
            requestTimeout=env("REQUEST_TIMEOUT", defaults.requestTimeout),
            userAgent=env("USER_AGENT", defaults.userAgent),
        )
