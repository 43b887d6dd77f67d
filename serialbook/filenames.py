import re
from typing import Optional, Sequence

from serialbook.config import Settings
from serialbook.models import Chapter


def sanitizeFilename(title: str, maxLength: int = 50) -> str:
    """Create a filesystem-safe, lower-case version of a chapter title."""
    title = title.strip()
    title = re.sub(r"[^\w\s\-.]", "", title, flags=re.ASCII)
    title = re.sub(r"\s+", "_", title)
    title = title.lower()[:maxLength]
    title = title.strip("_-.")
    return title or "chapter"


def generateFilename(chapters: Sequence[Chapter], settings: Optional[Settings] = None) -> str:
    """Name the EPUB after the first chapter it contains."""
    settings = settings or Settings()
    if not chapters:
        return settings.defaultFilename
    startChapter = sanitizeFilename(chapters[0].title, settings.maxFilenameLength)
    return f"{settings.filenamePrefix}_{startChapter}.epub"
