"""Shared fixtures for the serialbook test suite."""

import pytest

from serialbook.htmlTree import parseDocument
from serialbook.models import Chapter

TOC_PAGE = """
<!DOCTYPE html>
<html>
<body>
    <div>
        <a href="https://wanderinginn.com/chapter-1-00">Chapter 1.00</a>
        <a href="https://wanderinginn.com/prologue">Prologue</a>
        <a href="https://wanderinginn.com/table-of-contents">Table of Contents</a>
        <a href="https://wanderinginn.com/about">About the Author</a>
    </div>
</body>
</html>"""

CHAPTER_PAGE = """
<!DOCTYPE html>
<html>
<head><title>1.00</title><style>p { color: black; }</style></head>
<body>
    <header><a href="https://wanderinginn.com/">The Wandering Inn</a></header>
    <div class="entry-content"><p>The inn was empty.</p><div class="chapter-nav"><a href="https://wanderinginn.com/prologue">Previous Chapter</a></div><p class="has-red-color">Blood on the floor.</p></div>
    <footer>Copyright</footer>
</body>
</html>"""


@pytest.fixture
def parse():
    """Parse an HTML snippet the same way fetched pages are parsed."""
    return parseDocument


@pytest.fixture
def tocPage():
    return parseDocument(TOC_PAGE)


@pytest.fixture
def chapterPage():
    return parseDocument(CHAPTER_PAGE)


@pytest.fixture
def chapters():
    return [
        Chapter(title="Chapter 1", url="https://wanderinginn.com/chapter-1", index=0),
        Chapter(title="Chapter 2", url="https://wanderinginn.com/chapter-2", index=1),
        Chapter(title="Chapter 3", url="https://wanderinginn.com/chapter-3", index=2),
    ]
