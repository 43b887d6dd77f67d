import pytest

from serialbook.config import Settings
from serialbook.filenames import generateFilename, sanitizeFilename
from serialbook.models import Chapter


@pytest.mark.parametrize("title, expected", [
    ("Chapter 1.00", "chapter_1.00"),
    ("Chapter 1.00 The Last Hero", "chapter_1.00_the_last_hero"),
    ("Chapter 1.00: The Last Hero!", "chapter_1.00_the_last_hero"),
    ("Chapter   1.00    The Last Hero", "chapter_1.00_the_last_hero"),
    ("This is a very long chapter title that exceeds the maximum length limit",
     "this_is_a_very_long_chapter_title_that_exceeds_the"),
    ("___Chapter 1.00___", "chapter_1.00"),
    ("", "chapter"),
    ("!@#$%^&*()", "chapter"),
    ("Chapter 1.00 – The Last Hero", "chapter_1.00_the_last_hero"),
    ("Interlude - Pawn", "interlude_-_pawn"),
])
def test_sanitize_filename(title, expected):
    assert sanitizeFilename(title) == expected


def test_sanitize_filename_length_limit():
    assert sanitizeFilename("abcdefghij", maxLength=4) == "abcd"


def test_generate_filename_empty():
    assert generateFilename([]) == "wandering_inn.epub"


def test_generate_filename_uses_first_chapter(chapters):
    assert generateFilename(chapters) == "wandering_inn_chapter_1.epub"


def test_generate_filename_special_characters():
    chapter = Chapter(title="Chapter 1.00: The Beginning!", url="u", index=0)
    assert generateFilename([chapter]) == "wandering_inn_chapter_1.00_the_beginning.epub"


def test_generate_filename_custom_prefix(chapters):
    settings = Settings(filenamePrefix="my_serial", defaultFilename="my_serial.epub")
    assert generateFilename(chapters, settings) == "my_serial_chapter_1.epub"
    assert generateFilename([], settings) == "my_serial.epub"
