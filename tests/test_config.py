import dataclasses

import pytest

from serialbook.config import DEFAULT_RULES, PALETTE, Settings
from serialbook.errors import ConfigurationError


@pytest.fixture
def noEnvFile(tmp_path):
    return str(tmp_path / "missing.env")


def test_rules_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_RULES.shortTextThreshold = 10


def test_every_color_class_has_a_palette_entry():
    for _, color in DEFAULT_RULES.colorClasses:
        assert color in PALETTE


def test_defaults(monkeypatch, noEnvFile):
    for name in ("TOC_URL", "LATEST_CHAPTERS", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(f"SERIALBOOK_{name}", raising=False)
    settings = Settings.fromEnvironment(noEnvFile)
    assert settings.tocUrl == "https://wanderinginn.com/table-of-contents/"
    assert settings.latestChaptersCount == 20
    assert settings.maxFilenameLength == 50


def test_environment_overrides(monkeypatch, noEnvFile):
    monkeypatch.setenv("SERIALBOOK_TOC_URL", "https://example.com/toc/")
    monkeypatch.setenv("SERIALBOOK_SITE_DOMAIN", "example.com")
    monkeypatch.setenv("SERIALBOOK_LATEST_CHAPTERS", "5")
    monkeypatch.setenv("SERIALBOOK_REQUEST_TIMEOUT", "2.5")

    settings = Settings.fromEnvironment(noEnvFile)

    assert settings.tocUrl == "https://example.com/toc/"
    assert settings.siteDomain == "example.com"
    assert settings.latestChaptersCount == 5
    assert settings.requestTimeout == 2.5


def test_empty_variable_keeps_default(monkeypatch, noEnvFile):
    monkeypatch.setenv("SERIALBOOK_EPUB_TITLE", "")
    assert Settings.fromEnvironment(noEnvFile).epubTitle == "The Wandering Inn"


def test_dotenv_file(monkeypatch, tmp_path):
    # set then delete so monkeypatch removes what load_dotenv adds
    monkeypatch.setenv("SERIALBOOK_EPUB_AUTHOR", "placeholder")
    monkeypatch.delenv("SERIALBOOK_EPUB_AUTHOR")
    envFile = tmp_path / ".env"
    envFile.write_text("SERIALBOOK_EPUB_AUTHOR=Someone Else\n", encoding="utf-8")

    assert Settings.fromEnvironment(str(envFile)).epubAuthor == "Someone Else"


@pytest.mark.parametrize("name, value", [
    ("MAX_FILENAME_LENGTH", "abc"),
    ("REQUEST_TIMEOUT", "soon"),
])
def test_malformed_number(monkeypatch, noEnvFile, name, value):
    monkeypatch.setenv(f"SERIALBOOK_{name}", value)
    with pytest.raises(ConfigurationError, match=f"SERIALBOOK_{name}"):
        Settings.fromEnvironment(noEnvFile)
