"""Exceptions raised at the network and assembly boundaries."""


class SerialBookError(Exception):
    """Base class for errors surfaced to the command line."""


class FetchError(SerialBookError):
    """A page could not be retrieved or parsed."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Failed to fetch {url}: {cause}")
        self.url = url
        self.cause = cause


class EpubCreationError(SerialBookError):
    """The EPUB could not be assembled."""


class ExtractionError(SerialBookError):
    """A fetched page could not be turned into chapter content."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Failed to extract {url}: {cause}")
        self.url = url
        self.cause = cause


class ConfigurationError(SerialBookError):
    """A setting could not be read from the environment."""
