from dataclasses import dataclass


@dataclass(frozen=True)
class Chapter:
    """A chapter discovered on the listing page."""
    title: str
    url: str
    index: int
