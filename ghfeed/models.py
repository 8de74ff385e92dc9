"""Data models for ghfeed."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass
class FeedItem:
    """Represents a single entry as read from a syndication feed."""

    title: str
    link: str
    content: str
    published: datetime | None = None


@dataclass(frozen=True)
class Release:
    """A published release of a repository."""

    tag: str
    content: str  # Release notes, may contain HTML
    url: str
    date: datetime


@dataclass(frozen=True)
class Commit:
    """A single commit of a repository."""

    title: str
    url: str
    date: datetime


class FeedKind(Enum):
    """The two feed varieties GitHub publishes for a repository."""

    RELEASES = "releases"
    COMMITS = "commits"

    @property
    def filename(self) -> str:
        """Name of the feed document, also used as the output filename."""
        return f"{self.value}.atom"

    @property
    def suffix(self) -> str:
        return f"/{self.filename}"

    @property
    def header(self) -> str:
        """Console section header printed before the kind's entries."""
        if self is FeedKind.RELEASES:
            return "=== release info ==="
        return "=== commit info ==="
