"""Text rendering of releases and commits."""

from datetime import datetime, timedelta, timezone

from bs4 import BeautifulSoup

from .models import Commit, Release

# All timestamps are displayed in this zone, whatever the feed reports
DISPLAY_TIMEZONE = timezone(timedelta(hours=8), "UTC+8")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """Format ``value`` as ``YYYY-MM-DD HH:MM:SS`` in DISPLAY_TIMEZONE."""
    return value.astimezone(DISPLAY_TIMEZONE).strftime(TIMESTAMP_FORMAT)


def html_to_text(content: str) -> str:
    """Remove HTML tags from content and normalize whitespace.

    Args:
        content: Raw content that may contain HTML

    Returns:
        Clean text content without HTML tags
    """
    if not content:
        return ""

    if "<" in content or ">" in content:
        soup = BeautifulSoup(content, "html.parser")
        for script in soup(["script", "style"]):
            script.decompose()
        content = soup.get_text(separator=" ")

    return " ".join(content.split())


def format_release(release: Release, plain_text: bool = False) -> str:
    """Render a release as a labelled text block ending with a blank line."""
    notes = html_to_text(release.content) if plain_text else release.content
    return (
        f"Release: {release.tag}\n"
        f"Published: {format_timestamp(release.date)}\n"
        f"Notes: {notes}\n"
        f"Link: {release.url}\n\n"
    )


def format_commit(commit: Commit) -> str:
    """Render a commit as a labelled text block ending with a blank line."""
    return (
        f"Commit: {commit.title}\n"
        f"Committed: {format_timestamp(commit.date)}\n"
        f"Link: {commit.url}\n\n"
    )


def format_entry(record: Release | Commit, plain_text: bool = False) -> str:
    """Render either kind of record."""
    if isinstance(record, Release):
        return format_release(record, plain_text=plain_text)
    return format_commit(record)
