"""Conversion of feed items into typed release and commit records."""

from .logging_config import create_execution_logger
from .models import Commit, FeedItem, FeedKind, Release


def extract_releases(items: list[FeedItem]) -> list[Release]:
    """Build Release records from dated feed items, keeping feed order."""
    return [
        Release(tag=item.title, content=item.content, url=item.link, date=item.published)
        for item in items
        if item.published is not None
    ]


def extract_commits(items: list[FeedItem]) -> list[Commit]:
    """Build Commit records from dated feed items, keeping feed order."""
    return [
        Commit(title=item.title, url=item.link, date=item.published)
        for item in items
        if item.published is not None
    ]


def extract_entries(
    items: list[FeedItem], kind: FeedKind, execution_id: str | None = None
) -> list[Release] | list[Commit]:
    """Extract the records of ``kind`` from ``items``.

    Items without a publication date are dropped without raising.
    """
    if kind is FeedKind.RELEASES:
        records = extract_releases(items)
    else:
        records = extract_commits(items)

    skipped = len(items) - len(records)
    if skipped:
        logger = create_execution_logger("entry_extractor", execution_id)
        logger.debug(
            f"Skipped {skipped} undated {kind.value} entries",
            feed_kind=kind.value,
            skipped_count=skipped,
        )
    return records
