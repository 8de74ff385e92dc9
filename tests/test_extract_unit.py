"""Unit tests for entry extraction."""

import dataclasses
from datetime import UTC, datetime

import pytest

from ghfeed.extract import extract_entries
from ghfeed.models import FeedItem, FeedKind, Release


def item(n: int, dated: bool = True) -> FeedItem:
    return FeedItem(
        title=f"v1.{n}.0",
        link=f"https://github.com/org/repo/releases/tag/v1.{n}.0",
        content=f"notes {n}",
        published=datetime(2024, 1, n, tzinfo=UTC) if dated else None,
    )


class TestEntryExtractorUnit:
    """Unit tests for extract_entries."""

    def test_undated_middle_item_dropped(self):
        """The second of three items has no date and is left out."""
        items = [item(3), item(2, dated=False), item(1)]

        records = extract_entries(items, FeedKind.RELEASES)

        assert [r.tag for r in records] == ["v1.3.0", "v1.1.0"]

    def test_commit_records_have_no_content(self):
        records = extract_entries([item(1)], FeedKind.COMMITS)

        assert records[0].title == "v1.1.0"
        assert not hasattr(records[0], "content")

    def test_empty_input(self):
        assert extract_entries([], FeedKind.RELEASES) == []

    def test_records_are_immutable(self):
        release = extract_entries([item(1)], FeedKind.RELEASES)[0]

        assert isinstance(release, Release)
        with pytest.raises(dataclasses.FrozenInstanceError):
            release.tag = "changed"
