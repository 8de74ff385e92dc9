"""Unit tests for release and commit formatting."""

from datetime import UTC, datetime, timedelta, timezone

from ghfeed.formatting import (
    DISPLAY_TIMEZONE,
    format_commit,
    format_entry,
    format_release,
    format_timestamp,
    html_to_text,
)
from ghfeed.models import Commit, Release


class TestFormatterUnit:
    """Unit tests for the formatting functions."""

    def test_utc_evening_rolls_over_to_next_day(self):
        """20:00 UTC is 04:00 the next day at UTC+8."""
        assert format_timestamp(datetime(2024, 1, 1, 20, 0, tzinfo=UTC)) == "2024-01-02 04:00:00"

    def test_other_offsets_are_converted(self):
        """The feed's own offset never shows through."""
        pacific = timezone(timedelta(hours=-8))
        assert format_timestamp(datetime(2024, 6, 30, 16, 30, 15, tzinfo=pacific)) == "2024-07-01 08:30:15"

    def test_display_timezone_is_fixed_offset(self):
        assert DISPLAY_TIMEZONE.utcoffset(None) == timedelta(hours=8)

    def test_release_block(self):
        release = Release(
            tag="v1.0.0",
            content="<p>First release</p>",
            url="https://github.com/org/repo/releases/tag/v1.0.0",
            date=datetime(2024, 1, 1, 20, 0, tzinfo=UTC),
        )

        assert format_release(release) == (
            "Release: v1.0.0\n"
            "Published: 2024-01-02 04:00:00\n"
            "Notes: <p>First release</p>\n"
            "Link: https://github.com/org/repo/releases/tag/v1.0.0\n"
            "\n"
        )

    def test_release_block_plain_text(self):
        release = Release(
            tag="v1.0.0",
            content="<h2>Changes</h2>\n<ul><li>Fix  crash</li></ul>",
            url="https://example.com/v1.0.0",
            date=datetime(2024, 1, 1, tzinfo=UTC),
        )

        block = format_release(release, plain_text=True)

        assert "Notes: Changes Fix crash\n" in block
        assert "<" not in block

    def test_commit_block(self):
        commit = Commit(
            title="Fix typo in README",
            url="https://github.com/org/repo/commit/abc123",
            date=datetime(2023, 12, 31, 16, 0, 1, tzinfo=UTC),
        )

        assert format_commit(commit) == (
            "Commit: Fix typo in README\n"
            "Committed: 2024-01-01 00:00:01\n"
            "Link: https://github.com/org/repo/commit/abc123\n"
            "\n"
        )

    def test_format_entry_dispatches_on_type(self):
        date = datetime(2024, 1, 1, tzinfo=UTC)
        release = Release(tag="v1", content="", url="u", date=date)
        commit = Commit(title="c", url="u", date=date)

        assert format_entry(release) == format_release(release)
        assert format_entry(commit) == format_commit(commit)

    def test_html_to_text(self):
        assert html_to_text("") == ""
        assert html_to_text("plain\n\ttext") == "plain text"
        assert html_to_text("<script>x()</script><b>bold</b> text") == "bold text"
