"""Feed fetching module for ghfeed."""

import warnings
from datetime import UTC, datetime

import feedparser
import requests
from dateutil import parser as date_parser
from urllib3.exceptions import InsecureRequestWarning

from .config import FetchConfig
from .errors import FetchError
from .logging_config import create_execution_logger
from .models import FeedItem


class FeedFetcher:
    """Downloads a syndication feed and turns it into FeedItems."""

    def __init__(self, config: FetchConfig | None = None, execution_id: str | None = None):
        """Initialize FeedFetcher with configuration.

        Args:
            config: Fetch configuration, defaults to a verifying client
            execution_id: Execution ID for logging context
        """
        self.config = config or FetchConfig()
        self.logger = create_execution_logger("feed_fetcher", execution_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

        self.logger.info(
            "FeedFetcher initialized",
            timeout=self.config.timeout,
            verify_tls=self.config.verify_tls,
        )

    def fetch(self, feed_url: str) -> list[FeedItem]:
        """Download and parse a single feed.

        Args:
            feed_url: URL of the Atom/RSS feed

        Returns:
            FeedItems in the order the feed lists them

        Raises:
            FetchError: If the download fails or the body is not a feed
        """
        self.logger.info("Downloading feed content", feed_url=feed_url)
        content = self._download(feed_url)

        self.logger.info("Parsing feed content", feed_url=feed_url)
        feed = feedparser.parse(content)

        if not feed.entries and not feed.get("version"):
            error_msg = f"Response from {feed_url} is not a valid feed"
            if feed.bozo:
                error_msg += f": {feed.get('bozo_exception')}"
            raise FetchError(error_msg, feed_url)

        if feed.bozo:
            self.logger.warning(
                f"Feed parsing warning for {feed_url}: {feed.get('bozo_exception')}",
                feed_url=feed_url,
                bozo_exception=str(feed.get("bozo_exception")),
            )

        items = [self.normalize_item(entry) for entry in feed.entries]

        self.logger.info(
            "Successfully parsed feed",
            feed_url=feed_url,
            items_count=len(items),
        )
        return items

    def _download(self, feed_url: str) -> bytes:
        if not self.config.verify_tls:
            # Certificate checks are off: any man in the middle can feed us data
            self.logger.warning(
                "TLS certificate verification is disabled for this request",
                feed_url=feed_url,
            )

        try:
            with warnings.catch_warnings():
                if not self.config.verify_tls:
                    warnings.simplefilter("ignore", InsecureRequestWarning)
                response = self.session.get(
                    feed_url,
                    timeout=self.config.timeout,
                    verify=self.config.verify_tls,
                )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Failed to download feed {feed_url}: {e}", feed_url) from e

        self.logger.info(
            "Feed downloaded successfully",
            feed_url=feed_url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return response.content

    def normalize_item(self, raw_item) -> FeedItem:
        """Normalize a raw feedparser entry into a FeedItem.

        Args:
            raw_item: Raw feed entry from feedparser

        Returns:
            FeedItem whose ``published`` is None when the entry has no usable date
        """
        title = getattr(raw_item, "title", "")
        link = getattr(raw_item, "link", "")

        published = self.entry_date(raw_item)

        content = ""
        raw_content = getattr(raw_item, "content", None)
        if raw_content:
            if isinstance(raw_content, list):
                content = raw_content[0].get("value", "")
            else:
                content = str(raw_content)
        elif getattr(raw_item, "summary", None):
            content = raw_item.summary

        return FeedItem(title=title, link=link, content=content, published=published)

    def entry_date(self, raw_item) -> datetime | None:
        """Publication date of an entry, falling back to its update date.

        feedparser's normalized UTC tuples are preferred; the raw string is
        only parsed when feedparser could not.
        """
        # Atom entries from GitHub only carry <updated>
        for field in ("published", "updated"):
            parsed_time = getattr(raw_item, f"{field}_parsed", None)
            if parsed_time:
                return datetime(*parsed_time[:6], tzinfo=UTC)
            value = getattr(raw_item, field, None)
            if value:
                return self.parse_date(value)
        return None

    @staticmethod
    def parse_date(value: str | None) -> datetime | None:
        """Parse a feed timestamp, returning None when it is missing or invalid.

        Timestamps without an offset are taken as UTC.
        """
        if not value:
            return None
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError, TypeError):
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed
