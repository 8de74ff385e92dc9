"""Feed URL resolution for ghfeed."""

from .logging_config import create_execution_logger
from .models import FeedKind

FEED_SUFFIXES = tuple(kind.suffix for kind in FeedKind)


def resolve_feed_url(base_url: str, kind: FeedKind) -> str:
    """Turn a repository URL into the feed URL for ``kind``.

    A URL that already ends with a feed suffix is returned untouched, even
    when the suffix belongs to the other kind.
    """
    if base_url.endswith(FEED_SUFFIXES):
        return base_url
    return base_url.removesuffix("/") + kind.suffix


def derive_commits_url(feed_url: str) -> str:
    """Derive the commits feed URL from an already resolved feed URL.

    Only the first ``releases.atom`` is replaced; a URL without it comes back
    unchanged.
    """
    return feed_url.replace(
        FeedKind.RELEASES.filename, FeedKind.COMMITS.filename, 1
    )


def resolve_feed_urls(
    base_url: str, kinds: list[FeedKind], execution_id: str | None = None
) -> dict[FeedKind, str]:
    """Resolve the feed URL of every requested kind.

    The primary URL is resolved once, for releases when they are requested and
    for commits otherwise. The commits URL is always derived from it.
    """
    logger = create_execution_logger("url_resolver", execution_id)

    primary_kind = FeedKind.RELEASES if FeedKind.RELEASES in kinds else FeedKind.COMMITS
    primary_url = resolve_feed_url(base_url, primary_kind)

    urls = {}
    if FeedKind.RELEASES in kinds:
        urls[FeedKind.RELEASES] = primary_url
    if FeedKind.COMMITS in kinds:
        urls[FeedKind.COMMITS] = derive_commits_url(primary_url)

    for kind, url in urls.items():
        if url.endswith(FEED_SUFFIXES) and not url.endswith(kind.suffix):
            logger.warning(
                f"URL points at another feed, fetching it anyway as {kind.value}",
                feed_url=url,
                feed_kind=kind.value,
            )
        else:
            logger.debug(f"Resolved {kind.value} feed URL", feed_url=url)

    return urls
