"""Fetch, select and write pipeline for ghfeed."""

import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TextIO

from .config import FetchConfig, OutputConfig
from .errors import GhFeedError
from .extract import extract_entries
from .formatting import format_entry
from .logging_config import create_execution_logger
from .models import FeedKind
from .output import write_blocks
from .rss import FeedFetcher
from .selection import select_entries
from .urls import resolve_feed_urls


@dataclass
class RunOptions:
    """Already parsed user input for a single run."""

    repo_url: str
    kinds: list[FeedKind] = field(default_factory=lambda: [FeedKind.RELEASES])
    count: int = 1
    fetch: FetchConfig = field(default_factory=FetchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


@dataclass
class KindResult:
    """Outcome of processing one feed kind."""

    kind: FeedKind
    feed_url: str
    entries_found: int = 0
    entries_skipped: int = 0
    entries_written: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class RunReport:
    """Outcome of a whole run."""

    execution_id: str
    results: list[KindResult]

    @property
    def success(self) -> bool:
        return all(result.success for result in self.results)

    @property
    def errors(self) -> list[str]:
        return [result.error for result in self.results if result.error]

    @property
    def metrics(self) -> dict[str, Any]:
        return {
            "feeds_processed": sum(1 for r in self.results if r.success),
            "entries_found": sum(r.entries_found for r in self.results),
            "entries_skipped": sum(r.entries_skipped for r in self.results),
            "entries_written": sum(r.entries_written for r in self.results),
            "errors": self.errors,
        }


def run_kind(
    kind: FeedKind,
    feed_url: str,
    count: int,
    fetcher: FeedFetcher,
    output: OutputConfig,
    stream: TextIO,
    execution_id: str | None = None,
) -> KindResult:
    """Run fetch, extract, select and write for a single feed kind.

    Raises:
        FetchError: If the feed cannot be downloaded or parsed
        FileError: If the output file cannot be created
        WriteError: If writing an entry fails
    """
    result = KindResult(kind=kind, feed_url=feed_url)

    items = fetcher.fetch(feed_url)
    records = extract_entries(items, kind, execution_id)
    result.entries_found = len(items)
    result.entries_skipped = len(items) - len(records)

    selected = select_entries(records, count)

    stream.write(kind.header + "\n")
    blocks = (format_entry(record, plain_text=output.plain_text) for record in selected)
    result.entries_written = write_blocks(
        kind,
        blocks,
        output_dir=output.output_dir,
        stream=stream,
        execution_id=execution_id,
    )
    return result


def run(
    options: RunOptions,
    stream: TextIO | None = None,
    fetcher: FeedFetcher | None = None,
    execution_id: str | None = None,
) -> RunReport:
    """Process every requested feed kind, releases first.

    A failure in one kind is recorded in its result and does not stop the
    other kind.
    """
    if not execution_id:
        execution_id = f"run_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
    main_logger = create_execution_logger("main", execution_id)
    stream = stream or sys.stdout

    kinds = [kind for kind in FeedKind if kind in options.kinds] or [FeedKind.RELEASES]
    main_logger.log_execution_start(
        repo_url=options.repo_url,
        feed_kinds=[kind.value for kind in kinds],
        count=options.count,
    )

    urls = resolve_feed_urls(options.repo_url, kinds, execution_id)
    fetcher = fetcher or FeedFetcher(options.fetch, execution_id=execution_id)

    results = []
    for kind in kinds:
        feed_url = urls[kind]
        try:
            result = run_kind(
                kind,
                feed_url,
                options.count,
                fetcher,
                options.output,
                stream,
                execution_id,
            )
            main_logger.log_feed_processing(feed_url, kind.value, result.entries_found)
        except GhFeedError as e:
            error_msg = f"Failed to process {kind.value} feed {feed_url}: {e}"
            main_logger.error(error_msg, feed_url=feed_url, feed_kind=kind.value)
            result = KindResult(kind=kind, feed_url=feed_url, error=error_msg)
        results.append(result)

    report = RunReport(execution_id=execution_id, results=results)
    main_logger.log_metrics(report.metrics)
    main_logger.log_execution_end(success=report.success)
    return report
