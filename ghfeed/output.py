"""Console and file output for formatted entries."""

import os
import sys
from collections.abc import Iterable
from typing import TextIO

from .errors import FileError, WriteError
from .logging_config import create_execution_logger
from .models import FeedKind


def output_path(kind: FeedKind, output_dir: str = "") -> str:
    """Path of the file written for ``kind``; an empty dir means the cwd."""
    return os.path.join(output_dir, kind.filename)


def write_blocks(
    kind: FeedKind,
    blocks: Iterable[str],
    output_dir: str = "",
    stream: TextIO | None = None,
    execution_id: str | None = None,
) -> int:
    """Write each block to ``stream`` and to the kind's output file.

    The file is truncated once before the first block. Writing stops at the
    first failure; blocks already written stay in the file.

    Args:
        kind: Feed kind, selects the output filename
        blocks: Formatted entries, written in order
        output_dir: Destination directory
        stream: Console stream, defaults to stdout
        execution_id: Execution ID for logging context

    Returns:
        Number of blocks written

    Raises:
        FileError: If the file cannot be created or truncated
        WriteError: If writing a block to the file fails
    """
    logger = create_execution_logger("output_sink", execution_id)
    stream = stream or sys.stdout
    path = output_path(kind, output_dir)

    try:
        handle = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot create or truncate {path}: {e}", path) from e

    logger.debug("Output file truncated", output_path=path, feed_kind=kind.value)

    written = 0
    try:
        with handle:
            for block in blocks:
                stream.write(block)
                handle.write(block)
                written += 1
    except OSError as e:
        raise WriteError(
            f"Failed to write to {path} after {written} entries: {e}", path
        ) from e

    logger.info(
        f"Wrote {written} {kind.value} entries",
        output_path=path,
        feed_kind=kind.value,
    )
    return written
