"""Selection of the most recent entries."""

from typing import TypeVar

T = TypeVar("T")


def select_entries(records: list[T], count: int) -> list[T]:
    """Return the first ``count`` records; a non-positive count selects nothing."""
    if count <= 0:
        return []
    return records[:count]
