"""
Query pipeline: scan and filter, sort, paginate.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, TypeVar

from docstore.engine.comparator import DocumentComparator
from docstore.interfaces.filter import Filter
from docstore.models.order_by import OrderBy

T = TypeVar("T")

Entry = tuple[str, Mapping[str, Any]]


class QueryResult(Generic[T]):
    """
    Forward-only iterator over a query snapshot.

    The snapshot is computed when the query runs, so later writes to the
    collection are not observed. Once exhausted it stays exhausted; run the
    query again for a fresh pass.
    """

    def __init__(self, entries: list[Entry], project: Callable[[Entry], T]) -> None:
        """
        Initialize result iterator.

        Args:
            entries: Paginated ``(doc_id, doc)`` pairs in result order.
            project: Turns each entry into the yielded item.
        """
        self._entries = entries
        self._project = project
        self._pos = 0

    def __iter__(self) -> "QueryResult[T]":
        return self

    def __next__(self) -> T:
        if self._pos >= len(self._entries):
            self._entries = []
            self._pos = 0
            raise StopIteration

        entry = self._entries[self._pos]
        self._pos += 1
        return self._project(entry)

    def __length_hint__(self) -> int:
        return len(self._entries) - self._pos


def validate_window(skip: int | None, limit: int | None) -> None:
    """
    Check pagination arguments.

    Raises:
        ValueError: If skip or limit is negative.
    """
    if skip is not None and skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")


def scan(entries: Iterable[Entry], filter: Filter) -> list[Entry]:
    """Keep entries matching ``filter``, in scan order."""
    return [(doc_id, doc) for doc_id, doc in entries if filter.match(doc, doc_id)]


def paginate(entries: list[Entry], skip: int | None, limit: int | None) -> list[Entry]:
    """
    Slice the result window.

    ``skip`` past the end yields an empty list. ``limit`` without ``skip``
    starts at zero.
    """
    start = skip or 0
    if limit is None:
        return entries[start:]
    return entries[start : start + limit]


def run_query(
    entries: Iterable[Entry],
    filter: Filter,
    skip: int | None = None,
    limit: int | None = None,
    order_by: OrderBy | None = None,
) -> list[Entry]:
    """
    Run the filter -> sort -> paginate pipeline over ``(doc_id, doc)`` pairs.

    Args:
        entries: Collection contents in insertion order.
        filter: Inclusion predicate.
        skip: Number of leading results to drop.
        limit: Maximum number of results.
        order_by: Optional ordering; the sort is stable.

    Returns:
        The paginated ``(doc_id, doc)`` pairs.
    """
    validate_window(skip, limit)

    # Invalid OrderBy fails even when nothing matches
    comparator = DocumentComparator(order_by) if order_by is not None else None

    matched = scan(entries, filter)

    if comparator is not None:
        matched = comparator.sort(matched)

    return paginate(matched, skip, limit)
