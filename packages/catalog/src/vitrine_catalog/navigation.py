"""Adjacency and paging over a collection's ordered items."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from vitrine_catalog.models import Collection, Item


class Adjacency(NamedTuple):
    previous: Optional[Item]
    next: Optional[Item]


def _index_of(items: Sequence[Item], item_id: str) -> Optional[int]:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return None


def first_item(collection: Collection) -> Optional[Item]:
    return collection.items[0] if collection.items else None


def adjacent(collection: Collection, item_id: str) -> Adjacency:
    """Items immediately before and after ``item_id``.

    An unknown id yields ``Adjacency(None, None)``.
    """
    items = collection.items
    index = _index_of(items, item_id)
    if index is None:
        return Adjacency(None, None)

    previous = items[index - 1] if index > 0 else None
    following = items[index + 1] if index < len(items) - 1 else None
    return Adjacency(previous, following)


def _check_limit(limit: int) -> None:
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")


def select_window(
    items: Sequence[Item],
    highlighted: Optional[str] = None,
    limit: Optional[int] = None,
) -> tuple[Item, ...]:
    """Choose the page of ``items`` to display.

    Pages are fixed-size and aligned to multiples of ``limit``. With a
    highlighted id, the page containing it is returned; otherwise (or when
    the id is absent) the first page.

    Example: with ``limit=5``, index 4 is on page ``[0, 5)`` and index 5 on
    page ``[5, 10)``.

    Raises:
        ValueError: If ``limit`` is zero or negative
    """
    if limit is None:
        return tuple(items)
    _check_limit(limit)

    index = _index_of(items, highlighted) if highlighted is not None else None
    if index is None:
        return tuple(items[:limit])

    start = (index // limit) * limit
    return tuple(items[start : start + limit])


def has_more(items: Sequence[Item], limit: Optional[int]) -> bool:
    """Whether a "see more" affordance is warranted for ``items``."""
    if limit is None:
        return False
    _check_limit(limit)
    return len(items) > limit
