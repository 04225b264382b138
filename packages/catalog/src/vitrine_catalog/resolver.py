"""Resolve hierarchical identifiers to users, collections and items.

Each lookup is a linear scan that returns the first match. Absence is a
normal outcome and is reported as a :class:`NotFound` value naming the
segment that failed, never as an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence, TypeVar, Union

from vitrine_common import HierarchyNotLoadedError
from vitrine_catalog.models import Collection, Item, Manifest, User

T = TypeVar("T", User, Collection, Item)


class PathSegment(str, Enum):
    """Level of the hierarchy a path segment addresses."""

    USER = "user"
    COLLECTION = "collection"
    ITEM = "item"


@dataclass(frozen=True)
class NotFound:
    """A path that did not resolve.

    Attributes:
        segment: Level that failed to match
        identifier: The identifier that was not found at that level
        path: Full requested path, e.g. ``("max", "dolls", "zzz")``
    """

    segment: PathSegment
    identifier: str
    path: tuple[str, ...]

    def describe(self) -> str:
        return f"{self.segment.value} '{self.identifier}' not found in /{'/'.join(self.path)}"


class CollectionMatch(NamedTuple):
    user: User
    collection: Collection


class ItemMatch(NamedTuple):
    user: User
    collection: Collection
    item: Item


def _first(entries: Sequence[T], identifier: str) -> Optional[T]:
    for entry in entries:
        if entry.id == identifier:
            return entry
    return None


def _require(hierarchy: Optional[Manifest]) -> Manifest:
    if hierarchy is None:
        raise HierarchyNotLoadedError("No manifest hierarchy has been loaded")
    return hierarchy


def find_user(hierarchy: Optional[Manifest], user_id: str) -> Union[User, NotFound]:
    users = _require(hierarchy).users
    user = _first(users, user_id)
    if user is None:
        return NotFound(PathSegment.USER, user_id, (user_id,))
    return user


def find_collection(
    hierarchy: Optional[Manifest], user_id: str, collection_id: str
) -> Union[CollectionMatch, NotFound]:
    path = (user_id, collection_id)
    user = find_user(hierarchy, user_id)
    if isinstance(user, NotFound):
        return NotFound(PathSegment.USER, user_id, path)

    collection = _first(user.collections, collection_id)
    if collection is None:
        return NotFound(PathSegment.COLLECTION, collection_id, path)
    return CollectionMatch(user, collection)


def find_item(
    hierarchy: Optional[Manifest], user_id: str, collection_id: str, item_id: str
) -> Union[ItemMatch, NotFound]:
    path = (user_id, collection_id, item_id)
    match = find_collection(hierarchy, user_id, collection_id)
    if isinstance(match, NotFound):
        return NotFound(match.segment, match.identifier, path)

    item = _first(match.collection.items, item_id)
    if item is None:
        return NotFound(PathSegment.ITEM, item_id, path)
    return ItemMatch(match.user, match.collection, item)


def resolve_path(
    hierarchy: Optional[Manifest], segments: Sequence[str]
) -> Union[User, CollectionMatch, ItemMatch, NotFound]:
    """Resolve a 1-3 segment navigation path.

    Raises:
        ValueError: If ``segments`` does not have 1, 2 or 3 entries
    """
    if len(segments) == 1:
        return find_user(hierarchy, segments[0])
    if len(segments) == 2:
        return find_collection(hierarchy, segments[0], segments[1])
    if len(segments) == 3:
        return find_item(hierarchy, segments[0], segments[1], segments[2])
    raise ValueError(f"Path must have 1 to 3 segments, got {len(segments)}")


def split_path(path: str) -> tuple[str, ...]:
    """Split ``"user/collection/item"`` into segments.

    Leading and trailing slashes are ignored; an empty path gives ``()``.

    Raises:
        ValueError: If an inner segment is empty, as in ``"max//dolls"``
    """
    stripped = path.strip("/")
    if not stripped:
        return ()
    segments = tuple(stripped.split("/"))
    if "" in segments:
        raise ValueError(f"Empty segment in path {path!r}")
    return segments
