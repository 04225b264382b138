"""Manifest loading and the navigation entry points.

:class:`ManifestLoader` owns the first-party hierarchy and the current
merged hierarchy. A third-party manifest URL, when supplied, is fetched,
validated and merged; the resulting :class:`Hierarchy` is fully built
before it replaces the current one, so readers never see a partial merge.
When two loads race, the one started last is the one published; an older
load that finishes afterwards still returns its hierarchy to its caller but
does not replace the newer one.

Usage
-----
>>> loader = ManifestLoader()
>>> users = await loader.load_users()
>>> item, collection, user = await loader.load_item("max", "dolls", "neil-armstrong")
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from vitrine_common import (
    ExternalManifestError,
    ManifestValidationError,
    NotFoundError,
    get_logger,
    get_settings,
)
from vitrine_catalog.fetcher import ManifestFetcher
from vitrine_catalog.merge import merge_manifests
from vitrine_catalog.models import Collection, Item, Manifest, User
from vitrine_catalog.navigation import Adjacency, adjacent, has_more, select_window
from vitrine_catalog.resolver import NotFound, find_collection, find_item, find_user
from vitrine_catalog.validation import parse_manifest, validate_manifest

logger = get_logger(__name__)

BUNDLED_MANIFEST = "data/manifest.json"


def load_first_party_manifest(path: Optional[Union[str, Path]] = None) -> Manifest:
    """Read and validate the first-party manifest.

    Args:
        path: File to read instead of the bundled manifest. Defaults to
            ``Settings.first_party_manifest`` when that is set

    Raises:
        ManifestValidationError: If the document has the wrong shape
        OSError: If the file cannot be read
    """
    path = path or get_settings().first_party_manifest
    if path:
        text = Path(path).read_text(encoding="utf-8")
        source = str(path)
    else:
        text = resources.files("vitrine_catalog").joinpath(BUNDLED_MANIFEST).read_text(
            encoding="utf-8"
        )
        source = "bundled"

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestValidationError(f"first-party manifest is not valid JSON: {e}") from e

    manifest = parse_manifest(raw)
    logger.info("first_party_manifest_loaded", source=source, users=len(manifest))
    return manifest


def manifest_url_from_query(query: Mapping[str, str], param: Optional[str] = None) -> Optional[str]:
    """Third-party manifest URL carried by navigation query parameters.

    Args:
        query: Query parameters of the current navigation request
        param: Parameter name. Defaults to ``Settings.manifest_query_param``

    Returns:
        The stripped URL, or None when the parameter is absent or blank
    """
    value = query.get(param or get_settings().manifest_query_param)
    if value is None:
        return None
    return value.strip() or None


@dataclass(frozen=True)
class Hierarchy:
    """A published, read-only merged hierarchy.

    Attributes:
        manifest: Merged users, first-party first
        overlay_url: Third-party manifest merged in, or None for first-party only
    """

    manifest: Manifest
    overlay_url: Optional[str] = None

    @property
    def users(self) -> tuple[User, ...]:
        return self.manifest.users


@dataclass(frozen=True)
class CollectionView:
    """A collection page ready for display."""

    user: User
    collection: Collection
    items: tuple[Item, ...]
    has_more: bool
    highlighted: Optional[str] = None


@dataclass(frozen=True)
class ItemView:
    """An item with its neighbours in the collection."""

    user: User
    collection: Collection
    item: Item
    previous: Optional[Item]
    next: Optional[Item]


class ManifestLoader:
    """Loads hierarchies and answers navigation requests.

    Parameters
    ----------
    first_party : Manifest, optional
        Trusted base manifest. Default: :func:`load_first_party_manifest`
    fetcher : ManifestFetcher, optional
        Client for third-party manifests. Default: a new ``ManifestFetcher``
    """

    def __init__(
        self,
        first_party: Optional[Manifest] = None,
        fetcher: Optional[ManifestFetcher] = None,
    ) -> None:
        base = first_party if first_party is not None else load_first_party_manifest()
        self._first_party = Hierarchy(base)
        self._current = self._first_party
        self._generation = 0
        self.fetcher = fetcher or ManifestFetcher()

    @property
    def first_party(self) -> Hierarchy:
        return self._first_party

    @property
    def current(self) -> Hierarchy:
        """Most recently published hierarchy."""
        return self._current

    async def close(self) -> None:
        await self.fetcher.close()

    async def __aenter__(self) -> "ManifestLoader":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Hierarchy selection
    # -------------------------------------------------------------------------

    async def hierarchy(self, manifest_url: Optional[str] = None) -> Hierarchy:
        """Hierarchy to navigate for the given manifest URL.

        Without a URL this is the first-party hierarchy. A URL matching the
        current overlay reuses it; any other URL is fetched and merged.

        Raises:
            ExternalManifestError: If fetching or validating the URL fails.
                The published hierarchy is left as it was.
        """
        if not manifest_url:
            return self._first_party

        current = self._current
        if current.overlay_url == manifest_url:
            return current

        return await self.refresh(manifest_url)

    async def refresh(self, manifest_url: str) -> Hierarchy:
        """Fetch ``manifest_url``, merge it, and publish the result.

        The result is published only if no later refresh has started in the
        meantime.
        """
        self._generation += 1
        generation = self._generation
        logger.info("external_manifest_fetching", url=manifest_url)
        try:
            raw = await self.fetcher.fetch(manifest_url)
        except ExternalManifestError as e:
            logger.warning("external_manifest_failed", url=manifest_url, error=str(e.cause))
            raise

        result = validate_manifest(raw)
        if not result.ok:
            logger.warning(
                "external_manifest_failed",
                url=manifest_url,
                error=str(result.error),
                path=result.error.path,
            )
            raise ExternalManifestError(manifest_url, result.error) from result.error

        overlay = result.unwrap()
        hierarchy = Hierarchy(merge_manifests(self._first_party.manifest, overlay), manifest_url)
        logger.info("external_manifest_loaded", url=manifest_url, users=len(overlay))

        if generation != self._generation:
            logger.debug("hierarchy_superseded", url=manifest_url)
            return hierarchy

        self._current = hierarchy
        logger.debug("hierarchy_published", url=manifest_url, users=len(hierarchy.manifest))
        return hierarchy

    # -------------------------------------------------------------------------
    # Navigation entry points
    # -------------------------------------------------------------------------

    async def load_users(self, manifest_url: Optional[str] = None) -> tuple[User, ...]:
        hierarchy = await self.hierarchy(manifest_url)
        return hierarchy.users

    async def load_user(self, user_id: str, manifest_url: Optional[str] = None) -> User:
        """Raises NotFoundError if the user does not exist."""
        hierarchy = await self.hierarchy(manifest_url)
        user = find_user(hierarchy.manifest, user_id)
        if isinstance(user, NotFound):
            raise NotFoundError(user)
        return user

    async def load_collection(
        self, user_id: str, collection_id: str, manifest_url: Optional[str] = None
    ) -> tuple[Collection, User]:
        """Raises NotFoundError naming the segment that failed."""
        hierarchy = await self.hierarchy(manifest_url)
        match = find_collection(hierarchy.manifest, user_id, collection_id)
        if isinstance(match, NotFound):
            raise NotFoundError(match)
        return match.collection, match.user

    async def load_item(
        self,
        user_id: str,
        collection_id: str,
        item_id: str,
        manifest_url: Optional[str] = None,
    ) -> tuple[Item, Collection, User]:
        """Raises NotFoundError naming the segment that failed."""
        hierarchy = await self.hierarchy(manifest_url)
        match = find_item(hierarchy.manifest, user_id, collection_id, item_id)
        if isinstance(match, NotFound):
            raise NotFoundError(match)
        return match.item, match.collection, match.user

    async def load_collection_view(
        self,
        user_id: str,
        collection_id: str,
        highlighted: Optional[str] = None,
        limit: Optional[int] = None,
        manifest_url: Optional[str] = None,
    ) -> CollectionView:
        """Collection with the page of items containing ``highlighted``."""
        collection, user = await self.load_collection(user_id, collection_id, manifest_url)
        return CollectionView(
            user=user,
            collection=collection,
            items=select_window(collection.items, highlighted, limit),
            has_more=has_more(collection.items, limit),
            highlighted=highlighted,
        )

    async def load_item_view(
        self,
        user_id: str,
        collection_id: str,
        item_id: str,
        manifest_url: Optional[str] = None,
    ) -> ItemView:
        item, collection, user = await self.load_item(
            user_id, collection_id, item_id, manifest_url
        )
        neighbours: Adjacency = adjacent(collection, item.id)
        return ItemView(
            user=user,
            collection=collection,
            item=item,
            previous=neighbours.previous,
            next=neighbours.next,
        )
