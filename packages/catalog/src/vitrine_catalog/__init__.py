"""Vitrine catalog - manifest resolution and hierarchical navigation.

Quick Start
-----------
>>> from vitrine_catalog import ManifestLoader
>>> loader = ManifestLoader()
>>> view = await loader.load_collection_view("max", "dolls", highlighted="sally-ride", limit=2)
>>> [item.name for item in view.items]

Pure functions
--------------
>>> from vitrine_catalog import find_item, select_window, adjacent
>>> match = find_item(manifest, "max", "dolls", "neil-armstrong")
"""

from .fetcher import ManifestFetcher
from .loader import (
    CollectionView,
    Hierarchy,
    ItemView,
    ManifestLoader,
    load_first_party_manifest,
    manifest_url_from_query,
)
from .merge import merge_manifests, shadowed_user_ids
from .models import Collection, Item, Manifest, User
from .navigation import Adjacency, adjacent, first_item, has_more, select_window
from .resolver import (
    CollectionMatch,
    ItemMatch,
    NotFound,
    PathSegment,
    find_collection,
    find_item,
    find_user,
    resolve_path,
    split_path,
)
from .validation import ValidationResult, parse_manifest, validate_manifest

__all__ = [
    # Models
    "User",
    "Collection",
    "Item",
    "Manifest",
    # Validation
    "ValidationResult",
    "validate_manifest",
    "parse_manifest",
    # Merge
    "merge_manifests",
    "shadowed_user_ids",
    # Resolution
    "NotFound",
    "PathSegment",
    "CollectionMatch",
    "ItemMatch",
    "find_user",
    "find_collection",
    "find_item",
    "resolve_path",
    "split_path",
    # Navigation
    "Adjacency",
    "adjacent",
    "first_item",
    "select_window",
    "has_more",
    # Loading
    "ManifestFetcher",
    "ManifestLoader",
    "Hierarchy",
    "CollectionView",
    "ItemView",
    "load_first_party_manifest",
    "manifest_url_from_query",
]

__version__ = "0.1.0"
