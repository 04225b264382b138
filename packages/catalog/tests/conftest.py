"""Pytest fixtures for catalog tests."""

from __future__ import annotations

import pytest

from vitrine_catalog import Manifest, parse_manifest


def _item_doc(item_id: str, **fields) -> dict:
    """Minimal valid item document."""
    item = {
        "id": item_id,
        "name": item_id.title(),
        "description": f"Description of {item_id}",
        "model": f"/models/{item_id}.glb",
    }
    item.update(fields)
    return item


def _collection_doc(collection_id: str, item_ids=(), **fields) -> dict:
    collection = {
        "id": collection_id,
        "name": collection_id.title(),
        "items": [_item_doc(i) for i in item_ids],
    }
    collection.update(fields)
    return collection


def _user_doc(user_id: str, collections=(), **fields) -> dict:
    user = {"id": user_id, "name": user_id.title(), "collections": list(collections)}
    user.update(fields)
    return user


@pytest.fixture
def item_doc():
    """Factory for raw item documents."""
    return _item_doc


@pytest.fixture
def collection_doc():
    """Factory for raw collection documents."""
    return _collection_doc


@pytest.fixture
def user_doc():
    """Factory for raw user documents."""
    return _user_doc


@pytest.fixture
def dolls_raw() -> list:
    """Raw manifest: max -> dolls -> a, b, c."""
    return [_user_doc("max", [_collection_doc("dolls", ["a", "b", "c"])])]


@pytest.fixture
def dolls_manifest(dolls_raw) -> Manifest:
    return parse_manifest(dolls_raw)


@pytest.fixture
def dolls(dolls_manifest):
    """The 'dolls' collection."""
    return dolls_manifest[0].collections[0]


@pytest.fixture
def overlay_raw() -> list:
    """Third-party manifest colliding on 'max' and adding 'ada'."""
    return [
        _user_doc("max", [_collection_doc("robots", ["r1"])], name="Impostor Max"),
        _user_doc("ada", [_collection_doc("engines", ["e1", "e2"])]),
    ]


@pytest.fixture
def overlay_manifest(overlay_raw) -> Manifest:
    return parse_manifest(overlay_raw)


@pytest.fixture
def many_items():
    """Collection with twelve items, i0..i11."""
    raw = _collection_doc("shelf", [f"i{n}" for n in range(12)])
    return parse_manifest([_user_doc("max", [raw])])[0].collections[0].items
