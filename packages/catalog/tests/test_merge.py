"""Tests for manifest merging and first-party shadowing."""

import pytest

from vitrine_catalog import Manifest, find_user, merge_manifests, shadowed_user_ids

pytestmark = pytest.mark.unit


class TestMergeManifests:
    """Tests for merge_manifests."""

    def test_no_overlay_returns_base(self, dolls_manifest):
        merged = merge_manifests(dolls_manifest, None)

        assert merged is dolls_manifest
        assert merged == dolls_manifest

    def test_overlay_appended_after_base(self, dolls_manifest, overlay_manifest):
        merged = merge_manifests(dolls_manifest, overlay_manifest)

        assert [u.id for u in merged] == ["max", "max", "ada"]
        assert merged[0] is dolls_manifest[0]
        assert merged[1] is overlay_manifest[0]

    def test_order_preserved(self, dolls_manifest, overlay_manifest):
        merged = merge_manifests(overlay_manifest, dolls_manifest)

        assert [u.name for u in merged] == ["Impostor Max", "Ada", "Max"]

    def test_inputs_unchanged(self, dolls_manifest, overlay_manifest):
        merge_manifests(dolls_manifest, overlay_manifest)

        assert len(dolls_manifest) == 1
        assert len(overlay_manifest) == 2

    def test_empty_overlay(self, dolls_manifest, overlay_manifest):
        merged = merge_manifests(dolls_manifest, Manifest(()))

        assert [u.id for u in merged] == ["max"]


class TestShadowing:
    """Colliding overlay entries are retained but never resolved."""

    def test_first_party_wins_lookup(self, dolls_manifest, overlay_manifest):
        merged = merge_manifests(dolls_manifest, overlay_manifest)

        assert find_user(merged, "max") == find_user(dolls_manifest, "max")
        assert find_user(merged, "max").name == "Max"

    def test_non_colliding_overlay_visible(self, dolls_manifest, overlay_manifest):
        merged = merge_manifests(dolls_manifest, overlay_manifest)

        assert find_user(merged, "ada").name == "Ada"

    def test_shadowed_user_ids(self, dolls_manifest, overlay_manifest):
        assert shadowed_user_ids(dolls_manifest, overlay_manifest) == ["max"]

    def test_no_shadowing(self, dolls_manifest):
        assert shadowed_user_ids(dolls_manifest, Manifest(())) == []
