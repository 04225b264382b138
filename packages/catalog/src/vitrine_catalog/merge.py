"""Combine the first-party manifest with an optional third-party overlay.

Overlay users are appended after base users. Colliding ids are kept as
separate entries; lookups match the first entry, so an overlay can never
hide first-party content.
"""

from __future__ import annotations

from typing import Optional

from vitrine_common import get_logger
from vitrine_catalog.models import Manifest

logger = get_logger(__name__)


def shadowed_user_ids(base: Manifest, overlay: Manifest) -> list[str]:
    """Overlay user ids that lookups will never return, in overlay order."""
    base_ids = {user.id for user in base}
    return [user.id for user in overlay if user.id in base_ids]


def merge_manifests(base: Manifest, overlay: Optional[Manifest] = None) -> Manifest:
    """Append ``overlay`` users after ``base`` users.

    Args:
        base: Trusted first-party manifest
        overlay: Validated third-party manifest, or None

    Returns:
        ``base`` itself when there is no overlay, otherwise a new manifest
    """
    if overlay is None:
        return base

    shadowed = shadowed_user_ids(base, overlay)
    if shadowed:
        logger.debug("manifest_ids_shadowed", user_ids=shadowed)

    return Manifest(base.users + overlay.users)
