"""Text formatters for CLI output.

Markdown is meant for reading in a terminal; JSON re-emits the manifest
wire format (camelCase, unknown fields included) for scripting.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from vitrine_catalog import CollectionView, Item, ItemView, User


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def format_users(users: Sequence[User]) -> str:
    if not users:
        return "No users in catalog."

    lines = [f"Found {len(users)} users:", ""]
    for user in users:
        lines.append(f"- **{user.name}** (`{user.id}`) - {len(user.collections)} collections")
    return "\n".join(lines)


def format_user(user: User) -> str:
    lines = [f"## {user.name}"]
    if user.bio:
        lines.append(f"*{user.bio}*")
    lines.append("")
    if not user.collections:
        lines.append("No collections.")
    for collection in user.collections:
        lines.append(f"- **{collection.name}** (`{user.id}/{collection.id}`) - {len(collection.items)} items")
    return "\n".join(lines)


def _item_fields(item: Item) -> list[str]:
    return [f"  {label}: {value}" for label, value in item.display_fields()]


def format_collection_view(view: CollectionView) -> str:
    collection = view.collection
    lines = [f"## {collection.name}", f"by {view.user.name}"]
    if collection.description:
        lines.append(f"*{collection.description}*")
    lines.append("")

    if not view.items:
        lines.append("No items.")
    for item in view.items:
        marker = "> " if item.id == view.highlighted else "- "
        lines.append(f"{marker}**{item.name}** (`{view.user.id}/{collection.id}/{item.id}`)")
        lines.extend(_item_fields(item))

    if view.has_more:
        lines.append("")
        lines.append(f"Showing {len(view.items)} of {len(collection.items)} items.")
    return "\n".join(lines)


def format_item_view(view: ItemView) -> str:
    item = view.item
    lines = [f"## {item.name}", f"{view.collection.name} - {view.user.name}", ""]
    lines.append(item.description)
    lines.append("")
    lines.append(f"Model: {item.model}")
    if item.poster:
        lines.append(f"Poster: {item.poster}")
    lines.append(f"Alt: {item.alt_text}")
    lines.extend(_item_fields(item))

    lines.append("")
    if view.previous is not None:
        lines.append(f"Previous: {view.previous.name} (`{view.previous.id}`)")
    if view.next is not None:
        lines.append(f"Next: {view.next.name} (`{view.next.id}`)")
    return "\n".join(lines)


def format_json(value: Any) -> str:
    """Serialize models, views or sequences of models to JSON."""
    if isinstance(value, CollectionView):
        payload: Any = {
            "user": value.user.id,
            "collection": _dump(value.collection.model_copy(update={"items": ()})),
            "items": [_dump(item) for item in value.items],
            "hasMore": value.has_more,
        }
    elif isinstance(value, ItemView):
        payload = {
            "user": value.user.id,
            "collection": value.collection.id,
            "item": _dump(value.item),
            "previous": value.previous.id if value.previous else None,
            "next": value.next.id if value.next else None,
        }
    elif isinstance(value, (list, tuple)):
        payload = [_dump(entry) for entry in value]
    else:
        payload = _dump(value)
    return json.dumps(payload, indent=2)
