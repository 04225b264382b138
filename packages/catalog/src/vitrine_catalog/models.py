"""Pydantic models for the catalog hierarchy.

Users own collections, collections own items. The wire format uses
camelCase names (``formalName``, ``customFields``); attributes are
snake_case. Unknown fields are kept so newer manifests pass through
unchanged. Every model is frozen and sequences are tuples, so a built
hierarchy cannot be changed in place.
"""

from __future__ import annotations

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="allow",
    frozen=True,
)

# Label shown for each optional descriptive field, in display order.
DESCRIPTIVE_FIELDS: tuple[tuple[str, str], ...] = (
    ("formal_name", "Formal Name"),
    ("release_date", "Date of Release"),
    ("manufacture_date", "Date of Manufacture"),
    ("acquisition_date", "Date of Acquisition"),
    ("capture_date", "Date of Capture"),
    ("capture_location", "Capture Location"),
    ("capture_lat_long", "Capture Coordinates"),
    ("capture_device", "Capture Device"),
    ("capture_app", "Capture App"),
    ("capture_method", "Capture Method"),
)


class Item(BaseModel):
    """A described object carrying a 3D model reference."""

    model_config = _MODEL_CONFIG

    id: str = Field(min_length=1, description="Unique within its collection")
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    model: str = Field(min_length=1, description="URI of the 3D asset")
    poster: Optional[str] = Field(default=None, description="Preview image URI")
    alt: Optional[str] = Field(default=None, description="Accessible description of the model")

    formal_name: Optional[str] = None
    release_date: Optional[str] = None
    manufacture_date: Optional[str] = None
    acquisition_date: Optional[str] = None
    capture_date: Optional[str] = None
    capture_location: Optional[str] = None
    capture_lat_long: Optional[str] = None
    capture_device: Optional[str] = None
    capture_app: Optional[str] = None
    capture_method: Optional[str] = None

    custom_fields: dict[str, str] = Field(default_factory=dict)

    @property
    def alt_text(self) -> str:
        return self.alt or self.name

    def display_fields(self) -> list[tuple[str, str]]:
        """Populated descriptive fields as ``(label, value)`` pairs.

        Standard fields come first in a fixed order, then ``customFields``
        in the order the manifest lists them.
        """
        fields = [
            (label, getattr(self, attr))
            for attr, label in DESCRIPTIVE_FIELDS
            if getattr(self, attr)
        ]
        fields.extend(self.custom_fields.items())
        return fields


class Collection(BaseModel):
    """An ordered group of items belonging to one user."""

    model_config = _MODEL_CONFIG

    id: str = Field(min_length=1, description="Unique within its user")
    name: str = Field(min_length=1)
    description: Optional[str] = None
    items: tuple[Item, ...] = Field(description="Display order; may be empty")


class User(BaseModel):
    """Top-level owner of collections."""

    model_config = _MODEL_CONFIG

    id: str = Field(min_length=1, description="Unique across the hierarchy")
    name: str = Field(min_length=1)
    bio: Optional[str] = None
    collections: tuple[Collection, ...] = Field(description="Display order; may be empty")


class Manifest(RootModel[tuple[User, ...]]):
    """An ordered sequence of users, as found in a manifest document."""

    model_config = ConfigDict(frozen=True)

    @property
    def users(self) -> tuple[User, ...]:
        return self.root

    def __iter__(self) -> Iterator[User]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> User:
        return self.root[index]
