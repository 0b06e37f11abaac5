"""Entity records and the registry of entity kinds.

Every entity kind shares the same shape: a storage-assigned integer id
and a non-empty name. New kinds are added by registering an
:class:`EntityKind`; the storage gateway and the services are generic
over the registry.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from biclog.errors import ValidationError


class Entity(BaseModel):
    """A stored record identified by an integer id.

    ``id`` is 0 until the record has been inserted.
    """

    model_config = {"frozen": True}

    id: int = Field(default=0, ge=0)
    name: str


class BicycleType(Entity):
    """A bicycle type (road, MTB, gravel, ...)."""


class Category(Entity):
    """A trip category (commute, training, touring, ...)."""


class EntityKind(BaseModel):
    """Descriptor tying an entity record to its table and display labels."""

    model_config = {"frozen": True}

    key: str
    alias: str
    label: str
    plural: str
    header: str
    table_name: str
    record: type[Entity]


BICYCLE_TYPE = EntityKind(
    key="bicycle_type",
    alias="bt",
    label="bicycle type",
    plural="bicycle types",
    header="TYPE",
    table_name="bicycle_types",
    record=BicycleType,
)

CATEGORY = EntityKind(
    key="category",
    alias="c",
    label="category",
    plural="categories",
    header="CATEGORY",
    table_name="categories",
    record=Category,
)

ENTITY_KINDS: dict[str, EntityKind] = {kind.key: kind for kind in (BICYCLE_TYPE, CATEGORY)}


def get_entity_kind(key: str) -> EntityKind:
    """Look up a registered entity kind by key or alias.

    Raises:
        KeyError: If no kind is registered under *key*.
    """
    if key in ENTITY_KINDS:
        return ENTITY_KINDS[key]
    for kind in ENTITY_KINDS.values():
        if kind.alias == key:
            return kind
    raise KeyError(key)


def clean_name(name: str | None, *, label: str = "name") -> str:
    """Strip *name* and reject it if nothing is left."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"missing {label}", {"field": "name"})
    return cleaned
