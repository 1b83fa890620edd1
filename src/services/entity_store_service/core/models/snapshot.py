from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from services.entity_store_service.core.models.entities import (
    Association,
    EntityKind,
    Product,
    Pump,
    Site,
    Tank,
    Well,
)

SNAPSHOT_FIELDS: dict[EntityKind, str] = {
    EntityKind.PRODUCT: "products",
    EntityKind.SITE: "sites",
    EntityKind.TANK: "tanks",
    EntityKind.PUMP: "pumps",
    EntityKind.WELL: "wells",
    EntityKind.ASSOCIATION: "associations",
}


class EntityStoreSnapshot(BaseModel, extra="forbid"):
    """
    Materialized copy of every collection of an entity store, in insertion
    order. Used to seed a store, to load a JSON state file and to compare
    store states.
    """

    products: list[Product] = Field(default_factory=list)
    sites: list[Site] = Field(default_factory=list)
    tanks: list[Tank] = Field(default_factory=list)
    pumps: list[Pump] = Field(default_factory=list)
    wells: list[Well] = Field(default_factory=list)
    associations: list[Association] = Field(default_factory=list)

    @model_validator(mode="after")
    def ensure_unique_ids(self) -> EntityStoreSnapshot:
        for kind, field_name in SNAPSHOT_FIELDS.items():
            seen_ids = set()
            for entity in getattr(self, field_name):
                if entity.id in seen_ids:
                    raise ValueError(f"Duplicate {kind} id: {entity.id}")
                seen_ids.add(entity.id)
        return self

    def collection(self, kind: EntityKind) -> Sequence[BaseModel]:
        return getattr(self, SNAPSHOT_FIELDS[kind])
