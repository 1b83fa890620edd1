from services.entity_store_service.core.models.entities import (
    ENTITY_TYPES,
    Association,
    AssociationStatus,
    Entity,
    EntityKind,
    MissingEntity,
    Product,
    Pump,
    Site,
    Tank,
    Well,
)
from services.entity_store_service.core.models.snapshot import (
    SNAPSHOT_FIELDS,
    EntityStoreSnapshot,
)

__all__ = [
    "ENTITY_TYPES",
    "SNAPSHOT_FIELDS",
    "Association",
    "AssociationStatus",
    "Entity",
    "EntityKind",
    "EntityStoreSnapshot",
    "MissingEntity",
    "Product",
    "Pump",
    "Site",
    "Tank",
    "Well",
]
