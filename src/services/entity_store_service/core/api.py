from services.entity_store_service.core.models import (
    Association,
    AssociationStatus,
    Entity,
    EntityKind,
    EntityStoreSnapshot,
    MissingEntity,
    Product,
    Pump,
    Site,
    Tank,
    Well,
)
from services.entity_store_service.core.service import EntityStore, EntityStoreView
from services.entity_store_service.core.utils import build_sample_snapshot

__all__ = [
    "EntityStore",
    "EntityStoreView",
    "EntityStoreSnapshot",
    "EntityKind",
    "Entity",
    "MissingEntity",
    "Product",
    "Site",
    "Tank",
    "Pump",
    "Well",
    "Association",
    "AssociationStatus",
    "build_sample_snapshot",
]
