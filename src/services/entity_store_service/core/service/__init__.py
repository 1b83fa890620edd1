from services.entity_store_service.core.service.entity_store import (
    EntityStore,
    EntityStoreView,
)

__all__ = [
    "EntityStore",
    "EntityStoreView",
]
