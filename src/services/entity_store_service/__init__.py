_hard_dependencies = ["pydantic"]
_missing_dependencies = []

for _dependency in _hard_dependencies:
    try:
        __import__(_dependency)
    except ImportError as _e:
        _missing_dependencies.append(f"{_dependency}: {_e}")

if _missing_dependencies:
    raise ImportError(
        "Unable to import required dependencies:\n" + "\n".join(_missing_dependencies)
    )
del _hard_dependencies, _dependency, _missing_dependencies

from services.entity_store_service.core.api import (  # noqa: F401, E402
    Association,
    AssociationStatus,
    Entity,
    EntityKind,
    EntityStore,
    EntityStoreSnapshot,
    EntityStoreView,
    MissingEntity,
    Product,
    Pump,
    Site,
    Tank,
    Well,
    build_sample_snapshot,
)

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
