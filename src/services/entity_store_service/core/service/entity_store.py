from __future__ import annotations

from typing import Protocol, TypeVar

from logger import get_logger
from services.entity_store_service.core.models import (
    ENTITY_TYPES,
    SNAPSHOT_FIELDS,
    Association,
    Entity,
    EntityKind,
    EntityStoreSnapshot,
    MissingEntity,
    Pump,
    Tank,
    Well,
)
from services.shared import DuplicateEntityError, EntityNotFoundError

E = TypeVar("E", Tank, Pump, Well, Association)


class EntityStoreView(Protocol):
    """
    Read-only access to an entity store, as consumed by the rule and
    projection services.
    """

    def get(self, kind: EntityKind, entity_id: str) -> Entity | None: ...

    def list_entities(self, kind: EntityKind) -> list[Entity]: ...

    def get_tank(self, tank_id: str) -> Tank | None: ...

    def get_well(self, well_id: str) -> Well | None: ...

    def associations_for_well(self, well_id: str) -> list[Association]: ...

    def pumps_for_tank(self, tank_id: str) -> list[Pump]: ...


class EntityStore:
    """
    In-memory holder of the product, site, tank, pump, well and association
    collections.

    Collections keep insertion order. The store enforces id uniqueness within
    a collection and the entity type of each collection, but no referential
    integrity: removing a tank referenced by an association is allowed and
    leaves the association dangling.
    """

    _logger = get_logger(__name__)

    def __init__(self) -> None:
        self._collections: dict[EntityKind, dict[str, Entity]] = {
            kind: {} for kind in EntityKind
        }

    @classmethod
    def from_snapshot(cls, snapshot: EntityStoreSnapshot) -> EntityStore:
        store = cls()
        for kind in EntityKind:
            for entity in snapshot.collection(kind):
                store.insert(kind, entity)  # type: ignore[arg-type]
        cls._logger.debug(
            "Seeded entity store: %s",
            {kind.value: len(store._collections[kind]) for kind in EntityKind},
        )
        return store

    def snapshot(self) -> EntityStoreSnapshot:
        return EntityStoreSnapshot(
            **{
                SNAPSHOT_FIELDS[kind]: list(self._collections[kind].values())
                for kind in EntityKind
            }
        )

    def get(self, kind: EntityKind, entity_id: str) -> Entity | None:
        return self._collections[kind].get(entity_id)

    def resolve(self, kind: EntityKind, entity_id: str) -> Entity | MissingEntity:
        entity = self.get(kind, entity_id)
        if entity is None:
            return MissingEntity(kind=kind, id=entity_id)
        return entity

    def list_entities(self, kind: EntityKind) -> list[Entity]:
        return list(self._collections[kind].values())

    def insert(self, kind: EntityKind, entity: Entity) -> None:
        self._check_type(kind, entity)
        collection = self._collections[kind]
        if entity.id in collection:
            raise DuplicateEntityError(f"A {kind} with id '{entity.id}' already exists")
        collection[entity.id] = entity
        self._logger.debug("Inserted %s: %s", kind, entity)

    def update(self, kind: EntityKind, entity: Entity) -> None:
        self._check_type(kind, entity)
        collection = self._collections[kind]
        if entity.id not in collection:
            raise EntityNotFoundError(f"No {kind} with id '{entity.id}'")
        # Assigning an existing key keeps its position
        collection[entity.id] = entity
        self._logger.debug("Updated %s: %s", kind, entity)

    def remove(self, kind: EntityKind, entity_id: str) -> Entity | None:
        entity = self._collections[kind].pop(entity_id, None)
        if entity is None:
            self._logger.debug("Nothing to remove for %s '%s'", kind, entity_id)
        else:
            self._logger.debug("Removed %s: %s", kind, entity)
        return entity

    def get_tank(self, tank_id: str) -> Tank | None:
        return self._get_typed(EntityKind.TANK, tank_id, Tank)

    def get_pump(self, pump_id: str) -> Pump | None:
        return self._get_typed(EntityKind.PUMP, pump_id, Pump)

    def get_well(self, well_id: str) -> Well | None:
        return self._get_typed(EntityKind.WELL, well_id, Well)

    def get_association(self, association_id: str) -> Association | None:
        return self._get_typed(EntityKind.ASSOCIATION, association_id, Association)

    def associations_for_well(self, well_id: str) -> list[Association]:
        return [
            a
            for a in self._collections[EntityKind.ASSOCIATION].values()
            if isinstance(a, Association) and a.well_id == well_id
        ]

    def pumps_for_tank(self, tank_id: str) -> list[Pump]:
        return [
            p
            for p in self._collections[EntityKind.PUMP].values()
            if isinstance(p, Pump) and p.tank_id == tank_id
        ]

    def _get_typed(self, kind: EntityKind, entity_id: str, expected: type[E]) -> E | None:
        entity = self.get(kind, entity_id)
        return entity if isinstance(entity, expected) else None

    @staticmethod
    def _check_type(kind: EntityKind, entity: Entity) -> None:
        expected = ENTITY_TYPES[kind]
        if not isinstance(entity, expected):
            raise TypeError(
                f"Expected {expected.__name__} for kind '{kind}', got {type(entity).__name__}"
            )
