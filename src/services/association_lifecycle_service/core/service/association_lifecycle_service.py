from __future__ import annotations

import threading
from functools import partial
from typing import Callable

from logger import get_logger
from services.association_lifecycle_service.core.models import (
    AssociationOperationResult,
)
from services.association_rule_service import (
    AssociationRuleService,
    Decision,
    RejectionReason,
)
from services.entity_store_service import (
    Association,
    AssociationStatus,
    EntityKind,
    EntityStore,
)
from services.shared import (
    AssociationNotFoundError,
    DuplicateEntityError,
    is_positive_finite,
    new_entity_id,
)

MAX_ID_ATTEMPTS = 100


class AssociationLifecycleService:
    """
    The only writer of the association collection.

    Every operation validates against the current store and commits in one
    step under a re-entrant lock, so a rejected request never leaves a partial
    change behind. Associations are created INACTIVE, switched off without
    any check and removed without any check.
    """

    def __init__(
        self,
        store: EntityStore,
        id_factory: Callable[[], str] | None = None,
    ):
        """
        Initialize the AssociationLifecycleService.

        Args:
            store (EntityStore): Store holding the associations to manage.
            id_factory (Callable[[], str] | None): Generator for new association
                ids. Defaults to random ``A``-prefixed hex ids.
        """
        self.logger = get_logger(__name__)
        self._store = store
        self._id_factory = id_factory or partial(new_entity_id, "A")
        self._lock = threading.RLock()

    def create(
        self,
        well_id: str,
        tank_id: str,
        pump_id: str,
        target_ppm: float,
        association_id: str | None = None,
    ) -> AssociationOperationResult:
        with self._lock:
            self.logger.debug(
                "Create requested: well=%s tank=%s pump=%s ppm=%s",
                well_id,
                tank_id,
                pump_id,
                target_ppm,
            )
            if not is_positive_finite(target_ppm):
                return self._reject(
                    "create", Decision.reject(RejectionReason.InvalidSelection)
                )

            decision = AssociationRuleService.validate_create(
                self._store, well_id, tank_id, pump_id
            )
            if not decision.accepted:
                return self._reject("create", decision)

            new_id = association_id or self._next_id()
            if self._store.get(EntityKind.ASSOCIATION, new_id) is not None:
                raise DuplicateEntityError(
                    f"An association with id '{new_id}' already exists"
                )

            association = Association(
                id=new_id,
                well_id=well_id,
                tank_id=tank_id,
                pump_id=pump_id,
                target_ppm=float(target_ppm),
                status=AssociationStatus.INACTIVE,
            )
            self._store.insert(EntityKind.ASSOCIATION, association)
            self.logger.info(
                "Created association %s (well=%s tank=%s pump=%s ppm=%s), pump stopped",
                association.id,
                association.well_id,
                association.tank_id,
                association.pump_id,
                association.target_ppm,
            )
            return AssociationOperationResult.success(association)

    def toggle(self, association_id: str) -> AssociationOperationResult:
        with self._lock:
            association = self._require(association_id)

            if association.is_active:
                return self._commit_status(association, AssociationStatus.INACTIVE)

            decision = AssociationRuleService.validate_activate(
                self._store, association
            )
            if not decision.accepted:
                return self._reject("toggle", decision, association_id)

            return self._commit_status(association, AssociationStatus.ACTIVE)

    def remove(self, association_id: str) -> AssociationOperationResult:
        with self._lock:
            removed = self._store.remove(EntityKind.ASSOCIATION, association_id)
            if not isinstance(removed, Association):
                raise AssociationNotFoundError(
                    f"No association with id '{association_id}'"
                )
            self.logger.info(
                "Removed association %s (was %s)", removed.id, removed.status
            )
            return AssociationOperationResult.success(removed)

    def _commit_status(
        self, association: Association, status: AssociationStatus
    ) -> AssociationOperationResult:
        updated = association.with_status(status)
        self._store.update(EntityKind.ASSOCIATION, updated)
        self.logger.info(
            "Association %s switched %s -> %s", updated.id, association.status, status
        )
        return AssociationOperationResult.success(updated)

    def _reject(
        self, operation: str, decision: Decision, association_id: str | None = None
    ) -> AssociationOperationResult:
        self.logger.warning(
            "Rejected %s%s: %s",
            operation,
            f" of {association_id}" if association_id else "",
            decision.reason,
        )
        return AssociationOperationResult.rejected(decision)

    def _require(self, association_id: str) -> Association:
        association = self._store.get_association(association_id)
        if association is None:
            raise AssociationNotFoundError(f"No association with id '{association_id}'")
        return association

    def _next_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            new_id = self._id_factory()
            if self._store.get(EntityKind.ASSOCIATION, new_id) is None:
                return new_id
        raise DuplicateEntityError(
            f"No free association id after {MAX_ID_ATTEMPTS} attempts"
        )
