from __future__ import annotations

from logger import get_logger
from services.association_rule_service.core.models import Decision, RejectionReason
from services.association_rule_service.core.utils import (
    MAX_DISTINCT_CHEMICALS_PER_WELL,
    find_incompatible_pair,
    well_chemical_types,
)
from services.entity_store_service import Association, EntityStoreView
from services.shared import is_blank


class AssociationRuleService:
    """
    Decides whether an association may be created or switched on.

    Both checks only read the given store and never raise for a business rule
    violation; they return a rejected ``Decision`` instead.
    """

    _logger = get_logger(__name__)

    @staticmethod
    def validate_create(
        store: EntityStoreView, well_id: str, tank_id: str, pump_id: str
    ) -> Decision:
        well = store.get_well(well_id) if not is_blank(well_id) else None
        tank = store.get_tank(tank_id) if not is_blank(tank_id) else None
        if well is None or tank is None or is_blank(pump_id):
            AssociationRuleService._logger.debug(
                "Invalid selection: well=%s tank=%s pump=%s", well_id, tank_id, pump_id
            )
            return Decision.reject(RejectionReason.InvalidSelection)

        # Pump reuse across wells is allowed, so the pump is not checked further
        chemicals = well_chemical_types(store, well.id)
        chemicals.add(tank.chemical_type)
        AssociationRuleService._logger.debug(
            "Chemicals on well %s after adding tank %s: %s",
            well.id,
            tank.id,
            sorted(chemicals),
        )

        if len(chemicals) > MAX_DISTINCT_CHEMICALS_PER_WELL:
            return Decision.reject(RejectionReason.TooManyChemicals)

        return Decision.accept()

    @staticmethod
    def validate_activate(store: EntityStoreView, association: Association) -> Decision:
        if association.is_active:
            return Decision.accept()

        tank = store.get_tank(association.tank_id)
        if tank is None:
            return Decision.reject(RejectionReason.TankNotFound)

        active_chemicals = well_chemical_types(
            store,
            association.well_id,
            active_only=True,
            exclude_association_id=association.id,
        )
        conflict = find_incompatible_pair(tank.chemical_type, active_chemicals)
        if conflict is not None:
            AssociationRuleService._logger.debug(
                "Activation of %s blocked on well %s: %s and %s",
                association.id,
                association.well_id,
                *conflict,
            )
            return Decision.reject(RejectionReason.IncompatibleChemicals)

        return Decision.accept()
