from __future__ import annotations

from typing import Iterable

from services.association_rule_service.core.utils.constants import (
    INCOMPATIBLE_CHEMICAL_PAIRS,
)
from services.entity_store_service import EntityStoreView


def well_chemical_types(
    store: EntityStoreView,
    well_id: str,
    active_only: bool = False,
    exclude_association_id: str | None = None,
) -> set[str]:
    """
    Collect the chemical types routed into a well by its associations.

    Associations whose tank no longer exists contribute nothing.

    Args:
        store (EntityStoreView): Store to read from.
        well_id (str): Well to inspect.
        active_only (bool): Only consider ACTIVE associations.
        exclude_association_id (str | None): Association to leave out, e.g. the
            one being evaluated.

    Returns:
        set[str]: Distinct chemical type names.
    """
    chemicals: set[str] = set()
    for association in store.associations_for_well(well_id):
        if association.id == exclude_association_id:
            continue
        if active_only and not association.is_active:
            continue
        tank = store.get_tank(association.tank_id)
        if tank is None:
            continue
        chemicals.add(tank.chemical_type)
    return chemicals


def find_incompatible_pair(
    candidate: str,
    others: Iterable[str],
    pairs: Iterable[tuple[str, str]] = INCOMPATIBLE_CHEMICAL_PAIRS,
) -> tuple[str, str] | None:
    present = set(others)
    present.add(candidate)
    for first, second in pairs:
        if first in present and second in present:
            return first, second
    return None
