from services.association_rule_service.core.utils.chemicals import (
    find_incompatible_pair,
    well_chemical_types,
)
from services.association_rule_service.core.utils.constants import (
    INCOMPATIBLE_CHEMICAL_PAIRS,
    MAX_DISTINCT_CHEMICALS_PER_WELL,
)

__all__ = [
    "INCOMPATIBLE_CHEMICAL_PAIRS",
    "MAX_DISTINCT_CHEMICALS_PER_WELL",
    "find_incompatible_pair",
    "well_chemical_types",
]
