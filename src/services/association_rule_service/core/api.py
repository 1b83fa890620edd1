from services.association_rule_service.core.models import (
    REJECTION_MESSAGES,
    Decision,
    RejectionReason,
)
from services.association_rule_service.core.service import AssociationRuleService
from services.association_rule_service.core.utils import (
    INCOMPATIBLE_CHEMICAL_PAIRS,
    MAX_DISTINCT_CHEMICALS_PER_WELL,
)

__all__ = [
    "AssociationRuleService",
    "Decision",
    "RejectionReason",
    "REJECTION_MESSAGES",
    "INCOMPATIBLE_CHEMICAL_PAIRS",
    "MAX_DISTINCT_CHEMICALS_PER_WELL",
]
