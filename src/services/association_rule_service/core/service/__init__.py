from services.association_rule_service.core.service.association_rule_service import (
    AssociationRuleService,
)

__all__ = ["AssociationRuleService"]
