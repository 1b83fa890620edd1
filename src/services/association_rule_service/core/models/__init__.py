from services.association_rule_service.core.models.decision import (
    REJECTION_MESSAGES,
    Decision,
    RejectionReason,
)

__all__ = [
    "Decision",
    "RejectionReason",
    "REJECTION_MESSAGES",
]
