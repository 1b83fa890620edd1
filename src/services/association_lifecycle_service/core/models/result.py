from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from services.association_rule_service import (
    REJECTION_MESSAGES,
    Decision,
    RejectionReason,
)
from services.entity_store_service import Association


class AssociationOperationResult(BaseModel, extra="forbid", frozen=True):
    """
    Result of a create, toggle or remove request.

    Attributes:
        ok (bool): True when the state transition was committed.
        association (Association | None): The association as it stands after
            the operation (for a removal, as it was when removed).
        reason (RejectionReason | None): Rejection reason when ``ok`` is False.
        message (str | None): Human readable text for ``reason``.
    """

    ok: bool
    association: Association | None = Field(default=None)
    reason: RejectionReason | None = Field(default=None)
    message: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_outcome(self) -> AssociationOperationResult:
        if self.ok and self.association is None:
            raise ValueError("A successful result must carry the association")
        if not self.ok and self.reason is None:
            raise ValueError("A failed result must carry a rejection reason")
        return self

    @classmethod
    def success(cls, association: Association) -> AssociationOperationResult:
        return cls(ok=True, association=association)

    @classmethod
    def rejected(cls, decision: Decision) -> AssociationOperationResult:
        if decision.reason is None:
            raise ValueError("Cannot build a rejected result from an accepted decision")
        return cls(
            ok=False,
            reason=decision.reason,
            message=REJECTION_MESSAGES[decision.reason],
        )
