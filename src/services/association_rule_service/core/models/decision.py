from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class RejectionReason(StrEnum):
    InvalidSelection = "InvalidSelection"
    TooManyChemicals = "TooManyChemicals"
    TankNotFound = "TankNotFound"
    IncompatibleChemicals = "IncompatibleChemicals"


REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.InvalidSelection: "Invalid selection.",
    RejectionReason.TooManyChemicals: "Maximum 3 different chemicals allowed per well.",
    RejectionReason.TankNotFound: "Tank not found.",
    RejectionReason.IncompatibleChemicals: (
        "Safety interlock: cannot run Product A and Product C simultaneously on this well."
    ),
}


class Decision(BaseModel, extra="forbid", frozen=True):
    """
    Outcome of a rule evaluation.

    Attributes:
        accepted (bool): True when the proposed change is legal.
        reason (RejectionReason | None): Why the change was rejected, set
            if and only if ``accepted`` is False.
    """

    accepted: bool
    reason: RejectionReason | None = Field(default=None)

    @model_validator(mode="after")
    def validate_reason_matches_outcome(self) -> Decision:
        if self.accepted and self.reason is not None:
            raise ValueError("An accepted decision cannot carry a rejection reason")
        if not self.accepted and self.reason is None:
            raise ValueError("A rejected decision requires a rejection reason")
        return self

    @property
    def message(self) -> str | None:
        return REJECTION_MESSAGES[self.reason] if self.reason else None

    @classmethod
    def accept(cls) -> Decision:
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason) -> Decision:
        return cls(accepted=False, reason=reason)
