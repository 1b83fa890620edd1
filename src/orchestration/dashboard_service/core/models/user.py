from __future__ import annotations

from enum import StrEnum
from typing import Literal, Union

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Annotated

from services.association_lifecycle_service import AssociationOperationResult


class Role(StrEnum):
    SALES = "SALES"
    FIELD_TECH = "FIELD_TECH"


class Operator(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    id: str = Field(min_length=1)
    name: str
    role: Role


class CreateAssociationOperation(BaseModel, extra="forbid", str_strip_whitespace=True):
    action: Literal["create"] = Field(default="create")
    well_id: str
    tank_id: str
    pump_id: str
    # Range is checked by the lifecycle service so a bad value is reported as
    # a rejection instead of failing the whole file
    target_ppm: float
    association_id: str | None = Field(default=None)


class ToggleAssociationOperation(BaseModel, extra="forbid", str_strip_whitespace=True):
    action: Literal["toggle"] = Field(default="toggle")
    association_id: str = Field(min_length=1)


class RemoveAssociationOperation(BaseModel, extra="forbid", str_strip_whitespace=True):
    action: Literal["remove"] = Field(default="remove")
    association_id: str = Field(min_length=1)


AssociationOperation = Annotated[
    Union[
        CreateAssociationOperation,
        ToggleAssociationOperation,
        RemoveAssociationOperation,
    ],
    Field(discriminator="action"),
]


class OperationsDefinition(BaseModel, extra="forbid"):
    operations: list[AssociationOperation] = Field(default_factory=list)

    @model_validator(mode="after")
    def ensure_unique_explicit_ids(self) -> OperationsDefinition:
        seen_ids = set()
        for operation in self.operations:
            if isinstance(operation, CreateAssociationOperation) and operation.association_id:
                if operation.association_id in seen_ids:
                    raise ValueError(
                        f"Association id '{operation.association_id}' is created more than once."
                    )
                seen_ids.add(operation.association_id)
        return self


class OperationOutcome(BaseModel, extra="forbid"):
    """
    Result of one entry of an operations file.

    ``error`` is set instead of ``result`` when the operation referenced an
    association that does not exist, or asked for an id that is already taken.
    """

    operation: AssociationOperation
    result: AssociationOperationResult | None = Field(default=None)
    error: str | None = Field(default=None)

    @property
    def ok(self) -> bool:
        return self.result is not None and self.result.ok
