from orchestration.dashboard_service.core.models.user import (
    AssociationOperation,
    CreateAssociationOperation,
    OperationOutcome,
    OperationsDefinition,
    Operator,
    RemoveAssociationOperation,
    Role,
    ToggleAssociationOperation,
)

__all__ = [
    "AssociationOperation",
    "CreateAssociationOperation",
    "OperationOutcome",
    "OperationsDefinition",
    "Operator",
    "RemoveAssociationOperation",
    "Role",
    "ToggleAssociationOperation",
]
