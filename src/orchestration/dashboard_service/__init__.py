from orchestration.dashboard_service.core.models import (
    AssociationOperation,
    CreateAssociationOperation,
    OperationOutcome,
    OperationsDefinition,
    Operator,
    RemoveAssociationOperation,
    Role,
    ToggleAssociationOperation,
)
from orchestration.dashboard_service.core.service import DashboardService

__all__ = [
    "DashboardService",
    "Operator",
    "Role",
    "AssociationOperation",
    "CreateAssociationOperation",
    "ToggleAssociationOperation",
    "RemoveAssociationOperation",
    "OperationsDefinition",
    "OperationOutcome",
]
