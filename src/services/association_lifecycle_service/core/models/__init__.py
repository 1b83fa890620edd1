from services.association_lifecycle_service.core.models.result import (
    AssociationOperationResult,
)

__all__ = ["AssociationOperationResult"]
