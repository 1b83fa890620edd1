from services.association_lifecycle_service.core.models import (
    AssociationOperationResult,
)
from services.association_lifecycle_service.core.service import (
    AssociationLifecycleService,
)

__all__ = ["AssociationLifecycleService", "AssociationOperationResult"]
