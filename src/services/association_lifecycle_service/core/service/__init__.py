from services.association_lifecycle_service.core.service.association_lifecycle_service import (
    AssociationLifecycleService,
)

__all__ = ["AssociationLifecycleService"]
