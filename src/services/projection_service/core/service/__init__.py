from services.projection_service.core.service.projection_service import (
    ProjectionService,
)

__all__ = ["ProjectionService"]
