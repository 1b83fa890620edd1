from services.projection_service.core.config import (
    ProjectionServiceConfig,
    get_projection_config,
)
from services.projection_service.core.models import (
    AssociationDetail,
    DashboardMetrics,
    InjectionSample,
    SystemSnapshot,
    TankStatus,
    WellConsumption,
)
from services.projection_service.core.service import ProjectionService
from services.projection_service.core.utils import estimate_daily_consumption

__all__ = [
    "ProjectionService",
    "ProjectionServiceConfig",
    "get_projection_config",
    "AssociationDetail",
    "DashboardMetrics",
    "InjectionSample",
    "SystemSnapshot",
    "TankStatus",
    "WellConsumption",
    "estimate_daily_consumption",
]
