from services.projection_service.core.models.views import (
    AssociationDetail,
    DashboardMetrics,
    InjectionSample,
    SystemSnapshot,
    TankStatus,
    WellConsumption,
)

__all__ = [
    "AssociationDetail",
    "DashboardMetrics",
    "InjectionSample",
    "SystemSnapshot",
    "TankStatus",
    "WellConsumption",
]
