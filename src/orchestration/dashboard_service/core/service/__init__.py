from orchestration.dashboard_service.core.service.dashboard_service import (
    DashboardService,
)

__all__ = ["DashboardService"]
