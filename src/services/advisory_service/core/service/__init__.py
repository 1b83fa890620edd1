from services.advisory_service.core.service.advisory_service import (
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    UNCONFIGURED_MESSAGE,
    AdvisoryService,
)

__all__ = [
    "AdvisoryService",
    "EMPTY_MESSAGE",
    "ERROR_MESSAGE",
    "UNCONFIGURED_MESSAGE",
]
