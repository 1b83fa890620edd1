from services.advisory_service.core.config import (
    AdvisoryServiceConfig,
    get_advisory_config,
)
from services.advisory_service.core.connectors import AdvisoryTextGenerator
from services.advisory_service.core.service import (
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    UNCONFIGURED_MESSAGE,
    AdvisoryService,
)

__all__ = [
    "AdvisoryService",
    "AdvisoryServiceConfig",
    "AdvisoryTextGenerator",
    "get_advisory_config",
    "EMPTY_MESSAGE",
    "ERROR_MESSAGE",
    "UNCONFIGURED_MESSAGE",
]
