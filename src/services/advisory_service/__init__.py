_hard_dependencies = ["anthropic", "pydantic", "pydantic_settings"]
_missing_dependencies = []

for _dependency in _hard_dependencies:
    try:
        __import__(_dependency)
    except ImportError as _e:
        _missing_dependencies.append(f"{_dependency}: {_e}")

if _missing_dependencies:
    raise ImportError(
        "Unable to import required dependencies:\n" + "\n".join(_missing_dependencies)
    )
del _hard_dependencies, _dependency, _missing_dependencies

from services.advisory_service.core.api import (  # noqa: F401, E402
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    UNCONFIGURED_MESSAGE,
    AdvisoryService,
    AdvisoryServiceConfig,
    AdvisoryTextGenerator,
    get_advisory_config,
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
