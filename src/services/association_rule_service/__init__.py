_hard_dependencies = ["pydantic"]
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

from services.association_rule_service.core.api import (  # noqa: F401, E402
    INCOMPATIBLE_CHEMICAL_PAIRS,
    MAX_DISTINCT_CHEMICALS_PER_WELL,
    REJECTION_MESSAGES,
    AssociationRuleService,
    Decision,
    RejectionReason,
)

__all__ = [
    "AssociationRuleService",
    "Decision",
    "RejectionReason",
    "REJECTION_MESSAGES",
    "INCOMPATIBLE_CHEMICAL_PAIRS",
    "MAX_DISTINCT_CHEMICALS_PER_WELL",
]
