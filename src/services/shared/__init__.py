from services.shared.errors import (
    AccessDeniedError,
    AssociationNotFoundError,
    DuplicateEntityError,
    EntityNotFoundError,
    InjectionDashboardError,
)
from services.shared.identifiers import new_entity_id
from services.shared.validators import (
    is_blank,
    is_positive_finite,
)

__all__ = [
    "InjectionDashboardError",
    "EntityNotFoundError",
    "AssociationNotFoundError",
    "DuplicateEntityError",
    "AccessDeniedError",
    "new_entity_id",
    "is_blank",
    "is_positive_finite",
]
