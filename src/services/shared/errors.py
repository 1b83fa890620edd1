class InjectionDashboardError(Exception):
    """Base class for unexpected conditions raised by the dashboard core.

    Business-rule violations are never raised; they are returned as
    rejection reasons by the association rule service.
    """


class EntityNotFoundError(InjectionDashboardError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class AssociationNotFoundError(EntityNotFoundError):
    pass


class DuplicateEntityError(InjectionDashboardError, ValueError):
    pass


class AccessDeniedError(InjectionDashboardError, PermissionError):
    pass
