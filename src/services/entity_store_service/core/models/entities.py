from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Self, Union

from pydantic import BaseModel, Field, FiniteFloat, model_validator


class EntityKind(StrEnum):
    PRODUCT = "product"
    SITE = "site"
    TANK = "tank"
    PUMP = "pump"
    WELL = "well"
    ASSOCIATION = "association"


class AssociationStatus(StrEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Product(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str | None = Field(default=None)


class Site(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    id: str = Field(min_length=1)
    name: str
    location: str


class Tank(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    """
    Storage tank holding exactly one chemical at a time.

    ``chemical_type`` is the *name* of the loaded product, not its id.
    Volumes are in liters.
    """

    id: str = Field(min_length=1)
    name: str
    site_id: str
    capacity: FiniteFloat = Field(gt=0.0)
    material: str
    current_volume: FiniteFloat = Field(ge=0.0)
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    chemical_type: str

    @model_validator(mode="after")
    def validate_volume_within_capacity(self) -> Self:
        if self.current_volume > self.capacity:
            raise ValueError(
                f"Current volume ({self.current_volume}) exceeds tank capacity ({self.capacity})"
            )
        return self


class Pump(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    id: str = Field(min_length=1)
    name: str
    tank_id: str
    max_rate: FiniteFloat = Field(gt=0.0)  # L/hr


class Well(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    id: str = Field(min_length=1)
    name: str
    site_id: str
    production_rate: FiniteFloat = Field(gt=0.0)  # barrels/day


class Association(BaseModel, extra="forbid", frozen=True, str_strip_whitespace=True):
    """
    Configured injection link: the pump delivers chemical from the tank into
    the well at ``target_ppm`` while the association is ACTIVE.

    Only ``status`` changes after creation, and only through the association
    lifecycle service.
    """

    id: str = Field(min_length=1)
    well_id: str = Field(min_length=1)
    tank_id: str = Field(min_length=1)
    pump_id: str = Field(min_length=1)
    target_ppm: FiniteFloat = Field(gt=0.0)
    status: AssociationStatus = Field(default=AssociationStatus.INACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == AssociationStatus.ACTIVE

    def with_status(self, status: AssociationStatus) -> Association:
        return self.model_copy(update={"status": status})


class MissingEntity(BaseModel, extra="forbid", frozen=True):
    """Placeholder returned for a reference whose target no longer exists."""

    kind: EntityKind
    id: str
    name: str = Field(default="Unknown")


Entity = Union[Product, Site, Tank, Pump, Well, Association]

ENTITY_TYPES: dict[EntityKind, type[BaseModel]] = {
    EntityKind.PRODUCT: Product,
    EntityKind.SITE: Site,
    EntityKind.TANK: Tank,
    EntityKind.PUMP: Pump,
    EntityKind.WELL: Well,
    EntityKind.ASSOCIATION: Association,
}
