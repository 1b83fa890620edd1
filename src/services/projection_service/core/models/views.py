from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from services.entity_store_service import AssociationStatus


class TankStatus(BaseModel, extra="forbid", frozen=True):
    tank_id: str
    tank_name: str
    chemical_type: str
    current_volume: float
    capacity: float
    fill_ratio: float
    low_volume: bool
    installed_pumps: int


class WellConsumption(BaseModel, extra="forbid", frozen=True):
    well_id: str
    well_name: str
    production_rate: float
    active_chemical_count: int
    total_target_ppm: float
    estimated_consumption: float  # L/day


class AssociationDetail(BaseModel, extra="forbid", frozen=True):
    """
    One association as seen by the advisory generator. Dangling references
    show up as an "Unknown" name and ``None`` values.
    """

    well_name: str
    tank_name: str
    status: AssociationStatus
    chemical: str | None = Field(default=None)
    volume_remaining: float | None = Field(default=None)
    well_production_rate: float | None = Field(default=None)


class SystemSnapshot(BaseModel, extra="forbid", frozen=True):
    total_wells: int
    total_tanks: int
    active_association_count: int
    per_association_detail: list[AssociationDetail] = Field(default_factory=list)


class InjectionSample(BaseModel, extra="forbid", frozen=True):
    timestamp: datetime
    tank_volume: float  # L
    injection_rate: float  # L/hr


class DashboardMetrics(BaseModel, extra="forbid", frozen=True):
    association_id: str
    tank_id: str
    well_id: str
    chemical: str | None
    current_rate: float  # L/hr
    estimated_consumption: float  # L/day
    history: list[InjectionSample] = Field(default_factory=list)
