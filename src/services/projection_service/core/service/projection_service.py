from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np

from logger import get_logger
from services.entity_store_service import (
    Association,
    EntityKind,
    EntityStoreView,
    Tank,
    Well,
)
from services.projection_service.core.config import (
    ProjectionServiceConfig,
    get_projection_config,
)
from services.projection_service.core.models import (
    AssociationDetail,
    DashboardMetrics,
    InjectionSample,
    SystemSnapshot,
    TankStatus,
    WellConsumption,
)
from services.projection_service.core.utils import (
    estimate_daily_consumption,
    fill_ratio,
    is_below_threshold,
)
from services.shared import EntityNotFoundError

UNKNOWN_NAME = "Unknown"


class ProjectionService:
    """
    Read-only aggregates over an entity store, recomputed on every call.
    """

    def __init__(
        self,
        store: EntityStoreView,
        config: ProjectionServiceConfig | None = None,
    ):
        self._logger = get_logger(__name__)
        self._store = store
        self._config = config or get_projection_config()

    def fill_ratio(self, tank_id: str) -> float:
        tank = self._require_tank(tank_id)
        return fill_ratio(tank.current_volume, tank.capacity)

    def is_low_volume(self, tank_id: str) -> bool:
        return is_below_threshold(
            self.fill_ratio(tank_id), self._config.low_volume_threshold
        )

    def installed_pump_count(self, tank_id: str) -> int:
        # Counts pumps pointing at the id, whether or not the tank still exists
        return len(self._store.pumps_for_tank(tank_id))

    def estimated_consumption(self, well_id: str) -> float:
        well = self._require_well(well_id)
        return estimate_daily_consumption(
            well.production_rate,
            (a.target_ppm for a in self._active_associations(well.id)),
        )

    def active_chemical_count(self, well_id: str) -> int:
        well = self._require_well(well_id)
        chemicals = {
            tank.chemical_type
            for a in self._active_associations(well.id)
            if (tank := self._store.get_tank(a.tank_id)) is not None
        }
        return len(chemicals)

    def tank_statuses(self) -> list[TankStatus]:
        statuses = []
        for tank in self._tanks():
            ratio = fill_ratio(tank.current_volume, tank.capacity)
            statuses.append(
                TankStatus(
                    tank_id=tank.id,
                    tank_name=tank.name,
                    chemical_type=tank.chemical_type,
                    current_volume=tank.current_volume,
                    capacity=tank.capacity,
                    fill_ratio=ratio,
                    low_volume=is_below_threshold(
                        ratio, self._config.low_volume_threshold
                    ),
                    installed_pumps=self.installed_pump_count(tank.id),
                )
            )
        return statuses

    def low_volume_tanks(self) -> list[TankStatus]:
        return [status for status in self.tank_statuses() if status.low_volume]

    def well_consumptions(self) -> list[WellConsumption]:
        consumptions = []
        for well in self._wells():
            active = self._active_associations(well.id)
            ppms = [a.target_ppm for a in active]
            consumptions.append(
                WellConsumption(
                    well_id=well.id,
                    well_name=well.name,
                    production_rate=well.production_rate,
                    active_chemical_count=self.active_chemical_count(well.id),
                    total_target_ppm=float(np.sum(ppms)) if ppms else 0.0,
                    estimated_consumption=estimate_daily_consumption(
                        well.production_rate, ppms
                    ),
                )
            )
        return consumptions

    def system_snapshot(self) -> SystemSnapshot:
        associations = self._associations()
        details = []
        for association in associations:
            well = self._store.get_well(association.well_id)
            tank = self._store.get_tank(association.tank_id)
            details.append(
                AssociationDetail(
                    well_name=well.name if well else UNKNOWN_NAME,
                    tank_name=tank.name if tank else UNKNOWN_NAME,
                    status=association.status,
                    chemical=tank.chemical_type if tank else None,
                    volume_remaining=tank.current_volume if tank else None,
                    well_production_rate=well.production_rate if well else None,
                )
            )

        snapshot = SystemSnapshot(
            total_wells=len(self._wells()),
            total_tanks=len(self._tanks()),
            active_association_count=sum(1 for a in associations if a.is_active),
            per_association_detail=details,
        )
        self._logger.debug("Built system snapshot: %s", snapshot)
        return snapshot

    def injection_history(
        self,
        tank_id: str,
        hours: int | None = None,
        rng: np.random.Generator | None = None,
        now: datetime | None = None,
    ) -> list[InjectionSample]:
        """
        Synthetic hourly injection history for a tank, for charting only.

        Rates fluctuate uniformly around the configured baseline; the volume
        starts at the tank's current volume and drops by a fixed amount per
        hour, never below zero.

        Args:
            tank_id (str): Tank to simulate.
            hours (int | None): Number of samples. Defaults to the configured
                ``history_hours``.
            rng (np.random.Generator | None): Random generator to draw rates from.
            now (datetime | None): Timestamp of the last sample, truncated to the hour.

        Returns:
            list[InjectionSample]: Samples in chronological order.
        """
        tank = self._require_tank(tank_id)
        if hours is None:
            hours = self._config.history_hours
        if hours < 1:
            raise ValueError(f"hours must be at least 1, got {hours}")
        rng = rng or np.random.default_rng()

        rates = (
            self._config.history_base_rate
            + rng.random(hours) * self._config.history_rate_jitter
        )
        volumes = np.maximum(
            tank.current_volume
            - np.arange(hours) * self._config.history_hourly_drawdown,
            0.0,
        )
        end = (now or datetime.now(timezone.utc)).replace(
            minute=0, second=0, microsecond=0
        )
        start = end - timedelta(hours=hours - 1)

        return [
            InjectionSample(
                timestamp=start + timedelta(hours=i),
                tank_volume=float(volume),
                injection_rate=float(rate),
            )
            for i, (volume, rate) in enumerate(zip(volumes, rates))
        ]

    def dashboard_metrics(
        self, rng: np.random.Generator | None = None
    ) -> list[DashboardMetrics]:
        rng = rng or np.random.default_rng()
        metrics = []
        for association in self._associations():
            if not association.is_active:
                continue
            tank = self._store.get_tank(association.tank_id)
            well = self._store.get_well(association.well_id)
            history = self.injection_history(tank.id, rng=rng) if tank else []
            metrics.append(
                DashboardMetrics(
                    association_id=association.id,
                    tank_id=association.tank_id,
                    well_id=association.well_id,
                    chemical=tank.chemical_type if tank else None,
                    current_rate=history[-1].injection_rate if history else 0.0,
                    estimated_consumption=(
                        self.estimated_consumption(well.id) if well else 0.0
                    ),
                    history=history,
                )
            )
        return metrics

    def _active_associations(self, well_id: str) -> list[Association]:
        return [a for a in self._store.associations_for_well(well_id) if a.is_active]

    def _associations(self) -> list[Association]:
        return [
            a
            for a in self._store.list_entities(EntityKind.ASSOCIATION)
            if isinstance(a, Association)
        ]

    def _tanks(self) -> list[Tank]:
        return [
            t for t in self._store.list_entities(EntityKind.TANK) if isinstance(t, Tank)
        ]

    def _wells(self) -> list[Well]:
        return [
            w for w in self._store.list_entities(EntityKind.WELL) if isinstance(w, Well)
        ]

    def _require_tank(self, tank_id: str) -> Tank:
        tank = self._store.get_tank(tank_id)
        if tank is None:
            raise EntityNotFoundError(f"No tank with id '{tank_id}'")
        return tank

    def _require_well(self, well_id: str) -> Well:
        well = self._store.get_well(well_id)
        if well is None:
            raise EntityNotFoundError(f"No well with id '{well_id}'")
        return well
