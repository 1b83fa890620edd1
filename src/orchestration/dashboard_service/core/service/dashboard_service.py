from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

import numpy as np

from logger import get_logger
from orchestration.dashboard_service.core.models import (
    CreateAssociationOperation,
    OperationOutcome,
    OperationsDefinition,
    Operator,
    RemoveAssociationOperation,
    Role,
    ToggleAssociationOperation,
)
from services.advisory_service import AdvisoryService
from services.association_lifecycle_service import (
    AssociationLifecycleService,
    AssociationOperationResult,
)
from services.entity_store_service import (
    Entity,
    EntityKind,
    EntityStore,
    EntityStoreSnapshot,
    Product,
    Pump,
    Site,
    Tank,
    Well,
    build_sample_snapshot,
)
from services.projection_service import (
    DashboardMetrics,
    ProjectionService,
    ProjectionServiceConfig,
    TankStatus,
    WellConsumption,
    get_projection_config,
)
from services.shared import (
    AccessDeniedError,
    AssociationNotFoundError,
    DuplicateEntityError,
    EntityNotFoundError,
    is_blank,
    new_entity_id,
)


class DashboardService:
    """
    Facade used by the presentation layer.

    Owns one entity store and routes every association change through the
    lifecycle service. Catalog registration (products, tanks, wells) is
    reserved to operators with the SALES role.
    """

    def __init__(
        self,
        store: EntityStore | None = None,
        operator: Operator | None = None,
        advisory_service: AdvisoryService | None = None,
        projection_config: ProjectionServiceConfig | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        """
        Initialize the DashboardService.

        Args:
            store (EntityStore | None): Store to manage. Defaults to a store
                seeded with the sample data set.
            operator (Operator | None): Logged-in operator, required for
                catalog registration.
            advisory_service (AdvisoryService | None): Advisory boundary.
            projection_config (ProjectionServiceConfig | None): Projection settings.
            id_factory (Callable[[], str] | None): Generator for association ids.
        """
        self.logger = get_logger(__name__)
        self._store = (
            store
            if store is not None
            else EntityStore.from_snapshot(build_sample_snapshot())
        )
        self._operator = operator
        projection_config = projection_config or get_projection_config()
        self._lifecycle = AssociationLifecycleService(self._store, id_factory)
        self._projection = ProjectionService(self._store, projection_config)
        self._advisory = advisory_service or AdvisoryService(
            low_volume_threshold=projection_config.low_volume_threshold
        )
        self.logger.info(
            "DashboardService ready for operator %s",
            f"{operator.name} ({operator.role})" if operator else "<anonymous>",
        )

    @property
    def operator(self) -> Operator | None:
        return self._operator

    def snapshot(self) -> EntityStoreSnapshot:
        return self._store.snapshot()

    # Entity access

    def list_entities(self, kind: EntityKind) -> list[Entity]:
        return self._store.list_entities(kind)

    def get_entity(self, kind: EntityKind, entity_id: str) -> Entity | None:
        return self._store.get(kind, entity_id)

    def candidate_tanks(self, well_id: str | None = None) -> list[Tank]:
        """Tanks that can be linked to the well, i.e. those on the same site."""
        tanks = [
            t for t in self._store.list_entities(EntityKind.TANK) if isinstance(t, Tank)
        ]
        if well_id is None:
            return tanks
        well = self._store.get_well(well_id)
        if well is None:
            raise EntityNotFoundError(f"No well with id '{well_id}'")
        return [t for t in tanks if t.site_id == well.site_id]

    def available_pumps(self, tank_id: str) -> list[Pump]:
        return self._store.pumps_for_tank(tank_id)

    # Association lifecycle

    def create_association(
        self,
        well_id: str,
        tank_id: str,
        pump_id: str,
        target_ppm: float,
        association_id: str | None = None,
    ) -> AssociationOperationResult:
        return self._lifecycle.create(
            well_id, tank_id, pump_id, target_ppm, association_id=association_id
        )

    def toggle_association(self, association_id: str) -> AssociationOperationResult:
        return self._lifecycle.toggle(association_id)

    def remove_association(self, association_id: str) -> AssociationOperationResult:
        return self._lifecycle.remove(association_id)

    def apply_operations(
        self, definition: OperationsDefinition | dict[str, Any]
    ) -> list[OperationOutcome]:
        if not isinstance(definition, OperationsDefinition):
            definition = OperationsDefinition.model_validate(definition)
        self.logger.info("Applying %d operation(s).", len(definition.operations))

        outcomes = []
        for operation in definition.operations:
            try:
                if isinstance(operation, CreateAssociationOperation):
                    result = self.create_association(
                        operation.well_id,
                        operation.tank_id,
                        operation.pump_id,
                        operation.target_ppm,
                        association_id=operation.association_id,
                    )
                elif isinstance(operation, ToggleAssociationOperation):
                    result = self.toggle_association(operation.association_id)
                elif isinstance(operation, RemoveAssociationOperation):
                    result = self.remove_association(operation.association_id)
                else:
                    raise TypeError(f"Unsupported operation: {type(operation)}")
            except (AssociationNotFoundError, DuplicateEntityError) as e:
                self.logger.warning("Skipped %s: %s", operation.action, e)
                outcomes.append(OperationOutcome(operation=operation, error=str(e)))
                continue
            outcomes.append(OperationOutcome(operation=operation, result=result))
        return outcomes

    # Projections

    def fill_ratio(self, tank_id: str) -> float:
        return self._projection.fill_ratio(tank_id)

    def estimated_consumption(self, well_id: str) -> float:
        return self._projection.estimated_consumption(well_id)

    def installed_pump_count(self, tank_id: str) -> int:
        return self._projection.installed_pump_count(tank_id)

    def tank_statuses(self) -> list[TankStatus]:
        return self._projection.tank_statuses()

    def low_volume_tanks(self) -> list[TankStatus]:
        return self._projection.low_volume_tanks()

    def well_consumptions(self) -> list[WellConsumption]:
        return self._projection.well_consumptions()

    def dashboard_metrics(
        self, rng: np.random.Generator | None = None
    ) -> list[DashboardMetrics]:
        return self._projection.dashboard_metrics(rng=rng)

    def generate_insights(self) -> str:
        return self._advisory.summarize(self._projection.system_snapshot())

    # Catalog registration

    def register_product(self, name: str, category: str | None = None) -> Product:
        self._require_role(Role.SALES)
        if is_blank(name):
            raise ValueError("Product name must not be blank")
        product = Product(id=new_entity_id("P"), name=name, category=category)
        self._store.insert(EntityKind.PRODUCT, product)
        self.logger.info("Registered product %s (%s)", product.name, product.id)
        return product

    def delete_product(self, product_id: str) -> Product:
        """
        Remove a product from the catalog. Tanks loaded with it keep their
        chemical type; nothing is cascaded.
        """
        self._require_role(Role.SALES)
        product = self._store.remove(EntityKind.PRODUCT, product_id)
        if not isinstance(product, Product):
            raise EntityNotFoundError(f"No product with id '{product_id}'")
        self.logger.info("Deleted product %s (%s)", product.name, product.id)
        return product

    def register_tank(
        self,
        name: str,
        site_id: str,
        capacity: float,
        material: str,
        chemical_type: str,
        pump_name: str | None = None,
        pump_max_rate: float | None = None,
    ) -> tuple[Tank, Pump | None]:
        self._require_role(Role.SALES)
        self._require_site(site_id)
        product_names = {
            p.name
            for p in self._store.list_entities(EntityKind.PRODUCT)
            if isinstance(p, Product)
        }
        if chemical_type not in product_names:
            raise ValueError(f"Unknown chemical type '{chemical_type}'")

        # Build both before inserting either so a bad pump leaves no tank behind
        tank = Tank(
            id=new_entity_id("T"),
            name=name,
            site_id=site_id,
            capacity=capacity,
            material=material,
            current_volume=capacity,
            last_updated=datetime.now(timezone.utc),
            chemical_type=chemical_type,
        )
        pump = None
        if not is_blank(pump_name):
            pump = Pump(
                id=new_entity_id("PM"),
                name=pump_name,
                tank_id=tank.id,
                max_rate=pump_max_rate,
            )

        self._store.insert(EntityKind.TANK, tank)
        if pump is not None:
            self._store.insert(EntityKind.PUMP, pump)
        self.logger.info(
            "Registered tank %s (%s) with %s",
            tank.name,
            tank.id,
            f"pump {pump.name} ({pump.id})" if pump else "no pump",
        )
        return tank, pump

    def register_well(self, name: str, site_id: str, production_rate: float) -> Well:
        self._require_role(Role.SALES)
        self._require_site(site_id)
        well = Well(
            id=new_entity_id("W"),
            name=name,
            site_id=site_id,
            production_rate=production_rate,
        )
        self._store.insert(EntityKind.WELL, well)
        self.logger.info("Registered well %s (%s)", well.name, well.id)
        return well

    def _require_role(self, role: Role) -> None:
        if self._operator is None or self._operator.role != role:
            raise AccessDeniedError(f"This action requires the {role} role")

    def _require_site(self, site_id: str) -> Site:
        site = self._store.get(EntityKind.SITE, site_id)
        if not isinstance(site, Site):
            raise EntityNotFoundError(f"No site with id '{site_id}'")
        return site
