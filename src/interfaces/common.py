import json
from pathlib import Path

from logger import configure_logger, get_logger
from orchestration.dashboard_service import (
    DashboardService,
    OperationOutcome,
    OperationsDefinition,
)
from services.entity_store_service import (
    EntityStore,
    EntityStoreSnapshot,
    build_sample_snapshot,
)


def load_state(state_file: str | Path | None) -> EntityStoreSnapshot:
    """
    Load an entity store snapshot from a JSON file, or the sample data set
    when no file is given.
    """
    if state_file is None:
        return build_sample_snapshot()
    with open(state_file, "r") as file:
        return EntityStoreSnapshot.model_validate(json.load(file))


def load_operations(operations_file: str | Path | None) -> OperationsDefinition:
    if operations_file is None:
        return OperationsDefinition()
    with open(operations_file, "r") as file:
        return OperationsDefinition.model_validate(json.load(file))


def log_status_report(service: DashboardService) -> None:
    logger = get_logger(__name__)
    for status in service.tank_statuses():
        logger.info(
            "Tank %s (%s): %.1f/%.1f L (%.0f%%)%s, %d pump(s)",
            status.tank_name,
            status.chemical_type,
            status.current_volume,
            status.capacity,
            status.fill_ratio * 100,
            " LOW" if status.low_volume else "",
            status.installed_pumps,
        )
    for consumption in service.well_consumptions():
        logger.info(
            "Well %s: %d active chemical(s), estimated %.2f L/day",
            consumption.well_name,
            consumption.active_chemical_count,
            consumption.estimated_consumption,
        )


def run_dashboard(
    state_file: str | Path | None = None,
    operations_file: str | Path | None = None,
    insights: bool = False,
) -> tuple[list[OperationOutcome], EntityStoreSnapshot]:
    """
    Run the dashboard headless without using argparse.

    Args:
        state_file (str | Path | None): JSON snapshot to start from. Defaults to
            the sample data set.
        operations_file (str | Path | None): JSON list of association operations
            to apply in order.
        insights (bool): Request an advisory summary after the operations.

    Returns:
        The outcome of every operation and the final store snapshot.
    """
    configure_logger()
    logger = get_logger(__name__)
    logger.info("Injection dashboard started programmatically.")

    try:
        snapshot = load_state(state_file)
        operations = load_operations(operations_file)
    except Exception as e:
        logger.error("Failed to load input files: %s", e)
        raise

    service = DashboardService(store=EntityStore.from_snapshot(snapshot))
    outcomes = service.apply_operations(operations)
    for outcome in outcomes:
        if outcome.error:
            logger.warning("%s: %s", outcome.operation.action, outcome.error)
        elif not outcome.ok:
            logger.warning(
                "%s rejected: %s", outcome.operation.action, outcome.result.message
            )

    log_status_report(service)
    if insights:
        logger.info("Insights:\n%s", service.generate_insights())

    return outcomes, service.snapshot()
