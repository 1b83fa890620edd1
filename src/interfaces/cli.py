import argparse
import json

from logger import configure_logger, get_logger
from interfaces.common import load_operations, load_state, log_status_report
from orchestration.dashboard_service import DashboardService
from services.entity_store_service import EntityStore


def cli():
    """
    Main function to parse command-line arguments and run the injection dashboard headless.
    """
    parser = argparse.ArgumentParser(
        description="CLI to apply well-tank association operations and report injection status."
    )

    parser.add_argument(
        "--state-file",
        type=str,
        required=False,
        help="Path to a JSON snapshot of sites, products, tanks, pumps, wells and associations. Defaults to the built-in sample data.",
    )
    parser.add_argument(
        "--operations-file",
        type=str,
        required=False,
        help="Path to a JSON file with the association operations (create, toggle, remove) to apply in order.",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        required=False,
        help="Path where the final snapshot is written as JSON.",
    )
    parser.add_argument(
        "--insights",
        action="store_true",
        help="Request an AI-generated operational summary. Requires ANTHROPIC_API_KEY.",
    )

    args = parser.parse_args()

    configure_logger()
    logger = get_logger(__name__)
    logger.info("Injection dashboard started from CLI.")

    try:
        snapshot = load_state(args.state_file)
        operations = load_operations(args.operations_file)
    except Exception as e:
        logger.error(f"Failed to load input files: {e}")
        exit(1)

    service = DashboardService(store=EntityStore.from_snapshot(snapshot))
    for outcome in service.apply_operations(operations):
        if outcome.error:
            logger.warning(f"{outcome.operation.action}: {outcome.error}")
        elif outcome.ok:
            logger.info(
                f"{outcome.operation.action} {outcome.result.association.id}: "
                f"{outcome.result.association.status}"
            )
        else:
            logger.warning(
                f"{outcome.operation.action} rejected: {outcome.result.message}"
            )

    log_status_report(service)

    if args.insights:
        logger.info(f"Insights:\n{service.generate_insights()}")

    if args.output_file:
        with open(args.output_file, "w") as file:
            json.dump(service.snapshot().model_dump(mode="json"), file, indent=2)
        logger.info(f"Final snapshot written to {args.output_file}")
