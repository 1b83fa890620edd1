from datetime import datetime, timezone

from services.entity_store_service import Tank, Well

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def make_tank(
    tank_id: str,
    chemical_type: str,
    site_id: str = "S1",
    capacity: float = 1000.0,
    current_volume: float = 500.0,
) -> Tank:
    return Tank(
        id=tank_id,
        name=f"TK-{tank_id}",
        site_id=site_id,
        capacity=capacity,
        material="Stainless Steel",
        current_volume=current_volume,
        last_updated=FIXED_NOW,
        chemical_type=chemical_type,
    )


def make_well(
    well_id: str, production_rate: float = 500.0, site_id: str = "S1"
) -> Well:
    return Well(
        id=well_id,
        name=f"Well-{well_id}",
        site_id=site_id,
        production_rate=production_rate,
    )
