from __future__ import annotations

from datetime import datetime, timezone

from services.entity_store_service.core.models import (
    Association,
    AssociationStatus,
    EntityStoreSnapshot,
    Product,
    Pump,
    Site,
    Tank,
    Well,
)


def build_sample_snapshot(now: datetime | None = None) -> EntityStoreSnapshot:
    """
    Fixed demonstration data set: two sites, six products, three tanks with
    one pump each, three wells and two associations (one running).

    TK-102 is deliberately seeded at 20 % fill, right on the low-volume
    boundary.
    """
    now = now or datetime.now(timezone.utc)

    return EntityStoreSnapshot(
        sites=[
            Site(id="S1", name="Permian Alpha", location="Texas"),
            Site(id="S2", name="Bakken Bravo", location="North Dakota"),
        ],
        products=[
            Product(id="P1", name="Product A"),
            Product(id="P2", name="Product B"),
            Product(id="P3", name="Product C"),
            Product(id="P4", name="Product D"),
            Product(id="P5", name="Corrosion Inhibitor"),
            Product(id="P6", name="Scale Inhibitor"),
        ],
        tanks=[
            Tank(
                id="T1",
                name="TK-101",
                site_id="S1",
                capacity=2000.0,
                material="Stainless Steel",
                current_volume=1200.0,
                last_updated=now,
                chemical_type="Product A",
            ),
            Tank(
                id="T2",
                name="TK-102",
                site_id="S1",
                capacity=1500.0,
                material="Polyethylene",
                current_volume=300.0,
                last_updated=now,
                chemical_type="Corrosion Inhibitor",
            ),
            Tank(
                id="T3",
                name="TK-201",
                site_id="S2",
                capacity=5000.0,
                material="Carbon Steel",
                current_volume=4500.0,
                last_updated=now,
                chemical_type="Product C",
            ),
        ],
        pumps=[
            Pump(id="PM1", name="P-101-A", tank_id="T1", max_rate=20.0),
            Pump(id="PM2", name="P-102-A", tank_id="T2", max_rate=15.0),
            Pump(id="PM3", name="P-201-A", tank_id="T3", max_rate=50.0),
        ],
        wells=[
            Well(id="W1", name="Well-A1", site_id="S1", production_rate=500.0),
            Well(id="W2", name="Well-A2", site_id="S1", production_rate=1200.0),
            Well(id="W3", name="Well-B1", site_id="S2", production_rate=800.0),
        ],
        associations=[
            Association(
                id="A1",
                well_id="W1",
                tank_id="T1",
                pump_id="PM1",
                target_ppm=150.0,
                status=AssociationStatus.ACTIVE,
            ),
            Association(
                id="A2",
                well_id="W2",
                tank_id="T2",
                pump_id="PM2",
                target_ppm=50.0,
                status=AssociationStatus.INACTIVE,
            ),
        ],
    )
