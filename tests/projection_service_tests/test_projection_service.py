from datetime import timedelta

import numpy as np
import pytest

from services.entity_store_service import (
    Association,
    AssociationStatus,
    EntityKind,
    EntityStore,
    Pump,
)
from services.projection_service import (
    ProjectionService,
    ProjectionServiceConfig,
    estimate_daily_consumption,
)
from services.shared import EntityNotFoundError
from tests.tools import FIXED_NOW, make_tank, make_well


@pytest.fixture
def config() -> ProjectionServiceConfig:
    return ProjectionServiceConfig()


@pytest.fixture
def projection(sample_store, config) -> ProjectionService:
    return ProjectionService(sample_store, config)


def active_association(association_id, well_id, tank_id, target_ppm):
    return Association(
        id=association_id,
        well_id=well_id,
        tank_id=tank_id,
        pump_id="PM1",
        target_ppm=target_ppm,
        status=AssociationStatus.ACTIVE,
    )


def test_fill_ratio_boundary_is_not_low(projection):
    # TK-102 holds 300 of 1500
    assert projection.fill_ratio("T2") == pytest.approx(0.2)
    assert not projection.is_low_volume("T2")


def test_low_volume_below_threshold(config):
    store = EntityStore()
    store.insert(
        EntityKind.TANK,
        make_tank("T1", "Product A", capacity=1500.0, current_volume=299.0),
    )

    projection = ProjectionService(store, config)

    assert projection.is_low_volume("T1")
    assert [s.tank_id for s in projection.low_volume_tanks()] == ["T1"]


def test_low_volume_threshold_is_configurable(sample_store):
    projection = ProjectionService(
        sample_store, ProjectionServiceConfig(low_volume_threshold=0.7)
    )

    # T1 is at 60 %, T2 at 20 %, T3 at 90 %
    assert [s.tank_id for s in projection.low_volume_tanks()] == ["T1", "T2"]


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("LOW_VOLUME_THRESHOLD", "0.35")
    monkeypatch.setenv("HISTORY_HOURS", "12")

    config = ProjectionServiceConfig()

    assert config.low_volume_threshold == 0.35
    assert config.history_hours == 12


def test_estimated_consumption_sums_active_ppm(config):
    store = EntityStore()
    store.insert(EntityKind.WELL, make_well("W1", production_rate=500.0))
    store.insert(EntityKind.TANK, make_tank("T1", "Product A"))
    store.insert(EntityKind.TANK, make_tank("T2", "Product B"))
    store.insert(EntityKind.ASSOCIATION, active_association("A1", "W1", "T1", 150.0))
    store.insert(EntityKind.ASSOCIATION, active_association("A2", "W1", "T2", 50.0))
    store.insert(
        EntityKind.ASSOCIATION,
        active_association("A3", "W1", "T2", 400.0).with_status(
            AssociationStatus.INACTIVE
        ),
    )

    projection = ProjectionService(store, config)

    assert projection.estimated_consumption("W1") == pytest.approx(10.0)
    assert projection.active_chemical_count("W1") == 2


def test_estimated_consumption_without_active_associations(projection):
    assert projection.estimated_consumption("W2") == 0.0
    assert projection.estimated_consumption("W1") == pytest.approx(7.5)


def test_estimate_daily_consumption_formula():
    assert estimate_daily_consumption(1200.0, [50.0, 25.0]) == pytest.approx(9.0)
    assert estimate_daily_consumption(1200.0, []) == 0.0


def test_installed_pump_count(projection, sample_store):
    sample_store.insert(
        EntityKind.PUMP, Pump(id="PM9", name="P-101-B", tank_id="T1", max_rate=5.0)
    )

    assert projection.installed_pump_count("T1") == 2
    assert projection.installed_pump_count("T2") == 1
    assert projection.installed_pump_count("T99") == 0


def test_unknown_ids_raise(projection):
    with pytest.raises(EntityNotFoundError):
        projection.fill_ratio("T99")
    with pytest.raises(EntityNotFoundError):
        projection.estimated_consumption("W99")


def test_tank_statuses(projection):
    statuses = projection.tank_statuses()

    assert [s.tank_name for s in statuses] == ["TK-101", "TK-102", "TK-201"]
    assert statuses[0].fill_ratio == pytest.approx(0.6)
    assert statuses[0].installed_pumps == 1
    assert not any(s.low_volume for s in statuses)


def test_well_consumptions(projection):
    consumptions = {c.well_id: c for c in projection.well_consumptions()}

    assert consumptions["W1"].total_target_ppm == 150.0
    assert consumptions["W1"].active_chemical_count == 1
    assert consumptions["W2"].estimated_consumption == 0.0
    assert consumptions["W3"].active_chemical_count == 0


def test_system_snapshot(projection):
    snapshot = projection.system_snapshot()

    assert snapshot.total_wells == 3
    assert snapshot.total_tanks == 3
    assert snapshot.active_association_count == 1
    first = snapshot.per_association_detail[0]
    assert first.well_name == "Well-A1"
    assert first.tank_name == "TK-101"
    assert first.chemical == "Product A"
    assert first.volume_remaining == 1200.0
    assert first.well_production_rate == 500.0


def test_system_snapshot_with_dangling_references(projection, sample_store):
    sample_store.remove(EntityKind.WELL, "W1")
    sample_store.remove(EntityKind.TANK, "T1")

    detail = projection.system_snapshot().per_association_detail[0]

    assert detail.well_name == "Unknown"
    assert detail.tank_name == "Unknown"
    assert detail.chemical is None
    assert detail.volume_remaining is None
    assert detail.well_production_rate is None


def test_injection_history_shape(projection, config):
    history = projection.injection_history(
        "T1", rng=np.random.default_rng(7), now=FIXED_NOW
    )

    assert len(history) == config.history_hours
    assert history[-1].timestamp == FIXED_NOW.replace(minute=0)
    assert history[0].timestamp == history[-1].timestamp - timedelta(
        hours=config.history_hours - 1
    )
    assert history[0].tank_volume == 1200.0
    assert history[1].tank_volume == 1200.0 - config.history_hourly_drawdown
    for sample in history:
        assert (
            config.history_base_rate
            <= sample.injection_rate
            < config.history_base_rate + config.history_rate_jitter
        )


def test_injection_history_volume_never_negative(config):
    store = EntityStore()
    store.insert(
        EntityKind.TANK,
        make_tank("T1", "Product A", capacity=100.0, current_volume=8.0),
    )
    projection = ProjectionService(store, config)

    history = projection.injection_history("T1", hours=4, now=FIXED_NOW)

    assert [s.tank_volume for s in history] == [8.0, 3.0, 0.0, 0.0]


def test_injection_history_is_reproducible(projection):
    first = projection.injection_history(
        "T1", rng=np.random.default_rng(3), now=FIXED_NOW
    )
    second = projection.injection_history(
        "T1", rng=np.random.default_rng(3), now=FIXED_NOW
    )

    assert first == second


@pytest.mark.parametrize("hours", [0, -1])
def test_injection_history_rejects_non_positive_hours(projection, hours):
    with pytest.raises(ValueError):
        projection.injection_history("T1", hours=hours)


def test_dashboard_metrics_cover_active_associations(projection):
    metrics = projection.dashboard_metrics(rng=np.random.default_rng(1))

    assert [m.association_id for m in metrics] == ["A1"]
    assert metrics[0].chemical == "Product A"
    assert metrics[0].estimated_consumption == pytest.approx(7.5)
    assert metrics[0].current_rate == metrics[0].history[-1].injection_rate


def test_dashboard_metrics_with_missing_tank(projection, sample_store):
    sample_store.remove(EntityKind.TANK, "T1")

    metrics = projection.dashboard_metrics()

    assert metrics[0].chemical is None
    assert metrics[0].history == []
    assert metrics[0].current_rate == 0.0
