import math
from concurrent.futures import ThreadPoolExecutor
from itertools import count

import pytest

from services.association_lifecycle_service import (
    AssociationLifecycleService,
    AssociationOperationResult,
)
from services.association_rule_service import Decision, RejectionReason
from services.entity_store_service import (
    AssociationStatus,
    EntityKind,
    Pump,
)
from services.shared import AssociationNotFoundError, DuplicateEntityError
from tests.tools import make_tank


@pytest.fixture
def sequential_ids():
    counter = count(100)
    return lambda: f"A{next(counter)}"


@pytest.fixture
def lifecycle(sample_store, sequential_ids) -> AssociationLifecycleService:
    return AssociationLifecycleService(sample_store, id_factory=sequential_ids)


def add_tank(store, tank_id, chemical, site_id="S1"):
    store.insert(EntityKind.TANK, make_tank(tank_id, chemical, site_id=site_id))
    store.insert(
        EntityKind.PUMP,
        Pump(id=f"PM{tank_id}", name=f"P-{tank_id}", tank_id=tank_id, max_rate=10.0),
    )


def test_create_is_always_inactive(lifecycle, sample_store):
    result = lifecycle.create("W1", "T1", "PM1", 150)

    assert result.ok
    assert result.association.id == "A100"
    assert result.association.status == AssociationStatus.INACTIVE
    assert result.association.target_ppm == 150.0
    assert sample_store.get_association("A100") == result.association


def test_create_with_explicit_id(lifecycle, sample_store):
    result = lifecycle.create("W3", "T3", "PM3", 80, association_id="A-NEW")

    assert result.ok
    assert sample_store.get_association("A-NEW").status == AssociationStatus.INACTIVE


def test_create_with_taken_explicit_id_raises(lifecycle):
    with pytest.raises(DuplicateEntityError):
        lifecycle.create("W3", "T3", "PM3", 80, association_id="A1")


def test_generated_id_skips_taken_ids(sample_store):
    ids = iter(["A1", "A2", "A3"])
    lifecycle = AssociationLifecycleService(sample_store, id_factory=lambda: next(ids))

    assert lifecycle.create("W3", "T3", "PM3", 80).association.id == "A3"


def test_generated_id_gives_up_when_ids_stay_taken(sample_store):
    lifecycle = AssociationLifecycleService(sample_store, id_factory=lambda: "A1")
    before = sample_store.snapshot()

    with pytest.raises(DuplicateEntityError):
        lifecycle.create("W3", "T3", "PM3", 80)

    assert sample_store.snapshot() == before


def test_default_ids_are_prefixed(sample_store):
    lifecycle = AssociationLifecycleService(sample_store)

    association = lifecycle.create("W3", "T3", "PM3", 80).association

    assert association.id.startswith("A")
    assert len(association.id) > 1


@pytest.mark.parametrize("target_ppm", [0, -10.0, math.nan, math.inf])
def test_create_rejects_bad_ppm(lifecycle, sample_store, target_ppm):
    before = sample_store.snapshot().model_dump_json()

    result = lifecycle.create("W1", "T1", "PM1", target_ppm)

    assert not result.ok
    assert result.reason == RejectionReason.InvalidSelection
    assert sample_store.snapshot().model_dump_json() == before


def test_pump_sharing_across_wells(lifecycle):
    first = lifecycle.create("W1", "T1", "PM1", 100)
    second = lifecycle.create("W2", "T1", "PM1", 100)

    assert first.ok and second.ok


def test_toggle_inactive_to_active(lifecycle, sample_store):
    add_tank(sample_store, "TB", "Product B")
    created = lifecycle.create("W3", "TB", "PMTB", 40).association

    result = lifecycle.toggle(created.id)

    assert result.ok
    assert result.association.status == AssociationStatus.ACTIVE
    assert sample_store.get_association(created.id).is_active


def test_toggle_active_to_inactive_always_succeeds(lifecycle, sample_store):
    # Remove the tank so activation would fail; deactivation must not care
    sample_store.remove(EntityKind.TANK, "T1")

    result = lifecycle.toggle("A1")

    assert result.ok
    assert result.association.status == AssociationStatus.INACTIVE


def test_toggle_keeps_association_position(lifecycle, sample_store):
    lifecycle.toggle("A1")

    ids = [a.id for a in sample_store.list_entities(EntityKind.ASSOCIATION)]
    assert ids == ["A1", "A2"]


def test_interlock_rejects_activation_without_mutation(lifecycle, sample_store):
    add_tank(sample_store, "TC", "Product C")
    created = lifecycle.create("W1", "TC", "PMTC", 60).association
    before = sample_store.snapshot().model_dump_json()

    result = lifecycle.toggle(created.id)

    assert not result.ok
    assert result.reason == RejectionReason.IncompatibleChemicals
    assert result.message.startswith("Safety interlock")
    assert sample_store.snapshot().model_dump_json() == before


def test_interlock_clears_after_deactivation(lifecycle, sample_store):
    add_tank(sample_store, "TC", "Product C")
    created = lifecycle.create("W1", "TC", "PMTC", 60).association

    assert lifecycle.toggle("A1").association.status == AssociationStatus.INACTIVE
    assert lifecycle.toggle(created.id).ok


def test_toggle_with_missing_tank_is_rejected(lifecycle, sample_store):
    sample_store.remove(EntityKind.TANK, "T2")
    before = sample_store.snapshot().model_dump_json()

    result = lifecycle.toggle("A2")

    assert result.reason == RejectionReason.TankNotFound
    assert sample_store.snapshot().model_dump_json() == before


def test_too_many_chemicals_leaves_store_untouched(lifecycle, sample_store):
    add_tank(sample_store, "TB", "Product B")
    add_tank(sample_store, "TD", "Product D")
    assert lifecycle.create("W2", "TB", "PMTB", 10).ok
    assert lifecycle.create("W2", "TD", "PMTD", 10).ok
    before = sample_store.snapshot().model_dump_json()

    rejected = lifecycle.create("W2", "T1", "PM1", 10)
    assert rejected.reason == RejectionReason.TooManyChemicals
    assert rejected.message == "Maximum 3 different chemicals allowed per well."
    assert sample_store.snapshot().model_dump_json() == before

    # Another tank of an already-present chemical stays within the cap
    assert lifecycle.create("W2", "T2", "PM2", 10).ok


def test_invalid_selection_leaves_store_untouched(lifecycle, sample_store):
    before = sample_store.snapshot().model_dump_json()

    result = lifecycle.create("W99", "T1", "PM1", 10)

    assert result.reason == RejectionReason.InvalidSelection
    assert sample_store.snapshot().model_dump_json() == before


def test_toggle_unknown_association_raises(lifecycle):
    with pytest.raises(AssociationNotFoundError):
        lifecycle.toggle("A99")


def test_remove_is_unconditional(lifecycle, sample_store):
    result = lifecycle.remove("A1")

    assert result.ok
    assert result.association.id == "A1"
    assert sample_store.get_association("A1") is None
    # Tank, pump and well are untouched
    assert sample_store.get_tank("T1") is not None
    assert sample_store.get_well("W1") is not None


def test_remove_unknown_association_raises(lifecycle):
    with pytest.raises(AssociationNotFoundError):
        lifecycle.remove("A99")


def test_result_must_match_outcome():
    with pytest.raises(ValueError):
        AssociationOperationResult(ok=True)
    with pytest.raises(ValueError):
        AssociationOperationResult(ok=False)
    with pytest.raises(ValueError):
        AssociationOperationResult.rejected(Decision.accept())


def test_concurrent_activations_respect_interlock(lifecycle, sample_store):
    lifecycle.toggle("A1")
    add_tank(sample_store, "TC", "Product C")
    candidates = [lifecycle.create("W1", "T1", "PM1", 10).association.id]
    candidates += [lifecycle.create("W1", "TC", "PMTC", 10).association.id]
    candidates *= 8

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(lifecycle.toggle, candidates))

    active_chemicals = {
        sample_store.get_tank(a.tank_id).chemical_type
        for a in sample_store.associations_for_well("W1")
        if a.is_active
    }
    assert active_chemicals != {"Product A", "Product C"}
