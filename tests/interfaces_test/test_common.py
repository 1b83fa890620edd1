import json

import pytest
from pydantic import ValidationError

from interfaces.common import load_operations, load_state, run_dashboard
from services.entity_store_service import AssociationStatus, build_sample_snapshot
from tests.tools import FIXED_NOW


@pytest.fixture
def state_file(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(build_sample_snapshot(now=FIXED_NOW).model_dump_json(indent=2))
    return path


@pytest.fixture
def operations_file(tmp_path):
    path = tmp_path / "operations.json"
    path.write_text(
        json.dumps(
            {
                "operations": [
                    {"action": "toggle", "association_id": "A1"},
                    {"action": "toggle", "association_id": "A2"},
                    {"action": "remove", "association_id": "A404"},
                ]
            }
        )
    )
    return path


def test_load_state_defaults_to_sample_data():
    snapshot = load_state(None)

    assert [w.id for w in snapshot.wells] == ["W1", "W2", "W3"]


def test_load_state_from_file(state_file):
    snapshot = load_state(state_file)

    assert snapshot == build_sample_snapshot(now=FIXED_NOW)


def test_load_operations_defaults_to_nothing():
    assert load_operations(None).operations == []


def test_run_dashboard(state_file, operations_file):
    outcomes, snapshot = run_dashboard(
        state_file=state_file, operations_file=operations_file
    )

    assert [o.ok for o in outcomes] == [True, True, False]
    statuses = {a.id: a.status for a in snapshot.associations}
    assert statuses == {
        "A1": AssociationStatus.INACTIVE,
        "A2": AssociationStatus.ACTIVE,
    }


def test_run_dashboard_rejects_malformed_state(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"wells": [{"id": "W1"}]}))

    with pytest.raises(ValidationError):
        run_dashboard(state_file=path)
