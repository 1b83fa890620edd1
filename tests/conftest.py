import numpy as np
import pytest

from services.entity_store_service import EntityStore, build_sample_snapshot
from tests.tools import FIXED_NOW


@pytest.fixture(autouse=True)
def mock_default_rng(monkeypatch):
    original_default_rng = np.random.default_rng

    def mocked_default_rng(seed=None):
        if seed is None:
            # Use the legacy random state to generate a seed
            seed = np.random.randint(0, 2**31 - 1)
        return original_default_rng(seed)

    monkeypatch.setattr(np.random, "default_rng", mocked_default_rng)


@pytest.fixture
def sample_store() -> EntityStore:
    return EntityStore.from_snapshot(build_sample_snapshot(now=FIXED_NOW))


@pytest.fixture
def empty_store() -> EntityStore:
    return EntityStore()
