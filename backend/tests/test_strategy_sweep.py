"""Tests for the strategy comparison script."""
import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "strategy_sweep.py"


@pytest.fixture(scope="module")
def sweep():
    spec = importlib.util.spec_from_file_location("strategy_sweep", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_run_sweep_covers_every_party_and_encounter(sweep):
    rows = sweep.run_sweep(size=1, seed=1, trials=50, normalization=20.0)
    # 4 single-class parties x 3 encounters
    assert len(rows) == 12
    for row in rows:
        assert set(row.chances) == set(sweep.STRATEGIES)
        assert row.spread >= 0


def test_pairs_include_repeated_classes(sweep):
    rows = sweep.run_sweep(size=2, seed=1, trials=20, normalization=20.0)
    assert ("Barbarian", "Barbarian") in {row.classes for row in rows}
