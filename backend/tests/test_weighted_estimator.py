"""Tests for the weighted-sum outcome estimator."""
import pytest

from hero_squad.models.party import Character, Encounter
from hero_squad.services.estimators import EMPTY_PARTY_CHANCE, WeightedEstimator
from hero_squad.utils.class_templates import create_character


def _uniform(name: str, value: float, character_class: str = "Barbarian") -> Character:
    return Character(name, character_class, value, value, value, value, value, value)


@pytest.fixture
def estimator():
    return WeightedEstimator()


def test_barbarian_vs_dragon(estimator):
    # 93.5 / (1 * 6.6 * 20) = 70.8% -> * 0.85 -> 60
    party = [create_character("Grok", "Barbarian")]
    assert estimator.estimate(party, Encounter("Dragon Fight")) == 60


def test_mage_vs_puzzle(estimator):
    # 96.5 / (1 * 6.2 * 20) = 77.8% -> * 1.0 -> 78
    party = [create_character("Ilya", "Mage")]
    assert estimator.estimate(party, Encounter("Mystic Puzzle")) == 78


def test_floor_is_scaled_by_difficulty(estimator):
    """Weak parties hit the 15% floor, then the difficulty multiplier."""
    party = [_uniform("Weakling", 1)]
    assert estimator.estimate(party, Encounter("Dragon Fight")) == 13


def test_ceiling(estimator):
    party = [_uniform("Titan", 80)]
    assert estimator.estimate(party, Encounter("Mystic Puzzle")) == 95
    assert estimator.estimate(party, Encounter("Dragon Fight")) == 81


def test_smaller_normalization_raises_chance():
    party = [_uniform("Average", 8)]
    encounter = Encounter("Ancient Trap")
    assert WeightedEstimator(normalization=10).estimate(party, encounter) > WeightedEstimator(
        normalization=40
    ).estimate(party, encounter)


def test_invalid_normalization():
    with pytest.raises(ValueError):
        WeightedEstimator(normalization=0)


def test_order_invariant(estimator):
    party = [
        create_character("Grok", "Barbarian"),
        create_character("Ilya", "Mage"),
        create_character("Vex", "Rogue"),
    ]
    encounter = Encounter("Ancient Trap")
    forward = estimator.estimate(party, encounter)
    assert estimator.estimate(list(reversed(party)), encounter) == forward
    assert estimator.estimate([party[1], party[2], party[0]], encounter) == forward


def test_empty_party_sentinel(estimator):
    assert estimator.estimate([], Encounter("Dragon Fight")) == EMPTY_PARTY_CHANCE
