"""Tests for the pretrained-model estimator and the estimator factory."""
import pytest

from hero_squad.models.party import Encounter
from hero_squad.services.estimators import (
    BayesEstimator,
    EstimatorUnavailableError,
    ModelEstimator,
    MonteCarloEstimator,
    WeightedEstimator,
    build_model_features,
    get_estimator,
)
from hero_squad.utils.class_templates import create_character


class FixedModel:
    """Stand-in predictor that records its input."""

    def __init__(self, probability: float):
        self.probability = probability
        self.seen: list[list[float]] = []

    def predict(self, features: list[float]) -> float:
        self.seen.append(features)
        return self.probability


@pytest.fixture
def party():
    return [create_character("Grok", "Barbarian"), create_character("Ilya", "Mage")]


def test_feature_vector(party):
    features = build_model_features(party, Encounter("Dragon Fight"))
    assert features == [2, 30, 30, 20, 30, 20, 30, 1, 1, 0, 0, 1, 0, 0]


def test_feature_vector_unknown_event(party):
    features = build_model_features(party, Encounter("Goblin Ambush"))
    assert features[-3:] == [0, 0, 0]


def test_model_prediction_scaled_to_percent(party):
    model = FixedModel(0.73)
    assert ModelEstimator(model).estimate(party, Encounter("Ancient Trap")) == 73
    assert len(model.seen) == 1


def test_model_prediction_clamped(party):
    assert ModelEstimator(FixedModel(1.0)).estimate(party, Encounter("Dragon Fight")) == 95
    assert ModelEstimator(FixedModel(0.0)).estimate(party, Encounter("Dragon Fight")) == 5


def test_missing_model_raises(party):
    with pytest.raises(EstimatorUnavailableError):
        ModelEstimator().estimate(party, Encounter("Dragon Fight"))


def test_missing_model_empty_party_still_sentinel():
    assert ModelEstimator().estimate([], Encounter("Dragon Fight")) == 50


@pytest.mark.parametrize(
    "name, cls",
    [
        ("weighted", WeightedEstimator),
        ("monte_carlo", MonteCarloEstimator),
        ("bayes", BayesEstimator),
        ("model", ModelEstimator),
    ],
)
def test_factory_builds_each_strategy(name, cls):
    estimator = get_estimator(name)
    assert isinstance(estimator, cls)
    assert estimator.name == name


def test_factory_passes_options():
    estimator = get_estimator("monte_carlo", trials=250, seed=7)
    assert estimator.trials == 250
    assert estimator.seed == 7
    assert get_estimator("weighted", normalization=35).normalization == 35


def test_factory_unknown_strategy():
    with pytest.raises(ValueError):
        get_estimator("astrology")
