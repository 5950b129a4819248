"""Outcome estimator backed by an externally trained model.

The model is any object with `predict(features) -> float` returning a
success probability. Loading it from disk is the caller's job; this module
only knows the feature layout.
"""
import logging
from typing import Optional, Protocol, Sequence

from hero_squad.models.party import Character, Encounter
from hero_squad.services.estimators.base import (
    EstimatorUnavailableError,
    OutcomeEstimator,
    clamp_percent,
)
from hero_squad.utils.class_templates import BANDIT, BARBARIAN, MAGE, ROGUE
from hero_squad.utils.stat_tables import ANCIENT_TRAP, DRAGON_FIGHT, MYSTIC_PUZZLE

logger = logging.getLogger(__name__)

FEATURE_NAMES = (
    "party_size",
    "total_strength",
    "total_health",
    "total_agility",
    "total_mana",
    "total_dexterity",
    "total_wisdom",
    "num_mages",
    "num_barbarians",
    "num_rogues",
    "num_bandits",
    "is_dragon_fight",
    "is_ancient_trap",
    "is_mystic_puzzle",
)


class PartyModel(Protocol):
    """A pretrained predictor of party success probability."""

    def predict(self, features: list[float]) -> float:
        ...


def build_model_features(party: Sequence[Character], encounter: Encounter) -> list[float]:
    """Flatten a party and encounter into the model's input vector (FEATURE_NAMES order)."""

    def total(stat: str) -> float:
        return float(sum(character.stat(stat) for character in party))

    def count(character_class: str) -> float:
        return float(sum(1 for character in party if character.character_class == character_class))

    event_type = encounter.event_type
    return [
        float(len(party)),
        total("strength"),
        total("health"),
        total("agility"),
        total("mana"),
        total("dexterity"),
        total("wisdom"),
        count(MAGE),
        count(BARBARIAN),
        count(ROGUE),
        count(BANDIT),
        1.0 if event_type == DRAGON_FIGHT else 0.0,
        1.0 if event_type == ANCIENT_TRAP else 0.0,
        1.0 if event_type == MYSTIC_PUZZLE else 0.0,
    ]


class ModelEstimator(OutcomeEstimator):
    """Delegates the estimate to a pretrained model."""

    name = "model"

    def __init__(self, model: Optional[PartyModel] = None):
        self.model = model

    def _estimate(self, party: Sequence[Character], encounter: Encounter) -> int:
        if self.model is None:
            raise EstimatorUnavailableError("No party model has been provided")

        probability = float(self.model.predict(build_model_features(party, encounter)))
        logger.debug(f"Model prediction for {encounter.event_type!r}: {probability:.3f}")
        return round(clamp_percent(probability * 100))
