"""Deterministic weighted-sum outcome estimator."""
from typing import Sequence

from hero_squad.models.party import Character, Encounter
from hero_squad.services.estimators.base import OutcomeEstimator, clamp_percent
from hero_squad.utils.stat_tables import (
    STAT_NAMES,
    get_difficulty_multiplier,
    get_stat_weights,
)


class WeightedEstimator(OutcomeEstimator):
    """Scores the party by its average weighted stat line.

    chance = clamp(100 * weighted_total / (size * total_weight * K), 15, 95)
             * difficulty_multiplier

    K is a tuning constant with no physical meaning; smaller K pushes every
    party toward the ceiling. Output lies in [13, 95] (15 * 0.85 at worst).
    """

    name = "weighted"

    DEFAULT_NORMALIZATION = 20.0
    FLOOR = 15
    CEILING = 95

    def __init__(self, normalization: float = DEFAULT_NORMALIZATION):
        if normalization <= 0:
            raise ValueError("normalization must be positive")
        self.normalization = normalization

    def _estimate(self, party: Sequence[Character], encounter: Encounter) -> int:
        weights = get_stat_weights(encounter.event_type)
        total_weight = sum(weights.values())

        weighted_total = sum(
            character.stat(stat) * weights[stat]
            for character in party
            for stat in STAT_NAMES
        )
        base = weighted_total / (len(party) * total_weight * self.normalization)
        chance = clamp_percent(base * 100, self.FLOOR, self.CEILING)
        return round(chance * get_difficulty_multiplier(encounter.event_type))
