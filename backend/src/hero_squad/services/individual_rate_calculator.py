"""Per-character success rates from the encounter's stat weighting."""
from typing import Sequence

from hero_squad.models.party import Character
from hero_squad.utils.stat_tables import (
    STAT_NAMES,
    get_difficulty_multiplier,
    get_stat_weights,
)


class IndividualRateCalculator:
    """Rates each character on their own weighted stat line.

    Independent of the party-level estimator, so the individual rates are
    not expected to average out to the party's chance.
    """

    NORMALIZATION = 15
    BASE_RATE = 20
    RATE_SCALE = 75
    FLOOR = 15
    CEILING = 95

    def calculate(self, character: Character, event_type: str) -> int:
        """Success rate (percent, 15-95) of one character in an encounter."""
        weights = get_stat_weights(event_type)
        total_weight = sum(weights.values())
        weighted_power = sum(character.stat(stat) * weights[stat] for stat in STAT_NAMES)

        base = weighted_power / (total_weight * self.NORMALIZATION)
        rate = self.BASE_RATE + base * self.RATE_SCALE * get_difficulty_multiplier(event_type)
        return round(min(self.CEILING, max(self.FLOOR, rate)))

    def calculate_party(self, party: Sequence[Character], event_type: str) -> list[int]:
        """Rates for every character, in party order."""
        return [self.calculate(character, event_type) for character in party]
