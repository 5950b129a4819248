"""Shared contract for party outcome estimators."""

import logging
from typing import Sequence

from hero_squad.models.party import Character, Encounter

logger = logging.getLogger(__name__)

# Returned instead of a computed chance when there is nobody to evaluate
EMPTY_PARTY_CHANCE = 50

MIN_CHANCE = 5
MAX_CHANCE = 95


class EstimatorUnavailableError(RuntimeError):
    """The estimator cannot produce a result (e.g. no model was supplied)."""


def clamp_percent(value: float, floor: float = MIN_CHANCE, ceiling: float = MAX_CHANCE) -> float:
    return min(ceiling, max(floor, value))


class OutcomeEstimator:
    """Turns a party and an encounter into an integer success percentage.

    Subclasses implement `_estimate` for a non-empty party. The empty party
    is handled here so no strategy ever averages over zero members.
    """

    name = "base"

    def estimate(self, party: Sequence[Character], encounter: Encounter) -> int:
        """Estimate the party's chance to overcome the encounter.

        Returns:
            Integer percent. EMPTY_PARTY_CHANCE for an empty party.
        """
        if not party:
            logger.debug(f"{self.name}: empty party, returning sentinel {EMPTY_PARTY_CHANCE}")
            return EMPTY_PARTY_CHANCE
        return self._estimate(party, encounter)

    def _estimate(self, party: Sequence[Character], encounter: Encounter) -> int:
        raise NotImplementedError
