"""Naive Bayes outcome estimator with class synergy and stat-stacking modifiers."""
import logging
import math
from typing import Sequence

from hero_squad.models.party import Character, Encounter
from hero_squad.services.estimators.base import OutcomeEstimator, clamp_percent
from hero_squad.utils.class_templates import BANDIT, BARBARIAN, MAGE, ROGUE
from hero_squad.utils.stat_tables import (
    ANCIENT_TRAP,
    DRAGON_FIGHT,
    MYSTIC_PUZZLE,
    STAT_NAMES,
)

logger = logging.getLogger(__name__)

# (likelihood given success, likelihood given failure) per bucket
Likelihoods = dict[str, tuple[float, float]]

DEFAULT_LIKELIHOODS: Likelihoods = {
    "low": (0.2, 0.4),
    "med": (0.4, 0.4),
    "high": (0.4, 0.2),
}

# Stats that decide an encounter separate successes from failures more sharply
SHARP_LIKELIHOODS: Likelihoods = {
    "low": (0.1, 0.6),
    "med": (0.3, 0.3),
    "high": (0.6, 0.1),
}

SHARPENED_STATS = {
    DRAGON_FIGHT: ("strength", "health", "agility"),
    ANCIENT_TRAP: ("dexterity", "agility", "wisdom"),
    MYSTIC_PUZZLE: ("wisdom", "mana"),
}


class BayesEstimator(OutcomeEstimator):
    """Classifies the party as success/failure from bucketed stats.

    Pipeline:
    1. Per-encounter prior, scaled by party size.
    2. Sum of log-likelihoods over every character and stat (Laplace
       smoothed), normalized into a base percentage.
    3. Synergy multiplier from the class mix.
    4. Diminishing-returns penalty for stats stacked above a threshold.
    5. Clamp to [5, 95].
    """

    name = "bayes"

    # P(success), P(failure)
    PRIORS = {
        DRAGON_FIGHT: (0.4, 0.6),
        ANCIENT_TRAP: (0.55, 0.45),
        MYSTIC_PUZZLE: (0.7, 0.3),
    }
    DEFAULT_PRIOR = (0.5, 0.5)

    LOW_THRESHOLD = 10
    HIGH_THRESHOLD = 20
    SMOOTHING = 0.01

    # Diminishing returns: points lost per stat point above threshold
    STACKING_THRESHOLD = 22
    STACKING_PENALTY_PER_POINT = 0.5
    MAX_STACKING_PENALTY = 30.0

    def _estimate(self, party: Sequence[Character], encounter: Encounter) -> int:
        base = self.base_probability(party, encounter.event_type) * 100
        synergy = self.synergy_multiplier(party, encounter.event_type)
        penalty = self.diminishing_returns_penalty(party)
        final = clamp_percent(base * synergy - penalty)
        logger.debug(
            f"Bayes {encounter.event_type!r}: base={base:.1f} synergy={synergy:.2f} "
            f"penalty={penalty:.1f} final={final:.1f}"
        )
        return round(final)

    def bucket(self, value: float) -> str:
        if value < self.LOW_THRESHOLD:
            return "low"
        if value < self.HIGH_THRESHOLD:
            return "med"
        return "high"

    def likelihoods(self, event_type: str, stat: str) -> Likelihoods:
        if stat in SHARPENED_STATS.get(event_type, ()):
            return SHARP_LIKELIHOODS
        return DEFAULT_LIKELIHOODS

    def base_probability(self, party: Sequence[Character], event_type: str) -> float:
        """Posterior P(success) in [0, 1] before modifiers."""
        prior_success, prior_failure = self.PRIORS.get(event_type, self.DEFAULT_PRIOR)
        size_multiplier = 0.8 + 0.1 * len(party)

        log_success = math.log(prior_success * size_multiplier)
        log_failure = math.log(prior_failure / size_multiplier)

        for character in party:
            for stat in STAT_NAMES:
                p_success, p_failure = self.likelihoods(event_type, stat)[self.bucket(character.stat(stat))]
                log_success += math.log(p_success + self.SMOOTHING)
                log_failure += math.log(p_failure + self.SMOOTHING)

        # exp(ls) / (exp(ls) + exp(lf)) without overflowing on large parties
        diff = log_failure - log_success
        if diff > 700:
            return 0.0
        return 1.0 / (1.0 + math.exp(diff))

    def synergy_multiplier(self, party: Sequence[Character], event_type: str) -> float:
        """Multiplicative adjustment from the class composition."""
        classes = {character.character_class for character in party}
        multiplier = 1.0

        if {BARBARIAN, MAGE} <= classes:
            multiplier += 0.10
            if ROGUE in classes:
                multiplier += 0.15
        if event_type == ANCIENT_TRAP and {ROGUE, BANDIT} <= classes:
            multiplier += 0.20
        if event_type == DRAGON_FIGHT and classes == {MAGE}:
            multiplier -= 0.25
        if event_type == MYSTIC_PUZZLE and classes <= {BARBARIAN, BANDIT}:
            multiplier -= 0.30

        return multiplier

    def diminishing_returns_penalty(self, party: Sequence[Character]) -> float:
        """Percentage points removed for stats stacked above the threshold."""
        excess = sum(
            max(0.0, character.stat(stat) - self.STACKING_THRESHOLD)
            for character in party
            for stat in STAT_NAMES
        )
        return min(self.MAX_STACKING_PENALTY, excess * self.STACKING_PENALTY_PER_POINT)
