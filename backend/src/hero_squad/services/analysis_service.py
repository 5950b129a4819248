"""Analysis facade combining estimation, per-character rates and guidance."""
import logging
from typing import Optional, Sequence

from hero_squad.models.analysis import AnalysisResult, IndividualSuccessRate
from hero_squad.models.party import Character, Encounter
from hero_squad.services.action_recommender import ActionRecommender
from hero_squad.services.estimators import EMPTY_PARTY_CHANCE, OutcomeEstimator
from hero_squad.services.individual_rate_calculator import IndividualRateCalculator
from hero_squad.services.recommendation_narrator import RecommendationNarrator
from hero_squad.utils.stat_tables import get_encounter_difficulty

logger = logging.getLogger(__name__)


class AnalysisService:
    """Produces an AnalysisResult for a party vs an encounter.

    The outcome estimator is injected so callers own its lifecycle (and any
    model it wraps). The service holds no per-request state.
    """

    def __init__(
        self,
        estimator: OutcomeEstimator,
        rate_calculator: Optional[IndividualRateCalculator] = None,
        action_recommender: Optional[ActionRecommender] = None,
        narrator: Optional[RecommendationNarrator] = None,
    ):
        self.estimator = estimator
        self.rate_calculator = rate_calculator or IndividualRateCalculator()
        self.action_recommender = action_recommender or ActionRecommender()
        self.narrator = narrator or RecommendationNarrator()

    def analyze(self, party: Sequence[Character], encounter: Encounter) -> AnalysisResult:
        """Run the full analysis.

        Raises:
            EstimatorUnavailableError: If the estimator cannot produce a value.
        """
        event_type = encounter.event_type
        if not party:
            logger.info(f"Empty party for {event_type!r}; returning sentinel analysis")
            return AnalysisResult(
                party_success_chance=EMPTY_PARTY_CHANCE,
                encounter_difficulty=get_encounter_difficulty(event_type),
                strategic_recommendations=self.narrator.narrate(party, event_type, EMPTY_PARTY_CHANCE),
                strategy=self.estimator.name,
                fallback=True,
            )

        success_chance = self.estimator.estimate(party, encounter)

        individual_rates = [
            IndividualSuccessRate(
                character=character.name,
                success_rate=self.rate_calculator.calculate(character, event_type),
                recommended_action=self.action_recommender.recommend(character, event_type),
            )
            for character in party
        ]

        logger.info(
            f"Analyzed party of {len(party)} vs {event_type!r} "
            f"with {self.estimator.name}: {success_chance}%"
        )
        return AnalysisResult(
            party_success_chance=success_chance,
            encounter_difficulty=get_encounter_difficulty(event_type),
            individual_success_rates=individual_rates,
            strategic_recommendations=self.narrator.narrate(party, event_type, success_chance),
            strategy=self.estimator.name,
        )
