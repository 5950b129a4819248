"""Business logic services."""

from hero_squad.services.analysis_service import AnalysisService
from hero_squad.services.action_recommender import ActionRecommender
from hero_squad.services.individual_rate_calculator import IndividualRateCalculator
from hero_squad.services.recommendation_narrator import RecommendationNarrator

__all__ = [
    "AnalysisService",
    "ActionRecommender",
    "IndividualRateCalculator",
    "RecommendationNarrator",
]
