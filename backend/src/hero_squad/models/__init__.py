"""Data models for party analysis."""

from hero_squad.models.party import Character, Enemy, Encounter
from hero_squad.models.analysis import AnalysisResult, IndividualSuccessRate

__all__ = [
    "Character",
    "Enemy",
    "Encounter",
    "AnalysisResult",
    "IndividualSuccessRate",
]
