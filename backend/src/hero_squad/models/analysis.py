"""Analysis result models returned by the analysis facade."""

from dataclasses import asdict, dataclass, field


@dataclass
class IndividualSuccessRate:
    """Per-character standing for an encounter."""

    character: str
    success_rate: int  # 15 - 95
    recommended_action: str


@dataclass
class AnalysisResult:
    """Complete strategic analysis for one party vs one encounter."""

    party_success_chance: int  # Clamped, never 0 or 100
    encounter_difficulty: str  # Hard, Medium, Easy, Unknown
    individual_success_rates: list[IndividualSuccessRate] = field(default_factory=list)
    strategic_recommendations: list[str] = field(default_factory=list)
    strategy: str = ""  # Estimator that produced party_success_chance
    fallback: bool = False  # True when party_success_chance is a sentinel

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return asdict(self)
