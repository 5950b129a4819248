"""REST endpoints for party vs encounter analysis."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from hero_squad.config import settings
from hero_squad.models.party import Character, Encounter
from hero_squad.services.analysis_service import AnalysisService
from hero_squad.services.estimators import ESTIMATORS, get_estimator
from hero_squad.utils.class_templates import CLASS_TEMPLATES, MAX_TOTAL_POINTS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


class CharacterPayload(BaseModel):
    """A party member as sent by the party builder."""

    name: str
    type: str = ""  # Barbarian, Mage, Rogue, Bandit
    strength: float
    agility: float
    health: float
    mana: Optional[float] = None
    dexterity: Optional[float] = None
    wisdom: Optional[float] = None


class EnemyPayload(BaseModel):
    name: str = ""
    health: int = Field(gt=0)


class EncounterPayload(BaseModel):
    event_type: str
    enemy: Optional[EnemyPayload] = None  # Stock enemy for the event type when omitted


class AnalyzeRequest(BaseModel):
    """Request body for a strategic analysis.

    party and encounter are optional at the schema level; the handler
    rejects a request missing either with a 400.
    """

    party: Optional[list[CharacterPayload]] = None
    encounter: Optional[EncounterPayload] = None
    current_turn_character: Optional[str] = None  # Accepted for display, unused
    strategy: Optional[str] = None  # Overrides the configured estimator


def _build_estimator(request: Request, strategy: str):
    return get_estimator(
        strategy,
        trials=settings.monte_carlo_trials,
        seed=settings.monte_carlo_seed,
        normalization=settings.weighted_normalization,
        model=getattr(request.app.state, "party_model", None),
    )


def _get_or_create_service(request: Request, strategy: Optional[str] = None) -> AnalysisService:
    """Get the shared analysis service, or a one-off one for a requested strategy."""
    if strategy and strategy != settings.estimator_strategy:
        if strategy not in ESTIMATORS:
            raise HTTPException(status_code=400, detail=f"Unknown strategy: {strategy}")
        return AnalysisService(_build_estimator(request, strategy))

    if not hasattr(request.app.state, "analysis_service"):
        request.app.state.analysis_service = AnalysisService(
            _build_estimator(request, settings.estimator_strategy)
        )
    return request.app.state.analysis_service


@router.post("/analyze")
def analyze_party(request: Request, body: AnalyzeRequest):
    """Estimate the party's success chance and suggest actions."""
    if body.party is None or body.encounter is None:
        raise HTTPException(status_code=400, detail="Missing required fields: party, encounter")

    service = _get_or_create_service(request, body.strategy)

    party = [Character.from_dict(member.model_dump()) for member in body.party]
    encounter = Encounter.from_dict(body.encounter.model_dump())

    try:
        result = service.analyze(party, encounter)
    except Exception:
        logger.exception(f"Error analyzing party for {encounter.event_type!r}")
        raise HTTPException(status_code=500, detail="Failed to analyze party composition")

    return {"success": True, "analysis": result.to_dict()}


@router.get("/analyze/strategies")
def list_strategies():
    """List available estimator strategies and the configured default."""
    return {
        "strategies": list(ESTIMATORS),
        "default": settings.estimator_strategy,
    }


@router.get("/classes")
def list_classes():
    """Class stat templates and the party builder point budget."""
    return {
        "classes": CLASS_TEMPLATES,
        "max_total_points": MAX_TOTAL_POINTS,
    }
