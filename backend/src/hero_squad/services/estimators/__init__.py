"""Party outcome estimators (interchangeable strategies)."""
import logging
from typing import Optional

from hero_squad.services.estimators.base import (
    EMPTY_PARTY_CHANCE,
    EstimatorUnavailableError,
    OutcomeEstimator,
    clamp_percent,
)
from hero_squad.services.estimators.weighted_estimator import WeightedEstimator
from hero_squad.services.estimators.monte_carlo_estimator import MonteCarloEstimator
from hero_squad.services.estimators.bayes_estimator import BayesEstimator
from hero_squad.services.estimators.model_estimator import (
    ModelEstimator,
    PartyModel,
    build_model_features,
)

logger = logging.getLogger(__name__)

ESTIMATORS: dict[str, type[OutcomeEstimator]] = {
    WeightedEstimator.name: WeightedEstimator,
    MonteCarloEstimator.name: MonteCarloEstimator,
    BayesEstimator.name: BayesEstimator,
    ModelEstimator.name: ModelEstimator,
}


def get_estimator(
    name: str,
    *,
    trials: int = MonteCarloEstimator.DEFAULT_TRIALS,
    seed: Optional[int] = None,
    normalization: float = WeightedEstimator.DEFAULT_NORMALIZATION,
    model: Optional[PartyModel] = None,
) -> OutcomeEstimator:
    """Factory function to build an estimator by strategy name.

    Args:
        name: One of ESTIMATORS' keys
        trials: Monte Carlo trial count
        seed: Monte Carlo seed (None = fresh entropy per estimate)
        normalization: Weighted-sum K constant
        model: Pretrained predictor for the "model" strategy

    Raises:
        ValueError: If the strategy name is unknown
    """
    if name == WeightedEstimator.name:
        return WeightedEstimator(normalization=normalization)
    if name == MonteCarloEstimator.name:
        return MonteCarloEstimator(trials=trials, seed=seed)
    if name == BayesEstimator.name:
        return BayesEstimator()
    if name == ModelEstimator.name:
        if model is None:
            logger.warning("Model estimator requested without a model; estimates will fail")
        return ModelEstimator(model)
    raise ValueError(f"Unknown estimator strategy: {name}")


__all__ = [
    "EMPTY_PARTY_CHANCE",
    "ESTIMATORS",
    "EstimatorUnavailableError",
    "OutcomeEstimator",
    "clamp_percent",
    "WeightedEstimator",
    "MonteCarloEstimator",
    "BayesEstimator",
    "ModelEstimator",
    "PartyModel",
    "build_model_features",
    "get_estimator",
]
