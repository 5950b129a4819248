"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hero_squad.config import settings
from hero_squad.api.routes.analysis import router as analysis_router
from hero_squad.services.analysis_service import AnalysisService
from hero_squad.services.estimators import get_estimator

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # A pretrained predictor may be attached by the embedding app before startup
    if not hasattr(app.state, "party_model"):
        app.state.party_model = None
    if not hasattr(app.state, "analysis_service"):
        estimator = get_estimator(
            settings.estimator_strategy,
            trials=settings.monte_carlo_trials,
            seed=settings.monte_carlo_seed,
            normalization=settings.weighted_normalization,
            model=app.state.party_model,
        )
        app.state.analysis_service = AnalysisService(estimator)
        logger.info(f"Analysis service ready with {estimator.name} estimator")
    yield


app = FastAPI(
    title="Hero Squad Optimizer",
    description="Party vs encounter success estimation and action planning",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "hero-squad"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Hero Squad Optimizer API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(analysis_router)
