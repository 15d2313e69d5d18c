"""API endpoints for consultation scoring."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from page_intel.core.completion import (
    FIELD_REGISTRY,
    TIER_MAX_POINTS,
    CompletionResult,
    calculate_completion_score,
)
from page_intel.core.consultation import ReadinessResult, calculate_readiness
from page_intel.core.intelligence import (
    IntelligenceScore,
    ScoreBonuses,
    calculate_intelligence_score,
)
from page_intel.core.logging import get_logger, log_with_context

logger = get_logger(__name__)

router = APIRouter()


class ScoreRequest(BaseModel):
    """Consultation record to score."""

    record: dict[str, Any] = Field(default_factory=dict, description="Consultation record")


class IntelligenceScoreRequest(ScoreRequest):
    """Consultation record plus score bonuses."""

    bonuses: ScoreBonuses | None = Field(None, description="Bonus points earned")


class RegistryField(BaseModel):
    key: str
    tier: str
    label: str
    source: str
    weight: float
    extraction_hint: str | None = None


class RegistryResponse(BaseModel):
    """The field registry and its tier maximums."""

    fields: list[RegistryField]
    tier_max_points: dict[str, float]


@router.post("/scoring/completion", response_model=CompletionResult)
async def score_completion(request: ScoreRequest) -> CompletionResult:
    """
    Compute the tiered completion score for a consultation record.

    Raises:
        HTTPException 500: If scoring fails
    """
    try:
        result = calculate_completion_score(request.record)
    except Exception as e:
        logger.exception("Failed to compute completion score")
        raise HTTPException(status_code=500, detail="Failed to compute completion score") from e

    log_with_context(
        logger,
        logging.INFO,
        f"Computed completion score: {result.score}%",
        score=result.score,
        tier=result.tier.value,
    )
    return result


@router.post("/scoring/intelligence", response_model=IntelligenceScore)
async def score_intelligence(request: IntelligenceScoreRequest) -> IntelligenceScore:
    """
    Compute the 4 x 25 intelligence score and strategic level.

    Raises:
        HTTPException 500: If scoring fails
    """
    try:
        score = calculate_intelligence_score(request.record, request.bonuses)
    except Exception as e:
        logger.exception("Failed to compute intelligence score")
        raise HTTPException(status_code=500, detail="Failed to compute intelligence score") from e

    log_with_context(
        logger,
        logging.INFO,
        f"Computed intelligence score: {score.total_score}/100",
        total_score=score.total_score,
        strategic_level=score.level.value,
    )
    return score


@router.post("/scoring/readiness", response_model=ReadinessResult)
async def score_readiness(request: ScoreRequest) -> ReadinessResult:
    """
    Compute consultation readiness for page generation.

    Raises:
        HTTPException 500: If scoring fails
    """
    try:
        return calculate_readiness(request.record)
    except Exception as e:
        logger.exception("Failed to compute consultation readiness")
        raise HTTPException(status_code=500, detail="Failed to compute readiness") from e


@router.get("/registry", response_model=RegistryResponse)
async def get_registry() -> RegistryResponse:
    """List the weighted consultation field registry."""
    return RegistryResponse(
        fields=[
            RegistryField(
                key=f.key,
                tier=f.tier.value,
                label=f.label,
                source=f.source,
                weight=f.weight,
                extraction_hint=f.extraction_hint,
            )
            for f in FIELD_REGISTRY
        ],
        tier_max_points={tier.value: points for tier, points in TIER_MAX_POINTS.items()},
    )
