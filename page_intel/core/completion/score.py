"""Completion score computation.

Walks the field registry once, summing the weight of every populated field
globally and per tier. Fields are independent: there is no cross-field logic,
so adding data can never lower the score.
"""

from collections.abc import Iterable
from typing import Any

from page_intel.core.completion.registry import FIELD_REGISTRY
from page_intel.core.completion.types import (
    COMPLETION_TIER_THRESHOLDS,
    CompletionResult,
    CompletionTier,
    FieldDefinition,
    FieldTier,
    TierScore,
)
from page_intel.core.logging import get_logger
from page_intel.core.record import get_nested_value, has_value, percentage

logger = get_logger(__name__)


def tier_for_score(score: float) -> CompletionTier:
    """Map a 0-100 completion score to its tier label."""
    for lower_bound, tier in COMPLETION_TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return CompletionTier.INSUFFICIENT


def calculate_completion_score(
    data: Any,
    registry: Iterable[FieldDefinition] = FIELD_REGISTRY,
) -> CompletionResult:
    """
    Compute the completion score for a consultation record.

    Never raises: a missing or malformed record simply scores zero.

    Args:
        data: Consultation record (nested mapping)
        registry: Field definitions to score against

    Returns:
        CompletionResult with overall score, tier breakdown and missing fields
    """
    filled_by_tier: dict[FieldTier, float] = {tier: 0 for tier in FieldTier}
    total_by_tier: dict[FieldTier, float] = {tier: 0 for tier in FieldTier}
    missing_by_tier: dict[FieldTier, list[str]] = {tier: [] for tier in FieldTier}
    filled_fields: list[str] = []

    total_filled = 0.0
    total_max = 0.0

    for field in registry:
        total_max += field.weight
        total_by_tier[field.tier] += field.weight

        if has_value(get_nested_value(data, field.key)):
            total_filled += field.weight
            filled_by_tier[field.tier] += field.weight
            filled_fields.append(field.key)
        else:
            missing_by_tier[field.tier].append(field.key)

    score = percentage(total_filled, total_max)

    tier_scores = {
        tier: TierScore(
            filled=filled_by_tier[tier],
            total=total_by_tier[tier],
            percentage=percentage(filled_by_tier[tier], total_by_tier[tier]),
        )
        for tier in FieldTier
    }

    missing_required = missing_by_tier[FieldTier.REQUIRED]

    logger.debug(
        f"Completion score {score}% ({len(filled_fields)} fields filled, "
        f"{len(missing_required)} required missing)"
    )

    return CompletionResult(
        score=score,
        tier=tier_for_score(score),
        tier_scores=tier_scores,
        filled_fields=filled_fields,
        missing_required=missing_required,
        missing_enrichment=missing_by_tier[FieldTier.ENRICHMENT],
        missing_proof=missing_by_tier[FieldTier.PROOF],
        can_generate_brief=not missing_required,
    )
