"""Field registry and completion scoring.

Scores how much of the consultation record has been captured, weighted by
field tier:
- Required (60 pts): page cannot generate without these
- Enrichment (20 pts): significantly improves output
- Proof (15 pts): enables credibility sections
- Advanced (5 pts): premium features
- Brand (7 pts): logo, colors, fonts

Usage:
    from page_intel.core.completion import calculate_completion_score

    result = calculate_completion_score(record)
    print(f"{result.score}% ({result.tier.value})")
"""

from page_intel.core.completion.registry import (
    FIELD_REGISTRY,
    TIER_MAX_POINTS,
    get_fields_for_tier,
    validate_registry,
)
from page_intel.core.completion.score import calculate_completion_score, tier_for_score
from page_intel.core.completion.types import (
    CompletionResult,
    CompletionTier,
    FieldDefinition,
    FieldTier,
    TierScore,
)

__all__ = [
    "calculate_completion_score",
    "tier_for_score",
    "validate_registry",
    "get_fields_for_tier",
    "CompletionResult",
    "CompletionTier",
    "FieldDefinition",
    "FieldTier",
    "TierScore",
    "FIELD_REGISTRY",
    "TIER_MAX_POINTS",
]
