"""Intelligence readiness scoring.

Scores a consultation record across 4 categories (25 points each):
- Who You Are: industry, audience, geography
- What You Offer: value proposition, competitive edge, method
- Buyer Reality: pain points, objections, triggers
- Proof & Credibility: results, social proof, credentials

The 0-100 total maps to a strategic level (unqualified, identified,
positioned, armed, proven) that gates trial signup and page generation.

Usage:
    from page_intel.core.intelligence import calculate_intelligence_score

    score = calculate_intelligence_score(record)
    print(f"{score.total_score}/100 ({score.level.value})")
"""

from page_intel.core.intelligence.levels import (
    can_generate,
    can_start_trial,
    can_unlock,
    get_next_prompt,
    get_unlocked_features,
    next_level,
)
from page_intel.core.intelligence.score import (
    calculate_intelligence_score,
    create_empty_score,
    level_for_score,
    score_field,
)
from page_intel.core.intelligence.types import (
    CATEGORY_FIELDS,
    FIELD_POINTS,
    LEVEL_THRESHOLDS,
    LEVEL_UNLOCKS,
    CategoryScore,
    FieldScore,
    IntelligenceScore,
    ScoreBonuses,
    StrategicLevel,
)

__all__ = [
    "calculate_intelligence_score",
    "create_empty_score",
    "level_for_score",
    "score_field",
    "get_next_prompt",
    "can_generate",
    "can_start_trial",
    "can_unlock",
    "get_unlocked_features",
    "next_level",
    "IntelligenceScore",
    "CategoryScore",
    "FieldScore",
    "ScoreBonuses",
    "StrategicLevel",
    "CATEGORY_FIELDS",
    "FIELD_POINTS",
    "LEVEL_THRESHOLDS",
    "LEVEL_UNLOCKS",
]
