"""Intelligence score computation.

Each of the twelve fields is scored on presence only: full points when the
record holds a usable value for it, zero otherwise. The consultation UI and
the extraction functions do not agree on key names, so every field reads from
an ordered list of record keys and takes the first one that is populated.
"""

import math
from typing import Any, Optional

from page_intel.core.config import get_settings
from page_intel.core.intelligence.types import (
    CATEGORY_FIELDS,
    CATEGORY_MAX_POINTS,
    FIELD_POINTS,
    LEVEL_THRESHOLDS,
    BuyerRealityScore,
    FieldScore,
    IntelligenceScore,
    ProofCredibilityScore,
    ScoreBonuses,
    StrategicLevel,
    WhatYouOfferScore,
    WhoYouAreScore,
)
from page_intel.core.logging import get_logger
from page_intel.core.record import first_string, percentage

logger = get_logger(__name__)


# field -> (value keys, summary keys), both in priority order
FIELD_SOURCES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "industry": (("industry", "industryFull"), ("industrySummary",)),
    "audience": (("audience", "audienceFull"), ("audienceSummary",)),
    "geography": (("geography",), ("geographySummary",)),
    "value_prop": (("valueProp", "valuePropFull"), ("valuePropSummary",)),
    "edge": (
        (
            "competitiveEdge",
            "competitorDifferentiator",
            "competitorDifferentiation",
            "competitorDifferentiatorFull",
        ),
        ("edgeSummary",),
    ),
    "method": (("method",), ("methodSummary",)),
    "pain_points": (("painPoints", "painPointsFull"), ("painSummary",)),
    "objections": (("buyerObjections", "buyerObjectionsFull"), ("objectionsSummary",)),
    "triggers": (("triggers",), ("triggersSummary",)),
    "results": (
        ("proofElements", "proofElementsFull", "results"),
        ("proofSummary", "resultsSummary"),
    ),
    "social_proof": (("socialProof",), ("socialProofSummary",)),
    "credentials": (("credentials",), ("credentialsSummary",)),
}

_CATEGORY_MODELS = {
    "who_you_are": WhoYouAreScore,
    "what_you_offer": WhatYouOfferScore,
    "buyer_reality": BuyerRealityScore,
    "proof_credibility": ProofCredibilityScore,
}


def level_for_score(score: float) -> StrategicLevel:
    """
    Look up the strategic level for a 0-100 score.

    Bands are inclusive on both ends. Out-of-range scores are clamped and
    non-finite scores map to UNQUALIFIED.
    """
    if not math.isfinite(score):
        return StrategicLevel.UNQUALIFIED
    clamped = min(100, max(0, int(score)))
    for level, (low, high) in LEVEL_THRESHOLDS.items():
        if low <= clamped <= high:
            return level
    return StrategicLevel.UNQUALIFIED


def score_field(record: Any, name: str) -> FieldScore:
    """Score one intelligence field against the record."""
    value_keys, summary_keys = FIELD_SOURCES[name]
    max_points = FIELD_POINTS[name]

    value = first_string(record, value_keys)
    summary = first_string(record, summary_keys)

    return FieldScore(
        value=value,
        summary=summary,
        points=max_points if value else 0,
        max_points=max_points,
    )


def _score_category(record: Any, category: str):
    fields = {name: score_field(record, name) for name in CATEGORY_FIELDS[category]}
    total = min(CATEGORY_MAX_POINTS, sum(f.points for f in fields.values()))
    return _CATEGORY_MODELS[category](
        total=total,
        max_points=CATEGORY_MAX_POINTS,
        percentage=percentage(total, CATEGORY_MAX_POINTS),
        **fields,
    )


def calculate_intelligence_score(
    record: Any,
    bonuses: Optional[ScoreBonuses] = None,
) -> IntelligenceScore:
    """
    Compute the 4 x 25 intelligence score for a consultation record.

    Args:
        record: Consultation record; None yields an empty score
        bonuses: Optional bonuses (market research adds configured points)

    Returns:
        IntelligenceScore with per-category breakdown, total and level
    """
    if record is None:
        return create_empty_score()

    categories = {name: _score_category(record, name) for name in CATEGORY_FIELDS}
    base_score = sum(c.total for c in categories.values())

    research_bonus = 0
    if bonuses and bonuses.market_research_complete:
        research_bonus = get_settings().MARKET_RESEARCH_BONUS_POINTS

    total_score = min(100, base_score + research_bonus)
    level = level_for_score(total_score)

    logger.debug(
        f"Intelligence score {total_score}/100 (base={base_score}, "
        f"research_bonus={research_bonus}, level={level.value})"
    )

    return IntelligenceScore(
        **categories,
        total_score=total_score,
        total_percentage=percentage(total_score, 100),
        level=level,
    )


def create_empty_score() -> IntelligenceScore:
    """Score for a record with nothing captured."""
    return calculate_intelligence_score({})
