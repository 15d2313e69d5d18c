"""Pydantic models and point tables for intelligence scoring.

100 points total: 4 categories x 25 points, each category built from three
fields worth 10/10/5.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class StrategicLevel(str, Enum):
    """Gamified level derived from the 0-100 intelligence score."""

    UNQUALIFIED = "unqualified"
    IDENTIFIED = "identified"
    POSITIONED = "positioned"
    ARMED = "armed"
    PROVEN = "proven"


LEVEL_ORDER: tuple[StrategicLevel, ...] = (
    StrategicLevel.UNQUALIFIED,
    StrategicLevel.IDENTIFIED,
    StrategicLevel.POSITIONED,
    StrategicLevel.ARMED,
    StrategicLevel.PROVEN,
)

# Inclusive (min, max) bands; contiguous over 0-100
LEVEL_THRESHOLDS: dict[StrategicLevel, tuple[int, int]] = {
    StrategicLevel.UNQUALIFIED: (0, 24),
    StrategicLevel.IDENTIFIED: (25, 49),
    StrategicLevel.POSITIONED: (50, 69),
    StrategicLevel.ARMED: (70, 84),
    StrategicLevel.PROVEN: (85, 100),
}

CATEGORY_MAX_POINTS = 25

FIELD_POINTS: dict[str, int] = {
    # WHO YOU ARE
    "industry": 10,
    "audience": 10,
    "geography": 5,
    # WHAT YOU OFFER
    "value_prop": 10,
    "edge": 10,
    "method": 5,
    # BUYER REALITY
    "pain_points": 10,
    "objections": 10,
    "triggers": 5,
    # PROOF & CREDIBILITY
    "results": 10,
    "social_proof": 10,
    "credentials": 5,
}

CATEGORY_FIELDS: dict[str, tuple[str, str, str]] = {
    "who_you_are": ("industry", "audience", "geography"),
    "what_you_offer": ("value_prop", "edge", "method"),
    "buyer_reality": ("pain_points", "objections", "triggers"),
    "proof_credibility": ("results", "social_proof", "credentials"),
}

# Features unlocked when a level is first reached (cumulative upward)
LEVEL_UNLOCKS: dict[StrategicLevel, tuple[str, ...]] = {
    StrategicLevel.UNQUALIFIED: (),
    StrategicLevel.IDENTIFIED: ("continue_demo",),
    StrategicLevel.POSITIONED: ("trial_signup",),
    StrategicLevel.ARMED: ("page_generation", "export_brief"),
    StrategicLevel.PROVEN: ("premium_generation",),
}


class ScoreBonuses(BaseModel):
    """Bonus points earned outside the consultation fields."""

    market_research_complete: bool = Field(
        default=False, description="Market research finished for this record"
    )
    email_captured: bool = Field(default=False, description="Tracked only, worth no points")


class FieldScore(BaseModel):
    """Score for a single intelligence field."""

    value: Optional[str] = Field(None, description="Captured display value")
    summary: Optional[str] = Field(None, description="Short summary, if extracted")
    points: int = Field(default=0, ge=0)
    max_points: int = Field(..., ge=0)


class CategoryScore(BaseModel):
    """Shared totals for a 25-point category."""

    total: int = Field(default=0, ge=0, le=CATEGORY_MAX_POINTS)
    max_points: int = Field(default=CATEGORY_MAX_POINTS)
    percentage: int = Field(default=0, ge=0, le=100)


class WhoYouAreScore(CategoryScore):
    industry: FieldScore
    audience: FieldScore
    geography: FieldScore


class WhatYouOfferScore(CategoryScore):
    value_prop: FieldScore
    edge: FieldScore
    method: FieldScore


class BuyerRealityScore(CategoryScore):
    pain_points: FieldScore
    objections: FieldScore
    triggers: FieldScore


class ProofCredibilityScore(CategoryScore):
    results: FieldScore
    social_proof: FieldScore
    credentials: FieldScore


class IntelligenceScore(BaseModel):
    """Complete intelligence assessment for a consultation record."""

    who_you_are: WhoYouAreScore
    what_you_offer: WhatYouOfferScore
    buyer_reality: BuyerRealityScore
    proof_credibility: ProofCredibilityScore

    total_score: int = Field(default=0, ge=0, le=100)
    total_percentage: int = Field(default=0, ge=0, le=100)
    level: StrategicLevel = Field(default=StrategicLevel.UNQUALIFIED)

    def categories(self) -> dict[str, CategoryScore]:
        """Category scores keyed by category name."""
        return {
            "who_you_are": self.who_you_are,
            "what_you_offer": self.what_you_offer,
            "buyer_reality": self.buyer_reality,
            "proof_credibility": self.proof_credibility,
        }

    def field_score(self, name: str) -> FieldScore:
        """Look up one of the twelve field scores by its field name."""
        for category, fields in CATEGORY_FIELDS.items():
            if name in fields:
                return getattr(self.categories()[category], name)
        raise KeyError(name)
