"""Types for the field registry and completion scoring."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FieldTier(str, Enum):
    """Priority bucket a consultation field belongs to."""

    REQUIRED = "required"  # Page cannot generate without these
    ENRICHMENT = "enrichment"  # Significantly improves output
    PROOF = "proof"  # Enables credibility sections
    ADVANCED = "advanced"  # Premium features
    BRAND = "brand"  # Separate track


class CompletionTier(str, Enum):
    """Overall completion label."""

    INSUFFICIENT = "insufficient"  # < 50
    MINIMAL = "minimal"  # 50-69
    GOOD = "good"  # 70-89
    COMPREHENSIVE = "comprehensive"  # >= 90


@dataclass(frozen=True)
class FieldDefinition:
    """A single weighted field in the registry."""

    key: str  # Dotted path into the consultation record
    tier: FieldTier
    label: str
    source: str  # Consultation step that collects it
    weight: float
    extraction_hint: Optional[str] = None


class TierScore(BaseModel):
    """Filled vs. available weight for one tier."""

    filled: float = Field(default=0, ge=0, description="Weight of populated fields")
    total: float = Field(default=0, ge=0, description="Weight of all registered fields")
    percentage: int = Field(default=0, ge=0, le=100, description="filled / total as a percentage")


class CompletionResult(BaseModel):
    """Completion score for a consultation record."""

    score: int = Field(..., ge=0, le=100, description="Overall completion percentage")
    tier: CompletionTier = Field(..., description="Label derived from score")
    tier_scores: dict[FieldTier, TierScore] = Field(
        default_factory=dict, description="Breakdown per field tier"
    )
    filled_fields: list[str] = Field(default_factory=list, description="Keys of populated fields")
    missing_required: list[str] = Field(default_factory=list)
    missing_enrichment: list[str] = Field(default_factory=list)
    missing_proof: list[str] = Field(default_factory=list)
    can_generate_brief: bool = Field(
        default=False, description="True when every required field is populated"
    )


# Lower bound of each completion tier, highest first
COMPLETION_TIER_THRESHOLDS: tuple[tuple[int, CompletionTier], ...] = (
    (90, CompletionTier.COMPREHENSIVE),
    (70, CompletionTier.GOOD),
    (50, CompletionTier.MINIMAL),
    (0, CompletionTier.INSUFFICIENT),
)
