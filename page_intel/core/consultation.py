"""Consultation readiness scoring and status navigation.

Decides whether a consultation has captured enough to generate a page:
the weighted score must reach MINIMUM_SCORE_FOR_GENERATION and every required
field must pass its validator.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from page_intel.core.logging import get_logger
from page_intel.core.record import get_nested_value

logger = get_logger(__name__)

MINIMUM_SCORE_FOR_GENERATION = 70
REQUIRED_FIELDS_MUST_PASS = True


def _text(intel: Any, key: str) -> str:
    value = get_nested_value(intel, key)
    return value.strip() if isinstance(value, str) else ""


def _items(intel: Any, key: str) -> list:
    value = get_nested_value(intel, key)
    if isinstance(value, list):
        return [v for v in value if v]
    if isinstance(value, str) and value.strip():
        return [value]
    return []


@dataclass(frozen=True)
class ReadinessField:
    """A weighted readiness field and the check that marks it captured."""

    field: str
    weight: int
    required: bool
    validator: Callable[[Any], bool]


READINESS_FIELDS: tuple[ReadinessField, ...] = (
    # Required: must all pass for generation
    ReadinessField("industry", 10, True, lambda i: len(_text(i, "industry")) > 2),
    ReadinessField("audience", 15, True, lambda i: len(_text(i, "audience")) > 5),
    ReadinessField("valueProp", 15, True, lambda i: len(_text(i, "valueProp")) > 10),
    ReadinessField("painPoints", 15, True, lambda i: len(_items(i, "painPoints")) >= 2),
    # Important: needed for quality
    ReadinessField("audienceRole", 10, False, lambda i: len(_text(i, "audienceRole")) > 3),
    ReadinessField("buyerObjections", 10, False, lambda i: len(_items(i, "buyerObjections")) >= 1),
    ReadinessField(
        "competitorDifferentiation",
        10,
        False,
        lambda i: len(_text(i, "competitorDifferentiation")) > 10,
    ),
    ReadinessField("proofElements", 10, False, lambda i: len(_items(i, "proofElements")) >= 1),
    # Nice to have
    ReadinessField("toneDirection", 5, False, lambda i: len(_text(i, "toneDirection")) > 3),
)

FIELD_DISPLAY_NAMES: dict[str, str] = {
    "industry": "Industry",
    "audience": "Target Audience",
    "valueProp": "Value Proposition",
    "painPoints": "Pain Points",
    "audienceRole": "Audience Role",
    "buyerObjections": "Buyer Objections",
    "competitorDifferentiation": "Competitive Edge",
    "proofElements": "Proof & Credibility",
    "toneDirection": "Brand Tone",
}


class ReadinessFieldResult(BaseModel):
    field: str
    score: int = Field(..., ge=0)
    max_score: int = Field(..., ge=0)
    captured: bool


class ReadinessResult(BaseModel):
    """Whether a consultation can move on to page generation."""

    score: int = Field(..., ge=0, le=100)
    can_generate: bool
    missing_required: list[str] = Field(default_factory=list)
    breakdown: list[ReadinessFieldResult] = Field(default_factory=list)


def calculate_readiness(intel: Optional[Any]) -> ReadinessResult:
    """
    Calculate the readiness score from captured intelligence.

    Args:
        intel: Extracted intelligence mapping; None scores as nothing captured

    Returns:
        ReadinessResult with score, generation flag and per-field breakdown
    """
    total_score = 0
    missing_required: list[str] = []
    breakdown: list[ReadinessFieldResult] = []

    for field in READINESS_FIELDS:
        captured = intel is not None and field.validator(intel)
        score = field.weight if captured else 0
        total_score += score

        breakdown.append(
            ReadinessFieldResult(
                field=field.field, score=score, max_score=field.weight, captured=captured
            )
        )

        if field.required and not captured:
            missing_required.append(field.field)

    can_generate = total_score >= MINIMUM_SCORE_FOR_GENERATION and (
        not missing_required if REQUIRED_FIELDS_MUST_PASS else True
    )

    logger.debug(
        f"Consultation readiness {total_score}/100, can_generate={can_generate}, "
        f"missing_required={missing_required}"
    )

    return ReadinessResult(
        score=total_score,
        can_generate=can_generate,
        missing_required=missing_required,
        breakdown=breakdown,
    )


def format_field_name(field: str) -> str:
    """Display name for a readiness field."""
    if field in FIELD_DISPLAY_NAMES:
        return FIELD_DISPLAY_NAMES[field]
    return field[:1].upper() + field[1:]


# =============================================================================
# Consultation status
# =============================================================================


class ConsultationStatus(str, Enum):
    NOT_STARTED = "not_started"
    DEMO_STARTED = "demo_started"
    DEMO_COMPLETE = "demo_complete"
    WIZARD_IN_PROGRESS = "wizard_in_progress"
    WIZARD_COMPLETE = "wizard_complete"
    GENERATION_READY = "generation_ready"


class NextStep(BaseModel):
    path: str
    label: str


STATUS_DESCRIPTIONS: dict[ConsultationStatus, str] = {
    ConsultationStatus.NOT_STARTED: "No consultation data yet",
    ConsultationStatus.DEMO_STARTED: "Demo in progress",
    ConsultationStatus.DEMO_COMPLETE: "Demo complete - ready for full consultation",
    ConsultationStatus.WIZARD_IN_PROGRESS: "Full consultation in progress",
    ConsultationStatus.WIZARD_COMPLETE: "Consultation complete - reviewing",
    ConsultationStatus.GENERATION_READY: "Ready to generate landing page",
}

NEXT_STEPS: dict[ConsultationStatus, NextStep] = {
    ConsultationStatus.NOT_STARTED: NextStep(path="/", label="Start Demo"),
    ConsultationStatus.DEMO_STARTED: NextStep(path="/", label="Continue Demo"),
    ConsultationStatus.DEMO_COMPLETE: NextStep(path="/wizard", label="Start Full Consultation"),
    ConsultationStatus.WIZARD_IN_PROGRESS: NextStep(path="/wizard", label="Continue Consultation"),
    ConsultationStatus.WIZARD_COMPLETE: NextStep(path="/generate", label="Generate Page"),
    ConsultationStatus.GENERATION_READY: NextStep(path="/generate", label="Generate Page"),
}


def _parse_status(status: str) -> Optional[ConsultationStatus]:
    try:
        return ConsultationStatus(status)
    except ValueError:
        return None


def get_status_description(status: str) -> str:
    parsed = _parse_status(status)
    return STATUS_DESCRIPTIONS[parsed] if parsed else "Unknown status"


def can_navigate_to_generate(status: str) -> bool:
    return _parse_status(status) in (
        ConsultationStatus.GENERATION_READY,
        ConsultationStatus.WIZARD_COMPLETE,
    )


def get_next_step(status: str) -> NextStep:
    """Where the user should go next for a consultation status."""
    parsed = _parse_status(status)
    if parsed is None:
        return NextStep(path="/", label="Start Over")
    return NEXT_STEPS[parsed]
