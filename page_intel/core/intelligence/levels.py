"""Level gating and consultant prompt selection.

The strategic level decides which product features are open to the user, and
the first uncaptured field (in consultation priority order) decides what the
consultant asks next.
"""

from typing import Optional

from page_intel.core.intelligence.types import (
    LEVEL_ORDER,
    LEVEL_UNLOCKS,
    IntelligenceScore,
    StrategicLevel,
)

# (field, question) in the order the consultant asks them
NEXT_PROMPTS: tuple[tuple[str, str], ...] = (
    ("industry", "What industry are you in?"),
    ("audience", "Who are your ideal customers?"),
    ("value_prop", "What's the main outcome you deliver?"),
    ("edge", "What makes you different from alternatives?"),
    ("pain_points", "What problems keep your buyers up at night?"),
    ("objections", "What hesitations do buyers typically have?"),
    ("results", "What results have you achieved for clients?"),
    ("geography", "What regions do you primarily serve?"),
    ("method", "How do you deliver your service?"),
    ("triggers", "What typically triggers someone to seek you out?"),
    ("social_proof", "Do you have testimonials or notable clients?"),
    ("credentials", "What credentials or experience back this up?"),
)


def get_next_prompt(score: IntelligenceScore) -> Optional[str]:
    """Next consultant question, or None when every field is captured."""
    for field, prompt in NEXT_PROMPTS:
        if not score.field_score(field).value:
            return prompt
    return None


def can_generate(score: IntelligenceScore) -> bool:
    """Page generation opens at the armed level."""
    return score.level in (StrategicLevel.ARMED, StrategicLevel.PROVEN)


def can_start_trial(score: IntelligenceScore) -> bool:
    """Trial signup opens at the positioned level."""
    return score.level in (
        StrategicLevel.POSITIONED,
        StrategicLevel.ARMED,
        StrategicLevel.PROVEN,
    )


def next_level(level: StrategicLevel) -> Optional[StrategicLevel]:
    """The level after ``level``, or None at the top."""
    index = LEVEL_ORDER.index(level)
    if index + 1 < len(LEVEL_ORDER):
        return LEVEL_ORDER[index + 1]
    return None


def get_unlocked_features(level: StrategicLevel) -> list[str]:
    """All features unlocked at ``level``, including those of lower levels."""
    unlocked: list[str] = []
    for lvl in LEVEL_ORDER[: LEVEL_ORDER.index(level) + 1]:
        unlocked.extend(LEVEL_UNLOCKS[lvl])
    return unlocked


def can_unlock(level: StrategicLevel, feature: str) -> bool:
    return feature in get_unlocked_features(level)
