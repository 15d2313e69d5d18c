"""Page completeness from consultation data and existing section content.

Each check guards one or more unlock keys. A check passes when the data meets
its threshold, or when a page section it feeds already has real content (so
hand-written sections are never re-locked by missing consultation data).
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from page_intel.core.logging import get_logger
from page_intel.core.record import first_value, has_value
from page_intel.core.sections.types import (
    CompletenessCheck,
    LockedSection,
    Milestone,
    NextUnlock,
    PageCompleteness,
    SectionContent,
    StrengthLabel,
)

logger = get_logger(__name__)


# Weights sum to 100
COMPLETENESS_CHECKS: tuple[CompletenessCheck, ...] = (
    CompletenessCheck("companyName", 8, ("hero-text",), "Company name", min_length=2),
    CompletenessCheck(
        "logoUrl", 12, ("hero-brand", "header-logo"), "Logo", milestone="Brand Identity"
    ),
    CompletenessCheck("industryCategory", 8, ("design-system",), "Industry"),
    CompletenessCheck("primaryColor", 4, ("color-theme",), "Brand color"),
    CompletenessCheck(
        "valueProposition", 12, ("hero-headline",), "Value proposition",
        min_length=20, milestone="Core Message",
    ),
    CompletenessCheck(
        "proofPoints", 12, ("stats-bar",), "Proof points",
        min_items=3, milestone="Authority Signals", aliases=("proofElements",),
    ),
    CompletenessCheck(
        "problemStatement", 8, ("problem-solution",), "Problem statement", min_length=20
    ),
    CompletenessCheck(
        "differentiator", 10, ("hero-differentiator",), "Differentiator",
        min_length=15, milestone="Unique Angle",
    ),
    CompletenessCheck(
        "testimonials", 10, ("social-proof",), "Testimonial",
        min_items=1, milestone="Social Proof",
    ),
    CompletenessCheck("services", 6, ("features",), "Services", min_items=2),
    CompletenessCheck("faqs", 6, ("faq",), "FAQs", min_items=2),
    CompletenessCheck("ctaText", 4, ("cta-buttons",), "CTA text", min_length=3),
)

# Checks at or above this weight can be suggested as the next unlock
NEXT_UNLOCK_MIN_WEIGHT = 8

UNLOCK_KEY_SECTIONS: dict[str, str] = {
    "hero-text": "hero",
    "hero-headline": "hero",
    "hero-brand": "hero",
    "hero-differentiator": "hero",
    "header-logo": "hero",
    "design-system": "hero",
    "color-theme": "hero",
    "stats-bar": "stats-bar",
    "problem-solution": "problem-solution",
    "features": "features",
    "social-proof": "social-proof",
    "faq": "faq",
    "cta-buttons": "final-cta",
}


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def section_has_content(section: SectionContent) -> bool:
    """Whether a section holds real content rather than empty placeholders."""
    content = section.content
    if not content:
        return False

    section_type = section.type
    if section_type in ("hero", "beta-hero-teaser", "final-cta", "beta-final-cta"):
        return bool(_text(content.get("headline")))
    if section_type == "problem-solution":
        return any(
            _text(content.get(key))
            for key in ("problemStatement", "solutionStatement", "problem", "solution")
        )
    if section_type in ("features", "beta-perks"):
        return _non_empty_list(content.get("features"))
    if section_type == "stats-bar":
        return _non_empty_list(content.get("statistics"))
    if section_type in ("social-proof", "waitlist-proof"):
        testimonial = content.get("testimonial")
        return _non_empty_list(content.get("testimonials")) or bool(
            isinstance(testimonial, Mapping) and testimonial.get("quote")
        )
    if section_type == "faq":
        return _non_empty_list(content.get("items"))
    if section_type == "how-it-works":
        return _non_empty_list(content.get("steps"))

    # Unknown section types count as filled once they carry any content
    return len(content) > 0


def _count_items(value: Any) -> int:
    if not isinstance(value, list):
        return 0
    count = 0
    for item in value:
        if isinstance(item, Mapping):
            if any(item.values()):
                count += 1
        elif has_value(item):
            count += 1
    return count


def calculate_page_completeness(
    data: Any,
    sections: Optional[Iterable[SectionContent]] = None,
) -> PageCompleteness:
    """
    Calculate which page elements the consultation data unlocks.

    Args:
        data: Consultation record
        sections: Current page sections; sections with content count as unlocked

    Returns:
        PageCompleteness with score, unlocked/locked keys, next unlock and milestones
    """
    if not isinstance(data, Mapping):
        return PageCompleteness()

    sections_with_content = {s.type for s in (sections or []) if section_has_content(s)}

    score = 0
    unlocked: list[str] = []
    locked: list[LockedSection] = []
    milestones: list[Milestone] = []
    next_unlock: Optional[NextUnlock] = None

    for check in COMPLETENESS_CHECKS:
        value = first_value(data, (check.field, *check.aliases))
        progress = ""
        current_count = 0

        if any(UNLOCK_KEY_SECTIONS.get(k) in sections_with_content for k in check.unlocks):
            complete = True
        elif check.min_items:
            current_count = _count_items(value)
            complete = current_count >= check.min_items
            progress = f"{current_count}/{check.min_items}"
        elif check.min_length:
            complete = len(_text(value)) >= check.min_length
        else:
            complete = has_value(value)

        if complete:
            score += check.weight
            unlocked.extend(check.unlocks)
            if check.milestone:
                milestones.append(
                    Milestone(
                        name=check.milestone, achieved=True, description=f"{check.label} added"
                    )
                )
            continue

        for key in check.unlocks:
            if not any(entry.section == key for entry in locked):
                locked.append(
                    LockedSection(section=key, requirement=check.label, progress=progress)
                )

        if check.milestone:
            milestones.append(
                Milestone(
                    name=check.milestone,
                    achieved=False,
                    description=f"Add {check.label.lower()}",
                )
            )

        if next_unlock is None and check.weight >= NEXT_UNLOCK_MIN_WEIGHT:
            target = check.unlocks[0]
            readable = target.replace("-", " ")
            if check.min_items:
                hint = (
                    f"Add {check.min_items - current_count} more {check.label.lower()} "
                    f"to unlock {readable}"
                )
            else:
                hint = f"Add {check.label.lower()} to unlock {readable}"
            next_unlock = NextUnlock(section=target, hint=hint)

    logger.debug(
        f"Page completeness {score}% ({len(unlocked)} unlocked, {len(locked)} locked)"
    )

    return PageCompleteness(
        score=score,
        unlocked_sections=unlocked,
        locked_sections=locked,
        next_unlock=next_unlock,
        milestones=milestones,
    )


def get_strength_label(score: float) -> StrengthLabel:
    """Page strength meter label for a completeness score."""
    if score >= 90:
        return StrengthLabel(label="Conversion-Ready", tone="success")
    if score >= 75:
        return StrengthLabel(label="Strong", tone="positive")
    if score >= 50:
        return StrengthLabel(label="Building", tone="info")
    if score >= 25:
        return StrengthLabel(label="Starting", tone="warning")
    return StrengthLabel(label="Just Beginning", tone="muted")


def is_conversion_ready(score: float) -> bool:
    return score >= 90
