"""Page builder gate report.

Runs every scorer against the same consultation record and resolves the lock
state of each page section. The scorers stay independent: the completion
score gates the strategy brief, the intelligence level gates page generation
and trial signup, and page completeness gates section editing.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

from pydantic import BaseModel, Field

from page_intel.core.completion import CompletionResult, calculate_completion_score
from page_intel.core.consultation import ReadinessResult, calculate_readiness
from page_intel.core.intelligence import (
    IntelligenceScore,
    ScoreBonuses,
    calculate_intelligence_score,
    can_generate,
    can_start_trial,
    get_next_prompt,
    get_unlocked_features,
)
from page_intel.core.logging import get_logger, log_with_context
from page_intel.core.sections import (
    SECTION_UNLOCK_KEYS,
    PageCompleteness,
    SectionContent,
    SectionLockStatus,
    SectionStatus,
    StrengthLabel,
    calculate_page_completeness,
    get_strength_label,
    is_conversion_ready,
    resolve_section_lock,
)

logger = get_logger(__name__)


class GateReport(BaseModel):
    """Everything the page builder needs to gate its actions."""

    completion: CompletionResult
    intelligence: IntelligenceScore
    page: PageCompleteness
    readiness: ReadinessResult
    sections: dict[str, SectionLockStatus] = Field(default_factory=dict)
    strength: StrengthLabel

    can_generate_brief: bool
    can_generate_page: bool
    can_start_trial: bool
    is_conversion_ready: bool
    next_prompt: Optional[str] = None
    unlocked_features: list[str] = Field(default_factory=list)


def build_gate_report(
    record: Any,
    sections: Optional[Iterable[SectionContent]] = None,
    bonuses: Optional[ScoreBonuses] = None,
    record_id: Optional[str] = None,
) -> GateReport:
    """
    Score a consultation record and resolve section locks.

    Args:
        record: Consultation record
        sections: Current page sections (content overrides data-based locks)
        bonuses: Intelligence score bonuses
        record_id: Consultation id attached to the log line

    Returns:
        GateReport combining all scores and gating flags
    """
    sections = list(sections or [])

    completion = calculate_completion_score(record)
    intelligence = calculate_intelligence_score(record, bonuses)
    page = calculate_page_completeness(record, sections)
    readiness = calculate_readiness(record)

    section_types = list(SECTION_UNLOCK_KEYS)
    for section in sections:
        if section.type not in section_types:
            section_types.append(section.type)

    section_locks = {
        section_type: resolve_section_lock(section_type, page)
        for section_type in section_types
    }

    report = GateReport(
        completion=completion,
        intelligence=intelligence,
        page=page,
        readiness=readiness,
        sections=section_locks,
        strength=get_strength_label(page.score),
        can_generate_brief=completion.can_generate_brief,
        can_generate_page=can_generate(intelligence),
        can_start_trial=can_start_trial(intelligence),
        is_conversion_ready=is_conversion_ready(page.score),
        next_prompt=get_next_prompt(intelligence),
        unlocked_features=get_unlocked_features(intelligence.level),
    )

    log_with_context(
        logger,
        logging.INFO,
        "Built gate report",
        record_id=record_id,
        completion=completion.score,
        intelligence=intelligence.total_score,
        strategic_level=intelligence.level.value,
        page=page.score,
        readiness=readiness.score,
        locked_sections=sum(
            1 for s in section_locks.values() if s.status != SectionStatus.UNLOCKED
        ),
    )

    return report
