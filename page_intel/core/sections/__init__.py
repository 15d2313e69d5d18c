"""Page completeness and section locking.

Usage:
    from page_intel.core.sections import calculate_page_completeness, resolve_section_lock

    completeness = calculate_page_completeness(record, sections)
    lock = resolve_section_lock("stats-bar", completeness)
"""

from page_intel.core.sections.completeness import (
    COMPLETENESS_CHECKS,
    UNLOCK_KEY_SECTIONS,
    calculate_page_completeness,
    get_strength_label,
    is_conversion_ready,
    section_has_content,
)
from page_intel.core.sections.locks import (
    SECTION_UNLOCK_KEYS,
    find_locked_section,
    get_section_status,
    resolve_section_lock,
)
from page_intel.core.sections.types import (
    CompletenessCheck,
    LockedSection,
    LockMatch,
    Milestone,
    NextUnlock,
    PageCompleteness,
    SectionContent,
    SectionLockStatus,
    SectionStatus,
    StrengthLabel,
)

__all__ = [
    "calculate_page_completeness",
    "section_has_content",
    "get_strength_label",
    "is_conversion_ready",
    "get_section_status",
    "find_locked_section",
    "resolve_section_lock",
    "COMPLETENESS_CHECKS",
    "UNLOCK_KEY_SECTIONS",
    "SECTION_UNLOCK_KEYS",
    "CompletenessCheck",
    "LockedSection",
    "LockMatch",
    "Milestone",
    "NextUnlock",
    "PageCompleteness",
    "SectionContent",
    "SectionLockStatus",
    "SectionStatus",
    "StrengthLabel",
]
