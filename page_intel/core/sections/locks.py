"""Section lock resolution.

A page section is editable only when the consultation data it depends on has
been captured, which keeps generation from inventing stats or testimonials for
empty fields. Statuses are recomputed from scratch, so removing data can lock
a section again.
"""

from typing import Optional

from page_intel.core.config import get_settings
from page_intel.core.sections.types import (
    LockedSection,
    LockMatch,
    PageCompleteness,
    SectionLockStatus,
    SectionStatus,
)

# Section type -> unlock keys it needs; unknown types use their own name
SECTION_UNLOCK_KEYS: dict[str, tuple[str, ...]] = {
    "hero": ("hero-text", "hero-headline", "hero-brand", "hero-differentiator"),
    "stats-bar": ("stats-bar",),
    "problem-solution": ("problem-solution",),
    "features": ("features",),
    "social-proof": ("social-proof",),
    "testimonials": ("social-proof",),
    "faq": ("faq",),
    "final-cta": ("cta-buttons",),
}


def get_section_status(section_type: str, completeness: PageCompleteness) -> SectionStatus:
    """
    Status of a section from its unlock keys.

    Unlocked when every key is unlocked, partial when some are, locked otherwise.
    """
    unlock_keys = SECTION_UNLOCK_KEYS.get(section_type, (section_type,))
    unlocked = set(completeness.unlocked_sections)
    unlocked_count = sum(1 for key in unlock_keys if key in unlocked)

    if unlocked_count == len(unlock_keys):
        return SectionStatus.UNLOCKED
    if unlocked_count > 0:
        return SectionStatus.PARTIAL
    return SectionStatus.LOCKED


def find_locked_section(
    section_type: str,
    completeness: PageCompleteness,
    match: Optional[LockMatch] = None,
) -> Optional[LockedSection]:
    """
    Find the lock descriptor for a section type.

    Exact name matches win. In "fuzzy" mode the lookup then falls back to the
    first entry whose name contains ``section_type`` ("faq" also matches
    "faq-extended"; "hero" matches "hero-text").

    Args:
        section_type: Section type or unlock key
        completeness: Current page completeness
        match: "fuzzy" or "exact"; defaults to SECTION_LOCK_MATCH

    Returns:
        Matching LockedSection, or None
    """
    match = match or get_settings().SECTION_LOCK_MATCH

    for entry in completeness.locked_sections:
        if entry.section == section_type:
            return entry

    if match == "fuzzy" and section_type:
        for entry in completeness.locked_sections:
            if section_type in entry.section:
                return entry

    return None


def resolve_section_lock(
    section_type: str,
    completeness: PageCompleteness,
    match: Optional[LockMatch] = None,
) -> SectionLockStatus:
    """Status plus the requirement and progress to show on the lock overlay."""
    status = get_section_status(section_type, completeness)
    if status == SectionStatus.UNLOCKED:
        return SectionLockStatus(section_type=section_type, status=status)

    # Prefer the descriptor of an unlock key that is actually still locked
    entry = None
    unlocked = set(completeness.unlocked_sections)
    for key in SECTION_UNLOCK_KEYS.get(section_type, ()):
        if key not in unlocked:
            entry = find_locked_section(key, completeness, match="exact")
            if entry:
                break
    if entry is None:
        entry = find_locked_section(section_type, completeness, match=match)

    return SectionLockStatus(
        section_type=section_type,
        status=status,
        requirement=entry.requirement if entry else None,
        progress=(entry.progress or None) if entry else None,
    )
