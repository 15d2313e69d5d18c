"""Types for page completeness and section locking."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class SectionStatus(str, Enum):
    """Editability of a page section."""

    LOCKED = "locked"
    PARTIAL = "partial"
    UNLOCKED = "unlocked"


LockMatch = Literal["fuzzy", "exact"]


@dataclass(frozen=True)
class CompletenessCheck:
    """A data requirement that unlocks one or more page elements."""

    field: str
    weight: int
    unlocks: tuple[str, ...]
    label: str
    min_items: Optional[int] = None
    min_length: Optional[int] = None
    milestone: Optional[str] = None
    aliases: tuple[str, ...] = ()


class SectionContent(BaseModel):
    """A page section as stored by the page builder."""

    type: str = Field(..., description="Section type (e.g. 'hero', 'faq')")
    content: Optional[dict[str, Any]] = Field(None, description="Section content payload")


class LockedSection(BaseModel):
    """An unlock key still waiting on data."""

    section: str
    requirement: str = Field(..., description="Label of the missing field")
    progress: str = Field(default="", description="Item progress, e.g. '2/3'")


class NextUnlock(BaseModel):
    section: str
    hint: str


class Milestone(BaseModel):
    name: str
    achieved: bool
    description: str


class PageCompleteness(BaseModel):
    """Which page elements the captured data unlocks."""

    score: int = Field(default=0, ge=0, le=100)
    unlocked_sections: list[str] = Field(default_factory=list)
    locked_sections: list[LockedSection] = Field(default_factory=list)
    next_unlock: Optional[NextUnlock] = None
    milestones: list[Milestone] = Field(default_factory=list)


class SectionLockStatus(BaseModel):
    """Resolved lock state for a single section type."""

    section_type: str
    status: SectionStatus
    requirement: Optional[str] = None
    progress: Optional[str] = None


class StrengthLabel(BaseModel):
    label: str
    tone: str = Field(..., description="Display tone key for the meter")
