"""API endpoints for page completeness, section locks and gate reports."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from page_intel.core.gates import GateReport, build_gate_report
from page_intel.core.intelligence import ScoreBonuses
from page_intel.core.logging import get_logger, log_with_context
from page_intel.core.sections import (
    LockMatch,
    PageCompleteness,
    SectionContent,
    SectionLockStatus,
    calculate_page_completeness,
    resolve_section_lock,
)

logger = get_logger(__name__)

router = APIRouter()


class PageRequest(BaseModel):
    """Consultation record plus the page's current sections."""

    record: dict[str, Any] = Field(default_factory=dict, description="Consultation record")
    sections: list[SectionContent] = Field(
        default_factory=list, description="Current page sections"
    )


class GateReportRequest(PageRequest):
    bonuses: ScoreBonuses | None = Field(None, description="Intelligence score bonuses")
    record_id: str | None = Field(None, description="Consultation id for log context")


@router.post("/sections/completeness", response_model=PageCompleteness)
async def get_page_completeness(request: PageRequest) -> PageCompleteness:
    """
    Compute which page elements the consultation data unlocks.

    Raises:
        HTTPException 500: If computation fails
    """
    try:
        return calculate_page_completeness(request.record, request.sections)
    except Exception as e:
        logger.exception("Failed to compute page completeness")
        raise HTTPException(status_code=500, detail="Failed to compute page completeness") from e


@router.post("/sections/{section_type}/status", response_model=SectionLockStatus)
async def get_section_lock(
    section_type: str,
    request: PageRequest,
    match: LockMatch | None = Query(None, description="Lock lookup: fuzzy or exact"),
) -> SectionLockStatus:
    """
    Resolve whether a section is locked, partial or unlocked.

    Args:
        section_type: Section type (e.g. 'stats-bar')
        request: Record and current sections
        match: Override for the configured lock lookup policy

    Raises:
        HTTPException 500: If resolution fails
    """
    try:
        completeness = calculate_page_completeness(request.record, request.sections)
        lock = resolve_section_lock(section_type, completeness, match=match)
    except Exception as e:
        logger.exception(f"Failed to resolve lock for section {section_type}")
        raise HTTPException(status_code=500, detail="Failed to resolve section lock") from e

    log_with_context(
        logger,
        logging.INFO,
        f"Section {section_type} is {lock.status.value}",
        section_type=section_type,
        status=lock.status.value,
    )
    return lock


@router.post("/gates", response_model=GateReport)
async def get_gate_report(request: GateReportRequest) -> GateReport:
    """
    Score a consultation record and resolve all section locks.

    Raises:
        HTTPException 500: If the report cannot be built
    """
    try:
        return build_gate_report(
            request.record, request.sections, request.bonuses, record_id=request.record_id
        )
    except Exception as e:
        logger.exception("Failed to build gate report")
        raise HTTPException(status_code=500, detail="Failed to build gate report") from e
