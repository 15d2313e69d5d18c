"""API router for v1 endpoints."""

from fastapi import APIRouter

from page_intel.api import scoring, sections

router = APIRouter()

# Scoring routes (completion, intelligence, readiness, registry)
router.include_router(scoring.router, tags=["scoring"])

# Section completeness, lock and gate report routes
router.include_router(sections.router, tags=["sections"])
