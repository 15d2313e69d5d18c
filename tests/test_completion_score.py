"""Unit tests for the field registry and completion scorer.

Tests coverage:
- validate_registry() - shipped registry and configuration defects
- calculate_completion_score() - empty, partial, full, nested and custom registries
- tier_for_score() - threshold boundaries
- Properties: idempotence, monotonicity, no input mutation
"""

import copy

import pytest

from page_intel.core.completion import (
    FIELD_REGISTRY,
    TIER_MAX_POINTS,
    CompletionTier,
    FieldDefinition,
    FieldTier,
    calculate_completion_score,
    get_fields_for_tier,
    tier_for_score,
    validate_registry,
)
from tests.fixtures_consultation import FULL_COMPLETION_RECORD


# =============================================================================
# Registry
# =============================================================================


def test_shipped_registry_is_consistent():
    """Unique keys, positive weights, tier sums match their intended maximum."""
    assert validate_registry() == []


def test_registry_keys_unique():
    keys = [f.key for f in FIELD_REGISTRY]
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize("tier", list(FieldTier))
def test_every_tier_has_fields_summing_to_max(tier):
    fields = get_fields_for_tier(tier)
    assert fields
    assert sum(f.weight for f in fields) == pytest.approx(TIER_MAX_POINTS[tier])


def test_validate_registry_reports_defects():
    registry = (
        FieldDefinition("industry", FieldTier.REQUIRED, "Industry", "identity", 10),
        FieldDefinition("industry", FieldTier.REQUIRED, "Industry again", "identity", 5),
        FieldDefinition("notes", FieldTier.ENRICHMENT, "Notes", "notes", 0),
    )
    problems = validate_registry(
        registry, tier_max={FieldTier.REQUIRED: 10, FieldTier.ENRICHMENT: 20}
    )

    assert "Duplicate field key: industry" in problems
    assert any("Non-positive weight for notes" in p for p in problems)
    assert any("Tier required weights sum to 15" in p for p in problems)
    assert any("Tier enrichment weights sum to 0" in p for p in problems)


def test_validate_registry_flags_tier_without_max():
    registry = (FieldDefinition("logoUrl", FieldTier.BRAND, "Logo", "brand_setup", 2),)
    problems = validate_registry(registry, tier_max={})
    assert problems == ["Tier brand has no intended maximum"]


def test_validate_registry_flags_tier_with_no_fields():
    registry = tuple(f for f in FIELD_REGISTRY if f.tier != FieldTier.BRAND)
    assert validate_registry(registry) == ["Tier brand weights sum to 0, expected 7"]


# =============================================================================
# Scoring
# =============================================================================


def test_empty_record_scores_zero():
    result = calculate_completion_score({})

    assert result.score == 0
    assert result.tier == CompletionTier.INSUFFICIENT
    assert result.can_generate_brief is False
    assert result.filled_fields == []
    assert result.missing_required == [
        f.key for f in FIELD_REGISTRY if f.tier == FieldTier.REQUIRED
    ]


@pytest.mark.parametrize("record", [None, "not a record", 12, ["industry"]])
def test_malformed_record_scores_zero(record):
    result = calculate_completion_score(record)
    assert result.score == 0
    assert result.tier == CompletionTier.INSUFFICIENT


def test_full_record_scores_comprehensive():
    result = calculate_completion_score(FULL_COMPLETION_RECORD)

    assert result.score == 100
    assert result.tier == CompletionTier.COMPREHENSIVE
    assert result.can_generate_brief is True
    assert result.missing_required == []
    assert result.missing_enrichment == []
    assert result.missing_proof == []
    for tier in FieldTier:
        assert result.tier_scores[tier].percentage == 100


def test_required_only_record():
    """60 of 107 points: minimal tier, brief can be generated."""
    record = {
        f.key: FULL_COMPLETION_RECORD[f.key]
        for f in FIELD_REGISTRY
        if f.tier == FieldTier.REQUIRED
    }
    result = calculate_completion_score(record)

    assert result.score == 56
    assert result.tier == CompletionTier.MINIMAL
    assert result.can_generate_brief is True
    assert result.tier_scores[FieldTier.REQUIRED].percentage == 100
    assert result.tier_scores[FieldTier.PROOF].percentage == 0
    assert result.missing_proof == [f.key for f in get_fields_for_tier(FieldTier.PROOF)]


def test_single_missing_required_blocks_brief():
    record = dict(FULL_COMPLETION_RECORD)
    record["ctaText"] = "   "
    result = calculate_completion_score(record)

    assert result.missing_required == ["ctaText"]
    assert result.can_generate_brief is False
    assert result.tier == CompletionTier.COMPREHENSIVE


def test_empty_arrays_do_not_count():
    record = dict(FULL_COMPLETION_RECORD)
    record["offerIncludes"] = []
    result = calculate_completion_score(record)

    assert "offerIncludes" in result.missing_enrichment
    assert "offerIncludes" not in result.filled_fields


def test_unknown_keys_ignored():
    result = calculate_completion_score({"favouriteColour": "teal", "notes": ["x"]})
    assert result.score == 0


def test_two_field_registry_example():
    """One required (10) and one enrichment (5) field; only the required is filled."""
    registry = (
        FieldDefinition("industry", FieldTier.REQUIRED, "Industry", "identity", 10),
        FieldDefinition("notes", FieldTier.ENRICHMENT, "Notes", "notes", 5),
    )
    result = calculate_completion_score({"industry": "SaaS"}, registry=registry)

    assert result.score == 67
    assert result.tier == CompletionTier.MINIMAL
    assert result.missing_required == []
    assert result.missing_enrichment == ["notes"]
    assert result.can_generate_brief is True
    # Tiers without registered fields report 0, not a division error
    assert result.tier_scores[FieldTier.PROOF].total == 0
    assert result.tier_scores[FieldTier.PROOF].percentage == 0


def test_nested_registry_keys_resolve():
    registry = (
        FieldDefinition("brand.logoUrl", FieldTier.BRAND, "Logo", "brand_setup", 2),
        FieldDefinition("brand.primaryColor", FieldTier.BRAND, "Primary Color", "branding", 2),
    )
    result = calculate_completion_score(
        {"brand": {"logoUrl": "https://cdn.example/logo.svg"}}, registry=registry
    )

    assert result.score == 50
    assert result.filled_fields == ["brand.logoUrl"]
    assert result.tier_scores[FieldTier.BRAND].percentage == 50


@pytest.mark.parametrize(
    "score,expected",
    [
        (0, CompletionTier.INSUFFICIENT),
        (49, CompletionTier.INSUFFICIENT),
        (50, CompletionTier.MINIMAL),
        (69, CompletionTier.MINIMAL),
        (70, CompletionTier.GOOD),
        (89, CompletionTier.GOOD),
        (90, CompletionTier.COMPREHENSIVE),
        (100, CompletionTier.COMPREHENSIVE),
    ],
)
def test_tier_for_score_boundaries(score, expected):
    assert tier_for_score(score) == expected


# =============================================================================
# Properties
# =============================================================================


def test_scoring_is_idempotent():
    record = {"businessName": "Northwind", "industry": "Finance", "logoUrl": "x"}
    first = calculate_completion_score(record)
    second = calculate_completion_score(record)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_scoring_does_not_mutate_record():
    record = copy.deepcopy(FULL_COMPLETION_RECORD)
    calculate_completion_score(record)
    assert record == FULL_COMPLETION_RECORD


def test_adding_fields_never_lowers_score():
    record: dict = {}
    previous = calculate_completion_score(record).score

    for field in FIELD_REGISTRY:
        record[field.key] = FULL_COMPLETION_RECORD[field.key]
        current = calculate_completion_score(record).score
        assert current >= previous
        previous = current

    assert previous == 100


def test_removing_data_lowers_score():
    """No ratchet: scores are recomputed from the record each time."""
    full = calculate_completion_score(FULL_COMPLETION_RECORD).score
    record = dict(FULL_COMPLETION_RECORD)
    del record["businessName"]

    assert calculate_completion_score(record).score < full
