"""Master field registry for consultation data.

Every field the consultation collects is listed here with its tier and weight.
Tier totals are fixed: required 60, enrichment 20, proof 15, advanced 5,
brand 7 (tracked separately in the UI but still counted in the overall score).
"""

from collections.abc import Iterable

from page_intel.core.completion.types import FieldDefinition, FieldTier

_R = FieldTier.REQUIRED
_E = FieldTier.ENRICHMENT
_P = FieldTier.PROOF
_A = FieldTier.ADVANCED
_B = FieldTier.BRAND


FIELD_REGISTRY: tuple[FieldDefinition, ...] = (
    # REQUIRED (60 points)
    FieldDefinition("businessName", _R, "Business Name", "identity", 10),
    FieldDefinition("industry", _R, "Industry", "identity", 8),
    FieldDefinition("industryCategory", _R, "Industry Category", "identity", 4),
    FieldDefinition("industrySubcategory", _R, "Industry Subcategory", "identity", 4),
    FieldDefinition("idealClient", _R, "Ideal Client", "audience", 10),
    FieldDefinition("mainOffer", _R, "Main Offer", "offer", 10),
    FieldDefinition("primaryGoal", _R, "Page Goal", "goals", 8),
    FieldDefinition("ctaText", _R, "CTA Text", "goals", 6),
    # ENRICHMENT (20 points)
    FieldDefinition("productName", _E, "Product/Service Name", "identity", 3),
    FieldDefinition("uniqueStrength", _E, "Unique Strength", "identity", 3),
    FieldDefinition("identitySentence", _E, "Identity Sentence", "identity", 4),
    FieldDefinition("clientFrustration", _E, "Client Frustrations", "audience", 3),
    FieldDefinition("desiredOutcome", _E, "Desired Outcome", "audience", 3),
    FieldDefinition("offerIncludes", _E, "Offer Includes", "offer", 2),
    FieldDefinition("processDescription", _E, "Process Description", "offer", 2),
    # PROOF (15 points)
    FieldDefinition(
        "yearsInBusiness", _P, "Years in Business", "identity", 3,
        extraction_hint='Look for "X years", "since [year]", "founded in"',
    ),
    FieldDefinition(
        "clientCount", _P, "Client Count", "credibility", 3,
        extraction_hint='Look for "X clients", "worked with X", "served X"',
    ),
    FieldDefinition(
        "achievements", _P, "Achievements", "credibility", 3,
        extraction_hint="Look for certifications, awards, credentials",
    ),
    FieldDefinition("testimonialText", _P, "Testimonial", "credibility", 2),
    FieldDefinition("concreteProofStory", _P, "Proof Story", "credibility", 2),
    FieldDefinition("proofStoryContext", _P, "Proof Context", "credibility", 2),
    # ADVANCED (5 points)
    FieldDefinition("investmentRange", _A, "Investment Range", "offer", 1),
    FieldDefinition("methodologySteps", _A, "Methodology Steps", "offer", 2),
    FieldDefinition("objectionsToOvercome", _A, "Objections", "goals", 1),
    FieldDefinition("calculatorTypicalResults", _A, "Calculator Results", "offer", 0.5),
    FieldDefinition("calculatorDisclaimer", _A, "Calculator Disclaimer", "offer", 0.25),
    FieldDefinition("calculatorNextStep", _A, "Calculator CTA", "offer", 0.25),
    # BRAND (7 points)
    FieldDefinition("websiteUrl", _B, "Website URL", "brand_setup", 2),
    FieldDefinition("logoUrl", _B, "Logo", "brand_setup", 2),
    FieldDefinition("primaryColor", _B, "Primary Color", "branding", 1),
    FieldDefinition("secondaryColor", _B, "Secondary Color", "branding", 1),
    FieldDefinition("fontFamily", _B, "Font", "branding", 1),
)

TIER_MAX_POINTS: dict[FieldTier, float] = {
    FieldTier.REQUIRED: 60,
    FieldTier.ENRICHMENT: 20,
    FieldTier.PROOF: 15,
    FieldTier.ADVANCED: 5,
    FieldTier.BRAND: 7,
}


def get_fields_for_tier(
    tier: FieldTier, registry: Iterable[FieldDefinition] = FIELD_REGISTRY
) -> list[FieldDefinition]:
    """Fields of a single tier, in registry order."""
    return [f for f in registry if f.tier == tier]


def validate_registry(
    registry: Iterable[FieldDefinition] = FIELD_REGISTRY,
    tier_max: dict[FieldTier, float] = TIER_MAX_POINTS,
) -> list[str]:
    """
    Check a registry for configuration defects.

    Args:
        registry: Field definitions to check
        tier_max: Intended maximum points per tier

    Returns:
        List of problems (empty when the registry is consistent)
    """
    problems: list[str] = []
    seen: set[str] = set()
    tier_totals: dict[FieldTier, float] = {}

    for field in registry:
        if field.key in seen:
            problems.append(f"Duplicate field key: {field.key}")
        seen.add(field.key)

        if field.weight <= 0:
            problems.append(f"Non-positive weight for {field.key}: {field.weight}")

        tier_totals[field.tier] = tier_totals.get(field.tier, 0) + field.weight

    # A tier with an intended maximum but no fields sums to 0
    for tier in [*tier_max, *(t for t in tier_totals if t not in tier_max)]:
        total = tier_totals.get(tier, 0)
        if tier not in tier_max:
            problems.append(f"Tier {tier.value} has no intended maximum")
        elif abs(total - tier_max[tier]) > 1e-9:
            problems.append(
                f"Tier {tier.value} weights sum to {total:g}, expected {tier_max[tier]:g}"
            )

    return problems
