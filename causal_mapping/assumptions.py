"""
Causal Mapping Assumptions

Every causal rule rests on assumptions. They are documented here so users
can judge whether an insight applies to them. Assumptions are looked up by
event type; a business-specific validator then attaches caveats where an
assumption's precondition does not hold. Caveats are informational only:
they show up in the confidence rationale, never in the confidence number.
"""
from typing import Sequence

from loguru import logger

from constants import AssumptionImpact, EventType, Industry
from domain import Assumption, BusinessModel, Event
from .models import AssumptionContext, AssumptionValidation
from .rules import ensure_complete


# ============================================
# CORE ASSUMPTIONS
# ============================================

def _assumption(id: str, description: str, impact: AssumptionImpact, source: str) -> tuple[str, Assumption]:
    return id, Assumption(id=id, description=description, impact=impact, source=source)


CORE_ASSUMPTIONS: dict[str, Assumption] = dict([
    # Labor market
    _assumption(
        "LABOR_WAGES_AFFECT_COSTS",
        "Wage increases in the labor market directly increase labor costs for businesses.",
        AssumptionImpact.HIGH,
        "Economic principle: labor as a cost component",
    ),
    _assumption(
        "LABOR_COSTS_PROPORTIONAL",
        "Labor cost changes are roughly proportional to the weight of labor in total costs.",
        AssumptionImpact.HIGH,
        "Basic accounting: cost structure drives impact magnitude",
    ),
    _assumption(
        "LABOR_CHANGES_GRADUAL",
        "Labor market changes take 3-12 months to fully impact business costs.",
        AssumptionImpact.MEDIUM,
        "Typical employment contract and hiring cycles",
    ),
    # Infrastructure
    _assumption(
        "INFRASTRUCTURE_COSTS_VARIABLE",
        "Cloud and infrastructure costs are variable and adjust with usage and pricing.",
        AssumptionImpact.HIGH,
        "SaaS industry standard: pay-as-you-go pricing models",
    ),
    _assumption(
        "INFRASTRUCTURE_IMPACT_IMMEDIATE",
        "Infrastructure price changes affect costs within 0-3 months.",
        AssumptionImpact.MEDIUM,
        "Cloud provider pricing updates apply to next billing cycle",
    ),
    # Regulation
    _assumption(
        "REGULATION_REQUIRES_COMPLIANCE",
        "New regulations require businesses to invest in compliance measures.",
        AssumptionImpact.HIGH,
        "Legal requirement: non-compliance risks fines and operations",
    ),
    _assumption(
        "REGULATION_MEDIUM_TERM",
        "Regulatory impacts typically materialize over 3-12 months.",
        AssumptionImpact.MEDIUM,
        "Typical grace periods and implementation timelines",
    ),
    # Economic indicators
    _assumption(
        "GDP_AFFECTS_DEMAND",
        "GDP growth/decline affects customer spending and demand for services.",
        AssumptionImpact.HIGH,
        "Macroeconomic principle: GDP correlates with business activity",
    ),
    _assumption(
        "INFLATION_AFFECTS_COSTS",
        "Inflation increases costs across all categories (labor, infrastructure, etc.).",
        AssumptionImpact.HIGH,
        "Monetary principle: purchasing power affects all prices",
    ),
    _assumption(
        "INTEREST_RATES_AFFECT_GROWTH",
        "Higher interest rates reduce customer spending and business investment.",
        AssumptionImpact.MEDIUM,
        "Monetary policy: cost of capital affects growth",
    ),
    # Currency
    _assumption(
        "FX_AFFECTS_INTERNATIONAL",
        "Currency changes only affect businesses with international operations or customers.",
        AssumptionImpact.HIGH,
        "Basic FX exposure: requires cross-border transactions",
    ),
    _assumption(
        "FX_REVENUE_AND_COSTS",
        "Foreign exchange affects both revenue (if international customers) and costs (if international operations).",
        AssumptionImpact.MEDIUM,
        "Accounting standard: FX translation affects both sides of P&L",
    ),
    # Geopolitical
    _assumption(
        "GEOPOLITICAL_CREATES_UNCERTAINTY",
        "Geopolitical events create market uncertainty and reduce customer spending.",
        AssumptionImpact.MEDIUM,
        "Behavioral economics: uncertainty reduces risk-taking",
    ),
    # Disaster
    _assumption(
        "DISASTER_REGIONAL_IMPACT",
        "Natural disasters primarily affect businesses in or dependent on the affected region.",
        AssumptionImpact.HIGH,
        "Geographic constraint: physical disruption is localized",
    ),
])

ASSUMPTIONS_BY_EVENT_TYPE: dict[EventType, tuple[str, ...]] = {
    EventType.LABOR_MARKET: (
        "LABOR_WAGES_AFFECT_COSTS",
        "LABOR_COSTS_PROPORTIONAL",
        "LABOR_CHANGES_GRADUAL",
    ),
    EventType.INFRASTRUCTURE: (
        "INFRASTRUCTURE_COSTS_VARIABLE",
        "INFRASTRUCTURE_IMPACT_IMMEDIATE",
    ),
    EventType.REGULATION_CHANGE: (
        "REGULATION_REQUIRES_COMPLIANCE",
        "REGULATION_MEDIUM_TERM",
    ),
    EventType.ECONOMIC_INDICATOR: (
        "GDP_AFFECTS_DEMAND",
        "INFLATION_AFFECTS_COSTS",
        "INTEREST_RATES_AFFECT_GROWTH",
    ),
    EventType.CURRENCY: ("FX_AFFECTS_INTERNATIONAL", "FX_REVENUE_AND_COSTS"),
    EventType.GEOPOLITICAL: ("GEOPOLITICAL_CREATES_UNCERTAINTY",),
    EventType.DISASTER: ("DISASTER_REGIONAL_IMPACT",),
    EventType.MARKET_SHIFT: ("GDP_AFFECTS_DEMAND",),
    EventType.TECHNOLOGY: (),
}

ensure_complete(ASSUMPTIONS_BY_EVENT_TYPE, "Assumption catalog")

# Assumptions whose precondition is checked per business
FX_PRECONDITION_IDS = frozenset({"FX_AFFECTS_INTERNATIONAL"})
REGIONAL_PRECONDITION_IDS = frozenset({"DISASTER_REGIONAL_IMPACT"})

FX_DOMESTIC_WARNING = "FX impact may be minimal: business operates only domestically."
REGIONAL_ABSENCE_WARNING = "Regional event may not affect business: no presence in affected region."


# ============================================
# INDUSTRY ASSUMPTIONS
# ============================================

SAAS_ASSUMPTIONS: tuple[Assumption, ...] = (
    Assumption(
        id="SAAS_SUBSCRIPTION_MODEL",
        description="Revenue is primarily subscription-based with predictable recurring patterns.",
        impact=AssumptionImpact.HIGH,
        source="SaaS business model definition",
    ),
    Assumption(
        id="SAAS_CAC_MATTERS",
        description="Customer acquisition cost (CAC) significantly affects profitability.",
        impact=AssumptionImpact.HIGH,
        source="SaaS unit economics: CAC payback period is critical metric",
    ),
    Assumption(
        id="SAAS_CHURN_SENSITIVE",
        description="Revenue is highly sensitive to customer churn rate.",
        impact=AssumptionImpact.HIGH,
        source="SaaS economics: MRR depends on retention",
    ),
    Assumption(
        id="SAAS_LABOR_INTENSIVE",
        description="SaaS businesses are labor-intensive (engineering, sales, support).",
        impact=AssumptionImpact.HIGH,
        source="SaaS industry benchmark: labor typically 40-50% of costs",
    ),
    Assumption(
        id="SAAS_CLOUD_DEPENDENT",
        description="SaaS companies depend heavily on cloud infrastructure providers.",
        impact=AssumptionImpact.HIGH,
        source="Technical requirement: SaaS products run on cloud infrastructure",
    ),
)

INDUSTRY_ASSUMPTIONS: dict[Industry, tuple[Assumption, ...]] = {
    Industry.SAAS: SAAS_ASSUMPTIONS,
}


# ============================================
# LOOKUP AND VALIDATION
# ============================================

def get_assumptions(event_type: EventType) -> tuple[Assumption, ...]:
    """
    Get the assumptions behind an event type's causal rule.

    Args:
        event_type: Event category

    Returns:
        Assumptions in catalog order, possibly empty
    """
    return tuple(CORE_ASSUMPTIONS[key] for key in ASSUMPTIONS_BY_EVENT_TYPE[event_type])


def get_industry_assumptions(industry: Industry) -> tuple[Assumption, ...]:
    """Business-model assumptions for an industry template."""
    return INDUSTRY_ASSUMPTIONS.get(industry, ())


def build_assumption_context(event: Event, business: BusinessModel) -> AssumptionContext:
    """Collect the business facts assumption preconditions depend on."""
    return AssumptionContext(
        has_international_operations=business.has_international_operations(),
        has_international_customers=business.has_international_customers(),
        operates_in_region=business.has_regional_exposure(event.region),
    )


def validate_for_business(
    assumptions: Sequence[Assumption],
    context: AssumptionContext,
) -> AssumptionValidation:
    """
    Check whether assumptions hold for a specific business.

    Args:
        assumptions: Assumptions attached to a mapping
        context: Business facts to check preconditions against

    Returns:
        AssumptionValidation, always valid, with one warning per failed precondition
    """
    warnings = []

    for assumption in assumptions:
        if (
            assumption.id in FX_PRECONDITION_IDS
            and not context.has_international_operations
            and not context.has_international_customers
        ):
            warnings.append(FX_DOMESTIC_WARNING)

        if assumption.id in REGIONAL_PRECONDITION_IDS and not context.operates_in_region:
            warnings.append(REGIONAL_ABSENCE_WARNING)

    if warnings:
        logger.debug(f"Assumption caveats: {warnings}")

    return AssumptionValidation(valid=True, warnings=tuple(warnings))
