"""
Causal Rules - deterministic event type -> business lever mapping.

These rules are not learned from data. They are explicitly encoded
economic reasoning, one per event type, and every step of every rule is
auditable: the description says what happens, the mechanism says how,
and the confidence says how sure we are of that link.

Step 1's mechanism is always the event summary itself; the last step's
mechanism ends with the business context built from the business model.
"""
from loguru import logger

from constants import (
    BusinessDriverType,
    EventType,
    ImpactDirection,
    SensitivityFactor,
    TimeHorizon,
)
from .models import CatalogError, CausalRule, StepTemplate


# ============================================
# RULE CATALOG
# ============================================

CAUSAL_RULES: dict[EventType, CausalRule] = {
    EventType.LABOR_MARKET: CausalRule(
        event_type=EventType.LABOR_MARKET,
        affected_drivers=(
            BusinessDriverType.LABOR_COSTS,
            BusinessDriverType.R_AND_D,
            BusinessDriverType.SALES_MARKETING,
        ),
        sensitivity_factor=SensitivityFactor.LABOR,
        default_direction=ImpactDirection.INCREASE,  # Wage increases are most common
        time_horizon=TimeHorizon.MEDIUM,
        steps=(
            StepTemplate(
                "Labor market event occurs",
                "{event}",
                0.9,
            ),
            StepTemplate(
                "Wage pressure affects hiring and retention costs",
                "Competitive labor market forces businesses to raise wages to attract and retain talent.",
                0.85,
            ),
            StepTemplate(
                "Increased labor costs flow through to P&L",
                "Labor costs represent a significant portion of expenses. {context}",
                0.8,
            ),
        ),
    ),

    EventType.INFRASTRUCTURE: CausalRule(
        event_type=EventType.INFRASTRUCTURE,
        affected_drivers=(BusinessDriverType.INFRASTRUCTURE_COSTS,),
        sensitivity_factor=SensitivityFactor.INFRASTRUCTURE,
        default_direction=ImpactDirection.INCREASE,
        time_horizon=TimeHorizon.SHORT,
        steps=(
            StepTemplate(
                "Infrastructure event occurs",
                "{event}",
                0.9,
            ),
            StepTemplate(
                "Cloud or infrastructure pricing changes",
                "Cloud providers adjust pricing based on energy costs, capacity, and market conditions.",
                0.85,
            ),
            StepTemplate(
                "Changed costs flow through to next billing cycle",
                "SaaS companies use cloud infrastructure on a pay-as-you-go basis. {context}",
                0.9,
            ),
        ),
    ),

    EventType.REGULATION_CHANGE: CausalRule(
        event_type=EventType.REGULATION_CHANGE,
        affected_drivers=(
            BusinessDriverType.LABOR_COSTS,
            BusinessDriverType.INFRASTRUCTURE_COSTS,
            BusinessDriverType.ADMINISTRATIVE,
        ),
        sensitivity_factor=SensitivityFactor.REGULATION,
        default_direction=ImpactDirection.INCREASE,
        time_horizon=TimeHorizon.MEDIUM,
        steps=(
            StepTemplate(
                "Regulatory change announced or enacted",
                "{event}",
                0.9,
            ),
            StepTemplate(
                "Business must invest in compliance",
                "New regulations require legal review, technical implementation, process changes, and ongoing monitoring.",
                0.8,
            ),
            StepTemplate(
                "Compliance costs increase operating expenses",
                "Regulatory compliance adds permanent overhead. {context}",
                0.75,
            ),
        ),
    ),

    EventType.ECONOMIC_INDICATOR: CausalRule(
        event_type=EventType.ECONOMIC_INDICATOR,
        affected_drivers=(
            BusinessDriverType.SUBSCRIPTION_REVENUE,
            BusinessDriverType.LABOR_COSTS,
            BusinessDriverType.INFRASTRUCTURE_COSTS,
        ),
        sensitivity_factor=SensitivityFactor.MARKET_DEMAND,
        default_direction=ImpactDirection.NEUTRAL,  # Depends on the indicator
        time_horizon=TimeHorizon.MEDIUM,
        steps=(
            StepTemplate(
                "Economic indicator changes",
                "{event}",
                0.95,  # Official statistics
            ),
            StepTemplate(
                "Affects customer spending and business investment",
                "Macroeconomic conditions influence customer budgets and willingness to spend on software.",
                0.7,
            ),
            StepTemplate(
                "Revenue and cost pressures adjust",
                "Economic conditions affect both demand (revenue) and input costs. {context}",
                0.65,
            ),
        ),
    ),

    EventType.CURRENCY: CausalRule(
        event_type=EventType.CURRENCY,
        affected_drivers=(
            BusinessDriverType.SUBSCRIPTION_REVENUE,
            BusinessDriverType.LABOR_COSTS,
            BusinessDriverType.INFRASTRUCTURE_COSTS,
        ),
        sensitivity_factor=SensitivityFactor.FX,
        default_direction=ImpactDirection.NEUTRAL,  # Depends on currency direction
        time_horizon=TimeHorizon.SHORT,
        steps=(
            StepTemplate(
                "Foreign exchange rate changes",
                "{event}",
                0.95,
            ),
            StepTemplate(
                "Translation effects on international operations",
                "Foreign currency revenue and costs are translated to reporting currency at new rates.",
                0.9,
            ),
            StepTemplate(
                "Net FX impact on financial results",
                "FX affects both revenue (international customers) and costs (international operations). {context}",
                0.85,
            ),
        ),
    ),

    EventType.GEOPOLITICAL: CausalRule(
        event_type=EventType.GEOPOLITICAL,
        affected_drivers=(
            BusinessDriverType.SUBSCRIPTION_REVENUE,
            BusinessDriverType.SALES_MARKETING,
        ),
        sensitivity_factor=SensitivityFactor.MARKET_DEMAND,
        default_direction=ImpactDirection.DECREASE,
        time_horizon=TimeHorizon.SHORT,
        steps=(
            StepTemplate(
                "Geopolitical event creates uncertainty",
                "{event}",
                0.8,
            ),
            StepTemplate(
                "Market uncertainty reduces customer spending",
                "Businesses delay purchases and reduce budgets during periods of geopolitical instability.",
                0.6,
            ),
            StepTemplate(
                "Revenue growth slows",
                "Reduced customer acquisition and potential churn. {context}",
                0.5,
            ),
        ),
    ),

    EventType.MARKET_SHIFT: CausalRule(
        event_type=EventType.MARKET_SHIFT,
        affected_drivers=(
            BusinessDriverType.SUBSCRIPTION_REVENUE,
            BusinessDriverType.SALES_MARKETING,
        ),
        sensitivity_factor=SensitivityFactor.MARKET_DEMAND,
        default_direction=ImpactDirection.NEUTRAL,
        time_horizon=TimeHorizon.MEDIUM,
        steps=(
            StepTemplate(
                "Market dynamics change",
                "{event}",
                0.7,
            ),
            StepTemplate(
                "Customer demand patterns shift",
                "Market shifts affect customer needs, competitive landscape, and pricing power.",
                0.6,
            ),
            StepTemplate(
                "Revenue and customer acquisition costs affected",
                "Changed market conditions require business adaptation. {context}",
                0.55,
            ),
        ),
    ),

    EventType.TECHNOLOGY: CausalRule(
        event_type=EventType.TECHNOLOGY,
        affected_drivers=(
            BusinessDriverType.R_AND_D,
            BusinessDriverType.INFRASTRUCTURE_COSTS,
        ),
        sensitivity_factor=SensitivityFactor.INFRASTRUCTURE,
        default_direction=ImpactDirection.NEUTRAL,
        time_horizon=TimeHorizon.LONG,
        steps=(
            StepTemplate(
                "Technology change occurs",
                "{event}",
                0.7,
            ),
            StepTemplate(
                "May require technology stack adaptation",
                "New technologies can create opportunities (efficiency) or threats (competitive pressure).",
                0.5,
            ),
            StepTemplate(
                "R&D and infrastructure investments adjust",
                "Technology evolution affects development priorities and infrastructure choices. {context}",
                0.45,
            ),
        ),
    ),

    EventType.DISASTER: CausalRule(
        event_type=EventType.DISASTER,
        affected_drivers=(
            BusinessDriverType.INFRASTRUCTURE_COSTS,
            BusinessDriverType.SUBSCRIPTION_REVENUE,
        ),
        sensitivity_factor=SensitivityFactor.MARKET_DEMAND,
        default_direction=ImpactDirection.NEUTRAL,
        time_horizon=TimeHorizon.SHORT,
        steps=(
            StepTemplate(
                "Disaster event occurs",
                "{event}",
                0.9,
            ),
            StepTemplate(
                "Regional disruption affects operations",
                "Natural disasters disrupt infrastructure, workforce, and customer operations in affected regions.",
                0.7,
            ),
            StepTemplate(
                "Business continuity and recovery costs",
                "Impact depends on regional exposure. {context}",
                0.6,
            ),
        ),
    ),
}

# Event types with well-established, empirically strong cause -> effect links
HIGH_CONFIDENCE_EVENT_TYPES = frozenset({
    EventType.LABOR_MARKET,
    EventType.INFRASTRUCTURE,
    EventType.ECONOMIC_INDICATOR,
    EventType.CURRENCY,
})


def ensure_complete(catalog: dict, name: str) -> None:
    """
    Check a catalog keyed by EventType covers every event type.

    Args:
        catalog: Mapping keyed by EventType
        name: Catalog name for the error message

    Raises:
        CatalogError: If any event type has no entry
    """
    missing = [t.value for t in EventType if t not in catalog]
    if missing:
        raise CatalogError(f"{name} has no entry for event type(s): {', '.join(missing)}")


ensure_complete(CAUSAL_RULES, "Causal rule catalog")


def get_rule(event_type: EventType) -> CausalRule:
    """
    Get the causal rule for an event type.

    Args:
        event_type: Event category

    Returns:
        The category's CausalRule

    Raises:
        CatalogError: If the catalog has no rule for the category
    """
    try:
        return CAUSAL_RULES[event_type]
    except KeyError:
        logger.error(f"No causal rule for event type: {event_type!r}")
        raise CatalogError(f"No causal rule defined for event type: {event_type!r}") from None


def is_high_confidence_category(event_type: EventType) -> bool:
    """Check if an event type's rule encodes a well-established causal link."""
    return event_type in HIGH_CONFIDENCE_EVENT_TYPES
