"""
Insight text - one-line summaries and template explanations.

Both are deterministic and need no external service. The basic explanation
is what users see whenever no text-generation capability is configured.
"""
from constants import ImpactDirection, ImpactMagnitude, TimeHorizon
from causal_mapping import CausalMapping

SUMMARY_EVENT_CHARS = 100

MAGNITUDE_ADVERBS = {
    ImpactMagnitude.HIGH: "significantly",
    ImpactMagnitude.MEDIUM: "moderately",
    ImpactMagnitude.LOW: "slightly",
}

HORIZON_PHRASES = {
    TimeHorizon.SHORT: "in the next 0-3 months",
    TimeHorizon.MEDIUM: "over the next 3-12 months",
    TimeHorizon.LONG: "over 12+ months",
}


def _direction_verb(direction: ImpactDirection) -> str:
    if direction == ImpactDirection.INCREASE:
        return "increase"
    if direction == ImpactDirection.DECREASE:
        return "decrease"
    return "affect"


def humanize_driver(driver) -> str:
    """LABOR_COSTS -> "labor costs"."""
    return driver.value.lower().replace("_", " ")


def generate_insight_summary(mapping: CausalMapping) -> str:
    """
    One-line dashboard summary of a mapping.

    Example:
        "Tech sector wages increased 8%... moderately may increase labor costs, r and d"
    """
    event_summary = mapping.event.summary[:SUMMARY_EVENT_CHARS]
    magnitude = MAGNITUDE_ADVERBS[mapping.impact_magnitude]
    direction = f"may {_direction_verb(mapping.impact_direction)}"
    drivers = ", ".join(humanize_driver(d) for d in mapping.affected_drivers)

    return f"{event_summary}... {magnitude} {direction} {drivers}"


def generate_basic_explanation(mapping: CausalMapping) -> str:
    """
    Template explanation built from the mapping alone.

    Args:
        mapping: Relevant causal mapping

    Returns:
        Multi-line explanation walking through the causal path
    """
    magnitude = MAGNITUDE_ADVERBS[mapping.impact_magnitude]
    direction = _direction_verb(mapping.impact_direction)
    horizon = HORIZON_PHRASES[mapping.time_horizon]
    drivers = ", ".join(d.value for d in mapping.affected_drivers)
    steps = "\n".join(
        f"{index}. {step.description}: {step.mechanism}"
        for index, step in enumerate(mapping.causal_path, start=1)
    )

    return (
        f'The event "{mapping.event.summary}" is expected to {magnitude} {direction} '
        f"your business costs {horizon}.\n"
        f"\n"
        f"This impact primarily affects: {drivers}.\n"
        f"\n"
        f"The causal reasoning is as follows:\n"
        f"{steps}\n"
        f"\n"
        f"This analysis is based on deterministic causal rules and your business model configuration."
    )
