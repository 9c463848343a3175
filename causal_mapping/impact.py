"""
Impact Classifier - direction and magnitude of an event's effect.

Direction is a keyword scan over the event summary, not NLP. Plain substring
containment means "update" counts as "up" and negations are not handled;
that behaviour is kept as-is because rationale and ranking depend on it.

Magnitude:
    raw = sum(lever weights) * sensitivity(rule factor) * event confidence
    raw > 0.05 -> HIGH, raw > 0.02 -> MEDIUM, else LOW
"""
from constants import ImpactDirection, ImpactMagnitude
from domain import BusinessModel, Event
from .config import HIGH_MAGNITUDE_THRESHOLD, MEDIUM_MAGNITUDE_THRESHOLD
from .models import CausalRule


# Checked in this order: increase keywords win over decrease keywords
INCREASE_KEYWORDS = ("increase", "rise", "growth", "up")
DECREASE_KEYWORDS = ("decrease", "decline", "fall", "down")


def determine_impact_direction(event: Event, rule: CausalRule) -> ImpactDirection:
    """
    Infer direction from the event summary, falling back to the rule default.

    Args:
        event: Event whose summary is scanned (case-insensitive)
        rule: Rule supplying the default direction

    Returns:
        INCREASE or DECREASE on a keyword match, else rule.default_direction
    """
    summary = event.summary.lower()

    if any(keyword in summary for keyword in INCREASE_KEYWORDS):
        return ImpactDirection.INCREASE

    if any(keyword in summary for keyword in DECREASE_KEYWORDS):
        return ImpactDirection.DECREASE

    return rule.default_direction


def calculate_raw_magnitude(event: Event, business: BusinessModel, rule: CausalRule) -> float:
    """Weighted exposure of the business to the event, before bucketing."""
    total_weight = sum(business.get_driver_weight(driver) for driver in rule.affected_drivers)
    sensitivity = business.get_sensitivity(rule.sensitivity_factor)
    return total_weight * sensitivity * event.confidence_score


def classify_magnitude(raw_magnitude: float) -> ImpactMagnitude:
    """Bucket a raw magnitude. Both thresholds are strict."""
    if raw_magnitude > HIGH_MAGNITUDE_THRESHOLD:
        return ImpactMagnitude.HIGH
    if raw_magnitude > MEDIUM_MAGNITUDE_THRESHOLD:
        return ImpactMagnitude.MEDIUM
    return ImpactMagnitude.LOW


def calculate_impact_magnitude(event: Event, business: BusinessModel, rule: CausalRule) -> ImpactMagnitude:
    return classify_magnitude(calculate_raw_magnitude(event, business, rule))
