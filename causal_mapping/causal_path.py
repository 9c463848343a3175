"""
Causal Path Builder - turn a rule's step templates into an auditable chain.

Path generation is deterministic: the same event summary and lever weights
always give identical steps. Step confidences come from the rule as written.
"""
import math
from typing import Sequence

from constants import BusinessDriverType
from domain import BusinessModel, CausalStep
from .models import CausalRule


def _percentage(weight: float) -> int:
    # Half-up rounding, so 0.125 renders as 13%
    return math.floor(weight * 100 + 0.5)


def build_business_context(
    business: BusinessModel,
    affected_drivers: Sequence[BusinessDriverType],
) -> str:
    """
    Describe how much of the business the affected levers represent.

    Args:
        business: Business model supplying lever weights
        affected_drivers: Levers the rule touches

    Returns:
        One sentence per lever with nonzero weight, joined by ". "
        (empty string if none of the levers are weighted)
    """
    parts = []
    for driver in affected_drivers:
        weight = business.get_driver_weight(driver)
        if weight > 0:
            parts.append(f"{driver.value} represents {_percentage(weight)}% of business structure")
    return ". ".join(parts)


def build_causal_path(
    rule: CausalRule,
    event_summary: str,
    business_context: str,
) -> tuple[CausalStep, ...]:
    """Instantiate the rule's steps with event and business text."""
    return rule.get_causal_path(event_summary, business_context)


def calculate_path_confidence(causal_path: Sequence[CausalStep]) -> float:
    """Product of step confidences. One weak link drags the whole chain down."""
    return math.prod(step.confidence for step in causal_path)
