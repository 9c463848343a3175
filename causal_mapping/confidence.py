"""
Confidence Aggregator - one score and one sentence per mapping.

    confidence = event confidence
               * path confidence        (product of step confidences)
               * rule quality factor    (1.0 well-established, 0.9 otherwise)
               * assumption penalty     (0.95 ** number of assumptions)
               * sensitivity bonus      (1.1 when sensitivity > 0.7)

clamped to [0, 1]. An empty path counts as 1.0 with a single 0.5 penalty.
Caveats from assumption validation only affect the rationale text.
"""
from typing import Sequence

from constants import AssumptionImpact, EventType
from domain import Assumption, BusinessModel, CausalStep, Event
from .causal_path import calculate_path_confidence
from .config import (
    ASSUMPTION_DISCOUNT,
    DIRECT_IMPACT_MAX_STEPS,
    EMPTY_PATH_PENALTY,
    HIGH_CONFIDENCE_RULE_FACTOR,
    HIGH_SENSITIVITY_BONUS,
    HIGH_SENSITIVITY_THRESHOLD,
    HIGHLY_RELIABLE_THRESHOLD,
    LOW_CONFIDENCE_RULE_FACTOR,
    MODERATELY_RELIABLE_THRESHOLD,
)
from .models import CausalRule, ConfidenceBreakdown
from .rules import is_high_confidence_category


# ============================================
# SCORE
# ============================================

def get_rule_quality_factor(event_type: EventType) -> float:
    if is_high_confidence_category(event_type):
        return HIGH_CONFIDENCE_RULE_FACTOR
    return LOW_CONFIDENCE_RULE_FACTOR


def get_sensitivity_bonus(sensitivity: float) -> float:
    return HIGH_SENSITIVITY_BONUS if sensitivity > HIGH_SENSITIVITY_THRESHOLD else 1.0


def aggregate_confidence(
    event_confidence: float,
    causal_path: Sequence[CausalStep],
    event_type: EventType,
    assumption_count: int,
    sensitivity: float,
) -> ConfidenceBreakdown:
    """
    Combine every confidence factor for a mapping.

    Args:
        event_confidence: Source confidence of the event
        causal_path: Ordered causal steps
        event_type: Category, for the rule quality factor
        assumption_count: Number of assumptions attached to the mapping
        sensitivity: Business sensitivity to the rule's factor

    Returns:
        ConfidenceBreakdown; ``.score`` is the clamped final confidence
    """
    path_confidence = calculate_path_confidence(causal_path)
    if not causal_path:
        path_confidence *= EMPTY_PATH_PENALTY

    return ConfidenceBreakdown(
        event_confidence=event_confidence,
        path_confidence=path_confidence,
        rule_quality_factor=get_rule_quality_factor(event_type),
        assumption_penalty=ASSUMPTION_DISCOUNT ** assumption_count,
        sensitivity_bonus=get_sensitivity_bonus(sensitivity),
    )


def calculate_confidence(
    event: Event,
    causal_path: Sequence[CausalStep],
    business: BusinessModel,
    rule: CausalRule,
    assumption_count: int,
) -> float:
    """Final confidence for an (event, business) pair, clamped to [0, 1]."""
    breakdown = aggregate_confidence(
        event_confidence=event.confidence_score,
        causal_path=causal_path,
        event_type=event.event_type,
        assumption_count=assumption_count,
        sensitivity=business.get_sensitivity(rule.sensitivity_factor),
    )
    return breakdown.score


# ============================================
# RATIONALE
# ============================================

def describe_event_reliability(event_confidence: float) -> str:
    if event_confidence >= HIGHLY_RELIABLE_THRESHOLD:
        return "Event from highly reliable source"
    if event_confidence >= MODERATELY_RELIABLE_THRESHOLD:
        return "Event from moderately reliable source"
    return "Event from uncertain or unverified source"


def describe_path_length(step_count: int) -> str:
    if step_count <= DIRECT_IMPACT_MAX_STEPS:
        return "direct impact"
    return f"{step_count}-step causal chain"


def generate_confidence_rationale(
    event: Event,
    causal_path: Sequence[CausalStep],
    assumptions: Sequence[Assumption],
    warnings: Sequence[str] = (),
) -> str:
    """
    Explain a confidence score in one sentence.

    The text is shown as-is in the UI and fed to the explanation layer,
    so the wording of each part is stable.

    Args:
        event: Mapped event
        causal_path: Causal steps of the mapping
        assumptions: Assumptions attached to the mapping
        warnings: Caveats raised by assumption validation

    Returns:
        Parts joined by "; " with a trailing period
    """
    parts = [describe_event_reliability(event.confidence_score)]

    if is_high_confidence_category(event.event_type):
        parts.append("well-established causal relationship")
    else:
        parts.append("uncertain or indirect causal relationship")

    parts.append(describe_path_length(len(causal_path)))

    high_impact = sum(1 for a in assumptions if a.impact == AssumptionImpact.HIGH)
    if high_impact > 0:
        parts.append(f"{high_impact} critical assumption(s)")

    if warnings:
        parts.append(f"{len(warnings)} caveat(s)")

    return "; ".join(parts) + "."
