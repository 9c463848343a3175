"""
Causal Mapper - apply deterministic causal rules to (event, business) pairs.

Pipeline per pair:
1. RELEVANCE - geography, recency and source-quality gate
2. RULE - look up the event type's causal rule
3. PATH - render the causal chain with business context
4. ASSUMPTIONS - attach and validate against the business
5. IMPACT - direction and magnitude
6. CONFIDENCE - aggregate score and rationale

Nothing here keeps state across calls, so the
same inputs always give an equal mapping.
"""
from datetime import datetime
from typing import Iterable, Optional

from loguru import logger

from constants import ImpactDirection, ImpactMagnitude, TimeHorizon
from domain import BusinessModel, Event
from .assumptions import build_assumption_context, get_assumptions, validate_for_business
from .causal_path import build_business_context, build_causal_path
from .confidence import calculate_confidence, generate_confidence_rationale
from .impact import calculate_impact_magnitude, determine_impact_direction
from .models import CausalMapping
from .ranker import rank_mappings
from .relevance import check_relevance
from .rules import get_rule


def build_null_mapping(event: Event, business: BusinessModel, reason: str) -> CausalMapping:
    """Canonical mapping for an irrelevant pair: no path, no assumptions, zero confidence."""
    return CausalMapping(
        event=event,
        business_model=business,
        affected_drivers=(),
        impact_direction=ImpactDirection.NEUTRAL,
        impact_magnitude=ImpactMagnitude.LOW,
        time_horizon=TimeHorizon.SHORT,
        causal_path=(),
        assumptions=(),
        confidence_score=0.0,
        confidence_rationale=reason,
        is_relevant=False,
        relevance_reason=reason,
    )


def map_event_to_business(
    event: Event,
    business: BusinessModel,
    now: Optional[datetime] = None,
) -> CausalMapping:
    """
    Map one event onto one business.

    Args:
        event: Normalized event
        business: Business model (weights assumed valid)
        now: Reference time for the recency check (defaults to current UTC time)

    Returns:
        CausalMapping; the null mapping when the event is not relevant

    Raises:
        CatalogError: If the event type has no causal rule
    """
    relevance = check_relevance(event, business, now=now)
    if not relevance.is_relevant:
        return build_null_mapping(event, business, relevance.reason)

    rule = get_rule(event.event_type)

    business_context = build_business_context(business, rule.affected_drivers)
    causal_path = build_causal_path(rule, event.summary, business_context)

    assumptions = get_assumptions(event.event_type)
    validation = validate_for_business(assumptions, build_assumption_context(event, business))

    impact_direction = determine_impact_direction(event, rule)
    impact_magnitude = calculate_impact_magnitude(event, business, rule)

    confidence_score = calculate_confidence(
        event, causal_path, business, rule, len(assumptions)
    )
    confidence_rationale = generate_confidence_rationale(
        event, causal_path, assumptions, validation.warnings
    )

    logger.debug(
        f"Mapped {event.id} -> {business.id}: {event.event_type.value} "
        f"{impact_direction.value}/{impact_magnitude.value} confidence={confidence_score:.3f}"
    )

    return CausalMapping(
        event=event,
        business_model=business,
        affected_drivers=rule.affected_drivers,
        impact_direction=impact_direction,
        impact_magnitude=impact_magnitude,
        time_horizon=rule.time_horizon,
        causal_path=causal_path,
        assumptions=assumptions,
        confidence_score=confidence_score,
        confidence_rationale=confidence_rationale,
        is_relevant=True,
        relevance_reason=relevance.reason,
    )


def batch_map(
    events: Iterable[Event],
    business: BusinessModel,
    now: Optional[datetime] = None,
) -> list[CausalMapping]:
    """
    Map many events onto one business and rank the relevant ones.

    Args:
        events: Events to map, each evaluated independently
        business: Business model
        now: Reference time shared by every event in the batch

    Returns:
        Relevant mappings, highest confidence * magnitude weight first

    Raises:
        CatalogError: If any event type has no causal rule
    """
    mapped = 0
    relevant = []

    for event in events:
        mapped += 1
        mapping = map_event_to_business(event, business, now=now)
        if mapping.is_relevant:
            relevant.append(mapping)

    logger.info(f"Batch mapping for {business.id}: {len(relevant)}/{mapped} events relevant")
    return rank_mappings(relevant)
