"""
Relevance Filter - decide whether an event is worth reasoning about.

Checks run in order and stop at the first failure:
1. Geography: event region is GLOBAL or one of the business's regions
2. Recency: event is at most RECENCY_WINDOW_DAYS old
3. Source quality: event confidence is at least MIN_EVENT_CONFIDENCE

Non-relevance is a normal outcome, never an exception.
"""
from datetime import datetime
from typing import Optional

from loguru import logger

from domain import BusinessModel, Event
from .config import MIN_EVENT_CONFIDENCE, RECENCY_WINDOW_DAYS
from .models import RelevanceResult


RELEVANT_REASON = "Event is geographically relevant, recent, and from reliable source"
LOW_CONFIDENCE_REASON = "Event has very low confidence score and may not be reliable"


def check_relevance(
    event: Event,
    business: BusinessModel,
    now: Optional[datetime] = None,
) -> RelevanceResult:
    """
    Check if an event is in scope for a business.

    Args:
        event: Normalized event
        business: Business model to check against
        now: Reference time for the recency check (defaults to current UTC time)

    Returns:
        RelevanceResult with a human-readable reason
    """
    regions = business.get_all_relevant_regions()

    if not event.is_relevant_to_region(regions):
        reason = f"Event in {event.region} does not affect business operating in {', '.join(regions)}"
        logger.debug(f"Event {event.id} not relevant to {business.id}: geography")
        return RelevanceResult(is_relevant=False, reason=reason)

    if not event.is_recent(RECENCY_WINDOW_DAYS, now=now):
        age_days = event.get_age_in_days(now)
        reason = f"Event is {age_days} days old and likely no longer relevant"
        logger.debug(f"Event {event.id} not relevant to {business.id}: {age_days} days old")
        return RelevanceResult(is_relevant=False, reason=reason)

    if event.confidence_score < MIN_EVENT_CONFIDENCE:
        logger.debug(
            f"Event {event.id} not relevant to {business.id}: "
            f"confidence {event.confidence_score:.2f} below floor"
        )
        return RelevanceResult(is_relevant=False, reason=LOW_CONFIDENCE_REASON)

    return RelevanceResult(is_relevant=True, reason=RELEVANT_REASON)
