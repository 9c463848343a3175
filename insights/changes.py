"""
"What's new" counts for a business over a recent window.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from constants import ImpactMagnitude
from domain import Insight
from domain.models import as_utc, utc_now


@dataclass(frozen=True)
class ChangeSummary:
    new_insights: int
    new_high_impact: int
    dismissed_insights: int

    def to_dict(self) -> dict:
        return {
            "new_insights": self.new_insights,
            "new_high_impact": self.new_high_impact,
            "dismissed_insights": self.dismissed_insights,
        }


def summarize_changes(
    insights: Iterable[Insight],
    business_model_id: str,
    days: int = 7,
    now: Optional[datetime] = None,
) -> ChangeSummary:
    """
    Count insights of one business generated within the last ``days``.

    Args:
        insights: Stored insights (any business)
        business_model_id: Business to count for
        days: Window length
        now: Reference time

    Returns:
        ChangeSummary; new counts exclude dismissed insights
    """
    cutoff = (as_utc(now) if now else utc_now()) - timedelta(days=days)
    recent = [
        i for i in insights
        if i.business_model_id == business_model_id and as_utc(i.generated_at) >= cutoff
    ]

    return ChangeSummary(
        new_insights=sum(1 for i in recent if not i.dismissed),
        new_high_impact=sum(
            1 for i in recent
            if not i.dismissed and i.impact_magnitude == ImpactMagnitude.HIGH
        ),
        dismissed_insights=sum(1 for i in recent if i.dismissed),
    )
