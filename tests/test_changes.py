from dataclasses import replace
from datetime import timedelta

import pytest

from constants import ImpactDirection, ImpactMagnitude, TimeHorizon
from domain import Insight
from insights import summarize_changes


@pytest.fixture
def insight(now):
    return Insight(
        id="ins-1",
        business_model_id="biz-1",
        event_id="evt-1",
        summary="Wages up",
        impact_direction=ImpactDirection.INCREASE,
        impact_magnitude=ImpactMagnitude.HIGH,
        time_horizon=TimeHorizon.MEDIUM,
        affected_drivers=(),
        causal_path=(),
        assumptions=(),
        confidence_score=0.7,
        confidence_rationale="r",
        generated_at=now - timedelta(days=1),
    )


def test_counts_recent_insights(insight, now):
    insights = [
        insight,
        replace(insight, id="ins-2", impact_magnitude=ImpactMagnitude.LOW),
        replace(insight, id="ins-3").dismiss(),
        replace(insight, id="ins-4", generated_at=now - timedelta(days=8)),
        replace(insight, id="ins-5", business_model_id="biz-2"),
    ]

    summary = summarize_changes(insights, "biz-1", now=now)

    assert summary.new_insights == 2
    assert summary.new_high_impact == 1
    assert summary.dismissed_insights == 1


def test_window_length(insight, now):
    old = replace(insight, generated_at=now - timedelta(days=8))
    assert summarize_changes([old], "biz-1", days=7, now=now).new_insights == 0
    assert summarize_changes([old], "biz-1", days=14, now=now).new_insights == 1


def test_empty():
    assert summarize_changes([], "biz-1").to_dict() == {
        "new_insights": 0,
        "new_high_impact": 0,
        "dismissed_insights": 0,
    }
