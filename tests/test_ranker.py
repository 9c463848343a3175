from dataclasses import replace

import pytest

from causal_mapping import get_magnitude_weight, map_event_to_business, priority_score, rank_mappings, summarize_rankings
from constants import ImpactMagnitude


@pytest.fixture
def base_mapping(make_event, saas_business, now):
    return map_event_to_business(make_event(), saas_business, now=now)


def test_magnitude_weights():
    assert get_magnitude_weight(ImpactMagnitude.HIGH) == 3
    assert get_magnitude_weight(ImpactMagnitude.MEDIUM) == 2
    assert get_magnitude_weight(ImpactMagnitude.LOW) == 1


def test_priority_score(base_mapping):
    mapping = replace(base_mapping, confidence_score=0.4, impact_magnitude=ImpactMagnitude.MEDIUM)
    assert priority_score(mapping) == pytest.approx(0.8)


def test_five_mappings_ranked_by_product(base_mapping):
    specs = [
        (0.9, ImpactMagnitude.LOW),      # 0.9
        (0.5, ImpactMagnitude.HIGH),     # 1.5
        (0.3, ImpactMagnitude.MEDIUM),   # 0.6
        (0.7, ImpactMagnitude.MEDIUM),   # 1.4
        (0.1, ImpactMagnitude.HIGH),     # 0.3
    ]
    mappings = [
        replace(base_mapping, confidence_score=c, impact_magnitude=m)
        for c, m in specs
    ]

    ranked = rank_mappings(mappings)

    assert [round(priority_score(m), 2) for m in ranked] == [1.5, 1.4, 0.9, 0.6, 0.3]


def test_ties_keep_input_order(base_mapping, make_event):
    first = replace(base_mapping, confidence_score=0.5, impact_magnitude=ImpactMagnitude.MEDIUM)
    second = replace(base_mapping, event=make_event(event_id="evt-tie"), confidence_score=0.5,
                     impact_magnitude=ImpactMagnitude.MEDIUM)

    assert rank_mappings([first, second]) == [first, second]
    assert rank_mappings([second, first]) == [second, first]


def test_summarize_rankings(base_mapping):
    mappings = [
        replace(base_mapping, confidence_score=0.5, impact_magnitude=ImpactMagnitude.HIGH),
        replace(base_mapping, confidence_score=0.2, impact_magnitude=ImpactMagnitude.LOW),
        replace(base_mapping, confidence_score=0.6, impact_magnitude=ImpactMagnitude.LOW),
    ]
    summary = summarize_rankings(mappings)

    assert summary["total"] == 3
    assert summary["by_magnitude"] == {"LOW": 2, "MEDIUM": 0, "HIGH": 1}
    assert summary["top_priority"] == pytest.approx(1.5)


def test_summarize_empty():
    assert summarize_rankings([]) == {
        "total": 0,
        "by_magnitude": {"LOW": 0, "MEDIUM": 0, "HIGH": 0},
        "top_priority": 0.0,
    }
