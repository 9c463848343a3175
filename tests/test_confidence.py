import math

import pytest
from hypothesis import given, strategies as st

from causal_mapping import aggregate_confidence, calculate_path_confidence, generate_confidence_rationale
from constants import AssumptionImpact, EventType
from domain import Assumption, CausalStep

# =============================================================================
# STRATEGIES
# =============================================================================

step_confidences = st.floats(min_value=0.05, max_value=1.0, allow_nan=False)


def _path(confidences):
    return tuple(
        CausalStep(step=i, description=f"step {i}", mechanism="m", confidence=c)
        for i, c in enumerate(confidences, start=1)
    )


# =============================================================================
# PROPERTIES
# =============================================================================

@given(
    event_confidence=st.floats(min_value=0.0, max_value=1.5, allow_nan=False),
    confidences=st.lists(step_confidences, max_size=6),
    event_type=st.sampled_from(list(EventType)),
    assumption_count=st.integers(min_value=0, max_value=20),
    sensitivity=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
)
def test_score_always_within_bounds(event_confidence, confidences, event_type, assumption_count, sensitivity):
    breakdown = aggregate_confidence(
        event_confidence, _path(confidences), event_type, assumption_count, sensitivity
    )
    assert 0.0 <= breakdown.score <= 1.0


@given(
    confidences=st.lists(step_confidences, min_size=1, max_size=10),
    extra=st.floats(min_value=0.05, max_value=0.99, allow_nan=False),
)
def test_weakest_link(confidences, extra):
    shorter = calculate_path_confidence(_path(confidences))
    longer = calculate_path_confidence(_path(confidences + [extra]))
    assert longer < shorter


@given(confidences=st.lists(step_confidences, min_size=1, max_size=10))
def test_certain_step_leaves_path_unchanged(confidences):
    assert calculate_path_confidence(_path(confidences + [1.0])) == calculate_path_confidence(_path(confidences))


# =============================================================================
# FACTORS
# =============================================================================

class TestAggregate:
    def test_all_factors(self):
        breakdown = aggregate_confidence(
            event_confidence=0.85,
            causal_path=_path([0.9, 0.85, 0.8]),
            event_type=EventType.LABOR_MARKET,
            assumption_count=3,
            sensitivity=0.8,
        )
        assert breakdown.path_confidence == pytest.approx(0.612)
        assert breakdown.rule_quality_factor == 1.0
        assert breakdown.assumption_penalty == pytest.approx(0.95 ** 3)
        assert breakdown.sensitivity_bonus == 1.1
        assert breakdown.score == pytest.approx(0.85 * 0.612 * 0.95 ** 3 * 1.1)

    def test_low_confidence_rule_penalty(self):
        breakdown = aggregate_confidence(1.0, _path([1.0]), EventType.GEOPOLITICAL, 0, 0.5)
        assert breakdown.rule_quality_factor == 0.9
        assert breakdown.score == pytest.approx(0.9)

    def test_sensitivity_threshold_is_strict(self):
        assert aggregate_confidence(0.5, _path([1.0]), EventType.CURRENCY, 0, 0.7).sensitivity_bonus == 1.0
        assert aggregate_confidence(0.5, _path([1.0]), EventType.CURRENCY, 0, 0.71).sensitivity_bonus == 1.1

    def test_bonus_is_clamped(self):
        breakdown = aggregate_confidence(1.0, _path([1.0]), EventType.CURRENCY, 0, 0.9)
        assert breakdown.raw_score == pytest.approx(1.1)
        assert breakdown.score == 1.0

    def test_empty_path_penalized_once(self):
        breakdown = aggregate_confidence(0.8, (), EventType.CURRENCY, 0, 0.5)
        assert breakdown.path_confidence == 0.5
        assert breakdown.score == pytest.approx(0.4)

    def test_breakdown_to_dict(self):
        data = aggregate_confidence(0.8, _path([0.5]), EventType.CURRENCY, 1, 0.5).to_dict()
        assert set(data) == {
            "event_confidence", "path_confidence", "rule_quality_factor",
            "assumption_penalty", "sensitivity_bonus", "score",
        }
        assert math.isclose(data["score"], 0.8 * 0.5 * 0.95)


# =============================================================================
# RATIONALE
# =============================================================================

HIGH = Assumption(id="A", description="a", impact=AssumptionImpact.HIGH)
MEDIUM = Assumption(id="B", description="b", impact=AssumptionImpact.MEDIUM)


class TestRationale:
    def test_full_rationale(self, make_event):
        event = make_event(event_type=EventType.CURRENCY, confidence=0.9)
        text = generate_confidence_rationale(event, _path([0.9, 0.9, 0.9]), [HIGH, MEDIUM], ["caveat"])
        assert text == (
            "Event from highly reliable source; well-established causal relationship; "
            "3-step causal chain; 1 critical assumption(s); 1 caveat(s)."
        )

    def test_minimal_rationale(self, make_event):
        event = make_event(event_type=EventType.TECHNOLOGY, confidence=0.4)
        text = generate_confidence_rationale(event, _path([0.9, 0.9]), [MEDIUM])
        assert text == (
            "Event from uncertain or unverified source; "
            "uncertain or indirect causal relationship; direct impact."
        )

    @pytest.mark.parametrize("confidence,expected", [
        (0.8, "Event from highly reliable source"),
        (0.79, "Event from moderately reliable source"),
        (0.6, "Event from moderately reliable source"),
        (0.59, "Event from uncertain or unverified source"),
    ])
    def test_reliability_tiers(self, make_event, confidence, expected):
        text = generate_confidence_rationale(make_event(confidence=confidence), _path([0.9]), [])
        assert text.startswith(expected + ";")
