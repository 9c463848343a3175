import pytest

from causal_mapping import CAUSAL_RULES, CatalogError, get_rule, is_high_confidence_category
from causal_mapping.rules import ensure_complete
from constants import BusinessDriverType, EventType, ImpactDirection, SensitivityFactor, TimeHorizon


class TestCatalog:
    def test_one_rule_per_event_type(self):
        assert set(CAUSAL_RULES) == set(EventType)
        for event_type, rule in CAUSAL_RULES.items():
            assert rule.event_type == event_type
            assert rule.affected_drivers
            assert rule.steps

    def test_step_confidences_in_range(self):
        for rule in CAUSAL_RULES.values():
            for template in rule.steps:
                assert 0 < template.confidence <= 1

    def test_labor_market_rule(self):
        rule = get_rule(EventType.LABOR_MARKET)
        assert rule.affected_drivers == (
            BusinessDriverType.LABOR_COSTS,
            BusinessDriverType.R_AND_D,
            BusinessDriverType.SALES_MARKETING,
        )
        assert rule.sensitivity_factor == SensitivityFactor.LABOR
        assert rule.default_direction == ImpactDirection.INCREASE
        assert rule.time_horizon == TimeHorizon.MEDIUM
        assert [t.confidence for t in rule.steps] == [0.9, 0.85, 0.8]

    def test_geopolitical_defaults_to_decrease(self):
        rule = get_rule(EventType.GEOPOLITICAL)
        assert rule.default_direction == ImpactDirection.DECREASE
        assert rule.time_horizon == TimeHorizon.SHORT

    def test_technology_is_long_term(self):
        assert get_rule(EventType.TECHNOLOGY).time_horizon == TimeHorizon.LONG

    def test_unknown_type_is_fatal(self):
        with pytest.raises(CatalogError):
            get_rule("ASTEROID_IMPACT")

    def test_incomplete_catalog_is_rejected(self):
        partial = {EventType.LABOR_MARKET: CAUSAL_RULES[EventType.LABOR_MARKET]}
        with pytest.raises(CatalogError, match="DISASTER"):
            ensure_complete(partial, "Test catalog")


class TestCausalPathTemplate:
    def test_first_step_carries_event_and_last_step_context(self):
        rule = get_rule(EventType.INFRASTRUCTURE)
        path = rule.get_causal_path("Cloud prices announced", "INFRASTRUCTURE_COSTS represents 15% of business structure")

        assert [s.step for s in path] == [1, 2, 3]
        assert path[0].mechanism == "Cloud prices announced"
        assert path[2].mechanism == (
            "SaaS companies use cloud infrastructure on a pay-as-you-go basis. "
            "INFRASTRUCTURE_COSTS represents 15% of business structure"
        )

    def test_path_is_deterministic(self):
        rule = get_rule(EventType.REGULATION_CHANGE)
        assert rule.get_causal_path("x", "y") == rule.get_causal_path("x", "y")


@pytest.mark.parametrize("event_type,expected", [
    (EventType.LABOR_MARKET, True),
    (EventType.INFRASTRUCTURE, True),
    (EventType.ECONOMIC_INDICATOR, True),
    (EventType.CURRENCY, True),
    (EventType.REGULATION_CHANGE, False),
    (EventType.GEOPOLITICAL, False),
    (EventType.MARKET_SHIFT, False),
    (EventType.TECHNOLOGY, False),
    (EventType.DISASTER, False),
])
def test_high_confidence_categories(event_type, expected):
    assert is_high_confidence_category(event_type) is expected
