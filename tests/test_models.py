from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timedelta

import pytest

from constants import BusinessDriverType, EventType, SensitivityFactor
from domain import BusinessModel, Event, SensitivityConfig, WeightedDriver


# =============================================================================
# EVENT
# =============================================================================

class TestEventConfidence:
    def test_perfect_event_keeps_reliability(self):
        assert Event.calculate_confidence(0.9, True, True, 200) == pytest.approx(0.9)

    def test_penalties_compound(self):
        # 0.9 * 0.8 (vague region) * 0.7 (no timestamp) * 0.9 (short summary)
        assert Event.calculate_confidence(0.9, False, False, 20) == pytest.approx(0.9 * 0.8 * 0.7 * 0.9)

    @pytest.mark.parametrize("length,penalized", [(49, True), (50, False), (1000, False), (1001, True)])
    def test_summary_length_bounds(self, length, penalized):
        expected = 0.9 if penalized else 1.0
        assert Event.calculate_confidence(1.0, True, True, length) == pytest.approx(expected)

    def test_clamped(self):
        assert Event.calculate_confidence(1.5, True, True, 100) == 1.0
        assert Event.calculate_confidence(-0.2, True, True, 100) == 0.0


class TestEventHelpers:
    def test_region(self, make_event):
        assert make_event(region="GLOBAL").is_relevant_to_region(["US"])
        assert make_event(region="EU").is_relevant_to_region(["US", "EU"])
        assert not make_event(region="JP").is_relevant_to_region(["US", "EU"])

    def test_age_is_floored(self, make_event, now):
        event = make_event(age_days=2.75)
        assert event.get_age_in_days(now) == 2
        assert event.age_in_days(now) == pytest.approx(2.75)

    def test_naive_timestamp_treated_as_utc(self, make_event, now):
        event = replace(make_event(), timestamp=datetime(2026, 2, 20, 12, 0))
        assert event.get_age_in_days(now) == 9

    def test_is_recent(self, make_event, now):
        assert make_event(age_days=30).is_recent(30, now=now)
        assert not make_event(age_days=30.5).is_recent(30, now=now)

    def test_round_trip(self, make_event):
        event = make_event()
        assert Event.from_dict(event.to_dict()) == event

    def test_frozen(self, make_event):
        with pytest.raises(FrozenInstanceError):
            make_event().summary = "changed"

    def test_from_dict_accepts_z_suffix(self):
        event = Event.from_dict({
            "id": "e1",
            "event_type": "CURRENCY",
            "summary": "s",
            "region": "US",
            "timestamp": "2026-02-01T00:00:00Z",
            "confidence_score": "0.7",
        })
        assert event.event_type == EventType.CURRENCY
        assert event.timestamp.utcoffset() == timedelta(0)
        assert event.confidence_score == 0.7


# =============================================================================
# BUSINESS MODEL
# =============================================================================

def _business(**overrides):
    data = dict(
        id="b1",
        name="Test",
        revenue_drivers=(WeightedDriver(BusinessDriverType.SUBSCRIPTION_REVENUE, 1.0),),
        cost_drivers=(
            WeightedDriver(BusinessDriverType.LABOR_COSTS, 0.6),
            WeightedDriver(BusinessDriverType.INFRASTRUCTURE_COSTS, 0.4),
        ),
        sensitivities=(SensitivityConfig(SensitivityFactor.LABOR, 0.9),),
        operating_regions=("US",),
        customer_regions=("US",),
    )
    data.update(overrides)
    return BusinessModel(**data)


class TestBusinessModel:
    def test_driver_weight(self):
        business = _business()
        assert business.get_driver_weight(BusinessDriverType.LABOR_COSTS) == 0.6
        assert business.get_driver_weight(BusinessDriverType.SUBSCRIPTION_REVENUE) == 1.0
        assert business.get_driver_weight(BusinessDriverType.R_AND_D) == 0.0

    def test_sensitivity_default_only_when_unset(self):
        business = _business(sensitivities=(SensitivityConfig(SensitivityFactor.FX, 0.0),))
        assert business.get_sensitivity(SensitivityFactor.FX) == 0.0
        assert business.get_sensitivity(SensitivityFactor.LABOR) == 0.5

    def test_regions(self):
        business = _business(operating_regions=("US", "EU"), customer_regions=("EU", "JP"))
        assert business.get_all_relevant_regions() == ["US", "EU", "JP"]
        assert business.has_regional_exposure("JP")
        assert business.has_regional_exposure("GLOBAL")
        assert not business.has_regional_exposure("BR")

    @pytest.mark.parametrize("regions,expected", [
        ((), False),
        (("US",), False),
        (("EU",), True),
        (("US", "EU"), True),
    ])
    def test_international(self, regions, expected):
        business = _business(operating_regions=regions, customer_regions=regions)
        assert business.has_international_operations() is expected
        assert business.has_international_customers() is expected

    def test_lists_become_tuples(self):
        business = _business(operating_regions=["US"])
        assert business.operating_regions == ("US",)
        hash(business)

    def test_valid(self):
        result = _business().validate()
        assert result.valid
        assert result.errors == ()

    def test_weight_tolerance(self):
        business = _business(revenue_drivers=(WeightedDriver(BusinessDriverType.SUBSCRIPTION_REVENUE, 0.995),))
        assert business.validate().valid

    def test_invalid(self):
        business = _business(
            revenue_drivers=(WeightedDriver(BusinessDriverType.SUBSCRIPTION_REVENUE, 0.8),),
            sensitivities=(SensitivityConfig(SensitivityFactor.FX, 1.2),),
            operating_regions=("U",),
        )
        result = business.validate()
        assert not result.valid
        assert result.errors == (
            "Revenue drivers must sum to 1.0 (currently 0.80)",
            "Sensitivity for FX must be between 0 and 1",
            "Invalid region code: U",
        )

    def test_round_trip(self, saas_business):
        assert BusinessModel.from_dict(saas_business.to_dict()) == saas_business
