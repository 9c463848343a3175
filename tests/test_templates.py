from dataclasses import replace

from constants import BusinessDriverType, Industry, SensitivityFactor
from domain import (
    SAAS_TEMPLATE_EXPLANATION,
    WeightedDriver,
    create_saas_template,
    validate_saas_model,
)


def test_template_is_valid():
    business = create_saas_template(user_id="u1", business_id="b1")

    assert business.id == "b1"
    assert business.industry == Industry.SAAS
    assert business.operating_regions == ("US",)
    assert business.validate().valid
    assert business.get_driver_weight(BusinessDriverType.LABOR_COSTS) == 0.40
    assert business.get_sensitivity(SensitivityFactor.LABOR) == 0.8
    assert business.get_sensitivity(SensitivityFactor.FX) == 0.4


def test_generated_ids_are_unique():
    assert create_saas_template("u1").id != create_saas_template("u1").id


def test_default_template_has_no_warnings():
    result = validate_saas_model(create_saas_template("u1"))
    assert result.valid
    assert result.warnings == ()


def test_unusual_structure_warns_but_stays_valid():
    business = replace(
        create_saas_template("u1"),
        revenue_drivers=(
            WeightedDriver(BusinessDriverType.SUBSCRIPTION_REVENUE, 0.4),
            WeightedDriver(BusinessDriverType.SERVICES_REVENUE, 0.6),
        ),
        cost_drivers=(
            WeightedDriver(BusinessDriverType.INFRASTRUCTURE_COSTS, 0.3),
            WeightedDriver(BusinessDriverType.SALES_MARKETING, 0.7),
        ),
    )
    result = validate_saas_model(business)

    assert result.valid
    assert len(result.warnings) == 3
    assert "Subscription revenue is less than 50%" in result.warnings[0]


def test_explanation_mentions_weights():
    assert "85% from recurring subscriptions" in SAAS_TEMPLATE_EXPLANATION
