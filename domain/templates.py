"""
Business model templates.

Sensible starting points for common industries, based on published SaaS
benchmarks (SaaS Capital, OpenView). Users customize the values; the
template only gives them a shape to start from.
"""
import uuid
from dataclasses import dataclass
from typing import Optional, Sequence

from constants import BusinessDriverType, Industry, SensitivityFactor
from .models import BusinessModel, SensitivityConfig, WeightedDriver


# ============================================
# SAAS DEFAULTS
# ============================================

DEFAULT_SAAS_REVENUE_DRIVERS = (
    WeightedDriver(BusinessDriverType.SUBSCRIPTION_REVENUE, 0.85),
    WeightedDriver(BusinessDriverType.USAGE_REVENUE, 0.10),
    WeightedDriver(BusinessDriverType.SERVICES_REVENUE, 0.05),
)

# Labor 40%, sales & marketing 30%, infrastructure 15%, R&D 10%, admin 5%
DEFAULT_SAAS_COST_DRIVERS = (
    WeightedDriver(BusinessDriverType.LABOR_COSTS, 0.40),
    WeightedDriver(BusinessDriverType.INFRASTRUCTURE_COSTS, 0.15),
    WeightedDriver(BusinessDriverType.SALES_MARKETING, 0.30),
    WeightedDriver(BusinessDriverType.R_AND_D, 0.10),
    WeightedDriver(BusinessDriverType.ADMINISTRATIVE, 0.05),
)

DEFAULT_SAAS_SENSITIVITIES = (
    SensitivityConfig(SensitivityFactor.LABOR, 0.8),
    SensitivityConfig(SensitivityFactor.INFRASTRUCTURE, 0.7),
    SensitivityConfig(SensitivityFactor.FX, 0.4),
    SensitivityConfig(SensitivityFactor.REGULATION, 0.6),
    SensitivityConfig(SensitivityFactor.MARKET_DEMAND, 0.7),
)

# Warning thresholds for validate_saas_model
MIN_SUBSCRIPTION_SHARE = 0.5
MAX_INFRASTRUCTURE_SHARE = 0.25
MAX_SALES_MARKETING_SHARE = 0.5

SAAS_TEMPLATE_EXPLANATION = """
This SaaS template assumes a typical B2B SaaS business model:

Revenue Structure:
- 85% from recurring subscriptions
- 10% from usage-based charges
- 5% from professional services

Cost Structure:
- 40% labor (engineering, sales, support)
- 30% sales & marketing (customer acquisition)
- 15% infrastructure (cloud hosting, tools)
- 10% R&D (product development)
- 5% administrative overhead

Sensitivities:
- HIGH sensitivity to labor market changes (0.8)
- HIGH sensitivity to infrastructure costs (0.7)
- HIGH sensitivity to market demand shifts (0.7)
- MODERATE-HIGH sensitivity to regulation (0.6)
- MODERATE sensitivity to FX rates (0.4)

You can customize these values to match your specific business.
""".strip()


@dataclass(frozen=True)
class TemplateValidation:
    """Template warnings. Warnings never invalidate a model."""
    valid: bool
    warnings: tuple[str, ...] = ()


def create_saas_template(
    user_id: str,
    name: str = "My SaaS Business",
    operating_regions: Sequence[str] = ("US",),
    customer_regions: Sequence[str] = ("US",),
    business_id: Optional[str] = None,
) -> BusinessModel:
    """
    Create a business model from the SaaS defaults.

    Args:
        user_id: Owner of the business model
        name: Display name
        operating_regions: Where the company operates (default: US only)
        customer_regions: Where customers are located (default: US only)
        business_id: Explicit id, generated when omitted

    Returns:
        BusinessModel with the default SaaS structure
    """
    return BusinessModel(
        id=business_id or uuid.uuid4().hex,
        name=name,
        user_id=user_id,
        industry=Industry.SAAS,
        revenue_drivers=DEFAULT_SAAS_REVENUE_DRIVERS,
        cost_drivers=DEFAULT_SAAS_COST_DRIVERS,
        sensitivities=DEFAULT_SAAS_SENSITIVITIES,
        operating_regions=tuple(operating_regions),
        customer_regions=tuple(customer_regions),
        active=True,
    )


def validate_saas_model(model: BusinessModel) -> TemplateValidation:
    """Flag SaaS structures that look unusual."""
    warnings = []

    subscription = _find_weight(model.revenue_drivers, BusinessDriverType.SUBSCRIPTION_REVENUE)
    if subscription is not None and subscription < MIN_SUBSCRIPTION_SHARE:
        warnings.append(
            "Subscription revenue is less than 50%. This is unusual for a SaaS business."
        )

    infrastructure = _find_weight(model.cost_drivers, BusinessDriverType.INFRASTRUCTURE_COSTS)
    if infrastructure is not None and infrastructure > MAX_INFRASTRUCTURE_SHARE:
        warnings.append(
            "Infrastructure costs exceed 25%. Consider if this is accurate for your business."
        )

    sales = _find_weight(model.cost_drivers, BusinessDriverType.SALES_MARKETING)
    if sales is not None and sales > MAX_SALES_MARKETING_SHARE:
        warnings.append(
            "Sales & marketing exceeds 50%. This may indicate an unsustainable CAC."
        )

    return TemplateValidation(valid=True, warnings=tuple(warnings))


def _find_weight(drivers: Sequence[WeightedDriver], driver: BusinessDriverType) -> Optional[float]:
    for weighted in drivers:
        if weighted.driver == driver:
            return weighted.weight
    return None
