"""
Shared Enums

Application-wide enums used across the domain, causal mapping and insight layers.
Values are the upper-case names so records serialize to the same strings the
storage and UI collaborators use.
"""
from enum import Enum


class EventType(str, Enum):
    """Kinds of world events the causal rules know about."""
    REGULATION_CHANGE = "REGULATION_CHANGE"     # New laws, compliance requirements
    ECONOMIC_INDICATOR = "ECONOMIC_INDICATOR"   # GDP, inflation, interest rates
    LABOR_MARKET = "LABOR_MARKET"               # Wage changes, unemployment
    GEOPOLITICAL = "GEOPOLITICAL"               # Political instability, trade policy
    INFRASTRUCTURE = "INFRASTRUCTURE"           # Cloud costs, energy costs
    MARKET_SHIFT = "MARKET_SHIFT"               # Demand changes, competition
    TECHNOLOGY = "TECHNOLOGY"                   # New tech, platform changes
    CURRENCY = "CURRENCY"                       # FX rate changes
    DISASTER = "DISASTER"                       # Natural disasters, pandemics


class AffectedEntity(str, Enum):
    """Entities an event can touch."""
    TECH_COMPANIES = "TECH_COMPANIES"
    LABOR_FORCE = "LABOR_FORCE"
    CONSUMERS = "CONSUMERS"
    INFRASTRUCTURE_PROVIDERS = "INFRASTRUCTURE_PROVIDERS"
    FINANCIAL_SECTOR = "FINANCIAL_SECTOR"
    GOVERNMENT = "GOVERNMENT"
    ALL = "ALL"


class Industry(str, Enum):
    """Industry templates."""
    SAAS = "SAAS"


class BusinessDriverType(str, Enum):
    """Revenue and cost levers of a business model."""
    # Revenue drivers
    SUBSCRIPTION_REVENUE = "SUBSCRIPTION_REVENUE"
    USAGE_REVENUE = "USAGE_REVENUE"
    SERVICES_REVENUE = "SERVICES_REVENUE"

    # Cost drivers
    LABOR_COSTS = "LABOR_COSTS"
    INFRASTRUCTURE_COSTS = "INFRASTRUCTURE_COSTS"
    SALES_MARKETING = "SALES_MARKETING"
    R_AND_D = "R_AND_D"
    ADMINISTRATIVE = "ADMINISTRATIVE"


class SensitivityFactor(str, Enum):
    """Axes along which a business reacts to external shocks."""
    LABOR = "LABOR"
    INFRASTRUCTURE = "INFRASTRUCTURE"
    FX = "FX"
    REGULATION = "REGULATION"
    MARKET_DEMAND = "MARKET_DEMAND"


class ImpactDirection(str, Enum):
    """Direction of an impact on the business."""
    INCREASE = "INCREASE"   # Costs or risks increase
    DECREASE = "DECREASE"   # Costs decrease or opportunities emerge
    NEUTRAL = "NEUTRAL"     # Minimal or offsetting effects


class ImpactMagnitude(str, Enum):
    """Coarse size bucket of an estimated impact."""
    LOW = "LOW"         # < 2%
    MEDIUM = "MEDIUM"   # 2-5%
    HIGH = "HIGH"       # > 5%


class TimeHorizon(str, Enum):
    """When the impact is expected to land."""
    SHORT = "SHORT"     # 0-3 months
    MEDIUM = "MEDIUM"   # 3-12 months
    LONG = "LONG"       # 12+ months


class AssumptionImpact(str, Enum):
    """How much it matters if an assumption turns out wrong."""
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


# Regions
GLOBAL_REGION = "GLOBAL"
DOMESTIC_REGION = "US"
