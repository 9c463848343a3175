"""
Constants package for the Causal Insight Engine.

Contains shared enums and region constants.
"""

from .enums import (
    EventType,
    AffectedEntity,
    Industry,
    BusinessDriverType,
    SensitivityFactor,
    ImpactDirection,
    ImpactMagnitude,
    TimeHorizon,
    AssumptionImpact,
    GLOBAL_REGION,
    DOMESTIC_REGION,
)

__all__ = [
    # Enums
    "EventType",
    "AffectedEntity",
    "Industry",
    "BusinessDriverType",
    "SensitivityFactor",
    "ImpactDirection",
    "ImpactMagnitude",
    "TimeHorizon",
    "AssumptionImpact",
    # Regions
    "GLOBAL_REGION",
    "DOMESTIC_REGION",
]
