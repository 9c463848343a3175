"""
Domain Module - Records shared by the causal mapping and insight layers.

Components:
- Event, BusinessModel: read-only inputs supplied by collaborators
- CausalStep, Assumption: building blocks of a causal mapping
- Insight: downstream record built from a mapping
- SaaS template helpers
"""

from .models import (
    Assumption,
    BusinessModel,
    CausalStep,
    Event,
    SensitivityConfig,
    ValidationResult,
    WeightedDriver,
)
from .insight import Insight
from .templates import (
    DEFAULT_SAAS_COST_DRIVERS,
    DEFAULT_SAAS_REVENUE_DRIVERS,
    DEFAULT_SAAS_SENSITIVITIES,
    SAAS_TEMPLATE_EXPLANATION,
    TemplateValidation,
    create_saas_template,
    validate_saas_model,
)


__all__ = [
    # Records
    "Assumption",
    "BusinessModel",
    "CausalStep",
    "Event",
    "Insight",
    "SensitivityConfig",
    "ValidationResult",
    "WeightedDriver",
    # Templates
    "DEFAULT_SAAS_COST_DRIVERS",
    "DEFAULT_SAAS_REVENUE_DRIVERS",
    "DEFAULT_SAAS_SENSITIVITIES",
    "SAAS_TEMPLATE_EXPLANATION",
    "TemplateValidation",
    "create_saas_template",
    "validate_saas_model",
]
