"""
Causal Mapping Module - Deterministic event -> business impact engine.

Components:
- rules: one CausalRule per event type
- assumptions: documented assumptions and business-specific caveats
- relevance: geography / recency / source-quality gate
- causal_path: business context and causal chain rendering
- impact: direction keywords and magnitude buckets
- confidence: multi-factor confidence and rationale text
- mapper: single-pair and batch entry points
- ranker: priority ordering of mappings
"""

from .assumptions import (
    ASSUMPTIONS_BY_EVENT_TYPE,
    CORE_ASSUMPTIONS,
    FX_DOMESTIC_WARNING,
    REGIONAL_ABSENCE_WARNING,
    SAAS_ASSUMPTIONS,
    build_assumption_context,
    get_assumptions,
    get_industry_assumptions,
    validate_for_business,
)
from .causal_path import build_business_context, build_causal_path, calculate_path_confidence
from .confidence import aggregate_confidence, calculate_confidence, generate_confidence_rationale
from .config import get_magnitude_weight
from .impact import (
    calculate_impact_magnitude,
    calculate_raw_magnitude,
    classify_magnitude,
    determine_impact_direction,
)
from .mapper import batch_map, build_null_mapping, map_event_to_business
from .models import (
    AssumptionContext,
    AssumptionValidation,
    CatalogError,
    CausalMapping,
    CausalRule,
    ConfidenceBreakdown,
    RelevanceResult,
    StepTemplate,
)
from .ranker import priority_score, rank_mappings, summarize_rankings
from .relevance import check_relevance
from .rules import CAUSAL_RULES, HIGH_CONFIDENCE_EVENT_TYPES, get_rule, is_high_confidence_category


__all__ = [
    # Models
    "AssumptionContext",
    "AssumptionValidation",
    "CatalogError",
    "CausalMapping",
    "CausalRule",
    "ConfidenceBreakdown",
    "RelevanceResult",
    "StepTemplate",
    # Catalogs
    "ASSUMPTIONS_BY_EVENT_TYPE",
    "CAUSAL_RULES",
    "CORE_ASSUMPTIONS",
    "HIGH_CONFIDENCE_EVENT_TYPES",
    "SAAS_ASSUMPTIONS",
    "FX_DOMESTIC_WARNING",
    "REGIONAL_ABSENCE_WARNING",
    "get_assumptions",
    "get_industry_assumptions",
    "get_rule",
    "is_high_confidence_category",
    # Pipeline
    "aggregate_confidence",
    "batch_map",
    "build_assumption_context",
    "build_business_context",
    "build_causal_path",
    "build_null_mapping",
    "calculate_confidence",
    "calculate_impact_magnitude",
    "calculate_path_confidence",
    "calculate_raw_magnitude",
    "check_relevance",
    "classify_magnitude",
    "determine_impact_direction",
    "generate_confidence_rationale",
    "map_event_to_business",
    "validate_for_business",
    # Ranking
    "get_magnitude_weight",
    "priority_score",
    "rank_mappings",
    "summarize_rankings",
]
