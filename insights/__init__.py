"""
Insights Module - Turn causal mappings into stored, explained insights.

Components:
- summary: one-line summaries and template explanations
- explainer: TextExplainer capability and its LLM-backed implementation
- generator: InsightGenerator (create, dedup, multi-business runs, refresh)
- changes: recent-change counts for the dashboard
"""

from .changes import ChangeSummary, summarize_changes
from .explainer import LLMExplainer, TextExplainer, get_explainer
from .generator import BatchGenerationResult, GenerationResult, InsightGenerator, RefreshResult
from .summary import generate_basic_explanation, generate_insight_summary


__all__ = [
    "BatchGenerationResult",
    "ChangeSummary",
    "GenerationResult",
    "InsightGenerator",
    "LLMExplainer",
    "RefreshResult",
    "TextExplainer",
    "generate_basic_explanation",
    "generate_insight_summary",
    "get_explainer",
    "summarize_changes",
]
