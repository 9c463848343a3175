"""
Batch Ranker - order mappings for downstream consumption.

Priority is confidence * magnitude weight (HIGH=3, MEDIUM=2, LOW=1).
The sort is stable, so mappings with equal priority keep their input order.
"""
from typing import Iterable

from loguru import logger

from constants import ImpactMagnitude
from .config import get_magnitude_weight
from .models import CausalMapping


def priority_score(mapping: CausalMapping) -> float:
    """Ranking key: high-quality, high-impact mappings first."""
    return mapping.confidence_score * get_magnitude_weight(mapping.impact_magnitude)


def rank_mappings(mappings: Iterable[CausalMapping]) -> list[CausalMapping]:
    """
    Sort mappings by descending priority.

    Args:
        mappings: Mappings to rank

    Returns:
        New list, highest priority first
    """
    return sorted(mappings, key=priority_score, reverse=True)


def summarize_rankings(mappings: Iterable[CausalMapping]) -> dict:
    """
    Count ranked mappings per magnitude bucket.

    Returns:
        Dict with total, per-magnitude counts and the top priority score
    """
    mappings = list(mappings)
    counts = {m.value: 0 for m in ImpactMagnitude}
    for mapping in mappings:
        counts[mapping.impact_magnitude.value] += 1

    summary = {
        "total": len(mappings),
        "by_magnitude": counts,
        "top_priority": round(max((priority_score(m) for m in mappings), default=0.0), 4),
    }

    logger.info(
        f"Ranking complete: high={counts['HIGH']}, "
        f"medium={counts['MEDIUM']}, low={counts['LOW']}"
    )
    return summary
