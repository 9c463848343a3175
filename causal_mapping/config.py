"""
Constants for causal mapping.

Contains:
- Relevance gate thresholds
- Magnitude bucket cut-offs and ranking weights
- Confidence multipliers
- Rationale tiers

The magnitude cut-offs encode what counts as economically material and every
ranking downstream depends on them. Do not tune them per deployment.
"""
from constants import ImpactMagnitude


# ============================================
# RELEVANCE
# ============================================

RECENCY_WINDOW_DAYS = 90      # Older events are no longer relevant
MIN_EVENT_CONFIDENCE = 0.3    # Source quality floor


# ============================================
# MAGNITUDE
# ============================================

HIGH_MAGNITUDE_THRESHOLD = 0.05     # raw > 0.05 -> HIGH (> 5% is typically material)
MEDIUM_MAGNITUDE_THRESHOLD = 0.02   # raw > 0.02 -> MEDIUM

MAGNITUDE_WEIGHTS = {
    ImpactMagnitude.HIGH: 3,
    ImpactMagnitude.MEDIUM: 2,
    ImpactMagnitude.LOW: 1,
}


# ============================================
# CONFIDENCE
# ============================================

HIGH_CONFIDENCE_RULE_FACTOR = 1.0
LOW_CONFIDENCE_RULE_FACTOR = 0.9    # Less certain cause -> effect links
ASSUMPTION_DISCOUNT = 0.95          # Compounds once per attached assumption
HIGH_SENSITIVITY_THRESHOLD = 0.7    # sensitivity > 0.7 earns the bonus
HIGH_SENSITIVITY_BONUS = 1.1
EMPTY_PATH_PENALTY = 0.5            # Applied once when a path has no steps


# ============================================
# RATIONALE
# ============================================

HIGHLY_RELIABLE_THRESHOLD = 0.8
MODERATELY_RELIABLE_THRESHOLD = 0.6
DIRECT_IMPACT_MAX_STEPS = 2


def get_magnitude_weight(magnitude: ImpactMagnitude) -> int:
    """
    Numeric weight used to rank mappings.

    Args:
        magnitude: Impact magnitude bucket

    Returns:
        3 for HIGH, 2 for MEDIUM, 1 for LOW
    """
    return MAGNITUDE_WEIGHTS[magnitude]
