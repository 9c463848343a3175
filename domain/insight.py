"""
Insight record.

An Insight is what the persistence and dashboard collaborators store and show:
a causal mapping plus a one-line summary and an optional plain-English
explanation. Its confidence helpers are independent of the mapper's
aggregator and are kept that way.
"""
import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Sequence

from constants import (
    AssumptionImpact,
    BusinessDriverType,
    ImpactDirection,
    ImpactMagnitude,
    TimeHorizon,
)
from .models import (
    Assumption,
    CausalStep,
    SECONDS_PER_DAY,
    isoformat_or_none,
    parse_datetime,
    as_utc,
    utc_now,
)

NO_PATH_PENALTY = 0.5

MAGNITUDE_ORDER = {
    ImpactMagnitude.LOW: 1,
    ImpactMagnitude.MEDIUM: 2,
    ImpactMagnitude.HIGH: 3,
}


@dataclass(frozen=True)
class Insight:
    """A stored, explainable statement of how one event affects one business."""
    id: str
    business_model_id: str
    event_id: str
    summary: str
    impact_direction: ImpactDirection
    impact_magnitude: ImpactMagnitude
    time_horizon: TimeHorizon
    affected_drivers: tuple[BusinessDriverType, ...]
    causal_path: tuple[CausalStep, ...]
    assumptions: tuple[Assumption, ...]
    confidence_score: float
    confidence_rationale: str
    generated_at: datetime
    llm_explanation: Optional[str] = None
    dismissed: bool = False
    user_notes: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        for name in ("affected_drivers", "causal_path", "assumptions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def key(self) -> tuple[str, str]:
        """Storage key: one insight per (business model, event) pair."""
        return (self.business_model_id, self.event_id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "business_model_id": self.business_model_id,
            "event_id": self.event_id,
            "summary": self.summary,
            "impact_direction": self.impact_direction.value,
            "impact_magnitude": self.impact_magnitude.value,
            "time_horizon": self.time_horizon.value,
            "affected_drivers": [d.value for d in self.affected_drivers],
            "causal_path": [s.to_dict() for s in self.causal_path],
            "assumptions": [a.to_dict() for a in self.assumptions],
            "confidence_score": self.confidence_score,
            "confidence_rationale": self.confidence_rationale,
            "llm_explanation": self.llm_explanation,
            "generated_at": isoformat_or_none(self.generated_at),
            "dismissed": self.dismissed,
            "user_notes": self.user_notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Insight":
        return cls(
            id=str(data["id"]),
            business_model_id=str(data["business_model_id"]),
            event_id=str(data["event_id"]),
            summary=data["summary"],
            impact_direction=ImpactDirection(data["impact_direction"]),
            impact_magnitude=ImpactMagnitude(data["impact_magnitude"]),
            time_horizon=TimeHorizon(data["time_horizon"]),
            affected_drivers=tuple(BusinessDriverType(d) for d in data.get("affected_drivers") or []),
            causal_path=tuple(CausalStep.from_dict(s) for s in data.get("causal_path") or []),
            assumptions=tuple(Assumption.from_dict(a) for a in data.get("assumptions") or []),
            confidence_score=float(data["confidence_score"]),
            confidence_rationale=data["confidence_rationale"],
            generated_at=parse_datetime(data["generated_at"]),
            llm_explanation=data.get("llm_explanation"),
            dismissed=bool(data.get("dismissed", False)),
            user_notes=data.get("user_notes"),
        )

    @staticmethod
    def calculate_overall_confidence(
        event_confidence: float,
        causal_path: Sequence[CausalStep],
    ) -> float:
        """
        Overall confidence as event confidence times every step confidence.

        A chain is only as strong as its weakest link. An insight without any
        reasoning gets a flat 50% penalty on the event confidence.
        """
        if not causal_path:
            return event_confidence * NO_PATH_PENALTY

        path_confidence = math.prod(step.confidence for step in causal_path)
        return event_confidence * path_confidence

    @staticmethod
    def generate_confidence_rationale(
        event_confidence: float,
        causal_path: Sequence[CausalStep],
        assumptions: Sequence[Assumption],
    ) -> str:
        """Explain to the reader why the insight has its confidence level."""
        parts = []

        if event_confidence >= 0.8:
            parts.append("Event from highly reliable source")
        elif event_confidence >= 0.6:
            parts.append("Event from moderately reliable source")
        else:
            parts.append("Event from unverified or low-reliability source")

        if len(causal_path) <= 2:
            parts.append("direct causal relationship")
        elif len(causal_path) <= 4:
            parts.append("indirect causal relationship with intermediate steps")
        else:
            parts.append("complex causal chain with many assumptions")

        high_impact = sum(1 for a in assumptions if a.impact == AssumptionImpact.HIGH)
        if high_impact > 0:
            parts.append(
                f"{high_impact} high-impact assumption(s) that could significantly affect accuracy"
            )

        return "; ".join(parts) + "."

    def is_actionable(
        self,
        min_confidence: float = 0.6,
        min_magnitude: ImpactMagnitude = ImpactMagnitude.MEDIUM,
    ) -> bool:
        """Filter out dismissed, low-confidence or low-impact insights."""
        if self.dismissed:
            return False
        if self.confidence_score < min_confidence:
            return False
        return MAGNITUDE_ORDER[self.impact_magnitude] >= MAGNITUDE_ORDER[min_magnitude]

    def get_age_in_days(self, now: Optional[datetime] = None) -> int:
        now = as_utc(now) if now else utc_now()
        return math.floor((now - as_utc(self.generated_at)).total_seconds() / SECONDS_PER_DAY)

    def is_stale(self, max_age_days: int = 30, now: Optional[datetime] = None) -> bool:
        return self.get_age_in_days(now) > max_age_days

    def dismiss(self) -> "Insight":
        """Return a dismissed copy."""
        return replace(self, dismissed=True)
