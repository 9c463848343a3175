"""
Data models for the causal mapping module.
"""
from dataclasses import dataclass

from constants import (
    BusinessDriverType,
    EventType,
    ImpactDirection,
    ImpactMagnitude,
    SensitivityFactor,
    TimeHorizon,
)
from domain import Assumption, BusinessModel, CausalStep, Event


class CatalogError(Exception):
    """Raised when a rule or assumption catalog does not cover an event type."""
    pass


@dataclass(frozen=True)
class StepTemplate:
    """
    Template for one causal step.

    ``mechanism`` may reference ``{event}`` (the event summary) and
    ``{context}`` (the business context string).
    """
    description: str
    mechanism: str
    confidence: float

    def render(self, step: int, event_summary: str, business_context: str) -> CausalStep:
        return CausalStep(
            step=step,
            description=self.description,
            mechanism=self.mechanism.format(event=event_summary, context=business_context),
            confidence=self.confidence,
        )


@dataclass(frozen=True)
class CausalRule:
    """Maps one event type to the business levers it moves."""
    event_type: EventType
    affected_drivers: tuple[BusinessDriverType, ...]
    sensitivity_factor: SensitivityFactor
    default_direction: ImpactDirection  # Can be overridden by event keywords
    time_horizon: TimeHorizon
    steps: tuple[StepTemplate, ...]

    def get_causal_path(self, event_summary: str, business_context: str) -> tuple[CausalStep, ...]:
        """Instantiate the step templates, numbered from 1 in cause -> effect order."""
        return tuple(
            template.render(index, event_summary, business_context)
            for index, template in enumerate(self.steps, start=1)
        )


@dataclass(frozen=True)
class RelevanceResult:
    """Outcome of the relevance gate."""
    is_relevant: bool
    reason: str


@dataclass(frozen=True)
class AssumptionContext:
    """Business facts that assumption preconditions are checked against."""
    has_international_operations: bool
    has_international_customers: bool
    operates_in_region: bool


@dataclass(frozen=True)
class AssumptionValidation:
    """Caveats raised for assumptions. Warnings never invalidate."""
    valid: bool
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConfidenceBreakdown:
    """Every factor that went into a mapping's confidence."""
    event_confidence: float
    path_confidence: float
    rule_quality_factor: float
    assumption_penalty: float
    sensitivity_bonus: float

    @property
    def raw_score(self) -> float:
        return (
            self.event_confidence
            * self.path_confidence
            * self.rule_quality_factor
            * self.assumption_penalty
            * self.sensitivity_bonus
        )

    @property
    def score(self) -> float:
        """Raw score clamped to [0, 1]."""
        return max(0.0, min(1.0, self.raw_score))

    def to_dict(self) -> dict:
        return {
            "event_confidence": self.event_confidence,
            "path_confidence": self.path_confidence,
            "rule_quality_factor": self.rule_quality_factor,
            "assumption_penalty": self.assumption_penalty,
            "sensitivity_bonus": self.sensitivity_bonus,
            "score": self.score,
        }


@dataclass(frozen=True)
class CausalMapping:
    """
    How one event affects one business.

    Created fresh per (event, business) pair and never mutated. Irrelevant
    pairs still produce a mapping: NEUTRAL, LOW, zero confidence, no path
    and no assumptions.
    """
    event: Event
    business_model: BusinessModel
    affected_drivers: tuple[BusinessDriverType, ...]
    impact_direction: ImpactDirection
    impact_magnitude: ImpactMagnitude
    time_horizon: TimeHorizon
    causal_path: tuple[CausalStep, ...]
    assumptions: tuple[Assumption, ...]
    confidence_score: float
    confidence_rationale: str
    is_relevant: bool
    relevance_reason: str

    @property
    def key(self) -> tuple[str, str]:
        """(business model id, event id), the natural dedup key."""
        return (self.business_model.id, self.event.id)

    def to_dict(self, include_refs: bool = False) -> dict:
        result = {
            "event_id": self.event.id,
            "business_model_id": self.business_model.id,
            "affected_drivers": [d.value for d in self.affected_drivers],
            "impact_direction": self.impact_direction.value,
            "impact_magnitude": self.impact_magnitude.value,
            "time_horizon": self.time_horizon.value,
            "causal_path": [s.to_dict() for s in self.causal_path],
            "assumptions": [a.to_dict() for a in self.assumptions],
            "confidence_score": self.confidence_score,
            "confidence_rationale": self.confidence_rationale,
            "is_relevant": self.is_relevant,
            "relevance_reason": self.relevance_reason,
        }
        if include_refs:
            result["event"] = self.event.to_dict()
            result["business_model"] = self.business_model.to_dict()
        return result
