"""
Domain records for events and business models.

Events arrive already normalized from the ingestion collaborator and business
models from the configuration collaborator. Both are read-only here: every
record is a frozen dataclass and sequence fields are stored as tuples.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from constants import (
    AffectedEntity,
    AssumptionImpact,
    BusinessDriverType,
    DOMESTIC_REGION,
    EventType,
    GLOBAL_REGION,
    Industry,
    SensitivityFactor,
)

SECONDS_PER_DAY = 24 * 60 * 60
DEFAULT_SENSITIVITY = 0.5
WEIGHT_SUM_TOLERANCE = 0.01


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so ages can be compared safely."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_datetime(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def isoformat_or_none(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


# ============================================
# CAUSAL REASONING PRIMITIVES
# ============================================

@dataclass(frozen=True)
class CausalStep:
    """One link in a cause -> effect chain."""
    step: int
    description: str
    mechanism: str  # HOW does this connection work?
    confidence: float  # 0-1 confidence in this specific link

    def to_dict(self) -> dict:
        return {
            "step": self.step,
            "description": self.description,
            "mechanism": self.mechanism,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CausalStep":
        return cls(
            step=int(data["step"]),
            description=data["description"],
            mechanism=data["mechanism"],
            confidence=float(data["confidence"]),
        )


@dataclass(frozen=True)
class Assumption:
    """An explicitly documented assumption behind a causal mapping."""
    id: str
    description: str
    impact: AssumptionImpact  # If wrong, how much does it matter?
    source: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "impact": self.impact.value,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Assumption":
        return cls(
            id=data["id"],
            description=data["description"],
            impact=AssumptionImpact(data["impact"]),
            source=data.get("source"),
        )


# ============================================
# EVENT
# ============================================

@dataclass(frozen=True)
class Event:
    """
    A normalized world event.

    ``confidence_score`` is computed upstream from source reliability and
    content quality (see ``calculate_confidence``).
    """
    id: str
    event_type: EventType
    summary: str
    region: str  # ISO country code or GLOBAL
    timestamp: datetime
    confidence_score: float
    affected_entities: tuple[AffectedEntity, ...] = ()
    source: str = ""
    source_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict, hash=False)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "affected_entities", tuple(self.affected_entities))

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        """Build an Event from a storage row or API payload."""
        return cls(
            id=str(data["id"]),
            event_type=EventType(data["event_type"]),
            summary=data["summary"],
            region=data["region"],
            timestamp=parse_datetime(data["timestamp"]),
            confidence_score=float(data["confidence_score"]),
            affected_entities=tuple(AffectedEntity(e) for e in data.get("affected_entities") or []),
            source=data.get("source", ""),
            source_id=data.get("source_id"),
            metadata=dict(data.get("metadata") or {}),
            created_at=parse_datetime(data.get("created_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "event_type": self.event_type.value,
            "summary": self.summary,
            "region": self.region,
            "timestamp": isoformat_or_none(self.timestamp),
            "confidence_score": self.confidence_score,
            "affected_entities": [e.value for e in self.affected_entities],
            "source": self.source,
            "source_id": self.source_id,
            "metadata": dict(self.metadata),
            "created_at": isoformat_or_none(self.created_at),
        }

    @staticmethod
    def calculate_confidence(
        source_reliability: float,
        has_specific_region: bool,
        has_timestamp: bool,
        summary_length: int,
    ) -> float:
        """
        Calculate event confidence from objective source and content signals.

        Args:
            source_reliability: Reliability of the source (0-1)
            has_specific_region: False when the event is only tagged GLOBAL
            has_timestamp: Whether the source supplied a publication time
            summary_length: Length of the normalized summary

        Returns:
            Confidence clamped to [0, 1]
        """
        confidence = source_reliability

        # Vague geography
        if not has_specific_region:
            confidence *= 0.8

        # Missing or vague timestamp
        if not has_timestamp:
            confidence *= 0.7

        # Very short or very long summaries indicate low quality
        if summary_length < 50 or summary_length > 1000:
            confidence *= 0.9

        return max(0.0, min(1.0, confidence))

    def is_relevant_to_region(self, regions) -> bool:
        """Check whether the event touches any of the given regions."""
        return self.region == GLOBAL_REGION or self.region in regions

    def age_in_days(self, now: Optional[datetime] = None) -> float:
        """Fractional age of the event in days."""
        now = as_utc(now) if now else utc_now()
        return (now - as_utc(self.timestamp)).total_seconds() / SECONDS_PER_DAY

    def is_recent(self, days: int = 90, now: Optional[datetime] = None) -> bool:
        return self.age_in_days(now) <= days

    def get_age_in_days(self, now: Optional[datetime] = None) -> int:
        """Whole days elapsed since the event."""
        return math.floor(self.age_in_days(now))


# ============================================
# BUSINESS MODEL
# ============================================

@dataclass(frozen=True)
class WeightedDriver:
    """Business lever with its share of revenue or cost (0-1)."""
    driver: BusinessDriverType
    weight: float

    def to_dict(self) -> dict:
        return {"driver": self.driver.value, "weight": self.weight}


@dataclass(frozen=True)
class SensitivityConfig:
    """How reactive the business is to one factor (0-1)."""
    factor: SensitivityFactor
    sensitivity: float

    def to_dict(self) -> dict:
        return {"factor": self.factor.value, "sensitivity": self.sensitivity}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a business-model configuration check."""
    valid: bool
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class BusinessModel:
    """
    Structure and sensitivities of a business.

    Revenue and cost driver weights each sum to 1.0 (+/- 0.01). The
    configuration collaborator enforces that with ``validate()``; the causal
    mapper assumes it and never re-checks.
    """
    id: str
    name: str
    revenue_drivers: tuple[WeightedDriver, ...]
    cost_drivers: tuple[WeightedDriver, ...]
    sensitivities: tuple[SensitivityConfig, ...] = ()
    operating_regions: tuple[str, ...] = ()
    customer_regions: tuple[str, ...] = ()
    user_id: str = ""
    industry: Industry = Industry.SAAS
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        for name in (
            "revenue_drivers",
            "cost_drivers",
            "sensitivities",
            "operating_regions",
            "customer_regions",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: dict) -> "BusinessModel":
        """Build a BusinessModel from a storage row or API payload."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            revenue_drivers=tuple(
                WeightedDriver(BusinessDriverType(d["driver"]), float(d["weight"]))
                for d in data.get("revenue_drivers") or []
            ),
            cost_drivers=tuple(
                WeightedDriver(BusinessDriverType(d["driver"]), float(d["weight"]))
                for d in data.get("cost_drivers") or []
            ),
            sensitivities=tuple(
                SensitivityConfig(SensitivityFactor(s["factor"]), float(s["sensitivity"]))
                for s in data.get("sensitivities") or []
            ),
            operating_regions=tuple(data.get("operating_regions") or []),
            customer_regions=tuple(data.get("customer_regions") or []),
            user_id=data.get("user_id", ""),
            industry=Industry(data.get("industry", Industry.SAAS.value)),
            active=bool(data.get("active", True)),
            created_at=parse_datetime(data.get("created_at")),
            updated_at=parse_datetime(data.get("updated_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "user_id": self.user_id,
            "industry": self.industry.value,
            "revenue_drivers": [d.to_dict() for d in self.revenue_drivers],
            "cost_drivers": [d.to_dict() for d in self.cost_drivers],
            "sensitivities": [s.to_dict() for s in self.sensitivities],
            "operating_regions": list(self.operating_regions),
            "customer_regions": list(self.customer_regions),
            "active": self.active,
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
        }

    def get_driver_weight(self, driver: BusinessDriverType) -> float:
        """Weight of a lever, searching revenue drivers then cost drivers."""
        for weighted in self.revenue_drivers + self.cost_drivers:
            if weighted.driver == driver:
                return weighted.weight
        return 0.0

    def get_sensitivity(self, factor: SensitivityFactor) -> float:
        """Sensitivity to a factor, moderate (0.5) when not configured."""
        for config in self.sensitivities:
            if config.factor == factor:
                return config.sensitivity
        return DEFAULT_SENSITIVITY

    def has_regional_exposure(self, region: str) -> bool:
        """Check if the business operates in or serves a region."""
        return (
            region == GLOBAL_REGION
            or region in self.operating_regions
            or region in self.customer_regions
        )

    def get_all_relevant_regions(self) -> list[str]:
        """Operating and customer regions, de-duplicated in order."""
        return list(dict.fromkeys(self.operating_regions + self.customer_regions))

    def has_international_operations(self, home_region: str = DOMESTIC_REGION) -> bool:
        return _is_international(self.operating_regions, home_region)

    def has_international_customers(self, home_region: str = DOMESTIC_REGION) -> bool:
        return _is_international(self.customer_regions, home_region)

    def validate(self) -> ValidationResult:
        """Check weights sum to ~1, sensitivities are in range and regions look sane."""
        errors = []

        revenue_sum = sum(d.weight for d in self.revenue_drivers)
        if abs(revenue_sum - 1.0) > WEIGHT_SUM_TOLERANCE:
            errors.append(f"Revenue drivers must sum to 1.0 (currently {revenue_sum:.2f})")

        cost_sum = sum(d.weight for d in self.cost_drivers)
        if abs(cost_sum - 1.0) > WEIGHT_SUM_TOLERANCE:
            errors.append(f"Cost drivers must sum to 1.0 (currently {cost_sum:.2f})")

        for config in self.sensitivities:
            if config.sensitivity < 0 or config.sensitivity > 1:
                errors.append(f"Sensitivity for {config.factor.value} must be between 0 and 1")

        for region in self.operating_regions + self.customer_regions:
            if len(region) < 2 or len(region) > 5:
                errors.append(f"Invalid region code: {region}")

        return ValidationResult(valid=not errors, errors=tuple(errors))


def _is_international(regions: tuple[str, ...], home_region: str) -> bool:
    # More than one region counts as international even if home is among them
    return any(region != home_region or len(regions) > 1 for region in regions)
