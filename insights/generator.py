"""
Insight Generator - orchestrate mappings into Insight records.

Steps per business:
1. MAP - batch_map the events (relevance, rules, confidence, ranking)
2. DEDUP - skip (business, event) pairs that already have an insight
3. SUMMARIZE - one-line summary
4. EXPLAIN - LLM explanation when configured, template explanation otherwise

Storage stays with the caller: it passes in the keys it already holds and
persists whatever comes back.
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable, Mapping, Optional

from loguru import logger

from causal_mapping import CatalogError, CausalMapping, batch_map, map_event_to_business
from domain import BusinessModel, Event, Insight
from domain.models import as_utc, utc_now
from .explainer import TextExplainer
from .summary import generate_basic_explanation, generate_insight_summary


@dataclass
class GenerationResult:
    """Outcome of generating insights for one business."""
    insights: list[Insight] = field(default_factory=list)
    created: int = 0
    skipped: int = 0
    errors: int = 0

    def to_dict(self) -> dict:
        return {
            "insights": [i.to_dict() for i in self.insights],
            "created": self.created,
            "skipped": self.skipped,
            "errors": self.errors,
        }


@dataclass
class RefreshResult:
    """Outcome of refreshing stale insights."""
    insights: list[Insight] = field(default_factory=list)
    regenerated: int = 0
    dismissed: int = 0
    errors: int = 0


@dataclass
class BatchGenerationResult:
    """Totals of generating insights across several businesses."""
    results: dict[str, GenerationResult] = field(default_factory=dict)
    total: int = 0
    created: int = 0
    skipped: int = 0
    errors: int = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "created": self.created,
            "skipped": self.skipped,
            "errors": self.errors,
        }


class InsightGenerator:
    """
    Build insights from causal mappings.

    Uses the injected explainer when given; every insight still gets the
    template explanation if the explainer is absent or returns nothing.
    """

    def __init__(self, explainer: Optional[TextExplainer] = None):
        """
        Initialize generator.

        Args:
            explainer: Optional text explainer (see insights.get_explainer)
        """
        self.explainer = explainer

    def explain(self, mapping: CausalMapping) -> str:
        explanation = None
        if self.explainer is not None:
            explanation = self.explainer.explain(mapping)
        return explanation or generate_basic_explanation(mapping)

    def build_insight(
        self,
        mapping: CausalMapping,
        now: Optional[datetime] = None,
        insight_id: Optional[str] = None,
    ) -> Insight:
        """Create an Insight from a relevant mapping."""
        return Insight(
            id=insight_id or uuid.uuid4().hex,
            business_model_id=mapping.business_model.id,
            event_id=mapping.event.id,
            summary=generate_insight_summary(mapping),
            impact_direction=mapping.impact_direction,
            impact_magnitude=mapping.impact_magnitude,
            time_horizon=mapping.time_horizon,
            affected_drivers=mapping.affected_drivers,
            causal_path=mapping.causal_path,
            assumptions=mapping.assumptions,
            confidence_score=mapping.confidence_score,
            confidence_rationale=mapping.confidence_rationale,
            generated_at=as_utc(now) if now else utc_now(),
            llm_explanation=self.explain(mapping),
        )

    def generate_for_business(
        self,
        events: Iterable[Event],
        business: BusinessModel,
        existing_keys: Iterable[tuple[str, str]] = (),
        now: Optional[datetime] = None,
    ) -> GenerationResult:
        """
        Generate insights for every relevant, not-yet-stored event.

        Args:
            events: Candidate events
            business: Business model
            existing_keys: (business_model_id, event_id) pairs already stored
            now: Reference time for relevance and generated_at

        Returns:
            GenerationResult with insights in ranked order

        Raises:
            CatalogError: If an event type has no causal rule
        """
        existing = set(existing_keys)
        result = GenerationResult()

        for mapping in batch_map(events, business, now=now):
            if mapping.key in existing:
                result.skipped += 1
                continue

            try:
                insight = self.build_insight(mapping, now=now)
            except Exception as e:
                logger.error(f"Failed to build insight for event {mapping.event.id}: {e}")
                result.errors += 1
                continue

            result.insights.append(insight)
            result.created += 1
            existing.add(mapping.key)

        logger.info(
            f"Insights for {business.id}: created={result.created}, "
            f"skipped={result.skipped}, errors={result.errors}"
        )
        return result

    def generate_for_businesses(
        self,
        events: Iterable[Event],
        businesses: Iterable[BusinessModel],
        existing_keys: Iterable[tuple[str, str]] = (),
        now: Optional[datetime] = None,
    ) -> BatchGenerationResult:
        """
        Run generate_for_business for every active business.

        Inactive businesses are skipped and not counted in ``total``.

        Returns:
            BatchGenerationResult with per-business results keyed by business id
        """
        events = list(events)
        existing = set(existing_keys)
        batch = BatchGenerationResult()

        for business in businesses:
            if not business.active:
                logger.debug(f"Skipping inactive business {business.id}")
                continue

            result = self.generate_for_business(events, business, existing_keys=existing, now=now)
            batch.results[business.id] = result
            batch.total += 1
            batch.created += result.created
            batch.skipped += result.skipped
            batch.errors += result.errors

        logger.info(
            f"Insights for {batch.total} business(es): created={batch.created}, "
            f"skipped={batch.skipped}, errors={batch.errors}"
        )
        return batch

    def refresh_insight(
        self,
        insight: Insight,
        event: Event,
        business: BusinessModel,
        now: Optional[datetime] = None,
    ) -> Insight:
        """
        Re-run mapping for an existing insight.

        Args:
            insight: Stored insight
            event: The insight's event
            business: Current version of the insight's business model
            now: Reference time

        Returns:
            Dismissed copy when the event is no longer relevant, otherwise a
            copy with regenerated content and a new generated_at

        Raises:
            ValueError: If event or business do not belong to the insight
        """
        if insight.key != (business.id, event.id):
            raise ValueError(
                f"Insight {insight.id} belongs to {insight.key}, not {(business.id, event.id)}"
            )

        mapping = map_event_to_business(event, business, now=now)

        if not mapping.is_relevant:
            logger.debug(f"Insight {insight.id} no longer relevant: {mapping.relevance_reason}")
            return insight.dismiss()

        refreshed = self.build_insight(mapping, now=now, insight_id=insight.id)
        return replace(refreshed, user_notes=insight.user_notes)

    def refresh_stale_insights(
        self,
        insights: Iterable[Insight],
        events: Mapping[str, Event],
        business: BusinessModel,
        max_age_days: int = 30,
        now: Optional[datetime] = None,
    ) -> RefreshResult:
        """
        Refresh every stale, non-dismissed insight of a business.

        Args:
            insights: Stored insights of the business
            events: Events by id
            business: Business model
            max_age_days: Age after which an insight is stale
            now: Reference time

        Returns:
            RefreshResult listing only the insights that changed
        """
        result = RefreshResult()

        for insight in insights:
            if insight.dismissed or not insight.is_stale(max_age_days, now=now):
                continue

            event = events.get(insight.event_id)
            if event is None:
                logger.warning(f"Event {insight.event_id} for insight {insight.id} not found")
                result.errors += 1
                continue

            try:
                refreshed = self.refresh_insight(insight, event, business, now=now)
            except CatalogError:
                raise
            except Exception as e:
                logger.error(f"Failed to refresh insight {insight.id}: {e}")
                result.errors += 1
                continue

            result.insights.append(refreshed)
            if refreshed.dismissed:
                result.dismissed += 1
            else:
                result.regenerated += 1

        logger.info(
            f"Refreshed insights for {business.id}: regenerated={result.regenerated}, "
            f"dismissed={result.dismissed}, errors={result.errors}"
        )
        return result
