"""
Explainers - turn a causal mapping into plain-English prose.

The LLM is only asked to phrase reasoning that the causal mapper has already
produced. It never adds causal links, predictions or scores. Any failure
yields None so the caller falls back to the template explanation.
"""
from abc import ABC, abstractmethod
from typing import Optional

from loguru import logger

from config import settings
from causal_mapping import CausalMapping
from llm import LLMClient, get_api_key, get_client
from prompts import PromptLoader

SYSTEM_PROMPT = (
    "You are a business analyst explaining insights clearly and honestly. "
    "Never exaggerate certainty."
)


class TextExplainer(ABC):
    """Capability that phrases a mapping as prose."""

    @abstractmethod
    def explain(self, mapping: CausalMapping) -> Optional[str]:
        """Return an explanation, or None when none could be produced."""
        pass


class LLMExplainer(TextExplainer):
    """
    Explain mappings with an injected LLM client.

    Builds the "explanation" prompt from the mapping's causal path,
    assumptions and impact, and returns the cleaned response text.
    """

    def __init__(
        self,
        client: LLMClient,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        max_retries: int = 1,
    ):
        """
        Initialize explainer.

        Args:
            client: LLM client instance
            max_tokens: Response budget (default settings.EXPLANATION_MAX_TOKENS)
            temperature: Sampling temperature (default settings.EXPLANATION_TEMPERATURE)
            max_retries: Attempts before giving up
        """
        self.client = client
        self.prompt_loader = PromptLoader()
        self.max_tokens = max_tokens or settings.EXPLANATION_MAX_TOKENS
        self.temperature = settings.EXPLANATION_TEMPERATURE if temperature is None else temperature
        self.max_retries = max(1, max_retries)

    def build_prompt(self, mapping: CausalMapping) -> str:
        business = mapping.business_model
        return self.prompt_loader.format(
            "explanation",
            event_summary=mapping.event.summary,
            industry=business.industry.value,
            operating_regions=", ".join(business.operating_regions) or "None",
            customer_regions=", ".join(business.customer_regions) or "None",
            causal_path=self._format_causal_path(mapping),
            affected_drivers=", ".join(d.value for d in mapping.affected_drivers),
            impact_direction=mapping.impact_direction.value,
            impact_magnitude=mapping.impact_magnitude.value,
            time_horizon=mapping.time_horizon.value,
            confidence_score=f"{mapping.confidence_score:.2f}",
            confidence_rationale=mapping.confidence_rationale,
            assumptions=self._format_assumptions(mapping),
        )

    def explain(self, mapping: CausalMapping) -> Optional[str]:
        """
        Generate an explanation for a mapping.

        Returns:
            Explanation text, or None if every attempt failed or came back empty
        """
        prompt = self.build_prompt(mapping)

        for attempt in range(1, self.max_retries + 1):
            try:
                response = self.client.generate(
                    prompt=prompt,
                    system=SYSTEM_PROMPT,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
            except Exception as e:
                logger.warning(f"Explanation attempt {attempt} for event {mapping.event.id} failed: {e}")
                continue

            if response.success:
                explanation = self._clean_explanation(response.content)
                logger.debug(f"Generated explanation for event {mapping.event.id} ({len(explanation)} chars)")
                return explanation

            logger.warning(f"LLM returned empty explanation for event {mapping.event.id}")

        logger.error(f"Explanation failed after {self.max_retries} attempt(s) for event {mapping.event.id}")
        return None

    def _format_causal_path(self, mapping: CausalMapping) -> str:
        return "\n\n".join(
            f"Step {step.step}: {step.description}\n   How: {step.mechanism}"
            for step in mapping.causal_path
        )

    def _format_assumptions(self, mapping: CausalMapping) -> str:
        lines = [f"- {a.description} ({a.impact.value} impact)" for a in mapping.assumptions]
        return "\n".join(lines) if lines else "- None"

    def _clean_explanation(self, text: str) -> str:
        """Remove markdown fences and stray quotes."""
        text = text.strip()
        if text.startswith("```"):
            text = text.split("\n", 1)[-1]
        if text.endswith("```"):
            text = text.rsplit("```", 1)[0]
        return text.strip().strip('"\'').strip()


def get_explainer() -> Optional[TextExplainer]:
    """
    Build the configured explainer.

    Returns:
        LLMExplainer when LLM explanations are enabled and the provider has an
        API key, otherwise None (callers use the template explanation)
    """
    if not settings.USE_LLM_EXPLANATIONS:
        logger.debug("LLM explanations disabled")
        return None

    provider = settings.LLM_PROVIDER.lower()
    if not get_api_key(provider):
        logger.warning(f"No API key configured for LLM provider '{provider}'. Skipping LLM explanations.")
        return None

    return LLMExplainer(get_client(provider))
