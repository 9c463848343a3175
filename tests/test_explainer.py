import pytest

from causal_mapping import map_event_to_business
from config import settings
from insights import LLMExplainer, get_explainer
from insights.explainer import SYSTEM_PROMPT
from tests.conftest import LABOR_SUMMARY, FakeLLMClient


@pytest.fixture
def mapping(make_event, saas_business, now):
    return map_event_to_business(make_event(), saas_business, now=now)


class TestLLMExplainer:
    def test_prompt_carries_the_reasoning(self, mapping, fake_llm):
        prompt = LLMExplainer(fake_llm).build_prompt(mapping)

        assert LABOR_SUMMARY in prompt
        assert "- Industry: SAAS" in prompt
        assert "- Operating regions: US, EU" in prompt
        assert "Step 1: Labor market event occurs" in prompt
        assert "Step 3: Increased labor costs flow through to P&L" in prompt
        assert "- Direction: INCREASE" in prompt
        assert "(HIGH impact)" in prompt
        assert "{" not in prompt

    def test_returns_cleaned_response(self, mapping):
        client = FakeLLMClient(content='```\n"Wages are rising, so costs will too."\n```')
        assert LLMExplainer(client).explain(mapping) == "Wages are rising, so costs will too."

    def test_uses_configured_limits(self, mapping, fake_llm):
        LLMExplainer(fake_llm).explain(mapping)

        call = fake_llm.calls[0]
        assert call["system"] == SYSTEM_PROMPT
        assert call["max_tokens"] == settings.EXPLANATION_MAX_TOKENS
        assert call["temperature"] == settings.EXPLANATION_TEMPERATURE

    def test_client_failure_yields_none(self, mapping):
        client = FakeLLMClient(error=RuntimeError("rate limited"))
        assert LLMExplainer(client, max_retries=2).explain(mapping) is None
        assert len(client.calls) == 2

    def test_empty_response_yields_none(self, mapping):
        assert LLMExplainer(FakeLLMClient(content="   ")).explain(mapping) is None


class TestGetExplainer:
    def test_disabled(self, monkeypatch):
        monkeypatch.setattr(settings, "USE_LLM_EXPLANATIONS", False)
        assert get_explainer() is None

    def test_no_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "USE_LLM_EXPLANATIONS", True)
        monkeypatch.setattr(settings, "LLM_PROVIDER", "openai")
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
        assert get_explainer() is None

    def test_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "USE_LLM_EXPLANATIONS", True)
        monkeypatch.setattr(settings, "LLM_PROVIDER", "anthropic")
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-test")
        explainer = get_explainer()
        assert isinstance(explainer, LLMExplainer)
