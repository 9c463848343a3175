import pytest

from config import settings
from llm import AnthropicClient, LLMResponse, OpenAIClient, get_client


def test_unknown_provider():
    with pytest.raises(ValueError, match="Unknown LLM provider"):
        get_client("mystery", api_key="k")


def test_missing_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    with pytest.raises(ValueError, match="API key required"):
        get_client("openai")


def test_openai_client(monkeypatch):
    monkeypatch.setattr(settings, "LLM_MODEL", None)
    client = get_client("OpenAI", api_key="sk-test")

    assert isinstance(client, OpenAIClient)
    assert client.model == OpenAIClient.DEFAULT_MODEL
    assert client.timeout == settings.LLM_TIMEOUT_SECONDS


def test_anthropic_client_uses_settings(monkeypatch):
    monkeypatch.setattr(settings, "LLM_PROVIDER", "anthropic")
    monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-ant-test")
    monkeypatch.setattr(settings, "LLM_MODEL", "claude-test")

    client = get_client()

    assert isinstance(client, AnthropicClient)
    assert client.model == "claude-test"


def test_response_helpers():
    response = LLMResponse(content="hi", model="m", usage={"input_tokens": 3, "output_tokens": 4})
    assert response.total_tokens == 7
    assert response.success
    assert not LLMResponse(content="  ", model="m", usage={}).success
