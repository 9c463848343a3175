"""
LLM Module - Unified interface for LLM providers.

Usage:
    from llm import get_client

    client = get_client()  # Uses config settings
    response = client.generate("Your prompt here")
    print(response.content)

Supported providers:
- openai: OpenAI chat completions (gpt-4o-mini by default)
- anthropic: Anthropic Messages API
"""
from typing import Optional

from config import settings
from .base import LLMClient, LLMResponse, Message
from .anthropic_client import AnthropicClient
from .openai_client import OpenAIClient


# Provider mapping
_PROVIDERS = {
    "openai": OpenAIClient,
    "anthropic": AnthropicClient,
}

# Default models per provider
_DEFAULT_MODELS = {
    "openai": OpenAIClient.DEFAULT_MODEL,
    "anthropic": AnthropicClient.DEFAULT_MODEL,
}


def get_api_key(provider: str) -> str:
    """API key configured for a provider, empty string when unset."""
    if provider == "openai":
        return settings.OPENAI_API_KEY
    if provider == "anthropic":
        return settings.ANTHROPIC_API_KEY
    return ""


def get_client(
    provider: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    verify_ssl: Optional[bool] = None,
) -> LLMClient:
    """
    Get an LLM client instance.

    Args:
        provider: Provider name ("openai" or "anthropic"). Defaults to settings.LLM_PROVIDER
        api_key: API key. Defaults to settings based on provider
        model: Model name. Defaults to settings.LLM_MODEL or provider default
        verify_ssl: Whether to verify SSL. Defaults to settings.LLM_VERIFY_SSL

    Returns:
        Configured LLMClient instance

    Raises:
        ValueError: Unknown provider or missing API key
    """
    provider = (provider or settings.LLM_PROVIDER).lower()

    if provider not in _PROVIDERS:
        raise ValueError(f"Unknown LLM provider: {provider}. Available: {list(_PROVIDERS.keys())}")

    if api_key is None:
        api_key = get_api_key(provider)

    if not api_key:
        raise ValueError(f"API key required for provider: {provider}")

    model = model or settings.LLM_MODEL or _DEFAULT_MODELS[provider]

    if verify_ssl is None:
        verify_ssl = settings.LLM_VERIFY_SSL

    client_class = _PROVIDERS[provider]
    return client_class(
        api_key=api_key,
        model=model,
        timeout=settings.LLM_TIMEOUT_SECONDS,
        verify_ssl=verify_ssl,
    )


__all__ = [
    "get_api_key",
    "get_client",
    "LLMClient",
    "LLMResponse",
    "Message",
    "AnthropicClient",
    "OpenAIClient",
]
