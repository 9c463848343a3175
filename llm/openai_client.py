"""
OpenAI Client - chat completions via the OpenAI SDK.

Also works with any OpenAI-compatible endpoint through ``base_url``.
"""
from typing import Optional, List

import httpx
from openai import OpenAI
from loguru import logger

from .base import LLMClient, LLMResponse, Message


class OpenAIClient(LLMClient):
    """
    OpenAI client using the official SDK.

    Defaults to a small, cheap model: explanations are short prose.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        verify_ssl: bool = True,
        base_url: Optional[str] = None,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Model name
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates (disable for dev if needed)
            base_url: Optional OpenAI-compatible endpoint
        """
        super().__init__(api_key, model)
        self.timeout = timeout

        # Custom httpx client only when SSL verification is disabled
        http_client = None
        if not verify_ssl:
            http_client = httpx.Client(verify=False)
            logger.warning("SSL verification disabled for OpenAI client")

        self._client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
        )

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Generate response from a single prompt."""
        messages = [Message(role="user", content=prompt)]
        return self.chat(messages, system=system, max_tokens=max_tokens, temperature=temperature)

    def chat(
        self,
        messages: List[Message],
        system: Optional[str] = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Generate response from conversation."""
        api_messages = self._build_api_messages(messages, system)

        logger.debug(f"OpenAI request: model={self.model}, messages={len(api_messages)}")
        started = self._start_timer()

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=api_messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            logger.error(f"OpenAI request failed: {e}")
            raise

        choice = response.choices[0]
        usage = response.usage

        result = LLMResponse(
            content=choice.message.content or "",
            model=response.model,
            usage={
                "input_tokens": usage.prompt_tokens if usage else 0,
                "output_tokens": usage.completion_tokens if usage else 0,
            },
            stop_reason=choice.finish_reason,
            latency_ms=self._elapsed_ms(started),
        )
        self.log_call(result)
        return result
