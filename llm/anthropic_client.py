"""
Anthropic Client - Messages API via the anthropic SDK.
"""
from typing import Optional, List

import anthropic
import httpx
from loguru import logger

from .base import LLMClient, LLMResponse, Message


class AnthropicClient(LLMClient):
    """Anthropic client. System prompts go in the dedicated ``system`` field."""

    DEFAULT_MODEL = "claude-3-5-sonnet-20241022"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        verify_ssl: bool = True,
    ):
        super().__init__(api_key, model)
        self.timeout = timeout

        http_client = None
        if not verify_ssl:
            http_client = httpx.Client(verify=False)
            logger.warning("SSL verification disabled for Anthropic client")

        self._client = anthropic.Anthropic(
            api_key=api_key,
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
        # Anthropic takes no "system" role inside messages
        api_messages = [
            {"role": msg.role, "content": msg.content}
            for msg in messages
            if msg.role != "system"
        ]

        kwargs = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": api_messages,
        }
        if system:
            kwargs["system"] = system

        logger.debug(f"Anthropic request: model={self.model}, messages={len(api_messages)}")
        started = self._start_timer()

        try:
            response = self._client.messages.create(**kwargs)
        except Exception as e:
            logger.error(f"Anthropic request failed: {e}")
            raise

        content = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

        result = LLMResponse(
            content=content,
            model=response.model,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            stop_reason=response.stop_reason,
            latency_ms=self._elapsed_ms(started),
        )
        self.log_call(result)
        return result
