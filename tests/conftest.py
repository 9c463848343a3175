"""
Shared fixtures: a fixed clock, a SaaS business and an event factory.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from constants import EventType
from domain import Event, create_saas_template
from llm import LLMClient, LLMResponse, Message

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

LABOR_SUMMARY = (
    "Tech sector wages increased 8% year over year as demand for software engineers remains strong"
)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def saas_business():
    """SaaS defaults, operating and selling in US and EU."""
    return create_saas_template(
        user_id="user-1",
        name="Acme Analytics",
        operating_regions=("US", "EU"),
        customer_regions=("US", "EU"),
        business_id="biz-1",
    )


@pytest.fixture
def domestic_business():
    """SaaS defaults, US only."""
    return create_saas_template(user_id="user-2", business_id="biz-us")


@pytest.fixture
def make_event():
    counter = {"n": 0}

    def _make(
        event_type: EventType = EventType.LABOR_MARKET,
        summary: str = LABOR_SUMMARY,
        region: str = "US",
        age_days: float = 2,
        confidence: float = 0.85,
        event_id: Optional[str] = None,
    ) -> Event:
        counter["n"] += 1
        return Event(
            id=event_id or f"evt-{counter['n']}",
            event_type=event_type,
            summary=summary,
            region=region,
            timestamp=NOW - timedelta(days=age_days),
            confidence_score=confidence,
            source="test-feed",
        )

    return _make


class FakeLLMClient(LLMClient):
    """Returns canned content and records every call."""

    def __init__(self, content: str = "A plain explanation.", error: Optional[Exception] = None):
        super().__init__(api_key="test-key", model="fake-model")
        self.content = content
        self.error = error
        self.calls: List[dict] = []

    def generate(self, prompt, system=None, max_tokens=4096, temperature=0.0) -> LLMResponse:
        return self.chat([Message(role="user", content=prompt)], system, max_tokens, temperature)

    def chat(self, messages, system=None, max_tokens=4096, temperature=0.0) -> LLMResponse:
        self.calls.append({
            "messages": messages,
            "system": system,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content,
            model=self.model,
            usage={"input_tokens": 10, "output_tokens": 20},
        )


@pytest.fixture
def fake_llm():
    return FakeLLMClient()
