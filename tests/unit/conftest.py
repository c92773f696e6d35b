"""Unit test fixtures (mocks and stubs).

Provides mock objects and fake provider transports for testing without
network access.
"""

import json
from types import SimpleNamespace
from typing import Any, Callable

import httpx
import pytest
from unittest.mock import AsyncMock, Mock

from mail_categorizer.llm.dispatcher import Dispatcher
from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.llm.prompt_builder import PromptBuilder


VALID_AI_CONTENT = json.dumps(
    {
        "category": "MeetingBooked",
        "reasoning": "The sender confirmed a time for the call.",
        "replies": [
            "Great, see you on Tuesday.",
            "Thanks for confirming, talk soon.",
        ],
    }
)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def valid_ai_content() -> str:
    """Well-formed model output (MeetingBooked, two replies)."""
    return VALID_AI_CONTENT


@pytest.fixture
def bodies() -> SimpleNamespace:
    """Builders for provider response bodies, one per wire format."""
    return SimpleNamespace(
        openai=lambda content: {
            "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]
        },
        anthropic=lambda text: {"content": [{"type": "text", "text": text}], "role": "assistant"},
        ollama=lambda content: {"message": {"role": "assistant", "content": content}, "done": True},
    )


@pytest.fixture
def handler_transport():
    """Factory: recording transport driven by a request handler."""
    def _create(handler: Callable[[httpx.Request], httpx.Response]) -> RecordingTransport:
        return RecordingTransport(handler)

    return _create


@pytest.fixture
def json_transport():
    """Factory: recording transport answering every request with a JSON body."""
    def _create(body: Any, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body))

    return _create


@pytest.fixture
def dispatcher_with():
    """Factory: Dispatcher whose HTTP traffic goes to the given transport."""
    def _create(transport: httpx.AsyncBaseTransport) -> Dispatcher:
        return Dispatcher(timeout=5.0, transport=transport)

    return _create


@pytest.fixture
def mock_dispatcher():
    """Mock Dispatcher returning a valid AI response."""
    mock = AsyncMock(spec=Dispatcher)
    mock.dispatch = AsyncMock(return_value=VALID_AI_CONTENT)
    return mock


@pytest.fixture
def failing_dispatcher():
    """Mock Dispatcher whose dispatch always raises ProviderError."""
    mock = AsyncMock(spec=Dispatcher)
    mock.dispatch = AsyncMock(side_effect=ProviderError("groq returned HTTP 503"))
    return mock


@pytest.fixture
def mock_prompt_builder():
    """Mock PromptBuilder returning a fixed prompt."""
    mock = Mock(spec=PromptBuilder)
    mock.build_prompt = Mock(return_value="Categorize this email")
    return mock
