"""Integration test fixtures.

Integration tests run the FastAPI app and the full categorization stack
in-process. Provider HTTP traffic goes to an httpx.MockTransport, so no
network access or API keys are needed.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from mail_categorizer.api.dependencies import build_categorizer, get_categorizer
from mail_categorizer.main import app
from mail_categorizer.providers.registry import load_provider_registry


@pytest.fixture
def provider_transport():
    """Factory: MockTransport answering every provider request with ``body``.

    The returned transport keeps the requests it served in ``.requests``.
    """
    def _create(body=None, status_code: int = 200) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, json=body)

        transport = httpx.MockTransport(_handler)
        transport.requests = requests
        return transport

    return _create


@pytest.fixture
def openai_body():
    """Factory: OpenAI-compatible response wrapping ``content``."""
    def _create(content) -> dict:
        if not isinstance(content, str):
            content = json.dumps(content)
        return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}

    return _create


@pytest.fixture
def categorizer_factory(settings_factory):
    """Factory: fully wired Categorizer for the given settings overrides."""
    def _create(transport=None, **overrides):
        app_settings = settings_factory(**overrides)
        return build_categorizer(
            app_settings, load_provider_registry(app_settings), transport=transport
        )

    return _create


@pytest.fixture
def api_client():
    """Factory: TestClient whose routes use the given Categorizer."""
    def _create(categorizer) -> TestClient:
        app.dependency_overrides[get_categorizer] = lambda: categorizer
        return TestClient(app)

    yield _create
    app.dependency_overrides.clear()
