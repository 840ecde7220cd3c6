import httpx
import pytest

from local_llm_bridge.core.generator import LocalLLMContentGenerator
from tests.fixtures import (
    MOCK_API_KEY,
    MOCK_ENDPOINT,
    MOCK_MODEL,
    create_mock_openai_app,
)


@pytest.fixture
def mock_app():
    """A fresh mock OpenAI-compatible server per test."""
    return create_mock_openai_app()


@pytest.fixture
def mock_state(mock_app):
    return mock_app.state.mock


@pytest.fixture
def generator(mock_app):
    """Generator wired to the mock server through an in-process ASGI transport."""
    return LocalLLMContentGenerator(
        endpoint=MOCK_ENDPOINT,
        model=MOCK_MODEL,
        api_key=MOCK_API_KEY,
        transport=httpx.ASGITransport(app=mock_app),
    )
