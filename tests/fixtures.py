"""Mock OpenAI-compatible server for end-to-end testing."""

import time
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, Header, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

MOCK_ENDPOINT = "http://mock-llm/v1"
MOCK_API_KEY = "mock-key"
MOCK_MODEL = "mock-model"


class MockMessage(BaseModel):
    role: str = "assistant"
    content: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None


class MockChoice(BaseModel):
    index: int = 0
    message: MockMessage
    finish_reason: Optional[str] = "stop"


class MockUsage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class MockCompletionResponse(BaseModel):
    id: str = Field(default="mock-completion-id")
    object: str = "chat.completion"
    created: int = Field(default_factory=lambda: int(time.time()))
    model: str
    choices: List[MockChoice]
    usage: MockUsage


class MockServerState:
    """Configurable behavior and captured traffic of one mock server."""

    def __init__(self):
        self.error_trigger: str = ""
        self.tool_calls: Optional[List[Dict[str, Any]]] = None
        self.finish_reason: Optional[str] = "stop"
        self.require_api_key: bool = True
        self.requests: List[Dict[str, Any]] = []
        self.headers: List[Dict[str, str]] = []

    @property
    def last_request(self) -> Dict[str, Any]:
        return self.requests[-1]

    @property
    def last_headers(self) -> Dict[str, str]:
        return self.headers[-1]


def mock_non_stream_response(
    model: str, content: str, state: MockServerState
) -> MockCompletionResponse:
    """Generate a non-streaming chat completion response."""
    prompt_tokens = len(content.split())
    completion_tokens = 10  # Fixed for testing

    if state.tool_calls:
        message = MockMessage(content=None, tool_calls=state.tool_calls)
    else:
        message = MockMessage(content=f"Mock response for: {content}")

    return MockCompletionResponse(
        model=model,
        choices=[MockChoice(message=message, finish_reason=state.finish_reason)],
        usage=MockUsage(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
    )


def create_mock_openai_app() -> FastAPI:
    """Create a fresh mock server; its state lives on ``app.state.mock``."""
    app = FastAPI()
    state = MockServerState()
    app.state.mock = state

    @app.post("/v1/chat/completions")
    async def mock_chat_completions(
        payload: Dict[str, Any] = Body(...),
        authorization: Optional[str] = Header(None),
        content_type: Optional[str] = Header(None),
    ):
        """Mock the OpenAI chat completions endpoint."""
        state.requests.append(payload)
        state.headers.append(
            {"authorization": authorization, "content-type": content_type}
        )

        if state.require_api_key and authorization != f"Bearer {MOCK_API_KEY}":
            raise HTTPException(status_code=401, detail="Invalid API key")

        if state.error_trigger == "rate_limit":
            raise HTTPException(status_code=429, detail="Rate limit exceeded")

        if state.error_trigger == "server_error":
            raise HTTPException(status_code=500, detail="Internal server error")

        if state.error_trigger == "invalid_json":
            return PlainTextResponse("not json at all")

        if state.error_trigger == "no_choices":
            return {"id": "mock-completion-id", "choices": []}

        messages = payload.get("messages") or []
        last_content = messages[-1].get("content", "") if messages else ""
        return mock_non_stream_response(payload.get("model", ""), last_content, state)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
