"""Error handling tests for the generator transport and decoding paths."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from local_llm_bridge.core.generator import LocalLLMContentGenerator
from local_llm_bridge.models.errors import ProtocolError, TransportError
from tests.fixtures import MOCK_ENDPOINT, MOCK_MODEL


class TestErrorHandlingIntegration:
    """Failures surface to the caller unchanged and are never retried."""

    @pytest.mark.asyncio
    async def test_http_500_error(self, generator, mock_state):
        mock_state.error_trigger = "server_error"

        with pytest.raises(TransportError) as exc_info:
            await generator.generate_content({"contents": "Hi"})

        assert exc_info.value.status_code == 500
        assert "Internal server error" in exc_info.value.body
        assert len(mock_state.requests) == 1

    @pytest.mark.asyncio
    async def test_rate_limit_is_not_retried(self, generator, mock_state):
        mock_state.error_trigger = "rate_limit"

        with pytest.raises(TransportError) as exc_info:
            await generator.generate_content({"contents": "Hi"})

        assert exc_info.value.status_code == 429
        assert len(mock_state.requests) == 1

    @pytest.mark.asyncio
    async def test_invalid_api_key(self, mock_app, mock_state):
        generator = LocalLLMContentGenerator(
            endpoint=MOCK_ENDPOINT,
            model=MOCK_MODEL,
            api_key="wrong-key",
            transport=httpx.ASGITransport(app=mock_app),
        )

        with pytest.raises(TransportError) as exc_info:
            await generator.generate_content({"contents": "Hi"})

        assert exc_info.value.status_code == 401
        assert "Invalid API key" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        generator = LocalLLMContentGenerator(
            endpoint="http://localhost:9999",
            model=MOCK_MODEL,
            transport=httpx.MockTransport(refuse),
        )

        with pytest.raises(TransportError) as exc_info:
            await generator.generate_content({"contents": "Hi"})

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_stream_propagates_errors(self, generator, mock_state):
        mock_state.error_trigger = "server_error"

        with pytest.raises(TransportError):
            async for _ in generator.generate_content_stream({"contents": "Hi"}):
                pass

    @pytest.mark.asyncio
    async def test_malformed_json_body(self, generator, mock_state):
        mock_state.error_trigger = "invalid_json"

        with pytest.raises(ProtocolError):
            await generator.generate_content({"contents": "Hi"})

    @pytest.mark.asyncio
    async def test_no_choices(self, generator, mock_state):
        mock_state.error_trigger = "no_choices"

        with pytest.raises(ProtocolError, match="No choices"):
            await generator.generate_content({"contents": "Hi"})

    @pytest.mark.asyncio
    async def test_malformed_tool_arguments(self, generator, mock_state):
        mock_state.tool_calls = [
            {"id": "call_1", "function": {"name": "foo", "arguments": "not json"}}
        ]

        with pytest.raises(ProtocolError):
            await generator.generate_content({"contents": "Hi"})

    @pytest.mark.asyncio
    async def test_transport_failure_from_patched_client(self):
        """Timeouts raised by httpx become TransportError."""
        generator = LocalLLMContentGenerator(
            endpoint=MOCK_ENDPOINT, model=MOCK_MODEL
        )

        with patch(
            "httpx.AsyncClient.post",
            new=AsyncMock(side_effect=httpx.ReadTimeout("timed out")),
        ) as mock_post:
            with pytest.raises(TransportError, match="ReadTimeout"):
                await generator.generate_content({"contents": "Hi"})

        mock_post.assert_awaited_once()
        assert mock_post.await_args.args[0] == f"{MOCK_ENDPOINT}/chat/completions"
