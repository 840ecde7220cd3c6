"""OpenAI兼容服务HTTP客户端"""

from typing import Any

import httpx
from loguru import logger

from local_llm_bridge.models.errors import ProtocolError, TransportError
from local_llm_bridge.models.openai import OpenAIRequest


class OpenAIServiceClient:
    """OpenAI兼容的chat completions客户端

    每次请求创建独立的 httpx.AsyncClient，实例本身只保存不可变配置。
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            endpoint: 服务基础URL
            api_key: 可选的Bearer token
            timeout: 传输层超时（秒），None表示不设超时
            transport: 自定义httpx传输层（测试时注入）
        """
        self.endpoint = endpoint.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @property
    def completions_url(self) -> str:
        return f"{self.endpoint}/chat/completions"

    def _build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def send_request(
        self, request: OpenAIRequest, bound_logger=None
    ) -> dict[str, Any]:
        """
        发送非流式chat completion请求

        Args:
            request: OpenAI格式请求
            bound_logger: 绑定了请求ID的logger

        Returns:
            dict: 响应JSON

        Raises:
            TransportError: 网络故障或非2xx状态码
            ProtocolError: 响应体不是合法JSON
        """
        bound_logger = bound_logger or logger
        payload = request.model_dump(exclude_none=True)

        bound_logger.debug(f"发送请求到本地模型服务: {self.completions_url}")

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout
            ) as client:
                response = await client.post(
                    self.completions_url,
                    json=payload,
                    headers=self._build_headers(),
                )
        except httpx.HTTPError as e:
            raise TransportError(
                f"请求本地模型服务失败: {type(e).__name__}: {e}"
            ) from e

        if not response.is_success:
            raise TransportError(
                f"HTTP error! status: {response.status_code}, message: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProtocolError(f"响应体不是合法JSON: {response.text[:100]}") from e
