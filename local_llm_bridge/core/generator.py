"""基于OpenAI兼容接口的内容生成器"""

from collections.abc import AsyncIterator

import httpx

from local_llm_bridge.common.logging import (
    generate_request_id,
    get_logger_with_request_id,
)
from local_llm_bridge.common.token_counter import TokenCounter, token_counter
from local_llm_bridge.config.settings import Config
from local_llm_bridge.models.errors import LocalLLMError, UnsupportedOperationError
from local_llm_bridge.models.genai import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)

from .clients import OpenAIServiceClient
from .converters import GenAIToOpenAIConverter, OpenAIToGenAIConverter


class LocalLLMContentGenerator:
    """通过OpenAI兼容的chat completions接口实现内容生成

    实例只保存不可变配置，多个协程可并发调用同一实例。
    """

    def __init__(
        self,
        endpoint: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
        *,
        config: Config | None = None,
        logger=None,
        transport: httpx.AsyncBaseTransport | None = None,
        counter: TokenCounter | None = None,
    ):
        """
        Args:
            endpoint: 服务基础URL
            model: 目标模型ID
            api_key: 可选的Bearer token
            config: 完整配置，提供时忽略 endpoint/model/api_key
            logger: 注入的loguru日志器，为None时使用全局logger
            transport: 自定义httpx传输层
            counter: Token计数器
        """
        if config is None:
            config = Config(endpoint=endpoint, model=model, api_key=api_key)
        self.config = config
        self._logger = logger
        self._token_counter = counter or token_counter
        self._client = OpenAIServiceClient(
            config.endpoint,
            api_key=config.api_key,
            timeout=config.request_timeout,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def model(self) -> str:
        return self.config.model

    async def generate_content(
        self, request: GenerateContentParameters | dict
    ) -> GenerateContentResponse:
        """
        生成内容（非流式）

        Raises:
            TransportError: 网络故障或非2xx状态码
            ProtocolError: 响应结构无效
        """
        request = GenerateContentParameters.model_validate(request)
        request_id = await generate_request_id()
        bound_logger = get_logger_with_request_id(request_id, self._logger)

        openai_request = GenAIToOpenAIConverter.convert_request(
            request, self.model, bound_logger
        )
        bound_logger.debug(
            f"OpenAI 请求体: {openai_request.model_dump_json(exclude_none=True)}"
        )

        try:
            data = await self._client.send_request(openai_request, bound_logger)
            response = OpenAIToGenAIConverter.convert_response(data, bound_logger)
        except LocalLLMError as e:
            bound_logger.error(
                f"本地模型请求失败: "
                f"{e.to_error_response(request_id).model_dump_json(exclude_none=True)}"
            )
            raise

        candidate = response.candidates[0]
        bound_logger.info(
            f"请求完成 - FinishReason: {candidate.finish_reason}, "
            f"FunctionCalls: {len(response.function_calls)}, "
            f"Tokens: {response.usage_metadata.total_token_count}"
        )
        return response

    async def generate_content_stream(
        self, request: GenerateContentParameters | dict
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        模拟流式生成

        内部使用非流式请求，只产生一个完整响应后结束，不支持增量输出。
        """
        yield await self.generate_content(request)

    async def count_tokens(
        self, request: CountTokensParameters | dict
    ) -> CountTokensResponse:
        """估算token数量：ceil(序列化后字符数 / 4)，不请求服务"""
        request = CountTokensParameters.model_validate(request)
        return CountTokensResponse(
            total_tokens=self._token_counter.count_tokens(request.contents)
        )

    async def embed_content(
        self, request: EmbedContentParameters | dict
    ) -> EmbedContentResponse:
        """OpenAI兼容的chat completions后端不支持向量化"""
        raise UnsupportedOperationError("Embeddings not supported by local LLM")


def create_local_llm_content_generator(
    config: Config | dict, **kwargs
) -> LocalLLMContentGenerator:
    """根据配置创建内容生成器

    Args:
        config: Config实例或包含 endpoint/model/api_key 的字典
        **kwargs: 透传给 LocalLLMContentGenerator 的参数（logger、transport等）
    """
    return LocalLLMContentGenerator(config=Config.model_validate(config), **kwargs)
