"""
OpenAI-to-GenAI 响应转换器

实现将OpenAI格式的响应转换为通用内容生成响应的功能
"""

import json
from typing import Any

from loguru import logger
from pydantic import ValidationError

from local_llm_bridge.models.errors import ProtocolError
from local_llm_bridge.models.genai import (
    Candidate,
    Content,
    FinishReason,
    FunctionCall,
    GenerateContentResponse,
    Part,
    UsageMetadata,
)
from local_llm_bridge.models.openai import (
    OpenAIChoice,
    OpenAIResponse,
    OpenAIToolCall,
    OpenAIUsage,
)

from .roles import to_genai_role


class OpenAIToGenAIConverter:
    """OpenAI响应到通用格式的转换器"""

    @staticmethod
    def convert_response(
        openai_response: dict[str, Any] | OpenAIResponse,
        bound_logger=None,
    ) -> GenerateContentResponse:
        """
        将OpenAI非流式响应转换为通用格式

        Args:
            openai_response: OpenAI响应字典或已解析的模型
            bound_logger: 绑定了请求ID的logger

        Returns:
            GenerateContentResponse: 转换后的通用格式响应

        Raises:
            ProtocolError: 响应结构无效、没有choices或工具参数无法解析
        """
        bound_logger = bound_logger or logger

        if not isinstance(openai_response, OpenAIResponse):
            try:
                openai_response = OpenAIResponse.model_validate(openai_response)
            except ValidationError as e:
                raise ProtocolError(f"OpenAI响应结构无效: {e}") from e

        if not openai_response.choices:
            raise ProtocolError("No choices in OpenAI response")

        # 只使用第一个choice
        choice = openai_response.choices[0]
        usage = OpenAIToGenAIConverter._convert_usage(openai_response.usage)

        if choice.message.tool_calls:
            return OpenAIToGenAIConverter._convert_tool_call_choice(
                choice, usage, bound_logger
            )

        text = choice.message.content
        return GenerateContentResponse(
            candidates=[
                Candidate(
                    content=Content(
                        role=to_genai_role(choice.message.role),
                        parts=[Part(text=text)],
                    ),
                    finish_reason=choice.finish_reason.upper(),
                    index=0,
                )
            ],
            usage_metadata=usage,
            text=text,
            function_calls=[],
        )

    @staticmethod
    def _convert_tool_call_choice(
        choice: OpenAIChoice, usage: UsageMetadata, bound_logger
    ) -> GenerateContentResponse:
        """
        转换包含工具调用的choice

        只保留第一个工具调用，完成原因固定为STOP，表示交由调用方执行工具。
        """
        tool_calls = choice.message.tool_calls
        if len(tool_calls) > 1:
            bound_logger.warning(
                f"响应包含{len(tool_calls)}个工具调用，只保留第一个: "
                f"{[call.function.name for call in tool_calls[1:]]} 被丢弃"
            )

        function_call = OpenAIToGenAIConverter._convert_tool_call(tool_calls[0])
        text = choice.message.content

        parts = []
        if text:
            parts.append(Part(text=text))
        parts.append(Part(function_call=function_call))

        return GenerateContentResponse(
            candidates=[
                Candidate(
                    content=Content(
                        role=to_genai_role(choice.message.role), parts=parts
                    ),
                    finish_reason=FinishReason.STOP,
                    index=0,
                )
            ],
            usage_metadata=usage,
            text=text,
            function_calls=[function_call],
        )

    @staticmethod
    def _convert_tool_call(tool_call: OpenAIToolCall) -> FunctionCall:
        arguments = tool_call.function.arguments or "{}"
        try:
            args = json.loads(arguments)
        except json.JSONDecodeError as e:
            raise ProtocolError(
                f"工具调用参数不是合法JSON - Tool: {tool_call.function.name}, "
                f"Arguments: {arguments[:100]}"
            ) from e

        if not isinstance(args, dict):
            raise ProtocolError(
                f"工具调用参数必须是JSON对象 - Tool: {tool_call.function.name}, "
                f"Arguments: {arguments[:100]}"
            )

        return FunctionCall(id=tool_call.id, name=tool_call.function.name, args=args)

    @staticmethod
    def _convert_usage(usage: OpenAIUsage) -> UsageMetadata:
        """
        将OpenAI使用统计转换为通用格式

        Args:
            usage: OpenAI使用统计，缺失字段已在解析时补0

        Returns:
            UsageMetadata: 通用格式的使用统计
        """
        return UsageMetadata(
            prompt_token_count=usage.prompt_tokens,
            candidates_token_count=usage.completion_tokens,
            total_token_count=usage.total_tokens,
        )
