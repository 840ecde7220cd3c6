"""
GenAI-to-OpenAI请求转换器

该模块提供将通用内容生成请求转换为OpenAI兼容格式的功能。
"""

from typing import Any

from loguru import logger

from local_llm_bridge.common.text import extract_text
from local_llm_bridge.models.genai import (
    Content,
    GenerateContentParameters,
    Tool,
)
from local_llm_bridge.models.openai import (
    OpenAIMessage,
    OpenAIRequest,
    OpenAITool,
    OpenAIToolFunction,
)

from .roles import to_openai_role

DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_P = 1.0


def _coalesce(value: Any, default: Any) -> Any:
    return default if value is None else value


class GenAIToOpenAIConverter:
    """将通用请求转换为OpenAI格式"""

    @staticmethod
    def convert_request(
        request: GenerateContentParameters,
        model: str,
        bound_logger=None,
    ) -> OpenAIRequest:
        """
        将通用请求转换为OpenAI格式请求

        缺失的字段使用默认值，不会抛出异常。

        Args:
            request: 通用格式的请求
            model: 目标模型ID，原样转发
            bound_logger: 绑定了请求ID的logger

        Returns:
            转换后的OpenAI格式请求
        """
        bound_logger = bound_logger or logger
        config = request.config

        messages = GenAIToOpenAIConverter._convert_messages(request, bound_logger)
        tools = GenAIToOpenAIConverter._convert_tools(config.tools if config else None)

        openai_request = OpenAIRequest(
            model=model,
            messages=messages,
            max_tokens=_coalesce(
                config.max_output_tokens if config else None, DEFAULT_MAX_TOKENS
            ),
            temperature=_coalesce(
                config.temperature if config else None, DEFAULT_TEMPERATURE
            ),
            top_p=_coalesce(config.top_p if config else None, DEFAULT_TOP_P),
            stream=False,
            tools=tools,
        )

        bound_logger.debug(
            f"请求转换完成 - Model: {model}, Messages: {len(messages)}, "
            f"Tools: {len(tools) if tools else 0}"
        )
        return openai_request

    @staticmethod
    def _normalize_contents(contents: Any) -> list[Any]:
        if contents is None:
            return []
        if isinstance(contents, (list, tuple)):
            return list(contents)
        return [contents]

    @staticmethod
    def _convert_messages(
        request: GenerateContentParameters, bound_logger
    ) -> list[OpenAIMessage]:
        """
        将system指令和对话内容转换为OpenAI消息列表

        Args:
            request: 通用请求
            bound_logger: 绑定了请求ID的logger

        Returns:
            OpenAI格式的消息列表
        """
        messages = []

        # 处理system指令
        system_instruction = request.resolved_system_instruction()
        if system_instruction is not None:
            system_text = extract_text(system_instruction)
            # 提取不到文本时不发送空的system消息
            if system_text:
                messages.append(OpenAIMessage(role="system", content=system_text))

        # 转换对话内容
        for content in GenAIToOpenAIConverter._normalize_contents(request.contents):
            message = GenAIToOpenAIConverter._convert_single_content(content)
            if message is None:
                bound_logger.debug(f"丢弃没有文本内容的对话: {content!r}")
                continue
            messages.append(message)

        return messages

    @staticmethod
    def _convert_single_content(content: str | Content) -> OpenAIMessage | None:
        """
        转换单轮对话

        纯字符串视为user消息；没有角色或只含非文本片段的对话返回None。
        """
        if isinstance(content, str):
            return OpenAIMessage(role="user", content=content)

        if not content.role:
            return None

        text = extract_text(content.parts)
        if not text:
            return None

        return OpenAIMessage(role=to_openai_role(content.role), content=text)

    @staticmethod
    def _convert_parameters(schema: dict[str, Any] | None) -> dict[str, Any]:
        # 只复制 properties 和 required
        schema = schema or {}
        return {
            "type": "object",
            "properties": schema.get("properties") or {},
            "required": schema.get("required") or [],
        }

    @staticmethod
    def _convert_tools(tools: list[Tool] | None) -> list[OpenAITool] | None:
        """
        将通用工具定义转换为OpenAI工具格式

        Args:
            tools: 通用工具定义列表

        Returns:
            OpenAI格式的工具列表或None
        """
        if not tools:
            return None

        openai_tools = []
        for tool in tools:
            for declaration in tool.function_declarations:
                openai_tools.append(
                    OpenAITool(
                        type="function",
                        function=OpenAIToolFunction(
                            name=declaration.name,
                            description=declaration.description
                            or f"Execute {declaration.name}",
                            parameters=GenAIToOpenAIConverter._convert_parameters(
                                declaration.parameters
                            ),
                        ),
                    )
                )

        return openai_tools if openai_tools else None
