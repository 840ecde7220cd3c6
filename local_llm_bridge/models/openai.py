"""OpenAI 兼容接口数据模型定义"""

import uuid
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


def generate_tool_call_id() -> str:
    """生成工具调用ID"""
    return f"call_{uuid.uuid4().hex}"


class OpenAIMessage(BaseModel):
    """OpenAI消息格式"""

    role: str = Field(description="消息角色: system, user, assistant等")
    content: str = Field("", description="消息内容")
    tool_calls: list["OpenAIToolCall"] | None = Field(
        None, description="工具调用信息（当role为assistant时）"
    )

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, value: Any) -> Any:
        return "" if value is None else value


class OpenAIToolCallFunction(BaseModel):
    """工具调用函数"""

    name: str = Field("", description="函数名称")
    arguments: str | None = Field(None, description="JSON格式的函数参数")


class OpenAIToolCall(BaseModel):
    """工具调用"""

    id: str = Field(default_factory=generate_tool_call_id, description="工具调用ID")
    type: Literal["function"] = Field("function", description="调用类型")
    function: OpenAIToolCallFunction = Field(description="函数详情")

    @field_validator("id", mode="before")
    @classmethod
    def _missing_id(cls, value: Any) -> Any:
        return value or generate_tool_call_id()


class OpenAIToolFunction(BaseModel):
    """OpenAI工具函数定义"""

    name: str = Field(description="函数名称")
    description: str | None = Field(None, description="函数描述")
    parameters: dict[str, Any] | None = Field(
        None, description="JSON Schema格式的函数参数"
    )


class OpenAITool(BaseModel):
    """OpenAI工具定义"""

    type: Literal["function"] = Field("function", description="工具类型")
    function: OpenAIToolFunction = Field(description="函数定义")


class OpenAIRequest(BaseModel):
    """OpenAI API请求模型"""

    model: str = Field(description="目标模型ID，原样转发")
    messages: list[OpenAIMessage] = Field(description="对话消息列表")
    max_tokens: int = Field(4096, description="最大输出token数量")
    temperature: float = Field(0.7, description="采样温度")
    top_p: float = Field(1.0, description="top-p采样参数")
    stream: Literal[False] = Field(False, description="始终使用非流式响应")
    tools: list[OpenAITool] | None = Field(None, description="可用工具定义")


class OpenAIChoice(BaseModel):
    """OpenAI响应选项"""

    index: int = Field(0, description="选项索引")
    message: OpenAIMessage = Field(
        default_factory=lambda: OpenAIMessage(role="assistant"),
        description="完整消息响应",
    )
    finish_reason: str = Field(
        "stop",
        description="完成原因: stop, length, content_filter, tool_calls, function_call",
    )

    @field_validator("finish_reason", mode="before")
    @classmethod
    def _null_finish_reason(cls, value: Any) -> Any:
        return value or "stop"

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        if value is None:
            return {"role": "assistant"}
        if isinstance(value, dict) and not value.get("role"):
            return {**value, "role": "assistant"}
        return value


class OpenAIUsage(BaseModel):
    """OpenAI使用统计"""

    prompt_tokens: int = Field(0, description="提示token数量")
    completion_tokens: int = Field(0, description="完成token数量")
    total_tokens: int = Field(0, description="总token数量")

    @field_validator("prompt_tokens", "completion_tokens", "total_tokens", mode="before")
    @classmethod
    def _null_count(cls, value: Any) -> Any:
        return 0 if value is None else value


class OpenAIResponse(BaseModel):
    """OpenAI API响应模型

    本地模型服务返回的字段往往不完整，除choices外均为可选。
    """

    id: str | None = Field(None, description="响应唯一ID")
    object: str | None = Field(None, description="对象类型")
    created: int | None = Field(None, description="创建时间戳")
    model: str | None = Field(None, description="使用的模型ID")
    choices: list[OpenAIChoice] = Field(
        default_factory=list, description="响应选项列表"
    )
    usage: OpenAIUsage = Field(default_factory=OpenAIUsage, description="使用统计")

    @field_validator("choices", mode="before")
    @classmethod
    def _null_choices(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("usage", mode="before")
    @classmethod
    def _null_usage(cls, value: Any) -> Any:
        return {} if value is None else value


OpenAIMessage.model_rebuild()
