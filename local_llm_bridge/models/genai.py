"""通用内容生成（GenerateContent）接口数据模型定义

字段同时支持 camelCase（接口原始命名）与 snake_case 两种写法。
"""

from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator
from pydantic.alias_generators import to_camel


class GenAIModel(BaseModel):
    """通用模型基类，启用camelCase别名"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenAIRoles:
    """通用接口角色常量"""

    USER = "user"
    MODEL = "model"


class FinishReason:
    """完成原因常量（未知值原样透传）"""

    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    OTHER = "OTHER"


class FunctionCall(GenAIModel):
    """函数调用"""

    id: str | None = Field(None, description="函数调用ID")
    name: str = Field(description="函数名称")
    args: dict[str, Any] = Field(default_factory=dict, description="函数参数")

    @field_validator("args", mode="before")
    @classmethod
    def _null_args(cls, value: Any) -> Any:
        return {} if value is None else value


class FunctionResponse(GenAIModel):
    """函数执行结果"""

    id: str | None = Field(None, description="对应的函数调用ID")
    name: str = Field(description="函数名称")
    response: dict[str, Any] = Field(default_factory=dict, description="执行结果")

    @field_validator("response", mode="before")
    @classmethod
    def _null_response(cls, value: Any) -> Any:
        return {} if value is None else value


class Part(GenAIModel):
    """内容片段：文本、函数调用或函数结果"""

    text: str | None = Field(None, description="文本内容")
    function_call: FunctionCall | None = Field(None, description="函数调用")
    function_response: FunctionResponse | None = Field(
        None, description="函数执行结果"
    )


class Content(GenAIModel):
    """一轮对话"""

    role: str | None = Field(None, description="角色: user 或 model")
    parts: list[Part] = Field(default_factory=list, description="内容片段列表")

    @field_validator("parts", mode="before")
    @classmethod
    def _null_parts(cls, value: Any) -> Any:
        return [] if value is None else value


class FunctionDeclaration(GenAIModel):
    """函数声明"""

    name: str = Field(description="函数名称")
    description: str | None = Field(None, description="函数描述")
    parameters: dict[str, Any] | None = Field(
        None, description="JSON Schema格式的参数定义"
    )


class Tool(GenAIModel):
    """工具定义"""

    function_declarations: list[FunctionDeclaration] = Field(
        default_factory=list, description="函数声明列表"
    )

    @field_validator("function_declarations", mode="before")
    @classmethod
    def _null_declarations(cls, value: Any) -> Any:
        return [] if value is None else value


ContentUnion = str | Content
ContentListUnion = ContentUnion | list[ContentUnion]


def _system_instruction_kind(value: Any) -> str:
    # 有role或parts的视为Content，否则视为Part
    if isinstance(value, str):
        return "str"
    if isinstance(value, Content):
        return "content"
    if isinstance(value, dict) and ("parts" in value or "role" in value):
        return "content"
    return "part"


SystemInstructionItem = Annotated[
    Union[
        Annotated[str, Tag("str")],
        Annotated[Content, Tag("content")],
        Annotated[Part, Tag("part")],
    ],
    Discriminator(_system_instruction_kind),
]
SystemInstructionUnion = Union[SystemInstructionItem, list[SystemInstructionItem]]


class GenerateContentConfig(GenAIModel):
    """生成配置"""

    max_output_tokens: int | None = Field(None, description="最大输出token数量")
    temperature: float | None = Field(None, description="采样温度")
    top_p: float | None = Field(None, description="top-p采样参数")
    tools: list[Tool] | None = Field(None, description="可用工具定义")
    system_instruction: SystemInstructionUnion | None = Field(
        None, description="系统指令"
    )


class GenerateContentParameters(GenAIModel):
    """内容生成请求"""

    model: str | None = Field(None, description="调用方指定的模型（不转发）")
    contents: ContentListUnion | None = Field(None, description="对话内容")
    system_instruction: SystemInstructionUnion | None = Field(
        None, description="系统指令，优先于config中的同名字段"
    )
    config: GenerateContentConfig | None = Field(None, description="生成配置")

    def resolved_system_instruction(self) -> Any:
        """请求级system指令优先，其次取config中的"""
        if self.system_instruction is not None:
            return self.system_instruction
        if self.config is not None:
            return self.config.system_instruction
        return None


class Candidate(GenAIModel):
    """候选结果"""

    content: Content = Field(description="候选内容")
    finish_reason: str = Field(FinishReason.STOP, description="完成原因")
    index: int = Field(0, description="候选索引")


class UsageMetadata(GenAIModel):
    """使用统计"""

    prompt_token_count: int = Field(0, description="提示token数量")
    candidates_token_count: int = Field(0, description="生成token数量")
    total_token_count: int = Field(0, description="总token数量")


class GenerateContentResponse(GenAIModel):
    """内容生成响应"""

    candidates: list[Candidate] = Field(description="候选结果列表")
    usage_metadata: UsageMetadata = Field(
        default_factory=UsageMetadata, description="使用统计"
    )
    text: str = Field("", description="首个候选的文本")
    function_calls: list[FunctionCall] = Field(
        default_factory=list, description="函数调用列表，没有时为空"
    )


class CountTokensParameters(GenAIModel):
    """Token计数请求"""

    model: str | None = Field(None, description="模型")
    contents: ContentListUnion | None = Field(None, description="待计数内容")


class CountTokensResponse(GenAIModel):
    """Token计数响应"""

    total_tokens: int = Field(description="估算的token总数")


class EmbedContentParameters(GenAIModel):
    """向量化请求"""

    model: str | None = Field(None, description="模型")
    contents: ContentListUnion | None = Field(None, description="待向量化内容")


class ContentEmbedding(GenAIModel):
    """单条向量"""

    values: list[float] = Field(default_factory=list, description="向量值")


class EmbedContentResponse(GenAIModel):
    """向量化响应"""

    embeddings: list[ContentEmbedding] = Field(
        default_factory=list, description="向量列表"
    )
