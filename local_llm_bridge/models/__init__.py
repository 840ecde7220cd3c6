"""
数据模型模块

- genai: 通用内容生成接口的请求/响应模型
- openai: OpenAI 兼容接口的线上格式
- errors: 异常定义与标准化错误模型
"""

from .errors import (
    ErrorDetail,
    LocalLLMError,
    ProtocolError,
    StandardErrorResponse,
    TransportError,
    UnsupportedOperationError,
)
from .genai import (
    Candidate,
    Content,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    FinishReason,
    FunctionCall,
    FunctionDeclaration,
    FunctionResponse,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    Tool,
    UsageMetadata,
)

__all__ = [
    # 异常
    "LocalLLMError",
    "TransportError",
    "ProtocolError",
    "UnsupportedOperationError",
    "ErrorDetail",
    "StandardErrorResponse",
    # 通用接口模型
    "Candidate",
    "Content",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "EmbedContentResponse",
    "FinishReason",
    "FunctionCall",
    "FunctionDeclaration",
    "FunctionResponse",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "Part",
    "Tool",
    "UsageMetadata",
]
