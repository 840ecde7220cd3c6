"""适配器异常定义与标准化错误模型"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """错误详细信息"""

    code: str = Field(description="错误代码")
    message: str = Field(description="错误消息")
    type: str | None = Field(None, description="错误类型")
    details: dict[str, Any] | None = Field(None, description="额外错误详情")
    request_id: str | None = Field(None, description="请求ID用于追踪")


class StandardErrorResponse(BaseModel):
    """标准化错误响应模型"""

    type: str = Field("error", description="响应类型")
    error: ErrorDetail = Field(description="错误详情")


class LocalLLMError(Exception):
    """适配器所有异常的基类"""

    code = "local_llm_error"
    error_type = "api_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any] | None:
        return None

    def to_error_response(self, request_id: str | None = None) -> StandardErrorResponse:
        """转换为标准化错误响应，用于结构化日志"""
        return StandardErrorResponse(
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                type=self.error_type,
                details=self.details(),
                request_id=request_id,
            )
        )


class TransportError(LocalLLMError):
    """网络故障或非2xx的HTTP响应

    网络层故障时 status_code 为 None。
    """

    code = "external_service_error"

    def __init__(
        self, message: str, status_code: int | None = None, body: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def details(self) -> dict[str, Any] | None:
        return {"status_code": self.status_code, "body": self.body}


class ProtocolError(LocalLLMError):
    """响应JSON缺少预期结构（无choices、工具参数无法解析等）"""

    code = "protocol_error"


class UnsupportedOperationError(LocalLLMError):
    """OpenAI兼容后端不支持的操作"""

    code = "unsupported_operation"
    error_type = "invalid_request_error"
