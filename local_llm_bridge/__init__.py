"""
Local LLM Bridge

将通用内容生成（GenerateContent）接口适配到 OpenAI 兼容的 chat completions 接口。
调用方无需修改调用代码即可使用任意 OpenAI 兼容的本地或远程模型服务。

主要功能:
- 通用请求到 OpenAI 请求格式的转换（消息、工具声明、采样参数）
- OpenAI 响应到通用响应格式的转换（文本、完成原因、使用统计、函数调用）
- 单元素的模拟流式输出
- 近似 token 计数

使用示例:
    from local_llm_bridge import LocalLLMContentGenerator

    generator = LocalLLMContentGenerator(
        endpoint="http://localhost:8000/v1", model="qwen2.5"
    )
    response = await generator.generate_content({"contents": "Hello"})
"""

__version__ = "1.0.0"
__description__ = "GenerateContent to OpenAI-compatible chat completions adapter"

# 导出主要的公共API
from .common import configure_logging
from .config import Config, LoggingConfig, load_config
from .core import LocalLLMContentGenerator, create_local_llm_content_generator
from .models import (
    LocalLLMError,
    ProtocolError,
    TransportError,
    UnsupportedOperationError,
)

__all__ = [
    "LocalLLMContentGenerator",
    "create_local_llm_content_generator",
    "Config",
    "LoggingConfig",
    "load_config",
    "configure_logging",
    "LocalLLMError",
    "TransportError",
    "ProtocolError",
    "UnsupportedOperationError",
    "__version__",
    "__description__",
]
