"""
核心功能模块

提供适配器的核心功能，包括：
- 内容生成器（对外的四个操作）
- OpenAI 兼容服务客户端
- 请求/响应格式转换器

子模块:
- clients: OpenAI 兼容服务 HTTP 客户端
- converters: 通用接口 ↔ OpenAI 格式转换器
"""

# 导入核心客户端
from .clients import OpenAIServiceClient

# 导入转换器
from .converters import (
    GenAIToOpenAIConverter,
    OpenAIToGenAIConverter,
)
from .generator import LocalLLMContentGenerator, create_local_llm_content_generator

__all__ = [
    # 生成器
    "LocalLLMContentGenerator",
    "create_local_llm_content_generator",
    # 客户端
    "OpenAIServiceClient",
    # 转换器
    "GenAIToOpenAIConverter",
    "OpenAIToGenAIConverter",
]
