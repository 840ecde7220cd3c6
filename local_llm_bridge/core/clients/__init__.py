"""
客户端模块

提供OpenAI兼容服务的HTTP客户端。
"""

from .openai_client import OpenAIServiceClient

__all__ = ["OpenAIServiceClient"]
