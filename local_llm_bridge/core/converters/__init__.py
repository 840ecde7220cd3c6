"""
转换器模块

提供通用内容生成接口和OpenAI兼容接口之间的数据转换功能。
"""

from .request_converter import GenAIToOpenAIConverter
from .response_converter import OpenAIToGenAIConverter
from .roles import to_genai_role, to_openai_role

__all__ = [
    "GenAIToOpenAIConverter",
    "OpenAIToGenAIConverter",
    "to_genai_role",
    "to_openai_role",
]
