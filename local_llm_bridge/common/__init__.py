"""
通用工具模块

提供项目中共享的工具和实用功能。

主要功能:
- 日志配置和请求ID追踪
- 文本提取
- Token估算

使用示例:
    from local_llm_bridge.common import configure_logging, extract_text

    configure_logging(config.logging)
"""

# 导入日志相关功能
from .logging import (
    configure_logging,
    generate_request_id,
    get_logger_with_request_id,
)

# 导入文本提取与Token计数功能
from .text import extract_text
from .token_counter import TokenCounter, token_counter

__all__ = [
    # 日志功能
    "configure_logging",
    "generate_request_id",
    "get_logger_with_request_id",
    # 文本提取
    "extract_text",
    # Token计数
    "TokenCounter",
    "token_counter",
]
