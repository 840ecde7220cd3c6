"""
配置管理模块

提供适配器配置的加载和验证功能。

使用示例:
    from local_llm_bridge.config import load_config

    config = load_config()
    print(config.endpoint)
"""

from .settings import (
    Config,
    LoggingConfig,
    get_config_file_path,
    load_config,
)

__all__ = [
    "Config",
    "LoggingConfig",
    "get_config_file_path",
    "load_config",
]
