"""适配器配置模型与加载"""

import json
import os
from collections.abc import Mapping
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_PATH = "config/settings.json"


class LoggingConfig(BaseModel):
    """日志配置"""

    model_config = ConfigDict(frozen=True)

    level: str = Field("INFO", description="日志级别")
    file: str | None = Field(None, description="日志文件路径，为空时只输出到控制台")
    rotation: str = Field("10 MB", description="日志文件轮转大小")
    retention: str = Field("1 day", description="日志文件保留时间")

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class Config(BaseModel):
    """适配器配置，构造后不可修改"""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(description="OpenAI兼容服务的基础URL，如 http://localhost:8000/v1")
    model: str = Field(description="目标模型ID，原样转发")
    api_key: str | None = Field(None, description="可选的Bearer token")
    request_timeout: float | None = Field(
        None, gt=0, description="传输层超时时间（秒），为空时不设超时"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")

    @field_validator("endpoint")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("endpoint不能为空")
        return value

    @field_validator("model")
    @classmethod
    def _require_model(cls, value: str) -> str:
        if not value:
            raise ValueError("model不能为空")
        return value

    @classmethod
    def from_file(cls, config_path: str | Path) -> "Config":
        """从JSON文件加载配置

        Raises:
            FileNotFoundError: 配置文件不存在
            json.JSONDecodeError: 配置文件不是合法JSON
            pydantic.ValidationError: 配置内容无效
        """
        path = Path(config_path)
        data = json.loads(path.read_text(encoding="utf-8"))
        logger.debug(f"从配置文件加载配置: {path}")
        return cls.model_validate(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """从环境变量加载配置

        读取 LLM_URL、LLM_MODEL、LLM_API_KEY、LLM_REQUEST_TIMEOUT、
        LLM_LOG_LEVEL、LLM_LOG_FILE。
        """
        env = os.environ if environ is None else environ

        missing = [name for name in ("LLM_URL", "LLM_MODEL") if not env.get(name)]
        if missing:
            raise ValueError(f"缺少必需的环境变量: {', '.join(missing)}")

        logging_data = {}
        if env.get("LLM_LOG_LEVEL"):
            logging_data["level"] = env["LLM_LOG_LEVEL"]
        if env.get("LLM_LOG_FILE"):
            logging_data["file"] = env["LLM_LOG_FILE"]

        return cls(
            endpoint=env["LLM_URL"],
            model=env["LLM_MODEL"],
            api_key=env.get("LLM_API_KEY") or None,
            request_timeout=env.get("LLM_REQUEST_TIMEOUT") or None,
            logging=LoggingConfig(**logging_data),
        )


def get_config_file_path() -> str:
    """获取配置文件路径，可通过 CONFIG_PATH 环境变量指定"""
    return os.getenv("CONFIG_PATH", DEFAULT_CONFIG_PATH)


def load_config(config_path: str | Path | None = None) -> Config:
    """加载配置

    配置优先级：
    1. 参数指定的配置文件
    2. CONFIG_PATH 环境变量指定的配置文件（默认 config/settings.json）
    3. 环境变量 LLM_URL / LLM_MODEL / LLM_API_KEY

    显式指定的配置文件不存在时抛出 FileNotFoundError。
    """
    if config_path is not None:
        return Config.from_file(config_path)

    default_path = Path(get_config_file_path())
    if default_path.exists():
        return Config.from_file(default_path)

    logger.debug(f"配置文件不存在，使用环境变量: {default_path}")
    return Config.from_env()
