"""Loguru日志配置"""

import sys
import uuid
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[request_id]}</cyan> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[request_id]} | {name}:{line} | {message}"


def _ensure_request_id(record) -> bool:
    record["extra"].setdefault("request_id", "---")
    return True


def configure_logging(log_config) -> None:
    """配置Loguru日志系统

    只有在 log_config.file 设置时才写入日志文件，不使用固定路径。

    Args:
        log_config: 日志配置对象
    """
    # 移除默认的handler
    logger.remove()

    # 配置控制台日志
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=log_config.level,
        colorize=True,
        filter=_ensure_request_id,
    )

    if not log_config.file:
        return

    log_path = Path(log_config.file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # 配置文件日志（包含异常堆栈）
    logger.add(
        str(log_path),
        format=FILE_FORMAT,
        level=log_config.level,
        rotation=log_config.rotation,
        retention=log_config.retention,
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
        filter=_ensure_request_id,
    )


async def generate_request_id() -> str:
    """生成唯一的请求ID

    Returns:
        str: 格式为 req_xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx 的请求ID
    """
    return f"req_{uuid.uuid4()}"


def get_logger_with_request_id(request_id: str = None, sink=None):
    """获取绑定了请求ID的日志器实例

    Args:
        request_id: 请求ID，如果为None则使用默认值
        sink: 注入的loguru日志器，为None时使用全局logger

    Returns:
        绑定了请求ID的logger实例
    """
    base = sink if sink is not None else logger
    return base.bind(request_id=request_id or "---")
