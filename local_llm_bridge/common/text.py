"""文本提取工具"""

from collections.abc import Mapping
from typing import Any


def _get_field(obj: Any, field_name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(field_name)
    return getattr(obj, field_name, None)


def extract_text(value: Any) -> str:
    """递归提取文本内容

    规则依次为：字符串原样返回；序列拼接各元素非空的提取结果（无分隔符）；
    对象有非空的 text 字段时返回 text；对象有 parts 字段时递归；其余返回空串。
    同时有 text 与 parts 的对象只会返回 text。

    Args:
        value: 字符串、Part、Content、字典或它们组成的序列

    Returns:
        str: 提取出的文本
    """
    if isinstance(value, str):
        return value

    if isinstance(value, (list, tuple)):
        return "".join(text for text in (extract_text(item) for item in value) if text)

    if value is None:
        return ""

    text = _get_field(value, "text")
    if text:
        return text

    parts = _get_field(value, "parts")
    if parts:
        return extract_text(parts)

    return ""
