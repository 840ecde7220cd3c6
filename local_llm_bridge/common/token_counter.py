import json
import math
from typing import Any

from pydantic import BaseModel

CHARS_PER_TOKEN = 4


class TokenCounter:
    """近似Token计数器

    按每4个字符约1个token估算，与模型实际分词器无关，结果不可视为精确值。
    """

    def __init__(self, chars_per_token: int = CHARS_PER_TOKEN):
        self.chars_per_token = chars_per_token

    def serialize_contents(self, contents: Any) -> str:
        """将contents序列化为文本

        字符串原样使用，结构化内容序列化为紧凑JSON（使用camelCase别名，忽略空字段）。
        """
        if contents is None:
            return ""
        if isinstance(contents, str):
            return contents
        return json.dumps(
            self._to_jsonable(contents), ensure_ascii=False, separators=(",", ":")
        )

    def _to_jsonable(self, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(by_alias=True, exclude_none=True)
        if isinstance(value, (list, tuple)):
            return [self._to_jsonable(item) for item in value]
        return value

    def estimate_tokens(self, text: str) -> int:
        return math.ceil(len(text) / self.chars_per_token)

    def count_tokens(self, contents: Any) -> int:
        """估算contents的token数量

        Args:
            contents: 字符串、Content或它们组成的序列

        Returns:
            int: ceil(字符数 / 4)
        """
        return self.estimate_tokens(self.serialize_contents(contents))


# 全局实例
token_counter = TokenCounter()
