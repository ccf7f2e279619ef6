"""
DRF-View JSON 编码器
"""

import base64
import datetime
import decimal
import json
import uuid
from typing import Any

from drf_view.convertible import DictConvertible, flatten_parameters

from .base import BaseEncoder


class ViewJSONEncoder(json.JSONEncoder):
    """
    扩展的 JSON 编码器

    支持更多 Python 类型的序列化：
    - datetime/date/time
    - Decimal
    - UUID
    - bytes
    - set/frozenset
    - DictConvertible 对象
    - 其他对象仅输出公开属性（不以下划线开头的实例属性）
    """

    def default(self, obj: Any) -> Any:
        # 日期时间类型
        if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
            return obj.isoformat()

        if isinstance(obj, decimal.Decimal):
            return float(obj)

        if isinstance(obj, uuid.UUID):
            return str(obj)

        # bytes 类型 - 优先尝试 UTF-8 解码，失败则使用 base64
        if isinstance(obj, bytes):
            try:
                return obj.decode("utf-8")
            except UnicodeDecodeError:
                return base64.b64encode(obj).decode("ascii")

        if isinstance(obj, (set, frozenset)):
            return list(obj)

        if isinstance(obj, DictConvertible):
            return flatten_parameters(obj.to_dict())

        if hasattr(obj, "__dict__"):
            return {
                key: value
                for key, value in vars(obj).items()
                if not key.startswith("_")
            }

        return super().default(obj)


class JSONEncoder(BaseEncoder):
    """
    JSON 编码器

    编码前先展开参数中的 DictConvertible 对象；映射保持插入顺序，序列保持原顺序。
    参数为 None 时输出空对象 {}。
    """

    format = "json"
    media_type = "application/json"
    charset = None

    encoder_class = ViewJSONEncoder
    ensure_ascii = False
    separators = (",", ":")

    def encode(self, data: Any) -> str:
        if data is None:
            data = {}
        return json.dumps(
            flatten_parameters(data),
            cls=self.encoder_class,
            ensure_ascii=self.ensure_ascii,
            separators=self.separators,
        )
