"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

"""
格式注册表

维护 格式 -> 编码器 的映射。编码器可以是导入路径、编码器类或编码器实例，
导入路径与类在该格式首次被使用时才实例化，之后缓存复用。

注册表在配置阶段构建，请求处理期间只读；实例化过程加锁，
并发请求同时首次使用某格式时只会创建并缓存一个编码器实例。
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any

from django.utils.module_loading import import_string

from drf_view.encoders import BaseEncoder
from drf_view.exceptions import InvalidInput, UnsupportedFormat
from drf_view.settings import DEFAULTS, view_settings

logger = logging.getLogger(__name__)


class FormatRegistry:
    """
    格式注册表

    Example:
        registry = FormatRegistry({"json": "drf_view.encoders.JSONEncoder"})
        registry.register("csv", CSVEncoder)
        encoder = registry.get_encoder("csv")
    """

    def __init__(self, formats: Mapping | None = None):
        self._formats: dict[str, Any] = {}
        self._encoders: dict[str, BaseEncoder] = {}
        self._lock = threading.Lock()
        if formats:
            self.set_formats(formats)

    @classmethod
    def from_settings(cls) -> "FormatRegistry":
        """以默认格式为基础，合并 DRF_VIEW['FORMATS'] 中的配置"""
        registry = cls(DEFAULTS["FORMATS"])
        registry.set_formats(view_settings.FORMATS)
        return registry

    def register(self, format: str, encoder: Any):
        """注册编码器，覆盖同名格式已有的编码器及其缓存实例"""
        with self._lock:
            self._formats[format] = encoder
            self._encoders.pop(format, None)

    def set_formats(self, formats: Mapping):
        for format, encoder in formats.items():
            self.register(format, encoder)

    def formats(self) -> dict[str, Any]:
        return dict(self._formats)

    def __contains__(self, format: str) -> bool:
        return format in self._formats

    def __len__(self) -> int:
        return len(self._formats)

    def get_encoder(self, format: str) -> BaseEncoder:
        """
        获取格式对应的编码器实例

        Raises:
            UnsupportedFormat: 格式未注册
            InvalidInput: 编码器导入路径无效
        """
        encoder = self._encoders.get(format)
        if encoder is not None:
            return encoder

        with self._lock:
            encoder = self._encoders.get(format)
            if encoder is None:
                if format not in self._formats:
                    raise UnsupportedFormat(format=format)
                encoder = self._materialize(format, self._formats[format])
                self._encoders[format] = encoder
                logger.debug(
                    "[FormatRegistry] encoder %s created for format %s",
                    type(encoder).__name__,
                    format,
                )
        return encoder

    @staticmethod
    def _materialize(format: str, encoder: Any) -> BaseEncoder:
        if isinstance(encoder, str):
            try:
                encoder = import_string(encoder)
            except ImportError as error:
                raise InvalidInput(
                    message=f"Could not import encoder '{encoder}' for format '{format}': {error}",
                    field="FORMATS",
                    cause=error,
                ) from error
        if isinstance(encoder, type):
            return encoder()
        return encoder
