"""
序列化流水线

给定格式与数据，产出响应内容：

1. 设置了重定向时直接返回重定向结果，不做任何编码；
2. 从 FormatRegistry 获取该格式的编码器；
3. 编码器需要模板时，先设置模板，并把全局参数与局部参数合并（局部参数优先）；
4. 编码参数，返回内容与对应的 Content-Type。
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from drf_view.convertible import merge_parameters
from drf_view.registry import FormatRegistry
from drf_view.state import Redirect
from drf_view.templating import TemplateReference

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """流水线输出：内容或重定向，二者只有其一"""

    content: str | None = None
    content_type: str | None = None
    redirect: Redirect | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect is not None


class SerializationPipeline:
    def __init__(self, registry: FormatRegistry | None = None, templating=None):
        """
        Args:
            registry: 格式注册表，默认根据 DRF_VIEW 配置构建
            templating: 模板引擎，默认使用编码器自带的 DjangoTemplating
        """
        self.registry = registry if registry is not None else FormatRegistry.from_settings()
        self.templating = templating

    def supports(self, format: str) -> bool:
        return format in self.registry

    def render(
        self,
        format: str,
        template: TemplateReference | str | None,
        parameters: Any,
        redirect: Redirect | None = None,
        global_parameters: Mapping | None = None,
    ) -> RenderResult:
        """
        渲染参数

        Raises:
            UnsupportedFormat: 格式未注册
        """
        if redirect is not None:
            logger.debug("[SerializationPipeline] redirect to %s", redirect.location)
            return RenderResult(redirect=redirect)

        encoder = self.registry.get_encoder(format)

        if encoder.is_template_aware:
            encoder.set_templating(self.templating)
            encoder.set_template(template)
            parameters = merge_parameters(global_parameters, parameters)

        content = encoder.encode(parameters)
        return RenderResult(content=content, content_type=encoder.content_type)
