"""
DRF 渲染器

让 DRF 视图通过 renderer_classes 复用 drf_view 的编码规则。

配置方式:
    REST_FRAMEWORK = {
        'DEFAULT_RENDERER_CLASSES': [
            'drf_view.renderers.ViewJSONRenderer',
            'drf_view.renderers.ViewXMLRenderer',
        ],
    }
"""

from typing import Any

from rest_framework.renderers import BaseRenderer, JSONRenderer

from drf_view.convertible import flatten_parameters
from drf_view.encoders import ViewJSONEncoder, XMLEncoder


class ViewJSONRenderer(JSONRenderer):
    """
    JSON 渲染器

    与 JSONEncoder 一致：先展开 DictConvertible 对象，再使用 ViewJSONEncoder 编码。
    """

    encoder_class = ViewJSONEncoder

    def render(
        self,
        data: Any,
        accepted_media_type: str | None = None,
        renderer_context: dict | None = None,
    ) -> bytes:
        return super().render(flatten_parameters(data), accepted_media_type, renderer_context)


class ViewXMLRenderer(BaseRenderer):
    """
    XML 渲染器

    使用 TreeBuilder 生成文档，根节点、集合标签名取自 DRF_VIEW 配置。
    """

    media_type = "application/xml"
    format = "xml"
    charset = "utf-8"

    encoder_class = XMLEncoder

    def render(
        self,
        data: Any,
        accepted_media_type: str | None = None,
        renderer_context: dict | None = None,
    ) -> bytes:
        if data is None:
            return b""
        return self.encoder_class().encode(data).encode(self.charset)
