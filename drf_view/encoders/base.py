"""
编码器基类

编码器负责把内存中的数据转换为某一种格式的文本。编码器实例由 FormatRegistry
在首次使用时创建并缓存，多个请求共享同一实例，因此编码器本身不应保存请求级状态；
模板相关的请求级状态保存在局部存储中。
"""

from typing import Any

from asgiref.local import Local

from drf_view.templating import DjangoTemplating, TemplateReference


class BaseEncoder:
    """
    编码器基类

    子类需要声明 format、media_type 并实现 encode()。

    Example:
        class CSVEncoder(BaseEncoder):
            format = "csv"
            media_type = "text/csv"

            def encode(self, data):
                ...
    """

    format: str | None = None
    media_type: str | None = None
    charset: str | None = "utf-8"

    # 是否需要在编码前设置模板
    is_template_aware = False

    @property
    def content_type(self) -> str | None:
        if self.media_type and self.charset:
            return f"{self.media_type}; charset={self.charset}"
        return self.media_type

    def encode(self, data: Any) -> str:
        raise NotImplementedError(".encode() must be implemented.")


class TemplatingAwareEncoder(BaseEncoder):
    """
    需要模板的编码器

    模板与模板引擎按请求设置，保存在局部存储中，互不干扰。
    未设置模板引擎时使用构造时传入的默认引擎。
    """

    is_template_aware = True

    def __init__(self, templating=None):
        self.default_templating = templating or DjangoTemplating()
        self._local = Local()

    def set_templating(self, templating):
        self._local.templating = templating

    def get_templating(self):
        return getattr(self._local, "templating", None) or self.default_templating

    def set_template(self, template: TemplateReference | str | None):
        self._local.template = template

    def get_template(self) -> TemplateReference | str | None:
        return getattr(self._local, "template", None)
