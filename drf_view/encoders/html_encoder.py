from typing import Any

from drf_view.exceptions import InvalidInput

from .base import TemplatingAwareEncoder


class HTMLEncoder(TemplatingAwareEncoder):
    """
    HTML 编码器

    使用当前请求设置的模板渲染参数，参数在进入编码器前已与全局参数合并。
    """

    format = "html"
    media_type = "text/html"

    def encode(self, data: Any) -> str:
        template = self.get_template()
        if template is None:
            raise InvalidInput(message="No template set for html rendering", field="template")
        return self.get_templating().render(template, data)
