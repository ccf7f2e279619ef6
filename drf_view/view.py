"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

import abc
import logging
from collections.abc import Callable, Mapping
from typing import Any

from django.http import HttpResponse

from drf_view.exceptions import InvalidInput, UnsupportedFormat
from drf_view.pipeline import RenderResult, SerializationPipeline
from drf_view.registry import FormatRegistry
from drf_view.routing import DjangoRouter
from drf_view.settings import view_settings
from drf_view.state import Redirect, RenderState
from drf_view.templating import TemplateReference, coerce_template, resolve_template
from drf_view.utils.request import get_request, get_request_format

logger = logging.getLogger(__name__)

__doc__ = """
DRF View - 格式无关的响应构建

在视图函数中只需设置数据、模板与重定向，View 根据请求格式决定输出 JSON、XML、
渲染模板还是执行重定向。

基本用法
--------
```python
from drf_view import View

def show_post(request, pk):
    view = View()
    view.set_template({"bundle": "blog", "controller": "post", "name": "show"})
    view.set_parameters({"post": {"id": pk, "title": "Hello"}})
    return view.handle(request)

# /posts/1?format=json -> {"post":{"id":1,"title":"Hello"}}
# /posts/1?format=xml  -> <response><post><id>1</id><title>Hello</title></post></response>
# /posts/1             -> 渲染 blog/post/show.html
```

执行流程
--------
1. 未显式设置 format 时，从请求中解析格式（每次 handle() 只解析一次）
2. 该格式注册了自定义处理器：调用处理器，直接使用其返回的响应
3. 设置了重定向：写入状态码与 Location，不做序列化
4. 格式既无处理器也无编码器：抛出 UnsupportedFormat
5. 否则交给 SerializationPipeline 编码，写入响应内容与 Content-Type
6. 重置渲染状态，View 实例可继续复用；异常路径不重置，调用方应丢弃该实例

自定义处理器
--------
```python
def handle_csv(view, request, response):
    response.content = to_csv(view.get_parameters())
    return response

view.register_handler("csv", handle_csv)
```
"""

# 需要 Location 头的状态码
REDIRECT_STATUS_CODES = (300, 301, 302, 303, 305, 307, 308)

Handler = Callable[[Any, Any, Any], Any]


def apply_redirect(response, redirect: Redirect):
    response.status_code = redirect.status_code
    response["Location"] = redirect.location
    return response


class BaseView(abc.ABC):
    """
    视图基类

    维护 格式 -> 自定义处理器 的策略表，处理器签名为 handler(view, request, response)，
    返回可直接发送的响应对象。
    """

    def __init__(self, router=None):
        self.router = router or DjangoRouter()
        self.custom_handlers: dict[str, Handler] = {}

    def register_handler(self, format: str, callback: Handler):
        self.custom_handlers[format] = callback

    def supports(self, format: str) -> bool:
        return format in self.custom_handlers

    def get_handler(self, format: str) -> Handler | None:
        return self.custom_handlers.get(format)

    @staticmethod
    def prepare(request=None, response=None):
        """未传入时使用当前请求与新建的 HttpResponse"""
        if request is None:
            request = get_request()
        if response is None:
            response = HttpResponse()
        return request, response

    @abc.abstractmethod
    def handle(self, request=None, response=None):
        raise NotImplementedError


class View(BaseView):
    """
    默认视图实现

    负责 JSON、XML 编码与 HTML 模板渲染，格式可通过 DRF_VIEW['FORMATS']
    或 register_handler() 扩展。

    全局参数在渲染模板前与局部参数合并，适合放置布局中每个页面都需要的数据。
    """

    def __init__(
        self,
        global_parameters: Mapping | None = None,
        registry: FormatRegistry | None = None,
        templating=None,
        router=None,
        pipeline: SerializationPipeline | None = None,
    ):
        super().__init__(router=router)
        if global_parameters is None:
            global_parameters = view_settings.GLOBAL_PARAMETERS
        self.global_parameters = dict(global_parameters)
        self.pipeline = pipeline or SerializationPipeline(registry, templating=templating)
        self.state = RenderState()

    # ---------------------------------------------------------------- state

    def reset(self):
        """重置渲染状态：清空模板、格式、重定向与参数，恢复默认模板引擎"""
        self.state = RenderState()

    def set_parameters(self, parameters: Any):
        self.state.parameters = parameters

    def get_parameters(self) -> Any:
        return self.state.parameters

    def set_template(self, template: TemplateReference | Mapping | str):
        """
        设置模板

        Args:
            template: TemplateReference、包含 bundle/controller/name/format/engine 的字典，
                或已经拼好的模板名字符串

        Raises:
            InvalidInput: 缺少模板名
        """
        self.state.template = coerce_template(template)

    def get_template(self) -> TemplateReference | str | None:
        """返回补全了 format 与 engine 的模板引用"""
        return resolve_template(self.state.template, self.get_format(), self.get_engine())

    def set_format(self, format: str | None):
        self.state.format = format

    def get_format(self) -> str | None:
        return self.state.format

    def set_engine(self, engine: str):
        self.state.engine = engine

    def get_engine(self) -> str:
        return self.state.engine

    def set_global_parameters(self, global_parameters: Mapping):
        self.global_parameters = dict(global_parameters)

    def get_global_parameters(self) -> dict:
        return self.global_parameters

    def set_route_redirect(self, route: str, parameters: Mapping | None = None, code: int = 302):
        """
        按路由名设置重定向

        Args:
            route: 路由名
            parameters: 路由参数
            code: HTTP 状态码
        """
        location = self.router.generate(route, parameters or {})
        self.state.redirect = Redirect(location=location, status_code=code)

    def set_uri_redirect(self, uri: str, code: int = 302):
        self.state.redirect = Redirect(location=uri, status_code=code)

    def get_redirect(self) -> Redirect | None:
        return self.state.redirect

    # ---------------------------------------------------------------- handle

    def supports(self, format: str) -> bool:
        return super().supports(format) or self.pipeline.supports(format)

    def handle(self, request=None, response=None):
        """
        根据请求格式生成响应

        Args:
            request: 请求对象，默认取当前请求
            response: 响应对象，默认新建 HttpResponse

        Returns:
            响应对象

        Raises:
            UnsupportedFormat: 格式既无处理器也无编码器
        """
        request, response = self.prepare(request, response)

        if self.state.format is None:
            self.set_format(get_request_format(request))

        format = self.get_format()
        handler = self.get_handler(format)

        if handler is not None:
            logger.debug("[View] format %s handled by %r", format, handler)
            response = handler(self, request, response)
        elif self.state.redirect is not None:
            response = apply_redirect(response, self.state.redirect)
        else:
            if not self.supports(format):
                raise UnsupportedFormat(format=format)
            result = self.pipeline.render(
                format,
                self.get_template(),
                self.state.parameters,
                global_parameters=self.global_parameters,
            )
            response = self.apply_result(result, response)

        self.reset()
        return response

    @staticmethod
    def apply_result(result: RenderResult, response):
        if result.is_redirect:
            return apply_redirect(response, result.redirect)

        response.content = result.content
        if result.content_type:
            response["Content-Type"] = result.content_type
        return response


class EmptyView(BaseView):
    """
    空视图

    只返回预设的状态码，重定向状态码需要同时提供 Location。

    Example:
        return EmptyView(204).handle(request)
        return EmptyView(302).set_uri_redirect("/login", 303).handle(request)
    """

    def __init__(self, status_code: int, location: str | None = None, router=None):
        super().__init__(router=router)
        self.status_code = status_code
        self.location = location

    def set_route_redirect(self, route: str, parameters: Mapping | None = None, code: int = 302):
        self.status_code = code
        self.location = self.router.generate(route, parameters or {})
        return self

    def set_uri_redirect(self, uri: str, code: int = 302):
        self.status_code = code
        self.location = uri
        return self

    def set_status_code(self, code: int):
        self.status_code = code
        return self

    def set_location(self, location: str):
        self.location = location
        return self

    def handle(self, request=None, response=None):
        """
        Raises:
            InvalidInput: 重定向状态码缺少 Location
        """
        request, response = self.prepare(request, response)

        handler = self.get_handler(get_request_format(request))
        if handler is not None:
            return handler(self, request, response)

        if self.status_code in REDIRECT_STATUS_CODES:
            if not self.location:
                raise InvalidInput(
                    message=f"Location missing for response with status code {self.status_code}",
                    field="location",
                )
            return apply_redirect(response, Redirect(self.location, self.status_code))

        response.status_code = self.status_code
        return response


def get_view(*args, **kwargs) -> View:
    """按 DRF_VIEW['VIEW_CLASS'] 创建视图"""
    return view_settings.VIEW_CLASS(*args, **kwargs)
