"""
路由生成

重定向按路由名生成地址时使用。
"""

from collections.abc import Mapping

from django.urls import NoReverseMatch, reverse

from drf_view.exceptions import InvalidInput


class DjangoRouter:
    """基于 django.urls.reverse 的路由生成器"""

    def generate(self, route: str, parameters: Mapping | None = None) -> str:
        """
        根据路由名与参数生成地址

        Raises:
            InvalidInput: 路由不存在或参数不匹配
        """
        try:
            return reverse(route, kwargs=dict(parameters) if parameters else None)
        except NoReverseMatch as error:
            raise InvalidInput(
                message=f"Route '{route}' can not be generated: {error}",
                field="route",
                cause=error,
            ) from error
