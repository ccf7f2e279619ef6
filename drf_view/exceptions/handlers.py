"""
DRF-View 异常处理器

将渲染异常转换为统一格式的 DRF 响应，其余异常交还 DRF 默认处理器。

配置方式:
    REST_FRAMEWORK = {
        'EXCEPTION_HANDLER': 'drf_view.exceptions.handlers.view_exception_handler'
    }
"""

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from .base import ViewException

logger = logging.getLogger(__name__)


def view_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    DRF-View 统一异常处理器

    响应格式：
    {
        "result": false,
        "code": 3000,
        "message": "Format 'yaml' not supported, handler must be implemented",
        "data": null,
        "error": {"type": "UnsupportedFormat", "code": 3000, "message": "..."}
    }

    Args:
        exc: 异常实例
        context: DRF 提供的上下文，包含 view, args, kwargs, request 等

    Returns:
        Response 对象，或 None（让 DRF 继续处理）
    """
    if isinstance(exc, ViewException):
        exc.log(logger)
        return Response(exc.to_dict(), status=exc.http_status)

    return exception_handler(exc, context)
