"""
drf_view 工具模块
"""

from drf_view.utils.local import local, with_request_local
from drf_view.utils.request import get_request, get_request_format

__all__ = [
    "local",
    "with_request_local",
    "get_request",
    "get_request_format",
]
