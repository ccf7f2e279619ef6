"""
DRF-View Exceptions Module

Example:
    from drf_view.exceptions import UnsupportedFormat, InvalidInput

    raise UnsupportedFormat(format="yaml")
"""

from drf_view.exceptions.base import ExceptionDetail, ViewException
from drf_view.exceptions.codes import (
    ErrorCode,
    ErrorCodeRange,
    ErrorCodeRegistry,
    StandardErrorCodes,
)
from drf_view.exceptions.rendering import (
    InvalidInput,
    MalformedInput,
    UnsupportedFormat,
    UnsupportedValueType,
)

__all__ = [
    # Base - 基础
    "ViewException",
    "ExceptionDetail",
    # Codes - 错误码
    "ErrorCode",
    "ErrorCodeRange",
    "ErrorCodeRegistry",
    "StandardErrorCodes",
    # Rendering - 渲染异常
    "UnsupportedFormat",
    "InvalidInput",
    "MalformedInput",
    "UnsupportedValueType",
]
