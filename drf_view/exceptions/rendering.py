"""
渲染相关异常类

Classes:
    UnsupportedFormat: 请求的格式没有对应的处理器或编码器 (404)
    InvalidInput: 模板引用缺少必填字段等配置错误 (500)
    MalformedInput: 作为参数传入的 XML 文本无法解析 (400)
    UnsupportedValueType: 顶层参数类型无法转换为 XML 文档 (500)

以上异常均同步抛出，不做重试，也不会产生部分输出。
"""

import logging

from .base import ExceptionDetail, ViewException
from .codes import StandardErrorCodes


class UnsupportedFormat(ViewException):
    """
    格式不受支持

    既没有注册自定义处理器，FormatRegistry 中也没有对应编码器时抛出。

    Example:
        raise UnsupportedFormat(format="yaml")
    """

    default_error_code = StandardErrorCodes.UNSUPPORTED_FORMAT
    log_level = logging.WARNING

    def __init__(self, format: str | None = None, **kwargs):
        self._format = format
        if "message" not in kwargs:
            kwargs["message"] = (
                f"Format '{format}' not supported, handler must be implemented"
            )
        super().__init__(**kwargs)

    @property
    def format(self) -> str | None:
        return self._format


class InvalidInput(ViewException):
    """
    配置错误

    例如模板引用缺少 name，或重定向路由无法解析。属于调用方的配置缺陷。

    Example:
        raise InvalidInput(message="Template name is required", field="name")
    """

    default_error_code = StandardErrorCodes.INVALID_INPUT

    def __init__(self, message: str | None = None, field: str | None = None, **kwargs):
        self._field = field
        super().__init__(message=message, **kwargs)

    @property
    def field(self) -> str | None:
        """出错的字段名"""
        return self._field

    def get_exception_detail(self) -> ExceptionDetail:
        detail = super().get_exception_detail()
        detail.field = self._field
        return detail


class MalformedInput(ViewException):
    """
    XML 文本解析失败

    Example:
        raise MalformedInput(reason="Opening and ending tag mismatch", cause=error)
    """

    default_error_code = StandardErrorCodes.MALFORMED_INPUT
    log_level = logging.WARNING

    def __init__(self, reason: str | None = None, **kwargs):
        self._reason = reason
        if "message" not in kwargs and reason:
            kwargs["message"] = f"Malformed markup: {reason}"
        super().__init__(**kwargs)

    @property
    def reason(self) -> str | None:
        return self._reason


class UnsupportedValueType(ViewException):
    """
    顶层参数类型不受支持

    XML 转换只接受文档对象、XML 文本、映射或序列作为顶层参数。
    嵌套的不支持类型不会抛出此异常，而是降级为空节点。
    """

    default_error_code = StandardErrorCodes.UNSUPPORTED_VALUE_TYPE

    def __init__(self, value_type: str | None = None, **kwargs):
        self._value_type = value_type
        if "message" not in kwargs and value_type:
            kwargs["message"] = f"Unsupported type {value_type}"
        super().__init__(**kwargs)

    @property
    def value_type(self) -> str | None:
        return self._value_type
