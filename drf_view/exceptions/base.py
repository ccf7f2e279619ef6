"""
DRF-View 基础异常模块

提供异常详情和基础异常类。
"""

import logging
from dataclasses import dataclass
from typing import Any

from django.utils.translation import gettext as _

from .codes import ErrorCode, StandardErrorCodes


@dataclass
class ExceptionDetail:
    """异常详情信息"""

    type: str
    code: int
    message: str
    detail: str | None = None
    field: str | None = None

    def to_dict(self) -> dict:
        result = {
            "type": self.type,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            result["detail"] = self.detail
        if self.field:
            result["field"] = self.field
        return result


class ViewException(Exception):
    """
    DRF-View 异常基类

    渲染流程中所有异常的根类，提供：
    - 结构化的错误码
    - 对应的 HTTP 状态码
    - 异常链追踪

    Example:
        raise ViewException(
            message="Custom error message",
            error_code=StandardErrorCodes.INTERNAL_ERROR,
            detail="Additional details here"
        )
    """

    # 默认错误码，子类应覆盖
    default_error_code: ErrorCode = StandardErrorCodes.INTERNAL_ERROR

    # 日志级别
    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        detail: str | None = None,
        data: Any = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.default_error_code

        if message is None:
            message = _(self._error_code.default_message)

        self._message = message
        self._detail = detail
        self._data = data
        self._cause = cause

        super().__init__(message)
        if cause:
            self.__cause__ = cause

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def http_status(self) -> int:
        """HTTP 状态码"""
        return self._error_code.http_status

    @property
    def message(self) -> str:
        return self._message

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def data(self) -> Any:
        return self._data

    def get_exception_detail(self) -> ExceptionDetail:
        """获取结构化的异常详情"""
        return ExceptionDetail(
            type=self.__class__.__name__,
            code=self.code,
            message=self.message,
            detail=self.detail,
        )

    def to_dict(self) -> dict:
        """转换为统一响应格式的字典"""
        return {
            "result": False,
            "code": self.code,
            "message": self.message,
            "data": self._data,
            "error": self.get_exception_detail().to_dict(),
        }

    def log(self, logger: logging.Logger | None = None):
        """按异常自身的日志级别记录日志"""
        if logger is None:
            logger = logging.getLogger(__name__)

        logger.log(
            self.log_level,
            "[%s] %s",
            self.code,
            self.message,
            exc_info=self._cause,
        )

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code}, message={self.message!r})"
