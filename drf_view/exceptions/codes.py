"""
DRF-View 错误码系统

提供渲染层使用的错误码定义和注册机制。

Example:
    from drf_view.exceptions.codes import (
        ErrorCode,
        ErrorCodeRegistry,
        StandardErrorCodes,
    )

    # 使用标准错误码
    code = StandardErrorCodes.UNSUPPORTED_FORMAT

    # 注册自定义错误码
    TEMPLATE_MISSING = ErrorCodeRegistry.register(
        ErrorCode(5001, "error.template_missing", "Template missing", 500)
    )
"""

from dataclasses import dataclass
from enum import IntEnum


class ErrorCodeRange(IntEnum):
    """
    错误码范围枚举

    范围划分:
        - 1000-1999: 配置及系统错误
        - 2000-2999: 输入数据错误
        - 3000-3999: 内容协商错误
        - 5000+: 业务自定义错误
    """

    SYSTEM = 1000
    INPUT = 2000
    NEGOTIATION = 3000
    BUSINESS = 5000


@dataclass(frozen=True)
class ErrorCode:
    """
    错误码定义

    Attributes:
        code: 错误码数值
        message_key: 用于 i18n 的消息键
        default_message: 默认错误消息
        http_status: 对应的 HTTP 状态码，默认 500
    """

    code: int
    message_key: str
    default_message: str
    http_status: int = 500

    def __str__(self) -> str:
        return f"{self.code}"


class ErrorCodeRegistry:
    """
    错误码注册表

    支持运行时注册自定义错误码，确保错误码唯一性。
    """

    _codes: dict[int, ErrorCode] = {}

    @classmethod
    def register(cls, error_code: ErrorCode) -> ErrorCode:
        """
        注册错误码

        Raises:
            ValueError: 当错误码已存在时
        """
        if error_code.code in cls._codes:
            existing = cls._codes[error_code.code]
            raise ValueError(
                f"Error code {error_code.code} already registered as '{existing.message_key}'"
            )
        cls._codes[error_code.code] = error_code
        return error_code

    @classmethod
    def get(cls, code: int) -> ErrorCode | None:
        return cls._codes.get(code)

    @classmethod
    def all(cls) -> dict[int, ErrorCode]:
        return cls._codes.copy()

    @classmethod
    def unregister(cls, code: int) -> ErrorCode | None:
        return cls._codes.pop(code, None)


class StandardErrorCodes:
    """
    标准错误码集合

    覆盖渲染流程中的全部失败场景：
        - INVALID_INPUT: 模板引用等配置错误
        - UNSUPPORTED_VALUE_TYPE: 顶层参数类型无法转换为 XML
        - MALFORMED_INPUT: 作为参数传入的 XML 文本无法解析
        - UNSUPPORTED_FORMAT: 请求格式既无自定义处理器也无编码器
    """

    # ==================== 配置及系统 (1000-1999) ====================
    INTERNAL_ERROR = ErrorCode(1000, "error.internal", "Internal server error", 500)
    INVALID_INPUT = ErrorCode(1001, "error.invalid_input", "Invalid view configuration", 500)
    UNSUPPORTED_VALUE_TYPE = ErrorCode(
        1002, "error.unsupported_value_type", "Unsupported value type", 500
    )

    # ==================== 输入数据 (2000-2999) ====================
    MALFORMED_INPUT = ErrorCode(2000, "error.malformed_input", "Malformed markup", 400)

    # ==================== 内容协商 (3000-3999) ====================
    UNSUPPORTED_FORMAT = ErrorCode(
        3000, "error.unsupported_format", "Format not supported", 404
    )


def _register_standard_codes():
    """注册所有标准错误码到注册表"""
    for attr_name in dir(StandardErrorCodes):
        if attr_name.startswith("_"):
            continue
        attr = getattr(StandardErrorCodes, attr_name)
        if isinstance(attr, ErrorCode) and ErrorCodeRegistry.get(attr.code) is None:
            ErrorCodeRegistry.register(attr)


# 模块加载时自动注册
_register_standard_codes()
