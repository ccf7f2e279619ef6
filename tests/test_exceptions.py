"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

"""
异常与错误码单元测试
"""

import logging

import pytest
from rest_framework.exceptions import NotFound

from drf_view.exceptions import (
    ErrorCode,
    ErrorCodeRegistry,
    InvalidInput,
    MalformedInput,
    StandardErrorCodes,
    UnsupportedFormat,
    UnsupportedValueType,
    ViewException,
)
from drf_view.exceptions.handlers import view_exception_handler


class TestErrorCodeRegistry:
    """测试错误码注册表"""

    def test_standard_codes_registered(self):
        assert ErrorCodeRegistry.get(3000) is StandardErrorCodes.UNSUPPORTED_FORMAT
        assert ErrorCodeRegistry.get(2000) is StandardErrorCodes.MALFORMED_INPUT
        assert 1001 in ErrorCodeRegistry.all()

    def test_duplicate_code(self):
        with pytest.raises(ValueError):
            ErrorCodeRegistry.register(ErrorCode(3000, "error.other", "Other"))

    def test_register_custom_code(self):
        code = ErrorCode(5999, "error.custom", "Custom", 409)
        try:
            assert ErrorCodeRegistry.register(code) is code
            assert ErrorCodeRegistry.get(5999) is code
        finally:
            ErrorCodeRegistry.unregister(5999)

        assert ErrorCodeRegistry.get(5999) is None


class TestViewException:
    """测试异常的结构化输出"""

    def test_defaults(self):
        exc = ViewException()
        assert exc.code == 1000
        assert exc.http_status == 500
        assert exc.message == "Internal server error"
        assert str(exc) == "[1000] Internal server error"

    def test_unsupported_format(self):
        exc = UnsupportedFormat(format="yaml")

        assert exc.format == "yaml"
        assert exc.http_status == 404
        assert exc.message == "Format 'yaml' not supported, handler must be implemented"
        assert exc.log_level == logging.WARNING

    def test_invalid_input_field(self):
        exc = InvalidInput(message="Template name is required", field="name")

        assert exc.to_dict() == {
            "result": False,
            "code": 1001,
            "message": "Template name is required",
            "data": None,
            "error": {
                "type": "InvalidInput",
                "code": 1001,
                "message": "Template name is required",
                "field": "name",
            },
        }

    def test_malformed_input(self):
        cause = ValueError("boom")
        exc = MalformedInput(reason="tag mismatch", cause=cause)

        assert exc.message == "Malformed markup: tag mismatch"
        assert exc.http_status == 400
        assert exc.__cause__ is cause

    def test_unsupported_value_type(self):
        exc = UnsupportedValueType(value_type="int")
        assert exc.message == "Unsupported type int"
        assert exc.value_type == "int"

    def test_log_level(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tests"):
            UnsupportedFormat(format="yaml").log(logging.getLogger("tests"))

        assert caplog.records[-1].levelno == logging.WARNING
        assert "[3000]" in caplog.records[-1].getMessage()


class TestExceptionHandler:
    """测试 DRF 异常处理器"""

    def test_view_exception(self):
        response = view_exception_handler(UnsupportedFormat(format="yaml"), {})

        assert response.status_code == 404
        assert response.data["code"] == 3000
        assert response.data["error"]["type"] == "UnsupportedFormat"

    def test_drf_exception(self):
        response = view_exception_handler(NotFound(), {})
        assert response.status_code == 404

    def test_unknown_exception(self):
        assert view_exception_handler(RuntimeError("boom"), {}) is None
