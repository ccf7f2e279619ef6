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
映射视图能力

数据对象通过继承 DictConvertible（或调用 DictConvertible.register 注册）声明自己
可以转换为映射，JSON 与 XML 编码器都只识别这一能力，不再按方法名猜测。

Example:
    class User(DictConvertible):
        def __init__(self, user_id, name):
            self.user_id = user_id
            self.name = name

        def to_dict(self):
            return {"id": self.user_id, "name": self.name}
"""

import abc
from collections.abc import Iterable, Mapping
from typing import Any

from drf_view.exceptions import InvalidInput


class DictConvertible(abc.ABC):
    """
    可转换为映射的对象
    """

    @abc.abstractmethod
    def to_dict(self) -> Mapping:
        raise NotImplementedError


def flatten_parameters(parameters: Any) -> Any:
    """
    递归展开参数中的 DictConvertible 对象

    映射保持插入顺序，列表、元组、生成器等非字符串可迭代对象统一转为列表，其余值原样返回，
    交由 JSON 编码器决定如何序列化。

    Args:
        parameters: 任意嵌套的参数

    Returns:
        展开后的参数
    """
    if isinstance(parameters, DictConvertible):
        return flatten_parameters(parameters.to_dict())
    if isinstance(parameters, Mapping):
        return {key: flatten_parameters(value) for key, value in parameters.items()}
    if isinstance(parameters, Iterable) and not isinstance(parameters, (str, bytes, bytearray)):
        return [flatten_parameters(item) for item in parameters]
    return parameters


def merge_parameters(global_parameters: Mapping | None, parameters: Any) -> dict:
    """
    合并全局参数与局部参数，键冲突时局部参数优先

    Raises:
        InvalidInput: 局部参数不是映射时
    """
    merged = dict(global_parameters or {})
    if parameters is None:
        return merged
    if isinstance(parameters, DictConvertible):
        parameters = parameters.to_dict()
    if not isinstance(parameters, Mapping):
        raise InvalidInput(
            message=f"Template parameters must be a mapping, got {type(parameters).__name__}",
            field="parameters",
        )
    merged.update(parameters)
    return merged
