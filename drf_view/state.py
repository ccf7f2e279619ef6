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
渲染状态

RenderState 保存一次 handle() 所需的全部可变状态。View 在每次 handle() 成功结束后
用全新的 RenderState 替换旧状态，使同一个 View 实例可以重复使用。
"""

from dataclasses import dataclass, field
from typing import Any

from drf_view.settings import view_settings
from drf_view.templating import TemplateReference


@dataclass(frozen=True)
class Redirect:
    """待执行的重定向"""

    location: str
    status_code: int = 302


def _default_engine() -> str:
    return view_settings.DEFAULT_ENGINE


@dataclass
class RenderState:
    """
    单次渲染的状态

    Attributes:
        format: 目标格式，None 表示尚未从请求中解析
        template: 模板引用或模板名
        parameters: 待序列化的数据
        redirect: 待执行的重定向，设置后 handle() 不再序列化 parameters
        engine: 模板引用未指定引擎时使用的引擎别名
    """

    format: str | None = None
    template: TemplateReference | str | None = None
    parameters: Any = field(default_factory=dict)
    redirect: Redirect | None = None
    engine: str = field(default_factory=_default_engine)
