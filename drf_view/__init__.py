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
DRF-View 框架

基于 Django / Django REST Framework 的格式协商响应渲染。

核心模块:
    - view: 视图 (View, EmptyView)
    - pipeline: 序列化流水线 (SerializationPipeline)
    - registry: 格式注册表 (FormatRegistry)
    - encoders: 编码器 (JSONEncoder, XMLEncoder, HTMLEncoder)
    - tree: XML 树构建 (TreeBuilder)
    - renderers: DRF 渲染器 (ViewJSONRenderer, ViewXMLRenderer)
    - exceptions: 异常体系

基本用法:
    from drf_view import View

    view = View()
    view.set_parameters({"user": {"id": 5, "active": True}})
    response = view.handle(request)
"""

from drf_view.convertible import DictConvertible
from drf_view.pipeline import RenderResult, SerializationPipeline
from drf_view.registry import FormatRegistry
from drf_view.state import Redirect, RenderState
from drf_view.templating import TemplateReference, resolve_template
from drf_view.tree import TreeBuilder
from drf_view.view import EmptyView, View, get_view

__all__ = [
    # 视图
    "View",
    "EmptyView",
    "get_view",
    # 渲染状态
    "RenderState",
    "Redirect",
    "TemplateReference",
    "resolve_template",
    # 序列化
    "SerializationPipeline",
    "RenderResult",
    "FormatRegistry",
    "TreeBuilder",
    "DictConvertible",
]
