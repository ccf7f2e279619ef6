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
DRF 渲染器单元测试
"""

import datetime

from drf_view.convertible import DictConvertible
from drf_view.renderers import ViewJSONRenderer, ViewXMLRenderer


class Point(DictConvertible):
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def to_dict(self):
        return {"x": self.x, "y": self.y}


class TestViewJSONRenderer:
    def test_render(self):
        content = ViewJSONRenderer().render({"point": Point(1, 2), "day": datetime.date(2024, 1, 2)})
        assert content == b'{"point":{"x":1,"y":2},"day":"2024-01-02"}'

    def test_none(self):
        assert ViewJSONRenderer().render(None) == b""


class TestViewXMLRenderer:
    def test_render(self):
        content = ViewXMLRenderer().render({"points": [Point(1, 2)]})

        assert isinstance(content, bytes)
        assert b'<response><points><entry key="0"><x>1</x><y>2</y></entry></points></response>' in content

    def test_none(self):
        assert ViewXMLRenderer().render(None) == b""
