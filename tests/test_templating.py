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
模板引用、模板引擎与路由单元测试
"""

import pytest

from drf_view.exceptions import InvalidInput
from drf_view.routing import DjangoRouter
from drf_view.templating import (
    DjangoTemplating,
    TemplateReference,
    coerce_template,
    resolve_template,
)


class TestTemplateReference:
    """测试模板引用"""

    def test_path(self):
        reference = TemplateReference(name="show", bundle="blog", controller="post", format="html")
        assert reference.path == "blog/post/show.html"

    def test_path_skips_empty_parts(self):
        assert TemplateReference(name="plain", format="html").path == "plain.html"
        assert TemplateReference(name="plain").path == "plain"

    def test_logical_name(self):
        reference = TemplateReference(
            name="show", bundle="blog", controller="post", format="html", engine="django"
        )
        assert str(reference) == "blog:post:show.html.django"


class TestCoerceTemplate:
    """测试模板引用规范化"""

    def test_mapping(self):
        assert coerce_template({"name": "show", "bundle": "blog"}) == TemplateReference(
            name="show", bundle="blog"
        )

    def test_passthrough(self):
        reference = TemplateReference(name="show")
        assert coerce_template(reference) is reference
        assert coerce_template("plain.html") == "plain.html"
        assert coerce_template(None) is None

    @pytest.mark.parametrize(
        "template",
        [
            {"bundle": "blog"},
            {"name": ""},
            {"name": "show", "layout": "base"},
            "",
            TemplateReference(name=""),
            ["show"],
        ],
    )
    def test_invalid(self, template):
        with pytest.raises(InvalidInput):
            coerce_template(template)


class TestResolveTemplate:
    def test_fills_missing_parts(self):
        reference = TemplateReference(name="show")

        resolved = resolve_template(reference, "html", "django")

        assert resolved.format == "html"
        assert resolved.engine == "django"
        assert reference.format is None

    def test_keeps_explicit_parts(self):
        reference = TemplateReference(name="show", format="txt", engine="jinja2")
        assert resolve_template(reference, "html", "django") == reference

    def test_string_and_none(self):
        assert resolve_template("plain.html", "html", "django") == "plain.html"
        assert resolve_template(None, "html", "django") is None


class TestDjangoTemplating:
    def test_render_reference(self):
        reference = TemplateReference(
            name="show", bundle="blog", controller="post", format="txt", engine="django"
        )
        assert DjangoTemplating().render(reference, {"title": "Hi"}) == "Hi"

    def test_render_name(self):
        assert DjangoTemplating().render("plain.html", {"name": "bob"}) == "Hello bob"


class TestDjangoRouter:
    def test_generate(self):
        router = DjangoRouter()
        assert router.generate("login") == "/login/"
        assert router.generate("user-detail", {"pk": 7}) == "/users/7/"

    def test_missing_route(self):
        with pytest.raises(InvalidInput) as exc_info:
            DjangoRouter().generate("user-detail")
        assert exc_info.value.field == "route"
