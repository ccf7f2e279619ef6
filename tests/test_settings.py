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
DRF_VIEW 配置单元测试
"""

from django.test import override_settings

from drf_view.settings import view_settings
from drf_view.state import RenderState
from drf_view.view import View


class TestViewSettings:
    def test_defaults(self):
        assert view_settings.DEFAULT_FORMAT == "html"
        assert view_settings.DEFAULT_ENGINE == "django"
        assert view_settings.XML_ROOT_TAG == "response"
        assert view_settings.VIEW_CLASS is View

    def test_reload_on_setting_changed(self):
        """测试覆盖 DRF_VIEW 后配置刷新，退出后恢复默认值"""
        with override_settings(DRF_VIEW={"DEFAULT_ENGINE": "jinja2", "GLOBAL_PARAMETERS": {"site": "S"}}):
            assert view_settings.DEFAULT_ENGINE == "jinja2"
            assert RenderState().engine == "jinja2"
            assert View().get_global_parameters() == {"site": "S"}

        assert view_settings.DEFAULT_ENGINE == "django"
        assert View().get_global_parameters() == {}
