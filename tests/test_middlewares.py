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
请求中间件单元测试
"""

from django.http import HttpResponse

from drf_view.middlewares.request import RequestProvider
from drf_view.utils import get_request
from drf_view.view import View


def test_request_provider(json_request):
    """测试中间件在请求期间提供当前请求，响应后清理"""
    seen = []

    def get_response(request):
        seen.append(get_request())
        view = View()
        view.set_parameters({"ok": True})
        return view.handle()

    response = RequestProvider(get_response)(json_request)

    assert seen == [json_request]
    assert response.content == b'{"ok":true}'
    assert get_request(peaceful=True) is None


def test_request_cleared_without_view(rf):
    request = rf.get("/")
    RequestProvider(lambda r: HttpResponse())(request)
    assert get_request(peaceful=True) is None
