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
请求级局部存储

基于 asgiref.local.Local，同时兼容线程与协程上下文。
"""

from contextlib import contextmanager

from asgiref.local import Local

__all__ = ["local", "Local", "with_request_local"]

local = Local()


@contextmanager
def with_request_local(request):
    """
    在上下文中临时设置当前请求，退出时恢复原来的值

    Args:
        request: Django 请求对象

    Yields:
        local: 局部存储对象
    """
    missing = object()
    previous = getattr(local, "current_request", missing)
    local.current_request = request
    try:
        yield local
    finally:
        if previous is missing:
            del local.current_request
        else:
            local.current_request = previous
