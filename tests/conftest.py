"""
tests 目录的 pytest conftest
在导入其他模块之前配置 Django
"""

import os

# 清除环境变量，避免 .env 文件干扰
os.environ.pop("DJANGO_SETTINGS_MODULE", None)

import django
from django.conf import settings

TEST_TEMPLATES = {
    "blog/post/show.html": "<h1>{{ title }}</h1><p>{{ site }}</p>",
    "blog/post/show.txt": "{{ title }}",
    "plain.html": "Hello {{ name }}",
}

if not settings.configured:
    settings.configure(
        DEBUG=True,
        SECRET_KEY="test-secret-key",
        ALLOWED_HOSTS=["testserver", "localhost", "127.0.0.1"],
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "rest_framework",
            "drf_view",
        ],
        DATABASES={
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            }
        },
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": False,
                "OPTIONS": {
                    "loaders": [
                        ("django.template.loaders.locmem.Loader", TEST_TEMPLATES),
                    ],
                },
            }
        ],
        ROOT_URLCONF="tests.urls",
        REST_FRAMEWORK={
            "TEST_REQUEST_DEFAULT_FORMAT": "json",
        },
        DRF_VIEW={},
    )
    django.setup()

import pytest
from django.test import RequestFactory


@pytest.fixture
def rf():
    """RequestFactory fixture"""
    return RequestFactory()


@pytest.fixture
def json_request(rf):
    return rf.get("/posts/1", {"format": "json"})


@pytest.fixture
def xml_request(rf):
    return rf.get("/posts/1", {"format": "xml"})


@pytest.fixture
def html_request(rf):
    return rf.get("/posts/1")
