"""
DRF-View 配置

通过 Django settings 中的 DRF_VIEW 字典覆盖默认配置:

    DRF_VIEW = {
        "FORMATS": {
            "csv": "myapp.encoders.CSVEncoder",
        },
        "GLOBAL_PARAMETERS": {"site_name": "BlueKing"},
        "XML_COLLECTION_NAMES": {"tags": "tag"},
    }

FORMATS 与默认值合并（同名格式以用户配置为准），其余配置项整体覆盖默认值。
"""

from django.conf import settings
from django.core.signals import setting_changed
from rest_framework.settings import APISettings

SETTINGS_NAME = "DRF_VIEW"

DEFAULTS = {
    # 格式 -> 编码器（导入路径、类或实例），首次使用时实例化
    "FORMATS": {
        "json": "drf_view.encoders.JSONEncoder",
        "xml": "drf_view.encoders.XMLEncoder",
        "html": "drf_view.encoders.HTMLEncoder",
    },
    "VIEW_CLASS": "drf_view.view.View",
    # 渲染 html 模板时与局部参数合并的全局参数
    "GLOBAL_PARAMETERS": {},
    # 模板引用未指定 engine 时使用的 Django 模板引擎别名
    "DEFAULT_ENGINE": "django",
    # 请求未声明格式时使用的格式
    "DEFAULT_FORMAT": "html",
    "XML_ROOT_TAG": "response",
    "XML_DEFAULT_ENTRY_TAG": "entry",
    # 父节点键 -> 子节点标签名，例如 {"tags": "tag"}
    "XML_COLLECTION_NAMES": {},
}

IMPORT_STRINGS = [
    "VIEW_CLASS",
]


class DrfViewSettings(APISettings):
    """
    DrfViewSettings
    """

    @property
    def user_settings(self):
        if not hasattr(self, "_user_settings"):
            self._user_settings = getattr(settings, SETTINGS_NAME, {})
        return self._user_settings


view_settings = DrfViewSettings(None, DEFAULTS, IMPORT_STRINGS)


def reload_view_settings(*args, **kwargs):
    if kwargs["setting"] == SETTINGS_NAME:
        view_settings.reload()


setting_changed.connect(reload_view_settings)
