from rest_framework.settings import api_settings

from drf_view.exceptions import InvalidInput
from drf_view.settings import view_settings
from drf_view.utils.local import local


def get_request(peaceful=False):
    if hasattr(local, "current_request"):
        return local.current_request
    elif peaceful:
        return None

    raise InvalidInput(message="get_request: current thread hasn't request.", field="request")


def get_request_format(request, default: str | None = None) -> str:
    """
    获取请求声明的格式

    优先级：
    1. request.format 属性
    2. URL 中的 format 参数（format_suffix_patterns）
    3. 查询参数（REST_FRAMEWORK['URL_FORMAT_OVERRIDE']，默认 ?format=）
    4. default，未提供时取 DRF_VIEW['DEFAULT_FORMAT']
    """
    request_format = getattr(request, "format", None)
    if request_format:
        return request_format

    resolver_match = getattr(request, "resolver_match", None)
    if resolver_match is not None and resolver_match.kwargs.get("format"):
        return resolver_match.kwargs["format"]

    override = api_settings.URL_FORMAT_OVERRIDE
    query_params = getattr(request, "GET", None)
    if override and query_params is not None and query_params.get(override):
        return query_params[override]

    return default or view_settings.DEFAULT_FORMAT
