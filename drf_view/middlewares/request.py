from django.utils.deprecation import MiddlewareMixin

from drf_view.utils.local import local


class RequestProvider(MiddlewareMixin):
    """
    @summary: 记录当前请求，供未显式传入 request 的 View.handle() 使用
    """

    def process_request(self, request):
        local.current_request = request
        return None

    def process_response(self, request, response):
        if hasattr(local, "current_request"):
            del local.current_request
        return response
