from django.http import HttpResponse
from django.urls import path


def dummy_view(request, **kwargs):
    return HttpResponse()


urlpatterns = [
    path("login/", dummy_view, name="login"),
    path("users/<int:pk>/", dummy_view, name="user-detail"),
]
