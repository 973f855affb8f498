from django.urls import include, path

from .v1.router import router

urlpatterns = [
    path("", include(router.urls)),
]
