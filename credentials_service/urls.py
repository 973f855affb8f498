"""
URL configuration for the credentials service.

- /ping/, /health/       → apps.core
- /credentials[/...]     → apps.credentials
"""

from django.urls import include, path

urlpatterns = [
    path("", include("apps.core.urls")),
    path("", include("apps.credentials.urls")),
]
