"""Router configuration for credentials v1 API."""
from rest_framework.routers import SimpleRouter

from apps.credentials.v1.viewsets import CredentialViewSet


class OptionalSlashRouter(SimpleRouter):
    """Routes that match with or without a trailing slash."""

    def __init__(self):
        super().__init__()
        self.trailing_slash = "/?"


router = OptionalSlashRouter()

router.register(r'credentials', CredentialViewSet, basename='credential')
