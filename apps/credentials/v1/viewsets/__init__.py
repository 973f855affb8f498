from .credential import CredentialViewSet

__all__ = [
    'CredentialViewSet',
]
