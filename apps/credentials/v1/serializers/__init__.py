from .credential import CredentialSerializer, PermissionsSerializer

__all__ = [
    'CredentialSerializer',
    'PermissionsSerializer',
]
