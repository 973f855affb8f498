from .provider import KubernetesProvider, ProviderReadPermission, ProviderWritePermission

__all__ = [
    'KubernetesProvider',
    'ProviderReadPermission',
    'ProviderWritePermission',
]
