"""Kubernetes Accounts — credential projection and namespace discovery.

This package turns registered Kubernetes cluster accounts ("providers")
into the credential documents a Spinnaker-style control plane consumes,
and can enrich them with each cluster's live namespaces.

It has no Django dependency. The credentials service supplies the
provider store and cluster client factory:

    from kubernetes_accounts import (
        KubernetesClientFactory, discover_namespaces, merge_namespaces,
        project_credential,
    )

    credentials = [
        project_credential(p.name, store.list_read_groups(p.name),
                           store.list_write_groups(p.name), expand=True)
        for p in store.list_providers()
    ]
    results = discover_namespaces([c.name for c in credentials], store,
                                  KubernetesClientFactory())
    merge_namespaces(credentials, results)
"""

from .base import (
    ClusterConnectionError,
    Credential,
    CredentialsError,
    DiscoveryFailure,
    DiscoveryResult,
    Permissions,
    Provider,
    ProviderNotFound,
    ProviderStoreError,
)
from .client import KubernetesClientFactory
from .discovery import NamespaceDiscovery, discover_namespaces
from .kinds import SPINNAKER_KIND_MAP
from .merge import merge_namespaces
from .projector import project_credential

__all__ = [
    "ClusterConnectionError",
    "Credential",
    "CredentialsError",
    "DiscoveryFailure",
    "DiscoveryResult",
    "KubernetesClientFactory",
    "NamespaceDiscovery",
    "Permissions",
    "Provider",
    "ProviderNotFound",
    "ProviderStoreError",
    "SPINNAKER_KIND_MAP",
    "discover_namespaces",
    "merge_namespaces",
    "project_credential",
]

__version__ = "0.1.0"
