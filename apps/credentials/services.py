"""Credential assembly for the credentials endpoints.

``list_credentials`` backs ``GET /credentials`` and ``get_credential``
backs ``GET /credentials/{account}``. Store errors propagate as
``ProviderStoreError``; namespace discovery failures never do.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from kubernetes_accounts import (
    Credential,
    discover_namespaces,
    merge_namespaces,
    project_credential,
)

logger = logging.getLogger("apps.credentials.services")


def get_provider_store():
    return import_string(settings.CREDENTIALS_PROVIDER_STORE)()


def get_cluster_client_factory():
    return import_string(settings.CREDENTIALS_CLUSTER_CLIENT_FACTORY)()


def list_credentials(store, client_factory=None, expand: bool = False, timeout=None) -> list[Credential]:
    """
    Project every registered provider and, when expanding, discover namespaces.

    Access-group lookups are all-or-nothing: any store failure aborts the
    whole listing. Namespace discovery is best-effort; a provider whose
    discovery fails keeps an empty namespace list.
    """
    providers = store.list_providers()

    credentials = [
        project_credential(
            provider.name,
            store.list_read_groups(provider.name),
            store.list_write_groups(provider.name),
            expand=expand,
        )
        for provider in providers
    ]

    # Only list namespaces when expanding. Callers poll the expanded
    # listing, so every expanded request fans out to every cluster.
    if expand and credentials:
        if client_factory is None:
            client_factory = get_cluster_client_factory()
        results = discover_namespaces(
            [provider.name for provider in providers],
            store,
            client_factory,
            timeout=timeout or settings.CREDENTIALS_DISCOVERY_TIMEOUT,
            max_workers=settings.CREDENTIALS_DISCOVERY_MAX_WORKERS,
        )
        merge_namespaces(credentials, results)

    return credentials


def get_credential(store, account: str) -> Credential:
    """Project a single provider with the kind map attached. Namespaces are not discovered."""
    provider = store.get_provider(account)
    return project_credential(
        provider.name,
        store.list_read_groups(provider.name),
        store.list_write_groups(provider.name),
        expand=True,
    )
