"""Provider store backed by the Django ORM.

Bridges the ``kubernetes_accounts`` package (which has no Django
dependency) and the provider tables. Every database error is raised as
``ProviderStoreError`` so the view layer can treat store failures
uniformly; an unknown account name raises ``ProviderNotFound``.

Discovery workers call ``get_provider`` from their own threads and then
``close()``, which closes that thread's database connection.
"""
from __future__ import annotations

import logging
from functools import wraps

from django.db import DatabaseError, connection

from kubernetes_accounts import Provider, ProviderNotFound, ProviderStoreError

from apps.credentials.models import (
    KubernetesProvider,
    ProviderReadPermission,
    ProviderWritePermission,
)

logger = logging.getLogger("apps.credentials.store")


def _wrap_db_errors(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except DatabaseError as exc:
            logger.error("Provider store query %s failed: %s", fn.__name__, exc)
            raise ProviderStoreError(str(exc)) from exc
    return wrapper


def _to_provider(row: KubernetesProvider) -> Provider:
    return Provider(
        name=row.name,
        host=row.host,
        bearer_token=row.bearer_token,
        ca_data=row.ca_data,
    )


class DatabaseProviderStore:
    """Read-only access to Kubernetes providers and their access groups."""

    @_wrap_db_errors
    def list_providers(self) -> list[Provider]:
        return [_to_provider(row) for row in KubernetesProvider.objects.all()]

    @_wrap_db_errors
    def get_provider(self, name: str) -> Provider:
        try:
            row = KubernetesProvider.objects.get(name=name)
        except KubernetesProvider.DoesNotExist:
            raise ProviderNotFound(name)
        return _to_provider(row)

    @_wrap_db_errors
    def list_read_groups(self, name: str) -> list[str]:
        return list(
            ProviderReadPermission.objects.filter(provider_id=name).values_list("group", flat=True)
        )

    @_wrap_db_errors
    def list_write_groups(self, name: str) -> list[str]:
        return list(
            ProviderWritePermission.objects.filter(provider_id=name).values_list("group", flat=True)
        )

    def close(self) -> None:
        connection.close()
