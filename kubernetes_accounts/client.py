"""Cluster clients built from provider connection material.

``KubernetesClientFactory`` turns a host, bearer token and decoded CA
bundle into a client for one cluster using the official ``kubernetes``
package. The Kubernetes client only accepts the CA as a file path, so the
bundle is written to a private temporary file that lives as long as the
client.
"""
from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Mapping

from kubernetes import client

from .base import ClusterConnectionError

logger = logging.getLogger("kubernetes_accounts.client")


def object_name(obj: Any) -> str:
    """Return ``metadata.name`` of a Kubernetes object, model or dict shaped."""
    if isinstance(obj, Mapping):
        metadata = obj.get("metadata") or {}
        return metadata.get("name") or obj.get("name", "")
    metadata = getattr(obj, "metadata", None)
    if metadata is not None:
        return metadata.name
    return getattr(obj, "name", "")


class KubernetesClusterClient:
    """A CoreV1 client for one cluster."""

    def __init__(self, api_client: client.ApiClient, ca_file: str | None = None):
        self.api_client = api_client
        self.ca_file = ca_file

    def list_namespaces(self, timeout_seconds: int) -> list:
        # timeout_seconds bounds the server side, _request_timeout the socket
        result = client.CoreV1Api(self.api_client).list_namespace(
            timeout_seconds=timeout_seconds,
            _request_timeout=timeout_seconds,
        )
        return list(result.items or [])

    def close(self) -> None:
        try:
            self.api_client.close()
        finally:
            if self.ca_file:
                try:
                    os.unlink(self.ca_file)
                except FileNotFoundError:
                    pass
                self.ca_file = None


class KubernetesClientFactory:
    """Build ``KubernetesClusterClient`` instances from provider credentials."""

    def connect(self, host: str, bearer_token: str, ca_bundle: bytes) -> KubernetesClusterClient:
        if not host:
            raise ClusterConnectionError("provider has no API host configured")

        configuration = client.Configuration()
        configuration.host = host
        if bearer_token:
            configuration.api_key = {"authorization": f"Bearer {bearer_token}"}

        ca_file = None
        if ca_bundle:
            ca_file = _write_ca_file(ca_bundle)
            configuration.ssl_ca_cert = ca_file
        configuration.verify_ssl = True

        try:
            api_client = client.ApiClient(configuration)
        except Exception as exc:
            if ca_file:
                os.unlink(ca_file)
            raise ClusterConnectionError(f"error creating client for {host}: {exc}") from exc

        logger.debug("Created cluster client for %s", host)
        return KubernetesClusterClient(api_client, ca_file=ca_file)


def _write_ca_file(ca_bundle: bytes) -> str:
    try:
        fd, path = tempfile.mkstemp(prefix="provider-ca-", suffix=".crt")
        with os.fdopen(fd, "wb") as fh:
            fh.write(ca_bundle)
    except OSError as exc:
        raise ClusterConnectionError(f"error writing CA bundle: {exc}") from exc
    return path
