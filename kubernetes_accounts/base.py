"""Data model and collaborator contracts for Kubernetes account credentials.

A *provider* is a registered Kubernetes cluster account: a name plus the
connection material (API host, bearer token, base64 CA bundle) needed to
reach the cluster. A *credential* is the external projection of a provider
that the orchestration system consumes, built fresh for every request.

This module has no Django dependency. The service layer supplies a
``ProviderStore`` (backed by the ORM) and a ``ClusterClientFactory``
(backed by the official Kubernetes client); tests supply fakes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Sequence


# ── Errors ────────────────────────────────────────────────────────────


class CredentialsError(Exception):
    """Base class for errors raised by this package."""


class ProviderStoreError(CredentialsError):
    """The provider store could not answer a query."""


class ProviderNotFound(ProviderStoreError):
    """No provider is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"provider {name!r} not found")
        self.name = name


class ClusterConnectionError(CredentialsError):
    """A cluster client could not be built from a provider's credentials."""


# ── Records ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Provider:
    """A registered cluster account as read from the provider store."""
    name: str
    host: str = ""
    bearer_token: str = ""
    ca_data: str = ""

    def __repr__(self) -> str:
        # keep tokens out of logs
        return f"Provider(name={self.name!r}, host={self.host!r})"


@dataclass
class Permissions:
    read: list[str] = field(default_factory=list)
    write: list[str] = field(default_factory=list)


@dataclass
class Credential:
    """
    The external-facing projection of a Provider.

    One Credential per provider per request. ``namespaces`` stays empty
    until namespace discovery merges results into it.
    """
    name: str
    account_type: str = ""
    environment: str = ""
    cloud_provider: str = "kubernetes"
    provider_version: str = "v2"
    skin: str = "v2"
    type: str = "kubernetes"
    primary_account: bool = False
    challenge_destructive_actions: bool = False
    required_group_membership: list[Any] = field(default_factory=list)
    permissions: Permissions = field(default_factory=Permissions)
    spinnaker_kind_map: Mapping[str, str] | None = None
    namespaces: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DiscoveryResult:
    """Namespaces discovered for one provider, in the order the API returned them."""
    provider_name: str
    namespaces: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiscoveryFailure:
    """
    Why discovery produced nothing for one provider.

    ``stage`` names the step that failed: ``provider`` (store re-fetch),
    ``ca_data`` (base64 decode), ``client`` (client construction) or
    ``list`` (namespace listing, including the deadline).
    """
    provider_name: str
    stage: str
    reason: str


# ── Collaborator protocols ────────────────────────────────────────────


class ProviderStore(Protocol):
    """Read access to registered providers and their access groups."""

    def list_providers(self) -> list[Provider]: ...

    def get_provider(self, name: str) -> Provider: ...

    def list_read_groups(self, name: str) -> list[str]: ...

    def list_write_groups(self, name: str) -> list[str]: ...


class ClusterClient(Protocol):
    def list_namespaces(self, timeout_seconds: int) -> Sequence[Any]: ...

    def close(self) -> None: ...


class ClusterClientFactory(Protocol):
    def connect(self, host: str, bearer_token: str, ca_bundle: bytes) -> ClusterClient: ...
