"""Fold discovered namespaces back into the credential list."""
from __future__ import annotations

import logging
from typing import Iterable

from .base import Credential, DiscoveryResult

logger = logging.getLogger("kubernetes_accounts.merge")


def _build_index(credentials: list[Credential]) -> tuple[dict[str, int], dict[str, int]]:
    exact: dict[str, int] = {}
    folded: dict[str, int] = {}
    for i, cred in enumerate(credentials):
        exact.setdefault(cred.name, i)
        folded.setdefault(cred.name.casefold(), i)
    return exact, folded


def merge_namespaces(
    credentials: list[Credential],
    results: Iterable[DiscoveryResult],
) -> list[Credential]:
    """
    Replace ``namespaces`` on the credential matching each result.

    Names match case-insensitively; an exact-case match wins when two
    credentials differ only by case. Each result lands on at most one
    credential. The list is updated in place and never reordered;
    credentials without a result keep their empty namespaces.
    """
    exact, folded = _build_index(credentials)

    for result in results:
        i = exact.get(result.provider_name)
        if i is None:
            i = folded.get(result.provider_name.casefold())
        if i is None:
            logger.debug("No credential matches discovered provider %s", result.provider_name)
            continue
        credentials[i].namespaces = list(result.namespaces)

    return credentials
