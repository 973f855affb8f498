"""Concurrent namespace discovery across providers.

For a batch of providers, every provider gets its own worker thread which:

1. re-fetches the provider from the store by name (the listing that
   produced the batch may already be stale),
2. decodes the base64 CA bundle,
3. builds a cluster client,
4. lists namespaces under a hard per-call deadline,
5. emits a ``DiscoveryResult`` with the namespace names in API order.

A failure at any step ends that provider's discovery with a
``DiscoveryFailure``, which is logged and never merged. Siblings are not
affected. The batch finishes only when every worker has finished (a full
join); there is no batch-level timeout, each provider is bounded by its
own deadline, so a batch costs about as much as its slowest provider.

Usage::

    results = discover_namespaces(names, store, KubernetesClientFactory())
    merge_namespaces(credentials, results)
"""
from __future__ import annotations

import base64
import binascii
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor, wait
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Sequence, Union

from .base import (
    ClusterClientFactory,
    DiscoveryFailure,
    DiscoveryResult,
    ProviderStore,
)
from .client import object_name

logger = logging.getLogger("kubernetes_accounts.discovery")

DEFAULT_TIMEOUT = 5
"""Seconds allowed for one provider's namespace listing."""

Outcome = Union[DiscoveryResult, DiscoveryFailure]


def call_with_deadline(fn: Callable, timeout: float):
    """
    Run ``fn()`` on its own thread and wait at most ``timeout`` seconds.

    Raises ``concurrent.futures.TimeoutError`` when the deadline passes.
    The thread is abandoned rather than joined, so a call that ignores its
    own timeout cannot hold up the caller.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="namespace-list")
    try:
        return executor.submit(fn).result(timeout=timeout)
    finally:
        executor.shutdown(wait=False)


class NamespaceDiscovery:
    """
    One fan-out over a batch of providers.

    Args:
        store: Provider store used to re-fetch each provider. If it has a
            ``close()`` method it is called at the end of every worker so
            per-thread resources (database connections) are released.
        client_factory: Builds a cluster client from connection material.
        timeout: Per-provider deadline for the namespace listing, seconds.
        max_workers: Thread cap. ``None`` means one thread per provider.
    """

    def __init__(
        self,
        store: ProviderStore,
        client_factory: ClusterClientFactory,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int | None = None,
    ):
        self.store = store
        self.client_factory = client_factory
        self.timeout = timeout
        self.max_workers = max_workers

    def run(self, provider_names: Sequence[str]) -> list[Outcome]:
        """Discover all providers concurrently and return every outcome, in input order."""
        if not provider_names:
            return []

        started = time.monotonic()
        workers = self.max_workers or len(provider_names)
        executor = ThreadPoolExecutor(
            max_workers=min(workers, len(provider_names)),
            thread_name_prefix="namespace-discovery",
        )
        try:
            futures = [executor.submit(self._discover, name) for name in provider_names]
            wait(futures)
        finally:
            executor.shutdown(wait=True)

        outcomes = [f.result() for f in futures]
        succeeded = sum(1 for o in outcomes if isinstance(o, DiscoveryResult))
        logger.info(
            "Namespace discovery finished: %d/%d providers in %.2fs",
            succeeded, len(outcomes), time.monotonic() - started,
        )
        return outcomes

    # -- Worker ------------------------------------------------------------

    def _discover(self, name: str) -> Outcome:
        try:
            return self._discover_provider(name)
        except Exception as exc:
            # never let one provider take the batch down
            logger.exception("/credentials unexpected error discovering namespaces for %s", name)
            return DiscoveryFailure(name, "list", str(exc))
        finally:
            close = getattr(self.store, "close", None)
            if close is not None:
                try:
                    close()
                except Exception:
                    logger.debug("Error releasing store resources for %s", name, exc_info=True)

    def _discover_provider(self, name: str) -> Outcome:
        try:
            provider = self.store.get_provider(name)
        except Exception as exc:
            return self._fail(name, "provider", "error getting provider", exc)

        try:
            ca_bundle = base64.b64decode(provider.ca_data, validate=True)
        except (binascii.Error, ValueError) as exc:
            return self._fail(name, "ca_data", "error decoding provider ca data", exc)

        try:
            cluster = self.client_factory.connect(provider.host, provider.bearer_token, ca_bundle)
        except Exception as exc:
            return self._fail(name, "client", "error creating dynamic account", exc)

        timeout = self.timeout
        try:
            items = call_with_deadline(lambda: cluster.list_namespaces(math.ceil(timeout)), timeout)
        except FutureTimeoutError:
            return self._fail(
                name, "list", "error listing using kubernetes account",
                f"deadline of {timeout}s exceeded",
            )
        except Exception as exc:
            return self._fail(name, "list", "error listing using kubernetes account", exc)
        finally:
            try:
                cluster.close()
            except Exception:
                logger.debug("Error closing cluster client for %s", name, exc_info=True)

        namespaces = tuple(object_name(item) for item in items)
        logger.debug("Discovered %d namespaces for %s", len(namespaces), name)
        return DiscoveryResult(name, namespaces)

    @staticmethod
    def _fail(name: str, stage: str, message: str, exc) -> DiscoveryFailure:
        logger.warning("/credentials %s for %s: %s", message, name, exc)
        return DiscoveryFailure(name, stage, str(exc))


def discover_namespaces(
    provider_names: Sequence[str],
    store: ProviderStore,
    client_factory: ClusterClientFactory,
    timeout: float = DEFAULT_TIMEOUT,
    max_workers: int | None = None,
) -> list[DiscoveryResult]:
    """Run a fan-out and keep only the successful results."""
    outcomes = NamespaceDiscovery(store, client_factory, timeout, max_workers).run(provider_names)
    return [o for o in outcomes if isinstance(o, DiscoveryResult)]
