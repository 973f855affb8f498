"""
Credentials app settings.

These are loaded by the dynaconf framework after apps/settings/defaults.py.
They can be overridden by environment variables prefixed with
CREDENTIALS_SERVICE_.

Example overrides:
    CREDENTIALS_SERVICE_CREDENTIALS_DISCOVERY_TIMEOUT=10
    CREDENTIALS_SERVICE_CREDENTIALS_DISCOVERY_MAX_WORKERS=16
"""

# Namespace discovery (used by apps/credentials/services.py)
CREDENTIALS_DISCOVERY_TIMEOUT = 5  # seconds, per provider namespace listing
CREDENTIALS_DISCOVERY_MAX_WORKERS = None  # None: one thread per provider

# Collaborators, as dotted paths to zero-argument callables
CREDENTIALS_PROVIDER_STORE = "apps.credentials.store.DatabaseProviderStore"
CREDENTIALS_CLUSTER_CLIENT_FACTORY = "kubernetes_accounts.client.KubernetesClientFactory"
