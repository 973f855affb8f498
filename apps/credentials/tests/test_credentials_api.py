from unittest import mock

from django.test import TestCase, TransactionTestCase
from rest_framework import status
from rest_framework.test import APIClient

from kubernetes_accounts import SPINNAKER_KIND_MAP, ProviderStoreError

from apps.credentials.models import (
    KubernetesProvider,
    ProviderReadPermission,
    ProviderWritePermission,
)
from apps.credentials.store import DatabaseProviderStore

from .fakes import CA_DATA, FakeClientFactory, FakeCluster


def _create_providers(*names):
    providers = []
    for name in names:
        provider = KubernetesProvider.objects.create(
            name=name, host=f"https://{name}.example.com", ca_data=CA_DATA, bearer_token=f"token-{name}",
        )
        ProviderReadPermission.objects.create(provider=provider, group=f"{name}-readers")
        ProviderWritePermission.objects.create(provider=provider, group=f"{name}-writers")
        providers.append(provider)
    return providers


class TestListCredentials(TestCase):
    def setUp(self):
        self.client = APIClient()
        _create_providers("alpha", "bravo", "charlie")
        patcher = mock.patch(
            "apps.credentials.services.get_cluster_client_factory",
            return_value=FakeClientFactory(),
        )
        self.get_factory = patcher.start()
        self.addCleanup(patcher.stop)

    def test_lists_one_credential_per_provider_in_order(self):
        response = self.client.get("/credentials")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()
        self.assertEqual([c["name"] for c in data], ["alpha", "bravo", "charlie"])

    def test_credential_shape(self):
        data = self.client.get("/credentials").json()
        self.assertEqual(data[0], {
            "accountType": "alpha",
            "challengeDestructiveActions": False,
            "cloudProvider": "kubernetes",
            "environment": "alpha",
            "name": "alpha",
            "permissions": {"READ": ["alpha-readers"], "WRITE": ["alpha-writers"]},
            "primaryAccount": False,
            "providerVersion": "v2",
            "requiredGroupMembership": [],
            "skin": "v2",
            "type": "kubernetes",
        })

    def test_no_discovery_without_expand(self):
        for query in ({}, {"expand": "false"}, {"expand": "TRUE"}, {"expand": "1"}):
            data = self.client.get("/credentials", query).json()
            for cred in data:
                self.assertNotIn("namespaces", cred)
                self.assertNotIn("spinnakerKindMap", cred)
        self.get_factory.assert_not_called()

    def test_trailing_slash(self):
        response = self.client.get("/credentials/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.json()), 3)

    def test_store_failure_is_a_server_error(self):
        with mock.patch.object(
            DatabaseProviderStore, "list_providers", side_effect=ProviderStoreError("connection refused"),
        ):
            response = self.client.get("/credentials", {"expand": "true"})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        body = response.json()
        self.assertEqual(body["error"], "Internal Server Error")
        self.assertEqual(body["message"], "connection refused")
        self.assertEqual(body["status"], 500)
        self.assertIsInstance(body["timestamp"], int)

    def test_access_group_failure_aborts_whole_request(self):
        with mock.patch.object(
            DatabaseProviderStore, "list_write_groups", side_effect=ProviderStoreError("permissions unavailable"),
        ):
            response = self.client.get("/credentials")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json()["message"], "permissions unavailable")

    def test_no_providers(self):
        KubernetesProvider.objects.all().delete()
        response = self.client.get("/credentials", {"expand": "true"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])


class TestGetAccountCredentials(TestCase):
    def setUp(self):
        self.client = APIClient()
        _create_providers("alpha", "bravo")

    def test_returns_credential_with_kind_map(self):
        response = self.client.get("/credentials/bravo")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()
        self.assertEqual(data["name"], "bravo")
        self.assertEqual(data["permissions"], {"READ": ["bravo-readers"], "WRITE": ["bravo-writers"]})
        self.assertEqual(data["spinnakerKindMap"], dict(SPINNAKER_KIND_MAP))
        self.assertNotIn("namespaces", data)

    def test_trailing_slash(self):
        response = self.client.get("/credentials/bravo/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_unknown_account_is_a_server_error(self):
        response = self.client.get("/credentials/zulu")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json()["message"], "provider 'zulu' not found")


class TestExpandedCredentials(TransactionTestCase):
    """Discovery workers read providers from their own threads, so data must be committed."""

    def setUp(self):
        self.client = APIClient()
        _create_providers("alpha", "bravo", "charlie")
        self.factory = FakeClientFactory({
            "https://alpha.example.com": FakeCluster(["default", "kube-system"]),
            "https://bravo.example.com": ConnectionError("x509: certificate signed by unknown authority"),
            "https://charlie.example.com": FakeCluster(["team-c"]),
        })
        patcher = mock.patch(
            "apps.credentials.services.get_cluster_client_factory", return_value=self.factory,
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_namespaces_merged_and_failures_left_empty(self):
        response = self.client.get("/credentials", {"expand": "true"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()

        self.assertEqual([c["name"] for c in data], ["alpha", "bravo", "charlie"])
        self.assertEqual(data[0]["namespaces"], ["default", "kube-system"])
        self.assertEqual(data[1]["namespaces"], [])
        self.assertEqual(data[2]["namespaces"], ["team-c"])
        for cred in data:
            self.assertEqual(cred["spinnakerKindMap"], dict(SPINNAKER_KIND_MAP))
        self.assertEqual(len(self.factory.calls), 3)

    def test_bearer_tokens_come_from_the_store(self):
        self.client.get("/credentials", {"expand": "true"})
        tokens = sorted(token for _, token, _ in self.factory.calls)
        self.assertEqual(tokens, ["token-alpha", "token-bravo", "token-charlie"])

    def test_single_account_never_has_namespaces(self):
        response = self.client.get("/credentials/alpha")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("namespaces", response.json())
        self.assertEqual(self.factory.calls, [])
