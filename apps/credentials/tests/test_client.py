import os

import pytest
from kubernetes.client import V1Namespace, V1ObjectMeta

from kubernetes_accounts import ClusterConnectionError, KubernetesClientFactory
from kubernetes_accounts.client import object_name


class TestKubernetesClientFactory:
    def test_connect_configures_host_token_and_ca(self):
        cluster = KubernetesClientFactory().connect("https://10.0.0.1:6443", "s3cr3t", b"CA BYTES")
        try:
            configuration = cluster.api_client.configuration
            assert configuration.host == "https://10.0.0.1:6443"
            assert configuration.api_key["authorization"] == "Bearer s3cr3t"
            assert configuration.ssl_ca_cert == cluster.ca_file
            with open(cluster.ca_file, "rb") as fh:
                assert fh.read() == b"CA BYTES"
        finally:
            ca_file = cluster.ca_file
            cluster.close()
        assert not os.path.exists(ca_file)
        assert cluster.ca_file is None

    def test_connect_without_ca_bundle(self):
        cluster = KubernetesClientFactory().connect("https://10.0.0.1:6443", "s3cr3t", b"")
        try:
            assert cluster.ca_file is None
        finally:
            cluster.close()

    def test_connect_requires_host(self):
        with pytest.raises(ClusterConnectionError):
            KubernetesClientFactory().connect("", "s3cr3t", b"CA BYTES")


def test_object_name_from_model():
    assert object_name(V1Namespace(metadata=V1ObjectMeta(name="default"))) == "default"


def test_object_name_from_dict():
    assert object_name({"metadata": {"name": "kube-system"}}) == "kube-system"
    assert object_name({"name": "flat"}) == "flat"
