import json
from io import StringIO
from unittest import mock

import pytest
import yaml
from django.core.management import call_command
from django.core.management.base import CommandError

from kubernetes_accounts import ProviderStoreError

from .fakes import FakeClientFactory, FakeCluster, FakeStore, make_provider


@pytest.fixture
def store():
    return FakeStore(
        [make_provider("alpha"), make_provider("bravo")],
        read_groups={"alpha": ["readers"]},
        write_groups={"alpha": ["deployers"]},
    )


@pytest.fixture
def factory():
    return FakeClientFactory({"https://alpha.example.com": FakeCluster(["default", "web"])})


@pytest.fixture(autouse=True)
def collaborators(store, factory):
    with mock.patch("apps.credentials.services.get_provider_store", return_value=store), \
            mock.patch("apps.credentials.services.get_cluster_client_factory", return_value=factory):
        yield


def _run(*args):
    out = StringIO()
    call_command("list_credentials", *args, stdout=out)
    return out.getvalue()


def test_json_output_without_expand(factory):
    data = json.loads(_run("--format=json"))
    assert [c["name"] for c in data] == ["alpha", "bravo"]
    assert "namespaces" not in data[0]
    assert factory.calls == []


def test_json_output_with_expand():
    data = json.loads(_run("--expand", "--format=json", "--timeout=2"))
    assert data[0]["namespaces"] == ["default", "web"]
    assert data[1]["namespaces"] == []
    assert data[0]["spinnakerKindMap"]["pod"] == "instances"


def test_yaml_output():
    data = yaml.safe_load(_run("--format=yml"))
    assert data[0]["permissions"] == {"READ": ["readers"], "WRITE": ["deployers"]}


def test_text_output():
    output = _run("--expand")
    assert "Kubernetes Accounts (2)" in output
    assert "Namespaces: default, web" in output
    assert "(none discovered)" in output


def test_empty_store(store):
    store.providers = []
    assert "No providers registered." in _run()


def test_store_error(store):
    with mock.patch.object(store, "list_providers", side_effect=ProviderStoreError("db down")):
        with pytest.raises(CommandError, match="db down"):
            _run()
