from kubernetes_accounts import DiscoveryResult, merge_namespaces, project_credential


def _credentials(*names):
    return [project_credential(name, [], [], expand=True) for name in names]


def test_merges_by_name_and_keeps_order():
    creds = _credentials("alpha", "bravo", "charlie")
    merged = merge_namespaces(creds, [
        DiscoveryResult("charlie", ("kube-system", "default")),
        DiscoveryResult("alpha", ("default",)),
    ])
    assert merged is creds
    assert [c.name for c in merged] == ["alpha", "bravo", "charlie"]
    assert merged[0].namespaces == ["default"]
    assert merged[1].namespaces == []
    assert merged[2].namespaces == ["kube-system", "default"]


def test_case_insensitive_match():
    creds = _credentials("mycluster")
    merge_namespaces(creds, [DiscoveryResult("MyCluster", ("team-a",))])
    assert creds[0].namespaces == ["team-a"]


def test_exact_case_preferred_on_collision():
    creds = _credentials("Prod", "prod")
    merge_namespaces(creds, [
        DiscoveryResult("prod", ("lower",)),
        DiscoveryResult("Prod", ("upper",)),
    ])
    assert creds[0].namespaces == ["upper"]
    assert creds[1].namespaces == ["lower"]


def test_unmatched_result_is_ignored():
    creds = _credentials("alpha")
    merge_namespaces(creds, [DiscoveryResult("ghost", ("default",))])
    assert creds[0].namespaces == []


def test_namespace_order_is_preserved():
    creds = _credentials("alpha")
    merge_namespaces(creds, [DiscoveryResult("alpha", ("zeta", "alpha", "mu"))])
    assert creds[0].namespaces == ["zeta", "alpha", "mu"]
