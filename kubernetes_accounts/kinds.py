"""Kubernetes kind to Spinnaker category table.

Spinnaker's manifest stages need this map on every account or several of
them go missing from the UI. Every account currently gets the same table.
"""
from types import MappingProxyType

UNCLASSIFIED = "unclassified"
CONFIGS = "configs"
SERVER_GROUPS = "serverGroups"
SERVER_GROUP_MANAGERS = "serverGroupManagers"
LOAD_BALANCERS = "loadBalancers"
SECURITY_GROUPS = "securityGroups"
INSTANCES = "instances"

CATEGORIES = frozenset({
    UNCLASSIFIED,
    CONFIGS,
    SERVER_GROUPS,
    SERVER_GROUP_MANAGERS,
    LOAD_BALANCERS,
    SECURITY_GROUPS,
    INSTANCES,
})

SPINNAKER_KIND_MAP = MappingProxyType({
    "apiService": UNCLASSIFIED,
    "clusterRole": UNCLASSIFIED,
    "clusterRoleBinding": UNCLASSIFIED,
    "configMap": CONFIGS,
    "controllerRevision": UNCLASSIFIED,
    "cronJob": SERVER_GROUPS,
    "customResourceDefinition": UNCLASSIFIED,
    "daemonSet": SERVER_GROUPS,
    "deployment": SERVER_GROUP_MANAGERS,
    "event": UNCLASSIFIED,
    "horizontalpodautoscaler": UNCLASSIFIED,
    "ingress": LOAD_BALANCERS,
    "job": SERVER_GROUPS,
    "limitRange": UNCLASSIFIED,
    "mutatingWebhookConfiguration": UNCLASSIFIED,
    "namespace": UNCLASSIFIED,
    "networkPolicy": SECURITY_GROUPS,
    "persistentVolume": CONFIGS,
    "persistentVolumeClaim": CONFIGS,
    "pod": INSTANCES,
    "podDisruptionBudget": UNCLASSIFIED,
    "podPreset": UNCLASSIFIED,
    "podSecurityPolicy": UNCLASSIFIED,
    "replicaSet": SERVER_GROUPS,
    "role": UNCLASSIFIED,
    "roleBinding": UNCLASSIFIED,
    "secret": CONFIGS,
    "service": LOAD_BALANCERS,
    "serviceAccount": UNCLASSIFIED,
    "statefulSet": SERVER_GROUPS,
    "storageClass": UNCLASSIFIED,
    "validatingWebhookConfiguration": UNCLASSIFIED,
})
