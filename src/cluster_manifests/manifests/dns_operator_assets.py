"""Static manifests that install the cluster DNS operator.

The generator treats this bundle as opaque content. Names carry a numeric
prefix so that sorted order is also apply order.
"""

from __future__ import annotations

from typing import Any

from cluster_manifests.serialization import to_yaml

OPERATOR_NAMESPACE = "openshift-cluster-dns-operator"
OPERATOR_NAME = "cluster-dns-operator"
OPERATOR_IMAGE = "quay.io/openshift/origin-cluster-dns-operator:latest"
CORE_DNS_IMAGE = "quay.io/openshift/origin-coredns:latest"

_LABELS = {"app.kubernetes.io/name": OPERATOR_NAME}


def _custom_resource_definition() -> dict[str, Any]:
    return {
        "apiVersion": "apiextensions.k8s.io/v1beta1",
        "kind": "CustomResourceDefinition",
        "metadata": {"name": "clusterdnses.dns.openshift.io"},
        "spec": {
            "group": "dns.openshift.io",
            "names": {
                "kind": "ClusterDNS",
                "listKind": "ClusterDNSList",
                "plural": "clusterdnses",
                "singular": "clusterdns",
            },
            "scope": "Cluster",
            "versions": [{"name": "v1alpha1", "served": True, "storage": True}],
        },
    }


def _namespace() -> dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "Namespace",
        "metadata": {
            "name": OPERATOR_NAMESPACE,
            "labels": {"openshift.io/run-level": "1"},
        },
    }


def _service_account() -> dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "ServiceAccount",
        "metadata": {"name": OPERATOR_NAME, "namespace": OPERATOR_NAMESPACE},
    }


def _cluster_role() -> dict[str, Any]:
    return {
        "apiVersion": "rbac.authorization.k8s.io/v1",
        "kind": "ClusterRole",
        "metadata": {"name": OPERATOR_NAME},
        "rules": [
            {
                "apiGroups": ["dns.openshift.io"],
                "resources": ["clusterdnses", "clusterdnses/status"],
                "verbs": ["*"],
            },
            {
                "apiGroups": [""],
                "resources": [
                    "configmaps",
                    "endpoints",
                    "namespaces",
                    "pods",
                    "serviceaccounts",
                    "services",
                ],
                "verbs": ["*"],
            },
            {
                "apiGroups": ["apps"],
                "resources": ["daemonsets"],
                "verbs": ["*"],
            },
            {
                "apiGroups": ["rbac.authorization.k8s.io"],
                "resources": ["clusterroles", "clusterrolebindings"],
                "verbs": ["*"],
            },
        ],
    }


def _cluster_role_binding() -> dict[str, Any]:
    return {
        "apiVersion": "rbac.authorization.k8s.io/v1",
        "kind": "ClusterRoleBinding",
        "metadata": {"name": OPERATOR_NAME},
        "roleRef": {
            "apiGroup": "rbac.authorization.k8s.io",
            "kind": "ClusterRole",
            "name": OPERATOR_NAME,
        },
        "subjects": [
            {
                "kind": "ServiceAccount",
                "name": OPERATOR_NAME,
                "namespace": OPERATOR_NAMESPACE,
            }
        ],
    }


def _deployment(operator_image: str, core_dns_image: str) -> dict[str, Any]:
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": OPERATOR_NAME, "namespace": OPERATOR_NAMESPACE},
        "spec": {
            "replicas": 1,
            "selector": {"matchLabels": dict(_LABELS)},
            "template": {
                "metadata": {"labels": dict(_LABELS)},
                "spec": {
                    "serviceAccountName": OPERATOR_NAME,
                    "containers": [
                        {
                            "name": OPERATOR_NAME,
                            "image": operator_image,
                            "imagePullPolicy": "IfNotPresent",
                            "command": [OPERATOR_NAME],
                            "env": [
                                {"name": "IMAGE", "value": core_dns_image},
                                {
                                    "name": "WATCH_NAMESPACE",
                                    "valueFrom": {
                                        "fieldRef": {"fieldPath": "metadata.namespace"}
                                    },
                                },
                            ],
                        }
                    ],
                    "nodeSelector": {"node-role.kubernetes.io/master": ""},
                    "tolerations": [{"operator": "Exists"}],
                },
            },
        },
    }


def operator_asset_content(
    operator_image: str = OPERATOR_IMAGE,
    core_dns_image: str = CORE_DNS_IMAGE,
) -> dict[str, bytes]:
    """Return the DNS operator install manifests keyed by file name.

    Args:
        operator_image: Image for the operator deployment.
        core_dns_image: CoreDNS image the operator rolls out.

    Returns:
        Mapping of file name to YAML content.
    """
    return {
        "00-custom-resource-definition.yaml": to_yaml(_custom_resource_definition()),
        "01-namespace.yaml": to_yaml(_namespace()),
        "02-service-account.yaml": to_yaml(_service_account()),
        "03-cluster-role.yaml": to_yaml(_cluster_role()),
        "04-cluster-role-binding.yaml": to_yaml(_cluster_role_binding()),
        "05-deployment.yaml": to_yaml(_deployment(operator_image, core_dns_image)),
    }


__all__ = [
    "CORE_DNS_IMAGE",
    "OPERATOR_IMAGE",
    "OPERATOR_NAME",
    "OPERATOR_NAMESPACE",
    "operator_asset_content",
]
