"""Typed operator configuration schemas.

- networkoperator: NetworkConfig (networkoperator.openshift.io/v1)
- dnsoperator: ClusterDNS (dns.openshift.io/v1alpha1)
- cluster: ClusterNetworkingConfig summary of pod/service ranges
- meta: ObjectMeta and the K8sObject manifest round-trip base
"""

from __future__ import annotations

from cluster_manifests.schemas.cluster import ClusterNetworkingConfig, NetworkRanges
from cluster_manifests.schemas.dnsoperator import ClusterDNS, ClusterDNSSpec
from cluster_manifests.schemas.meta import K8sObject, ObjectMeta
from cluster_manifests.schemas.networkoperator import (
    ClusterNetwork,
    DefaultNetworkDefinition,
    NetworkConfig,
    NetworkConfigSpec,
    NetworkType,
    OpenshiftSDNConfig,
    SDNMode,
)

__all__ = [
    # Network operator
    "ClusterNetwork",
    "DefaultNetworkDefinition",
    "NetworkConfig",
    "NetworkConfigSpec",
    "NetworkType",
    "OpenshiftSDNConfig",
    "SDNMode",
    # DNS operator
    "ClusterDNS",
    "ClusterDNSSpec",
    # Cluster summary
    "ClusterNetworkingConfig",
    "NetworkRanges",
    # Metadata
    "K8sObject",
    "ObjectMeta",
]
