"""Manifest generators for the cluster networking and DNS operators.

Example:
    >>> from cluster_manifests.manifests import ClusterDNSOperator, Networking
"""

from __future__ import annotations

from cluster_manifests.manifests.dns import ClusterDNSOperator
from cluster_manifests.manifests.network import NETWORK_CONFIG_CRD, Networking

__all__ = [
    "ClusterDNSOperator",
    "NETWORK_CONFIG_CRD",
    "Networking",
]
