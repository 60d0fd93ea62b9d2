"""DNS operator configuration schemas.

Mirrors the dns.openshift.io/v1alpha1 ClusterDNS API consumed by the cluster
DNS operator.

Example:
    >>> from cluster_manifests.schemas.dnsoperator import ClusterDNS, ClusterDNSSpec
    >>> dns = ClusterDNS(
    ...     metadata={"name": "default"},
    ...     spec=ClusterDNSSpec(cluster_ip="172.30.0.10", cluster_domain="example.com"),
    ... )
    >>> dns.to_k8s_manifest()["spec"]
    {'clusterIP': '172.30.0.10', 'clusterDomain': 'example.com'}
"""

from __future__ import annotations

import ipaddress
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cluster_manifests.schemas.meta import K8sObject

GROUP = "dns.openshift.io"
VERSION = "v1alpha1"
API_VERSION = f"{GROUP}/{VERSION}"


class ClusterDNSSpec(BaseModel):
    """Desired cluster DNS service settings.

    Attributes:
        cluster_ip: Service IP the cluster DNS server listens on.
        cluster_domain: DNS domain served for cluster services.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    cluster_ip: str = Field(..., alias="clusterIP", description="Cluster DNS service IP")
    cluster_domain: str = Field(
        ..., min_length=1, alias="clusterDomain", description="Cluster DNS domain"
    )

    @field_validator("cluster_ip", mode="after")
    @classmethod
    def validate_cluster_ip(cls, v: str) -> str:
        try:
            ipaddress.ip_address(v)
        except ValueError as e:
            raise ValueError(f"Invalid cluster IP: {v}") from e
        return v


class ClusterDNS(K8sObject):
    """The cluster-scoped ClusterDNS custom resource."""

    api_version: Literal["dns.openshift.io/v1alpha1"] = Field(
        default=API_VERSION, alias="apiVersion"
    )
    kind: Literal["ClusterDNS"] = "ClusterDNS"
    spec: ClusterDNSSpec


__all__ = ["API_VERSION", "ClusterDNS", "ClusterDNSSpec"]
