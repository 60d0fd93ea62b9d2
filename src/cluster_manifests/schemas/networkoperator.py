"""Network operator configuration schemas.

Mirrors the networkoperator.openshift.io/v1 NetworkConfig API consumed by the
cluster network operator. These types are defined upstream; field names and
enum values here must stay wire-compatible with that API.

Example:
    >>> from cluster_manifests.schemas.networkoperator import (
    ...     ClusterNetwork, DefaultNetworkDefinition, NetworkConfig,
    ...     NetworkConfigSpec, NetworkType,
    ... )
    >>> config = NetworkConfig(
    ...     metadata={"name": "default"},
    ...     spec=NetworkConfigSpec(
    ...         service_network="172.30.0.0/16",
    ...         cluster_networks=[ClusterNetwork(cidr="10.128.0.0/14", host_subnet_length=9)],
    ...         default_network=DefaultNetworkDefinition(type=NetworkType.OPENSHIFT_SDN),
    ...     ),
    ... )
    >>> config.to_k8s_manifest()["spec"]["clusterNetworks"]
    [{'cidr': '10.128.0.0/14', 'hostSubnetLength': 9}]
"""

from __future__ import annotations

import ipaddress
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cluster_manifests.schemas.meta import K8sObject

GROUP = "networkoperator.openshift.io"
VERSION = "v1"
API_VERSION = f"{GROUP}/{VERSION}"


def validate_cidr(cidr: str) -> str:
    """Validate CIDR notation using the ipaddress module.

    Only syntax is checked; host bits are tolerated.

    Raises:
        ValueError: If the CIDR does not parse as an IPv4 or IPv6 network.
    """
    try:
        ipaddress.ip_network(cidr, strict=False)
    except ValueError as e:
        raise ValueError(f"Invalid CIDR: {cidr}") from e
    return cidr


class NetworkType(str, Enum):
    """Default network plugin types understood by the network operator."""

    OPENSHIFT_SDN = "OpenshiftSDN"
    OVN_KUBERNETES = "OVNKubernetes"
    CALICO = "Calico"
    KURYR = "Kuryr"
    RAW = "Raw"


class SDNMode(str, Enum):
    """Isolation modes for the OpenShift SDN plugin."""

    SUBNET = "Subnet"
    MULTITENANT = "Multitenant"
    POLICY = "Networkpolicy"


class ClusterNetwork(BaseModel):
    """A pod address block and the per-node subnet size carved from it.

    Attributes:
        cidr: Pod network CIDR.
        host_subnet_length: Number of host bits allocated to each node.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    cidr: str = Field(..., description="Pod network CIDR")
    host_subnet_length: int = Field(
        ...,
        ge=0,
        le=128,
        alias="hostSubnetLength",
        description="Host bits per node subnet",
    )

    @field_validator("cidr", mode="after")
    @classmethod
    def check_cidr(cls, v: str) -> str:
        return validate_cidr(v)


class OpenshiftSDNConfig(BaseModel):
    """OpenShift SDN plugin settings.

    Only mode is defaulted by the installer; the operator fills in the rest.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    mode: SDNMode = Field(..., description="SDN isolation mode")
    vxlan_port: int | None = Field(
        default=None, ge=1, le=65535, alias="vxlanPort", description="VXLAN UDP port"
    )
    mtu: int | None = Field(default=None, ge=1, description="Pod interface MTU")
    use_external_openvswitch: bool | None = Field(
        default=None,
        alias="useExternalOpenvswitch",
        description="Use an externally managed Open vSwitch",
    )


class DefaultNetworkDefinition(BaseModel):
    """The default (pod) network plugin and its plugin-specific settings."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type: NetworkType = Field(..., description="Network plugin type")
    openshift_sdn_config: OpenshiftSDNConfig | None = Field(
        default=None,
        alias="openshiftSDNConfig",
        description="Settings for the OpenshiftSDN plugin",
    )
    other_config: dict[str, str] | None = Field(
        default=None,
        alias="otherConfig",
        description="Opaque settings for other plugins",
    )


class NetworkConfigSpec(BaseModel):
    """Desired cluster network configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    service_network: str = Field(..., alias="serviceNetwork", description="Service CIDR")
    cluster_networks: list[ClusterNetwork] = Field(
        ..., alias="clusterNetworks", description="Pod address blocks"
    )
    default_network: DefaultNetworkDefinition = Field(
        ..., alias="defaultNetwork", description="Default network plugin"
    )

    @field_validator("service_network", mode="after")
    @classmethod
    def validate_service_network(cls, v: str) -> str:
        return validate_cidr(v)


class NetworkConfig(K8sObject):
    """The cluster-scoped NetworkConfig custom resource."""

    api_version: Literal["networkoperator.openshift.io/v1"] = Field(
        default=API_VERSION, alias="apiVersion"
    )
    kind: Literal["NetworkConfig"] = "NetworkConfig"
    spec: NetworkConfigSpec


__all__ = [
    "API_VERSION",
    "ClusterNetwork",
    "DefaultNetworkDefinition",
    "NetworkConfig",
    "NetworkConfigSpec",
    "NetworkType",
    "OpenshiftSDNConfig",
    "SDNMode",
    "validate_cidr",
]
