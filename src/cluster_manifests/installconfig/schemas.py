"""Install configuration schemas.

Only the sections read by the manifest generators are modelled. Other
top-level keys of install-config.yaml (platform, pullSecret, sshKey, ...) are
owned by other assets and ignored here.

Example:
    >>> from cluster_manifests.installconfig.schemas import InstallConfig
    >>> config = InstallConfig.model_validate({
    ...     "metadata": {"name": "demo"},
    ...     "baseDomain": "example.com",
    ...     "networking": {"podCIDR": "10.128.0.0/14"},
    ... })
    >>> config.networking.service_cidr
    '172.30.0.0/16'
"""

from __future__ import annotations

import ipaddress
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cluster_manifests.schemas.networkoperator import ClusterNetwork, NetworkType, validate_cidr

DEFAULT_SERVICE_CIDR = "172.30.0.0/16"


def _network_cidr(cidr: str) -> str:
    """Validate a CIDR and return it with host bits cleared."""
    return str(ipaddress.ip_network(validate_cidr(cidr), strict=False))


class InstallConfigMetadata(BaseModel):
    """Cluster identity from the install config metadata block."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = Field(default=None, description="Cluster name")


class NetworkingConfig(BaseModel):
    """Cluster networking parameters.

    Attributes:
        type: Default network plugin type.
        service_cidr: Service network CIDR.
        pod_cidr: Legacy single pod CIDR, superseded by cluster_networks.
        cluster_networks: Pod address blocks with per-node subnet sizes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type: NetworkType = Field(
        default=NetworkType.OPENSHIFT_SDN, description="Network plugin type"
    )
    service_cidr: str = Field(
        default=DEFAULT_SERVICE_CIDR, alias="serviceCIDR", description="Service network CIDR"
    )
    pod_cidr: str | None = Field(
        default=None, alias="podCIDR", description="Legacy pod network CIDR"
    )
    cluster_networks: list[ClusterNetwork] = Field(
        default_factory=list, alias="clusterNetworks", description="Pod address blocks"
    )

    @field_validator("service_cidr", mode="after")
    @classmethod
    def validate_service_cidr(cls, v: str) -> str:
        return _network_cidr(v)

    @field_validator("pod_cidr", mode="after")
    @classmethod
    def validate_pod_cidr(cls, v: str | None) -> str | None:
        if v is not None:
            return _network_cidr(v)
        return v

    @field_validator("cluster_networks", mode="after")
    @classmethod
    def validate_cluster_networks(cls, v: list[ClusterNetwork]) -> list[ClusterNetwork]:
        return [cn.model_copy(update={"cidr": _network_cidr(cn.cidr)}) for cn in v]

    @property
    def pod_cidr_specified(self) -> bool:
        """True if pod_cidr is set to something other than the unspecified address."""
        if self.pod_cidr is None:
            return False
        network = ipaddress.ip_network(self.pod_cidr, strict=False)
        return not network.network_address.is_unspecified


class InstallConfig(BaseModel):
    """The subset of the install configuration used for manifest generation."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    api_version: str | None = Field(default=None, alias="apiVersion")
    metadata: InstallConfigMetadata = Field(default_factory=InstallConfigMetadata)
    base_domain: str = Field(..., min_length=1, alias="baseDomain", description="Base DNS domain")
    networking: NetworkingConfig = Field(default_factory=NetworkingConfig)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Dump with install-config.yaml key names, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "DEFAULT_SERVICE_CIDR",
    "InstallConfig",
    "InstallConfigMetadata",
    "NetworkingConfig",
]
