"""Generation policy settings.

Holds the defaulting constants applied by the manifest generators. They are
policy for compatibility with the operators' expectations, so they live here
rather than inline in generator logic.

Example:
    >>> from cluster_manifests.settings import DEFAULT_SETTINGS, ManifestSettings
    >>> DEFAULT_SETTINGS.default_host_subnet_length
    9
    >>> custom = ManifestSettings(manifest_dir="openshift")
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cluster_manifests.schemas.networkoperator import SDNMode


class ManifestSettings(BaseModel):
    """Settings shared by all manifest generators.

    Attributes:
        manifest_dir: Directory (relative to the asset root) holding manifests.
        default_host_subnet_length: Host subnet length used when a cluster
            network entry is synthesized from the legacy pod CIDR.
        default_sdn_mode: Mode applied to the OpenshiftSDN plugin.
        network_config_name: metadata.name of the NetworkConfig object.
        dns_config_name: metadata.name of the ClusterDNS object.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    manifest_dir: str = Field(
        default="manifests",
        min_length=1,
        description="Directory for generated manifests",
    )
    default_host_subnet_length: int = Field(
        default=9,
        ge=0,
        le=128,
        description="Host subnet length for a cluster network synthesized from podCIDR",
    )
    default_sdn_mode: SDNMode = Field(
        default=SDNMode.POLICY,
        description="OpenshiftSDN mode applied by default",
    )
    network_config_name: str = Field(default="default", min_length=1)
    dns_config_name: str = Field(default="default", min_length=1)


DEFAULT_SETTINGS = ManifestSettings()


__all__ = ["DEFAULT_SETTINGS", "ManifestSettings"]
