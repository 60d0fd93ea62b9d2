"""Cluster-level networking summary consumed by the cluster object generator.

Mirrors the cluster-API ClusterNetworkingConfig, which captures pod and
service ranges without knowing anything about the network plugin.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NetworkRanges(BaseModel):
    """A list of CIDR blocks."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    cidr_blocks: list[str] = Field(
        default_factory=list, alias="cidrBlocks", description="CIDR blocks"
    )


class ClusterNetworkingConfig(BaseModel):
    """Pod and service address ranges of a cluster.

    Attributes:
        services: Service network ranges.
        pods: Pod network ranges.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    services: NetworkRanges = Field(default_factory=NetworkRanges)
    pods: NetworkRanges = Field(default_factory=NetworkRanges)


__all__ = ["ClusterNetworkingConfig", "NetworkRanges"]
