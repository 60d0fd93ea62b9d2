"""Values derived from the install config networking section."""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING

from cluster_manifests.errors import InstallConfigError

if TYPE_CHECKING:
    from cluster_manifests.installconfig.schemas import InstallConfig

# Offset of the cluster DNS service IP inside the service network.
CLUSTER_DNS_HOST_INDEX = 10


def cluster_dns_ip(install_config: InstallConfig) -> str:
    """Return the cluster DNS service IP for an install config.

    The DNS service is pinned to the 10th address of the service network,
    counting the network address as 0.

    Args:
        install_config: Install config providing networking.service_cidr.

    Returns:
        IP address string (e.g. "172.30.0.10" for 172.30.0.0/16).

    Raises:
        InstallConfigError: If the service network is too small.

    Example:
        >>> cluster_dns_ip(InstallConfig(base_domain="example.com"))
        '172.30.0.10'
    """
    cidr = install_config.networking.service_cidr
    network = ipaddress.ip_network(cidr, strict=False)

    if network.num_addresses <= CLUSTER_DNS_HOST_INDEX:
        raise InstallConfigError(
            "Service network is too small to hold the cluster DNS IP",
            details={"service_cidr": cidr, "host_index": CLUSTER_DNS_HOST_INDEX},
        )

    return str(network.network_address + CLUSTER_DNS_HOST_INDEX)


__all__ = ["CLUSTER_DNS_HOST_INDEX", "cluster_dns_ip"]
