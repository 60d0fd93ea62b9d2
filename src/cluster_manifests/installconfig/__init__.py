"""Install configuration input for manifest generation.

Example:
    >>> from cluster_manifests.installconfig import InstallConfigAsset, load_install_config
    >>> asset = InstallConfigAsset(load_install_config(Path("install-config.yaml")))
"""

from __future__ import annotations

from cluster_manifests.installconfig.asset import (
    INSTALL_CONFIG_FILENAME,
    InstallConfigAsset,
    load_install_config,
    parse_install_config,
)
from cluster_manifests.installconfig.network import cluster_dns_ip
from cluster_manifests.installconfig.schemas import (
    InstallConfig,
    InstallConfigMetadata,
    NetworkingConfig,
)

__all__ = [
    "INSTALL_CONFIG_FILENAME",
    "InstallConfig",
    "InstallConfigAsset",
    "InstallConfigMetadata",
    "NetworkingConfig",
    "cluster_dns_ip",
    "load_install_config",
    "parse_install_config",
]
